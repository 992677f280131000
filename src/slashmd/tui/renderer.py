"""Rich console shared by the CLI and the REPL."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

console = Console()


def render_prompt(prompt: str, title: str | None = None) -> None:
    """Show the prompt text that would be handed to the model."""
    console.print(Panel(Text(prompt), title=title, title_align="left", border_style="dim"))
