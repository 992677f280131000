"""CommandHandler: dispatch slash commands to built-in and custom handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.markup import escape

from .custom import TRIGGER, discover_custom_commands, expand_custom_command

if TYPE_CHECKING:
    from slashmd.core.config import Config

COMMANDS = {
    "/help": "Show available commands",
    "/list": "List custom commands",
    "/quit": "Exit",
}


@dataclass
class CommandResult:
    """A custom command expanded into the prompt to send."""

    prompt: str
    name: str


class CommandHandler:
    """Handle slash commands (built-in + custom from .codex/commands/*.md)."""

    def __init__(self, config: Config):
        self.config = config

    @property
    def custom_commands(self) -> list[str]:
        return discover_custom_commands(self.config.cwd, self.config.home)

    def is_command(self, text: str) -> bool:
        return text.strip().startswith(TRIGGER)

    def handle(self, text: str) -> str | CommandResult | None:
        """Return built-in output, an expanded CommandResult, or None.

        None means *text* should be sent as an ordinary prompt.
        """
        text = text.strip()
        if not self.is_command(text):
            return None

        cmd = text.split(maxsplit=1)[0].lower()

        if cmd == "/help":
            lines = [""]
            for c, desc in COMMANDS.items():
                lines.append(f"  [bold]{c:<12}[/bold] [dim]{desc}[/dim]")
            lines.extend(self._custom_lines())
            lines.append("")
            return "\n".join(lines)

        elif cmd == "/list":
            lines = self._custom_lines()
            if not lines:
                return "[dim]no custom commands in .codex/commands[/dim]"
            return "\n".join(["", *lines, ""])

        elif cmd == "/quit":
            return "quit"

        prompt = expand_custom_command(text, self.config.cwd, self.config.home)
        if prompt is None:
            return None
        return CommandResult(prompt=prompt, name=text.partition(" ")[0][len(TRIGGER) :])

    def _custom_lines(self) -> list[str]:
        lines = []
        for name in self.custom_commands:
            scope = name.split(":", 1)[0]
            lines.append(f"  [bold]/{escape(name):<24}[/bold] [dim]{scope} command[/dim]")
        return lines
