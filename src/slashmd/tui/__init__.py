"""Public API for the slashmd TUI package."""

from .renderer import console, render_prompt
from .repl import run_repl

__all__ = ["console", "render_prompt", "run_repl"]
