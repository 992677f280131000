"""slashmd: Markdown-backed custom slash commands."""

from .commands import discover_custom_commands, expand_custom_command

__version__ = "0.1.0"

__all__ = ["discover_custom_commands", "expand_custom_command"]
