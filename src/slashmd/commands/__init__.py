"""Commands: slash command dispatch and custom command expansion/discovery."""

from .custom import (
    command_name_to_path,
    discover_custom_commands,
    expand_custom_command,
    path_to_command_name,
)
from .handler import COMMANDS, CommandHandler, CommandResult
from .scope import COMMANDS_SUBDIR, Scope

__all__ = [
    "COMMANDS",
    "COMMANDS_SUBDIR",
    "CommandHandler",
    "CommandResult",
    "Scope",
    "command_name_to_path",
    "discover_custom_commands",
    "expand_custom_command",
    "path_to_command_name",
]
