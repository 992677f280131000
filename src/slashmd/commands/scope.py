"""Command scopes and the directories they are rooted at."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

COMMANDS_SUBDIR = Path(".codex") / "commands"


class Scope(Enum):
    PROJECT = "project"
    USER = "user"

    @classmethod
    def parse(cls, token: str) -> Scope | None:
        try:
            return cls(token)
        except ValueError:
            return None

    def root(self, cwd: Path, home: Path | None) -> Path | None:
        """Return the commands directory for this scope, or None without a home."""
        if self is Scope.PROJECT:
            return cwd / COMMANDS_SUBDIR
        if home is None:
            return None
        return home / COMMANDS_SUBDIR


DEFAULT_SCOPE = Scope.PROJECT
