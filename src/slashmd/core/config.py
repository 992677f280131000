"""Configuration: env, paths."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv


def user_home() -> Path | None:
    """Return ``$HOME`` as a path, or None when it is unset or empty."""
    home = os.environ.get("HOME")
    return Path(home) if home else None


@dataclass
class Config:
    cwd: Path = field(default_factory=Path.cwd)
    home: Path | None = field(default_factory=user_home)
    global_dir: Path | None = None  # None = ~/.slashmd, or unset without a home
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.global_dir is None and self.home is not None:
            self.global_dir = self.home / ".slashmd"

    @property
    def history_path(self) -> Path | None:
        if self.global_dir is None:
            return None
        return self.global_dir / "history"


def load_config(cwd: Path | str | None = None, verbose: bool = False) -> Config:
    """Load config with priority: CLI args > env > .env > defaults."""
    load_dotenv()

    config = Config()
    config.verbose = verbose

    if env_cwd := os.getenv("SLASHMD_CWD"):
        config.cwd = Path(env_cwd)

    if cwd:
        config.cwd = Path(cwd)

    return config
