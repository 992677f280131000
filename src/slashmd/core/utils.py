"""Path display helpers."""

from __future__ import annotations

from pathlib import Path


def short_path(p: Path, home: Path | None) -> str:
    """Return *p* relative to *home*, using a ~ prefix."""
    if home is None:
        return str(p)
    try:
        rel = p.relative_to(home)
        return f"~/{rel}" if str(rel) != "." else "~"
    except ValueError:
        return str(p)
