"""Custom slash commands backed by Markdown files under .codex/commands/.

Project commands live in ``<cwd>/.codex/commands`` and user commands in
``~/.codex/commands``. Names are derived from the path relative to the scope
root, with ``__`` standing in for the path separator::

    .codex/commands/fix-issue.md          -> /project:fix-issue
    .codex/commands/review/security.md    -> /project:review__security
    ~/.codex/commands/review/security.md  -> /user:review__security

Expanding a command reads the file and replaces every ``$ARGUMENTS`` with the
raw text that follows the command name.
"""

from __future__ import annotations

import logging
import os
import string
from pathlib import Path

from ..core.config import user_home
from .scope import DEFAULT_SCOPE, Scope

logger = logging.getLogger(__name__)

TRIGGER = "/"
PLACEHOLDER = "$ARGUMENTS"
SEPARATOR_TOKEN = "__"
EXTENSION = ".md"

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def command_name_to_path(name: str) -> Path:
    """``review__security`` -> ``review/security.md``"""
    return Path(name.replace(SEPARATOR_TOKEN, os.sep) + EXTENSION)


def path_to_command_name(rel: Path) -> str:
    """``review/Security.md`` -> ``review__security``"""
    stem = str(rel)
    if stem.endswith(EXTENSION):
        stem = stem[: -len(EXTENSION)]
    return stem.replace(os.sep, SEPARATOR_TOKEN).translate(_ASCII_LOWER)


def _within(path: Path, root: Path) -> bool:
    path = Path(os.path.normpath(path))
    root = Path(os.path.normpath(root))
    return root in path.parents


def expand_custom_command(text: str, cwd: Path, home: Path | None = None) -> str | None:
    """Expand ``/[scope:]name [args]`` into the prompt stored on disk.

    Returns None when *text* is not a custom command. A missing, unreadable or
    undecodable file is indistinguishable from an unknown command. *home*
    defaults to ``$HOME``; without one, user-scoped commands never match.
    """
    text = text.strip()
    if not text.startswith(TRIGGER):
        return None

    first_token, _, arguments = text[len(TRIGGER) :].partition(" ")
    if not first_token:
        return None

    if ":" in first_token:
        scope_token, _, name = first_token.partition(":")
    else:
        scope_token, name = DEFAULT_SCOPE.value, first_token
    if not name:
        return None

    scope = Scope.parse(scope_token)
    if scope is None:
        logger.debug("unknown command scope %r", scope_token)
        return None

    if home is None:
        home = user_home()
    root = scope.root(cwd, home)
    if root is None:
        logger.debug("no home directory, skipping %s:%s", scope.value, name)
        return None

    candidate = root / command_name_to_path(name)
    if not _within(candidate, root):
        logger.debug("command %r escapes %s", name, root)
        return None

    try:
        contents = Path(os.path.normpath(candidate)).read_bytes().decode("utf-8")
    except (OSError, ValueError) as exc:
        logger.debug("no custom command at %s: %s", candidate, exc)
        return None

    return contents.replace(PLACEHOLDER, arguments)


def _gather(root: Path, scope: Scope) -> list[str]:
    if not root.exists():
        return []

    names: list[str] = []
    # each entry carries the (st_dev, st_ino) of its ancestors to stop symlink cycles
    stack: list[tuple[Path, frozenset[tuple[int, int]]]] = [(root, frozenset())]
    while stack:
        directory, ancestors = stack.pop()
        try:
            st = directory.stat()
            key = (st.st_dev, st.st_ino)
            if key in ancestors:
                continue
            ancestors = ancestors | {key}
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as exc:
            logger.debug("skipping %s: %s", directory, exc)
            continue

        for entry in entries:
            path = Path(entry.path)
            try:
                if entry.is_dir():
                    stack.append((path, ancestors))
                    continue
                if not entry.is_file():
                    continue
            except OSError as exc:
                logger.debug("skipping %s: %s", path, exc)
                continue
            if path.suffix == EXTENSION:
                names.append(f"{scope.value}:{path_to_command_name(path.relative_to(root))}")

    return sorted(names)


def discover_custom_commands(cwd: Path | None = None, home: Path | None = None) -> list[str]:
    """Return every custom command as ``scope:name``, project scope first.

    *cwd* defaults to the process working directory and *home* to ``$HOME``;
    a scope whose root cannot be determined or does not exist contributes
    nothing.
    """
    if cwd is None:
        try:
            cwd = Path.cwd()
        except OSError:
            logger.debug("working directory unavailable, skipping project commands")
    if home is None:
        home = user_home()

    commands: list[str] = []
    for scope in Scope:
        if scope is Scope.PROJECT and cwd is None:
            continue
        root = scope.root(cwd, home)
        if root is not None:
            commands.extend(_gather(root, scope))
    return commands
