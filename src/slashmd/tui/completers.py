"""Prompt-toolkit completer for slash commands."""

from __future__ import annotations

from prompt_toolkit.completion import Completer, Completion

from ..commands import COMMANDS


class _SlashCompleter(Completer):
    """Autocomplete slash commands (built-in + custom)."""

    def __init__(self, cmd_handler=None):
        self._handler = cmd_handler

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor.lstrip()
        if not text.startswith("/") or " " in text:
            return
        for cmd, desc in COMMANDS.items():
            if cmd.startswith(text):
                yield Completion(cmd, start_position=-len(text), display_meta=desc)
        # custom commands, re-discovered on every keystroke
        if self._handler:
            for name in self._handler.custom_commands:
                cmd = f"/{name}"
                if cmd.startswith(text):
                    scope = name.split(":", 1)[0]
                    yield Completion(
                        cmd, start_position=-len(text), display_meta=f"{scope} command"
                    )
