"""Interactive REPL loop built on prompt_toolkit."""

from __future__ import annotations

import time
from collections.abc import Callable

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.history import FileHistory, InMemoryHistory

from ..commands import CommandHandler, CommandResult
from .completers import _SlashCompleter
from .renderer import console


def _build_prompt() -> FormattedText:
    return FormattedText([("class:prompt", "> ")])


def run_repl(config, cmd_handler: CommandHandler, on_prompt: Callable[[str, str | None], None]):
    """Read lines until exit; hand ordinary and expanded prompts to *on_prompt*.

    *on_prompt* receives the prompt text and the custom command name that
    produced it (None for text typed as-is).
    """
    if config.history_path is not None:
        config.global_dir.mkdir(parents=True, exist_ok=True)
        history = FileHistory(str(config.history_path))
    else:
        history = InMemoryHistory()

    session: PromptSession = PromptSession(
        history=history,
        multiline=False,
        completer=_SlashCompleter(cmd_handler),
        auto_suggest=AutoSuggestFromHistory(),
    )

    console.print("  /help for commands | Ctrl-C twice to exit", style="dim")
    console.print()
    _run_repl_loop(cmd_handler, session, on_prompt)


def _run_repl_loop(cmd_handler, session, on_prompt: Callable[[str, str | None], None]):
    last_interrupt: float = 0

    while True:
        try:
            user_input = session.prompt(_build_prompt()).strip()
            last_interrupt = 0
        except KeyboardInterrupt:
            now = time.time()
            if now - last_interrupt < 1.0:
                console.print("\nbye", style="dim")
                break
            last_interrupt = now
            console.print("\npress Ctrl-C again to exit", style="dim")
            continue
        except EOFError:
            console.print()
            break

        if not user_input:
            continue

        command_name = None
        if cmd_handler.is_command(user_input):
            result = cmd_handler.handle(user_input)
            if result == "quit":
                break
            elif isinstance(result, CommandResult):
                command_name = result.name
                user_input = result.prompt
            elif isinstance(result, str) and result:
                console.print(result)
                continue
            # None: not a custom command, falls through as an ordinary prompt

        on_prompt(user_input, command_name)
