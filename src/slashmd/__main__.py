"""CLI entry point: list, expand and try out custom slash commands."""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from .commands import CommandHandler, Scope, discover_custom_commands, expand_custom_command
from .core.config import load_config
from .core.utils import short_path
from .tui import console, render_prompt, run_repl

err_console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )

@click.group()
@click.option(
    "--cwd",
    type=click.Path(file_okay=False, path_type=str),
    default=None,
    help="Project root (default: current directory)",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def cli(ctx: click.Context, cwd: str | None, verbose: bool):
    """Custom slash commands from .codex/commands/*.md."""
    _setup_logging(verbose)
    ctx.obj = load_config(cwd=cwd, verbose=verbose)

@cli.command("list")
@click.option(
    "--scope",
    type=click.Choice([s.value for s in Scope]),
    default=None,
    help="Only show commands from one scope",
)
@click.pass_obj
def list_commands(config, scope: str | None):
    """List custom commands as /scope:name."""
    names = sorted(discover_custom_commands(config.cwd, config.home))
    if scope:
        names = [n for n in names if n.startswith(f"{scope}:")]
    if not names:
        console.print(f"no custom commands under {short_path(config.cwd, config.home)}", style="dim")
        return
    for name in names:
        console.print(f"/{name}", highlight=False, markup=False)

@cli.command("expand")
@click.argument("text", nargs=-1, required=True)
@click.pass_obj
def expand(config, text: tuple[str, ...]):
    """Print the prompt a slash command expands to."""
    prompt = expand_custom_command(" ".join(text), config.cwd, config.home)
    if prompt is None:
        err_console.print("not a custom command", style="dim")
        sys.exit(1)
    click.echo(prompt, nl=False)

@cli.command("repl")
@click.pass_obj
def repl(config):
    """Interactive prompt with slash command completion."""

    def _on_prompt(prompt: str, command: str | None) -> None:
        render_prompt(prompt, title=f"/{command}" if command else None)

    run_repl(config, CommandHandler(config), _on_prompt)

def main():
    cli()

if __name__ == "__main__":
    main()
