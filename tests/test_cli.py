"""Tests for the slashmd CLI: list, expand, repl."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from slashmd.__main__ import cli


@pytest.fixture
def dirs(tmp_path):
    project = tmp_path / "project"
    home = tmp_path / "home"
    (project / ".codex/commands/nested").mkdir(parents=True)
    (home / ".codex/commands/review").mkdir(parents=True)
    (project / ".codex/commands/a.md").write_text("A $ARGUMENTS")
    (project / ".codex/commands/nested/b.md").write_text("B")
    (home / ".codex/commands/review/security.md").write_text("Security review: $ARGUMENTS")
    return project, home


def _invoke(args, home):
    return CliRunner().invoke(cli, args, env={"HOME": str(home), "SLASHMD_CWD": None})


class TestList:
    def test_lists_both_scopes(self, dirs):
        project, home = dirs
        result = _invoke(["--cwd", str(project), "list"], home)
        assert result.exit_code == 0
        lines = result.output.split()
        assert lines == ["/project:a", "/project:nested__b", "/user:review__security"]

    def test_scope_filter(self, dirs):
        project, home = dirs
        result = _invoke(["--cwd", str(project), "list", "--scope", "user"], home)
        assert result.output.split() == ["/user:review__security"]

    def test_invalid_scope(self, dirs):
        project, home = dirs
        result = _invoke(["--cwd", str(project), "list", "--scope", "team"], home)
        assert result.exit_code != 0

    def test_empty(self, tmp_path):
        result = _invoke(["--cwd", str(tmp_path), "list"], tmp_path / "nohome")
        assert result.exit_code == 0
        assert "no custom commands" in result.output


class TestExpand:
    def test_project_command(self, dirs):
        project, home = dirs
        result = _invoke(["--cwd", str(project), "expand", "/a", "missing", "tests"], home)
        assert result.exit_code == 0
        assert result.output == "A missing tests"

    def test_user_command(self, dirs):
        project, home = dirs
        result = _invoke(
            ["--cwd", str(project), "expand", "/user:review__security critical module"], home
        )
        assert result.exit_code == 0
        assert result.output == "Security review: critical module"

    def test_no_match_exits_1(self, dirs):
        project, home = dirs
        result = _invoke(["--cwd", str(project), "expand", "/missing"], home)
        assert result.exit_code == 1

    def test_plain_text_exits_1(self, dirs):
        project, home = dirs
        result = _invoke(["--cwd", str(project), "expand", "hello"], home)
        assert result.exit_code == 1


class TestRepl:
    def test_starts_repl(self, dirs):
        project, home = dirs
        with patch("slashmd.__main__.run_repl") as run_repl:
            result = _invoke(["--cwd", str(project), "repl"], home)
        assert result.exit_code == 0
        config, handler, _ = run_repl.call_args.args
        assert config.cwd == project
        assert handler.config is config

    def test_verbose_flag(self, dirs):
        project, home = dirs
        with patch("slashmd.__main__.run_repl") as run_repl:
            result = _invoke(["--cwd", str(project), "-v", "repl"], home)
        assert result.exit_code == 0
        assert run_repl.call_args.args[0].verbose is True


class TestConsole:
    def test_shares_renderer_console(self):
        import slashmd.__main__ as main_module
        from slashmd.tui import renderer

        assert main_module.console is renderer.console
