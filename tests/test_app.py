"""Tests for the CLI entry point (cli/app.py).

Covers the demo flow through ``main`` with a scripted terminal, a full
pass through the real Rich-backed terminal with stdin/stdout captured,
and the exit codes produced by the ``cli`` error boundary.
"""

from __future__ import annotations

import io
from unittest.mock import patch

import pytest

from conftest import ScriptedTerminal
from resign_demo.cli import app as app_module
from resign_demo.cli import exit_codes
from resign_demo.cli.app import BANNER, cli, main
from resign_demo.exceptions import EnvironmentError


@pytest.fixture(autouse=True)
def _non_interactive_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "resign_demo.cli.pause._stdin_is_interactive", lambda: False,
    )


# ---------------------------------------------------------------------------
# main() with a scripted terminal
# ---------------------------------------------------------------------------

class TestMainFlow:
    def test_selected_reason(self) -> None:
        terminal = ScriptedTerminal(["2"])
        code = main(["--no-pause"], terminal=terminal)

        assert code == exit_codes.SUCCESS
        assert terminal.lines[0] == BANNER
        assert any(
            line.startswith("Created: Employee(ID: 1, Name: Emma Smith, Hired: ")
            for line in terminal.lines
        )
        assert "Reason: Relocation" in terminal.lines
        assert "Status: Processed Successfully" in terminal.lines

    def test_cancelled_still_succeeds(self) -> None:
        terminal = ScriptedTerminal(["0"])
        code = main(["--no-pause"], terminal=terminal)
        assert code == exit_codes.SUCCESS
        assert "Resignation process cancelled." in terminal.lines
        assert "Resignation Summary:" not in terminal.lines

    def test_overridden_employee(self) -> None:
        terminal = ScriptedTerminal(["1"])
        main(
            ["--id", "7", "--first-name", "Ada", "--last-name", "Lovelace", "--no-pause"],
            terminal=terminal,
        )
        assert "Employee: Ada Lovelace (ID: 7)" in terminal.lines

    @pytest.mark.parametrize(
        ("argv", "message"),
        [
            (["--id", "0"], "Error: Employee ID must be positive."),
            (["--id", "-3"], "Error: Employee ID must be positive."),
            (["--first-name", " "], "Error: First name cannot be empty."),
            (["--last-name", ""], "Error: Last name cannot be empty."),
        ],
    )
    def test_validation_error_reported_and_succeeds(
        self, argv: list[str], message: str,
    ) -> None:
        terminal = ScriptedTerminal(["1"])
        code = main([*argv, "--no-pause"], terminal=terminal)

        assert code == exit_codes.SUCCESS
        assert message in terminal.lines
        assert not any(line.startswith("Created:") for line in terminal.lines)
        assert terminal.prompts == []

    def test_pause_line_shown_by_default(self) -> None:
        terminal = ScriptedTerminal(["0"])
        main([], terminal=terminal)
        assert terminal.lines[-1] == "Press any key to exit..."

    def test_no_pause_skips_pause_line(self) -> None:
        terminal = ScriptedTerminal(["0"])
        main(["--no-pause"], terminal=terminal)
        assert "Press any key to exit..." not in terminal.lines

    def test_pause_shown_after_validation_error(self) -> None:
        terminal = ScriptedTerminal()
        main(["--id", "0"], terminal=terminal)
        assert terminal.lines[-1] == "Press any key to exit..."


# ---------------------------------------------------------------------------
# main() through the real console terminal
# ---------------------------------------------------------------------------

class TestMainWithConsole:
    def test_stdin_to_stdout(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("x\n9\n3\n"))
        code = main([])
        out = capsys.readouterr().out

        assert code == exit_codes.SUCCESS
        assert BANNER in out
        assert "1. Career Change" in out
        assert out.count("Invalid choice. Please try again.") == 2
        assert "Reason: Personal Reasons" in out
        assert "Status: Processed Successfully" in out
        assert "Press any key to exit..." in out

    def test_long_names_stay_on_one_line(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        first = "Hubert Blaine"
        last = "Wolfeschlegelsteinhausenbergerdorff" * 2
        monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
        main(["--first-name", first, "--last-name", last, "--no-pause"])
        out = capsys.readouterr().out

        assert f"Employee: {first} {last} (ID: 1)\n" in out
        assert f"Created: Employee(ID: 1, Name: {first} {last}, Hired: " in out

    def test_closed_stdin_cancels(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        code = main(["--no-pause"])
        out = capsys.readouterr().out

        assert code == exit_codes.SUCCESS
        assert "Resignation process cancelled." in out


# ---------------------------------------------------------------------------
# cli() error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def _run_cli(self) -> int:
        with pytest.raises(SystemExit) as exc_info:
            cli()
        code = exc_info.value.code
        assert isinstance(code, int)
        return code

    def test_success(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(app_module, "main", lambda: exit_codes.SUCCESS)
        assert self._run_cli() == exit_codes.SUCCESS

    def test_known_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        def _boom() -> int:
            raise EnvironmentError("questionary is missing", hint="pip install it")

        monkeypatch.setattr(app_module, "main", _boom)
        assert self._run_cli() == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "questionary is missing" in err
        assert "pip install it" in err

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        with patch.object(app_module, "main", side_effect=KeyboardInterrupt):
            assert self._run_cli() == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        with patch.object(app_module, "main", side_effect=RuntimeError("kaput")):
            assert self._run_cli() == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError: kaput" in capsys.readouterr().err
