"""Final "press any key" pause for the CLI layer.

Interactive sessions wait on a single key press via questionary.
Piped or redirected stdin has no keyboard to wait on, so the pause
returns immediately there.
"""

from __future__ import annotations

import sys
from typing import Any

from resign_demo.core.protocols import Terminal
from resign_demo.exceptions import EnvironmentError

PAUSE_MESSAGE: str = "Press any key to exit..."


def _import_questionary() -> Any:
    """Import questionary lazily for the key-press wait."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _stdin_is_interactive() -> bool:
    stdin = sys.stdin
    return stdin is not None and stdin.isatty()


def wait_for_key_press(terminal: Terminal) -> None:
    """Show the exit prompt and block until a key is pressed.

    Raises
    ------
    EnvironmentError
        If stdin is interactive and questionary is not installed.
    """
    terminal.show()
    if not _stdin_is_interactive():
        terminal.show(PAUSE_MESSAGE)
        return

    questionary = _import_questionary()
    questionary.press_any_key_to_continue(PAUSE_MESSAGE).ask()
