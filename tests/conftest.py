"""Shared pytest fixtures and configuration for the resign-demo test suite.

Guidelines
----------
* No real terminal interaction — dialogue tests use ``ScriptedTerminal``.
* Time is pinned through an injected clock, never the wall clock.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from datetime import datetime

import pytest

HIRE_TIME = datetime(2024, 3, 15, 9, 30)
"""Fixed "now" used by the default test clock."""


class ScriptedTerminal:
    """Terminal double that replays canned input and records output."""

    def __init__(self, inputs: Iterable[str] = ()) -> None:
        self._inputs: list[str] = list(inputs)
        self.lines: list[str] = []
        self.prompts: list[str] = []

    def show(self, text: str = "") -> None:
        self.lines.append(text)

    def ask(self, prompt: str) -> str | None:
        self.prompts.append(prompt)
        if not self._inputs:
            return None
        return self._inputs.pop(0)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


class SteppingClock:
    """Clock returning a scripted series of instants, repeating the last."""

    def __init__(self, *instants: datetime) -> None:
        self._instants = list(instants) or [HIRE_TIME]

    def __call__(self) -> datetime:
        if len(self._instants) > 1:
            return self._instants.pop(0)
        return self._instants[0]


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers installed by ``configure_logging`` between tests."""
    package_logger = logging.getLogger("resign_demo")
    yield
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
