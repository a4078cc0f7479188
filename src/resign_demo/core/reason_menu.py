"""Resignation reason table and the bounded-choice selection loop.

The loop is a tiny state machine::

    Prompting ──(1..N)──▶ Selected
        │  ▲
        │  └──(anything else)── InvalidInput
        └──(0 / end of input)──▶ Cancelled

Parsing is a **pure** function returning a tagged outcome; only
:func:`select_reason` touches the injected terminal.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass

from resign_demo.core.protocols import Terminal

logger = logging.getLogger(__name__)


RESIGNATION_REASONS: tuple[str, ...] = (
    "Career Change",
    "Relocation",
    "Personal Reasons",
    "Better Opportunity",
    "Health Reasons",
    "Retirement",
)
"""Fixed, ordered reasons offered to every employee."""

MENU_HEADER: str = "Available Resignation Reasons:"
CHOICE_PROMPT: str = "Enter the number of your resignation reason (or 0 to cancel): "
INVALID_CHOICE_MESSAGE: str = "Invalid choice. Please try again."
CANCELLATION_MESSAGE: str = "Resignation process cancelled."

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


# ---------------------------------------------------------------------------
# Tagged outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Selected:
    """The user picked a valid reason."""

    reason: str


@dataclass(frozen=True, slots=True)
class Cancelled:
    """The user backed out of the dialogue."""

    message: str = CANCELLATION_MESSAGE


@dataclass(frozen=True, slots=True)
class InvalidInput:
    """The line could not be mapped to a menu entry."""

    raw: str


SelectionOutcome = Selected | Cancelled | InvalidInput


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------

def parse_choice(
    raw: str,
    reasons: Sequence[str] = RESIGNATION_REASONS,
) -> SelectionOutcome:
    """Map one line of user input onto a :data:`SelectionOutcome`.

    Accepts an optionally signed run of ASCII digits with surrounding
    whitespace; leading zeros are ignored.  ``0`` cancels,
    ``1..len(reasons)`` selects, everything else is
    :class:`InvalidInput`.
    """
    stripped = raw.strip()
    if not _INTEGER_PATTERN.fullmatch(stripped):
        return InvalidInput(raw=raw)

    # More digits than the largest menu number is out of range at any size.
    digits = stripped.lstrip("+-").lstrip("0") or "0"
    if len(digits) > len(str(len(reasons))):
        return InvalidInput(raw=raw)

    choice = -int(digits) if stripped.startswith("-") else int(digits)
    if choice == 0:
        return Cancelled()
    if 0 < choice <= len(reasons):
        return Selected(reason=reasons[choice - 1])
    return InvalidInput(raw=raw)


def render_menu(reasons: Sequence[str] = RESIGNATION_REASONS) -> list[str]:
    """Return the menu lines, numbered from 1."""
    return [MENU_HEADER] + [
        f"{index}. {reason}" for index, reason in enumerate(reasons, start=1)
    ]


# ---------------------------------------------------------------------------
# Interactive loop
# ---------------------------------------------------------------------------

def select_reason(
    terminal: Terminal,
    reasons: Sequence[str] = RESIGNATION_REASONS,
) -> Selected | Cancelled:
    """Prompt until the user selects a reason or cancels.

    Invalid lines re-prompt without bound.  End of input is treated as
    a cancellation.
    """
    while True:
        terminal.show()
        for line in render_menu(reasons):
            terminal.show(line)

        terminal.show()
        raw = terminal.ask(CHOICE_PROMPT)
        if raw is None:
            logger.debug("Input exhausted; cancelling reason selection")
            return Cancelled()

        outcome = parse_choice(raw, reasons)
        if isinstance(outcome, InvalidInput):
            logger.debug("Rejected menu input %r", outcome.raw)
            terminal.show(INVALID_CHOICE_MESSAGE)
            continue

        if isinstance(outcome, Cancelled):
            logger.debug("Reason selection cancelled by user")
        else:
            logger.debug("Reason selected: %s", outcome.reason)
        return outcome
