"""Domain models for resign-demo.

:class:`Employee` is the one mutable entity: every field is guarded by
a validating property, so an instance can never hold an invalid id or
name.  :class:`ResignationSummary` is a frozen value object describing
a completed resignation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date, datetime

from resign_demo.core.protocols import Terminal
from resign_demo.core.reason_menu import (
    RESIGNATION_REASONS,
    Cancelled,
    select_reason,
)
from resign_demo.exceptions import TerminalUnavailableError, ValidationError

logger = logging.getLogger(__name__)

DATE_FORMAT: str = "%Y-%m-%d"
PROCESSED_STATUS: str = "Processed Successfully"


# ---------------------------------------------------------------------------
# Resignation summary
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ResignationSummary:
    """Outcome of a completed resignation dialogue."""

    employee_id: int
    """Identifier of the resigning employee."""

    full_name: str
    """``"<first> <last>"`` at the time of resignation."""

    reason: str
    """One of the fixed resignation reasons."""

    resignation_date: date
    """Calendar date the resignation was processed."""

    status: str = PROCESSED_STATUS

    def lines(self) -> list[str]:
        """Render the summary block, one entry per output line."""
        return [
            "Resignation Summary:",
            f"Employee: {self.full_name} (ID: {self.employee_id})",
            f"Reason: {self.reason}",
            f"Resignation Date: {self.resignation_date.strftime(DATE_FORMAT)}",
            f"Status: {self.status}",
        ]


# ---------------------------------------------------------------------------
# Field validators
# ---------------------------------------------------------------------------

def _validate_id(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            "Employee ID must be an integer.",
            hint=f"Got {type(value).__name__}.",
        )
    if value <= 0:
        raise ValidationError("Employee ID must be positive.")
    return value


def _validate_name(value: object, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} cannot be empty.")
    return value


# ---------------------------------------------------------------------------
# Employee
# ---------------------------------------------------------------------------

class Employee:
    """An employee who can quit.

    Satisfies :class:`~resign_demo.core.protocols.Quittable`.

    Parameters
    ----------
    id:
        Positive employee number.
    first_name, last_name:
        Non-blank names, stored as given.
    terminal:
        Where :meth:`quit` talks to the user.  Required only for
        :meth:`quit`; validation and representation work without one.
    clock:
        Returns the current time.  Stamps :attr:`hire_date` and dates
        the resignation.  Defaults to :meth:`datetime.now`.
    reasons:
        Menu offered by :meth:`quit`.
    """

    def __init__(
        self,
        id: int,
        first_name: str,
        last_name: str,
        *,
        terminal: Terminal | None = None,
        clock: Callable[[], datetime] = datetime.now,
        reasons: Sequence[str] = RESIGNATION_REASONS,
    ) -> None:
        self.id = id
        self.first_name = first_name
        self.last_name = last_name
        self._terminal = terminal
        self._clock = clock
        self._reasons = reasons
        self.hire_date: datetime = clock()
        logger.debug("Created %r", self)

    # ------------------------------------------------------------------
    # Validated fields
    # ------------------------------------------------------------------

    @property
    def id(self) -> int:
        return self._id

    @id.setter
    def id(self, value: int) -> None:
        self._id = _validate_id(value)

    @property
    def first_name(self) -> str:
        return self._first_name

    @first_name.setter
    def first_name(self, value: str) -> None:
        self._first_name = _validate_name(value, "First name")

    @property
    def last_name(self) -> str:
        return self._last_name

    @last_name.setter
    def last_name(self, value: str) -> None:
        self._last_name = _validate_name(value, "Last name")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    # ------------------------------------------------------------------
    # Behaviour
    # ------------------------------------------------------------------

    def employment_days(self, now: datetime | None = None) -> int:
        """Whole days elapsed between :attr:`hire_date` and *now*."""
        current = now if now is not None else self._clock()
        return (current - self.hire_date).days

    def quit(self) -> ResignationSummary | None:
        """Walk the user through resigning.

        Prints the employment duration, asks for a reason, and prints a
        summary.  The employee itself is left unchanged.

        Returns
        -------
        ResignationSummary | None
            The processed resignation, or ``None`` if the user
            cancelled.

        Raises
        ------
        TerminalUnavailableError
            If the employee was created without a terminal.
        """
        terminal = self._terminal
        if terminal is None:
            raise TerminalUnavailableError(
                "Cannot process a resignation without a terminal.",
                hint="Pass terminal=... when creating the Employee.",
            )

        terminal.show()
        terminal.show(f"Processing resignation for {self.full_name}")
        terminal.show(f"Employment Duration: {self.employment_days()} days")

        outcome = select_reason(terminal, self._reasons)
        if isinstance(outcome, Cancelled):
            terminal.show()
            terminal.show(outcome.message)
            return None

        summary = ResignationSummary(
            employee_id=self.id,
            full_name=self.full_name,
            reason=outcome.reason,
            resignation_date=self._clock().date(),
        )
        terminal.show()
        for line in summary.lines():
            terminal.show(line)
        logger.info("Resignation processed for employee %d", self.id)
        return summary

    # ------------------------------------------------------------------
    # Representation
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        hired = self.hire_date.strftime(DATE_FORMAT)
        return f"Employee(ID: {self.id}, Name: {self.full_name}, Hired: {hired})"

    def __repr__(self) -> str:
        return (
            f"Employee(id={self.id!r}, first_name={self.first_name!r}, "
            f"last_name={self.last_name!r}, hire_date={self.hire_date!r})"
        )
