"""Custom exception hierarchy for resign-demo.

All exceptions that cross layer boundaries must inherit from
:class:`ResignDemoError`.  Cancelling the resignation dialogue is
deliberately absent here: it is an ordinary outcome
(:class:`~resign_demo.core.reason_menu.Cancelled`), not an error.

Hierarchy
---------
ResignDemoError
├── ValidationError
├── TerminalUnavailableError
└── EnvironmentError
"""

from __future__ import annotations


class ResignDemoError(Exception):
    """Base exception for all resign-demo errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Entity validation -----------------------------------------------------

class ValidationError(ResignDemoError):
    """Raised when an employee field fails validation."""


# --- Interaction -----------------------------------------------------------

class TerminalUnavailableError(ResignDemoError):
    """Raised when an interactive operation has no terminal to talk to."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ResignDemoError):
    """Raised when a required runtime dependency is not available."""
