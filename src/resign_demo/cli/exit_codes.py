"""Process exit codes returned by ``main`` and the ``cli`` boundary.

Cancelling the resignation or entering an invalid employee is part of
the demo and still ends with :data:`SUCCESS`.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Demo finished: resignation processed, cancelled, or employee rejected."""

GENERAL_ERROR: int = 1
"""A ResignDemoError reached ``cli()``, e.g. a missing UI dependency."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C during the dialogue (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""Any other exception reached ``cli()``."""
