"""Core layer — the employee entity and the resignation dialogue.

Rules
-----
* No ``print()`` calls; all interaction goes through a ``Terminal``.
* No imports from ``cli``.
* No third-party imports.
"""

from resign_demo.core.models import Employee, ResignationSummary
from resign_demo.core.protocols import Quittable, Terminal
from resign_demo.core.reason_menu import (
    RESIGNATION_REASONS,
    Cancelled,
    InvalidInput,
    Selected,
    SelectionOutcome,
    parse_choice,
    select_reason,
)

__all__: list[str] = [
    "RESIGNATION_REASONS",
    "Cancelled",
    "Employee",
    "InvalidInput",
    "Quittable",
    "ResignationSummary",
    "Selected",
    "SelectionOutcome",
    "Terminal",
    "parse_choice",
    "select_reason",
]
