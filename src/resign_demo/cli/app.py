"""CLI application entry point for resign-demo.

This module is the **sole error boundary** for the entire application.
It catches :class:`~resign_demo.exceptions.ResignDemoError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — validation and the resignation
  dialogue belong to the core layer.
* ``print()`` is forbidden; output goes through the console helpers.
* A rejected employee is reported and still exits successfully: it is
  part of the demo, not a failure of the program.
"""

from __future__ import annotations

import argparse
import logging
import sys

from resign_demo.cli import exit_codes
from resign_demo.cli.console import ConsoleTerminal, console
from resign_demo.core.models import Employee
from resign_demo.core.protocols import Quittable, Terminal
from resign_demo.exceptions import ResignDemoError, ValidationError
from resign_demo.version import __version__

logger = logging.getLogger(__name__)

BANNER: str = "Interactive Employee Resignation System Demo"

DEMO_EMPLOYEE_ID: int = 1
DEMO_FIRST_NAME: str = "Emma"
DEMO_LAST_NAME: str = "Smith"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Without arguments the demo runs with a fixed sample employee; the
    options only override those values.
    """
    parser = argparse.ArgumentParser(
        prog="resign-demo",
        description="Walk a sample employee through an interactive resignation.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--id",
        type=int,
        default=DEMO_EMPLOYEE_ID,
        help=f"Employee ID (default: {DEMO_EMPLOYEE_ID}).",
    )
    parser.add_argument(
        "--first-name",
        default=DEMO_FIRST_NAME,
        help=f"Employee first name (default: {DEMO_FIRST_NAME}).",
    )
    parser.add_argument(
        "--last-name",
        default=DEMO_LAST_NAME,
        help=f"Employee last name (default: {DEMO_LAST_NAME}).",
    )
    parser.add_argument(
        "--no-pause",
        action="store_true",
        help="Exit without waiting for a key press.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )
    return parser


# ---------------------------------------------------------------------------
# Polymorphic dispatch
# ---------------------------------------------------------------------------

def process_resignation(member: Quittable) -> object:
    """Run the quitting flow of anything that can quit."""
    logger.debug("Dispatching quit() to %s", type(member).__name__)
    return member.quit()


def _run_demo(args: argparse.Namespace, terminal: Terminal) -> None:
    try:
        employee = Employee(
            args.id,
            args.first_name,
            args.last_name,
            terminal=terminal,
        )
        terminal.show(f"Created: {employee}")
        process_resignation(employee)
    except ValidationError as exc:
        logger.debug("Employee rejected: %s", exc)
        terminal.show(f"Error: {exc}")


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    terminal: Terminal | None = None,
) -> int:
    """Run the resign-demo CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    terminal:
        Dialogue terminal; a :class:`ConsoleTerminal` when ``None``.

    Returns
    -------
    int
        OS process exit code.
    """
    from resign_demo.cli.logging_setup import configure_logging
    from resign_demo.cli.pause import wait_for_key_press

    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    if terminal is None:
        terminal = ConsoleTerminal()

    terminal.show(BANNER)
    terminal.show()
    _run_demo(args, terminal)

    if not args.no_pause:
        wait_for_key_press(terminal)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ResignDemoError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
