"""Logging configuration for the CLI layer.

Library modules log through ``logging.getLogger(__name__)`` and never
configure handlers.  The CLI attaches one handler to the package
logger at startup: a :class:`rich.logging.RichHandler` when Rich is
installed, otherwise a plain stderr stream handler.  Records always go
to stderr so they never interleave with the dialogue on stdout.
"""

from __future__ import annotations

import logging
import os
import sys

from resign_demo.cli.console import get_rich_console
from resign_demo.exceptions import EnvironmentError

LOG_LEVEL_ENV: str = "RESIGN_DEMO_LOG_LEVEL"
DEFAULT_LOG_LEVEL: str = "WARNING"
PACKAGE_LOGGER: str = "resign_demo"


def get_log_level(*, verbose: bool = False) -> int:
    """Resolve the effective level from *verbose* or the environment.

    Unknown level names fall back to ``WARNING``.
    """
    if verbose:
        return logging.DEBUG
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.WARNING


def _build_handler() -> logging.Handler:
    try:
        from rich.logging import RichHandler

        return RichHandler(
            console=get_rich_console(stderr=True),
            show_path=False,
            markup=False,
        )
    except (ModuleNotFoundError, EnvironmentError):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(levelname)s %(name)s: %(message)s"),
        )
        return handler


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Install the package log handler, replacing any earlier one.

    Safe to call more than once; repeated calls do not stack handlers.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.addHandler(_build_handler())
    package_logger.setLevel(get_log_level(verbose=verbose))
    return package_logger
