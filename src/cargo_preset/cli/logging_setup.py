"""Logging configuration for the CLI.

All modules log to children of the ``cargo_preset`` logger.  The CLI
installs exactly one handler on that logger: a Rich handler on stderr
when Rich is available, a plain stream handler otherwise.
"""

from __future__ import annotations

import logging
import sys

from cargo_preset.cli.console import get_rich_console
from cargo_preset.exceptions import MissingDependencyError

LOGGER_NAME: str = "cargo_preset"
_PLAIN_FORMAT: str = "%(levelname)s %(name)s: %(message)s"


def _build_handler() -> logging.Handler:
    try:
        from rich.logging import RichHandler

        rich_console = get_rich_console()
    except (ModuleNotFoundError, MissingDependencyError):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
        return handler
    return RichHandler(
        console=rich_console,
        show_time=False,
        show_path=False,
    )


def configure_logging(debug: bool) -> logging.Logger:
    """Configure the package logger; DEBUG with *debug*, else WARNING.

    Safe to call repeatedly — previously installed handlers are
    replaced, never stacked.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.addHandler(_build_handler())
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False
    return logger
