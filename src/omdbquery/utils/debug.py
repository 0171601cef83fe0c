"""Logging setup for omdbquery.

Library modules log through ``logging.getLogger(__name__)`` and never
configure handlers themselves. This helper attaches a Rich handler to the
``omdbquery`` logger for the CLI. Debug output is enabled by ``--verbose`` or
the OMDBQUERY_DEBUG environment variable.
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "omdbquery"
_ENV_DEBUG = "OMDBQUERY_DEBUG"


def debug_enabled() -> bool:
    """Return True when OMDBQUERY_DEBUG is set to a truthy value."""
    return os.getenv(_ENV_DEBUG, "0").lower() in {"1", "true", "yes", "on"}


def setup_logger(verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Configure and return the package logger.

    Args:
        verbose: Force DEBUG level regardless of the environment.
        console: Console to log to; a stderr console is created otherwise.

    Returns:
        The ``omdbquery`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose or debug_enabled() else logging.WARNING)
    return logger
