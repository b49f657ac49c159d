"""Logging configuration for the command-line interface."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "notebooktex"


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> logging.Logger:
    """Route package logs through a Rich handler.

    Usage:
        from notebooktex.logging_config import setup_logging
        setup_logging(verbose=True)

    Args:
        verbose: Show debug messages instead of warnings only
        console: Rich console to log to (stderr if None)

    Returns:
        logging.Logger: The package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Avoid adding handlers multiple times
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=verbose,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
