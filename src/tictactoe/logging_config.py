"""Logging configuration for tictactoe."""

import logging
import sys

from tictactoe.config import LOG_FORMAT, LOG_LEVEL

FORMATS = {
    "simple": "%(name)s - %(levelname)s - %(message)s",
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
}


def setup_logging(level: str = LOG_LEVEL, format_style: str = LOG_FORMAT) -> None:
    """
    Set up logging for the whole application.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_style: "simple" or "detailed"
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    log_format = FORMATS.get(format_style, FORMATS["simple"])

    # stderr, so log lines never land inside the redrawn board
    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module, without the package prefix.

    Args:
        name: Logger name (typically __name__ of the caller)
    """
    if name.startswith("tictactoe."):
        name = name[len("tictactoe."):]
    return logging.getLogger(name)
