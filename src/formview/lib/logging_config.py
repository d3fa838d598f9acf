"""Logging configuration for formview.

All modules obtain their logger through get_logger(__name__) so that the
whole package hangs off the single "formview" logger configured here.
"""

import logging
import sys

LOGGER_NAME = "formview"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the package logger for CLI use.

    Args:
        verbose: Emit DEBUG level records
        quiet: Only emit ERROR level records (wins over verbose)
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    stream_handlers = [
        h for h in logger.handlers if isinstance(h, logging.StreamHandler)
    ]
    if stream_handlers:
        # Re-point at the current stderr, which may have been swapped
        for handler in stream_handlers:
            handler.setStream(sys.stderr)
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package logger.

    Args:
        name: Module name, usually __name__

    Returns:
        Logger instance
    """
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
