"""Centralized logging configuration.

All modules should use ``get_logger(__name__)`` to obtain a logger instance.
"""

import logging
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_ROOT_LOGGER = "budgetkit"
_initialized = False


class _StderrHandler(logging.StreamHandler):
    """Stream handler that writes to whatever sys.stderr is at emit time.

    click's test runner swaps sys.stderr per invocation, so a stream captured
    at construction would point at a closed buffer. The setter ignores the
    assignment made by ``StreamHandler.__init__``.
    """

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def configure_logging(level: int) -> None:
    """Attach the package handler once and set the package log level."""
    global _initialized
    logger = logging.getLogger(_ROOT_LOGGER)
    if not _initialized:
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
        logger.addHandler(handler)
        _initialized = True
    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A logging.Logger under the budgetkit hierarchy.
    """
    return logging.getLogger(name)
