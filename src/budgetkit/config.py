"""Runtime configuration resolved from options and environment variables."""

import logging
import os
from datetime import tzinfo
from typing import Optional

from dateutil import tz

DB_PATH_ENV = "BUDGETKIT_DB_PATH"
TIMEZONE_ENV = "BUDGETKIT_TIMEZONE"
LOG_LEVEL_ENV = "BUDGETKIT_LOG_LEVEL"

DEFAULT_LOG_LEVEL = logging.WARNING


def resolve_timezone(name: Optional[str] = None) -> tzinfo:
    """Resolve the reporting timezone.

    Args:
        name: IANA timezone name (e.g. "Europe/Stockholm"). If None, checks
            BUDGETKIT_TIMEZONE environment variable, then falls back to the
            machine's local timezone.

    Returns:
        tzinfo used for every period and month boundary

    Raises:
        ValueError: If the timezone name is not recognized
    """
    if name is None:
        name = os.environ.get(TIMEZONE_ENV)

    if not name:
        return tz.tzlocal()

    zone = tz.gettz(name)
    if zone is None:
        raise ValueError(f"Unknown timezone '{name}'")
    return zone


def resolve_log_level(verbosity: int = 0) -> int:
    """Map CLI verbosity to a logging level.

    Without -v flags, BUDGETKIT_LOG_LEVEL is honoured (e.g. "INFO").
    """
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO

    name = os.environ.get(LOG_LEVEL_ENV)
    if name:
        level = logging.getLevelName(name.strip().upper())
        if isinstance(level, int):
            return level
    return DEFAULT_LOG_LEVEL
