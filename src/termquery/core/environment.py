"""
Environment configuration for termquery.

The library itself never configures logging. Front ends (the ``termquery``
CLI) read the level from ``TERMQUERY_LOG_LEVEL`` unless given one
explicitly.

Environment values:
    - debug: also logs every compiled query tree
    - info
    - warning (default)
    - error

Usage:
    from termquery.core.environment import get_log_level

    logging.basicConfig(level=get_log_level().to_logging())
"""

from __future__ import annotations

import logging
import os
from enum import StrEnum


class LogLevel(StrEnum):
    """Supported log levels."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    def to_logging(self) -> int:
        """Numeric level for the logging module."""
        return logging.getLevelNamesMapping()[self.value.upper()]


_DEFAULT_LEVEL = LogLevel.WARNING

LOG_LEVEL_ENV_VAR = "TERMQUERY_LOG_LEVEL"

_ALIASES = {
    "warn": LogLevel.WARNING,
    "err": LogLevel.ERROR,
}


def parse_log_level(value: str | None) -> LogLevel:
    """Interpret a user-supplied level name.

    Empty or unknown values fall back to the default; unknown values also log
    a warning.
    """
    name = (value or "").lower().strip()
    if not name:
        return _DEFAULT_LEVEL
    if name in _ALIASES:
        return _ALIASES[name]
    try:
        return LogLevel(name)
    except ValueError:
        logging.getLogger(__name__).warning(
            "Unknown log level '%s'. Valid values: debug, info, warning, error. "
            "Defaulting to %s.",
            name,
            _DEFAULT_LEVEL.value,
        )
        return _DEFAULT_LEVEL


def get_log_level() -> LogLevel:
    """Get the configured log level from TERMQUERY_LOG_LEVEL.

    Examples:
        >>> import os
        >>> os.environ["TERMQUERY_LOG_LEVEL"] = "debug"
        >>> get_log_level()
        <LogLevel.DEBUG: 'debug'>
    """
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV_VAR))
