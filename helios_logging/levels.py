# SPDX-License-Identifier: MIT
# Copyright (c) 2025 helios-logging contributors

"""Helios priority levels and their translation to logging engine levels.

Helios grew up on syslog, so it defines 8 priority levels where the logging
engine only knows 5. Several Helios levels collapse onto one engine level:

    SeverityLevel   EngineLevel
    EMERGENCY       FATAL
    ALERT           FATAL
    CRITICAL        FATAL
    ERROR           ERROR
    WARNING         WARN
    NOTICE          INFO
    INFO            INFO
    DEBUG           DEBUG
"""

import logging
from enum import IntEnum
from typing import Any

from .errors import LoggingError


class SeverityLevel(IntEnum):
    """Helios priority levels, numbered like syslog (0 is most urgent)."""

    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7


class EngineLevel(IntEnum):
    """Levels understood by the logging engine."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR
    FATAL = logging.CRITICAL


SEVERITY_TO_ENGINE: dict[SeverityLevel, EngineLevel] = {
    SeverityLevel.EMERGENCY: EngineLevel.FATAL,
    SeverityLevel.ALERT: EngineLevel.FATAL,
    SeverityLevel.CRITICAL: EngineLevel.FATAL,
    SeverityLevel.ERROR: EngineLevel.ERROR,
    SeverityLevel.WARNING: EngineLevel.WARN,
    SeverityLevel.NOTICE: EngineLevel.INFO,
    SeverityLevel.INFO: EngineLevel.INFO,
    SeverityLevel.DEBUG: EngineLevel.DEBUG,
}

# Aliases accepted from configuration files and host frameworks, besides
# the member names themselves
_LEVEL_ALIASES = {
    "LOG_EMERG": SeverityLevel.EMERGENCY,
    "EMERG": SeverityLevel.EMERGENCY,
    "LOG_ALERT": SeverityLevel.ALERT,
    "LOG_CRIT": SeverityLevel.CRITICAL,
    "CRIT": SeverityLevel.CRITICAL,
    "LOG_ERR": SeverityLevel.ERROR,
    "ERR": SeverityLevel.ERROR,
    "LOG_WARNING": SeverityLevel.WARNING,
    "WARN": SeverityLevel.WARNING,
    "LOG_NOTICE": SeverityLevel.NOTICE,
    "LOG_INFO": SeverityLevel.INFO,
    "LOG_DEBUG": SeverityLevel.DEBUG,
}


def coerce_level(level: Any) -> SeverityLevel:
    """Convert a host-supplied priority into a SeverityLevel.

    Args:
        level: A SeverityLevel, its integer value (0-7), or a name such as
            "LOG_ERR", "err" or "warning" (case-insensitive)

    Returns:
        The matching SeverityLevel

    Raises:
        LoggingError: If the value does not name one of the 8 levels
    """
    if isinstance(level, SeverityLevel):
        return level

    # bool is an int subclass, but True is not a priority
    if isinstance(level, int) and not isinstance(level, bool):
        try:
            return SeverityLevel(level)
        except ValueError:
            raise LoggingError(f"Invalid log level {level}") from None

    if isinstance(level, str):
        name = level.strip().upper()
        if name in SeverityLevel.__members__:
            return SeverityLevel[name]
        if name in _LEVEL_ALIASES:
            return _LEVEL_ALIASES[name]
        if name.isdecimal():
            return coerce_level(int(name))

    raise LoggingError(f"Invalid log level {level}")


def to_engine_level(level: Any) -> EngineLevel:
    """Translate a Helios priority into the engine level it is logged at."""
    return SEVERITY_TO_ENGINE[coerce_level(level)]
