# SPDX-License-Identifier: MIT
# Copyright (c) 2025 helios-logging contributors

"""Helios logger backends.

Bridges Helios service logging calls to a logging engine configured from a
standard ``logging.config`` file, translating Helios's 8 syslog-style
priorities to the engine's 5 levels and prefixing each message with the job
id, job type and hostname.

Example:
    >>> from helios_logging import FileConfigLogger, Job, SeverityLevel
    >>>
    >>> logger = FileConfigLogger(
    ...     config={"log4perl_conf": "/etc/helios_logging.conf"},
    ...     job_type="MyApp",
    ... )
    >>> logger.init()
    >>> logger.log_msg(Job(job_id="42"), SeverityLevel.NOTICE, "started")
    >>> # logged at INFO as "Job:42 MyApp (<hostname>) started"
"""

__version__ = "0.1.0"

from .config import ConfigProvider, IniConfigProvider, StaticConfigProvider, load_service_config
from .engine import (
    LoggerHandle,
    LoggingEngine,
    StdlibLoggingEngine,
    get_default_engine,
    set_default_engine,
)
from .errors import ConfigurationError, HeliosLoggingError, LoggingError
from .factory import create_logger, create_loggers
from .file_config_logger import FileConfigLogger, format_message
from .job import Job
from .levels import SEVERITY_TO_ENGINE, EngineLevel, SeverityLevel, coerce_level, to_engine_level
from .logger import Logger
from .silent_logger import SilentLogger

__all__ = [
    "__version__",
    "ConfigProvider",
    "ConfigurationError",
    "EngineLevel",
    "FileConfigLogger",
    "HeliosLoggingError",
    "IniConfigProvider",
    "Job",
    "Logger",
    "LoggerHandle",
    "LoggingEngine",
    "LoggingError",
    "SEVERITY_TO_ENGINE",
    "SeverityLevel",
    "SilentLogger",
    "StaticConfigProvider",
    "StdlibLoggingEngine",
    "coerce_level",
    "create_logger",
    "create_loggers",
    "format_message",
    "get_default_engine",
    "load_service_config",
    "set_default_engine",
    "to_engine_level",
]
