# SPDX-License-Identifier: MIT
# Copyright (c) 2025 helios-logging contributors

"""Logger backend that writes through a file-configured logging engine.

Settings read from the service configuration:

    log4perl_conf            [required] path to the logging config file
    log4perl_category        category to log to (default: the job type)
    log4perl_watch_interval  re-read log4perl_conf every N seconds

The key names are the ones existing helios.ini files already use.
"""

import os
import threading
from collections.abc import Mapping
from typing import Any

from .config import ConfigProvider
from .engine import LoggerHandle, LoggingEngine, get_default_engine
from .errors import ConfigurationError
from .job import Job
from .levels import EngineLevel, to_engine_level
from .logger import Logger

CONF_KEY = "log4perl_conf"
CATEGORY_KEY = "log4perl_category"
WATCH_INTERVAL_KEY = "log4perl_watch_interval"

# Guards the lazy is_initialized()/init() sequence in log_msg
_init_lock = threading.Lock()


def format_message(job_type: str, hostname: str, message: str, job: Job | None = None) -> str:
    """Assemble ``[Job:<id> ]<jobType> (<hostname>) <message>``."""
    text = f"{job_type} ({hostname}) {message}"
    if job is not None:
        text = f"Job:{job.job_id} {text}"
    return text


class FileConfigLogger(Logger):
    """Logger that forwards Helios messages to the logging engine."""

    def __init__(
        self,
        config: ConfigProvider | Mapping[str, Any] | None = None,
        job_type: str | None = None,
        hostname: str | None = None,
        engine: LoggingEngine | None = None,
    ):
        """Initialize the logger.

        Args:
            config: Service configuration (see module docstring for keys)
            job_type: Service name / job type
            hostname: Host name for messages (default: socket.gethostname())
            engine: Logging engine to use (default: the process-wide engine)
        """
        super().__init__(config=config, job_type=job_type, hostname=hostname)
        self._engine = engine

    @property
    def engine(self) -> LoggingEngine:
        if self._engine is None:
            return get_default_engine()
        return self._engine

    def init(self, config: ConfigProvider | Mapping[str, Any] | None = None) -> None:
        """Verify log4perl_conf is readable and configure the engine from it.

        Uses watch mode when log4perl_watch_interval is set.

        Raises:
            ConfigurationError: If log4perl_conf is unset or unreadable, or the
                watch interval is not a positive integer
        """
        if config is not None:
            self.set_config(config)
        config = self.get_config()

        conf_path = config.get(CONF_KEY)
        if not conf_path or not os.path.isfile(conf_path) or not os.access(conf_path, os.R_OK):
            raise ConfigurationError(f"CONFIGURATION ERROR: {CONF_KEY} not defined")

        interval = config.get_int(WATCH_INTERVAL_KEY)
        if interval is not None:
            if interval <= 0:
                raise ConfigurationError(
                    f"CONFIGURATION ERROR: {WATCH_INTERVAL_KEY} must be positive, got {interval}"
                )
            self.engine.initialize_with_watch(conf_path, interval)
        else:
            self.engine.initialize(conf_path)

    def get_category(self) -> str:
        """Return the configured category, falling back to the job type."""
        category = self.get_config().get(CATEGORY_KEY)
        if category is not None:
            return category
        return self.get_job_type()

    def log_msg(self, job: Job | None, level: Any, message: str) -> None:
        """Log a message at the engine level matching the Helios priority.

        A level of None is logged at INFO.

        Raises:
            ConfigurationError: If the engine needed initializing and the
                configuration is unusable
            LoggingError: If the level is not one of the 8 Helios priorities
        """
        engine = self.engine
        if not engine.is_initialized():
            with _init_lock:
                if not engine.is_initialized():
                    self.init()

        # validate before touching the engine so a bad level logs nothing
        engine_level = EngineLevel.INFO if level is None else to_engine_level(level)

        handle = engine.get_logger(self.get_category())
        text = format_message(self.get_job_type(), self.get_hostname(), message, job)
        _dispatch(handle, engine_level, text)


def _dispatch(handle: LoggerHandle, level: EngineLevel, text: str) -> None:
    if level is EngineLevel.DEBUG:
        handle.debug(text)
    elif level is EngineLevel.INFO:
        handle.info(text)
    elif level is EngineLevel.WARN:
        handle.warn(text)
    elif level is EngineLevel.ERROR:
        handle.error(text)
    elif level is EngineLevel.FATAL:
        handle.fatal(text)
    else:
        raise AssertionError(f"Unhandled engine level {level!r}")
