# SPDX-License-Identifier: MIT
# Copyright (c) 2025 helios-logging contributors

"""Logging engine facade.

Logger backends never configure the standard library directly; they go
through a LoggingEngine so the engine can be swapped out in tests. The
default engine applies a ``logging.config`` file (INI for ``fileConfig``,
JSON for ``dictConfig``) and can re-read it periodically in watch mode.
"""

import json
import logging
import logging.config
import os
import threading
import time
from abc import ABC, abstractmethod
from typing import Callable

logger = logging.getLogger(__name__)


class LoggerHandle(ABC):
    """Handle for logging to one engine category."""

    @abstractmethod
    def debug(self, message: str) -> None:
        pass

    @abstractmethod
    def info(self, message: str) -> None:
        pass

    @abstractmethod
    def warn(self, message: str) -> None:
        pass

    @abstractmethod
    def error(self, message: str) -> None:
        pass

    @abstractmethod
    def fatal(self, message: str) -> None:
        pass


class LoggingEngine(ABC):
    """Abstract base class for logging engines."""

    @abstractmethod
    def initialize(self, config_path: str) -> None:
        """Configure the engine once from a configuration file."""
        pass

    @abstractmethod
    def initialize_with_watch(self, config_path: str, interval: int) -> None:
        """Configure the engine and re-read the file every ``interval`` seconds."""
        pass

    @abstractmethod
    def is_initialized(self) -> bool:
        """Return True once the engine has been configured."""
        pass

    @abstractmethod
    def get_logger(self, category: str) -> LoggerHandle:
        """Return a handle for the given category."""
        pass


class StdlibLoggerHandle(LoggerHandle):
    """LoggerHandle writing to a standard library logger."""

    def __init__(self, stdlib_logger: logging.Logger):
        self._logger = stdlib_logger

    @property
    def name(self) -> str:
        return self._logger.name

    def debug(self, message: str) -> None:
        self._logger.debug(message)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warn(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)

    def fatal(self, message: str) -> None:
        self._logger.critical(message)


def apply_config_file(config_path: str) -> None:
    """Apply a logging configuration file to the standard library.

    ``.json`` files are read as ``dictConfig`` dictionaries, anything else as
    a ``fileConfig`` INI file. Loggers created before the call stay enabled.
    """
    if config_path.lower().endswith(".json"):
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
        config.setdefault("version", 1)
        config.setdefault("disable_existing_loggers", False)
        logging.config.dictConfig(config)
    else:
        logging.config.fileConfig(config_path, disable_existing_loggers=False)


class StdlibLoggingEngine(LoggingEngine):
    """Logging engine backed by the standard library ``logging`` package.

    Watch mode does not start a thread. Like Log4perl's init_and_watch, the
    file is checked when a logger is requested, at most once per interval,
    and re-applied only if its modification time changed.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._lock = threading.RLock()
        self._initialized = False
        self._config_path: str | None = None
        self._watch_interval: int | None = None
        self._last_check = 0.0
        self._last_mtime: float | None = None

    @property
    def config_path(self) -> str | None:
        return self._config_path

    @property
    def watch_interval(self) -> int | None:
        return self._watch_interval

    def initialize(self, config_path: str) -> None:
        with self._lock:
            apply_config_file(config_path)
            self._config_path = config_path
            self._watch_interval = None
            self._initialized = True
        logger.debug("Logging engine initialized from %s", config_path)

    def initialize_with_watch(self, config_path: str, interval: int) -> None:
        with self._lock:
            apply_config_file(config_path)
            self._config_path = config_path
            self._watch_interval = interval
            self._last_check = self._clock()
            self._last_mtime = os.path.getmtime(config_path)
            self._initialized = True
        logger.debug("Logging engine watching %s every %ss", config_path, interval)

    def is_initialized(self) -> bool:
        with self._lock:
            return self._initialized

    def get_logger(self, category: str) -> LoggerHandle:
        self._check_for_changes()
        return StdlibLoggerHandle(logging.getLogger(category))

    def reset(self) -> None:
        """Forget the current configuration (useful for testing)."""
        with self._lock:
            self._initialized = False
            self._config_path = None
            self._watch_interval = None
            self._last_check = 0.0
            self._last_mtime = None

    def _check_for_changes(self) -> None:
        with self._lock:
            if not self._watch_interval or not self._config_path:
                return

            now = self._clock()
            if now - self._last_check < self._watch_interval:
                return
            self._last_check = now

            try:
                mtime = os.path.getmtime(self._config_path)
            except OSError as e:
                logger.warning("Cannot stat logging config %s: %s", self._config_path, e)
                return

            if mtime == self._last_mtime:
                return

            try:
                apply_config_file(self._config_path)
            except Exception as e:
                # keep the previous configuration; a broken edit must not stop logging
                logger.error("Failed to reload logging config %s: %s", self._config_path, e)
                self._last_mtime = mtime
                return

            self._last_mtime = mtime
        logger.info("Reloaded logging config %s", self._config_path)


_default_engine: LoggingEngine | None = None
_default_engine_lock = threading.Lock()


def get_default_engine() -> LoggingEngine:
    """Return the process-wide logging engine, creating it on first use."""
    global _default_engine
    with _default_engine_lock:
        if _default_engine is None:
            _default_engine = StdlibLoggingEngine()
        return _default_engine


def set_default_engine(engine: LoggingEngine | None) -> None:
    """Replace the process-wide logging engine (``None`` resets it)."""
    global _default_engine
    with _default_engine_lock:
        _default_engine = engine
