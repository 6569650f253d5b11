# SPDX-License-Identifier: MIT
# Copyright (c) 2025 helios-logging contributors

"""Abstract logger interface for Helios logger backends."""

import socket
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from .config import ConfigProvider, as_provider
from .job import Job


class Logger(ABC):
    """Abstract base class for Helios logger backends.

    The host framework creates one logger per service, hands it the
    service's configuration, job type and hostname, calls ``init()`` and
    then ``log_msg()`` for every message.
    """

    def __init__(
        self,
        config: ConfigProvider | Mapping[str, Any] | None = None,
        job_type: str | None = None,
        hostname: str | None = None,
    ):
        """Initialize logger.

        Args:
            config: Service configuration (mapping or ConfigProvider)
            job_type: Service name / job type, used as a label in messages
            hostname: Host name for messages (default: socket.gethostname())
        """
        self._config = as_provider(config)
        self._job_type = job_type or ""
        self._hostname = hostname or socket.gethostname()

    def get_config(self) -> ConfigProvider:
        return self._config

    def set_config(self, config: ConfigProvider | Mapping[str, Any] | None) -> None:
        self._config = as_provider(config)

    def get_job_type(self) -> str:
        return self._job_type

    def set_job_type(self, job_type: str) -> None:
        self._job_type = job_type

    def get_hostname(self) -> str:
        return self._hostname

    def set_hostname(self, hostname: str) -> None:
        self._hostname = hostname

    @abstractmethod
    def init(self, config: ConfigProvider | Mapping[str, Any] | None = None) -> None:
        """Prepare the backend for logging.

        Args:
            config: Optional configuration replacing the logger's current one

        Raises:
            ConfigurationError: If required settings are missing
        """
        pass

    @abstractmethod
    def log_msg(self, job: Job | None, level: Any, message: str) -> None:
        """Log a message.

        Args:
            job: Job the message relates to, if any
            level: Priority level (SeverityLevel, 0-7, or level name);
                None means INFO
            message: The log message

        Raises:
            LoggingError: If the level is not a known priority
        """
        pass
