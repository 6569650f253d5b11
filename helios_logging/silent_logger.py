# SPDX-License-Identifier: MIT
# Copyright (c) 2025 helios-logging contributors

"""Silent logger implementation for testing."""

from collections.abc import Mapping
from typing import Any

from .config import ConfigProvider
from .job import Job
from .levels import SeverityLevel, coerce_level
from .logger import Logger


class SilentLogger(Logger):
    """Logger that stores log messages in memory without output.

    Useful for testing services to verify logging behavior without
    configuring a logging engine. Messages are stored as given, without the
    job type / hostname prefix.
    """

    def __init__(
        self,
        config: ConfigProvider | Mapping[str, Any] | None = None,
        job_type: str | None = None,
        hostname: str | None = None,
    ):
        super().__init__(config=config, job_type=job_type, hostname=hostname)
        self.logs: list[dict[str, Any]] = []

    def init(self, config: ConfigProvider | Mapping[str, Any] | None = None) -> None:
        if config is not None:
            self.set_config(config)

    def log_msg(self, job: Job | None, level: Any, message: str) -> None:
        severity = SeverityLevel.INFO if level is None else coerce_level(level)
        self.logs.append(
            {
                "level": severity,
                "job_id": job.job_id if job is not None else None,
                "message": message,
            }
        )

    def clear_logs(self) -> None:
        """Clear all stored log messages (useful for testing)."""
        self.logs.clear()

    def get_logs(self, level: Any = None) -> list[dict[str, Any]]:
        """Get stored log messages, optionally filtered by level.

        Args:
            level: Optional priority level to filter by

        Returns:
            List of log entries
        """
        if level is None:
            return self.logs
        severity = coerce_level(level)
        return [log for log in self.logs if log["level"] == severity]

    def has_log(self, message: str, level: Any = None) -> bool:
        """Check if a specific log message exists.

        Args:
            message: Message to search for (substring match)
            level: Optional priority level to filter by

        Returns:
            True if message is found, False otherwise
        """
        return any(message in log["message"] for log in self.get_logs(level))
