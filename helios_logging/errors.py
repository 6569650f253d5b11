# SPDX-License-Identifier: MIT
# Copyright (c) 2025 helios-logging contributors

"""Exceptions raised by Helios logger backends."""


class HeliosLoggingError(Exception):
    """Base exception for all logger backend errors."""

    pass


class ConfigurationError(HeliosLoggingError):
    """Raised when a logger backend's configuration is missing or unusable."""

    pass


class LoggingError(HeliosLoggingError):
    """Raised when a message cannot be logged (e.g. an unknown priority level)."""

    pass
