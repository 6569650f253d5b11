# SPDX-License-Identifier: MIT
# Copyright (c) 2025 helios-logging contributors

"""Factory functions for creating logger instances."""

import importlib
import logging
from collections.abc import Mapping
from typing import Any

from .config import ConfigProvider, as_provider
from .file_config_logger import FileConfigLogger
from .logger import Logger
from .silent_logger import SilentLogger

logger = logging.getLogger(__name__)

LOGGERS_KEY = "loggers"
DEFAULT_LOGGERS = "file_config"

_LOGGER_TYPES: dict[str, type[Logger]] = {
    "file_config": FileConfigLogger,
    # names used by existing helios.ini files
    "log4perl": FileConfigLogger,
    "heliosx::logger::log4perl": FileConfigLogger,
    "silent": SilentLogger,
}


def _resolve_logger_class(logger_type: str) -> type[Logger]:
    key = logger_type.strip()
    if key.lower() in _LOGGER_TYPES:
        return _LOGGER_TYPES[key.lower()]

    if "." in key:
        module_name, _, class_name = key.rpartition(".")
        try:
            module = importlib.import_module(module_name)
            cls = getattr(module, class_name)
        except (ImportError, AttributeError) as e:
            raise ValueError(f"Cannot load logger class {key}: {e}") from e
        if not (isinstance(cls, type) and issubclass(cls, Logger)):
            raise ValueError(f"{key} is not a Logger subclass")
        return cls

    raise ValueError(
        f"Unknown logger_type: {logger_type}. "
        f"Must be one of: {', '.join(sorted(_LOGGER_TYPES))} or a dotted class path"
    )


def create_logger(
    logger_type: str,
    config: ConfigProvider | Mapping[str, Any] | None = None,
    job_type: str | None = None,
    hostname: str | None = None,
) -> Logger:
    """Factory function to create a logger instance.

    Args:
        logger_type: "file_config" (aliases "log4perl", "HeliosX::Logger::Log4perl"),
            "silent", or the dotted path of a Logger subclass
        config: Service configuration
        job_type: Service name / job type
        hostname: Host name for messages

    Returns:
        Logger instance (not yet initialized)

    Raises:
        ValueError: If logger_type is not recognized

    Example:
        >>> logger = create_logger("silent", job_type="MyApp")
        >>> logger.log_msg(None, "warning", "disk space low")
    """
    cls = _resolve_logger_class(logger_type)
    return cls(config=config, job_type=job_type, hostname=hostname)


def create_loggers(
    config: ConfigProvider | Mapping[str, Any] | None = None,
    job_type: str | None = None,
    hostname: str | None = None,
) -> list[Logger]:
    """Create every logger listed in the comma-separated ``loggers`` setting.

    Defaults to a single FileConfigLogger when ``loggers`` is not set.
    """
    provider = as_provider(config)
    names = [name for name in str(provider.get(LOGGERS_KEY) or DEFAULT_LOGGERS).split(",") if name.strip()]

    loggers = [create_logger(name, provider, job_type=job_type, hostname=hostname) for name in names]
    logger.debug("Created loggers %s for %s", [type(lg).__name__ for lg in loggers], job_type)
    return loggers
