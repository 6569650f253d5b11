# SPDX-License-Identifier: MIT
# Copyright (c) 2025 helios-logging contributors

"""Configuration providers for Helios logger backends.

Helios services read their settings from a helios.ini file. Values in the
``[global]`` section apply to every service; a section named after the
service (its job type) overrides them:

    [global]
    loggers=file_config
    log4perl_conf=/etc/helios_logging.conf

    [MyApp::IndexerService]
    log4perl_category=MyApp
"""

import configparser
import os
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from .errors import ConfigurationError

GLOBAL_SECTION = "global"
HELIOS_INI_ENV = "HELIOS_INI"


class ConfigProvider(ABC):
    """Abstract base class for configuration providers."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        raise NotImplementedError

    @abstractmethod
    def get_int(self, key: str, default: int | None = None) -> int | None:
        """Get an integer configuration value.

        Raises:
            ConfigurationError: If the value is set but is not an integer
        """
        raise NotImplementedError

    @abstractmethod
    def as_dict(self) -> dict[str, Any]:
        """Return a snapshot of all configuration values."""
        raise NotImplementedError


def _to_int(key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"CONFIGURATION ERROR: {key} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise ConfigurationError(
            f"CONFIGURATION ERROR: {key} must be an integer, got {value!r}"
        ) from None


class StaticConfigProvider(ConfigProvider):
    """Configuration provider with static values (useful for tests)."""

    def __init__(self, config: Mapping[str, Any] | None = None):
        self._config = dict(config) if config is not None else {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._config.get(key, default)

    def get_int(self, key: str, default: int | None = None) -> int | None:
        value = self._config.get(key)
        if value is None:
            return default
        return _to_int(key, value)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._config)

    def set(self, key: str, value: Any) -> None:
        self._config[key] = value


class IniConfigProvider(StaticConfigProvider):
    """Configuration provider backed by a helios.ini file.

    Reads ``[global]`` first, then lets the service's own section override it.
    """

    def __init__(self, path: str, service: str | None = None):
        parser = configparser.ConfigParser(interpolation=None)
        # keys are case-sensitive in helios.ini
        parser.optionxform = str  # type: ignore[assignment,method-assign]

        try:
            with open(path, "r", encoding="utf-8") as f:
                parser.read_file(f)
        except OSError as e:
            raise ConfigurationError(f"CONFIGURATION ERROR: cannot read {path}: {e}") from e
        except configparser.Error as e:
            raise ConfigurationError(f"CONFIGURATION ERROR: cannot parse {path}: {e}") from e

        values: dict[str, Any] = {}
        if parser.has_section(GLOBAL_SECTION):
            values.update(parser.items(GLOBAL_SECTION))
        if service and parser.has_section(service):
            values.update(parser.items(service))

        super().__init__(values)
        self.path = path
        self.service = service


def as_provider(config: ConfigProvider | Mapping[str, Any] | None) -> ConfigProvider:
    """Wrap a plain mapping in a StaticConfigProvider."""
    if isinstance(config, ConfigProvider):
        return config
    return StaticConfigProvider(config)


def load_service_config(path: str | None = None, service: str | None = None) -> IniConfigProvider:
    """Load the configuration for one service from helios.ini.

    Args:
        path: Path to helios.ini. Defaults to the HELIOS_INI environment variable.
        service: Section to overlay on ``[global]`` (usually the job type)

    Returns:
        IniConfigProvider with the merged values

    Raises:
        ConfigurationError: If no path is given or the file cannot be read
    """
    path = path or os.getenv(HELIOS_INI_ENV)
    if not path:
        raise ConfigurationError(
            f"CONFIGURATION ERROR: no helios.ini given and {HELIOS_INI_ENV} is not set"
        )
    return IniConfigProvider(path, service=service)
