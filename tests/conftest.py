# SPDX-License-Identifier: MIT
# Copyright (c) 2025 helios-logging contributors

"""Shared fixtures for helios_logging tests."""

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from helios_logging import engine as engine_module
from helios_logging.engine import LoggerHandle, LoggingEngine

TEST_CATEGORIES = ("MyApp", "Foo", "json.category")


def write_ini_logging_config(path: Path, log_file: Path, category: str = "MyApp", level: str = "DEBUG") -> Path:
    """Write a fileConfig file routing ``category`` to ``log_file``."""
    path.write_text(
        "[loggers]\n"
        "keys=root,app\n"
        "\n"
        "[handlers]\n"
        "keys=file\n"
        "\n"
        "[formatters]\n"
        "keys=plain\n"
        "\n"
        "[logger_root]\n"
        "level=WARNING\n"
        "handlers=\n"
        "\n"
        "[logger_app]\n"
        f"level={level}\n"
        "handlers=file\n"
        f"qualname={category}\n"
        "propagate=0\n"
        "\n"
        "[handler_file]\n"
        "class=FileHandler\n"
        "level=DEBUG\n"
        "formatter=plain\n"
        f"args=({str(log_file)!r}, 'a')\n"
        "\n"
        "[formatter_plain]\n"
        "format=%(levelname)s %(name)s %(message)s\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def log_file(tmp_path: Path) -> Path:
    return tmp_path / "helios.log"


@pytest.fixture
def ini_conf(tmp_path: Path, log_file: Path) -> Path:
    """A fileConfig logging config routing MyApp to log_file."""
    return write_ini_logging_config(tmp_path / "logging.conf", log_file)


@pytest.fixture
def handle() -> MagicMock:
    return MagicMock(spec=LoggerHandle)


@pytest.fixture
def fake_engine(handle: MagicMock) -> MagicMock:
    """An already-initialized engine whose loggers all share one handle."""
    engine = MagicMock(spec=LoggingEngine)
    engine.is_initialized.return_value = True
    engine.get_logger.return_value = handle
    return engine


@pytest.fixture(autouse=True)
def reset_logging_state():
    """Reset the default engine and close handlers installed by tests."""
    root = logging.getLogger()
    root_level = root.level
    root_handlers = list(root.handlers)
    engine_module.set_default_engine(None)
    yield
    engine_module.set_default_engine(None)
    root.setLevel(root_level)
    for h in root_handlers:
        if h not in root.handlers:
            root.addHandler(h)
    for name in TEST_CATEGORIES:
        stdlib_logger = logging.getLogger(name)
        for h in list(stdlib_logger.handlers):
            stdlib_logger.removeHandler(h)
            h.close()
        stdlib_logger.setLevel(logging.NOTSET)
        stdlib_logger.propagate = True


@pytest.fixture
def write_logging_config():
    """Return the helper writing fileConfig files, for tests needing several."""
    return write_ini_logging_config
