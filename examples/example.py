#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 helios-logging contributors

"""Example usage of the helios_logging module.

Writes a logging config file and a helios.ini to a temporary directory,
then logs a few messages the way a Helios service would.
"""

import tempfile
from pathlib import Path

from helios_logging import Job, SeverityLevel, create_loggers, load_service_config

LOGGING_CONF = """\
[loggers]
keys=root,myapp

[handlers]
keys=console

[formatters]
keys=plain

[logger_root]
level=WARNING
handlers=console

[logger_myapp]
level=DEBUG
handlers=console
qualname=MyApp
propagate=0

[handler_console]
class=StreamHandler
level=DEBUG
formatter=plain
args=(sys.stdout,)

[formatter_plain]
format=%(asctime)s %(levelname)-8s [%(name)s] %(message)s
"""


def main():
    """Demonstrate logging functionality."""

    print("=" * 60)
    print("Helios Logging Examples")
    print("=" * 60)
    print()

    with tempfile.TemporaryDirectory() as tmp:
        conf = Path(tmp) / "logging.conf"
        conf.write_text(LOGGING_CONF, encoding="utf-8")
        ini = Path(tmp) / "helios.ini"
        ini.write_text(
            "[global]\n"
            f"log4perl_conf={conf}\n"
            "\n"
            "[MyApp::IndexerService]\n"
            "log4perl_category=MyApp\n",
            encoding="utf-8",
        )

        # Example 1: all 8 Helios priorities
        print("Example 1: Helios priorities translated to logging levels")
        print("-" * 60)
        config = load_service_config(str(ini), service="MyApp::IndexerService")
        (logger,) = create_loggers(config, job_type="MyApp::IndexerService")
        logger.init()
        for level in SeverityLevel:
            logger.log_msg(None, level, f"logged at {level.name}")
        print()

        # Example 2: job prefix and default level
        print("Example 2: Messages about a job, default INFO level")
        print("-" * 60)
        logger.log_msg(Job(job_id="42"), None, "job started")
        logger.log_msg(Job(job_id="42"), "LOG_ERR", "job failed")
        print()


if __name__ == "__main__":
    main()
