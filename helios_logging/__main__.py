# SPDX-License-Identifier: MIT
# Copyright (c) 2025 helios-logging contributors

"""Command-line entry point: log one message through a service's loggers.

Usage:
    python -m helios_logging --ini helios.ini --service MyApp --level warning disk space low
"""

import argparse
import sys

from .config import load_service_config
from .errors import HeliosLoggingError
from .factory import create_loggers
from .job import Job


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    parser = argparse.ArgumentParser(
        prog="python -m helios_logging",
        description="Log a message through the loggers configured for a Helios service",
    )
    parser.add_argument(
        "--ini",
        default=None,
        help="Path to helios.ini (default: $HELIOS_INI)"
    )
    parser.add_argument(
        "--service",
        required=True,
        help="Service name / job type; selects the helios.ini section"
    )
    parser.add_argument(
        "--level",
        default=None,
        help="Priority level, e.g. debug, notice, LOG_ERR or 0-7 (default: info)"
    )
    parser.add_argument(
        "--job-id",
        default=None,
        help="Job id to prefix the message with"
    )
    parser.add_argument(
        "--hostname",
        default=None,
        help="Host name to report (default: this host)"
    )
    parser.add_argument("message", nargs="+", help="Message text")

    args = parser.parse_args(argv)

    job = Job(job_id=args.job_id, job_type=args.service) if args.job_id else None
    message = " ".join(args.message)

    try:
        config = load_service_config(args.ini, service=args.service)
        for logger in create_loggers(config, job_type=args.service, hostname=args.hostname):
            logger.init()
            logger.log_msg(job, args.level, message)
    except (HeliosLoggingError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
