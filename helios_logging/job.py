# SPDX-License-Identifier: MIT
# Copyright (c) 2025 helios-logging contributors

"""Minimal job model used to prefix log messages."""

from dataclasses import dataclass


@dataclass
class Job:
    """A unit of work being processed by a Helios service.

    Only the job id matters to loggers; host frameworks may pass any object
    exposing a ``job_id`` attribute.
    """

    job_id: str
    job_type: str | None = None
