# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Guard against duplicate billable jobs.

`PendingJobGuard` asks the remote service, concurrently for every requested
platform, whether the account already has a pending job. If it does, the
summaries of all pending jobs are printed using `JobSummaryPresenter` and the
calling command is told to stop.
"""

from .guard import PendingJobGuard
from .presenter import JobSummaryPresenter

__all__ = ["PendingJobGuard", "JobSummaryPresenter"]
