# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Starting builds of the app.

Before any build is dispatched, `relay build` checks that the remote service
is enabled for the project, that a local build can run on this machine
(`verify_options_for_local_builds`), that no other job of the account is
pending, and that the project has a profiles file (`ensure_project_configured`).
`Dispatcher` then resolves the build profile for every platform and creates
the builds.
"""

from .configure import ensure_project_configured, is_git_status_clean
from .dispatcher import Dispatcher
from .policy import verify_options_for_local_builds

__all__ = [
    "Dispatcher",
    "ensure_project_configured",
    "is_git_status_clean",
    "verify_options_for_local_builds",
]
