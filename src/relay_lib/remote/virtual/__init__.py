# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Virtual remote service.

`VirtualService` keeps projects, users, application records and jobs in memory
(optionally persisted to a YAML file) and `VirtualRemote` exposes it through
the `RemoteInterface`. It is used for testing and for trying relay out
without access to a real service.
"""

from .remote import VirtualRemote
from .system import VirtualService, VirtualServiceError

__all__ = ["VirtualRemote", "VirtualService", "VirtualServiceError"]
