# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Abstractions for talking to the remote build service.

- `RemoteInterface`: the abstract interface every service backend implements.
  It covers the queries relay needs to decide what to submit and whether it is
  safe to submit: the acting user, project eligibility, pending jobs, job
  summaries, store application records, and job creation.

- `RemoteMeta`: a metaclass that registers available backends and selects one
  by name, from an environment variable, or from the configured default.
  The `@remote_service` decorator registers implementations automatically.

- `VirtualRemote`: an in-process stand-in for the service.
"""

from .interface import RemoteInterface
from .meta import RemoteMeta, remote_service

# import so that the virtual service is registered
from .virtual import VirtualRemote

__all__ = ["RemoteInterface", "RemoteMeta", "remote_service", "VirtualRemote"]
