# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core implementation of the relay command-line tool.

This package provides the logic behind relay's build and submission workflow.
It defines the abstraction of the remote build service together with an
in-process virtual backend, resolvers collecting submission inputs from flags,
profiles, the environment and the user, fan-out and fallback primitives used to
combine them, and the guard preventing duplicate billable jobs. All relay CLI
commands ultimately delegate to the functionality implemented here.
"""

from .relay import __version__, cli

__all__ = [
    "__version__",
    "cli",
    "build",
    "core",
    "guard",
    "properties",
    "remote",
    "resolve",
    "submit",
]
