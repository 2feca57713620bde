# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Submission of app archives to the stores.

`ContextFactory` merges the command line with the submit profile of the
project, `OptionsBuilder` runs all resolvers of the platform and either
produces a complete `SubmissionOptions` or reports every failure at once,
and `Submitter` hands the options over to the remote service.
"""

from .builder import OptionsBuilder
from .factory import ContextFactory
from .submitter import Submitter

__all__ = ["ContextFactory", "OptionsBuilder", "Submitter"]
