# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Properties and structured metadata for relay jobs.

This module provides the data representations underlying relay's job model:
requested platforms, credential and archive sources, project and profile
configuration, acting users, remote job summaries, and the finished
submission options bundle.
"""
