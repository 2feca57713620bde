# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core infrastructure for relay.

This module collects the foundational classes, utilities, and helpers used
across the relay codebase: configuration, structured logging, error types,
result values, concurrent fan-out, fallback chains, and user prompts.
"""
