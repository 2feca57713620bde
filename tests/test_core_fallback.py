# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from unittest.mock import MagicMock

import pytest

from relay_lib.core.error import (
    MalformedInputError,
    MissingCredentialsError,
    MissingInputError,
    RemoteQueryError,
)
from relay_lib.core.fallback import FallbackChain, is_missing_input
from relay_lib.core.result import err, ok


def test_is_missing_input():
    assert is_missing_input(MissingInputError("x"))
    assert is_missing_input(MissingCredentialsError("x"))
    assert not is_missing_input(MalformedInputError("x"))
    assert not is_missing_input(RemoteQueryError("x"))


def test_fallback_chain_requires_resolvers():
    with pytest.raises(ValueError):
        FallbackChain()


def test_fallback_chain_returns_first_success_and_stops():
    first = MagicMock(return_value=ok("first"))
    second = MagicMock(return_value=ok("second"))

    result = FallbackChain(first, second).resolve()

    assert result.enforceValue() == "first"
    second.assert_not_called()


def test_fallback_chain_skips_missing_input():
    first = MagicMock(return_value=err(MissingInputError("absent")))
    second = MagicMock(return_value=ok("second"))

    result = FallbackChain(first, second).resolve()

    assert result.enforceValue() == "second"
    first.assert_called_once()
    second.assert_called_once()


def test_fallback_chain_stops_at_terminal_failure():
    error = MalformedInputError("partial")
    first = MagicMock(return_value=err(error))
    second = MagicMock(return_value=ok("second"))

    result = FallbackChain(first, second).resolve()

    assert result.enforceError() is error
    second.assert_not_called()


def test_fallback_chain_returns_last_failure_if_all_missing():
    last = MissingInputError("last")
    result = FallbackChain(
        lambda: err(MissingInputError("first")),
        lambda: err(last),
    ).resolve()

    assert result.enforceError() is last


def test_fallback_chain_custom_classifier():
    second = MagicMock(return_value=ok("second"))

    chain = FallbackChain(
        lambda: err(MissingInputError("not a credentials error")),
        second,
        is_recoverable=lambda e: isinstance(e, MissingCredentialsError),
    )
    result = chain.resolve()

    assert isinstance(result.enforceError(), MissingInputError)
    second.assert_not_called()


def test_fallback_chain_is_deterministic():
    chain = FallbackChain(
        lambda: err(MissingInputError("a")),
        lambda: ok("b"),
        lambda: ok("c"),
    )

    assert [chain.resolve().enforceValue() for _ in range(5)] == ["b"] * 5
