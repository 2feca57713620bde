# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Success/failure values used by resolvers.

A `Result` holds either a value or an error, never both. Callers check the
`ok` flag before reaching into either arm; `enforceValue` and `enforceError`
treat access to the wrong arm as a bug and raise `ResultAccessError`.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Self, TypeVar

from .error import RelayError, ResultAccessError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a single resolution step.
    """

    # True if the result holds a value.
    ok: bool

    # Value of a successful result.
    value: T | None = None

    # Error of a failed result.
    error: BaseException | None = None

    def __post_init__(self):
        if self.ok and self.error is not None:
            raise ValueError("A successful result cannot hold an error.")
        if not self.ok and self.error is None:
            raise ValueError("A failed result must hold an error.")
        if not self.ok and self.value is not None:
            raise ValueError("A failed result cannot hold a value.")

    @classmethod
    def success(cls, value: T) -> Self:
        """Create a successful result holding `value`."""
        return cls(True, value=value)

    @classmethod
    def failure(cls, error: BaseException) -> Self:
        """Create a failed result holding `error`."""
        return cls(False, error=error)

    @classmethod
    def fromCall(cls, func: Callable[..., T], *args: Any, **kwargs: Any) -> Self:
        """
        Call `func` and wrap its outcome.

        A `RelayError` raised by `func` is converted into a failed result.
        Any other exception propagates.
        """
        try:
            return cls.success(func(*args, **kwargs))
        except RelayError as e:
            return cls.failure(e)

    def enforceValue(self) -> T:
        """
        Return the value of a successful result.

        Raises:
            ResultAccessError: If the result is a failure.
        """
        if not self.ok:
            raise ResultAccessError(
                f"Attempted to read the value of a failed result: {self.error}"
            )
        return self.value  # ty: ignore[invalid-return-type]

    def valueOrRaise(self) -> T:
        """
        Return the value of a successful result or raise the error of a failed one.
        """
        if not self.ok:
            raise self.enforceError()
        return self.value  # ty: ignore[invalid-return-type]

    def enforceError(self) -> BaseException:
        """
        Return the error of a failed result.

        Raises:
            ResultAccessError: If the result is a success.
        """
        if self.ok or self.error is None:
            raise ResultAccessError("Attempted to read the error of a successful result.")
        return self.error


def ok(value: T) -> Result[T]:
    """Shorthand for `Result.success`."""
    return Result.success(value)


def err(error: BaseException) -> Result[Any]:
    """Shorthand for `Result.failure`."""
    return Result.failure(error)
