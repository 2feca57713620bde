# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from collections.abc import Callable
from typing import Generic, TypeVar

from .error import MissingInputError
from .logger import get_logger
from .result import Result

logger = get_logger(__name__)

T = TypeVar("T")


def is_missing_input(error: BaseException) -> bool:
    """Return True if the error only signals that a source is absent."""
    return isinstance(error, MissingInputError)


class FallbackChain(Generic[T]):
    """
    Ordered sequence of resolvers tried until one succeeds.

    The earlier a resolver appears in the chain, the higher its priority.
    A failed resolver hands over to the next one only if its error is
    classified as recoverable; any other failure ends the chain immediately.
    """

    def __init__(
        self,
        *resolvers: Callable[[], Result[T]],
        is_recoverable: Callable[[BaseException], bool] = is_missing_input,
    ):
        if not resolvers:
            raise ValueError("FallbackChain requires at least one resolver")
        self.resolvers = list(resolvers)
        self._is_recoverable = is_recoverable

    def resolve(self) -> Result[T]:
        """
        Evaluate the resolvers in order.

        Returns:
            Result[T]: The first successful result, the first terminal failure,
            or the last failure if every resolver failed recoverably.
        """
        result: Result[T] | None = None
        for resolver in self.resolvers:
            result = resolver()
            if result.ok:
                return result

            error = result.enforceError()
            if not self._is_recoverable(error):
                logger.debug(f"Terminal failure in fallback chain: {error}")
                return result

            logger.debug(f"Falling back after recoverable failure: {error}")

        return result  # ty: ignore[invalid-return-type]
