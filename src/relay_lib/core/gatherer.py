# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from collections.abc import Callable, Iterable, Mapping
from concurrent.futures import ALL_COMPLETED, Future, ThreadPoolExecutor, wait
from typing import Any

from .config import CFG
from .error import RelayError
from .logger import get_logger
from .result import Result

logger = get_logger(__name__)


class Gatherer:
    """
    Execute independent functions concurrently and collect their outcomes.

    Every branch is awaited before anything is returned, so callers never see
    partial results. The outcome of each branch is stored as a separate `Result`:
    a `RelayError` raised by a branch becomes a failed result, while any other
    exception is re-raised once all branches have settled.

    Attributes:
        max_workers (int): Maximal number of branches running at the same time.
    """

    def __init__(self, max_workers: int | None = None):
        self.max_workers = max_workers or CFG.gatherer.max_workers

    def gather(self, tasks: Mapping[str, Callable[[], Any]]) -> dict[str, Result]:
        """
        Run named tasks concurrently and wait for all of them.

        A task may return either a plain value or a `Result`. Plain values are
        wrapped into successful results.

        Args:
            tasks (Mapping[str, Callable[[], Any]]): Tasks to run, keyed by name.

        Returns:
            dict[str, Result]: Outcome of every task, in the order of `tasks`.
        """
        names = list(tasks.keys())
        results = self._run([tasks[name] for name in names])
        return dict(zip(names, results))

    def map(self, func: Callable[..., Any], items: Iterable[Any]) -> list[Result]:
        """
        Call `func` for every item concurrently and wait for all calls.

        Args:
            func (Callable): Function called with each item as its only argument.
            items (Iterable[Any]): Items to process.

        Returns:
            list[Result]: Outcome of every call, in the order of `items`.
        """
        return self._run([lambda item=item: func(item) for item in items])

    def _run(self, tasks: list[Callable[[], Any]]) -> list[Result]:
        if not tasks:
            return []

        logger.debug(f"Gathering {len(tasks)} concurrent branch(es).")
        executor = ThreadPoolExecutor(
            max_workers=min(self.max_workers, len(tasks)),
            thread_name_prefix="relay_gather",
        )
        try:
            futures = [executor.submit(Gatherer._settle, task) for task in tasks]
            wait(futures, return_when=ALL_COMPLETED)
        except BaseException:
            # interrupted before the barrier: abandon whatever is still running
            executor.shutdown(wait=False, cancel_futures=True)
            raise

        executor.shutdown(wait=True)
        return [Gatherer._unwrap(future) for future in futures]

    @staticmethod
    def _settle(task: Callable[[], Any]) -> Result:
        """Run a single branch, converting relay errors into failed results."""
        try:
            outcome = task()
        except RelayError as e:
            logger.debug(f"Branch failed: {e}")
            return Result.failure(e)

        if isinstance(outcome, Result):
            return outcome
        return Result.success(outcome)

    @staticmethod
    def _unwrap(future: Future) -> Result:
        # unexpected exceptions re-raise here, after every branch has settled
        return future.result()
