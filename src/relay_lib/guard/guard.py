# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from rich.console import Console

from relay_lib.core.gatherer import Gatherer
from relay_lib.core.logger import get_logger
from relay_lib.core.result import Result
from relay_lib.properties.actor import Actor
from relay_lib.properties.job import JobSummary
from relay_lib.properties.platform import RequestedPlatform
from relay_lib.remote.interface import RemoteInterface

from .presenter import JobSummaryPresenter

logger = get_logger(__name__)


class PendingJobGuard:
    """
    Prevents starting a job while other jobs of the same account are still pending.

    Each pending job is billable, so the guard refuses to let the user start
    another one without noticing the jobs that are already waiting.
    A failed query is never interpreted as "no pending job": the error propagates.
    """

    def __init__(self, remote: type[RemoteInterface], gatherer: Gatherer | None = None):
        """
        Initialize the guard.

        Args:
            remote (type[RemoteInterface]): Remote service to query.
            gatherer (Gatherer | None): Gatherer used to run the queries concurrently.
                If not provided, a new Gatherer is created.
        """
        self._remote = remote
        self._gatherer = gatherer or Gatherer()

    def isBlocked(
        self,
        account: str,
        platform: RequestedPlatform,
        actor: Actor,
        console: Console | None = None,
    ) -> bool:
        """
        Check whether the account has pending jobs for any of the requested platforms.

        Privileged users are never blocked and no query is made for them.
        Pending jobs are reported to the user.

        Args:
            account (str): Name of the account.
            platform (RequestedPlatform): Requested platform selection.
            actor (Actor): User relay acts on behalf of.
            console (Console | None): Console to print the pending jobs to.

        Returns:
            bool: True if the command must not continue.

        Raises:
            RemoteQueryError: If any of the queries fails.
        """
        if actor.is_admin:
            logger.debug(f"User '{actor.username}' is not limited by pending jobs.")
            return False

        pending_ids = [
            job_id
            for job_id in PendingJobGuard._enforceAll(
                self._gatherer.map(
                    lambda p: self._remote.getPendingJobId(account, p),
                    platform.toAppPlatforms(),
                )
            )
            if job_id is not None
        ]

        if not pending_ids:
            logger.debug(f"No pending jobs for account '{account}'.")
            return False

        summaries: list[JobSummary] = PendingJobGuard._enforceAll(
            self._gatherer.map(self._remote.getJobSummary, pending_ids)
        )

        logger.error(
            "Your other jobs are still pending. Wait for them to complete before running this command again."
        )
        console = console or Console()
        for summary in summaries:
            console.print(JobSummaryPresenter(summary).createPanel(console))

        return True

    @staticmethod
    def _enforceAll(results: list[Result]) -> list:
        """Return the values of all results or raise the first error encountered."""
        for result in results:
            if not result.ok:
                raise result.enforceError()
        return [result.enforceValue() for result in results]
