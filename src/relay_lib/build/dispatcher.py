# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import time

from relay_lib.core.config import CFG
from relay_lib.core.error import ResolutionError
from relay_lib.core.logger import get_logger
from relay_lib.properties.app_config import AppConfig
from relay_lib.properties.build_request import BuildRequest
from relay_lib.properties.job import JobSummary
from relay_lib.properties.platform import RequestedPlatform
from relay_lib.properties.profiles import Profiles
from relay_lib.remote.interface import RemoteInterface
from relay_lib.resolve.build_profile import resolve_build_profile

logger = get_logger(__name__)


class Dispatcher:
    """
    Starts builds of a project on the remote service, one for each requested platform.
    """

    def __init__(
        self,
        remote: type[RemoteInterface],
        app_config: AppConfig,
        profiles: Profiles,
        profile_name: str,
        local: bool = False,
        skip_credentials_check: bool = False,
        wait: bool = False,
    ):
        self._remote = remote
        self._app_config = app_config
        self._profiles = profiles
        self._profile_name = profile_name
        self._local = local
        self._skip_credentials_check = skip_credentials_check
        self._wait = wait

    def makeRequests(self, platform: RequestedPlatform) -> list[BuildRequest]:
        """
        Resolve the build profile of every platform in `platform`.

        Returns:
            list[BuildRequest]: One request per platform, in platform order.

        Raises:
            ResolutionError: If the profile is missing for any of the platforms.
                All missing profiles are reported together.
        """
        results = {
            p: resolve_build_profile(self._profiles, self._profile_name, p)
            for p in platform.toAppPlatforms()
        }

        if errors := [r.enforceError() for r in results.values() if not r.ok]:
            raise ResolutionError(errors)

        return [
            BuildRequest(
                project_id=self._app_config.project_id,
                account=self._app_config.account,
                platform=p,
                profile_name=self._profile_name,
                profile=result.enforceValue(),
                local=self._local,
                skip_credentials_check=self._skip_credentials_check,
                wait=self._wait,
            )
            for p, result in results.items()
        ]

    def dispatch(self, platform: RequestedPlatform) -> list[JobSummary]:
        """
        Start a build for every platform in `platform`.

        No build is started unless the requests for all platforms can be created.
        If the dispatcher was created with `wait`, returns only after all builds completed.

        Returns:
            list[JobSummary]: Summaries of the build jobs.

        Raises:
            ResolutionError: If any build profile is missing.
            RemoteQueryError: If a build cannot be created.
        """
        summaries = []
        for request in self.makeRequests(platform):
            summary = self._remote.createBuild(request)
            logger.info(
                f"Build '{summary.id}' for {request.platform.displayName} created "
                f"using profile '{request.profile_name}'."
            )
            summaries.append(summary)

        if self._wait:
            return self.waitForBuilds(summaries)
        return summaries

    def waitForBuilds(self, summaries: list[JobSummary]) -> list[JobSummary]:
        """
        Poll the remote service until none of the builds is pending.

        Args:
            summaries (list[JobSummary]): Summaries of the builds to wait for.

        Returns:
            list[JobSummary]: Final summaries of the builds, in the order of `summaries`.

        Raises:
            RemoteQueryError: If the state of a build cannot be obtained.
        """
        logger.info(f"Waiting for {len(summaries)} build(s) to complete.")
        final: dict[str, JobSummary] = {}
        while True:
            for summary in summaries:
                if summary.id in final:
                    continue

                current = self._remote.getJobSummary(summary.id)
                if not current.status.isPending:
                    logger.info(
                        f"Build '{current.id}' for {current.platform.displayName} is {current.status}."
                    )
                    final[current.id] = current

            if len(final) == len(summaries):
                return [final[s.id] for s in summaries]

            time.sleep(CFG.build_wait.poll_interval)
