# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import os
import threading
from pathlib import Path

from relay_lib.core.config import CFG
from relay_lib.core.error import RemoteQueryError
from relay_lib.core.logger import get_logger
from relay_lib.properties.actor import Actor
from relay_lib.properties.app_config import AppConfig
from relay_lib.properties.build_request import BuildRequest
from relay_lib.properties.job import JobKind, JobSummary
from relay_lib.properties.options import SubmissionOptions
from relay_lib.properties.platform import AppPlatform
from relay_lib.remote.interface import RemoteInterface
from relay_lib.remote.meta import RemoteMeta, remote_service

from .system import VirtualService, VirtualServiceError

logger = get_logger(__name__)


def _state_file() -> Path | None:
    return Path(path) if (path := os.environ.get(CFG.env_vars.virtual_state)) else None


@remote_service
class VirtualRemote(RemoteInterface, metaclass=RemoteMeta):
    """
    Implementation of RemoteInterface for the Virtual Service.
    """

    # created on first use
    _service: VirtualService | None = None
    _service_lock = threading.Lock()

    @staticmethod
    def envName() -> str:
        return "virtual"

    @staticmethod
    def getCurrentActor() -> Actor:
        return VirtualRemote._obtainService().actor

    @staticmethod
    def isServiceEnabledForProject(project_id: str) -> bool:
        return VirtualRemote._obtainService().isProjectEnabled(project_id)

    @staticmethod
    def getPendingJobId(account: str, platform: AppPlatform) -> str | None:
        return VirtualRemote._obtainService().pendingJobId(account, platform)

    @staticmethod
    def getJobSummary(job_id: str) -> JobSummary:
        try:
            return VirtualRemote._obtainService().jobSummary(job_id)
        except VirtualServiceError as e:
            raise RemoteQueryError(f"Could not get summary of job '{job_id}': {e}") from e

    @staticmethod
    def ensureAppRecordExists(app_config: AppConfig, apple_id: str | None) -> str:
        if not app_config.bundle_identifier:
            raise RemoteQueryError(
                f"Could not register the application: bundle identifier is not set in {CFG.project_files.app_config}."
            )

        logger.debug(
            f"Ensuring application '{app_config.bundle_identifier}' exists (apple id: {apple_id})."
        )
        try:
            service = VirtualRemote._obtainService()
            return service.ensureApp(app_config.bundle_identifier)
        except VirtualServiceError as e:
            raise RemoteQueryError(f"Could not register the application: {e}") from e

    @staticmethod
    def createBuild(request: BuildRequest) -> JobSummary:
        try:
            return VirtualRemote._obtainService().createJob(
                JobKind.BUILD,
                request.project_id,
                request.account,
                request.platform,
                request.profile_name,
            )
        except VirtualServiceError as e:
            raise RemoteQueryError(f"Could not create a build: {e}") from e

    @staticmethod
    def createSubmission(options: SubmissionOptions) -> JobSummary:
        try:
            return VirtualRemote._obtainService().createJob(
                JobKind.SUBMISSION,
                options.project_id,
                options.account,
                options.platform,
            )
        except VirtualServiceError as e:
            raise RemoteQueryError(f"Could not create a submission: {e}") from e

    @staticmethod
    def _obtainService() -> VirtualService:
        """
        Return the Virtual Service, loading its state file on the first call.

        Raises:
            RemoteQueryError: If the state file cannot be loaded.
        """
        with VirtualRemote._service_lock:
            if VirtualRemote._service is None:
                try:
                    VirtualRemote._service = VirtualService(_state_file())
                except VirtualServiceError as e:
                    raise RemoteQueryError(
                        f"Could not start the virtual service: {e}"
                    ) from e
            return VirtualRemote._service
