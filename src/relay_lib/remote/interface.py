# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from abc import ABC

from relay_lib.properties.actor import Actor
from relay_lib.properties.app_config import AppConfig
from relay_lib.properties.build_request import BuildRequest
from relay_lib.properties.job import JobSummary
from relay_lib.properties.options import SubmissionOptions
from relay_lib.properties.platform import AppPlatform


class RemoteInterface(ABC):
    """
    Abstract base class for remote build service integrations.

    Concrete services must implement these methods to allow relay
    to query and drive different services uniformly.

    All functions should raise RemoteQueryError when encountering an error
    and must be safe to call concurrently for distinct arguments.
    """

    @staticmethod
    def envName() -> str:
        """
        Return the name of the remote service.

        Returns:
            str: The service name.
        """
        raise NotImplementedError(
            "envName method is not implemented for this remote service implementation"
        )

    @staticmethod
    def getCurrentActor() -> Actor:
        """
        Return the user relay acts on behalf of.

        Returns:
            Actor: The logged-in user.

        Raises:
            RemoteQueryError: If no user is logged in or the service cannot be reached.
        """
        raise NotImplementedError(
            "getCurrentActor method is not implemented for this remote service implementation"
        )

    @staticmethod
    def isServiceEnabledForProject(project_id: str) -> bool:
        """
        Determine whether the project may use the remote service.

        Args:
            project_id (str): Identifier of the project.

        Returns:
            bool: True if the service is enabled for the project.
        """
        raise NotImplementedError(
            "isServiceEnabledForProject method is not implemented for this remote service implementation"
        )

    @staticmethod
    def getPendingJobId(account: str, platform: AppPlatform) -> str | None:
        """
        Return the identifier of a pending job of the account for the platform.

        Args:
            account (str): Name of the account.
            platform (AppPlatform): Platform to check.

        Returns:
            str | None: Identifier of a pending job or None if there is none.

        Raises:
            RemoteQueryError: If the query fails.
        """
        raise NotImplementedError(
            "getPendingJobId method is not implemented for this remote service implementation"
        )

    @staticmethod
    def getJobSummary(job_id: str) -> JobSummary:
        """
        Return the summary of a job.

        Args:
            job_id (str): Identifier of the job.

        Returns:
            JobSummary: Summary of the job.

        Raises:
            RemoteQueryError: If the job does not exist or the query fails.
        """
        raise NotImplementedError(
            "getJobSummary method is not implemented for this remote service implementation"
        )

    @staticmethod
    def ensureAppRecordExists(app_config: AppConfig, apple_id: str | None) -> str:
        """
        Make sure the application is registered in the store and return its identifier.

        Args:
            app_config (AppConfig): App config of the project.
            apple_id (str | None): Apple ID to register the application with.

        Returns:
            str: Identifier of the application in the store.

        Raises:
            RemoteQueryError: If the application cannot be found or registered.
        """
        raise NotImplementedError(
            "ensureAppRecordExists method is not implemented for this remote service implementation"
        )

    @staticmethod
    def createBuild(request: BuildRequest) -> JobSummary:
        """
        Start a build.

        Args:
            request (BuildRequest): Resolved inputs of the build.

        Returns:
            JobSummary: Summary of the created build job.

        Raises:
            RemoteQueryError: If the build cannot be created.
        """
        raise NotImplementedError(
            "createBuild method is not implemented for this remote service implementation"
        )

    @staticmethod
    def createSubmission(options: SubmissionOptions) -> JobSummary:
        """
        Start a submission.

        Args:
            options (SubmissionOptions): Resolved inputs of the submission.

        Returns:
            JobSummary: Summary of the created submission job.

        Raises:
            RemoteQueryError: If the submission cannot be created.
        """
        raise NotImplementedError(
            "createSubmission method is not implemented for this remote service implementation"
        )
