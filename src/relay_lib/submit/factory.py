# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import replace
from pathlib import Path

from relay_lib.core.config import CFG
from relay_lib.core.logger import get_logger
from relay_lib.core.prompter import Prompter
from relay_lib.properties.app_config import AppConfig
from relay_lib.properties.context import SubmissionContext
from relay_lib.properties.platform import AppPlatform
from relay_lib.properties.profiles import Profiles, SubmitProfile
from relay_lib.remote.interface import RemoteInterface

logger = get_logger(__name__)


class ContextFactory:
    """
    Factory class to construct a SubmissionContext based on parameters from
    the command-line and from the profiles file of the project.
    """

    def __init__(
        self,
        app_config: AppConfig,
        project_dir: Path,
        platform: AppPlatform,
        remote: type[RemoteInterface],
        prompter: Prompter,
        profile_name: str | None = None,
        **kwargs,
    ):
        """
        Initialize the factory.

        Args:
            app_config (AppConfig): App config of the project.
            project_dir (Path): Root directory of the project.
            platform (AppPlatform): Platform of the submission.
            remote (type[RemoteInterface]): Remote service to use.
            prompter (Prompter): Gateway for questions asked to the user.
            profile_name (str | None): Name of the submit profile.
            **kwargs: Archive overrides from the command line.
        """
        self._app_config = app_config
        self._project_dir = project_dir
        self._platform = platform
        self._remote = remote
        self._prompter = prompter
        self._profile_name = profile_name
        self._kwargs = kwargs

    def makeContext(self) -> SubmissionContext:
        """
        Construct the context of the submission.

        Raises:
            MalformedInputError: If the profiles file is invalid.
            MissingInputError: If the requested profile does not exist.
        """
        profile_name = self._getProfileName()
        return SubmissionContext(
            app_config=self._app_config,
            platform=self._platform,
            profile_name=profile_name,
            profile=self._getProfile(profile_name),
            remote=self._remote,
            prompter=self._prompter,
        )

    def _getProfileName(self) -> str:
        """
        Determine the name of the submit profile.

        Priority:
            1. Command-line option
            2. Configured default
        """
        return self._profile_name or CFG.profiles.default_name

    def _getProfile(self, profile_name: str) -> SubmitProfile:
        """
        Get the submit profile with archive overrides applied.

        Priority:
            1. Command-line option
            2. Submit profile in the profiles file
        """
        profiles = Profiles.fromFileOrEmpty(self._project_dir / CFG.project_files.profiles)
        profile = profiles.getSubmitProfile(profile_name, self._platform)

        overrides = {
            "archive_path": self._kwargs.get("path"),
            "archive_url": self._kwargs.get("url"),
            "build_id": self._kwargs.get("id"),
            "latest": self._kwargs.get("latest") or None,
        }
        if any(v is not None for v in overrides.values()):
            # an archive given on the command line replaces the one from the profile
            profile = _clear_archive(profile).withOverrides(**overrides)
            logger.debug(f"Archive overridden from the command line: {overrides}.")

        return profile


def _clear_archive(profile: SubmitProfile) -> SubmitProfile:
    """Return a copy of the profile without any archive settings."""
    return replace(
        profile, archive_path=None, archive_url=None, build_id=None, latest=None
    )
