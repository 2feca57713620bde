# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass

from .platform import AppPlatform
from .profiles import BuildProfile


@dataclass(frozen=True)
class BuildRequest:
    """
    Fully resolved inputs of a single build.
    """

    # Identifier of the project on the remote service.
    project_id: str

    # Account owning the project.
    account: str

    # Platform to build for.
    platform: AppPlatform

    # Name of the build profile used.
    profile_name: str

    # Settings of the build profile.
    profile: BuildProfile

    # Run the build on the local machine.
    local: bool = False

    # Do not validate the build credentials before starting the build.
    skip_credentials_check: bool = False

    # Wait until the build leaves the pending state.
    wait: bool = False
