# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from relay_lib.core.prompter import Prompter
from relay_lib.remote.interface import RemoteInterface

from .app_config import AppConfig
from .platform import AppPlatform
from .profiles import SubmitProfile


@dataclass(frozen=True)
class SubmissionContext:
    """
    Everything resolvers may read while preparing a single submission.

    The context is created once per command invocation and passed explicitly
    to every resolver; resolvers never consult global state.
    """

    # App config of the project.
    app_config: AppConfig

    # Platform of the submission.
    platform: AppPlatform

    # Name of the submit profile.
    profile_name: str

    # Submit profile with command-line overrides applied.
    profile: SubmitProfile

    # Remote service used for lookups.
    remote: type[RemoteInterface]

    # Gateway for questions asked to the user.
    prompter: Prompter

    # Environment variables visible to resolvers.
    env: Mapping[str, str] = field(default_factory=lambda: dict(os.environ))

    @property
    def project_id(self) -> str:
        return self.app_config.project_id

    @property
    def account(self) -> str:
        return self.app_config.account

    @property
    def non_interactive(self) -> bool:
        return self.prompter.non_interactive
