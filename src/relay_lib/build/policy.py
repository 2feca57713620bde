# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys

from relay_lib.core.error import PolicyViolationError
from relay_lib.properties.platform import RequestedPlatform


def verify_options_for_local_builds(
    platform: RequestedPlatform, host: str | None = None
) -> None:
    """
    Check that a build for `platform` can run on this machine.

    Args:
        platform (RequestedPlatform): Requested platform selection.
        host (str | None): Identifier of the host operating system.
            Defaults to `sys.platform`.

    Raises:
        PolicyViolationError: If multiple platforms are requested
            or an iOS build is requested on a host other than macOS.
    """
    host = host or sys.platform

    if platform == RequestedPlatform.ALL:
        raise PolicyViolationError(
            "Builds for multiple platforms are not supported with flag --local."
        )

    if platform == RequestedPlatform.IOS and host != "darwin":
        raise PolicyViolationError(
            "Unsupported platform, macOS is required to build apps for iOS."
        )
