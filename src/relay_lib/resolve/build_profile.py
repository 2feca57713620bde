# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from relay_lib.core.result import Result
from relay_lib.properties.platform import AppPlatform
from relay_lib.properties.profiles import BuildProfile, Profiles


def resolve_build_profile(
    profiles: Profiles, name: str, platform: AppPlatform
) -> Result[BuildProfile]:
    """
    Look up the build profile `name` for `platform`.

    Returns:
        Result[BuildProfile]: The profile or a MissingInputError if it is not defined.
    """
    return Result.fromCall(profiles.getBuildProfile, name, platform)
