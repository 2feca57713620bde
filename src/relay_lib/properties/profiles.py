# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Build and submit profiles of a relay project.

Profiles are stored in the project's `relay.yaml`, grouped by purpose,
profile name and platform:

    build:
      release:
        android:
          distribution: store
        ios:
          distribution: store
    submit:
      release:
        ios:
          asc_app_id: "1234567890"
        android:
          track: internal
"""

from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Self, TypeVar, get_args, get_origin

import yaml

from relay_lib.core.common import load_yaml_dumper, load_yaml_loader
from relay_lib.core.config import CFG
from relay_lib.core.error import MalformedInputError, MissingInputError
from relay_lib.core.logger import get_logger

from .platform import AppPlatform

logger = get_logger(__name__)

T = TypeVar("T")

SafeLoader: type[yaml.SafeLoader] = load_yaml_loader()
Dumper: type[yaml.Dumper] = load_yaml_dumper()


@dataclass(frozen=True)
class BuildProfile:
    """Settings of a single build profile for one platform."""

    # Distribution channel of the build (e.g. store, internal).
    distribution: str = "store"

    # Image of the build machine.
    image: str | None = None

    # Environment variables set on the build machine.
    env: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class SubmitProfile:
    """Settings of a single submit profile for one platform."""

    # Local path to the archive to submit.
    archive_path: str | None = None

    # URL of the archive to submit.
    archive_url: str | None = None

    # Identifier of the build whose archive should be submitted.
    build_id: str | None = None

    # Submit the archive of the latest build.
    latest: bool | None = None

    # Identifier of the application on App Store Connect.
    asc_app_id: str | None = None

    # Path to the App Store Connect API key file.
    asc_api_key_path: str | None = None

    # Issuer identifier of the App Store Connect API key.
    asc_api_key_issuer_id: str | None = None

    # Identifier of the App Store Connect API key.
    asc_api_key_id: str | None = None

    # Apple ID used for the submission.
    apple_id: str | None = None

    # Package name of the Android application.
    application_id: str | None = None

    # Google Play release track.
    track: str | None = None

    def withOverrides(self, **overrides: Any) -> Self:
        """
        Return a copy of the profile with the non-None `overrides` applied.
        """
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


@dataclass(frozen=True)
class Profiles:
    """
    All profiles defined for a project.
    """

    build: dict[str, dict[AppPlatform, BuildProfile]] = field(default_factory=dict)
    submit: dict[str, dict[AppPlatform, SubmitProfile]] = field(default_factory=dict)

    @classmethod
    def fromFile(cls, file: Path) -> Self:
        """
        Load profiles from a YAML file.

        Raises:
            MissingInputError: If the file does not exist.
            MalformedInputError: If the file cannot be parsed or contains unknown settings.
        """
        logger.debug(f"Loading profiles from '{file}'.")
        if not file.is_file():
            raise MissingInputError(f"Profiles file '{file}' does not exist.")

        try:
            with file.open("r") as input:
                data = yaml.load(input, Loader=SafeLoader) or {}
        except yaml.YAMLError as e:
            raise MalformedInputError(
                f"Could not parse the profiles file '{file}': {e}."
            ) from e

        try:
            return cls(
                build=Profiles._parseSection(data.get("build"), BuildProfile),
                submit=Profiles._parseSection(data.get("submit"), SubmitProfile),
            )
        except (TypeError, AttributeError, MalformedInputError) as e:
            raise MalformedInputError(f"Invalid profiles file '{file}': {e}") from e

    @classmethod
    def fromFileOrEmpty(cls, file: Path) -> Self:
        """
        Load profiles from a YAML file or return empty profiles if the file does not exist.
        """
        if not file.is_file():
            logger.debug(f"Profiles file '{file}' not found, using empty profiles.")
            return cls()
        return cls.fromFile(file)

    @classmethod
    def default(cls) -> Self:
        """Profiles written into newly configured projects."""
        name = CFG.profiles.default_name
        return cls(
            build={name: {p: BuildProfile() for p in AppPlatform}},
            submit={name: {p: SubmitProfile() for p in AppPlatform}},
        )

    def getBuildProfile(self, name: str, platform: AppPlatform) -> BuildProfile:
        """
        Return the build profile `name` for `platform`.

        Raises:
            MissingInputError: If no such profile is defined.
        """
        try:
            return self.build[name][platform]
        except KeyError:
            raise MissingInputError(
                f"Build profile '{name}' is not defined for {platform.displayName} in {CFG.project_files.profiles}."
            )

    def getSubmitProfile(self, name: str, platform: AppPlatform) -> SubmitProfile:
        """
        Return the submit profile `name` for `platform`.

        The default profile may be omitted from the file, in which case an empty
        profile is returned.

        Raises:
            MissingInputError: If a non-default profile is not defined.
        """
        try:
            return self.submit[name][platform]
        except KeyError:
            if name == CFG.profiles.default_name:
                return SubmitProfile()
            raise MissingInputError(
                f"Submit profile '{name}' is not defined for {platform.displayName} in {CFG.project_files.profiles}."
            )

    def toFile(self, file: Path) -> None:
        """
        Export the profiles to a YAML file.

        Raises:
            MalformedInputError: If the file cannot be written.
        """
        content = yaml.dump(
            self._toDict(), default_flow_style=False, sort_keys=False, Dumper=Dumper
        )
        try:
            logger.debug(f"Exporting profiles into '{file}'.")
            file.write_text(content)
        except OSError as e:
            raise MalformedInputError(f"Cannot write to file '{file}': {e}") from e

    def _toDict(self) -> dict[str, object]:
        def section(profiles: dict[str, dict[AppPlatform, Any]]) -> dict[str, object]:
            return {
                name: {
                    str(platform): {
                        k: v for k, v in asdict(profile).items() if v not in (None, {})
                    }
                    for platform, profile in per_platform.items()
                }
                for name, per_platform in profiles.items()
            }

        return {"build": section(self.build), "submit": section(self.submit)}

    @staticmethod
    def _parseSection(
        data: dict[str, Any] | None, profile_cls: type[T]
    ) -> dict[str, dict[AppPlatform, T]]:
        known = {f.name: f.type for f in fields(profile_cls)}  # ty: ignore[invalid-argument-type]
        section: dict[str, dict[AppPlatform, T]] = {}
        for name, per_platform in (data or {}).items():
            section[name] = {}
            for platform, values in (per_platform or {}).items():
                unknown = set(values or {}).difference(known)
                if unknown:
                    raise MalformedInputError(
                        f"unknown setting(s) {', '.join(sorted(unknown))} in profile '{name}'."
                    )
                section[name][AppPlatform.fromStr(platform)] = profile_cls(
                    **{
                        key: Profiles._coerceSetting(name, key, value, known[key])
                        for key, value in (values or {}).items()
                        if value is not None
                    }
                )

        return section

    @staticmethod
    def _coerceSetting(profile: str, key: str, value: Any, expected: Any) -> Any:
        """
        Convert a value read from YAML into the type of the profile setting.

        Numbers are accepted for text settings and converted to strings.

        Raises:
            MalformedInputError: If the value has an incompatible type.
        """
        if expected is bool or bool in get_args(expected):
            if not isinstance(value, bool):
                raise MalformedInputError(
                    f"setting '{key}' in profile '{profile}' must be true or false."
                )
            return value

        if get_origin(expected) is dict:
            if not isinstance(value, dict):
                raise MalformedInputError(
                    f"setting '{key}' in profile '{profile}' must be a mapping."
                )
            return {str(k): str(v) for k, v in value.items()}

        if isinstance(value, bool) or not isinstance(value, str | int | float):
            raise MalformedInputError(
                f"setting '{key}' in profile '{profile}' must be a text value."
            )
        return str(value)
