# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass
from pathlib import Path
from typing import Self

import yaml

from relay_lib.core.common import find_project_root, load_yaml_loader
from relay_lib.core.config import CFG
from relay_lib.core.error import MalformedInputError, MissingInputError
from relay_lib.core.logger import get_logger

logger = get_logger(__name__)

SafeLoader: type[yaml.SafeLoader] = load_yaml_loader()


@dataclass(frozen=True)
class AppConfig:
    """
    Identity of the project as stored in its app config file.
    """

    # Identifier of the project on the remote service.
    project_id: str

    # Account owning the project.
    account: str

    # Display name of the application.
    name: str | None = None

    # Bundle identifier of the iOS application.
    bundle_identifier: str | None = None

    # Package name of the Android application.
    android_package: str | None = None

    @classmethod
    def fromFile(cls, file: Path) -> Self:
        """
        Load the app config from a YAML file.

        Expected layout:

            project_id: <id>
            account: <account name>
            name: <app name>
            ios:
              bundle_identifier: <id>
            android:
              package: <name>

        Raises:
            MissingInputError: If the file does not exist.
            MalformedInputError: If the file cannot be parsed or lacks mandatory fields.
        """
        logger.debug(f"Loading app config from '{file}'.")
        if not file.is_file():
            raise MissingInputError(f"App config '{file}' does not exist.")

        try:
            with file.open("r") as input:
                data = yaml.load(input, Loader=SafeLoader) or {}
        except yaml.YAMLError as e:
            raise MalformedInputError(
                f"Could not parse the app config '{file}': {e}."
            ) from e

        if not isinstance(data, dict):
            raise MalformedInputError(f"Invalid app config '{file}'.")

        missing = [key for key in ("project_id", "account") if not data.get(key)]
        if missing:
            raise MalformedInputError(
                f"Invalid app config '{file}': missing {', '.join(missing)}."
            )

        ios = AppConfig._getSection(data, "ios", file)
        android = AppConfig._getSection(data, "android", file)

        return cls(
            project_id=str(data["project_id"]),
            account=str(data["account"]),
            name=data.get("name"),
            bundle_identifier=ios.get("bundle_identifier"),
            android_package=android.get("package"),
        )

    @staticmethod
    def _getSection(data: dict, key: str, file: Path) -> dict:
        section = data.get(key) or {}
        if not isinstance(section, dict):
            raise MalformedInputError(
                f"Invalid app config '{file}': '{key}' must be a mapping."
            )
        return section


def load_project(start: Path) -> tuple[Path, AppConfig]:
    """
    Locate the project containing `start` and load its app config.

    The project root is the closest ancestor of `start` containing an app config.
    If there is none, `start` itself is used.

    Args:
        start (Path): Directory to start the search from.

    Returns:
        tuple[Path, AppConfig]: Root directory of the project and its app config.

    Raises:
        MissingInputError: If no app config exists.
        MalformedInputError: If the app config is invalid.
    """
    root = find_project_root(start) or start
    return root, AppConfig.fromFile(root / CFG.project_files.app_config)
