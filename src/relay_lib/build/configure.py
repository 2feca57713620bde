# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import subprocess
from pathlib import Path

from relay_lib.core.config import CFG
from relay_lib.core.error import RelayError
from relay_lib.core.logger import get_logger
from relay_lib.core.prompter import Prompter
from relay_lib.properties.profiles import Profiles

logger = get_logger(__name__)


def ensure_project_configured(project_dir: Path, prompter: Prompter) -> bool:
    """
    Make sure the project has a profiles file, creating a default one if the user agrees.

    Args:
        project_dir (Path): Root directory of the project.
        prompter (Prompter): Gateway for questions asked to the user.

    Returns:
        bool: True if the profiles file was created, False if it already existed.

    Raises:
        InteractionRequiredError: If the file is missing in non-interactive mode.
        RelayError: If the user declines, or if the git working tree
            is not clean before the configuration.
    """
    profiles_file = project_dir / CFG.project_files.profiles
    if profiles_file.is_file():
        return False

    if not prompter.confirm(
        f"This app is not set up for building with {CFG.binary_name}. Set it up now?"
    ):
        raise RelayError(
            f"Aborting, please create '{CFG.project_files.profiles}' in '{project_dir}'."
        )

    if not is_git_status_clean(project_dir):
        raise RelayError(
            "Build process requires clean git working tree, "
            f"please commit all your changes and run '{CFG.binary_name} build' again."
        )

    Profiles.default().toFile(profiles_file)
    logger.info(f"Created default profiles in '{profiles_file}'.")

    return True


def is_git_status_clean(directory: Path) -> bool:
    """
    Check whether the git working tree containing `directory` has no changes.

    Raises:
        RelayError: If git status cannot be obtained.
    """
    try:
        result = subprocess.run(
            ["git", "status", "--porcelain"],
            cwd=directory,
            text=True,
            check=False,
            capture_output=True,
        )
    except OSError as e:
        raise RelayError(f"Could not run git: {e}.") from e

    if result.returncode != 0:
        raise RelayError(
            f"Could not get the git status of '{directory}': {result.stderr.strip()}."
        )

    return result.stdout.strip() == ""
