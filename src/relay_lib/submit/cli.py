# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import sys
from pathlib import Path
from typing import NoReturn

import click
from click_option_group import MutuallyExclusiveOptionGroup, optgroup
from rich.console import Console

from relay_lib.core.click_format import GNUHelpColorsCommand
from relay_lib.core.config import CFG
from relay_lib.core.error import RelayError
from relay_lib.core.logger import get_logger
from relay_lib.core.prompter import Prompter
from relay_lib.guard import PendingJobGuard
from relay_lib.properties.app_config import load_project
from relay_lib.remote import RemoteMeta
from relay_lib.resolve.platform import resolve_platform

from .builder import OptionsBuilder
from .factory import ContextFactory
from .submitter import Submitter

logger = get_logger(__name__)
console = Console()


# Note that all options must be part of an optgroup otherwise the help formatter breaks.
@click.command(
    short_help="Submit an app archive to a store.",
    help=f"""
Submit an app archive to the App Store or Google Play.

The archive, credentials and store identifiers are taken from the submit profile
in `{CFG.project_files.profiles}` and may be partly overridden on the command line.
Inputs that are not specified are asked for interactively, unless `--non-interactive` is used.

`{CFG.binary_name} submit` refuses to start while other jobs of the account are still pending.
""",
    cls=GNUHelpColorsCommand,
    help_options_color="bright_blue",
)
@optgroup.group(f"{click.style('General settings', fg='yellow')}")
@optgroup.option(
    "--platform",
    "-p",
    type=click.Choice(["android", "ios", "all"], case_sensitive=False),
    default=None,
    help="Platform to submit the app for. Submissions support one platform at a time.",
)
@optgroup.option(
    "--profile",
    type=str,
    default=None,
    help=f"Name of the submit profile from `{CFG.project_files.profiles}`. Defaults to '{CFG.profiles.default_name}'.",
)
@optgroup.option(
    "--non-interactive",
    is_flag=True,
    help="Never prompt. Fail if any input is missing.",
)
@optgroup.group(
    f"{click.style('Archive', fg='yellow')}",
    cls=MutuallyExclusiveOptionGroup,
    help="Overrides the archive specified in the submit profile.",
)
@optgroup.option("--path", type=str, default=None, help="Path to a local archive.")
@optgroup.option("--url", type=str, default=None, help="URL of the archive.")
@optgroup.option(
    "--id", type=str, default=None, help="Identifier of the build to submit."
)
@optgroup.option(
    "--latest", is_flag=True, default=False, help="Submit the latest finished build."
)
def submit(
    platform: str | None,
    profile: str | None,
    non_interactive: bool = False,
    **kwargs,
) -> NoReturn:
    """
    Submit an app archive to a store.
    """
    try:
        sys.exit(submit_app(platform, profile, non_interactive, Path.cwd(), **kwargs))
    except RelayError as e:
        logger.error(e)
        sys.exit(CFG.exit_codes.default)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)


def submit_app(
    platform: str | None,
    profile: str | None,
    non_interactive: bool,
    cwd: Path,
    **kwargs,
) -> int:
    """
    Resolve all inputs of a submission and start it.

    Args:
        platform (str | None): Requested platform.
        profile (str | None): Requested submit profile.
        non_interactive (bool): Whether prompting is forbidden.
        cwd (Path): Directory the command was invoked from.
        **kwargs: Archive overrides from the command line.

    Returns:
        int: Exit code of the command.

    Raises:
        RelayError: If the submission cannot be started.
    """
    prompter = Prompter(non_interactive)
    Remote = RemoteMeta.obtain(None)

    actor = Remote.getCurrentActor()
    logger.debug(f"Acting on behalf of '{actor.username}'.")

    requested = resolve_platform(platform, prompter, allow_all=False).valueOrRaise()
    (app_platform,) = requested.toAppPlatforms()

    project_dir, app_config = load_project(cwd)

    if PendingJobGuard(Remote).isBlocked(
        app_config.account, requested, actor, console
    ):
        return CFG.exit_codes.pending_jobs

    ctx = ContextFactory(
        app_config, project_dir, app_platform, Remote, prompter, profile, **kwargs
    ).makeContext()
    options = OptionsBuilder(ctx).build()

    summary = Submitter(ctx, options).submit()
    logger.info(f"Submission '{summary.id}' created successfully.")
    return 0
