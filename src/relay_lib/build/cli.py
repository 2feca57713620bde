# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import sys
from pathlib import Path
from typing import NoReturn

import click
from click_option_group import optgroup
from rich.console import Console

from relay_lib.core.click_format import GNUHelpColorsCommand
from relay_lib.core.config import CFG
from relay_lib.core.error import RelayError
from relay_lib.core.logger import get_logger
from relay_lib.core.prompter import Prompter
from relay_lib.guard import PendingJobGuard
from relay_lib.properties.app_config import load_project
from relay_lib.properties.job import JobStatus
from relay_lib.properties.profiles import Profiles
from relay_lib.remote import RemoteMeta
from relay_lib.resolve.platform import resolve_platform

from .configure import ensure_project_configured
from .dispatcher import Dispatcher
from .policy import verify_options_for_local_builds

logger = get_logger(__name__)
console = Console()


# Note that all options must be part of an optgroup otherwise the help formatter breaks.
@click.command(
    short_help="Start a build of the app.",
    help=f"""
Start a build of the app for Android, iOS, or both.

The build settings are taken from the build profile in `{CFG.project_files.profiles}`.
If the project has no `{CFG.project_files.profiles}` yet, `{CFG.binary_name} build` offers to create one.

`{CFG.binary_name} build` refuses to start while other jobs of the account are still pending.
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
    help="Platform to build the app for.",
)
@optgroup.option(
    "--profile",
    type=str,
    default=None,
    help=f"Name of the build profile from `{CFG.project_files.profiles}`. Defaults to '{CFG.profiles.default_name}'.",
)
@optgroup.option(
    "--non-interactive",
    is_flag=True,
    help="Never prompt. Fail if any input is missing.",
)
@optgroup.group(f"{click.style('Build settings', fg='yellow')}")
@optgroup.option(
    "--local",
    is_flag=True,
    help="Run the build on this machine. Supports only one platform at a time.",
)
@optgroup.option(
    "--skip-credentials-check",
    is_flag=True,
    help="Do not validate the credentials of the build.",
)
@optgroup.option(
    "--skip-project-configuration",
    is_flag=True,
    help=f"Do not offer to create `{CFG.project_files.profiles}` if it is missing.",
)
@optgroup.option(
    "--wait/--no-wait",
    default=True,
    show_default=True,
    help="Wait for the builds to complete.",
)
def build(
    platform: str | None,
    profile: str | None,
    non_interactive: bool = False,
    local: bool = False,
    skip_credentials_check: bool = False,
    skip_project_configuration: bool = False,
    wait: bool = True,
) -> NoReturn:
    """
    Start a build of the app.
    """
    try:
        sys.exit(
            build_app(
                platform,
                profile,
                Path.cwd(),
                non_interactive=non_interactive,
                local=local,
                skip_credentials_check=skip_credentials_check,
                skip_project_configuration=skip_project_configuration,
                wait=wait,
            )
        )
    except RelayError as e:
        logger.error(e)
        sys.exit(CFG.exit_codes.default)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)


def build_app(
    platform: str | None,
    profile: str | None,
    cwd: Path,
    non_interactive: bool = False,
    local: bool = False,
    skip_credentials_check: bool = False,
    skip_project_configuration: bool = False,
    wait: bool = True,
) -> int:
    """
    Check that a build may start and start it for every requested platform.

    Returns:
        int: Exit code of the command.

    Raises:
        RelayError: If the build cannot be started.
    """
    prompter = Prompter(non_interactive)
    Remote = RemoteMeta.obtain(None)

    actor = Remote.getCurrentActor()
    logger.debug(f"Acting on behalf of '{actor.username}'.")

    requested = resolve_platform(platform, prompter).valueOrRaise()
    project_dir, app_config = load_project(cwd)

    if not local and not Remote.isServiceEnabledForProject(app_config.project_id):
        logger.warning(
            f"Remote builds are not available for project '{app_config.project_id}'. "
            "Use --local to build on this machine."
        )
        return CFG.exit_codes.service_unavailable

    if local:
        verify_options_for_local_builds(requested)

    if PendingJobGuard(Remote).isBlocked(
        app_config.account, requested, actor, console
    ):
        return CFG.exit_codes.pending_jobs

    if not skip_project_configuration:
        ensure_project_configured(project_dir, prompter)

    profiles = Profiles.fromFile(project_dir / CFG.project_files.profiles)
    summaries = Dispatcher(
        Remote,
        app_config,
        profiles,
        profile or CFG.profiles.default_name,
        local=local,
        skip_credentials_check=skip_credentials_check,
        wait=wait,
    ).dispatch(requested)

    failed = [
        s for s in summaries if s.status in (JobStatus.ERRORED, JobStatus.CANCELED)
    ]
    if failed:
        logger.error(
            f"Build(s) {', '.join(s.id for s in failed)} did not complete successfully."
        )
        return CFG.exit_codes.default

    return 0
