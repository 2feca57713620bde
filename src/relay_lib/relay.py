# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys

import click

from relay_lib.build.cli import build
from relay_lib.core.click_format import GNUHelpColorsGroup
from relay_lib.submit.cli import submit

__version__ = "0.1.0"

# support both --help and -h
_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(
    cls=GNUHelpColorsGroup,
    help_options_color="bright_blue",
    invoke_without_command=True,
    context_settings=_CONTEXT_SETTINGS,
)
@click.option(
    "--version",
    is_flag=True,
    help="Print the current version of relay and exit.",
)
@click.pass_context
def cli(ctx: click.Context, version: bool):
    """
    Run any relay command.

    relay starts app builds on a remote build service and submits the built archives to the stores.
    """
    if version:
        print(__version__)
        sys.exit(0)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        sys.exit(0)


cli.add_command(build)
cli.add_command(submit)
