# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from click.testing import CliRunner

from relay_lib import __version__, cli


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == __version__


def test_help_without_command():
    result = CliRunner().invoke(cli, [])

    assert result.exit_code == 0
    assert "build" in result.output
    assert "submit" in result.output


def test_commands_are_registered():
    assert set(cli.commands) == {"build", "submit"}


def test_submit_help_lists_archive_options():
    result = CliRunner().invoke(cli, ["submit", "--help"])

    assert result.exit_code == 0
    for option in ("--path", "--url", "--id", "--latest", "--non-interactive"):
        assert option in result.output


def test_build_help_lists_options():
    result = CliRunner().invoke(cli, ["build", "-h"])

    assert result.exit_code == 0
    for option in ("--local", "--skip-credentials-check", "--skip-project-configuration"):
        assert option in result.output
