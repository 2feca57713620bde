# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Configuration system for relay.

This module defines dataclasses representing all configurable aspects of relay,
including environment variables, project file names, concurrency settings,
presentation settings, and exit codes.

The `Config` class loads user configuration from a TOML file (if available)
and provides a globally accessible `CFG` instance.
"""

import os
import tomllib
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Self


@dataclass
class EnvironmentVariables:
    """Environment variable names used by relay."""

    # Enables relay debug mode.
    debug_mode: str = "RELAY_DEBUG"
    # App-specific password used for submissions to the App Store.
    app_specific_password: str = "RELAY_APPLE_APP_SPECIFIC_PASSWORD"
    # Name of the remote service backend to use.
    service: str = "RELAY_SERVICE"
    # Path to the file persisting the state of the virtual service.
    virtual_state: str = "RELAY_VIRTUAL_STATE"


@dataclass
class ProjectFiles:
    """Names of the files describing a project."""

    # App config holding the project identifier and the owning account.
    app_config: str = "app.yaml"
    # Build and submit profiles.
    profiles: str = "relay.yaml"


@dataclass
class ProfileSettings:
    """Settings for build and submit profiles."""

    # Profile used when none is specified on the command line.
    default_name: str = "release"


@dataclass
class GathererSettings:
    """Settings for Gatherer operations."""

    # Maximal number of threads used to run independent branches.
    max_workers: int = 8


@dataclass
class BuildWaitSettings:
    """Settings for waiting on started builds."""

    # Seconds between two queries of the build status.
    poll_interval: float = 10.0


@dataclass
class RemoteSettings:
    """Settings for the remote service."""

    # Backend used when no backend is requested explicitly.
    default_service: str = "virtual"


@dataclass
class JobSummaryPanelSettings:
    """Settings for creating a job summary panel."""

    # Maximal width of the job summary panel.
    max_width: int | None = None
    # Minimal width of the job summary panel.
    min_width: int | None = 60
    # Style of the border lines.
    border_style: str = "white"
    # Style of the title.
    title_style: str = "white bold"
    # Style used for the keys.
    key_style: str = "default bold"
    # Style used for the values.
    value_style: str = "white"


@dataclass
class DateFormats:
    """Date and time format strings."""

    # Standard date format used by relay.
    standard: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class ExitCodes:
    """Exit codes used for various errors."""

    # Default error code for failures of relay commands.
    default: int = 91
    # Returned when a command is blocked by pending jobs.
    pending_jobs: int = 92
    # Returned when the remote service is not enabled for the project.
    service_unavailable: int = 93
    # Returned on an unexpected or unhandled error.
    unexpected_error: int = 99


@dataclass
class StatusColors:
    """Color scheme for JobStatus display."""

    new: str = "bright_magenta"
    in_queue: str = "bright_magenta"
    in_progress: str = "bright_blue"
    finished: str = "bright_green"
    errored: str = "bright_red"
    canceled: str = "bright_red"
    unknown: str = "grey70"


@dataclass
class Config:
    """Main configuration for relay."""

    env_vars: EnvironmentVariables = field(default_factory=EnvironmentVariables)
    project_files: ProjectFiles = field(default_factory=ProjectFiles)
    profiles: ProfileSettings = field(default_factory=ProfileSettings)
    gatherer: GathererSettings = field(default_factory=GathererSettings)
    remote: RemoteSettings = field(default_factory=RemoteSettings)
    build_wait: BuildWaitSettings = field(default_factory=BuildWaitSettings)
    job_summary_panel: JobSummaryPanelSettings = field(
        default_factory=JobSummaryPanelSettings
    )
    date_formats: DateFormats = field(default_factory=DateFormats)
    exit_codes: ExitCodes = field(default_factory=ExitCodes)
    status_colors: StatusColors = field(default_factory=StatusColors)

    # Name of the relay binary.
    binary_name: str = "relay"

    @classmethod
    def load(cls, config_path: Path | None = None) -> Self:
        """
        Load configuration from TOML file or use defaults.

        Args:
            config_path: Explicit path to config file. If None, searches standard locations.

        Returns:
            Config instance with loaded or default values.
        """
        if config_path is None:
            config_path = Config._get_config_path()

        try:
            if config_path and config_path.exists():
                with config_path.open("rb") as f:
                    config_data = tomllib.load(f)
                return _dict_to_dataclass(cls, config_data)
        except Exception as e:
            raise ValueError(f"Could not read relay config '{config_path}': {e}.")

        # no config found - use defaults
        return cls()

    @staticmethod
    def _get_config_path() -> Path | None:
        """
        Search for config file in standard locations (XDG compliant).
        Returns the first existing config file, or None.
        """
        config_locations: list[Path | None] = [
            # 1. Explicit environment variable (highest priority)
            Path(env_path) if (env_path := os.getenv("RELAY_CONFIG")) else None,
            # 2. Current working directory (for development/override)
            Path.cwd() / "relay_config.toml",
            # 3. XDG config home (standard user config location)
            Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
            / "relay"
            / "config.toml",
        ]

        for path in config_locations:
            if path and path.is_file():
                return path

        return None


def _dict_to_dataclass(cls, data: dict[str, Any]):
    """
    Recursively convert a dictionary to a dataclass instance.
    Handles nested dataclasses properly.
    """
    if not is_dataclass(cls):
        return data

    field_values = {}
    for field_info in fields(cls):
        field_name = field_info.name
        field_type = field_info.type

        if field_name in data:
            value = data[field_name]
            if is_dataclass(field_type) and isinstance(value, dict):
                field_values[field_name] = _dict_to_dataclass(field_type, value)
            else:
                field_values[field_name] = value

    return cls(**field_values)


# Global configuration for relay.
CFG = Config.load()
