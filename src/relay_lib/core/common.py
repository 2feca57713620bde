# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
General utility functions for the relay library.

This module provides helpers for YAML I/O, interactive key prompts,
locating project files, and sizing rich panels.
"""

from functools import lru_cache
from pathlib import Path

import readchar
import yaml
from rich.console import Console
from rich.live import Live
from rich.text import Text

from .config import CFG
from .logger import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def load_yaml_dumper() -> type[yaml.Dumper]:
    """Return the fastest available YAML dumper (CDumper if possible)."""
    try:
        from yaml import CDumper as Dumper  # type: ignore[attr-defined]

        logger.debug("Loaded YAML CDumper.")
    except ImportError:
        from yaml import Dumper

        logger.debug("Loaded default YAML dumper.")
    return Dumper


@lru_cache(maxsize=1)
def load_yaml_loader() -> type[yaml.SafeLoader]:
    """Return the fastest available safe YAML loader (CSafeLoader if possible)."""
    try:
        from yaml import (
            CSafeLoader as SafeLoader,  # ty: ignore[possibly-missing-import]
        )

        logger.debug("Loaded YAML CLoader.")
    except ImportError:
        from yaml import SafeLoader

        logger.debug("Loaded default YAML loader.")

    return SafeLoader


def find_project_root(start: Path) -> Path | None:
    """
    Find the closest directory containing a relay app config.

    Args:
        start (Path): Directory to start the search from.

    Returns:
        Path | None: The project root or None if no ancestor of `start`
        contains an app config.
    """
    start = start.resolve()
    for directory in [start, *start.parents]:
        if (directory / CFG.project_files.app_config).is_file():
            return directory

    return None


def yes_or_no_prompt(prompt: str) -> bool:
    """
    Display an interactive yes/no prompt to the user and return the selection.

    The prompt highlights the pressed key ('y' in green for yes, 'N' in red for no)
    and defaults to 'No' if the user presses any key other than 'y'.

    Args:
        prompt (str): The text to display as the question.

    Returns:
        bool: True if the user selects 'yes' (presses 'y'), False otherwise.
    """
    prompt = f"   {prompt} "
    text = (
        Text("PROMPT", style="magenta")
        + Text(prompt, style="default")
        + Text("[y/N]", style="bold default")
    )

    with Live(text, refresh_per_second=1) as live:
        key = readchar.readkey().lower()

        # highlight the pressed key
        if key == "y":
            choice = (
                Text("[", style="bold default")
                + Text("y", style="bold green")
                + Text("/N]", style="bold default")
            )
        else:
            choice = (
                Text("[y/", style="bold default")
                + Text("N", style="bold red")
                + Text("]", style="bold default")
            )

        live.update(
            Text("PROMPT", style="magenta") + Text(prompt, style="default") + choice
        )

    return key == "y"


def select_prompt(prompt: str, choices: list[str]) -> int:
    """
    Display an interactive selection prompt and return the index of the chosen item.

    The highlighted item is moved with the arrow keys and confirmed with Enter.
    Pressing the number of an item selects it directly.

    Args:
        prompt (str): The text to display above the choices.
        choices (list[str]): Labels of the available choices.

    Returns:
        int: Index of the selected choice.
    """
    if not choices:
        raise ValueError("select_prompt requires at least one choice")

    current = 0

    def render() -> Text:
        text = Text("PROMPT", style="magenta") + Text(f"   {prompt}\n")
        for i, choice in enumerate(choices):
            if i == current:
                text += Text(f"   > {i + 1}. {choice}\n", style="bold bright_blue")
            else:
                text += Text(f"     {i + 1}. {choice}\n", style="default")
        return text

    with Live(render(), refresh_per_second=10) as live:
        while True:
            key = readchar.readkey()
            if key == readchar.key.UP:
                current = (current - 1) % len(choices)
            elif key == readchar.key.DOWN:
                current = (current + 1) % len(choices)
            elif key in (readchar.key.ENTER, readchar.key.CR, readchar.key.LF):
                break
            elif key.isdigit() and 1 <= int(key) <= len(choices):
                current = int(key) - 1
                break
            live.update(render())

        live.update(render())

    return current


def get_panel_width(
    console: Console, factor: int, min_width: int | None, max_width: int | None
):
    """
    Calculate the width of a panel relative to the console width, constrained by
    optional minimum and maximum width values.

    Args:
        console (Console): A rich Console-like object that provides terminal size.
        factor (int): A divisor used to scale down the terminal width.
        min_width (int): The minimum allowable panel width. If None, no lower bound is applied.
        max_width (int): The maximum allowable panel width. If None, no upper bound is applied.

    Returns:
        int: The computed panel width after applying scaling and bounds.
    """

    term_width = console.size.width
    panel_width = term_width // factor
    if min_width is not None:
        panel_width = max(panel_width, min_width)
    if max_width is not None:
        panel_width = min(panel_width, max_width)

    return panel_width
