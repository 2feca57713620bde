# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from relay_lib.core.common import get_panel_width
from relay_lib.core.config import CFG
from relay_lib.properties.job import JobSummary


class JobSummaryPresenter:
    """
    Presentation layer for job summaries reported by the remote service.
    """

    def __init__(self, summary: JobSummary):
        """
        Initialize the presenter with a job summary.

        Args:
            summary (JobSummary): Summary of the job to present.
        """
        self._summary = summary

    def createPanel(self, console: Console | None = None) -> Group:
        """
        Create a standalone panel describing the job.

        Args:
            console (Console | None): Optional Rich console.
                If not provided, a new Console is created.

        Returns:
            Group: A Rich Group containing the panel.
        """
        console = console or Console()
        settings = CFG.job_summary_panel

        panel = Panel(
            self._createTable(),
            title=Text(
                f"{str(self._summary.kind).upper()}: {self._summary.id}",
                style=settings.title_style,
                justify="center",
            ),
            border_style=settings.border_style,
            padding=(1, 2),
            width=get_panel_width(console, 2, settings.min_width, settings.max_width),
        )

        return Group(panel, Text(""))

    def _createTable(self) -> Table:
        settings = CFG.job_summary_panel
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column(justify="right", style=settings.key_style, no_wrap=True)
        table.add_column(justify="left", style=settings.value_style)

        summary = self._summary
        table.add_row("Platform:", summary.platform.displayName)
        table.add_row("Status:", Text(str(summary.status), style=summary.status.color))
        if summary.profile:
            table.add_row("Profile:", summary.profile)
        if summary.initiator:
            table.add_row("Started by:", summary.initiator)
        if summary.created_at:
            table.add_row(
                "Created:", summary.created_at.strftime(CFG.date_formats.standard)
            )

        return table
