"""Themed console output for the scoutpath CLI.

Wraps a Rich console with a small set of themes and status helpers, and
falls back to plain text when the output is not a terminal.
"""

import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from ..core.report import PathReport


class StatusType(Enum):
    """Standard status types with associated symbols."""
    SUCCESS = ("[✓]", "success", "green")
    ERROR = ("[x]", "error", "red")
    WARNING = ("[!]", "warning", "yellow")


@dataclass
class ThemeColors:
    """Color definitions for a theme."""
    info: str
    warning: str
    error: str
    success: str
    highlight: str
    path: str
    number: str
    dim: str


THEMES = {
    'manhattan': ThemeColors(
        info='cyan',
        warning='yellow',
        error='red',
        success='green',
        highlight='bright_cyan',
        path='white',
        number='bright_blue',
        dim='bright_black',
    ),
    'sunset': ThemeColors(
        info='orange3',
        warning='yellow',
        error='red3',
        success='green',
        highlight='bold orange1',
        path='wheat1',
        number='orange1',
        dim='grey50',
    ),
}


class ConsoleManager:
    """Console with theme support and a plain text mode."""

    def __init__(self, theme: str = "manhattan", file: Optional[Any] = None,
                 force_plain: bool = False):
        """Initialize console.

        Args:
            theme: Theme name from THEMES
            file: Output file (defaults to sys.stdout)
            force_plain: Disable colors and markup even on a terminal
        """
        self.theme_name = theme
        self.theme_colors = THEMES.get(theme, THEMES['manhattan'])
        self.file = file or sys.stdout
        self.use_rich = not force_plain and self._should_use_rich_terminal()

        self.console = Console(
            theme=self._create_rich_theme(),
            file=self.file,
            force_terminal=self.use_rich,
            no_color=not self.use_rich,
            highlight=False,
            width=None if self.use_rich else 120,
        )

    def _should_use_rich_terminal(self) -> bool:
        if os.environ.get('NO_COLOR'):
            return False
        if os.environ.get('FORCE_COLOR'):
            return True
        return hasattr(self.file, 'isatty') and self.file.isatty()

    def _create_rich_theme(self) -> Theme:
        colors = self.theme_colors
        return Theme({
            'info': colors.info,
            'warning': colors.warning,
            'error': colors.error,
            'success': colors.success,
            'highlight': colors.highlight,
            'path': colors.path,
            'number': colors.number,
            'dim': colors.dim,
        })

    def print(self, *args, **kwargs):
        """Print through the Rich console."""
        self.console.print(*args, **kwargs)

    def print_status(self, status: StatusType, message: str):
        """Print a status line with icon."""
        icon, _, color = status.value
        status_text = Text()
        status_text.append(f"{icon} ", style=color)
        status_text.append(message)
        self.console.print(status_text)

    def print_error(self, message: str):
        """Print an error message."""
        self.print_status(StatusType.ERROR, message)

    def print_success(self, message: str):
        """Print a success message."""
        self.print_status(StatusType.SUCCESS, message)

    def print_warning(self, message: str):
        """Print a warning message."""
        self.print_status(StatusType.WARNING, message)

    def print_reports(self, reports: Iterable[PathReport]):
        """Render path reports as a table."""
        table = Table(header_style="highlight", show_lines=False)
        table.add_column("Input", style="path", overflow="fold")
        table.add_column("Status")
        table.add_column("Relative", overflow="fold")
        table.add_column("Stem")
        table.add_column("Ext")
        table.add_column("Detail", overflow="fold")

        for report in reports:
            if report.ok:
                detail = "" if report.exists is None else ("exists" if report.exists else "missing")
                table.add_row(report.input, Text("OK", style="success"), report.relative,
                              report.stem, report.extension, detail)
            else:
                table.add_row(report.input, Text(report.error_kind.value, style="error"),
                              "", "", "", report.error_message)

        self.console.print(table)

    def print_exception(self):
        """Print exception traceback with Rich formatting."""
        self.console.print_exception()
