"""
Flexoki-themed Console class for Rich library
Uses the warm, inky Flexoki color scheme by Steph Ango
https://stephango.com/flexoki
"""

import os
from contextlib import contextmanager
from typing import Dict

from rich.console import Console as RichConsole
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from pdftools_core.models.config import PdfToolsConfig

# Flexoki color palette (dark theme - 400 series)
COLORS_DARK = {
    'tx_3': '#B7B5AC',
    'tx_2': '#CECDC3',
    'tx': '#E6E4D9',
    'ui_2': '#403E3C',
    'red': '#D14D41',
    'orange': '#DA702C',
    'yellow': '#D0A215',
    'green': '#879A39',
    'cyan': '#3AA99F',
    'blue': '#4385BE',
}

# Flexoki color palette (light theme - 600 series)
COLORS_LIGHT = {
    'tx_3': '#6F6E69',
    'tx_2': '#403E3C',
    'tx': '#100F0F',
    'ui_2': '#DAD8CE',
    'red': '#AF3029',
    'orange': '#BC5215',
    'yellow': '#AD8301',
    'green': '#66800B',
    'cyan': '#24837B',
    'blue': '#205EA6',
}


class Console:
    """
    A themed console wrapper using the Flexoki color scheme.
    Provides methods for status messages, key/value summaries and spinners.
    """

    @staticmethod
    def detect_terminal_background(config: PdfToolsConfig = None):
        """
        Detect if the terminal has a light or dark background.
        Returns 'dark' or 'light'.

        The theme configured in PdfToolsConfig wins, then the COLORFGBG
        environment variable is checked. Defaults to 'dark'.
        """
        if config is not None and config.theme is not None:
            return config.theme

        # Format is "foreground;background", 7 and 15 are light backgrounds
        colorfgbg = os.environ.get('COLORFGBG', '')
        if colorfgbg:
            parts = colorfgbg.split(';')
            if len(parts) >= 2 and parts[-1].isdigit():
                if int(parts[-1]) in (7, 15):
                    return 'light'

        return 'dark'

    def __init__(self, theme_mode=None, config: PdfToolsConfig = None):
        """
        Initialize the console with Flexoki theme.

        Args:
            theme_mode: Optional theme mode ('light' or 'dark').
                       If None, auto-detects based on config or terminal background.
            config: Optional PdfToolsConfig instance for loading theme from configuration.
        """
        if config is None:
            config = PdfToolsConfig()

        if theme_mode is None:
            theme_mode = self.detect_terminal_background(config)

        self.theme_mode = theme_mode
        self.COLORS = COLORS_LIGHT if theme_mode == 'light' else COLORS_DARK

        self.theme = Theme(
            {
                'default': f'{self.COLORS["tx"]}',
                'faint': f'{self.COLORS["tx_3"]}',
                'success': f'bold {self.COLORS["green"]}',
                'info': f'{self.COLORS["cyan"]}',
                'warning': f'bold {self.COLORS["orange"]}',
                'error': f'bold {self.COLORS["red"]}',
                'highlight': f'bold {self.COLORS["yellow"]}',
                'bar.pulse': f'{self.COLORS["blue"]}',
                'status.spinner': f'{self.COLORS["tx_3"]}',
            }
        )

        self.console = RichConsole(theme=self.theme)

    def print(self, *args, style=None, **kwargs):
        """Print with optional style."""
        self.console.print(*args, style=style, **kwargs)

    def _icon_and_text(
        self,
        message: str,
        icon: str = '✓',
        icon_style: str = 'default',
        padding: int = 1,
    ):
        grid = Table.grid(padding=(0, padding), expand=False)
        grid.add_column(width=1)
        grid.add_column()

        grid.add_row(Text(icon, style=icon_style), Text(message))

        return grid

    def _message(self, message: str, prefix: str, style: str, panel: bool):
        formatted = self._icon_and_text(message=message, icon=prefix, icon_style=style)
        if panel:
            self.panel(formatted, border_style=style)
        else:
            self.print(formatted)

    def success(self, message: str, prefix: str = '✓', panel: bool = False):
        """Print a success message."""
        self._message(message, prefix, 'success', panel)

    def info(self, message: str, prefix: str = 'ℹ', panel: bool = False):
        """Print an info message."""
        self._message(message, prefix, 'info', panel)

    def warning(self, message: str, prefix: str = '⚠', panel: bool = False):
        """Print a warning message."""
        self._message(message, prefix, 'warning', panel)

    def error(self, message: str, prefix: str = '✗', panel: bool = False):
        """Print an error message."""
        self._message(message, prefix, 'error', panel)

    def action(self, message: str, style: str = 'faint'):
        """Print a highlighted action."""
        self.print(f'[{style}]▣[/{style}] {message}')
        self.newline()

    def details(self, values: Dict[str, object]):
        """Print aligned key/value pairs, e.g. the summary of an operation."""
        grid = Table.grid(padding=(0, 2), expand=False)
        grid.add_column(style='faint')
        grid.add_column(style='default')

        for key, value in values.items():
            grid.add_row(key, str(value))

        self.print(grid)

    def panel(
        self,
        content,
        title: str = None,
        style: str = 'default',
        border_style: str = None,
    ):
        """Display content in a panel."""
        border_color = border_style or self.COLORS['ui_2']
        panel = Panel(
            content,
            title=title,
            border_style=border_color,
            title_align='left',
            style=style,
        )
        self.console.print(panel)

    @contextmanager
    def spinner(self, message: str = 'Loading...'):
        """
        Context manager for a spinner.

        Usage:
            with console.spinner("Splitting PDF..."):
                # do work
                processor.split(path)
        """
        with self.console.status(
            f'[{self.COLORS["cyan"]}]{message}[/{self.COLORS["cyan"]}]',
            spinner='dots',
            spinner_style='bar.pulse',
        ):
            yield

    def newline(self, count: int = 1):
        """Print newlines."""
        self.console.print('\n' * (count - 1))

