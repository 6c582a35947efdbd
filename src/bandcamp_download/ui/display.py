"""
Display management for the bandcamp-download CLI with Rich components.
"""

from typing import List, Optional
from rich.console import Console

from ..models.results import AlbumDownloadResult
from .formatters import DisplayFormatters


class DisplayManager:
    """Manages terminal output of download runs using Rich."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.formatters = DisplayFormatters(self.console)

    def display_header(self, title: str, subtitle: Optional[str] = None):
        """Display the run header."""
        self.console.print(self.formatters.create_header_panel(title, subtitle))

    def display_album_result(self, result: AlbumDownloadResult):
        """Display the outcome of a single album."""
        self.formatters.display_album_result(result)

    def display_download_summary(self, results: List[AlbumDownloadResult]):
        """Display final download summary."""
        self.formatters.display_download_summary(results)

    def display_error(self, message: str):
        """Display an error message."""
        self.console.print(f"[bold red]✗[/bold red] {message}")

    def display_warning(self, message: str):
        """Display a warning message."""
        self.console.print(f"\n[yellow]⚠[/yellow] {message}")
