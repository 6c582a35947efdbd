"""
Display Formatters Module
Handles formatting of headers, album results and run summaries.
"""

from typing import List, Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich.align import Align
from rich import box

from ..models.results import AlbumDownloadResult


class DisplayFormatters:
    """Formatters for download results and UI elements."""

    def __init__(self, console: Console):
        self.console = console

    def create_header_panel(self, title: str, subtitle: Optional[str] = None) -> Panel:
        """Create a styled header panel."""
        header_text = Text(title, style="bold cyan")
        if subtitle:
            header_text.append(f"\n{subtitle}", style="dim")
        return Panel(
            Align.center(header_text),
            border_style="cyan",
            box=box.ROUNDED,
            padding=(1, 2)
        )

    def format_status(self, result: AlbumDownloadResult) -> Text:
        """Format the status cell of an album result."""
        if not result.succeeded:
            return Text("✗ failed", style="bold red")
        if result.skipped:
            return Text("– no tracks", style="yellow")
        if result.tracks_failed:
            return Text("⚠ partial", style="yellow")
        return Text("✓ done", style="bold green")

    def create_results_table(self, results: List[AlbumDownloadResult]) -> Table:
        """Create a table with one row per processed album."""
        table = Table(box=box.ROUNDED, border_style="cyan", show_lines=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Album", style="white")
        table.add_column("Tracks", justify="right")
        table.add_column("Cover", justify="center")
        table.add_column("Status")

        for index, result in enumerate(results, 1):
            tracks = f"{result.tracks_saved}/{result.tracks_total}" if result.succeeded else "-"
            cover = "[green]✓[/green]" if result.cover_saved else "[dim]-[/dim]"
            table.add_row(str(index), result.display_name, tracks, cover, self.format_status(result))

        return table

    def display_album_result(self, result: AlbumDownloadResult):
        """Display the outcome of a single album."""
        if not result.succeeded:
            self.console.print(f"[bold red]✗[/bold red] {result.display_name}: [red]{result.error}[/red]")
            return
        if result.skipped:
            self.console.print(f"[yellow]⚠[/yellow] {result.display_name}: no tracks to download")
            return
        self.console.print(
            f"[bold green]✓[/bold green] {result.display_name}: "
            f"[green]{result.tracks_saved}[/green]/{result.tracks_total} tracks"
        )
        if result.directory:
            self.console.print(f"[dim]{result.directory}[/dim]")

    def display_download_summary(self, results: List[AlbumDownloadResult]):
        """Display final download summary."""
        downloaded = sum(r.tracks_saved for r in results)
        failed = sum(r.tracks_failed for r in results)
        albums_failed = sum(1 for r in results if not r.succeeded)

        self.console.print()
        if results:
            self.console.print(self.create_results_table(results))

        summary_content = f"[bold green]✓[/bold green] Total tracks downloaded: [green]{downloaded}[/green]\n"
        if failed > 0:
            summary_content += f"[bold red]✗[/bold red] Total tracks failed: [red]{failed}[/red]\n"
        if albums_failed > 0:
            summary_content += f"[bold red]✗[/bold red] Albums failed: [red]{albums_failed}[/red]\n"
        summary_content += f"[dim blue]ℹ[/dim blue] [dim]Albums processed: {len(results)}[/dim]"

        self.console.print(Panel(
            summary_content,
            title="[bold cyan]DOWNLOAD SUMMARY[/bold cyan]",
            border_style="cyan",
            box=box.ROUNDED,
            padding=(1, 2)
        ))
        self.console.print()
