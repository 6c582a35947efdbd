"""
Download result models.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class AlbumDownloadResult:
    """Outcome of processing one album page."""
    url: str
    artist: str = ""
    title: str = ""
    directory: Optional[Path] = None
    tracks_total: int = 0
    tracks_saved: int = 0
    tracks_failed: int = 0
    cover_saved: bool = False
    skipped: bool = False  # page listed no tracks
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        """True when the album was processed without an album-level error."""
        return self.error is None

    @property
    def display_name(self) -> str:
        """Human readable album name for summaries."""
        if self.artist and self.title:
            return f"{self.artist} - {self.title}"
        return self.title or self.url
