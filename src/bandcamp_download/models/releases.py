"""
Album and track models extracted from Bandcamp page data.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class TrackRecord:
    """Track information from an album page."""
    number: int  # 1-based position, 0 when the page leaves it unset
    title: str
    audio_url: Optional[str] = None

    @property
    def is_downloadable(self) -> bool:
        """Whether the page exposes an audio file for this track."""
        return bool(self.audio_url)


@dataclass
class AlbumRecord:
    """Album information with its tracks."""
    artist: str
    title: str
    release_date: Optional[str] = None
    artwork_id: int = 0
    tracks: List[TrackRecord] = field(default_factory=list)

    @property
    def track_count(self) -> int:
        """Number of tracks listed on the page."""
        return len(self.tracks)

    def effective_track_number(self, track: TrackRecord) -> int:
        """
        Track number to use for file names and tags.

        Single-track releases often report number 0; those are treated as
        track 1. The record itself is left untouched.
        """
        if track.number == 0 and self.track_count == 1:
            return 1
        return track.number
