"""
Data models for bandcamp-download.
"""

from .releases import TrackRecord, AlbumRecord
from .results import AlbumDownloadResult

__all__ = [
    'TrackRecord',
    'AlbumRecord',
    'AlbumDownloadResult'
]
