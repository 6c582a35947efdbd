"""
ID3 Tagger Module
Writes album and track metadata into downloaded MP3 files.
"""

from pathlib import Path
from typing import Optional, Union

from mutagen import MutagenError
from mutagen.id3 import ID3, ID3NoHeaderError, TPE1, TALB, TIT2, TDRC, TRCK, COMM

from ..core.config import DOWNLOAD_CONFIG
from ..core.exceptions import TagError

PathLike = Union[str, Path]

# UTF-8 text encoding for ID3v2.4 frames
UTF8 = 3


class ID3Tagger:
    """Tag-writer for MP3 files backed by mutagen."""

    def __init__(self, comment: Optional[str] = None, language: Optional[str] = None):
        self.comment = comment or DOWNLOAD_CONFIG["TAG_COMMENT"]
        self.language = language or DOWNLOAD_CONFIG["TAG_LANGUAGE"]

    def open(self, file_path: PathLike) -> ID3:
        """
        Load the ID3 tag of a file, starting an empty one if it has none.

        Raises:
            TagError: If the file cannot be read
        """
        try:
            return ID3(str(file_path))
        except ID3NoHeaderError:
            return ID3()
        except (MutagenError, OSError) as e:
            raise TagError(f"Failed to open tags of {file_path}: {e}") from e

    def apply(
        self,
        tags: ID3,
        artist: str,
        album: str,
        title: str,
        track_number: int,
        total_tracks: int,
        year: Optional[str] = None
    ) -> ID3:
        """
        Stage album and track fields on a loaded tag.

        The year frame is only written when a year is known.
        """
        tags.add(TPE1(encoding=UTF8, text=artist))
        tags.add(TALB(encoding=UTF8, text=album))
        tags.add(TIT2(encoding=UTF8, text=title))
        if year:
            tags.add(TDRC(encoding=UTF8, text=year))
        tags.add(COMM(encoding=UTF8, lang=self.language, desc="", text=self.comment))
        tags.add(TRCK(encoding=UTF8, text=f"{track_number}/{total_tracks}"))
        return tags

    def save(self, tags: ID3, file_path: PathLike):
        """
        Write a tag back to its file.

        Raises:
            TagError: If the tag cannot be written
        """
        try:
            tags.save(str(file_path))
        except (MutagenError, OSError) as e:
            raise TagError(f"Failed to save tags of {file_path}: {e}") from e
