"""
Path Utilities Module
Handles release years, path sanitization and the album directory layout.
"""

import re
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from ..core.config import DOWNLOAD_CONFIG, RELEASE_DATE_FORMAT, RELEASE_DATE_PATTERN
from ..core.exceptions import DateParseError, FilesystemError
from ..models.releases import AlbumRecord

PathLike = Union[str, Path]

PATH_SEPARATORS = re.compile(r'[/\\]')


class PathUtils:
    """Utility functions for download paths."""

    @staticmethod
    def sanitize_component(name: str) -> str:
        """
        Make a single path component safe to join under the download root.

        Path separators are replaced with '-', and a bare '.' or '..' has its
        dots replaced with '_'. Anything else is kept as is.

        Args:
            name: Artist, album or track title

        Returns:
            Sanitized path component
        """
        sanitized = PATH_SEPARATORS.sub('-', name)
        if sanitized in ('.', '..'):
            sanitized = sanitized.replace('.', '_')
        return sanitized

    @staticmethod
    def parse_album_year(release_date: Optional[str]) -> str:
        """
        Extract the 4-digit year from a Bandcamp release date.

        Args:
            release_date: Date like "01 Jan 2020 00:00:00 GMT", or None

        Returns:
            Year as a string, or "" when no date is given

        Raises:
            DateParseError: If the date does not match the expected format
        """
        if not release_date:
            return ""

        release_date = release_date.strip()
        if not re.fullmatch(RELEASE_DATE_PATTERN, release_date):
            raise DateParseError(f"Unrecognised release date format {release_date!r}")

        timestamp, _, _zone = release_date.rpartition(' ')

        try:
            parsed = datetime.strptime(timestamp, RELEASE_DATE_FORMAT)
        except ValueError as e:
            raise DateParseError(f"Failed to parse release date {release_date!r}: {e}") from e

        return f"{parsed.year:04d}"

    @staticmethod
    def album_directory(root_path: PathLike, album: AlbumRecord, album_year: str) -> Path:
        """
        Directory for an album: root/artist/"{year} {title}".

        The name is trimmed, so an unknown year leaves just the title.
        """
        artist = PathUtils.sanitize_component(album.artist)
        folder_name = PathUtils.sanitize_component(f"{album_year} {album.title}".strip())
        return Path(root_path) / artist / folder_name

    @staticmethod
    def create_directory(directory: Path) -> Path:
        """
        Create a directory and its parents if missing.

        Raises:
            FilesystemError: If the directory cannot be created
        """
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except (OSError, ValueError) as e:
            raise FilesystemError(f"Failed to create directory {directory}: {e}") from e
        return directory

    @staticmethod
    def track_file(album_directory: Path, track_number: int, track_title: str) -> Path:
        """Path of a track's audio file: "{number} {title}.mp3"."""
        title = PathUtils.sanitize_component(track_title)
        return album_directory / f"{track_number} {title}{DOWNLOAD_CONFIG['TRACK_EXTENSION']}"

    @staticmethod
    def cover_file(album_directory: Path) -> Path:
        """Path of the album cover image."""
        return album_directory / DOWNLOAD_CONFIG["COVER_FILENAME"]

    @staticmethod
    def write_bytes(file_path: Path, data: bytes) -> Path:
        """
        Write a downloaded body to disk, replacing any previous file.

        Raises:
            FilesystemError: If the file cannot be created or written
        """
        try:
            with open(file_path, 'wb') as out:
                out.write(data)
        except (OSError, ValueError) as e:
            raise FilesystemError(f"Failed to write {file_path}: {e}") from e
        return file_path
