"""
Album download service.

Downloads a single Bandcamp album page: every track as a tagged MP3 file and
the cover image, laid out as root/artist/"{year} {title}"/.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..clients.http_client import HttpClient
from ..clients.path_utils import PathUtils
from ..clients.tagger import ID3Tagger
from ..core.config import DOWNLOAD_CONFIG
from ..core.exceptions import (
    BandcampDownloadError,
    DateParseError,
    ExtractionError,
    FetchError,
    FilesystemError,
    ParseError,
    TagError,
    ValidationError,
)
from ..core.logger import get_logger, log_fields
from ..models.releases import AlbumRecord, TrackRecord
from ..models.results import AlbumDownloadResult
from .page_extractor import extract_album_data, parse_album_data


class AlbumDownloader:
    """Downloads and tags the tracks of one album page at a time."""

    def __init__(
        self,
        http_client: Optional[HttpClient] = None,
        tagger: Optional[ID3Tagger] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize album downloader.

        Args:
            http_client: Client used for pages, audio and cover art
            tagger: Tag-writer applied to every downloaded track
            logger: Logger receiving progress and every failure
        """
        self.http_client = http_client or HttpClient()
        self.tagger = tagger or ID3Tagger()
        self.logger = logger or get_logger("services.album_downloader")

    def download_album(self, page_url: str, root_path: Union[str, Path]) -> AlbumDownloadResult:
        """
        Download every track of an album page and its cover.

        Album-level failures stop this album only; they are logged and
        recorded on the returned result, never raised. Track failures are
        isolated to their track.

        Args:
            page_url: Album or track page URL
            root_path: Download root directory

        Returns:
            Outcome of the album
        """
        result = AlbumDownloadResult(url=page_url)

        self.logger.info(f"Downloading album page {log_fields(url=page_url)}")
        try:
            body = self.http_client.fetch_text(page_url)
        except FetchError as e:
            return self._abort(result, "Failed to download page", e, url=page_url)

        self.logger.info("Extracting album data from page body")
        try:
            fragment = extract_album_data(body)
        except ExtractionError as e:
            return self._abort(result, "Failed to extract album data", e, url=page_url)

        self.logger.debug(fragment)

        try:
            album = parse_album_data(fragment)
        except ParseError as e:
            return self._abort(result, "Failed to parse album data", e, url=page_url)

        result.artist = album.artist
        result.title = album.title
        result.tracks_total = album.track_count

        try:
            self.validate_album(album)
        except ValidationError as e:
            return self._abort(result, "Invalid album data", e,
                               url=page_url, artist=album.artist, title=album.title)

        if not album.tracks:
            self.logger.info(f"Album without tracks detected {log_fields(artist=album.artist, title=album.title)}")
            result.skipped = True
            return result

        try:
            album_year = PathUtils.parse_album_year(album.release_date)
        except DateParseError as e:
            return self._abort(result, "Failed to parse album release date", e,
                               artist=album.artist, title=album.title, release_date=album.release_date)

        album_directory = PathUtils.album_directory(root_path, album, album_year)
        self.logger.info(f"Creating album path {log_fields(path=str(album_directory))}")
        try:
            PathUtils.create_directory(album_directory)
        except FilesystemError as e:
            return self._abort(result, "Failed to create album path", e,
                               artist=album.artist, title=album.title, path=str(album_directory))
        result.directory = album_directory

        for track in album.tracks:
            if self.download_track(album_directory, album, album_year, track):
                result.tracks_saved += 1
            else:
                result.tracks_failed += 1

        result.cover_saved = self.download_cover(album_directory, album)
        return result

    def validate_album(self, album: AlbumRecord):
        """
        Check the fields every album needs before anything is written.

        Raises:
            ValidationError: If the title or the artist is empty
        """
        if not album.title:
            raise ValidationError("Album without title detected")
        if not album.artist:
            raise ValidationError("Album without artist detected")

    def download_track(
        self,
        album_directory: Path,
        album: AlbumRecord,
        album_year: str,
        track: TrackRecord
    ) -> bool:
        """
        Download one track into the album directory and tag it.

        No error escapes this method. A tagging failure leaves the untagged
        file in place.

        Returns:
            True if the audio file was written
        """
        number = album.effective_track_number(track)
        fields = {
            "artist": album.artist,
            "album": album.title,
            "track_number": number,
            "track_title": track.title,
        }

        try:
            if not track.is_downloadable:
                raise ValidationError("Track without audio file detected")

            self.logger.info(f"Downloading track {log_fields(url=track.audio_url)}")
            audio = self.http_client.fetch(track.audio_url)

            file_path = PathUtils.track_file(album_directory, number, track.title)
            self.logger.info(f"Creating track file {log_fields(path=str(file_path))}")
            PathUtils.write_bytes(file_path, audio)
        except BandcampDownloadError as e:
            self.logger.error(f"Failed to download track: {e} {log_fields(**fields)}")
            return False
        except Exception:
            self.logger.exception(f"Unexpected error while downloading track {log_fields(**fields)}")
            return False

        self.tag_track(file_path, album, album_year, track, number)
        return True

    def tag_track(
        self,
        file_path: Path,
        album: AlbumRecord,
        album_year: str,
        track: TrackRecord,
        number: int
    ) -> bool:
        """
        Write album and track metadata into a downloaded file.

        Returns:
            True if the tags were saved
        """
        self.logger.info("Tagging mp3 file with metadata")

        try:
            tags = self.tagger.open(file_path)
        except TagError as e:
            self.logger.error(f"Failed to open mp3 file: {e} {log_fields(path=str(file_path))}")
            return False

        self.tagger.apply(
            tags,
            artist=album.artist,
            album=album.title,
            title=track.title,
            track_number=number,
            total_tracks=album.track_count,
            year=album_year or None,
        )

        try:
            self.tagger.save(tags, file_path)
        except TagError as e:
            self.logger.error(f"Failed to save tagged mp3 file: {e} {log_fields(path=str(file_path))}")
            return False

        return True

    def download_cover(self, album_directory: Path, album: AlbumRecord) -> bool:
        """
        Download the album artwork as cover.jpg.

        Returns:
            True if the cover was written
        """
        cover_url = DOWNLOAD_CONFIG["COVER_URL_TEMPLATE"].format(artwork_id=album.artwork_id)
        fields = {"artist": album.artist, "title": album.title, "cover_url": cover_url}

        self.logger.info("Downloading artwork")
        try:
            cover = self.http_client.fetch(cover_url)
        except FetchError as e:
            self.logger.error(f"Failed to download album cover: {e} {log_fields(**fields)}")
            return False

        cover_path = PathUtils.cover_file(album_directory)
        self.logger.info(f"Creating album cover file {log_fields(path=str(cover_path))}")
        try:
            PathUtils.write_bytes(cover_path, cover)
        except FilesystemError as e:
            self.logger.error(f"Failed to write album cover: {e} {log_fields(**fields)}")
            return False

        return True

    def _abort(self, result: AlbumDownloadResult, message: str, error: Exception, **fields) -> AlbumDownloadResult:
        """Log an album-level failure and record it on the result."""
        self.logger.error(f"{message}: {error} {log_fields(**fields)}")
        result.error = f"{message}: {error}"
        return result
