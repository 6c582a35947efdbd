"""
Tests for album and track models.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bandcamp_download.models.releases import TrackRecord, AlbumRecord
from bandcamp_download.models.results import AlbumDownloadResult


class TestTrackRecord:
    """Tests for TrackRecord model."""

    def test_track_creation(self):
        """Test TrackRecord model creation."""
        track = TrackRecord(number=3, title="Three", audio_url="http://x/3.mp3")

        assert track.number == 3
        assert track.title == "Three"
        assert track.is_downloadable is True

    @pytest.mark.parametrize("audio_url", [None, ""])
    def test_track_without_audio(self, audio_url):
        """Test that tracks without an audio URL are not downloadable."""
        assert TrackRecord(number=1, title="One", audio_url=audio_url).is_downloadable is False


class TestAlbumRecord:
    """Tests for AlbumRecord model."""

    def test_album_defaults(self):
        """Test AlbumRecord defaults."""
        album = AlbumRecord(artist="Foo", title="Bar")

        assert album.release_date is None
        assert album.artwork_id == 0
        assert album.tracks == []
        assert album.track_count == 0

    def test_album_tracks_not_shared(self):
        """Test that each album gets its own track list."""
        first = AlbumRecord(artist="Foo", title="Bar")
        second = AlbumRecord(artist="Foo", title="Baz")
        first.tracks.append(TrackRecord(number=1, title="One"))

        assert second.tracks == []

    def test_single_track_number_zero_becomes_one(self):
        """Test that a lone track numbered 0 is used as track 1."""
        track = TrackRecord(number=0, title="Single")
        album = AlbumRecord(artist="Foo", title="Single", tracks=[track])

        assert album.effective_track_number(track) == 1
        assert track.number == 0

    def test_two_tracks_number_zero_keep_zero(self):
        """Test that number 0 is kept when the album has several tracks."""
        tracks = [TrackRecord(number=0, title="A"), TrackRecord(number=0, title="B")]
        album = AlbumRecord(artist="Foo", title="Bar", tracks=tracks)

        assert [album.effective_track_number(t) for t in tracks] == [0, 0]

    def test_numbered_tracks_unchanged(self, sample_album_record):
        """Test that regular track numbers are used as is."""
        numbers = [sample_album_record.effective_track_number(t) for t in sample_album_record.tracks]
        assert numbers == [1, 2]


class TestAlbumDownloadResult:
    """Tests for AlbumDownloadResult model."""

    def test_result_defaults(self):
        """Test that a fresh result counts as succeeded."""
        result = AlbumDownloadResult(url="http://foo/album/bar")

        assert result.succeeded is True
        assert result.skipped is False
        assert result.display_name == "http://foo/album/bar"

    def test_result_with_error(self):
        """Test that an error marks the result as failed."""
        result = AlbumDownloadResult(url="http://foo/album/bar", artist="Foo", title="Bar",
                                     error="Failed to download page")

        assert result.succeeded is False
        assert result.display_name == "Foo - Bar"
