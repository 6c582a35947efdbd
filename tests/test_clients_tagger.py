"""
Tests for the ID3 tagger.
"""

import pytest
import sys
from pathlib import Path

from mutagen.id3 import ID3, TIT2

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bandcamp_download.clients.tagger import ID3Tagger
from bandcamp_download.core.exceptions import TagError


class TestID3Tagger:
    """Tests for ID3Tagger class."""

    def test_tagger_defaults(self):
        """Test ID3Tagger default comment and language."""
        tagger = ID3Tagger()

        assert tagger.comment == "Downloaded by bandcamp-download"
        assert tagger.language == "eng"

    def test_open_file_without_tags(self, temp_audio_file):
        """Test that a file without a tag yields an empty tag."""
        tags = ID3Tagger().open(temp_audio_file)

        assert isinstance(tags, ID3)
        assert len(tags) == 0

    def test_open_missing_file(self, temp_dir):
        """Test that unreadable files raise TagError."""
        with pytest.raises(TagError):
            ID3Tagger().open(temp_dir / "missing.mp3")

    def test_apply_and_save(self, temp_audio_file):
        """Test that all fields are written and the audio is kept."""
        tagger = ID3Tagger()
        tags = tagger.open(temp_audio_file)
        tagger.apply(tags, artist="Foo", album="Bar", title="One",
                     track_number=1, total_tracks=10, year="2020")
        tagger.save(tags, temp_audio_file)

        saved = ID3(str(temp_audio_file))
        assert saved["TPE1"].text == ["Foo"]
        assert saved["TALB"].text == ["Bar"]
        assert saved["TIT2"].text == ["One"]
        assert str(saved["TDRC"].text[0]) == "2020"
        assert saved["TRCK"].text == ["1/10"]
        comments = saved.getall("COMM")
        assert len(comments) == 1
        assert comments[0].lang == "eng"
        assert comments[0].text == ["Downloaded by bandcamp-download"]
        assert temp_audio_file.read_bytes().endswith(b"fake audio data")

    def test_apply_without_year(self, temp_audio_file):
        """Test that no year frame is written when the year is unknown."""
        tagger = ID3Tagger()
        tags = tagger.open(temp_audio_file)
        tagger.apply(tags, artist="Foo", album="Bar", title="One",
                     track_number=1, total_tracks=1, year=None)
        tagger.save(tags, temp_audio_file)

        saved = ID3(str(temp_audio_file))
        assert "TDRC" not in saved
        assert saved["TRCK"].text == ["1/1"]

    def test_apply_replaces_existing_frames(self, temp_audio_file):
        """Test that retagging replaces frames instead of adding duplicates."""
        tagger = ID3Tagger()
        for _ in range(2):
            tags = tagger.open(temp_audio_file)
            tagger.apply(tags, artist="Foo", album="Bar", title="One",
                         track_number=1, total_tracks=1)
            tagger.save(tags, temp_audio_file)

        saved = ID3(str(temp_audio_file))
        assert len(saved.getall("TIT2")) == 1
        assert len(saved.getall("COMM")) == 1

    def test_open_keeps_existing_frames(self, temp_audio_file):
        """Test that existing tags are loaded."""
        existing = ID3()
        existing.add(TIT2(encoding=3, text="Old"))
        existing.save(str(temp_audio_file))

        tags = ID3Tagger().open(temp_audio_file)

        assert tags["TIT2"].text == ["Old"]

    def test_save_to_directory_fails(self, temp_dir):
        """Test that unwritable targets raise TagError."""
        tagger = ID3Tagger()

        with pytest.raises(TagError):
            tagger.save(ID3(), temp_dir)
