"""
Pytest configuration and shared fixtures.
"""

import json
import pytest
import sys
import tempfile
import shutil
from pathlib import Path
from typing import Dict, Generator, List, Optional, Union

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bandcamp_download.core.exceptions import FetchError


class FakeHttpClient:
    """In-memory stand-in for HttpClient keyed by URL."""

    def __init__(self, responses: Optional[Dict[str, Union[bytes, Exception]]] = None):
        self.responses = dict(responses or {})
        self.requested: List[str] = []

    def fetch(self, url: str) -> bytes:
        self.requested.append(url)
        response = self.responses.get(url)
        if response is None:
            raise FetchError(f"Failed to fetch {url}: 404 Client Error")
        if isinstance(response, Exception):
            raise response
        return response

    def fetch_text(self, url: str) -> str:
        return self.fetch(url).decode("utf-8")


def make_album_page(
    artist: str = "Foo",
    title: str = "Bar",
    release_date: Optional[str] = None,
    art_id: int = 42,
    tracks: Optional[list] = None
) -> bytes:
    """Build an album page the way Bandcamp embeds its album data."""
    lines = [
        "var TralbumData = {",
        f"    current: {{title: {json.dumps(title)}, type: \"album\"}},",
        f"    artist: {json.dumps(artist)},",
        '    url: "http://foo.bandcamp.com" + "/album/bar",',
    ]
    if release_date is not None:
        lines.append(f"    album_release_date: {json.dumps(release_date)},")
    lines.append(f"    art_id: {art_id},")
    lines.append(f"    trackinfo: {json.dumps(tracks if tracks is not None else [])},")
    lines.append("};")
    script = "\n".join(lines)
    return (
        "<html><head><title>Bar | Foo</title></head><body>\n"
        f"<script type=\"text/javascript\">\n{script}\n</script>\n"
        "</body></html>"
    ).encode("utf-8")


def make_track(number: int, title: str, audio_url: Optional[str]) -> dict:
    """Build a trackinfo entry."""
    return {
        "track_num": number,
        "title": title,
        "file": {"mp3-128": audio_url} if audio_url is not None else None,
    }


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def temp_audio_file(temp_dir: Path) -> Path:
    """Create a temporary audio file for testing."""
    audio_file = temp_dir / "test_audio.mp3"
    audio_file.write_bytes(b"fake audio data")
    return audio_file


@pytest.fixture
def fake_http_client():
    """Factory for in-memory HTTP clients."""
    return FakeHttpClient


@pytest.fixture
def album_page():
    """Factory for album page bodies."""
    return make_album_page


@pytest.fixture
def track_entry():
    """Factory for trackinfo entries."""
    return make_track


@pytest.fixture
def sample_album_record():
    """Sample album record for testing."""
    from bandcamp_download.models.releases import AlbumRecord, TrackRecord
    return AlbumRecord(
        artist="Test Artist",
        title="Test Album",
        release_date="01 Jan 2020 00:00:00 GMT",
        artwork_id=42,
        tracks=[
            TrackRecord(number=1, title="Track 1", audio_url="http://x/1.mp3"),
            TrackRecord(number=2, title="Track 2", audio_url="http://x/2.mp3"),
        ]
    )
