"""
Extraction of album data embedded in Bandcamp album pages.

Album pages carry their metadata in a script assignment::

    var TralbumData = {
        current: {title: "Bar", ...},
        artist: "Foo",
        url: "http://foo.bandcamp.com" + "/album/bar",
        trackinfo: [...],
        ...
    };

The object literal is not strict JSON: keys are unquoted and some URL values
are written as two concatenated string literals. The fragment is located by
plain substring search, the concatenation is joined with a narrow regex and
the result is decoded with json5.
"""

import re
from typing import Any, Dict, List, Optional

import json5

from ..core.config import PAGE_MARKERS, ERROR_MESSAGES
from ..core.exceptions import ExtractionError, ParseError
from ..models.releases import AlbumRecord, TrackRecord

CONCATENATED_URL = re.compile(PAGE_MARKERS["CONCATENATED_URL_PATTERN"])


def extract_album_data(page_body: str) -> str:
    """
    Locate the album data object in an album page.

    The fragment runs from the opening brace of the first start marker up to
    the first "};" after it. A nested "};" before the real end truncates it.

    Args:
        page_body: Raw HTML of the album page

    Returns:
        The repaired object literal, braces included

    Raises:
        ExtractionError: If either marker is missing
    """
    start_marker = PAGE_MARKERS["ALBUM_DATA_START"]
    end_marker = PAGE_MARKERS["ALBUM_DATA_END"]

    start_index = page_body.find(start_marker)
    if start_index == -1:
        raise ExtractionError(ERROR_MESSAGES["ALBUM_DATA_NOT_FOUND"])

    # Keep the marker's opening brace
    remainder = page_body[start_index + len(start_marker) - 1:]

    end_index = remainder.find(end_marker)
    if end_index == -1:
        raise ExtractionError(ERROR_MESSAGES["ALBUM_DATA_END_NOT_FOUND"])

    return repair_concatenated_urls(remainder[:end_index + 1])


def repair_concatenated_urls(fragment: str) -> str:
    """
    Join URL values written as two concatenated string literals.

    ``url: "http://verbalclick.bandcamp.com" + "/album/404",`` becomes
    ``url: "http://verbalclick.bandcamp.com/album/404",``. Nothing else in
    the fragment is touched.
    """
    return CONCATENATED_URL.sub(r'\1\2', fragment)


def _as_int(value: Any, field_name: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParseError(f"Field {field_name} must be a number, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ParseError(f"Field {field_name} must be an integer, got {value!r}")
    return int(value)


def _as_str(value: Any, field_name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ParseError(f"Field {field_name} must be a string, got {value!r}")
    return value


def _as_object(value: Any, field_name: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ParseError(f"Field {field_name} must be an object, got {type(value).__name__}")
    return value


def _parse_track(data: Any, index: int) -> TrackRecord:
    track = _as_object(data, f"trackinfo[{index}]")
    files = _as_object(track.get("file"), f"trackinfo[{index}].file")
    audio_url: Optional[str] = _as_str(files.get("mp3-128"), f"trackinfo[{index}].file.mp3-128") or None
    return TrackRecord(
        number=_as_int(track.get("track_num"), f"trackinfo[{index}].track_num"),
        title=_as_str(track.get("title"), f"trackinfo[{index}].title"),
        audio_url=audio_url,
    )


def parse_album_data(fragment: str) -> AlbumRecord:
    """
    Decode an album data fragment into an AlbumRecord.

    Missing or null fields take empty values; required fields are checked
    by the caller.

    Raises:
        ParseError: If the fragment is not a valid object literal or a field
            has the wrong type
    """
    try:
        data = json5.loads(fragment)
    except ValueError as e:
        raise ParseError(f"Failed to decode album data: {e}") from e

    if not isinstance(data, dict):
        raise ParseError(f"Album data must be an object, got {type(data).__name__}")

    current = _as_object(data.get("current"), "current")

    raw_tracks = data.get("trackinfo")
    if raw_tracks is None:
        raw_tracks = []
    if not isinstance(raw_tracks, list):
        raise ParseError(f"Field trackinfo must be a list, got {type(raw_tracks).__name__}")

    tracks: List[TrackRecord] = [_parse_track(t, i) for i, t in enumerate(raw_tracks)]

    return AlbumRecord(
        artist=_as_str(data.get("artist"), "artist"),
        title=_as_str(current.get("title"), "current.title"),
        release_date=_as_str(data.get("album_release_date"), "album_release_date") or None,
        artwork_id=_as_int(data.get("art_id"), "art_id"),
        tracks=tracks,
    )


def extract_album(page_body: str) -> AlbumRecord:
    """Extract and decode the album data of an album page."""
    return parse_album_data(extract_album_data(page_body))
