"""
Configuration for bandcamp-download.
Contains all constants, settings, and global parameters.
"""

import os

# Project Information
PROJECT_NAME = "bandcamp-download"
PROJECT_VERSION = "1.0.0"
PROJECT_DESCRIPTION = "Download Bandcamp albums and artist catalogs as tagged MP3 files"

# HTTP Configuration
HTTP_CONFIG = {
    "USER_AGENT": f"{PROJECT_NAME}/{PROJECT_VERSION}",
    "TIMEOUT": 30,  # seconds, applied to every single fetch
}

# Download Configuration
DOWNLOAD_CONFIG = {
    "DEFAULT_DIR": os.environ.get("BANDCAMP_DOWNLOAD_DIR", "./"),
    "TRACK_EXTENSION": ".mp3",
    "COVER_FILENAME": "cover.jpg",
    "COVER_URL_TEMPLATE": "https://f4.bcbits.com/img/a{artwork_id}_10.jpg",
    "TAG_COMMENT": f"Downloaded by {PROJECT_NAME}",
    "TAG_LANGUAGE": "eng",
}

# Markers used to locate data embedded in Bandcamp pages
PAGE_MARKERS = {
    "ALBUM_DATA_START": "var TralbumData = {",
    "ALBUM_DATA_END": "};",
    "ARTIST_URL_PATTERN": r'band_url = "(.*)"',
    "RELEASE_LINK_PATTERN": r'href="(/(album|track)/.*?)"',
    "CONCATENATED_URL_PATTERN": r'(url: ".+)" \+ "(.+",)',
}

# Release dates look like "01 Jan 2020 00:00:00 GMT": two-digit day, alphabetic zone
RELEASE_DATE_FORMAT = "%d %b %Y %H:%M:%S"
RELEASE_DATE_PATTERN = r"\d{2} [A-Za-z]{3} \d{4} \d{2}:\d{2}:\d{2} [A-Za-z]{3,5}"

# Logging Configuration
LOGGING_CONFIG = {
    "LEVEL": "INFO",
    "VERBOSE_LEVEL": "DEBUG",
    "FORMAT": "%(levelname)s - %(name)s - %(message)s",
}

# Error Messages
ERROR_MESSAGES = {
    "PAGE_FETCH_FAILED": "Failed to download page",
    "ALBUM_DATA_NOT_FOUND": "unable to find album data",
    "ALBUM_DATA_END_NOT_FOUND": "unable to find album data end",
    "ARTIST_URL_NOT_FOUND": "Can't find artist URL",
    "NO_RELEASE_LINKS": "No album links found",
    "INVALID_URL": "Invalid URL provided.",
}
