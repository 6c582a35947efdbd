"""
Custom exceptions for bandcamp-download.
"""


class BandcampDownloadError(Exception):
    """Base exception for bandcamp-download."""
    pass


class FetchError(BandcampDownloadError, ConnectionError):
    """Exception raised when a page, track or cover cannot be fetched."""
    pass


class ExtractionError(BandcampDownloadError):
    """Exception raised when embedded page data cannot be located."""
    pass


class ParseError(BandcampDownloadError):
    """Exception raised when the album data fragment is malformed."""
    pass


class ValidationError(BandcampDownloadError):
    """Exception raised when a required album field is missing."""
    pass


class DateParseError(BandcampDownloadError):
    """Exception raised when an album release date cannot be parsed."""
    pass


class FilesystemError(BandcampDownloadError):
    """Exception raised when a directory or file cannot be created or written."""
    pass


class TagError(BandcampDownloadError):
    """Exception raised when ID3 tags cannot be opened or saved."""
    pass


class ConfigurationError(BandcampDownloadError):
    """Exception raised when configuration or user input is invalid."""
    pass
