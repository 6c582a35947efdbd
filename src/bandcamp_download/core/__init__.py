"""
Core module for bandcamp-download.
Contains configuration, exceptions, logging setup, and validation.
"""

from .config import *
from .exceptions import *
from .logger import setup_logging, get_logger, log_fields
from .validation import validate_configuration, validate_and_raise, check_dependencies, validate_page_url

__all__ = [
    'setup_logging',
    'get_logger',
    'log_fields',
    'validate_configuration',
    'validate_and_raise',
    'check_dependencies',
    'validate_page_url',
    'BandcampDownloadError',
    'FetchError',
    'ExtractionError',
    'ParseError',
    'ValidationError',
    'DateParseError',
    'FilesystemError',
    'TagError',
    'ConfigurationError',
]
