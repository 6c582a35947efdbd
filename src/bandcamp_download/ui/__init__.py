"""
User interface components for bandcamp-download.
"""

from .cli import BandcampDownloadCLI
from .display import DisplayManager

__all__ = [
    'BandcampDownloadCLI',
    'DisplayManager'
]
