"""
Client modules for the network, tags and the filesystem.
"""

from .http_client import HttpClient
from .tagger import ID3Tagger
from .path_utils import PathUtils

__all__ = [
    'HttpClient',
    'ID3Tagger',
    'PathUtils'
]
