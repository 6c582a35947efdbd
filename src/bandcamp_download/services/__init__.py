"""
Core services for bandcamp-download.
"""

from .page_extractor import extract_album, extract_album_data, parse_album_data, repair_concatenated_urls
from .album_downloader import AlbumDownloader
from .catalog_crawler import CatalogCrawler, extract_artist_url, extract_release_links

__all__ = [
    'extract_album',
    'extract_album_data',
    'parse_album_data',
    'repair_concatenated_urls',
    'AlbumDownloader',
    'CatalogCrawler',
    'extract_artist_url',
    'extract_release_links'
]
