"""
Catalog crawling service.

Discovers every album and track linked from an artist's catalog page and
downloads them one after another.
"""

import logging
import re
from pathlib import Path
from typing import List, Optional, Union

from ..clients.http_client import HttpClient
from ..core.config import PAGE_MARKERS, ERROR_MESSAGES
from ..core.exceptions import ExtractionError, FetchError
from ..core.logger import get_logger, log_fields
from ..models.results import AlbumDownloadResult
from .album_downloader import AlbumDownloader

ARTIST_URL = re.compile(PAGE_MARKERS["ARTIST_URL_PATTERN"])
RELEASE_LINK = re.compile(PAGE_MARKERS["RELEASE_LINK_PATTERN"])


def extract_artist_url(page_body: str) -> str:
    """
    Find the artist's base URL assigned in the catalog page script.

    Raises:
        ExtractionError: If the page has no band_url assignment
    """
    match = ARTIST_URL.search(page_body)
    if not match:
        raise ExtractionError(ERROR_MESSAGES["ARTIST_URL_NOT_FOUND"])
    return match.group(1)


def extract_release_links(page_body: str) -> List[str]:
    """
    Collect every relative /album/ and /track/ link in page order.

    Duplicates are kept.
    """
    return [match.group(1) for match in RELEASE_LINK.finditer(page_body)]


class CatalogCrawler:
    """Downloads every release listed on an artist catalog page."""

    def __init__(
        self,
        album_downloader: Optional[AlbumDownloader] = None,
        http_client: Optional[HttpClient] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.logger = logger or get_logger("services.catalog_crawler")
        self.http_client = http_client or HttpClient()
        self.album_downloader = album_downloader or AlbumDownloader(
            http_client=self.http_client,
            logger=self.logger.getChild("album")
        )

    def download_catalog(self, catalog_url: str, root_path: Union[str, Path]) -> List[AlbumDownloadResult]:
        """
        Download every album and track linked from a catalog page.

        Albums are processed sequentially. An album that fails, even with an
        unexpected error, is recorded and the crawl moves on to the next link.

        Args:
            catalog_url: Artist catalog page URL
            root_path: Download root directory

        Returns:
            One result per discovered link, in page order
        """
        self.logger.info(f"Downloading albums page {log_fields(url=catalog_url)}")
        try:
            body = self.http_client.fetch_text(catalog_url)
        except FetchError as e:
            self.logger.error(f"Failed to download albums page: {e} {log_fields(url=catalog_url)}")
            return []

        self.logger.info("Extracting album URLs from page body")
        try:
            artist_url = extract_artist_url(body)
        except ExtractionError as e:
            self.logger.error(f"{e} {log_fields(url=catalog_url)}")
            return []

        links = extract_release_links(body)
        if not links:
            self.logger.warning(f"{ERROR_MESSAGES['NO_RELEASE_LINKS']} {log_fields(url=catalog_url)}")
            return []

        results = []
        for link in links:
            album_url = artist_url + link
            self.logger.info(f"Downloading album {log_fields(album_url=album_url)}")
            try:
                result = self.album_downloader.download_album(album_url, root_path)
            except Exception as e:
                self.logger.exception(f"Unexpected error while downloading album {log_fields(album_url=album_url)}")
                result = AlbumDownloadResult(url=album_url, error=f"Unexpected error: {e}")
            results.append(result)

        return results
