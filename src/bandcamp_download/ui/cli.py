"""
bandcamp-download CLI Module
Command-line interface for downloading albums and artist catalogs.
"""

import argparse
import sys
from typing import List, Optional

from ..clients.http_client import HttpClient
from ..core.config import PROJECT_NAME, PROJECT_VERSION, PROJECT_DESCRIPTION, DOWNLOAD_CONFIG, LOGGING_CONFIG
from ..core.exceptions import ConfigurationError
from ..core.logger import setup_logging
from ..core.validation import validate_page_url
from ..services.album_downloader import AlbumDownloader
from ..services.catalog_crawler import CatalogCrawler
from .display import DisplayManager


class BandcampDownloadCLI:
    """Main CLI class for bandcamp-download."""

    def __init__(
        self,
        album_downloader: Optional[AlbumDownloader] = None,
        catalog_crawler: Optional[CatalogCrawler] = None,
        display_manager: Optional[DisplayManager] = None,
        http_client: Optional[HttpClient] = None
    ):
        """
        Initialize the CLI.

        Services are created on first use so that they pick up the logging
        level chosen on the command line. Services created here share one
        HTTP client, which is closed at the end of each run.
        """
        self._album_downloader = album_downloader
        self._catalog_crawler = catalog_crawler
        self._http_client = http_client
        self.display_manager = display_manager or DisplayManager()

    @property
    def http_client(self) -> HttpClient:
        if self._http_client is None:
            self._http_client = HttpClient()
        return self._http_client

    @property
    def album_downloader(self) -> AlbumDownloader:
        if self._album_downloader is None:
            self._album_downloader = AlbumDownloader(http_client=self.http_client)
        return self._album_downloader

    @property
    def catalog_crawler(self) -> CatalogCrawler:
        if self._catalog_crawler is None:
            self._catalog_crawler = CatalogCrawler(
                album_downloader=self.album_downloader,
                http_client=self.http_client
            )
        return self._catalog_crawler

    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            prog=PROJECT_NAME,
            description=f"{PROJECT_DESCRIPTION} v{PROJECT_VERSION}",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  %(prog)s album --url https://artist.bandcamp.com/album/name
  %(prog)s a -u https://artist.bandcamp.com/track/name -p ~/Music
  %(prog)s albums --url https://artist.bandcamp.com/music --verbose
            """
        )

        parser.add_argument(
            '--version',
            action='version',
            version=f'{PROJECT_NAME} {PROJECT_VERSION}'
        )

        subparsers = parser.add_subparsers(
            dest='mode',
            help='Available modes',
            required=True
        )

        album_parser = subparsers.add_parser(
            'album',
            aliases=['a'],
            help='download album from album page'
        )
        self._add_common_args(album_parser)
        album_parser.set_defaults(command='album')

        albums_parser = subparsers.add_parser(
            'albums',
            aliases=['as'],
            help='download albums from albums page'
        )
        self._add_common_args(albums_parser)
        albums_parser.set_defaults(command='albums')

        return parser

    def _add_common_args(self, parser: argparse.ArgumentParser):
        """Add arguments shared by both modes."""
        parser.add_argument(
            '--url', '-u',
            required=True,
            help='album page URL'
        )
        parser.add_argument(
            '--path', '-p',
            default=DOWNLOAD_CONFIG["DEFAULT_DIR"],
            help=f'path where to download (default: {DOWNLOAD_CONFIG["DEFAULT_DIR"]})'
        )
        parser.add_argument(
            '--verbose', '-v',
            action='store_true',
            help='show debug messages'
        )

    def run(self, args: Optional[List[str]] = None):
        """Run the CLI with given arguments."""
        parser = self.create_parser()
        parsed_args = parser.parse_args(args)

        setup_logging(level=LOGGING_CONFIG["VERBOSE_LEVEL"] if parsed_args.verbose else LOGGING_CONFIG["LEVEL"])

        try:
            url = validate_page_url(parsed_args.url)

            if parsed_args.command == 'album':
                self.display_manager.display_header(PROJECT_NAME, f"Album: {url}")
                result = self.album_downloader.download_album(url, parsed_args.path)
                self.display_manager.display_album_result(result)
                results = [result]
            else:
                self.display_manager.display_header(PROJECT_NAME, f"Catalog: {url}")
                results = self.catalog_crawler.download_catalog(url, parsed_args.path)

            self.display_manager.display_download_summary(results)
        except ConfigurationError as e:
            self.display_manager.display_error(str(e))
            sys.exit(1)
        except KeyboardInterrupt:
            self.display_manager.display_warning("Operation cancelled by user.")
            sys.exit(1)
        finally:
            if self._http_client is not None:
                self._http_client.close()
