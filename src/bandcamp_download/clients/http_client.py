"""
HTTP Client Module
Single-shot fetching of pages, audio files and cover art.
"""

import requests
from typing import Optional
from ..core.config import HTTP_CONFIG
from ..core.exceptions import FetchError


class HttpClient:
    """Blocking HTTP client returning whole response bodies."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None
    ):
        self.timeout = timeout or HTTP_CONFIG["TIMEOUT"]
        self.user_agent = user_agent or HTTP_CONFIG["USER_AGENT"]

        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': self.user_agent
        })

    def fetch(self, url: str) -> bytes:
        """
        Fetch a URL and return its body.

        Args:
            url: URL to fetch

        Returns:
            Response body as bytes

        Raises:
            FetchError: On transport failure or a non-2xx status
        """
        try:
            with self.session.get(url, timeout=self.timeout) as response:
                response.raise_for_status()
                return response.content
        except requests.exceptions.RequestException as e:
            raise FetchError(f"Failed to fetch {url}: {e}") from e

    def fetch_text(self, url: str) -> str:
        """Fetch a page and decode it as UTF-8."""
        return self.fetch(url).decode("utf-8", errors="replace")

    def close(self):
        """Close the underlying session."""
        self.session.close()
