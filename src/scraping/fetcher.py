"""Content fetcher: URL in, markdown body and metadata out."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import httpx
from bs4 import BeautifulSoup

from config import settings
from engine.errors import FetchError
from scraping.converter import extract_metadata, html_to_markdown

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchedPage:
    """Extracted content of one page."""

    url: str  # Final URL after redirects
    content: str  # Markdown-like body
    metadata: dict[str, str] = field(default_factory=dict)


class ContentFetcher(ABC):
    """Retrieves page content for analysis."""

    @abstractmethod
    async def fetch(self, url: str) -> FetchedPage:
        """
        Fetch and extract a page.

        Raises:
            FetchError: target unreachable or no usable content
        """
        pass


class HttpContentFetcher(ContentFetcher):
    """Fetches pages over HTTP and renders them with BeautifulSoup."""

    def __init__(self, client: httpx.AsyncClient | None = None):
        self._client = client

    async def fetch(self, url: str) -> FetchedPage:
        try:
            if self._client is not None:
                html, final_url = await self._get(self._client, url)
            else:
                async with httpx.AsyncClient(
                    timeout=settings.http_timeout,
                    follow_redirects=True,
                    headers={"User-Agent": settings.user_agent},
                ) as client:
                    html, final_url = await self._get(client, url)

        except httpx.TimeoutException as e:
            logger.error(f"Timeout fetching {url}")
            raise FetchError(url, "Timeout fetching page") from e

        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP {e.response.status_code} fetching {url}")
            raise FetchError(url, f"HTTP {e.response.status_code}") from e

        except httpx.HTTPError as e:
            logger.error(f"Error fetching {url}: {e}")
            raise FetchError(url, str(e) or e.__class__.__name__) from e

        return self.parse(final_url, html)

    async def _get(self, client: httpx.AsyncClient, url: str) -> tuple[str, str]:
        response = await client.get(url)
        response.raise_for_status()
        return response.text, str(response.url)

    def parse(self, url: str, html: str) -> FetchedPage:
        """Turn raw HTML into a FetchedPage."""
        if not html.strip():
            raise FetchError(url, "Empty response body")

        soup = BeautifulSoup(html, "lxml")
        # Metadata lives in <head>, which rendering drops
        metadata = extract_metadata(soup)
        content = html_to_markdown(soup)

        if not content and not metadata:
            raise FetchError(url, "No usable content")

        logger.info(f"Fetched {url}: {len(content)} chars, {len(metadata)} meta fields")
        return FetchedPage(url=url, content=content, metadata=metadata)
