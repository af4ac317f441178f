"""
Test configuration and fixtures for SEOScope.

The environment is pointed at a throwaway SQLite database before any
application module reads the settings.
"""

import os
import tempfile
from datetime import datetime, timezone

test_db_path = tempfile.mktemp(suffix=".db")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{test_db_path}"
os.environ["TELEMETRY_BACKEND"] = "log"

import pytest

from analyzers.base import PageContext
from analyzers.signals import FixedSignalSource
from engine.errors import FetchError
from engine.telemetry import Telemetry
from scraping.fetcher import ContentFetcher, FetchedPage

FIXED_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class StubFetcher(ContentFetcher):
    """Returns a canned page, or raises FetchError when given an error."""

    def __init__(self, content: str = "", metadata: dict | None = None, error: str | None = None):
        self.content = content
        self.metadata = metadata or {}
        self.error = error
        self.requested: list[str] = []

    async def fetch(self, url: str) -> FetchedPage:
        self.requested.append(url)
        if self.error:
            raise FetchError(url, self.error)
        return FetchedPage(url=url, content=self.content, metadata=self.metadata)


class RecordingTelemetry(Telemetry):
    def __init__(self):
        self.events: list[tuple[str, dict]] = []

    def log(self, event: str, properties: dict) -> None:
        self.events.append((event, properties))

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.events]


class BrokenTelemetry(Telemetry):
    def log(self, event: str, properties: dict) -> None:
        raise ConnectionError("analytics backend unreachable")


def make_page(
    content: str = "",
    metadata: dict | None = None,
    url: str = "https://example.com",
) -> PageContext:
    return PageContext.build(url, content, metadata or {})


def words(count: int, word: str = "lorem") -> str:
    return " ".join([word] * count)


GOOD_METADATA = {
    "title": "Acme Widgets | Handmade widgets since 1999",
    "description": (
        "Acme builds durable handmade widgets for homes and offices. Browse the "
        "catalog, compare sizes, and order online with free shipping today."
    ),
    "keywords": "widgets, handmade",
    "ogTitle": "Acme Widgets",
    "ogDescription": "Handmade widgets since 1999",
    "ogImage": "https://example.com/og.png",
}


@pytest.fixture
def fixed_signals() -> FixedSignalSource:
    """Every simulated check passes; numeric signals sit at the low end."""
    return FixedSignalSource(
        values={
            "security.mixed_content": False,
            "mobile.speed": 90,
        },
        default_flag=True,
    )


@pytest.fixture
def telemetry() -> RecordingTelemetry:
    return RecordingTelemetry()
