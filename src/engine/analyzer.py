"""SEO analysis engine."""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from analyzers import (
    BaseAnalyzer,
    ContentAnalyzer,
    HeadingAnalyzer,
    ImageAnalyzer,
    LinkAnalyzer,
    LocalSEOAnalyzer,
    MetaTagAnalyzer,
    MobileAnalyzer,
    PageContext,
    SchemaAnalyzer,
    SecurityAnalyzer,
)
from analyzers.signals import RandomSignalSource, SignalSource
from analyzers.simulators import simulate_competitors, simulate_core_web_vitals
from config import settings
from engine.aggregator import aggregate
from engine.errors import AnalysisFailed
from engine.result import AnalysisResult
from engine.telemetry import Telemetry, get_telemetry
from scraping.fetcher import ContentFetcher, FetchedPage, HttpContentFetcher

logger = logging.getLogger(__name__)


def normalize_url(url: str) -> str:
    """Prepend https:// when the URL has no http(s) scheme."""
    url = url.strip()
    if not url.lower().startswith(("http://", "https://")):
        url = f"https://{url}"
    return url


def default_analyzers(signals: SignalSource) -> list[BaseAnalyzer]:
    """The nine category analyzers, in aggregation order."""
    return [
        MetaTagAnalyzer(),
        HeadingAnalyzer(),
        ImageAnalyzer(),
        LinkAnalyzer(),
        ContentAnalyzer(),
        SchemaAnalyzer(signals),
        MobileAnalyzer(signals),
        LocalSEOAnalyzer(signals),
        SecurityAnalyzer(signals),
    ]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SEOAnalyzer:
    """
    Turns a URL into a scored AnalysisResult.

    Steps:
    1. Normalize the URL
    2. Fetch the page through the content fetcher
    3. Run every category analyzer on the page
    4. Draw the simulated signals and aggregate

    The fetch is the only I/O. The analyzers keep no per-request state, so a
    single instance can serve concurrent analyses.
    """

    def __init__(
        self,
        fetcher: ContentFetcher | None = None,
        signals: SignalSource | None = None,
        telemetry: Telemetry | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.fetcher = fetcher or HttpContentFetcher()
        self.signals = signals or RandomSignalSource(settings.signal_seed)
        self.telemetry = telemetry or get_telemetry()
        self.clock = clock
        self.analyzers = default_analyzers(self.signals)

    async def analyze_website(self, url: str) -> AnalysisResult:
        """
        Run a full analysis on the given URL.

        Args:
            url: Website URL, with or without scheme

        Returns:
            AnalysisResult for the fetched page

        Raises:
            AnalysisFailed: the page could not be fetched or analyzed
        """
        self._track("seo_analysis_started", {"url": url})

        try:
            url = normalize_url(url)
            page = await self.fetcher.fetch(url)
            result = self.analyze_page(page, url=url)

        except Exception as e:
            logger.exception(f"SEO analysis failed for {url}: {e}")
            self._track("seo_analysis_failed", {"url": url, "error": str(e)})
            raise AnalysisFailed(url) from e

        self._track("seo_analysis_completed", {"url": url, "score": result.score})
        logger.info(f"Analyzed {url}: score {result.score}")
        return result

    def analyze_page(self, page: FetchedPage, url: str | None = None) -> AnalysisResult:
        """
        Score an already fetched page.

        Args:
            page: Fetched content and metadata
            url: URL to report and classify links against (defaults to page.url)
        """
        url = url or page.url
        context = PageContext.build(url, page.content, page.metadata)

        results = {analyzer.name: analyzer.analyze(context) for analyzer in self.analyzers}

        vitals = simulate_core_web_vitals(self.signals)
        competitors = simulate_competitors(url, self.signals)

        return aggregate(
            url=url,
            results=results,
            vitals=vitals,
            competitors=competitors,
            signals=self.signals,
            timestamp=self.clock(),
        )

    def _track(self, event: str, properties: dict) -> None:
        """Send a telemetry event; failures are logged and dropped."""
        try:
            self.telemetry.log(event, {**properties, "timestamp": self.clock().isoformat()})
        except Exception as e:
            logger.warning(f"Analytics logging failed for {event}: {e}")


# Convenience function
async def run_seo_analysis(url: str) -> AnalysisResult:
    """Run an SEO analysis on the given URL."""
    analyzer = SEOAnalyzer()
    return await analyzer.analyze_website(url)
