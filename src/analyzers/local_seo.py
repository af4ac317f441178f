"""Local SEO analyzer."""

import math

from analyzers.base import (
    BaseAnalyzer,
    CategoryResult,
    Issue,
    IssueType,
    Level,
    PageContext,
    Suggestion,
    clamp_score,
)
from analyzers.signals import SignalSource


class LocalSEOAnalyzer(BaseAnalyzer):
    """
    Checks local business signals.

    NAP presence is read from the page body; the business listing, local
    schema and keyword count are simulated.
    """

    NAP_MARKERS = ("address", "phone")
    MIN_LOCAL_KEYWORDS = 3

    def __init__(self, signals: SignalSource):
        self.signals = signals

    @property
    def name(self) -> str:
        return "local_seo"

    def analyze(self, page: PageContext) -> CategoryResult:
        lowered = page.content.lower()
        has_nap = any(marker in lowered for marker in self.NAP_MARKERS)
        has_google_my_business = self.signals.flag("local.google_my_business", 0.5)
        has_local_schema = self.signals.flag("local.local_schema", 0.3)
        local_keywords = math.floor(self.signals.uniform("local.keywords", 0, 10))

        result = CategoryResult(
            score=100,
            details={
                "hasNAP": has_nap,
                "hasGoogleMyBusiness": has_google_my_business,
                "hasLocalSchema": has_local_schema,
                "localKeywords": local_keywords,
            },
        )

        if not has_nap:
            result.issues.append(
                Issue(
                    type=IssueType.WARNING,
                    category="Local SEO",
                    message="NAP (Name, Address, Phone) information not clearly visible",
                    impact=Level.MEDIUM,
                )
            )
            result.score -= 15

        if not has_google_my_business:
            result.suggestions.append(
                Suggestion(
                    category="Local SEO",
                    message="Claim and optimize Google My Business listing",
                    priority=Level.HIGH,
                    impact="Better local search visibility",
                )
            )
            result.score -= 20

        if not has_local_schema:
            result.suggestions.append(
                Suggestion(
                    category="Local SEO",
                    message="Add LocalBusiness schema markup",
                    priority=Level.MEDIUM,
                    impact="Enhanced local search results",
                )
            )
            result.score -= 10

        if local_keywords < self.MIN_LOCAL_KEYWORDS:
            result.suggestions.append(
                Suggestion(
                    category="Local SEO",
                    message="Include more location-based keywords in content",
                    priority=Level.MEDIUM,
                    impact="Better local search rankings",
                )
            )
            result.score -= 10

        result.score = clamp_score(result.score)
        return result
