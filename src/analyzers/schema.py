"""Structured data (schema markup) analyzer."""

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


class SchemaAnalyzer(BaseAnalyzer):
    """
    Checks for structured data markup.

    The markdown body carries no <script> blocks, so detection is simulated
    through the signal source.
    """

    DETECTED_TYPES = ["Organization", "WebPage"]

    def __init__(self, signals: SignalSource):
        self.signals = signals

    @property
    def name(self) -> str:
        return "schema"

    def analyze(self, page: PageContext) -> CategoryResult:
        has_structured_data = self.signals.flag("schema.has_structured_data", 0.4)
        types = list(self.DETECTED_TYPES) if has_structured_data else []

        result = CategoryResult(
            score=100,
            details={
                "hasStructuredData": has_structured_data,
                "types": types,
                "errors": [],
            },
        )

        if not has_structured_data:
            result.issues.append(
                Issue(
                    type=IssueType.WARNING,
                    category="Schema Markup",
                    message="No structured data detected",
                    impact=Level.MEDIUM,
                    element='<script type="application/ld+json">',
                )
            )
            result.suggestions.append(
                Suggestion(
                    category="Schema Markup",
                    message="Add structured data markup for better search engine understanding",
                    priority=Level.HIGH,
                    impact="Enhanced search result appearance",
                )
            )
            result.score -= 20
        else:
            if "Organization" not in types:
                result.suggestions.append(
                    Suggestion(
                        category="Schema Markup",
                        message="Add Organization schema for better brand recognition",
                        priority=Level.MEDIUM,
                        impact="Better brand visibility in search results",
                    )
                )
                result.score -= 5

            if "BreadcrumbList" not in types:
                result.suggestions.append(
                    Suggestion(
                        category="Schema Markup",
                        message="Add BreadcrumbList schema for better navigation",
                        priority=Level.LOW,
                        impact="Enhanced search result navigation",
                    )
                )
                result.score -= 3

        result.score = clamp_score(result.score)
        return result
