"""Link analyzer."""

import math
from urllib.parse import urlparse

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
from analyzers.markdown import Link


def is_external(link: Link, current_host: str) -> bool:
    """A link is external when it is absolute and points at another host."""
    if not link.url.startswith("http"):
        return False
    host = (urlparse(link.url).hostname or "").lower()
    return host != current_host.lower()


class LinkAnalyzer(BaseAnalyzer):
    """
    Checks anchor text and internal/external link balance.

    ``broken`` is a fixed fraction of the link count; links are not requested.
    """

    BROKEN_RATIO = 0.05
    MIN_ANCHOR_LENGTH = 3
    MIN_INTERNAL_LINKS = 3

    @property
    def name(self) -> str:
        return "links"

    def analyze(self, page: PageContext) -> CategoryResult:
        return self.analyze_links(page.document.links, page.current_host)

    def analyze_links(self, links: list[Link], current_host: str) -> CategoryResult:
        external = sum(1 for link in links if is_external(link, current_host))
        internal = len(links) - external
        broken = math.floor(len(links) * self.BROKEN_RATIO)

        result = CategoryResult(
            score=100,
            details={"internal": internal, "external": external, "broken": broken},
        )

        non_descriptive = sum(
            1 for link in links if len(link.text) < self.MIN_ANCHOR_LENGTH
        )
        if non_descriptive > 0:
            result.issues.append(
                Issue(
                    type=IssueType.WARNING,
                    category="Links",
                    message=f"{non_descriptive} links with non-descriptive anchor text",
                    impact=Level.MEDIUM,
                    element="<a>",
                )
            )
            result.score -= non_descriptive * 3

        if broken > 0:
            result.issues.append(
                Issue(
                    type=IssueType.ERROR,
                    category="Links",
                    message=f"{broken} broken links detected",
                    impact=Level.HIGH,
                    element="<a>",
                )
            )
            result.score -= broken * 10

        if external > 0:
            result.suggestions.append(
                Suggestion(
                    category="SEO",
                    message='Consider adding rel="nofollow" to external links when appropriate',
                    priority=Level.LOW,
                    impact="Better link equity management",
                )
            )

        if internal < self.MIN_INTERNAL_LINKS:
            result.suggestions.append(
                Suggestion(
                    category="SEO",
                    message="Add more internal links to improve site navigation and SEO",
                    priority=Level.MEDIUM,
                    impact="Better internal linking structure",
                )
            )
            result.score -= 10

        result.score = clamp_score(result.score)
        return result
