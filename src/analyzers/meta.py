"""Meta tag analyzer."""

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

META_FIELDS = ("title", "description", "keywords", "ogTitle", "ogDescription", "ogImage")


class MetaTagAnalyzer(BaseAnalyzer):
    """
    Checks the page title, meta description and Open Graph tags.

    Deductions:
    - Missing title: -20, title outside 30-60 chars: -10
    - Missing description: -15, description outside 120-160 chars: -8
    - Each missing og:title / og:description / og:image: -5
    """

    TITLE_RANGE = (30, 60)
    DESCRIPTION_RANGE = (120, 160)

    OPEN_GRAPH = {
        "ogTitle": "title",
        "ogDescription": "description",
        "ogImage": "image",
    }

    @property
    def name(self) -> str:
        return "meta"

    def analyze(self, page: PageContext) -> CategoryResult:
        meta_tags = {key: page.metadata.get(key) or "" for key in META_FIELDS}
        result = CategoryResult(score=100, details=meta_tags)

        self._check_title(meta_tags["title"], result)
        self._check_description(meta_tags["description"], result)

        for key, label in self.OPEN_GRAPH.items():
            if not meta_tags[key]:
                result.suggestions.append(
                    Suggestion(
                        category="Social Media",
                        message=f"Add Open Graph {label} for better social media sharing",
                        priority=Level.MEDIUM,
                        impact="Improves social media appearance",
                    )
                )
                result.score -= 5

        result.score = clamp_score(result.score)
        return result

    def _check_title(self, title: str, result: CategoryResult) -> None:
        low, high = self.TITLE_RANGE
        if not title:
            result.issues.append(
                Issue(
                    type=IssueType.ERROR,
                    category="Meta Tags",
                    message="Missing page title",
                    impact=Level.HIGH,
                    element="<title>",
                )
            )
            result.score -= 20
        elif not low <= len(title) <= high:
            result.issues.append(
                Issue(
                    type=IssueType.WARNING,
                    category="Meta Tags",
                    message=f"Title length ({len(title)}) should be {low}-{high} characters",
                    impact=Level.MEDIUM,
                    element="<title>",
                )
            )
            result.score -= 10

    def _check_description(self, description: str, result: CategoryResult) -> None:
        low, high = self.DESCRIPTION_RANGE
        if not description:
            result.issues.append(
                Issue(
                    type=IssueType.ERROR,
                    category="Meta Tags",
                    message="Missing meta description",
                    impact=Level.HIGH,
                    element='<meta name="description">',
                )
            )
            result.score -= 15
        elif not low <= len(description) <= high:
            result.issues.append(
                Issue(
                    type=IssueType.WARNING,
                    category="Meta Tags",
                    message=(
                        f"Meta description length ({len(description)}) "
                        f"should be {low}-{high} characters"
                    ),
                    impact=Level.MEDIUM,
                    element='<meta name="description">',
                )
            )
            result.score -= 8
