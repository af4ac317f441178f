"""Heading structure analyzer."""

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


class HeadingAnalyzer(BaseAnalyzer):
    """
    Checks H1 usage and heading hierarchy.

    Details are one ``{level, text, count}`` entry per distinct level, in the
    order each level first appears; ``text`` is the first heading at that level.
    """

    MIN_DISTINCT_LEVELS = 3

    @property
    def name(self) -> str:
        return "headings"

    def analyze(self, page: PageContext) -> CategoryResult:
        entries: dict[int, dict] = {}
        for heading in page.document.headings:
            entry = entries.setdefault(
                heading.level,
                {"level": heading.level, "text": heading.text, "count": 0},
            )
            entry["count"] += 1

        result = CategoryResult(score=100, details=list(entries.values()))

        h1_count = entries[1]["count"] if 1 in entries else 0
        if h1_count == 0:
            result.issues.append(
                Issue(
                    type=IssueType.ERROR,
                    category="Headings",
                    message="Missing H1 tag",
                    impact=Level.HIGH,
                    element="<h1>",
                )
            )
            result.score -= 25
        elif h1_count > 1:
            result.issues.append(
                Issue(
                    type=IssueType.WARNING,
                    category="Headings",
                    message=f"Multiple H1 tags found ({h1_count}). Use only one H1 per page",
                    impact=Level.MEDIUM,
                    element="<h1>",
                )
            )
            result.score -= 15

        levels = sorted(entries)
        for previous, current in zip(levels, levels[1:]):
            if current - previous > 1:
                result.issues.append(
                    Issue(
                        type=IssueType.WARNING,
                        category="Headings",
                        message=f"Heading hierarchy skip detected (H{previous} to H{current})",
                        impact=Level.LOW,
                        element=f"<h{current}>",
                    )
                )
                result.score -= 5

        if len(entries) < self.MIN_DISTINCT_LEVELS:
            result.suggestions.append(
                Suggestion(
                    category="Content Structure",
                    message="Add more headings to improve content structure and readability",
                    priority=Level.MEDIUM,
                    impact="Better content organization",
                )
            )
            result.score -= 10

        result.score = clamp_score(result.score)
        return result
