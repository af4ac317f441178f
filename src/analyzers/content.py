"""Body content analyzer."""

import re

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

PARAGRAPH_BREAK_RE = re.compile(r"\n[ \t]*\n")


class ContentAnalyzer(BaseAnalyzer):
    """Checks content length and a words-per-paragraph readability proxy."""

    MIN_WORDS = 300
    GOOD_WORDS = 600
    MAX_AVG_WORDS = 25

    @property
    def name(self) -> str:
        return "content"

    def analyze(self, page: PageContext) -> CategoryResult:
        word_count = len(page.content.split())
        paragraphs = sum(
            1 for block in PARAGRAPH_BREAK_RE.split(page.content) if block.strip()
        )
        avg_words = word_count / max(1, paragraphs)

        result = CategoryResult(
            score=100,
            details={
                "wordCount": word_count,
                "paragraphs": paragraphs,
                "avgWordsPerParagraph": round(avg_words, 1),
            },
        )

        if word_count < self.MIN_WORDS:
            result.issues.append(
                Issue(
                    type=IssueType.WARNING,
                    category="Content",
                    message=(
                        f"Content is too short ({word_count} words). "
                        f"Aim for at least {self.MIN_WORDS} words"
                    ),
                    impact=Level.MEDIUM,
                )
            )
            result.score -= 20
        elif word_count < self.GOOD_WORDS:
            result.suggestions.append(
                Suggestion(
                    category="Content",
                    message="Consider expanding content for better SEO performance",
                    priority=Level.MEDIUM,
                    impact="More comprehensive content",
                )
            )
            result.score -= 5

        if avg_words > self.MAX_AVG_WORDS:
            result.suggestions.append(
                Suggestion(
                    category="Content",
                    message="Consider shorter sentences for better readability",
                    priority=Level.LOW,
                    impact="Improved user experience",
                )
            )
            result.score -= 5

        result.score = clamp_score(result.score)
        return result
