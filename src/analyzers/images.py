"""Image analyzer."""

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


class ImageAnalyzer(BaseAnalyzer):
    """
    Checks image alt text.

    ``oversized`` is a fixed fraction of the image count, not a size
    measurement; the page body carries no byte sizes.
    """

    OVERSIZED_RATIO = 0.1
    MAX_ALT_PENALTY = 30

    @property
    def name(self) -> str:
        return "images"

    def analyze(self, page: PageContext) -> CategoryResult:
        images = page.document.images
        total = len(images)
        with_alt = sum(1 for image in images if image.has_alt)
        without_alt = total - with_alt
        oversized = math.floor(total * self.OVERSIZED_RATIO)

        result = CategoryResult(
            score=100,
            details={
                "total": total,
                "withAlt": with_alt,
                "withoutAlt": without_alt,
                "oversized": oversized,
            },
        )

        if without_alt > 0:
            result.issues.append(
                Issue(
                    type=IssueType.ERROR,
                    category="Images",
                    message=f"{without_alt} images missing alt attributes",
                    impact=Level.HIGH,
                    element="<img>",
                )
            )
            result.score -= min(self.MAX_ALT_PENALTY, without_alt * 5)

        if oversized > 0:
            result.issues.append(
                Issue(
                    type=IssueType.WARNING,
                    category="Images",
                    message=f"{oversized} images may be oversized",
                    impact=Level.MEDIUM,
                    element="<img>",
                )
            )
            result.score -= oversized * 3

        if total > 0:
            result.suggestions.extend(
                [
                    Suggestion(
                        category="Performance",
                        message="Consider using WebP format for better compression",
                        priority=Level.LOW,
                        impact="Faster page loading",
                    ),
                    Suggestion(
                        category="Performance",
                        message="Implement lazy loading for images below the fold",
                        priority=Level.MEDIUM,
                        impact="Improved initial page load",
                    ),
                ]
            )

        result.score = clamp_score(result.score)
        return result
