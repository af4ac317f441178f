"""Mobile optimization analyzer."""

from analyzers.base import (
    BaseAnalyzer,
    CategoryResult,
    Issue,
    IssueType,
    Level,
    PageContext,
    Suggestion,
    clamp_score,
    round_half_up,
)
from analyzers.signals import SignalSource


class MobileAnalyzer(BaseAnalyzer):
    """
    Checks viewport, responsiveness, touch targets and mobile speed.

    All four signals are simulated.
    """

    PENALTIES = {
        "viewport": 25,
        "responsive": 30,
        "touch_friendly": 15,
        "speed": 20,
    }

    MIN_MOBILE_SPEED = 70

    def __init__(self, signals: SignalSource):
        self.signals = signals

    @property
    def name(self) -> str:
        return "mobile"

    def analyze(self, page: PageContext) -> CategoryResult:
        has_viewport_meta = self.signals.flag("mobile.has_viewport_meta", 0.8)
        is_responsive = self.signals.flag("mobile.is_responsive", 0.7)
        touch_friendly = self.signals.flag("mobile.touch_friendly", 0.6)
        mobile_speed = round_half_up(self.signals.uniform("mobile.speed", 60, 95))

        result = CategoryResult(
            score=100,
            details={
                "hasViewportMeta": has_viewport_meta,
                "isResponsive": is_responsive,
                "touchFriendly": touch_friendly,
                "mobileSpeed": mobile_speed,
            },
        )

        if not has_viewport_meta:
            result.issues.append(
                Issue(
                    type=IssueType.ERROR,
                    category="Mobile",
                    message="Missing viewport meta tag",
                    impact=Level.HIGH,
                    element='<meta name="viewport">',
                )
            )
            result.score -= self.PENALTIES["viewport"]

        if not is_responsive:
            result.issues.append(
                Issue(
                    type=IssueType.ERROR,
                    category="Mobile",
                    message="Website is not mobile responsive",
                    impact=Level.HIGH,
                )
            )
            result.score -= self.PENALTIES["responsive"]

        if not touch_friendly:
            result.issues.append(
                Issue(
                    type=IssueType.WARNING,
                    category="Mobile",
                    message="Touch targets may be too small",
                    impact=Level.MEDIUM,
                )
            )
            result.score -= self.PENALTIES["touch_friendly"]

        if mobile_speed < self.MIN_MOBILE_SPEED:
            result.issues.append(
                Issue(
                    type=IssueType.WARNING,
                    category="Mobile",
                    message="Mobile page speed needs improvement",
                    impact=Level.HIGH,
                )
            )
            result.score -= self.PENALTIES["speed"]

        result.suggestions.append(
            Suggestion(
                category="Mobile",
                message="Test website on various mobile devices",
                priority=Level.MEDIUM,
                impact="Better mobile user experience",
            )
        )

        result.score = clamp_score(result.score)
        return result
