"""Simulated measurements.

Stand-ins for a real performance-timing source, a search-ranking data source
and an accessibility audit. Every value is drawn from the signal source within
fixed bounds.
"""

import math
from dataclasses import dataclass, field
from urllib.parse import urlparse

from analyzers.base import round_half_up
from analyzers.signals import SignalSource

COMPETITOR_COUNT = 3
KEY_STRENGTHS = [
    "Strong meta descriptions",
    "Good internal linking",
    "Fast loading speed",
]
OPPORTUNITIES = [
    "Missing schema markup",
    "Poor mobile optimization",
    "Weak content structure",
]
ACCESSIBILITY_FINDINGS = ["Color contrast issues", "Missing ARIA labels"]


@dataclass(frozen=True)
class CoreWebVitals:
    lcp: float  # Largest Contentful Paint, seconds
    fid: float  # First Input Delay, milliseconds
    cls: float  # Cumulative Layout Shift
    fcp: float  # First Contentful Paint, seconds
    ttfb: float  # Time to First Byte, milliseconds

    def to_dict(self) -> dict:
        return {
            "lcp": self.lcp,
            "fid": self.fid,
            "cls": self.cls,
            "fcp": self.fcp,
            "ttfb": self.ttfb,
        }


@dataclass(frozen=True)
class CompetitorSummary:
    url: str
    title: str
    score: int
    metrics: dict[str, int]
    key_strengths: tuple[str, ...] = field(default_factory=tuple)
    opportunities: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "title": self.title,
            "score": self.score,
            "metrics": dict(self.metrics),
            "keyStrengths": list(self.key_strengths),
            "opportunities": list(self.opportunities),
        }


def simulate_core_web_vitals(signals: SignalSource) -> CoreWebVitals:
    """Draw the five Core Web Vitals."""
    return CoreWebVitals(
        lcp=signals.uniform("vitals.lcp", 1.2, 3.2),
        fid=signals.uniform("vitals.fid", 50, 150),
        cls=signals.uniform("vitals.cls", 0.05, 0.25),
        fcp=signals.uniform("vitals.fcp", 0.8, 2.3),
        ttfb=signals.uniform("vitals.ttfb", 200, 700),
    )


def simulate_competitors(url: str, signals: SignalSource) -> list[CompetitorSummary]:
    """Build synthetic competitor summaries named after the analyzed domain."""
    domain = (urlparse(url).hostname or "").replace("www.", "")
    label = domain.split(".")[0]

    competitors = []
    for index in range(1, COMPETITOR_COUNT + 1):
        prefix = f"competitors.{index}"
        strengths = math.floor(signals.uniform(f"{prefix}.strengths", 1, 4))
        opportunities = math.floor(signals.uniform(f"{prefix}.opportunities", 1, 4))

        competitors.append(
            CompetitorSummary(
                url=f"https://competitor{index}-{label}.com",
                title=f"Competitor {index}",
                score=round_half_up(signals.uniform(f"{prefix}.score", 70, 95)),
                metrics={
                    "onPage": round_half_up(signals.uniform(f"{prefix}.onPage", 65, 95)),
                    "technical": round_half_up(signals.uniform(f"{prefix}.technical", 70, 95)),
                    "content": round_half_up(signals.uniform(f"{prefix}.content", 75, 95)),
                    "performance": round_half_up(
                        signals.uniform(f"{prefix}.performance", 60, 95)
                    ),
                },
                key_strengths=tuple(KEY_STRENGTHS[:strengths]),
                opportunities=tuple(OPPORTUNITIES[:opportunities]),
            )
        )

    return competitors


def simulate_accessibility_score(signals: SignalSource) -> int:
    return round_half_up(signals.uniform("accessibility.score", 85, 100))


def simulate_best_practices_score(signals: SignalSource) -> int:
    return round_half_up(signals.uniform("best_practices.score", 80, 100))


def accessibility_findings(score: int) -> list[str]:
    """Findings reported alongside a simulated accessibility score."""
    return list(ACCESSIBILITY_FINDINGS) if score < 90 else []


def simulate_page_stats(signals: SignalSource) -> dict:
    """Page weight (KB) and request count for the performance details."""
    return {
        "pageSize": round_half_up(signals.uniform("page.size_kb", 500, 2500)),
        "requests": round_half_up(signals.uniform("page.requests", 20, 100)),
    }
