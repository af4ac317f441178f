"""Combines category results into one AnalysisResult."""

from collections.abc import Mapping
from datetime import datetime

from analyzers.base import CategoryResult, round_half_up
from analyzers.signals import SignalSource
from analyzers.simulators import (
    CompetitorSummary,
    CoreWebVitals,
    accessibility_findings,
    simulate_accessibility_score,
    simulate_best_practices_score,
    simulate_page_stats,
)
from engine.result import METRIC_KEYS, AnalysisResult

# Issues and suggestions are concatenated in this order
ANALYZER_ORDER = (
    "meta",
    "headings",
    "images",
    "links",
    "content",
    "schema",
    "mobile",
    "local_seo",
    "security",
)

# Core Web Vitals thresholds; each one exceeded costs 20 points
LCP_THRESHOLD = 2.5
FID_THRESHOLD = 100
CLS_THRESHOLD = 0.1


def performance_score(vitals: CoreWebVitals) -> int:
    penalty = 0
    if vitals.lcp > LCP_THRESHOLD:
        penalty += 20
    if vitals.fid > FID_THRESHOLD:
        penalty += 20
    if vitals.cls > CLS_THRESHOLD:
        penalty += 20
    return 100 - penalty


def overall_score(metrics: Mapping[str, int]) -> int:
    """Unweighted mean of the category metrics, rounded half up."""
    return round_half_up(sum(metrics.values()) / len(metrics))


def aggregate(
    url: str,
    results: Mapping[str, CategoryResult],
    vitals: CoreWebVitals,
    competitors: list[CompetitorSummary],
    signals: SignalSource,
    timestamp: datetime,
) -> AnalysisResult:
    """
    Build the final result from per-category results.

    Args:
        url: Normalized URL that was analyzed
        results: Category results keyed by analyzer name (see ANALYZER_ORDER)
        vitals: Core Web Vitals for the performance metric
        competitors: Competitor summaries to attach
        signals: Source for the simulated accessibility/best-practices scores
        timestamp: Creation instant of the result

    Returns:
        Immutable AnalysisResult
    """
    missing = [name for name in ANALYZER_ORDER if name not in results]
    if missing:
        raise ValueError(f"Missing category results: {', '.join(missing)}")

    accessibility = simulate_accessibility_score(signals)
    best_practices = simulate_best_practices_score(signals)

    scores = {
        "onPage": round_half_up((results["meta"].score + results["headings"].score) / 2),
        "technical": round_half_up((results["images"].score + results["links"].score) / 2),
        "content": round_half_up(results["content"].score),
        "performance": performance_score(vitals),
        "accessibility": accessibility,
        "bestPractices": best_practices,
        "mobile": round_half_up(results["mobile"].score),
        "security": round_half_up(results["security"].score),
        "localSEO": round_half_up(results["local_seo"].score),
        "schema": round_half_up(results["schema"].score),
    }
    metrics = {key: scores[key] for key in METRIC_KEYS}

    issues = []
    suggestions = []
    for name in ANALYZER_ORDER:
        issues.extend(results[name].issues)
        suggestions.extend(results[name].suggestions)

    technical_details = {
        "metaTags": results["meta"].details,
        "headings": results["headings"].details,
        "images": results["images"].details,
        "links": results["links"].details,
        "content": results["content"].details,
        "performance": {"loadTime": vitals.lcp, **simulate_page_stats(signals)},
        "accessibility": {
            "score": accessibility,
            "issues": accessibility_findings(accessibility),
        },
        "schema": results["schema"].details,
        "mobile": results["mobile"].details,
        "localSEO": results["local_seo"].details,
        "security": results["security"].details,
    }

    return AnalysisResult(
        url=url,
        score=overall_score(metrics),
        timestamp=timestamp,
        metrics=metrics,
        issues=tuple(issues),
        suggestions=tuple(suggestions),
        technical_details=technical_details,
        core_web_vitals=vitals,
        competitors=tuple(competitors),
    )
