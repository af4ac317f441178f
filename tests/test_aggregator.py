import pytest

from analyzers.base import CategoryResult, Issue, IssueType, Level, Suggestion
from analyzers.signals import FixedSignalSource
from analyzers.simulators import CoreWebVitals
from conftest import FIXED_NOW
from engine.aggregator import ANALYZER_ORDER, aggregate, overall_score, performance_score
from engine.result import METRIC_KEYS

FAST = CoreWebVitals(lcp=1.2, fid=50, cls=0.05, fcp=0.8, ttfb=200)


def category(score, name=None):
    issues = []
    suggestions = []
    if name:
        issues.append(Issue(IssueType.WARNING, name, f"{name} issue", Level.LOW))
        suggestions.append(Suggestion(name, f"{name} suggestion", Level.LOW, "impact"))
    return CategoryResult(score=score, issues=issues, suggestions=suggestions, details={})


def all_categories(**scores):
    return {name: category(scores.get(name, 100), name) for name in ANALYZER_ORDER}


def build(results, vitals=FAST, signals=None):
    return aggregate(
        url="https://example.com",
        results=results,
        vitals=vitals,
        competitors=[],
        signals=signals or FixedSignalSource(),
        timestamp=FIXED_NOW,
    )


def test_performance_score_thresholds():
    assert performance_score(FAST) == 100
    assert performance_score(CoreWebVitals(lcp=3.0, fid=120, cls=0.2, fcp=1, ttfb=300)) == 40
    assert performance_score(CoreWebVitals(lcp=2.5, fid=100, cls=0.1, fcp=1, ttfb=300)) == 100


def test_overall_score_rounds_half_up():
    metrics = dict.fromkeys(METRIC_KEYS, 90)
    metrics["schema"] = 95

    assert overall_score(metrics) == 91  # 90.5


def test_metrics_combine_category_scores():
    result = build(all_categories(meta=85, headings=90, images=70, links=81, content=75))

    assert tuple(result.metrics) == METRIC_KEYS
    assert result.metrics["onPage"] == 88  # 87.5 rounds up
    assert result.metrics["technical"] == 76  # 75.5 rounds up
    assert result.metrics["content"] == 75
    assert result.metrics["performance"] == 100
    # Fixed signals sit at the low end of the simulated ranges
    assert result.metrics["accessibility"] == 85
    assert result.metrics["bestPractices"] == 80


def test_overall_is_mean_of_metrics():
    result = build(all_categories(meta=40, headings=65, security=45, mobile=10))

    expected = sum(result.metrics.values()) / len(result.metrics)
    assert result.score == int(expected + 0.5)


def test_issues_and_suggestions_follow_analyzer_order():
    result = build(all_categories())

    assert [issue.category for issue in result.issues] == list(ANALYZER_ORDER)
    assert [s.category for s in result.suggestions] == list(ANALYZER_ORDER)


def test_technical_details_sections():
    result = build(all_categories())

    assert set(result.technical_details) == {
        "metaTags",
        "headings",
        "images",
        "links",
        "content",
        "performance",
        "accessibility",
        "schema",
        "mobile",
        "localSEO",
        "security",
    }
    assert result.technical_details["performance"]["loadTime"] == 1.2
    assert result.technical_details["accessibility"] == {
        "score": 85,
        "issues": ["Color contrast issues", "Missing ARIA labels"],
    }


def test_missing_category_is_rejected():
    results = all_categories()
    del results["security"]

    with pytest.raises(ValueError, match="security"):
        build(results)


def test_result_wire_form():
    data = build(all_categories()).to_dict()

    assert data["timestamp"] == "2024-05-01T12:00:00+00:00"
    assert data["coreWebVitals"]["lcp"] == 1.2
    assert data["competitors"] == []
    assert data["issues"][0] == {
        "type": "warning",
        "category": "meta",
        "message": "meta issue",
        "impact": "low",
    }


def test_wire_form_is_a_copy():
    result = build(all_categories())
    before = result.to_dict()

    data = result.to_dict()
    data["technicalDetails"]["performance"]["loadTime"] = 99
    data["metrics"]["onPage"] = -5

    assert result.technical_details["performance"]["loadTime"] == 1.2
    assert result.to_dict() == before


def test_result_mappings_are_read_only():
    result = build(all_categories())

    with pytest.raises(TypeError):
        result.metrics["onPage"] = -5
    with pytest.raises(TypeError):
        result.technical_details["security"] = {}


def test_result_does_not_share_caller_details():
    results = all_categories()
    results["meta"].details = {"title": "Acme"}

    result = build(results)
    results["meta"].details["title"] = "changed"

    assert result.technical_details["metaTags"] == {"title": "Acme"}
