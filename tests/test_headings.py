from analyzers.base import IssueType, Level
from analyzers.headings import HeadingAnalyzer
from conftest import make_page


def analyze(content):
    return HeadingAnalyzer().analyze(make_page(content=content))


def test_no_headings():
    result = analyze("Just a paragraph of text.")

    assert len(result.issues) == 1
    issue = result.issues[0]
    assert "Missing H1" in issue.message
    assert issue.impact == Level.HIGH
    assert result.score <= 75
    assert result.score == 65
    assert result.details == []


def test_well_formed_hierarchy():
    result = analyze("# Title\n## Section\n### Subsection")

    assert result.score == 100
    assert result.issues == []
    assert result.suggestions == []


def test_multiple_h1_and_level_gap():
    result = analyze("# First\n# Second\n## Section\n#### Too deep")

    messages = [issue.message for issue in result.issues]
    assert messages == [
        "Multiple H1 tags found (2). Use only one H1 per page",
        "Heading hierarchy skip detected (H2 to H4)",
    ]
    assert result.issues[1].type == IssueType.WARNING
    assert result.issues[1].impact == Level.LOW
    assert result.score == 80


def test_details_are_per_level_in_first_seen_order():
    result = analyze("## Later\n# Top\n## Again\n# Another top")

    assert result.details == [
        {"level": 2, "text": "Later", "count": 2},
        {"level": 1, "text": "Top", "count": 2},
    ]


def test_each_gap_is_penalized():
    result = analyze("# A\n### C\n###### F")

    gaps = [issue for issue in result.issues if "skip" in issue.message]
    assert len(gaps) == 2
    # Three distinct levels, so no structure suggestion
    assert result.score == 90
