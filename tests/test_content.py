from analyzers.base import IssueType, Level
from analyzers.content import ContentAnalyzer
from conftest import make_page, words


def analyze(content):
    return ContentAnalyzer().analyze(make_page(content=content))


def paragraphs(count, size=20):
    return "\n\n".join(words(size) for _ in range(count))


def test_short_single_block():
    result = analyze(words(100))

    assert result.issues[0].type == IssueType.WARNING
    assert result.issues[0].impact == Level.MEDIUM
    # -20 for length, -5 for 100 words in one paragraph
    assert result.score == 75


def test_medium_length_gets_suggestion():
    result = analyze(paragraphs(20))

    assert result.details["wordCount"] == 400
    assert result.details["paragraphs"] == 20
    assert result.issues == []
    assert result.score == 95


def test_long_well_split_content():
    result = analyze(paragraphs(35))

    assert result.score == 100
    assert result.suggestions == []


def test_whitespace_only_lines_separate_paragraphs():
    result = analyze(f"{words(10)}\n   \n{words(10)}")

    assert result.details["paragraphs"] == 2
    assert result.details["avgWordsPerParagraph"] == 10.0


def test_empty_content():
    result = analyze("")

    assert result.details["wordCount"] == 0
    assert result.score == 80


def test_long_paragraphs_suggestion_text():
    result = analyze(paragraphs(21, size=30))

    assert [s.message for s in result.suggestions] == [
        "Consider shorter sentences for better readability"
    ]
    assert result.suggestions[0].priority == Level.LOW
