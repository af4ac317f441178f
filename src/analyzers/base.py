"""Base analyzer interface and shared result types."""

import enum
import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlparse

from analyzers.markdown import MarkdownDocument, tokenize


class IssueType(str, enum.Enum):
    """Severity of a detected issue."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Level(str, enum.Enum):
    """Impact of an issue or priority of a suggestion."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class Issue:
    """A detected problem."""

    type: IssueType
    category: str
    message: str
    impact: Level
    element: str | None = None

    def to_dict(self) -> dict:
        data = {
            "type": self.type.value,
            "category": self.category,
            "message": self.message,
            "impact": self.impact.value,
        }
        if self.element is not None:
            data["element"] = self.element
        return data


@dataclass(frozen=True)
class Suggestion:
    """A recommended improvement."""

    category: str
    message: str
    priority: Level
    impact: str

    def to_dict(self) -> dict:
        return {
            "category": self.category,
            "message": self.message,
            "priority": self.priority.value,
            "impact": self.impact,
        }


@dataclass
class CategoryResult:
    """Standard result format for all category analyzers."""

    score: int  # Category score (0-100)
    issues: list[Issue] = field(default_factory=list)
    suggestions: list[Suggestion] = field(default_factory=list)
    details: Any = None  # Category-specific detail record


@dataclass(frozen=True)
class PageContext:
    """Everything the category analyzers may read about one fetched page."""

    url: str
    content: str
    metadata: Mapping[str, str]
    document: MarkdownDocument

    @classmethod
    def build(cls, url: str, content: str, metadata: Mapping[str, str]) -> "PageContext":
        return cls(
            url=url,
            content=content,
            metadata=dict(metadata),
            document=tokenize(content),
        )

    @property
    def current_host(self) -> str:
        """Host of the analyzed page, used to tell internal from external links."""
        return (urlparse(self.url).hostname or "").lower()


class BaseAnalyzer(ABC):
    """Abstract base class for all category analyzers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return analyzer name."""
        pass

    @abstractmethod
    def analyze(self, page: PageContext) -> CategoryResult:
        """
        Score one SEO category for the given page.

        Args:
            page: The fetched page with its tokenized body

        Returns:
            CategoryResult with score, issues, suggestions and details
        """
        pass


def clamp_score(score: float) -> int:
    """Clamp a deduction-based score into [0, 100]."""
    return int(max(0, min(100, score)))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return int(math.floor(value + 0.5))
