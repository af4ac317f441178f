"""The AnalysisResult value object."""

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any

from analyzers.base import Issue, Suggestion
from analyzers.simulators import CompetitorSummary, CoreWebVitals

METRIC_KEYS = (
    "onPage",
    "technical",
    "content",
    "performance",
    "accessibility",
    "bestPractices",
    "mobile",
    "security",
    "localSEO",
    "schema",
)


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one analysis run. Built once, never mutated."""

    url: str
    score: int
    timestamp: datetime
    metrics: Mapping[str, int]
    issues: tuple[Issue, ...] = field(default_factory=tuple)
    suggestions: tuple[Suggestion, ...] = field(default_factory=tuple)
    technical_details: Mapping[str, Any] = field(default_factory=dict)
    core_web_vitals: CoreWebVitals | None = None
    competitors: tuple[CompetitorSummary, ...] | None = None

    def __post_init__(self):
        if tuple(self.metrics) != METRIC_KEYS:
            raise ValueError(f"metrics must have exactly the keys {METRIC_KEYS}")
        # Read-only views over private copies
        object.__setattr__(self, "metrics", MappingProxyType(dict(self.metrics)))
        object.__setattr__(
            self,
            "technical_details",
            MappingProxyType(copy.deepcopy(dict(self.technical_details))),
        )

    def to_dict(self) -> dict:
        """JSON-serializable wire form."""
        return {
            "url": self.url,
            "score": self.score,
            "timestamp": self.timestamp.isoformat(),
            "metrics": dict(self.metrics),
            "issues": [issue.to_dict() for issue in self.issues],
            "suggestions": [suggestion.to_dict() for suggestion in self.suggestions],
            "technicalDetails": copy.deepcopy(dict(self.technical_details)),
            "coreWebVitals": (
                self.core_web_vitals.to_dict() if self.core_web_vitals else None
            ),
            "competitors": (
                [competitor.to_dict() for competitor in self.competitors]
                if self.competitors is not None
                else None
            ),
        }
