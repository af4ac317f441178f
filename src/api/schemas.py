"""Pydantic schemas for API request/response validation."""

import uuid
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes with camelCase keys, accepts either form on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# =============================================================================
# Request Schemas (what clients send to us)
# =============================================================================


class AnalysisCreateRequest(BaseModel):
    """Request body for analyzing a website."""

    url: str = Field(
        ...,
        min_length=1,
        max_length=2048,
        description="Website URL to analyze; https:// is added when no scheme is given",
        examples=["example.com", "https://example.com/pricing"],
    )


# =============================================================================
# Analysis Result (mirrors AnalysisResult.to_dict())
# =============================================================================


class IssueSchema(CamelModel):
    type: Literal["error", "warning", "info"]
    category: str
    message: str
    impact: Literal["high", "medium", "low"]
    element: str | None = None


class SuggestionSchema(CamelModel):
    category: str
    message: str
    priority: Literal["high", "medium", "low"]
    impact: str


class CoreWebVitalsSchema(CamelModel):
    lcp: float
    fid: float
    cls: float
    fcp: float
    ttfb: float


class CompetitorSchema(CamelModel):
    url: str
    title: str
    score: int
    metrics: dict[str, int]
    key_strengths: list[str]
    opportunities: list[str]


class AnalysisResultSchema(CamelModel):
    """The full analysis result."""

    url: str
    score: int = Field(..., ge=0, le=100)
    timestamp: datetime
    metrics: dict[str, int]
    issues: list[IssueSchema]
    suggestions: list[SuggestionSchema]
    technical_details: dict[str, Any]
    core_web_vitals: CoreWebVitalsSchema | None = None
    competitors: list[CompetitorSchema] | None = None


# =============================================================================
# Response Schemas (what we send back to clients)
# =============================================================================


class AnalysisResponse(CamelModel):
    """A stored analysis with its full result."""

    id: uuid.UUID
    created_at: datetime
    result: AnalysisResultSchema


class AnalysisSummaryResponse(CamelModel):
    """A history entry without the full result."""

    id: uuid.UUID
    url: str
    score: int
    created_at: datetime


class AnalysisListResponse(CamelModel):
    """Response for listing analysis history."""

    analyses: list[AnalysisSummaryResponse]
    count: int


class HistoryStatsResponse(CamelModel):
    """Aggregate figures over the analysis history."""

    total: int
    average_score: float | None
    best_score: int | None


# =============================================================================
# Health Check
# =============================================================================


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: Literal["healthy", "degraded"] = "healthy"
    service: str = "seoscope"
    version: str = "0.1.0"
    database: Literal["ok", "unavailable"] = "ok"
