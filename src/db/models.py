"""SQLAlchemy database models for SEOScope."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, Integer, String, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JSONType = JSON().with_variant(JSONB(), "postgresql")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Analysis(Base):
    """
    One completed analysis, kept for the history view.

    The full result is stored as its JSON wire form; url, score and metrics
    are duplicated into columns for listing and statistics.
    """

    __tablename__ = "analyses"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    # Normalized URL that was analyzed
    url: Mapped[str] = mapped_column(String(2048), nullable=False, index=True)

    # Overall score (0-100)
    score: Mapped[int] = mapped_column(Integer, nullable=False)

    # The ten category scores
    metrics: Mapped[dict] = mapped_column(JSONType, nullable=False)

    # Complete AnalysisResult.to_dict() output
    result: Mapped[dict] = mapped_column(JSONType, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        nullable=False,
        index=True,
    )


class TelemetryEvent(Base):
    """An analytics event delivered by the telemetry worker."""

    __tablename__ = "telemetry_events"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    # e.g. "seo_analysis_started", "seo_analysis_completed"
    name: Mapped[str] = mapped_column(String(128), nullable=False, index=True)

    properties: Mapped[dict | None] = mapped_column(JSONType, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        nullable=False,
    )
