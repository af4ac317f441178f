"""Repository pattern for database operations."""

import uuid
from dataclasses import dataclass

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db.models import Analysis, TelemetryEvent
from engine.result import AnalysisResult


@dataclass
class HistoryStats:
    """Aggregate figures over the analysis history."""

    total: int
    average_score: float | None
    best_score: int | None


class AnalysisRepository:
    """Handles all Analysis-related database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, result: AnalysisResult) -> Analysis:
        """Store a completed analysis."""
        analysis = Analysis(
            url=result.url,
            score=result.score,
            metrics=dict(result.metrics),
            result=result.to_dict(),
            created_at=result.timestamp,
        )
        self.session.add(analysis)
        await self.session.flush()  # Assigns the ID without committing
        return analysis

    async def get_by_id(self, analysis_id: uuid.UUID) -> Analysis | None:
        """Retrieve an analysis by its ID."""
        result = await self.session.execute(
            select(Analysis).where(Analysis.id == analysis_id)
        )
        return result.scalar_one_or_none()

    async def list_recent(self, limit: int = 20, url: str | None = None) -> list[Analysis]:
        """Get the most recent analyses, optionally for one URL."""
        query = select(Analysis)
        if url:
            query = query.where(Analysis.url == url)
        query = query.order_by(Analysis.created_at.desc()).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def stats(self) -> HistoryStats:
        """Count, average and best score over all stored analyses."""
        result = await self.session.execute(
            select(
                func.count(Analysis.id),
                func.avg(Analysis.score),
                func.max(Analysis.score),
            )
        )
        total, average, best = result.one()
        return HistoryStats(
            total=total,
            average_score=round(float(average), 1) if average is not None else None,
            best_score=best,
        )


class TelemetryEventRepository:
    """Stores telemetry events (synchronous, used from Celery tasks)."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, name: str, properties: dict | None = None) -> TelemetryEvent:
        event = TelemetryEvent(name=name, properties=properties)
        self.session.add(event)
        self.session.flush()
        return event

    def list_by_name(self, name: str) -> list[TelemetryEvent]:
        result = self.session.execute(
            select(TelemetryEvent)
            .where(TelemetryEvent.name == name)
            .order_by(TelemetryEvent.created_at)
        )
        return list(result.scalars().all())
