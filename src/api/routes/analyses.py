"""Analysis API endpoints."""

import uuid
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas import (
    AnalysisCreateRequest,
    AnalysisListResponse,
    AnalysisResponse,
    AnalysisSummaryResponse,
    HistoryStatsResponse,
)
from db.repositories import AnalysisRepository
from db.session import get_db_session
from engine.analyzer import SEOAnalyzer
from engine.errors import AnalysisFailed

router = APIRouter(prefix="/analyses", tags=["Analyses"])


@lru_cache(maxsize=1)
def get_seo_analyzer() -> SEOAnalyzer:
    """Shared analyzer; it keeps no per-request state."""
    return SEOAnalyzer()


@router.post(
    "",
    response_model=AnalysisResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Analyze a website",
    description="Fetch the page, score it, and store the result in the history.",
)
async def create_analysis(
    request: AnalysisCreateRequest,
    db: AsyncSession = Depends(get_db_session),
    analyzer: SEOAnalyzer = Depends(get_seo_analyzer),
) -> AnalysisResponse:
    """
    Run an analysis and return the full result.

    The request waits for the fetch; a failed fetch or analysis is reported
    as a single 502 error and nothing is stored.
    """
    try:
        result = await analyzer.analyze_website(request.url)
    except AnalysisFailed as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        )

    repo = AnalysisRepository(db)
    analysis = await repo.create(result)
    await db.commit()

    return AnalysisResponse(
        id=analysis.id,
        created_at=analysis.created_at,
        result=analysis.result,
    )


@router.get(
    "",
    response_model=AnalysisListResponse,
    summary="List analysis history",
    description="Get recent analyses, newest first, optionally for a single URL.",
)
async def list_analyses(
    limit: int = Query(20, ge=1, le=100),
    url: str | None = None,
    db: AsyncSession = Depends(get_db_session),
) -> AnalysisListResponse:
    """List recent analyses."""
    repo = AnalysisRepository(db)
    analyses = await repo.list_recent(limit=limit, url=url)
    return AnalysisListResponse(
        analyses=[
            AnalysisSummaryResponse(
                id=analysis.id,
                url=analysis.url,
                score=analysis.score,
                created_at=analysis.created_at,
            )
            for analysis in analyses
        ],
        count=len(analyses),
    )


@router.get(
    "/stats",
    response_model=HistoryStatsResponse,
    summary="History statistics",
    description="Total number of analyses, average score and best score.",
)
async def get_history_stats(
    db: AsyncSession = Depends(get_db_session),
) -> HistoryStatsResponse:
    repo = AnalysisRepository(db)
    stats = await repo.stats()
    return HistoryStatsResponse(
        total=stats.total,
        average_score=stats.average_score,
        best_score=stats.best_score,
    )


@router.get(
    "/{analysis_id}",
    response_model=AnalysisResponse,
    summary="Get an analysis",
    description="Get a stored analysis with its full result.",
)
async def get_analysis(
    analysis_id: uuid.UUID,
    db: AsyncSession = Depends(get_db_session),
) -> AnalysisResponse:
    """Get an analysis by ID."""
    repo = AnalysisRepository(db)
    analysis = await repo.get_by_id(analysis_id)

    if not analysis:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Analysis {analysis_id} not found",
        )

    return AnalysisResponse(
        id=analysis.id,
        created_at=analysis.created_at,
        result=analysis.result,
    )
