from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from ..application.analytics import (
    ClearStoredAnalysisUseCase,
    GetAnalyticsSummaryUseCase,
    GetStoredAnalysisUseCase,
    SaveStoredAnalysisUseCase,
)
from ..models.analytics import AnalyticsSummary, StoredAIAnalysis
from ..models.responses import OperationStatus, StoredAnalysisResponse
from ..platform.wiring import (
    get_analytics_summary_use_case,
    get_clear_stored_analysis_use_case,
    get_save_stored_analysis_use_case,
    get_stored_analysis_use_case,
)
from .utils import resolve_timezone

router: APIRouter = APIRouter()


@router.get("/analytics/summary", response_model=AnalyticsSummary)
async def get_analytics_summary(
    days: int = Query(7, ge=1, le=365, description="Length of the period to summarize."),
    timezone: str = Depends(resolve_timezone),
    use_case: GetAnalyticsSummaryUseCase = Depends(get_analytics_summary_use_case),
) -> AnalyticsSummary:
    return await use_case(days, timezone)


@router.get("/analytics/ai-analysis", response_model=StoredAnalysisResponse)
async def get_ai_analysis(
    use_case: GetStoredAnalysisUseCase = Depends(get_stored_analysis_use_case),
) -> StoredAnalysisResponse:
    result = await use_case()
    if result is None:
        raise HTTPException(status_code=404, detail="No analysis has been stored")
    return result


@router.put("/analytics/ai-analysis", response_model=OperationStatus)
async def save_ai_analysis(
    analysis: StoredAIAnalysis,
    use_case: SaveStoredAnalysisUseCase = Depends(get_save_stored_analysis_use_case),
) -> OperationStatus:
    return await use_case(analysis)


@router.delete("/analytics/ai-analysis", response_model=OperationStatus)
async def clear_ai_analysis(
    use_case: ClearStoredAnalysisUseCase = Depends(get_clear_stored_analysis_use_case),
) -> OperationStatus:
    return await use_case()
