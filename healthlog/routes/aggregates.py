from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from ..application.aggregation import GetAggregatesUseCase
from ..models.aggregates import AggregatedUserData
from ..platform.wiring import get_aggregates_use_case
from .utils import aggregation_days, resolve_timezone

router: APIRouter = APIRouter()


@router.get("/aggregates", response_model=AggregatedUserData)
async def get_aggregates(
    days: int = Depends(aggregation_days),
    timezone: str = Depends(resolve_timezone),
    use_case: GetAggregatesUseCase = Depends(get_aggregates_use_case),
) -> AggregatedUserData:
    return await use_case(days, timezone)


@router.get("/aggregates/context", response_class=PlainTextResponse)
async def get_aggregates_context(
    days: int = Depends(aggregation_days),
    timezone: str = Depends(resolve_timezone),
    use_case: GetAggregatesUseCase = Depends(get_aggregates_use_case),
) -> str:
    """Plain-text rendering handed to the recommendation generator."""
    aggregates = await use_case(days, timezone)
    return aggregates.to_ai_context()
