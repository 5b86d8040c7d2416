from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Path

from ..application.nutrition import GetDailyNutritionUseCase, GetNutritionOverviewUseCase
from ..models.responses import DailyNutritionResponse, NutritionOverviewResponse
from ..platform.wiring import get_daily_nutrition_use_case, get_nutrition_overview_use_case
from .utils import overview_days, resolve_timezone

router: APIRouter = APIRouter()


@router.get("/nutrition/daily/{day}", response_model=DailyNutritionResponse)
async def get_daily_nutrition(
    day: date = Path(..., description="Day in YYYY-MM-DD format."),
    timezone: str = Depends(resolve_timezone),
    use_case: GetDailyNutritionUseCase = Depends(get_daily_nutrition_use_case),
) -> DailyNutritionResponse:
    return await use_case(day, timezone)


@router.get("/nutrition/overview", response_model=NutritionOverviewResponse)
async def get_nutrition_overview(
    days: int = Depends(overview_days),
    timezone: str = Depends(resolve_timezone),
    use_case: GetNutritionOverviewUseCase = Depends(get_nutrition_overview_use_case),
) -> NutritionOverviewResponse:
    return await use_case(days, timezone)
