from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer

from .analytics import StoredAIAnalysis
from .nutrition import Deficiency, MultiDayNutritionOverview, NutritionTotals
from .time import TimeContext


class OperationStatus(BaseModel):
    """Normalized status payload returned by mutation endpoints."""

    status: str = Field(..., description="Short status indicator for the operation outcome.")
    version: Optional[int] = Field(
        None, description="Data version after the write, when the write bumped it."
    )
    model_config = ConfigDict(json_schema_extra={"required": ["status"]})

    @model_serializer(mode="wrap")
    def _serialize(self, handler):  # type: ignore[override]
        payload = handler(self)
        if payload.get("version") is None:
            payload.pop("version", None)
        return payload


class DailyNutritionResponse(TimeContext):
    """Totals, single-day deficiencies and percent of daily value for one day."""

    date: str
    entry_count: int
    totals: NutritionTotals
    deficiencies: List[Deficiency]
    percent_of_daily_value: Dict[str, float]


class NutritionOverviewResponse(TimeContext):
    overview: MultiDayNutritionOverview
    summary: str = Field(..., description="Plain-text rendering of the overview")


class StoredAnalysisResponse(BaseModel):
    analysis: StoredAIAnalysis
    needs_regeneration: bool = Field(
        ..., description="True when aggregates were rebuilt after this analysis"
    )
