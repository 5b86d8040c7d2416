from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Callable, Tuple

from ..domain.nutrition.overview import build_overview
from ..domain.nutrition.summary import get_deficiencies, percent_of_daily_values, summarize
from ..models.daily_log import date_key
from ..models.responses import DailyNutritionResponse, NutritionOverviewResponse
from ..models.time import PartOfDay, get_local_time
from ..storage.ports import DailyLogRepository

TimeProvider = Callable[[str], Tuple[datetime, PartOfDay]]


@dataclass
class GetDailyNutritionUseCase:
    """Totals, single-day deficiencies and percent of daily value for a day."""

    repository: DailyLogRepository
    time_provider: TimeProvider = get_local_time

    async def __call__(self, day: date, timezone: str) -> DailyNutritionResponse:
        record = await self.repository.get_record(day)
        totals = summarize(record)
        local_time, part = self.time_provider(timezone)
        return DailyNutritionResponse(
            date=date_key(day),
            entry_count=len(record.food_entries),
            totals=totals,
            deficiencies=get_deficiencies(totals),
            percent_of_daily_value=percent_of_daily_values(totals),
            local_time=local_time,
            part_of_day=part,
        )


@dataclass
class GetNutritionOverviewUseCase:
    """Multi-day overview ending today in the caller's timezone."""

    repository: DailyLogRepository
    time_provider: TimeProvider = get_local_time

    async def __call__(self, days: int, timezone: str) -> NutritionOverviewResponse:
        local_time, part = self.time_provider(timezone)
        today = local_time.date()
        records = await self.repository.list_records(today - timedelta(days=days - 1), today)
        overview = build_overview(records, lookback_days=days, today=today)
        return NutritionOverviewResponse(
            overview=overview,
            summary=overview.to_ai_summary(),
            local_time=local_time,
            part_of_day=part,
        )
