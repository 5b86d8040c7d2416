"""Multi-day nutrition overview builder."""

from __future__ import annotations

from datetime import date
from typing import Dict, Final, Iterable, List, Optional

from ...models.daily_log import DailyRecord, date_key
from ...models.nutrition import (
    NUTRIENT_FIELDS,
    RECOMMENDED_DAILY_VALUES,
    MultiDayNutritionOverview,
    NutrientTrend,
    NutritionTotals,
)
from .summary import TRACKED_NUTRIENTS, summarize

DEFICIENT_DAY_RATIO: Final[float] = 0.7
CONSISTENCY_RATIO: Final[float] = 0.5


def average_totals(day_totals: List[NutritionTotals]) -> NutritionTotals:
    """Per-day mean of each nutrient; all-zero for an empty list."""

    if not day_totals:
        return NutritionTotals()
    count = len(day_totals)
    return NutritionTotals(
        **{
            nutrient: sum(t.value_of(nutrient) for t in day_totals) / count
            for nutrient in NUTRIENT_FIELDS
        }
    )


def build_overview(
    records: Iterable[DailyRecord],
    lookback_days: int = 7,
    today: Optional[date] = None,
) -> MultiDayNutritionOverview:
    """Summarize nutrition over the records of a lookback window.

    Only days with at least one food entry count towards averages and
    deficient-day tallies, so an untracked day never looks like a fast. A
    nutrient is a consistent deficiency when it falls below 70% of its daily
    value on at least half of those days.
    """

    records = list(records)
    today_key = date_key(today or date.today())
    today_record = next((r for r in records if r.date == today_key), None)
    today_intake = summarize(today_record) if today_record else NutritionTotals()

    day_totals = [summarize(r) for r in records if r.has_food]
    days_with_data = len(day_totals)
    if days_with_data == 0:
        return MultiDayNutritionOverview(
            days_analyzed=lookback_days,
            days_with_data=0,
            today_intake=today_intake,
        )

    average = average_totals(day_totals)
    rec = RECOMMENDED_DAILY_VALUES
    per_nutrient: Dict[str, NutrientTrend] = {}
    consistent: List[NutrientTrend] = []
    for nutrient in TRACKED_NUTRIENTS:
        recommended = rec.value_of(nutrient.field)
        deficient_days = sum(
            1
            for totals in day_totals
            if totals.value_of(nutrient.field) < recommended * DEFICIENT_DAY_RATIO
        )
        trend = NutrientTrend(
            name=nutrient.name,
            average_intake=average.value_of(nutrient.field),
            recommended=recommended,
            unit=nutrient.unit,
            deficient_days=deficient_days,
            total_days=days_with_data,
        )
        per_nutrient[nutrient.name] = trend
        if deficient_days >= days_with_data * CONSISTENCY_RATIO:
            consistent.append(trend)

    # sorted() is stable, so ties keep the tracked-nutrient order.
    consistent = sorted(consistent, key=lambda t: t.deficiency_rate, reverse=True)

    return MultiDayNutritionOverview(
        days_analyzed=lookback_days,
        days_with_data=days_with_data,
        average_intake=average,
        today_intake=today_intake,
        consistent_deficiencies=consistent,
        per_nutrient_trend=per_nutrient,
    )
