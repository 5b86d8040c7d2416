"""Assemble day-of-week, correlation and trend patterns for a window."""

from __future__ import annotations

from typing import Optional, Sequence

from ...models.aggregates import PatternData
from ...models.daily_log import DailyRecord
from ..nutrition.summary import summarize
from .correlation import correlate
from .trend import classify_trend
from .weekday import average_by_weekday


def exercise_minutes(record: DailyRecord) -> float:
    return float(record.exercise_minutes)


def sleep_hours(record: DailyRecord) -> Optional[float]:
    """Sleep is only known for nights where some was logged."""
    return record.sleep_hours if record.sleep_hours > 0 else None


def logged_calories(record: DailyRecord) -> Optional[float]:
    return summarize(record).calories if record.has_food else None


def daily_calories(record: DailyRecord) -> float:
    return summarize(record).calories


def build_patterns(records: Sequence[DailyRecord]) -> PatternData:
    """Derive patterns from ``records`` ordered oldest first."""

    if not records:
        return PatternData.empty()

    return PatternData(
        exercise_by_day_of_week=average_by_weekday(records, exercise_minutes),
        calories_by_day_of_week=average_by_weekday(records, daily_calories),
        sleep_by_day_of_week=average_by_weekday(records, lambda r: r.sleep_hours),
        sleep_exercise_correlation=correlate(records, sleep_hours, exercise_minutes),
        exercise_calories_correlation=correlate(records, exercise_minutes, logged_calories),
        exercise_trend=classify_trend([exercise_minutes(r) for r in records]),
        nutrition_trend=classify_trend([daily_calories(r) for r in records]),
        sleep_trend=classify_trend([r.sleep_hours for r in records]),
    )
