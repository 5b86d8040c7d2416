"""Water, sunlight and sleep rollup."""

from __future__ import annotations

from typing import Final, Sequence

from ...models.aggregates import SimpleMetricsAggregates
from ...models.daily_log import DailyRecord
from ...models.goals import UserGoals
from ..goals.streaks import goal_hit_rate

SLEEP_GOAL_TOLERANCE: Final[float] = 0.9


def compute_simple_metrics(
    records: Sequence[DailyRecord], goals: UserGoals
) -> SimpleMetricsAggregates:
    if not records:
        return SimpleMetricsAggregates.empty()

    count = len(records)
    nights = [r.sleep_hours for r in records if r.sleep_hours > 0]
    return SimpleMetricsAggregates(
        avg_water_liters=sum(r.water_liters for r in records) / count,
        water_goal_hit_rate=goal_hit_rate(
            records, lambda r: r.water_liters, goals.water_goal_liters
        ),
        avg_sunlight_minutes=sum(r.sunlight_minutes for r in records) / count,
        sunlight_goal_hit_rate=goal_hit_rate(
            records, lambda r: r.sunlight_minutes, goals.sunlight_goal_minutes
        ),
        avg_sleep_hours=sum(r.sleep_hours for r in records) / count,
        sleep_goal_hit_rate=goal_hit_rate(
            records, lambda r: r.sleep_hours, goals.sleep_goal_hours * SLEEP_GOAL_TOLERANCE
        ),
        min_sleep=min(nights, default=0.0),
        max_sleep=max(nights, default=0.0),
        days_with_data=sum(
            1
            for r in records
            if r.water_liters > 0 or r.sunlight_minutes > 0 or r.sleep_hours > 0
        ),
    )
