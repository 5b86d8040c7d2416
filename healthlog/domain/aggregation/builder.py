"""Compose every rollup into one ``AggregatedUserData`` snapshot."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Sequence

from ...models.activities import ExerciseActivity, SocialActivity
from ...models.aggregates import AggregatedUserData
from ...models.daily_log import DailyRecord
from ...models.goals import UserGoals
from ..patterns.builder import build_patterns
from .exercise import compute_exercise_aggregates
from .metrics import compute_simple_metrics
from .nutrition import compute_nutrition_aggregates
from .social import compute_social_aggregates


def build_aggregates(
    records: Sequence[DailyRecord],
    goals: UserGoals,
    *,
    exercise_activities: Sequence[ExerciseActivity] = (),
    social_activities: Sequence[SocialActivity] = (),
    days: Optional[int] = None,
    now: Optional[datetime] = None,
) -> AggregatedUserData:
    """Aggregate ``records`` (oldest first) together with the logged activities.

    ``days`` defaults to the number of records in the window.
    """

    records = sorted(records, key=lambda r: r.date)
    return AggregatedUserData(
        last_updated=now or datetime.now(timezone.utc),
        days_analyzed=len(records) if days is None else days,
        nutrition=compute_nutrition_aggregates(records, goals),
        exercise=compute_exercise_aggregates(records, exercise_activities, goals),
        social=compute_social_aggregates(records, social_activities, goals),
        simple_metrics=compute_simple_metrics(records, goals),
        patterns=build_patterns(records),
    )
