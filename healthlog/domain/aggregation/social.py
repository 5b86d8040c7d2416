"""Social rollup."""

from __future__ import annotations

from collections import Counter
from typing import Final, Sequence

from ...models.activities import SocialActivity
from ...models.aggregates import SocialAggregates
from ...models.daily_log import DailyRecord
from ...models.goals import UserGoals
from ..goals.streaks import current_streak, goal_hit_rate

PREFERRED_CATEGORIES: Final[int] = 5


def compute_social_aggregates(
    records: Sequence[DailyRecord],
    activities: Sequence[SocialActivity],
    goals: UserGoals,
) -> SocialAggregates:
    def minutes(record: DailyRecord) -> float:
        return record.social_minutes

    total_minutes = sum(r.social_minutes for r in records)
    categories = Counter(a.category.value for a in activities)
    goal = goals.social_goal_minutes

    return SocialAggregates(
        total_activities_logged=len(activities),
        total_minutes_social=total_minutes,
        avg_minutes_per_day=total_minutes / len(records) if records else 0.0,
        social_goal_hit_rate=goal_hit_rate(records, minutes, goal),
        current_streak=current_streak(records, minutes, goal),
        category_frequency=dict(categories),
        preferred_categories=[c for c, _ in categories.most_common(PREFERRED_CATEGORIES)],
        current_location=goals.formatted_location,
        visited_place_types=list(categories),
        days_with_data=sum(1 for r in records if r.social_minutes > 0),
    )
