"""Exercise rollup."""

from __future__ import annotations

from collections import Counter
from typing import Dict, Final, Sequence

from ...models.activities import ExerciseActivity
from ...models.aggregates import ExerciseAggregates
from ...models.daily_log import DailyRecord
from ...models.goals import UserGoals
from ..goals.streaks import current_streak, goal_hit_rate, longest_streak
from ..patterns.weekday import average_by_weekday

# First match wins, so the order of this table matters.
WORKOUT_CATEGORIES: Final[tuple[tuple[str, tuple[str, ...]], ...]] = (
    ("Strength", ("strength", "weight", "lift", "muscle", "resistance")),
    ("Cardio", ("cardio", "run", "jog", "bike", "cycling", "hiit")),
    ("Yoga/Flexibility", ("yoga", "stretch", "flexibility")),
    ("Walking", ("walk",)),
    ("Swimming", ("swim",)),
    ("Sports", ("sport", "game", "tennis", "basketball")),
    ("Core", ("core", "ab")),
    ("Full Body", ("full body", "circuit")),
)
DEFAULT_WORKOUT_CATEGORY: Final[str] = "General"
PREFERRED_TYPES: Final[int] = 3


def infer_workout_category(name: str) -> str:
    lower = name.lower()
    for category, keywords in WORKOUT_CATEGORIES:
        if any(keyword in lower for keyword in keywords):
            return category
    return DEFAULT_WORKOUT_CATEGORY


def workout_type_frequency(activities: Sequence[ExerciseActivity]) -> Dict[str, int]:
    return dict(Counter(infer_workout_category(a.name) for a in activities))


def compute_exercise_aggregates(
    records: Sequence[DailyRecord],
    activities: Sequence[ExerciseActivity],
    goals: UserGoals,
) -> ExerciseAggregates:
    days_with_data = sum(1 for r in records if r.exercise_minutes > 0)
    if days_with_data == 0 and not activities:
        return ExerciseAggregates.empty()

    def minutes(record: DailyRecord) -> float:
        return record.exercise_minutes

    total_minutes = sum(r.exercise_minutes for r in records)
    avg_per_day = total_minutes / len(records) if records else 0.0
    by_weekday = average_by_weekday(records, minutes)
    active_days = sorted(day for day, avg in by_weekday.items() if avg > avg_per_day)

    frequency = workout_type_frequency(activities)
    preferred = [name for name, _ in Counter(frequency).most_common(PREFERRED_TYPES)]
    goal = goals.exercise_goal_minutes

    return ExerciseAggregates(
        total_workouts_logged=len(activities),
        total_minutes_exercised=total_minutes,
        avg_minutes_per_day=avg_per_day,
        avg_minutes_per_workout=(
            sum(a.duration_minutes for a in activities) / len(activities) if activities else 0.0
        ),
        exercise_goal_hit_rate=goal_hit_rate(records, minutes, goal),
        current_streak=current_streak(records, minutes, goal),
        longest_streak=longest_streak(records, minutes, goal),
        active_days_of_week=active_days,
        workout_type_frequency=frequency,
        preferred_workout_types=preferred,
        fitness_goal=goals.fitness_goal.display_name if goals.fitness_goal else None,
        fitness_level=goals.fitness_level.display_name if goals.fitness_level else None,
        preferred_duration=goals.preferred_workout_duration or goal,
        days_with_data=days_with_data,
    )
