"""Goal-hit streaks and rates over a window of daily records.

Records are expected oldest first. Every function returns zero for an empty
window instead of raising. A goal of zero is met by every day, so streaks
and hit rates then cover the whole window; only ``progress_ratio`` treats a
non-positive goal as no progress.
"""

from __future__ import annotations

from typing import Callable, Dict, Final, Sequence

from ...models.daily_log import DailyRecord
from ...models.goals import UserGoals

ValueFn = Callable[[DailyRecord], float]
HitFn = Callable[[DailyRecord], bool]

OVERALL_STREAK_THRESHOLD: Final[float] = 0.5


def _hits(value_fn: ValueFn, goal: float) -> HitFn:
    return lambda record: value_fn(record) >= goal


def current_streak_by(records: Sequence[DailyRecord], hit: HitFn) -> int:
    streak = 0
    for record in reversed(records):
        if not hit(record):
            break
        streak += 1
    return streak


def current_streak(records: Sequence[DailyRecord], value_fn: ValueFn, goal: float) -> int:
    """Count the consecutive most recent days meeting ``goal``."""

    return current_streak_by(records, _hits(value_fn, goal))


def longest_streak_by(records: Sequence[DailyRecord], hit: HitFn) -> int:
    longest = 0
    run = 0
    previous = None
    for record in records:
        day = record.day
        if not hit(record):
            run = 0
        elif previous is not None and (day - previous).days > 1:
            run = 1
        else:
            run += 1
        longest = max(longest, run)
        previous = day
    return longest


def longest_streak(records: Sequence[DailyRecord], value_fn: ValueFn, goal: float) -> int:
    """Longest run of hits; a missing calendar day breaks the run."""

    return longest_streak_by(records, _hits(value_fn, goal))


def goal_hit_rate(records: Sequence[DailyRecord], value_fn: ValueFn, goal: float) -> float:
    """Fraction of days in ``records`` meeting ``goal``."""

    if not records:
        return 0.0
    return sum(1 for r in records if value_fn(r) >= goal) / len(records)


def progress_ratio(value: float, goal: float) -> float:
    if goal <= 0:
        return 0.0
    return min(max(value / goal, 0.0), 1.0)


def completion_score(record: DailyRecord, goals: UserGoals) -> float:
    """Unweighted mean progress of water, exercise, sunlight and sleep."""

    ratios = (
        progress_ratio(record.water_liters, goals.water_goal_liters),
        progress_ratio(record.exercise_minutes, goals.exercise_goal_minutes),
        progress_ratio(record.sunlight_minutes, goals.sunlight_goal_minutes),
        progress_ratio(record.sleep_hours, goals.sleep_goal_hours),
    )
    return sum(ratios) / len(ratios)


def metric_targets(goals: UserGoals) -> Dict[str, tuple[ValueFn, float]]:
    """Value accessor and goal per tracked daily metric."""

    return {
        "water": (lambda r: r.water_liters, goals.water_goal_liters),
        "exercise": (lambda r: r.exercise_minutes, goals.exercise_goal_minutes),
        "sunlight": (lambda r: r.sunlight_minutes, goals.sunlight_goal_minutes),
        "sleep": (lambda r: r.sleep_hours, goals.sleep_goal_hours),
        "social": (lambda r: r.social_minutes, goals.social_goal_minutes),
    }


def calculate_streaks(records: Sequence[DailyRecord], goals: UserGoals) -> Dict[str, int]:
    streaks = {
        name: current_streak(records, value_fn, goal)
        for name, (value_fn, goal) in metric_targets(goals).items()
    }
    streaks["nutrition"] = current_streak_by(records, lambda r: r.has_food)
    streaks["overall"] = current_streak_by(
        records, lambda r: completion_score(r, goals) >= OVERALL_STREAK_THRESHOLD
    )
    return streaks


def goal_hit_rates(records: Sequence[DailyRecord], goals: UserGoals) -> Dict[str, float]:
    return {
        name: goal_hit_rate(records, value_fn, goal)
        for name, (value_fn, goal) in metric_targets(goals).items()
    }
