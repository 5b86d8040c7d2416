"""Goal tracking utilities."""

from .streaks import (
    calculate_streaks,
    completion_score,
    current_streak,
    goal_hit_rate,
    goal_hit_rates,
    longest_streak,
    progress_ratio,
)

__all__ = [
    "calculate_streaks",
    "completion_score",
    "current_streak",
    "goal_hit_rate",
    "goal_hit_rates",
    "longest_streak",
    "progress_ratio",
]
