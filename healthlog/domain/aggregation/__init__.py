"""Aggregate rollups handed to the recommendation generator."""

from .builder import build_aggregates
from .exercise import compute_exercise_aggregates, infer_workout_category
from .metrics import compute_simple_metrics
from .nutrition import compute_nutrition_aggregates, normalize_food_name
from .social import compute_social_aggregates

__all__ = [
    "build_aggregates",
    "compute_exercise_aggregates",
    "compute_nutrition_aggregates",
    "compute_simple_metrics",
    "compute_social_aggregates",
    "infer_workout_category",
    "normalize_food_name",
]
