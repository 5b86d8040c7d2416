"""Nutrition rollup over the food-logged days of a window."""

from __future__ import annotations

import re
from collections import Counter
from typing import Dict, Final, List, Sequence

from ...models.aggregates import NutritionAggregates
from ...models.daily_log import DailyRecord
from ...models.goals import UserGoals
from ...models.nutrition import RECOMMENDED_DAILY_VALUES, NutritionTotals
from ..nutrition.overview import average_totals
from ..nutrition.summary import summarize

MICRONUTRIENTS: Final[tuple[str, ...]] = (
    "vitamin_c",
    "vitamin_d",
    "vitamin_a",
    "vitamin_b12",
    "calcium",
    "iron",
    "potassium",
    "magnesium",
    "zinc",
)

DEFICIENCY_WATCHLIST: Final[tuple[tuple[str, str], ...]] = (
    ("Protein", "protein"),
    ("Fiber", "fiber"),
    ("Vitamin C", "vitamin_c"),
    ("Vitamin D", "vitamin_d"),
    ("Calcium", "calcium"),
    ("Iron", "iron"),
    ("Potassium", "potassium"),
    ("Magnesium", "magnesium"),
    ("Vitamin B12", "vitamin_b12"),
)

EXCESS_WATCHLIST: Final[tuple[tuple[str, str], ...]] = (
    ("Calories", "calories"),
    ("Sugar", "sugar"),
    ("Sodium", "sodium"),
    ("Fat", "fat"),
)

DEFICIENT_RATIO: Final[float] = 0.7
EXCESS_RATIO: Final[float] = 1.5
CONSISTENCY_RATIO: Final[float] = 0.5
TOP_FOODS: Final[int] = 10

MEAT_KEYWORDS = ("chicken", "beef", "steak", "pork", "meat", "bacon", "sausage")
VEG_KEYWORDS = ("salad", "vegetable", "veggie", "tofu", "bean", "lentil")
DAIRY_KEYWORDS = ("milk", "cheese", "yogurt", "dairy")

_QUANTITY_PREFIX = re.compile(r"^\d+\s*(g|kg|ml|oz|cup|tbsp|tsp)?\s*")


def normalize_food_name(name: str) -> str:
    """Lowercase, strip a leading quantity and capitalize the first letter."""

    normalized = _QUANTITY_PREFIX.sub("", name.strip().lower(), count=1)
    return normalized[:1].upper() + normalized[1:]


def _consistent(
    day_totals: Sequence[NutritionTotals],
    watchlist: Sequence[tuple[str, str]],
    is_flagged,
) -> List[str]:
    threshold = len(day_totals) * CONSISTENCY_RATIO
    rec = RECOMMENDED_DAILY_VALUES
    flagged: List[str] = []
    for label, nutrient in watchlist:
        count = sum(
            1
            for totals in day_totals
            if is_flagged(totals.value_of(nutrient), rec.value_of(nutrient))
        )
        if count and count >= threshold:
            flagged.append(label)
    return flagged


def consistent_deficiencies(day_totals: Sequence[NutritionTotals]) -> List[str]:
    """Nutrients under 70% of the daily value on at least half the days."""
    return _consistent(
        day_totals, DEFICIENCY_WATCHLIST, lambda value, rec: value < rec * DEFICIENT_RATIO
    )


def consistent_excesses(day_totals: Sequence[NutritionTotals]) -> List[str]:
    """Nutrients over 150% of the daily value on at least half the days."""
    return _consistent(
        day_totals, EXCESS_WATCHLIST, lambda value, rec: value > rec * EXCESS_RATIO
    )


def infer_preferences(average: NutritionTotals, top_foods: Sequence[str]) -> List[str]:
    rec = RECOMMENDED_DAILY_VALUES
    preferences: List[str] = []

    if average.protein > rec.protein * 1.2:
        preferences.append("high protein")
    elif average.protein < rec.protein * 0.7:
        preferences.append("low protein")

    if average.carbs < rec.carbs * 0.5:
        preferences.append("low carb")
    elif average.carbs > rec.carbs * 1.2:
        preferences.append("high carb")

    if average.fiber > rec.fiber * 1.2:
        preferences.append("high fiber")

    if average.fat > rec.fat * 1.2:
        preferences.append("higher fat")
    elif average.fat < rec.fat * 0.6:
        preferences.append("low fat")

    foods = [f.lower() for f in top_foods]

    def mentions(keywords: Sequence[str]) -> bool:
        return any(k in food for food in foods for k in keywords)

    if not mentions(MEAT_KEYWORDS) and mentions(VEG_KEYWORDS):
        preferences.append("vegetarian-leaning")
    if not mentions(DAIRY_KEYWORDS):
        preferences.append("possibly dairy-free")
    return preferences


def _ratio(value: float, goal: float) -> float:
    return value / goal if goal > 0 else 0.0


def compute_nutrition_aggregates(
    records: Sequence[DailyRecord], goals: UserGoals
) -> NutritionAggregates:
    food_days = [r for r in records if r.has_food]
    if not food_days:
        return NutritionAggregates.empty()

    day_totals = [summarize(r) for r in food_days]
    average = average_totals(day_totals)
    days_with_data = len(food_days)

    frequency: Counter[str] = Counter(
        normalize_food_name(entry.name) for r in food_days for entry in r.food_entries
    )
    total_meals = sum(frequency.values())
    # most_common keeps first-seen order among equal counts.
    top_foods = [name for name, _ in frequency.most_common(TOP_FOODS)]

    calorie_hits = sum(
        1 for t in day_totals if 0.9 <= _ratio(t.calories, goals.calorie_goal) <= 1.1
    )
    protein_hits = sum(
        1 for t in day_totals if _ratio(t.protein, goals.protein_goal_grams) >= 0.9
    )
    micronutrients: Dict[str, float] = {
        nutrient: average.value_of(nutrient) for nutrient in MICRONUTRIENTS
    }

    return NutritionAggregates(
        avg_calories=average.calories,
        avg_protein=average.protein,
        avg_carbs=average.carbs,
        avg_fat=average.fat,
        avg_fiber=average.fiber,
        avg_micronutrients=micronutrients,
        consistent_deficiencies=consistent_deficiencies(day_totals),
        consistent_excesses=consistent_excesses(day_totals),
        total_meals_logged=total_meals,
        avg_meals_per_day=total_meals / days_with_data,
        common_foods=dict(frequency),
        top_foods=top_foods,
        calorie_goal_hit_rate=calorie_hits / days_with_data,
        protein_goal_hit_rate=protein_hits / days_with_data,
        inferred_preferences=infer_preferences(average, top_foods),
        days_with_data=days_with_data,
    )
