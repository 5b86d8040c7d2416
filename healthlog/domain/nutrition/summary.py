"""Daily nutrition summary builders."""

from __future__ import annotations

from typing import Dict, Final, Iterable, List, NamedTuple

from ...models.daily_log import DailyRecord, FoodEntry
from ...models.nutrition import (
    NUTRIENT_FIELDS,
    NUTRIENT_UNITS,
    RECOMMENDED_DAILY_VALUES,
    Deficiency,
    NutritionTotals,
)

SINGLE_DAY_DEFICIENCY_RATIO: Final[float] = 0.5
MAX_PERCENTAGE: Final[float] = 200.0


class TrackedNutrient(NamedTuple):
    name: str
    field: str
    unit: str


# Order matters: deficiencies are always reported in this order.
TRACKED_NUTRIENTS: Final[tuple[TrackedNutrient, ...]] = tuple(
    TrackedNutrient(name, field, NUTRIENT_UNITS[field])
    for name, field in (
        ("Protein", "protein"),
        ("Fiber", "fiber"),
        ("Vitamin C", "vitamin_c"),
        ("Vitamin D", "vitamin_d"),
        ("Calcium", "calcium"),
        ("Iron", "iron"),
        ("Potassium", "potassium"),
    )
)


def summarize_entries(entries: Iterable[FoodEntry]) -> NutritionTotals:
    """Sum every nutrient across ``entries``; unestimated values count as zero."""

    sums: Dict[str, float] = dict.fromkeys(NUTRIENT_FIELDS, 0.0)
    for entry in entries:
        for nutrient in NUTRIENT_FIELDS:
            sums[nutrient] += getattr(entry, nutrient) or 0.0
    return NutritionTotals(**sums)


def summarize(record: DailyRecord) -> NutritionTotals:
    """Aggregate a day's food entries into nutrient totals."""

    return summarize_entries(record.food_entries)


def get_deficiencies(totals: NutritionTotals) -> List[Deficiency]:
    """Return the tracked nutrients below half of their daily value."""

    rec = RECOMMENDED_DAILY_VALUES
    deficiencies: List[Deficiency] = []
    for nutrient in TRACKED_NUTRIENTS:
        current = totals.value_of(nutrient.field)
        recommended = rec.value_of(nutrient.field)
        if current < recommended * SINGLE_DAY_DEFICIENCY_RATIO:
            deficiencies.append(
                Deficiency(
                    name=nutrient.name,
                    current=current,
                    recommended=recommended,
                    unit=nutrient.unit,
                )
            )
    return deficiencies


def get_percentage(current: float, recommended: float) -> float:
    """Percent of ``recommended`` reached by ``current``, clamped to [0, 200]."""

    if recommended == 0:
        return 0.0
    return min(max(current / recommended * 100, 0.0), MAX_PERCENTAGE)


def percent_of_daily_values(totals: NutritionTotals) -> Dict[str, float]:
    """Percent of the recommended daily value for every nutrient."""

    rec = RECOMMENDED_DAILY_VALUES
    return {
        nutrient: get_percentage(totals.value_of(nutrient), rec.value_of(nutrient))
        for nutrient in NUTRIENT_FIELDS
    }
