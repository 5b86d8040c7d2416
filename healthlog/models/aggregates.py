"""Aggregated snapshot of a user's log history.

Every aggregate has an ``empty()`` zero state and a ``has_data`` predicate so
callers can tell "not enough information yet" apart from real values. The
``to_ai_context`` renderers produce the text handed to the recommendation
generator; their wording may change but the numbers they report may not.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

WEEKDAY_NAMES = ("", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
SHORT_WEEKDAY_NAMES = ("", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def weekday_name(weekday: int, *, short: bool = False) -> str:
    names = SHORT_WEEKDAY_NAMES if short else WEEKDAY_NAMES
    return names[min(max(weekday, 1), 7)]


def _percent(rate: float) -> int:
    return round(rate * 100)


class TrendDirection(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"
    UNKNOWN = "unknown"

    @property
    def arrow(self) -> str:
        return {
            TrendDirection.INCREASING: "↑",
            TrendDirection.DECREASING: "↓",
            TrendDirection.STABLE: "→",
            TrendDirection.UNKNOWN: "",
        }[self]

    @property
    def label(self) -> str:
        return {
            TrendDirection.INCREASING: "Increasing",
            TrendDirection.DECREASING: "Declining",
            TrendDirection.STABLE: "Stable",
            TrendDirection.UNKNOWN: "Not enough data",
        }[self]

    @classmethod
    def parse(cls, value: Optional[str]) -> "TrendDirection":
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class NutritionAggregates(BaseModel):
    """Eating patterns over the days that have food logged."""

    model_config = ConfigDict(frozen=True)

    avg_calories: float = 0.0
    avg_protein: float = 0.0
    avg_carbs: float = 0.0
    avg_fat: float = 0.0
    avg_fiber: float = 0.0
    avg_micronutrients: Dict[str, float] = Field(default_factory=dict)
    consistent_deficiencies: List[str] = Field(default_factory=list)
    consistent_excesses: List[str] = Field(default_factory=list)
    total_meals_logged: int = 0
    avg_meals_per_day: float = 0.0
    common_foods: Dict[str, int] = Field(default_factory=dict)
    top_foods: List[str] = Field(default_factory=list)
    calorie_goal_hit_rate: float = 0.0
    protein_goal_hit_rate: float = 0.0
    inferred_preferences: List[str] = Field(default_factory=list)
    days_with_data: int = 0

    @classmethod
    def empty(cls) -> "NutritionAggregates":
        return cls()

    @property
    def has_data(self) -> bool:
        return self.total_meals_logged > 0

    def to_ai_context(self) -> str:
        if not self.has_data:
            return ""
        lines = [
            f"User's eating patterns (last {self.days_with_data} days with food logged):",
            f"- Average daily calories: {round(self.avg_calories)} kcal",
            f"- Average macros: {round(self.avg_protein)}g protein, "
            f"{round(self.avg_carbs)}g carbs, {round(self.avg_fat)}g fat",
            f"- Average fiber: {round(self.avg_fiber)}g",
        ]
        if self.top_foods:
            lines.append(f"- Common foods they enjoy: {', '.join(self.top_foods[:5])}")
        if self.consistent_deficiencies:
            lines.append(f"- Consistent deficiencies: {', '.join(self.consistent_deficiencies)}")
        if self.consistent_excesses:
            lines.append(f"- Consistently exceeds: {', '.join(self.consistent_excesses)}")
        if self.inferred_preferences:
            lines.append(f"- Dietary tendencies: {', '.join(self.inferred_preferences)}")
        lines.append(f"- Calorie goal hit rate: {_percent(self.calorie_goal_hit_rate)}%")
        lines.append(f"- Protein goal hit rate: {_percent(self.protein_goal_hit_rate)}%")
        return "\n".join(lines) + "\n"


class ExerciseAggregates(BaseModel):
    """Exercise volume, consistency and preferences."""

    model_config = ConfigDict(frozen=True)

    total_workouts_logged: int = 0
    total_minutes_exercised: int = 0
    avg_minutes_per_day: float = 0.0
    avg_minutes_per_workout: float = 0.0
    exercise_goal_hit_rate: float = 0.0
    current_streak: int = 0
    longest_streak: int = 0
    active_days_of_week: List[int] = Field(default_factory=list)
    workout_type_frequency: Dict[str, int] = Field(default_factory=dict)
    preferred_workout_types: List[str] = Field(default_factory=list)
    fitness_goal: Optional[str] = None
    fitness_level: Optional[str] = None
    preferred_duration: Optional[int] = None
    days_with_data: int = 0

    @classmethod
    def empty(cls) -> "ExerciseAggregates":
        return cls()

    @property
    def has_data(self) -> bool:
        return self.total_workouts_logged > 0 or self.total_minutes_exercised > 0

    def format_active_days(self) -> str:
        if not self.active_days_of_week:
            return "No consistent pattern"
        return ", ".join(weekday_name(d, short=True) for d in self.active_days_of_week)

    def to_ai_context(self) -> str:
        if not self.has_data:
            return ""
        lines = [
            f"User's exercise history ({self.total_workouts_logged} sessions, "
            f"{self.total_minutes_exercised} min total):",
            f"- Average per day: {round(self.avg_minutes_per_day)} min",
        ]
        if self.total_workouts_logged:
            lines.append(f"- Average workout duration: {round(self.avg_minutes_per_workout)} min")
        if self.preferred_workout_types:
            lines.append(f"- Preferred workout types: {', '.join(self.preferred_workout_types)}")
        if self.active_days_of_week:
            lines.append(f"- Most active days: {self.format_active_days()}")
        lines.append(f"- Current streak: {self.current_streak} days")
        lines.append(f"- Longest streak: {self.longest_streak} days")
        lines.append(f"- Goal hit rate: {_percent(self.exercise_goal_hit_rate)}%")
        if self.fitness_goal is not None:
            lines.append(f"- Fitness goal: {self.fitness_goal}")
        if self.fitness_level is not None:
            lines.append(f"- Fitness level: {self.fitness_level}")
        return "\n".join(lines) + "\n"


class SocialAggregates(BaseModel):
    """Social time and preferred kinds of outings."""

    model_config = ConfigDict(frozen=True)

    total_activities_logged: int = 0
    total_minutes_social: int = 0
    avg_minutes_per_day: float = 0.0
    social_goal_hit_rate: float = 0.0
    current_streak: int = 0
    category_frequency: Dict[str, int] = Field(default_factory=dict)
    preferred_categories: List[str] = Field(default_factory=list)
    current_location: Optional[str] = None
    visited_place_types: List[str] = Field(default_factory=list)
    days_with_data: int = 0

    @classmethod
    def empty(cls) -> "SocialAggregates":
        return cls()

    @property
    def has_data(self) -> bool:
        return self.total_activities_logged > 0 or self.total_minutes_social > 0

    def to_ai_context(self) -> str:
        if not self.has_data:
            return ""
        lines = ["User's social preferences:"]
        if self.preferred_categories:
            lines.append(f"- Favorite activity types: {', '.join(self.preferred_categories[:3])}")
        lines.append(f"- Total activities logged: {self.total_activities_logged}")
        lines.append(f"- Average social time per day: {round(self.avg_minutes_per_day)} min")
        lines.append(f"- Social goal hit rate: {_percent(self.social_goal_hit_rate)}%")
        if self.current_location is not None:
            lines.append(f"- Current location: {self.current_location}")
        return "\n".join(lines) + "\n"


class SimpleMetricsAggregates(BaseModel):
    """Water, sunlight and sleep averages and goal hit rates."""

    model_config = ConfigDict(frozen=True)

    avg_water_liters: float = 0.0
    water_goal_hit_rate: float = 0.0
    avg_sunlight_minutes: float = 0.0
    sunlight_goal_hit_rate: float = 0.0
    avg_sleep_hours: float = 0.0
    sleep_goal_hit_rate: float = 0.0
    min_sleep: float = 0.0
    max_sleep: float = 0.0
    days_with_data: int = 0

    @classmethod
    def empty(cls) -> "SimpleMetricsAggregates":
        return cls()

    @property
    def has_data(self) -> bool:
        return self.days_with_data > 0

    def to_ai_context(self) -> str:
        lines = [
            "Daily Metrics Summary:",
            f"- Water: {self.avg_water_liters:.1f}L avg, "
            f"{_percent(self.water_goal_hit_rate)}% goal hit rate",
            f"- Sunlight: {round(self.avg_sunlight_minutes)} min avg, "
            f"{_percent(self.sunlight_goal_hit_rate)}% goal hit rate",
            f"- Sleep: {self.avg_sleep_hours:.1f} hrs avg "
            f"(range: {self.min_sleep:.1f}-{self.max_sleep:.1f}), "
            f"{_percent(self.sleep_goal_hit_rate)}% goal hit rate",
        ]
        return "\n".join(lines) + "\n"


class PatternData(BaseModel):
    """Day-of-week averages, correlations and short-term trends."""

    model_config = ConfigDict(frozen=True)

    exercise_by_day_of_week: Dict[int, float] = Field(default_factory=dict)
    calories_by_day_of_week: Dict[int, float] = Field(default_factory=dict)
    sleep_by_day_of_week: Dict[int, float] = Field(default_factory=dict)
    sleep_exercise_correlation: Optional[float] = Field(None, ge=-1, le=1)
    exercise_calories_correlation: Optional[float] = Field(None, ge=-1, le=1)
    exercise_trend: TrendDirection = TrendDirection.UNKNOWN
    nutrition_trend: TrendDirection = TrendDirection.UNKNOWN
    sleep_trend: TrendDirection = TrendDirection.UNKNOWN

    @classmethod
    def empty(cls) -> "PatternData":
        return cls()

    @property
    def has_patterns(self) -> bool:
        return bool(
            self.exercise_by_day_of_week
            or self.calories_by_day_of_week
            or self.sleep_by_day_of_week
        )

    @property
    def has_data(self) -> bool:
        return self.has_patterns

    @property
    def most_active_day(self) -> Optional[int]:
        return _max_key(self.exercise_by_day_of_week)

    @property
    def highest_calorie_day(self) -> Optional[int]:
        return _max_key(self.calories_by_day_of_week)

    def to_ai_context(self) -> str:
        if not self.has_patterns:
            return ""
        lines = ["Detected Patterns:"]
        for label, trend in (
            ("Exercise", self.exercise_trend),
            ("Sleep", self.sleep_trend),
            ("Nutrition", self.nutrition_trend),
        ):
            if trend is not TrendDirection.UNKNOWN:
                lines.append(f"- {label} trend: {trend.value}")
        if self.most_active_day is not None:
            lines.append(f"- Most active day: {weekday_name(self.most_active_day)}")
        if self.highest_calorie_day is not None:
            lines.append(f"- Highest calorie day: {weekday_name(self.highest_calorie_day)}")
        corr = self.sleep_exercise_correlation
        if corr is not None and abs(corr) > 0.3:
            lines.append(f"- Sleep-exercise correlation: {corr:.2f}")
        corr = self.exercise_calories_correlation
        if corr is not None and abs(corr) > 0.3:
            lines.append(f"- Exercise-calories correlation: {corr:.2f}")
        return "\n".join(lines) + "\n"


def _max_key(values: Dict[int, float]) -> Optional[int]:
    if not values:
        return None
    # Lowest weekday wins a tie.
    return max(sorted(values), key=lambda day: values[day])


class AggregatedUserData(BaseModel):
    """Snapshot of everything derived from a window of daily records."""

    model_config = ConfigDict(frozen=True)

    last_updated: datetime
    days_analyzed: int
    nutrition: NutritionAggregates = Field(default_factory=NutritionAggregates)
    exercise: ExerciseAggregates = Field(default_factory=ExerciseAggregates)
    social: SocialAggregates = Field(default_factory=SocialAggregates)
    simple_metrics: SimpleMetricsAggregates = Field(default_factory=SimpleMetricsAggregates)
    patterns: PatternData = Field(default_factory=PatternData)

    @classmethod
    def empty(cls, last_updated: Optional[datetime] = None) -> "AggregatedUserData":
        return cls(
            last_updated=last_updated or datetime.now(timezone.utc),
            days_analyzed=0,
        )

    @property
    def has_data(self) -> bool:
        return self.days_analyzed > 0

    @property
    def has_enough_data_for_patterns(self) -> bool:
        return self.days_analyzed >= 3

    def to_ai_context(self) -> str:
        sections = [
            f"=== User Health Data Summary ({self.days_analyzed} days analyzed) ===\n"
            f"Last updated: {self.last_updated.isoformat()}\n"
        ]
        for section in (self.nutrition, self.exercise, self.social):
            if section.has_data:
                sections.append(section.to_ai_context())
        sections.append(self.simple_metrics.to_ai_context())
        if self.patterns.has_patterns:
            sections.append(self.patterns.to_ai_context())
        return "\n".join(sections)
