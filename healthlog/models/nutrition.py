from __future__ import annotations

from typing import Dict, Final, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

NUTRIENT_FIELDS: Final[Tuple[str, ...]] = (
    "calories",
    "protein",
    "carbs",
    "fat",
    "fiber",
    "sugar",
    "sodium",
    "vitamin_a",
    "vitamin_c",
    "vitamin_d",
    "vitamin_e",
    "vitamin_b12",
    "folate",
    "calcium",
    "iron",
    "magnesium",
    "potassium",
    "zinc",
)

NUTRIENT_UNITS: Final[Dict[str, str]] = {
    "calories": "kcal",
    "protein": "g",
    "carbs": "g",
    "fat": "g",
    "fiber": "g",
    "sugar": "g",
    "sodium": "mg",
    "vitamin_a": "mcg",
    "vitamin_c": "mg",
    "vitamin_d": "mcg",
    "vitamin_e": "mg",
    "vitamin_b12": "mcg",
    "folate": "mcg",
    "calcium": "mg",
    "iron": "mg",
    "magnesium": "mg",
    "potassium": "mg",
    "zinc": "mg",
}


class NutritionTotals(BaseModel):
    """Nutrient totals for a day (or a per-day average over several days)."""

    model_config = ConfigDict(frozen=True)

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0
    vitamin_a: float = 0.0
    vitamin_c: float = 0.0
    vitamin_d: float = 0.0
    vitamin_e: float = 0.0
    vitamin_b12: float = 0.0
    folate: float = 0.0
    calcium: float = 0.0
    iron: float = 0.0
    magnesium: float = 0.0
    potassium: float = 0.0
    zinc: float = 0.0

    def value_of(self, nutrient: str) -> float:
        return getattr(self, nutrient)


# General adult daily values. Sugar and sodium are upper limits.
RECOMMENDED_DAILY_VALUES: Final[NutritionTotals] = NutritionTotals(
    calories=2000,
    protein=50,
    carbs=275,
    fat=78,
    fiber=28,
    sugar=50,
    sodium=2300,
    vitamin_a=900,
    vitamin_c=90,
    vitamin_d=20,
    vitamin_e=15,
    vitamin_b12=2.4,
    folate=400,
    calcium=1000,
    iron=18,
    magnesium=420,
    potassium=4700,
    zinc=11,
)


class Deficiency(BaseModel):
    """A nutrient whose intake for a single day is well below its daily value."""

    model_config = ConfigDict(frozen=True)

    name: str
    current: float
    recommended: float
    unit: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def percentage(self) -> float:
        return self.current / self.recommended * 100 if self.recommended > 0 else 0.0


class NutrientTrend(BaseModel):
    """How often a nutrient fell short across the days of a window."""

    model_config = ConfigDict(frozen=True)

    name: str
    average_intake: float
    recommended: float
    unit: str
    deficient_days: int = Field(..., ge=0)
    total_days: int = Field(..., ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def deficiency_rate(self) -> float:
        return self.deficient_days / self.total_days if self.total_days > 0 else 0.0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def percent_of_goal(self) -> float:
        if self.recommended <= 0:
            return 0.0
        return self.average_intake / self.recommended * 100


class MultiDayNutritionOverview(BaseModel):
    """Nutrition over a lookback window, used to tell real deficiency patterns
    apart from one bad day."""

    model_config = ConfigDict(frozen=True)

    days_analyzed: int
    days_with_data: int
    average_intake: NutritionTotals = Field(default_factory=NutritionTotals)
    today_intake: NutritionTotals = Field(default_factory=NutritionTotals)
    consistent_deficiencies: List[NutrientTrend] = Field(default_factory=list)
    per_nutrient_trend: Dict[str, NutrientTrend] = Field(default_factory=dict)

    @classmethod
    def empty(cls, days_analyzed: int = 0) -> "MultiDayNutritionOverview":
        return cls(days_analyzed=days_analyzed, days_with_data=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_enough_data(self) -> bool:
        return self.days_with_data >= 2

    @property
    def has_deficiencies(self) -> bool:
        return bool(self.consistent_deficiencies)

    def to_ai_summary(self) -> str:
        lines: List[str] = []
        today = self.today_intake
        if not self.has_enough_data:
            lines.append(
                f"Limited data: Only {self.days_with_data} day(s) of food tracking available."
            )
            if today.calories > 0:
                lines.append(
                    f"Today so far: {today.calories:.0f} cal, {today.protein:.0f}g protein"
                )
            return "\n".join(lines) + "\n"

        rec = RECOMMENDED_DAILY_VALUES
        avg = self.average_intake
        lines.append(
            f"Nutrition overview (last {self.days_analyzed} days, "
            f"{self.days_with_data} days with data):"
        )
        lines.append("")
        lines.append("Daily averages:")
        lines.append(f"- Calories: {avg.calories:.0f} kcal")
        lines.append(f"- Protein: {avg.protein:.0f}g (goal: {rec.protein:.0f}g)")
        lines.append(f"- Fiber: {avg.fiber:.0f}g (goal: {rec.fiber:.0f}g)")
        lines.append("")
        if self.consistent_deficiencies:
            lines.append("Consistent deficiencies (nutrients low on most days):")
            for trend in self.consistent_deficiencies[:4]:
                lines.append(
                    f"- {trend.name}: averaging {trend.average_intake:.0f}{trend.unit} "
                    f"vs {trend.recommended:.0f}{trend.unit} goal "
                    f"(low on {trend.deficient_days}/{trend.total_days} days)"
                )
        else:
            lines.append("No consistent deficiencies detected - nutrition generally balanced!")
        lines.append("")
        if today.calories > 0:
            lines.append(
                f"Today so far: {today.calories:.0f} cal, {today.protein:.0f}g protein, "
                f"{today.fiber:.0f}g fiber"
            )
        else:
            lines.append("No food logged today yet.")
        return "\n".join(lines) + "\n"
