from __future__ import annotations

from datetime import date as date_type
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

DATE_FORMAT = "%Y-%m-%d"


def date_key(day: date_type) -> str:
    """Return the ``yyyy-MM-dd`` storage key for a calendar day."""

    return day.strftime(DATE_FORMAT)


def parse_date_key(value: str) -> date_type:
    return datetime.strptime(value, DATE_FORMAT).date()


class FoodEntry(BaseModel):
    """A single logged meal or item with optionally estimated nutrition.

    Every nutrient is ``None`` until it has been estimated, which lets clients
    show "unknown" separately from a measured zero.
    """

    id: str
    name: str
    timestamp: datetime
    original_input: Optional[str] = None
    serving_size: Optional[float] = Field(None, ge=0)
    serving_unit: Optional[str] = None
    health_score: Optional[float] = Field(
        None, ge=0, le=10, description="Estimated health score (0-10)"
    )

    calories: Optional[float] = Field(None, ge=0, description="Energy in kcal")
    protein: Optional[float] = Field(None, ge=0, description="Protein in grams")
    carbs: Optional[float] = Field(None, ge=0, description="Carbohydrates in grams")
    fat: Optional[float] = Field(None, ge=0, description="Fat in grams")
    fiber: Optional[float] = Field(None, ge=0, description="Fiber in grams")
    sugar: Optional[float] = Field(None, ge=0, description="Sugar in grams")
    sodium: Optional[float] = Field(None, ge=0, description="Sodium in mg")

    vitamin_a: Optional[float] = Field(None, ge=0, description="Vitamin A in mcg")
    vitamin_c: Optional[float] = Field(None, ge=0, description="Vitamin C in mg")
    vitamin_d: Optional[float] = Field(None, ge=0, description="Vitamin D in mcg")
    vitamin_e: Optional[float] = Field(None, ge=0, description="Vitamin E in mg")
    vitamin_b12: Optional[float] = Field(None, ge=0, description="Vitamin B12 in mcg")
    folate: Optional[float] = Field(None, ge=0, description="Folate in mcg")
    calcium: Optional[float] = Field(None, ge=0, description="Calcium in mg")
    iron: Optional[float] = Field(None, ge=0, description="Iron in mg")
    magnesium: Optional[float] = Field(None, ge=0, description="Magnesium in mg")
    potassium: Optional[float] = Field(None, ge=0, description="Potassium in mg")
    zinc: Optional[float] = Field(None, ge=0, description="Zinc in mg")


class DailyRecord(BaseModel):
    """Everything logged for one calendar day, keyed by ``yyyy-MM-dd``."""

    date: str = Field(..., description="Day in YYYY-MM-DD format")
    water_liters: float = Field(0.0, ge=0)
    exercise_minutes: int = Field(0, ge=0)
    sunlight_minutes: int = Field(0, ge=0)
    sleep_hours: float = Field(0.0, ge=0)
    social_minutes: int = Field(0, ge=0)
    food_entries: List[FoodEntry] = Field(default_factory=list)
    notes: str = ""

    @field_validator("date")
    @classmethod
    def _validate_date(cls, value: str) -> str:
        parse_date_key(value)
        return value

    @property
    def day(self) -> date_type:
        return parse_date_key(self.date)

    @property
    def weekday(self) -> int:
        """ISO weekday, 1=Monday through 7=Sunday."""
        return self.day.isoweekday()

    @property
    def has_food(self) -> bool:
        return bool(self.food_entries)

    @property
    def has_activity(self) -> bool:
        """Whether anything at all was logged for the day."""
        return bool(
            self.water_liters
            or self.exercise_minutes
            or self.sunlight_minutes
            or self.sleep_hours
            or self.social_minutes
            or self.food_entries
        )

    @classmethod
    def empty(cls, day: date_type) -> "DailyRecord":
        return cls(date=date_key(day))
