from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class FitnessGoal(str, Enum):
    LOSE_WEIGHT = "loseWeight"
    BUILD_STRENGTH = "buildStrength"
    STAY_ACTIVE = "stayActive"
    IMPROVE_FLEXIBILITY = "improveFlexibility"
    BUILD_ENDURANCE = "buildEndurance"

    @property
    def display_name(self) -> str:
        return _FITNESS_GOAL_NAMES[self]


class FitnessLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


_FITNESS_GOAL_NAMES = {
    FitnessGoal.LOSE_WEIGHT: "Lose Weight",
    FitnessGoal.BUILD_STRENGTH: "Build Strength",
    FitnessGoal.STAY_ACTIVE: "Stay Active",
    FitnessGoal.IMPROVE_FLEXIBILITY: "Improve Flexibility",
    FitnessGoal.BUILD_ENDURANCE: "Build Endurance",
}


class UserGoals(BaseModel):
    """Per-user daily targets and profile context used by the analytics."""

    water_goal_liters: float = Field(2.5, ge=0)
    exercise_goal_minutes: int = Field(30, ge=0)
    sunlight_goal_minutes: int = Field(20, ge=0)
    sleep_goal_hours: float = Field(8.0, ge=0)
    social_goal_minutes: int = Field(20, ge=0)
    calorie_goal: int = Field(2000, ge=0)
    protein_goal_grams: float = Field(50, ge=0)

    fitness_goal: Optional[FitnessGoal] = None
    fitness_level: Optional[FitnessLevel] = None
    preferred_workout_duration: Optional[int] = Field(None, ge=0)

    location_city: Optional[str] = None
    location_country: Optional[str] = None

    @property
    def formatted_location(self) -> Optional[str]:
        parts = [p for p in (self.location_city, self.location_country) if p]
        return ", ".join(parts) if parts else None
