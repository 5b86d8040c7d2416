from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class SocialCategory(str, Enum):
    """Venue and activity categories used for social logging."""

    RESTAURANTS = "restaurants"
    CAFES = "cafes"
    BARS = "bars"
    NIGHTCLUBS = "nightclubs"
    BEACHES = "beaches"
    PARKS = "parks"
    HIKING = "hiking"
    CAMPING = "camping"
    SKIING = "skiing"
    SURFING = "surfing"
    LAKES = "lakes"
    MOUNTAINS = "mountains"
    GYMS = "gyms"
    SPORTS_COURTS = "sportsCourts"
    GOLF_COURSES = "golfCourses"
    SWIMMING_POOLS = "swimmingPools"
    CINEMA = "cinema"
    THEATRE = "theatre"
    LIVE_MUSIC = "liveMusic"
    MUSEUMS = "museums"
    ART_GALLERIES = "artGalleries"
    ARCADES = "arcades"
    SHOPPING_MALLS = "shoppingMalls"
    MARKETS = "markets"
    COMMUNITY_EVENTS = "communityEvents"
    FESTIVALS = "festivals"
    SPAS = "spas"
    YOGA = "yoga"
    MEDITATION = "meditation"


class ExerciseActivity(BaseModel):
    """A workout session logged manually by the user."""

    id: str
    name: str
    duration_minutes: int = Field(..., ge=0)
    timestamp: datetime
    notes: Optional[str] = None
    workout_id: Optional[str] = Field(
        None, description="Generated workout this session followed, if any"
    )


class SocialActivity(BaseModel):
    """A logged social outing."""

    id: str
    name: str
    category: SocialCategory
    timestamp: datetime
    duration_minutes: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None
    place_id: Optional[str] = None
