"""Local clock helpers shared by the nutrition and analytics use cases."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Tuple
from zoneinfo import ZoneInfo

from pydantic import BaseModel, Field

PartOfDay = Literal["night", "morning", "afternoon", "evening"]

# (first hour, part) in ascending order; hours before the first bound wrap to night.
_DAY_PARTS: Tuple[Tuple[int, PartOfDay], ...] = (
    (5, "morning"),
    (12, "afternoon"),
    (17, "evening"),
    (22, "night"),
)


class TimeContext(BaseModel):
    """Response fields stamping when, in the user's zone, a view was built."""

    local_time: datetime = Field(..., description="Current local time with timezone")
    part_of_day: PartOfDay


def part_of_day(hour: int) -> PartOfDay:
    part: PartOfDay = "night"
    for first_hour, name in _DAY_PARTS:
        if hour >= first_hour:
            part = name
    return part


def get_local_time(timezone: str) -> Tuple[datetime, PartOfDay]:
    """Current time in the IANA ``timezone`` and its part of day.

    The date of the returned datetime is what the analytics treat as today.
    """

    now = datetime.now(ZoneInfo(timezone))
    return now, part_of_day(now.hour)
