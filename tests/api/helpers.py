"""Factories and assertion helpers for API tests."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Dict, List
from zoneinfo import ZoneInfo

from healthlog.platform.config import Settings


def auth(settings: Settings) -> Dict[str, str]:
    return {"x-api-key": settings.api_key}


def local_today(zone: str = "Europe/Prague") -> date:
    """The day the API treats as today for ``zone``."""

    return datetime.now(ZoneInfo(zone)).date()


def days_ago(days: int) -> date:
    return local_today() - timedelta(days=days)


def make_food_payload(name: str = "Oatmeal", **nutrients: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "id": f"food-{name.lower().replace(' ', '-')}",
        "name": name,
        "timestamp": "2025-01-06T08:00:00Z",
    }
    payload.update(nutrients)
    return payload


def make_daily_log_payload(day: date, **overrides: Any) -> Dict[str, Any]:
    """Return a canonical daily log payload for ``day`` with optional overrides."""

    payload: Dict[str, Any] = {
        "date": day.isoformat(),
        "water_liters": 2.0,
        "exercise_minutes": 30,
        "sunlight_minutes": 20,
        "sleep_hours": 7.5,
        "social_minutes": 0,
        "food_entries": [],
        "notes": "",
    }
    payload.update(overrides)
    return payload


def make_exercise_payload(day: date, **overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "id": "exercise-1",
        "name": "Morning run",
        "duration_minutes": 35,
        "timestamp": datetime.combine(day, time(7, 0), tzinfo=timezone.utc).isoformat(),
    }
    payload.update(overrides)
    return payload


def make_social_payload(day: date, **overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "id": "social-1",
        "name": "Coffee with Ana",
        "category": "cafes",
        "duration_minutes": 60,
        "timestamp": datetime.combine(day, time(16, 0), tzinfo=timezone.utc).isoformat(),
    }
    payload.update(overrides)
    return payload


def make_analysis_payload(data_timestamp: datetime, /, **overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "generated_at": data_timestamp.isoformat(),
        "data_timestamp": data_timestamp.isoformat(),
        "working": ["Steady sleep schedule"],
        "attention": ["Fiber intake is low"],
        "recommendations": ["Add a portion of lentils to lunch"],
        "days_analyzed": 14,
    }
    payload.update(overrides)
    return payload


def stored_dates(records: List[Dict[str, Any]]) -> List[str]:
    return [record["date"] for record in records]
