from __future__ import annotations

from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import Depends, HTTPException, Query

from ..platform.config import Settings, get_settings


def resolve_timezone(
    timezone: Optional[str] = Query(
        default=None,
        description="IANA timezone deciding what 'today' is; defaults to the configured zone.",
    ),
    settings: Settings = Depends(get_settings),
) -> str:
    name = timezone or settings.default_timezone
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise HTTPException(status_code=400, detail=f"Unknown timezone: {name}")
    return name


def aggregation_days(
    days: Optional[int] = Query(
        default=None, ge=1, le=365, description="Window length; defaults to the configured value."
    ),
    settings: Settings = Depends(get_settings),
) -> int:
    return days or settings.aggregation_days


def overview_days(
    days: Optional[int] = Query(
        default=None, ge=1, le=365, description="Lookback length; defaults to the configured value."
    ),
    settings: Settings = Depends(get_settings),
) -> int:
    return days or settings.overview_days
