from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional, Sequence

from ..domain.aggregation.builder import build_aggregates
from ..models.aggregates import AggregatedUserData
from ..models.daily_log import DailyRecord
from ..models.time import get_local_time
from ..storage.cache import AggregationCache
from ..storage.ports import (
    ActivityRepository,
    AnalysisRepository,
    DailyLogRepository,
    UserGoalsRepository,
)
from .nutrition import TimeProvider

logger = logging.getLogger(__name__)


def window_ending(today: date, days: int) -> tuple[date, date]:
    """Inclusive ``(start, end)`` of the ``days``-long window ending ``today``."""

    return today - timedelta(days=days - 1), today


@dataclass
class GetAggregatesUseCase:
    """Aggregate a window of records, reusing cached results until data changes.

    Windows longer than ``offload_threshold_days`` are computed in a worker
    thread. Each freshly computed snapshot is also persisted so a stored
    analysis can be checked against it later.
    """

    daily_logs: DailyLogRepository
    activities: ActivityRepository
    goals: UserGoalsRepository
    analysis: AnalysisRepository
    cache: AggregationCache
    offload_threshold_days: int = 90
    time_provider: TimeProvider = get_local_time

    async def __call__(self, days: int, timezone: str) -> AggregatedUserData:
        local_time, _ = self.time_provider(timezone)
        start, end = window_ending(local_time.date(), days)
        return await self.aggregate_window(start, end)

    async def aggregate_window(
        self,
        start: date,
        end: date,
        records: Optional[Sequence[DailyRecord]] = None,
        version: Optional[int] = None,
    ) -> AggregatedUserData:
        """Aggregate ``start..end``; ``records`` may be passed from an existing snapshot.

        Callers passing ``records`` must pass the ``version`` they read before
        reading them, otherwise the result could be cached under a newer
        version than the data it was computed from.
        """

        if records is not None and version is None:
            raise ValueError("records passed without the data version they were read at")
        if version is None:
            version = await self.daily_logs.current_version()
        cached = self.cache.get(start, end, version)
        if cached is not None:
            return cached

        window: List[DailyRecord] = (
            list(records) if records is not None
            else await self.daily_logs.list_records(start, end)
        )
        exercise = await self.activities.list_exercise_activities(start, end)
        social = await self.activities.list_social_activities(start, end)
        goals = await self.goals.get_goals()
        days = (end - start).days + 1

        if days > self.offload_threshold_days:
            logger.info("Aggregating %d days in a worker thread", days)
            result = await asyncio.to_thread(
                build_aggregates,
                window,
                goals,
                exercise_activities=exercise,
                social_activities=social,
                days=days,
            )
        else:
            result = build_aggregates(
                window,
                goals,
                exercise_activities=exercise,
                social_activities=social,
                days=days,
            )

        self.cache.put(start, end, version, result)
        await self.analysis.save_aggregates(result)
        logger.debug("Aggregated %s..%s at data version %d", start, end, version)
        return result
