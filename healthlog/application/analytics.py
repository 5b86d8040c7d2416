from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from ..domain.analytics.dashboard import build_analytics_summary
from ..models.analytics import AnalyticsSummary, StoredAIAnalysis
from ..models.responses import OperationStatus, StoredAnalysisResponse
from ..models.time import get_local_time
from ..storage.ports import AnalysisRepository, DailyLogRepository, UserGoalsRepository
from .aggregation import GetAggregatesUseCase, window_ending
from .nutrition import TimeProvider


@dataclass
class GetAnalyticsSummaryUseCase:
    """Dashboard for the last ``days`` days compared against the ``days`` before."""

    daily_logs: DailyLogRepository
    goals: UserGoalsRepository
    aggregates: GetAggregatesUseCase
    time_provider: TimeProvider = get_local_time

    async def __call__(self, days: int, timezone: str) -> AnalyticsSummary:
        local_time, _ = self.time_provider(timezone)
        start, end = window_ending(local_time.date(), days)
        previous_start = start - timedelta(days=days)

        # Version first: a write landing after it only makes the cache entry stale.
        version = await self.daily_logs.current_version()
        # One read covers both periods.
        records = await self.daily_logs.list_records(previous_start, end)
        previous, current = records[:days], records[days:]
        aggregates = await self.aggregates.aggregate_window(
            start, end, current, version=version
        )
        goals = await self.goals.get_goals()
        if not any(r.has_activity for r in current):
            current = []
        if not any(r.has_activity for r in previous):
            previous = []
        return build_analytics_summary(aggregates, current, previous, goals)


@dataclass
class GetStoredAnalysisUseCase:
    """Return the stored analysis and whether newer aggregates exist."""

    repository: AnalysisRepository

    async def __call__(self) -> Optional[StoredAnalysisResponse]:
        analysis = await self.repository.get_analysis()
        if analysis is None:
            return None
        latest = await self.repository.get_aggregates()
        stale = latest is not None and analysis.needs_regeneration(latest.last_updated)
        return StoredAnalysisResponse(analysis=analysis, needs_regeneration=stale)


@dataclass
class SaveStoredAnalysisUseCase:
    repository: AnalysisRepository

    async def __call__(self, analysis: StoredAIAnalysis) -> OperationStatus:
        await self.repository.save_analysis(analysis)
        return OperationStatus(status="ok")


@dataclass
class ClearStoredAnalysisUseCase:
    repository: AnalysisRepository

    async def __call__(self) -> OperationStatus:
        await self.repository.clear_analysis()
        return OperationStatus(status="cleared")
