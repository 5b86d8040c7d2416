from __future__ import annotations

from datetime import date
from typing import List, Optional, Protocol, runtime_checkable

from ..models.activities import ExerciseActivity, SocialActivity
from ..models.aggregates import AggregatedUserData
from ..models.analytics import StoredAIAnalysis
from ..models.daily_log import DailyRecord
from ..models.goals import UserGoals


@runtime_checkable
class DailyLogRepository(Protocol):
    """Port for per-day health records."""

    async def get_record(self, day: date) -> DailyRecord:
        """Return the record for ``day``, or a default one when nothing is stored."""

    async def list_records(self, start: date, end: date) -> List[DailyRecord]:
        """Return one record per day between the dates (inclusive), oldest first.

        Days with nothing stored are filled with default records.
        """

    async def save_record(self, record: DailyRecord) -> int:
        """Persist ``record`` and return the new data version."""

    async def clear(self) -> int:
        """Delete every stored record and return the new data version."""

    async def current_version(self) -> int:
        """Return the counter bumped by every write."""


@runtime_checkable
class ActivityRepository(Protocol):
    """Port for individually logged exercise and social activities."""

    async def list_exercise_activities(self, start: date, end: date) -> List[ExerciseActivity]:
        """Return exercise sessions whose timestamp falls between the dates."""

    async def save_exercise_activity(self, activity: ExerciseActivity) -> int:
        """Persist an exercise session and return the new data version."""

    async def list_social_activities(self, start: date, end: date) -> List[SocialActivity]:
        """Return social activities whose timestamp falls between the dates."""

    async def save_social_activity(self, activity: SocialActivity) -> int:
        """Persist a social activity and return the new data version."""


@runtime_checkable
class UserGoalsRepository(Protocol):
    """Port for the user's goals and profile."""

    async def get_goals(self) -> UserGoals:
        """Return stored goals, or defaults when none were saved."""

    async def save_goals(self, goals: UserGoals) -> int:
        """Persist goals and return the new data version."""


@runtime_checkable
class AnalysisRepository(Protocol):
    """Port for the latest aggregates and the analysis generated from them."""

    async def get_analysis(self) -> Optional[StoredAIAnalysis]:
        """Return the stored analysis if one exists."""

    async def save_analysis(self, analysis: StoredAIAnalysis) -> None:
        """Replace the stored analysis."""

    async def clear_analysis(self) -> None:
        """Remove the stored analysis."""

    async def get_aggregates(self) -> Optional[AggregatedUserData]:
        """Return the most recently computed aggregates."""

    async def save_aggregates(self, aggregates: AggregatedUserData) -> None:
        """Persist freshly computed aggregates."""
