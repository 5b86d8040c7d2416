from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Final, List

from ..models.activities import ExerciseActivity, SocialActivity
from ..models.daily_log import DailyRecord
from ..models.goals import UserGoals
from ..models.responses import OperationStatus
from ..storage.ports import ActivityRepository, DailyLogRepository, UserGoalsRepository


MAX_RANGE_DAYS: Final[int] = 365


class InvalidDateRange(ValueError):
    """Raised when a range starts after it ends or spans too many days."""


@dataclass
class SaveDailyRecordUseCase:
    """Store the full record for one day, replacing what was there."""

    repository: DailyLogRepository

    async def __call__(self, record: DailyRecord) -> OperationStatus:
        version = await self.repository.save_record(record)
        return OperationStatus(status="ok", version=version)


@dataclass
class GetDailyRecordUseCase:
    repository: DailyLogRepository

    async def __call__(self, day: date) -> DailyRecord:
        return await self.repository.get_record(day)


@dataclass
class ListDailyRecordsUseCase:
    """Return one record per day of an inclusive range."""

    repository: DailyLogRepository

    async def __call__(self, start: date, end: date) -> List[DailyRecord]:
        if start > end:
            raise InvalidDateRange(f"start_date {start} is after end_date {end}")
        if (end - start).days + 1 > MAX_RANGE_DAYS:
            raise InvalidDateRange(f"Ranges are limited to {MAX_RANGE_DAYS} days")
        return await self.repository.list_records(start, end)


@dataclass
class ClearDailyRecordsUseCase:
    repository: DailyLogRepository

    async def __call__(self) -> OperationStatus:
        version = await self.repository.clear()
        return OperationStatus(status="cleared", version=version)


@dataclass
class LogExerciseActivityUseCase:
    repository: ActivityRepository

    async def __call__(self, activity: ExerciseActivity) -> OperationStatus:
        version = await self.repository.save_exercise_activity(activity)
        return OperationStatus(status="ok", version=version)


@dataclass
class LogSocialActivityUseCase:
    repository: ActivityRepository

    async def __call__(self, activity: SocialActivity) -> OperationStatus:
        version = await self.repository.save_social_activity(activity)
        return OperationStatus(status="ok", version=version)


@dataclass
class GetUserGoalsUseCase:
    repository: UserGoalsRepository

    async def __call__(self) -> UserGoals:
        return await self.repository.get_goals()


@dataclass
class SaveUserGoalsUseCase:
    repository: UserGoalsRepository

    async def __call__(self, goals: UserGoals) -> OperationStatus:
        version = await self.repository.save_goals(goals)
        return OperationStatus(status="ok", version=version)
