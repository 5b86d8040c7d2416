"""Redis-backed storage adapters.

Every value is stored as JSON under ``{prefix}:{kind}[:{yyyy-MM-dd}]``. Daily
records and activities are keyed by day so that a whole window is read in a
single ``MGET`` round trip. Every write increments ``{prefix}:version``, which
the aggregation cache uses to tell stale entries apart.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone
from typing import List, Optional, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from ..models.activities import ExerciseActivity, SocialActivity
from ..models.aggregates import AggregatedUserData
from ..models.analytics import StoredAIAnalysis
from ..models.daily_log import DailyRecord, date_key
from ..models.goals import UserGoals
from ..platform.clients import RedisClient
from ..platform.config import Settings
from .ports import (
    ActivityRepository,
    AnalysisRepository,
    DailyLogRepository,
    UserGoalsRepository,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_EXERCISE_LIST = TypeAdapter(List[ExerciseActivity])
_SOCIAL_LIST = TypeAdapter(List[SocialActivity])


def days_between(start: date, end: date) -> List[date]:
    """Every calendar day from ``start`` to ``end`` inclusive."""

    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


def utc_day(timestamp: datetime) -> date:
    """Calendar day of ``timestamp`` in UTC; naive values are already UTC."""

    if timestamp.tzinfo is None:
        return timestamp.date()
    return timestamp.astimezone(timezone.utc).date()


class _RedisStore:
    """Key naming and JSON handling shared by the adapters."""

    def __init__(self, *, redis: RedisClient, settings: Settings) -> None:
        self._redis = redis
        self._prefix = settings.redis_key_prefix

    def _key(self, *parts: str) -> str:
        return ":".join((self._prefix, *parts))

    def _bump_version(self) -> int:
        return int(self._redis.incr(self._key("version")))

    def _load(self, key: str, model: Type[ModelT], raw: Optional[str]) -> Optional[ModelT]:
        if raw is None:
            return None
        try:
            return model.model_validate_json(raw)
        except ValidationError:
            logger.warning("Ignoring corrupt %s payload stored at %s", model.__name__, key)
            return None

    def _load_list(self, key: str, adapter: TypeAdapter, raw: Optional[str]) -> list:
        if raw is None:
            return []
        try:
            return adapter.validate_json(raw)
        except ValidationError:
            logger.warning("Ignoring corrupt activity list stored at %s", key)
            return []


class RedisDailyLogRepository(_RedisStore, DailyLogRepository):
    """Daily records stored one key per day."""

    async def get_record(self, day: date) -> DailyRecord:
        key = self._key("log", date_key(day))
        record = self._load(key, DailyRecord, self._redis.get(key))
        return record or DailyRecord.empty(day)

    async def list_records(self, start: date, end: date) -> List[DailyRecord]:
        days = days_between(start, end)
        if not days:
            return []
        keys = [self._key("log", date_key(day)) for day in days]
        payloads = self._redis.mget(*keys)
        records: List[DailyRecord] = []
        for day, key, raw in zip(days, keys, payloads):
            record = self._load(key, DailyRecord, raw)
            records.append(record or DailyRecord.empty(day))
        return records

    async def save_record(self, record: DailyRecord) -> int:
        self._redis.set(self._key("log", record.date), record.model_dump_json())
        return self._bump_version()

    async def clear(self) -> int:
        keys = self._redis.keys(self._key("log", "*"))
        if keys:
            self._redis.delete(*keys)
        logger.info("Cleared %d stored daily records", len(keys))
        return self._bump_version()

    async def current_version(self) -> int:
        raw = self._redis.get(self._key("version"))
        return int(raw) if raw is not None else 0


class RedisActivityRepository(_RedisStore, ActivityRepository):
    """Activities stored as a JSON list per day of their timestamp."""

    def _list_range(self, kind: str, adapter: TypeAdapter, start: date, end: date) -> list:
        keys = [self._key(kind, date_key(day)) for day in days_between(start, end)]
        if not keys:
            return []
        items: list = []
        for key, raw in zip(keys, self._redis.mget(*keys)):
            items.extend(self._load_list(key, adapter, raw))
        return items

    def _append(self, kind: str, adapter: TypeAdapter, activity: BaseModel, day: date) -> int:
        key = self._key(kind, date_key(day))
        items = self._load_list(key, adapter, self._redis.get(key))
        items = [item for item in items if item.id != activity.id]
        items.append(activity)
        self._redis.set(key, adapter.dump_json(items).decode())
        return self._bump_version()

    async def list_exercise_activities(self, start: date, end: date) -> List[ExerciseActivity]:
        return self._list_range("exercise", _EXERCISE_LIST, start, end)

    async def save_exercise_activity(self, activity: ExerciseActivity) -> int:
        return self._append("exercise", _EXERCISE_LIST, activity, utc_day(activity.timestamp))

    async def list_social_activities(self, start: date, end: date) -> List[SocialActivity]:
        return self._list_range("social", _SOCIAL_LIST, start, end)

    async def save_social_activity(self, activity: SocialActivity) -> int:
        return self._append("social", _SOCIAL_LIST, activity, utc_day(activity.timestamp))


class RedisUserGoalsRepository(_RedisStore, UserGoalsRepository):
    async def get_goals(self) -> UserGoals:
        key = self._key("goals")
        return self._load(key, UserGoals, self._redis.get(key)) or UserGoals()

    async def save_goals(self, goals: UserGoals) -> int:
        self._redis.set(self._key("goals"), goals.model_dump_json())
        return self._bump_version()


class RedisAnalysisRepository(_RedisStore, AnalysisRepository):
    async def get_analysis(self) -> Optional[StoredAIAnalysis]:
        key = self._key("analysis")
        return self._load(key, StoredAIAnalysis, self._redis.get(key))

    async def save_analysis(self, analysis: StoredAIAnalysis) -> None:
        self._redis.set(self._key("analysis"), analysis.model_dump_json())

    async def clear_analysis(self) -> None:
        self._redis.delete(self._key("analysis"))

    async def get_aggregates(self) -> Optional[AggregatedUserData]:
        key = self._key("aggregates")
        return self._load(key, AggregatedUserData, self._redis.get(key))

    async def save_aggregates(self, aggregates: AggregatedUserData) -> None:
        self._redis.set(self._key("aggregates"), aggregates.model_dump_json())


def create_daily_log_adapter(*, redis: RedisClient, settings: Settings) -> DailyLogRepository:
    return RedisDailyLogRepository(redis=redis, settings=settings)


def create_activity_adapter(*, redis: RedisClient, settings: Settings) -> ActivityRepository:
    return RedisActivityRepository(redis=redis, settings=settings)


def create_user_goals_adapter(*, redis: RedisClient, settings: Settings) -> UserGoalsRepository:
    return RedisUserGoalsRepository(redis=redis, settings=settings)


def create_analysis_adapter(*, redis: RedisClient, settings: Settings) -> AnalysisRepository:
    return RedisAnalysisRepository(redis=redis, settings=settings)
