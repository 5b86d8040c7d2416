"""FastAPI dependency wiring for application use cases."""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from ..application.aggregation import GetAggregatesUseCase
from ..application.analytics import (
    ClearStoredAnalysisUseCase,
    GetAnalyticsSummaryUseCase,
    GetStoredAnalysisUseCase,
    SaveStoredAnalysisUseCase,
)
from ..application.logs import (
    ClearDailyRecordsUseCase,
    GetDailyRecordUseCase,
    GetUserGoalsUseCase,
    ListDailyRecordsUseCase,
    LogExerciseActivityUseCase,
    LogSocialActivityUseCase,
    SaveDailyRecordUseCase,
    SaveUserGoalsUseCase,
)
from ..application.nutrition import GetDailyNutritionUseCase, GetNutritionOverviewUseCase
from ..storage.cache import AggregationCache
from ..storage.ports import (
    ActivityRepository,
    AnalysisRepository,
    DailyLogRepository,
    UserGoalsRepository,
)
from ..storage.redis_repository import (
    create_activity_adapter,
    create_analysis_adapter,
    create_daily_log_adapter,
    create_user_goals_adapter,
)
from .clients import RedisClient, get_redis
from .config import Settings, get_settings


@lru_cache()
def get_aggregation_cache() -> AggregationCache:
    """Process-wide cache shared by every request."""
    return AggregationCache()


def provide_daily_log_port(
    redis: RedisClient = Depends(get_redis),
    settings: Settings = Depends(get_settings),
) -> DailyLogRepository:
    return create_daily_log_adapter(redis=redis, settings=settings)


def provide_activity_port(
    redis: RedisClient = Depends(get_redis),
    settings: Settings = Depends(get_settings),
) -> ActivityRepository:
    return create_activity_adapter(redis=redis, settings=settings)


def provide_user_goals_port(
    redis: RedisClient = Depends(get_redis),
    settings: Settings = Depends(get_settings),
) -> UserGoalsRepository:
    return create_user_goals_adapter(redis=redis, settings=settings)


def provide_analysis_port(
    redis: RedisClient = Depends(get_redis),
    settings: Settings = Depends(get_settings),
) -> AnalysisRepository:
    return create_analysis_adapter(redis=redis, settings=settings)


def get_save_daily_record_use_case(
    repository: DailyLogRepository = Depends(provide_daily_log_port),
) -> SaveDailyRecordUseCase:
    return SaveDailyRecordUseCase(repository)


def get_daily_record_use_case(
    repository: DailyLogRepository = Depends(provide_daily_log_port),
) -> GetDailyRecordUseCase:
    return GetDailyRecordUseCase(repository)


def get_list_daily_records_use_case(
    repository: DailyLogRepository = Depends(provide_daily_log_port),
) -> ListDailyRecordsUseCase:
    return ListDailyRecordsUseCase(repository)


def get_clear_daily_records_use_case(
    repository: DailyLogRepository = Depends(provide_daily_log_port),
) -> ClearDailyRecordsUseCase:
    return ClearDailyRecordsUseCase(repository)


def get_log_exercise_activity_use_case(
    repository: ActivityRepository = Depends(provide_activity_port),
) -> LogExerciseActivityUseCase:
    return LogExerciseActivityUseCase(repository)


def get_log_social_activity_use_case(
    repository: ActivityRepository = Depends(provide_activity_port),
) -> LogSocialActivityUseCase:
    return LogSocialActivityUseCase(repository)


def get_user_goals_use_case(
    repository: UserGoalsRepository = Depends(provide_user_goals_port),
) -> GetUserGoalsUseCase:
    return GetUserGoalsUseCase(repository)


def get_save_user_goals_use_case(
    repository: UserGoalsRepository = Depends(provide_user_goals_port),
) -> SaveUserGoalsUseCase:
    return SaveUserGoalsUseCase(repository)


def get_daily_nutrition_use_case(
    repository: DailyLogRepository = Depends(provide_daily_log_port),
) -> GetDailyNutritionUseCase:
    return GetDailyNutritionUseCase(repository)


def get_nutrition_overview_use_case(
    repository: DailyLogRepository = Depends(provide_daily_log_port),
) -> GetNutritionOverviewUseCase:
    return GetNutritionOverviewUseCase(repository)


def get_aggregates_use_case(
    daily_logs: DailyLogRepository = Depends(provide_daily_log_port),
    activities: ActivityRepository = Depends(provide_activity_port),
    goals: UserGoalsRepository = Depends(provide_user_goals_port),
    analysis: AnalysisRepository = Depends(provide_analysis_port),
    cache: AggregationCache = Depends(get_aggregation_cache),
    settings: Settings = Depends(get_settings),
) -> GetAggregatesUseCase:
    return GetAggregatesUseCase(
        daily_logs=daily_logs,
        activities=activities,
        goals=goals,
        analysis=analysis,
        cache=cache,
        offload_threshold_days=settings.offload_threshold_days,
    )


def get_analytics_summary_use_case(
    daily_logs: DailyLogRepository = Depends(provide_daily_log_port),
    goals: UserGoalsRepository = Depends(provide_user_goals_port),
    aggregates: GetAggregatesUseCase = Depends(get_aggregates_use_case),
) -> GetAnalyticsSummaryUseCase:
    return GetAnalyticsSummaryUseCase(
        daily_logs=daily_logs, goals=goals, aggregates=aggregates
    )


def get_stored_analysis_use_case(
    repository: AnalysisRepository = Depends(provide_analysis_port),
) -> GetStoredAnalysisUseCase:
    return GetStoredAnalysisUseCase(repository)


def get_save_stored_analysis_use_case(
    repository: AnalysisRepository = Depends(provide_analysis_port),
) -> SaveStoredAnalysisUseCase:
    return SaveStoredAnalysisUseCase(repository)


def get_clear_stored_analysis_use_case(
    repository: AnalysisRepository = Depends(provide_analysis_port),
) -> ClearStoredAnalysisUseCase:
    return ClearStoredAnalysisUseCase(repository)


__all__ = [
    "get_aggregation_cache",
    "provide_daily_log_port",
    "provide_activity_port",
    "provide_user_goals_port",
    "provide_analysis_port",
    "get_save_daily_record_use_case",
    "get_daily_record_use_case",
    "get_list_daily_records_use_case",
    "get_clear_daily_records_use_case",
    "get_log_exercise_activity_use_case",
    "get_log_social_activity_use_case",
    "get_user_goals_use_case",
    "get_save_user_goals_use_case",
    "get_daily_nutrition_use_case",
    "get_nutrition_overview_use_case",
    "get_aggregates_use_case",
    "get_analytics_summary_use_case",
    "get_stored_analysis_use_case",
    "get_save_stored_analysis_use_case",
    "get_clear_stored_analysis_use_case",
]
