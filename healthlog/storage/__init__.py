"""Storage ports, the Redis adapters implementing them and the aggregation cache."""

from .cache import AggregationCache
from .ports import (
    ActivityRepository,
    AnalysisRepository,
    DailyLogRepository,
    UserGoalsRepository,
)
from .redis_repository import (
    create_activity_adapter,
    create_analysis_adapter,
    create_daily_log_adapter,
    create_user_goals_adapter,
)

__all__ = [
    "ActivityRepository",
    "AggregationCache",
    "AnalysisRepository",
    "DailyLogRepository",
    "UserGoalsRepository",
    "create_activity_adapter",
    "create_analysis_adapter",
    "create_daily_log_adapter",
    "create_user_goals_adapter",
]
