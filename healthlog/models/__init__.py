from .activities import ExerciseActivity, SocialActivity, SocialCategory
from .aggregates import (
    AggregatedUserData,
    ExerciseAggregates,
    NutritionAggregates,
    PatternData,
    SimpleMetricsAggregates,
    SocialAggregates,
    TrendDirection,
)
from .analytics import (
    AnalyticsSummary,
    CorrelationInsight,
    MetricCard,
    PatternInsights,
    StoredAIAnalysis,
)
from .daily_log import DailyRecord, FoodEntry
from .goals import FitnessGoal, FitnessLevel, UserGoals
from .nutrition import (
    RECOMMENDED_DAILY_VALUES,
    Deficiency,
    MultiDayNutritionOverview,
    NutrientTrend,
    NutritionTotals,
)
from .responses import (
    DailyNutritionResponse,
    NutritionOverviewResponse,
    OperationStatus,
    StoredAnalysisResponse,
)
from .time import TimeContext

__all__ = [
    'AggregatedUserData',
    'AnalyticsSummary',
    'CorrelationInsight',
    'DailyNutritionResponse',
    'DailyRecord',
    'Deficiency',
    'ExerciseActivity',
    'ExerciseAggregates',
    'FitnessGoal',
    'FitnessLevel',
    'FoodEntry',
    'MetricCard',
    'MultiDayNutritionOverview',
    'NutrientTrend',
    'NutritionAggregates',
    'NutritionOverviewResponse',
    'NutritionTotals',
    'OperationStatus',
    'PatternData',
    'PatternInsights',
    'RECOMMENDED_DAILY_VALUES',
    'SimpleMetricsAggregates',
    'SocialActivity',
    'SocialAggregates',
    'SocialCategory',
    'StoredAIAnalysis',
    'StoredAnalysisResponse',
    'TimeContext',
    'TrendDirection',
    'UserGoals',
]
