from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .aggregates import TrendDirection


class StoredAIAnalysis(BaseModel):
    """A recommendation-generator result persisted alongside the aggregates
    it was produced from."""

    generated_at: datetime
    data_timestamp: datetime = Field(
        ..., description="AggregatedUserData.last_updated at generation time"
    )
    working: List[str] = Field(default_factory=list)
    attention: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    days_analyzed: int = Field(0, ge=0)

    @field_validator("generated_at", "data_timestamp")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        """Timestamps without an offset are taken as UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @classmethod
    def empty(cls) -> "StoredAIAnalysis":
        now = datetime.now(timezone.utc)
        return cls(generated_at=now, data_timestamp=now)

    @property
    def has_content(self) -> bool:
        return bool(self.working or self.attention or self.recommendations)

    def needs_regeneration(self, data_timestamp: datetime) -> bool:
        """Whether the aggregates have been rebuilt since this analysis."""
        return data_timestamp > self.data_timestamp


class MetricCard(BaseModel):
    """Per-metric dashboard figures for one period."""

    name: str
    average: float
    goal: float
    unit: str
    trend: TrendDirection = TrendDirection.UNKNOWN
    best_day: str = "N/A"
    best_value: float = 0.0
    days_hit_goal: int = 0
    total_days: int = 0

    @property
    def goal_percentage(self) -> float:
        if self.goal <= 0:
            return 0.0
        return min(max(self.average / self.goal * 100, 0.0), 100.0)

    @property
    def consistency_text(self) -> str:
        return f"{self.days_hit_goal}/{self.total_days} days hit goal"


class CorrelationInsight(BaseModel):
    description: str
    is_positive: bool


class PatternInsights(BaseModel):
    most_active_days: List[str] = Field(default_factory=list)
    rest_days: List[str] = Field(default_factory=list)
    correlations: List[CorrelationInsight] = Field(default_factory=list)
    has_enough_data: bool = False


class AnalyticsSummary(BaseModel):
    """Dashboard figures for a period, compared against the period before."""

    period_summary: str
    avg_completion: float = 0.0
    current_streak: int = 0
    days_tracked: int = 0
    perfect_days: int = 0
    completion_trend: TrendDirection = TrendDirection.UNKNOWN
    streak_trend: TrendDirection = TrendDirection.UNKNOWN
    focus_area: Optional[str] = None
    metric_cards: List[MetricCard] = Field(default_factory=list)
    streaks: Dict[str, int] = Field(default_factory=dict)
    pattern_insights: PatternInsights = Field(default_factory=PatternInsights)
    has_data: bool = False

    @classmethod
    def empty(cls) -> "AnalyticsSummary":
        return cls(period_summary="Start tracking to see your analytics")
