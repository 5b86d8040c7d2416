"""Dashboard figures for one period compared against the period before."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ...models.aggregates import AggregatedUserData, TrendDirection, weekday_name
from ...models.analytics import (
    AnalyticsSummary,
    CorrelationInsight,
    MetricCard,
    PatternInsights,
)
from ...models.daily_log import DailyRecord
from ...models.goals import UserGoals
from ..goals.streaks import calculate_streaks, completion_score
from ..nutrition.summary import summarize
from ..patterns.trend import classify_trend

PATTERN_INSIGHT_MIN_DAYS = 7
CORRELATION_INSIGHT_THRESHOLD = 0.3
COMPLETION_TREND_MARGIN = 5.0


def average_completion(records: Sequence[DailyRecord], goals: UserGoals) -> float:
    """Mean completion score of ``records`` as a percentage."""

    if not records:
        return 0.0
    return sum(completion_score(r, goals) * 100 for r in records) / len(records)


def compare_periods(current: float, previous: Optional[float]) -> TrendDirection:
    if previous is None:
        return TrendDirection.UNKNOWN
    change = (current - previous) / previous * 100 if previous != 0 else 0.0
    if change > 10:
        return TrendDirection.INCREASING
    if change < -10:
        return TrendDirection.DECREASING
    return TrendDirection.STABLE


def best_day(
    records: Sequence[DailyRecord], value_fn: Callable[[DailyRecord], float]
) -> Tuple[str, float]:
    """Weekday name and value of the first record with the highest value."""

    if not records:
        return "N/A", 0.0
    best = max(records, key=value_fn)
    return weekday_name(best.weekday), float(value_fn(best))


def find_focus_area(aggregates: AggregatedUserData, goals: UserGoals) -> str:
    sm = aggregates.simple_metrics

    def percent(average: float, goal: float) -> float:
        return average / goal * 100 if goal > 0 else 100.0

    metrics = {
        "Water": percent(sm.avg_water_liters, goals.water_goal_liters),
        "Sunlight": percent(sm.avg_sunlight_minutes, goals.sunlight_goal_minutes),
        "Sleep": percent(sm.avg_sleep_hours, goals.sleep_goal_hours),
        "Exercise": percent(aggregates.exercise.avg_minutes_per_day, goals.exercise_goal_minutes),
    }
    # min() keeps the first of equal values.
    name = min(metrics, key=lambda key: metrics[key])
    return f"{name} ({round(metrics[name])}% of goal)"


def _card(
    name: str,
    unit: str,
    average: float,
    goal: float,
    records: Sequence[DailyRecord],
    value_fn: Callable[[DailyRecord], float],
    hit: Callable[[DailyRecord], bool],
) -> MetricCard:
    day, value = best_day(records, value_fn)
    return MetricCard(
        name=name,
        average=average,
        goal=goal,
        unit=unit,
        trend=classify_trend([value_fn(r) for r in records]),
        best_day=day,
        best_value=value,
        days_hit_goal=sum(1 for r in records if hit(r)),
        total_days=len(records),
    )


def build_metric_cards(
    aggregates: AggregatedUserData, records: Sequence[DailyRecord], goals: UserGoals
) -> List[MetricCard]:
    sm = aggregates.simple_metrics
    cards = [
        _card(
            "Water", "L", sm.avg_water_liters, goals.water_goal_liters, records,
            lambda r: r.water_liters,
            lambda r: r.water_liters >= goals.water_goal_liters,
        ),
        _card(
            "Sunlight", "min", sm.avg_sunlight_minutes, goals.sunlight_goal_minutes, records,
            lambda r: r.sunlight_minutes,
            lambda r: r.sunlight_minutes >= goals.sunlight_goal_minutes,
        ),
        _card(
            "Sleep", "hrs", sm.avg_sleep_hours, goals.sleep_goal_hours, records,
            lambda r: r.sleep_hours,
            lambda r: r.sleep_hours >= goals.sleep_goal_hours * 0.9,
        ),
        _card(
            "Exercise", "min", aggregates.exercise.avg_minutes_per_day,
            goals.exercise_goal_minutes, records,
            lambda r: r.exercise_minutes,
            lambda r: r.exercise_minutes >= goals.exercise_goal_minutes,
        ),
    ]
    if aggregates.nutrition.has_data:

        def calorie_hit(record: DailyRecord) -> bool:
            if goals.calorie_goal <= 0:
                return False
            return 0.9 <= summarize(record).calories / goals.calorie_goal <= 1.1

        cards.append(
            _card(
                "Nutrition", "kcal", aggregates.nutrition.avg_calories, goals.calorie_goal,
                records, lambda r: summarize(r).calories, calorie_hit,
            )
        )
    if aggregates.social.has_data:
        cards.append(
            _card(
                "Social", "min", aggregates.social.avg_minutes_per_day,
                goals.social_goal_minutes, records,
                lambda r: r.social_minutes,
                lambda r: r.social_minutes >= goals.social_goal_minutes,
            )
        )
    return cards


def build_pattern_insights(
    aggregates: AggregatedUserData, records: Sequence[DailyRecord]
) -> PatternInsights:
    patterns = aggregates.patterns
    if not patterns.has_patterns or len(records) < PATTERN_INSIGHT_MIN_DAYS:
        return PatternInsights()

    by_day = patterns.exercise_by_day_of_week
    mean = sum(by_day.values()) / len(by_day) if by_day else 0.0
    most_active = [weekday_name(d, short=True) for d, v in by_day.items() if v > mean * 1.2]
    rest = [weekday_name(d, short=True) for d, v in by_day.items() if v < mean * 0.5]

    correlations: List[CorrelationInsight] = []
    corr = patterns.sleep_exercise_correlation
    if corr is not None and abs(corr) > CORRELATION_INSIGHT_THRESHOLD:
        correlations.append(
            CorrelationInsight(
                description=(
                    "You sleep better on exercise days"
                    if corr > 0
                    else "Exercise might be affecting your sleep"
                ),
                is_positive=corr > 0,
            )
        )
    corr = patterns.exercise_calories_correlation
    if corr is not None and abs(corr) > CORRELATION_INSIGHT_THRESHOLD:
        correlations.append(
            CorrelationInsight(
                description=(
                    "You eat more on exercise days"
                    if corr > 0
                    else "You tend to eat less on exercise days"
                ),
                is_positive=True,
            )
        )
    return PatternInsights(
        most_active_days=most_active,
        rest_days=rest,
        correlations=correlations,
        has_enough_data=True,
    )


def build_analytics_summary(
    aggregates: AggregatedUserData,
    records: Sequence[DailyRecord],
    previous_records: Sequence[DailyRecord],
    goals: UserGoals,
) -> AnalyticsSummary:
    """Dashboard summary for ``records``; ``previous_records`` is the period before.

    Both sequences are ordered oldest first. Trends are ``UNKNOWN`` when there
    is no previous period to compare against.
    """

    if not records:
        return AnalyticsSummary.empty()

    completion = average_completion(records, goals)
    streaks: Dict[str, int] = calculate_streaks(records, goals)
    previous_completion: Optional[float] = None
    previous_streak: Optional[float] = None
    if previous_records:
        previous_completion = average_completion(previous_records, goals)
        previous_streak = float(calculate_streaks(previous_records, goals)["overall"])

    trend_text = ""
    if previous_completion is not None:
        if completion > previous_completion + COMPLETION_TREND_MARGIN:
            trend_text = ", trending ↑ from last period"
        elif completion < previous_completion - COMPLETION_TREND_MARGIN:
            trend_text = ", trending ↓ from last period"
        else:
            trend_text = ", stable from last period"
    focus_area = find_focus_area(aggregates, goals)

    return AnalyticsSummary(
        period_summary=(
            f"This period: {round(completion)}% avg completion{trend_text}. "
            f"Focus area: {focus_area}"
        ),
        avg_completion=completion,
        current_streak=streaks["overall"],
        days_tracked=sum(1 for r in records if r.has_activity),
        perfect_days=sum(1 for r in records if completion_score(r, goals) >= 1.0),
        completion_trend=compare_periods(completion, previous_completion),
        streak_trend=compare_periods(float(streaks["overall"]), previous_streak),
        focus_area=focus_area,
        metric_cards=build_metric_cards(aggregates, records, goals),
        streaks=streaks,
        pattern_insights=build_pattern_insights(aggregates, records),
        has_data=True,
    )
