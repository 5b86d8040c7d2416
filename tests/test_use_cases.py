"""Application use case tests against the in-memory Redis double."""

from __future__ import annotations

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from healthlog.application.aggregation import GetAggregatesUseCase, window_ending
from healthlog.application.analytics import GetAnalyticsSummaryUseCase, GetStoredAnalysisUseCase
from healthlog.application.logs import MAX_RANGE_DAYS, InvalidDateRange, ListDailyRecordsUseCase
from healthlog.application.nutrition import GetDailyNutritionUseCase, GetNutritionOverviewUseCase
from healthlog.models.analytics import StoredAIAnalysis
from healthlog.platform.config import Settings
from healthlog.storage.cache import AggregationCache
from healthlog.storage.redis_repository import (
    create_activity_adapter,
    create_analysis_adapter,
    create_daily_log_adapter,
    create_user_goals_adapter,
)
from tests.builders import START, make_exercise, make_food, make_record
from tests.conftest import RedisFake

pytestmark = pytest.mark.asyncio

TODAY = START + timedelta(days=13)
NOW = datetime(TODAY.year, TODAY.month, TODAY.day, 9, 30, tzinfo=ZoneInfo("Europe/Prague"))


def fixed_time(timezone: str):
    return NOW, "morning"


def _aggregates_use_case(redis: RedisFake, settings: Settings, **kwargs) -> GetAggregatesUseCase:
    return GetAggregatesUseCase(
        daily_logs=create_daily_log_adapter(redis=redis, settings=settings),
        activities=create_activity_adapter(redis=redis, settings=settings),
        goals=create_user_goals_adapter(redis=redis, settings=settings),
        analysis=create_analysis_adapter(redis=redis, settings=settings),
        cache=kwargs.pop("cache", AggregationCache()),
        time_provider=fixed_time,
        **kwargs,
    )


async def test_window_ending_is_inclusive() -> None:
    assert window_ending(TODAY, 14) == (START, TODAY)
    assert window_ending(TODAY, 1) == (TODAY, TODAY)


async def test_aggregates_cover_window_and_activities(
    redis_fake: RedisFake, settings: Settings
) -> None:
    """The window ends today and includes activities logged inside it."""

    logs = create_daily_log_adapter(redis=redis_fake, settings=settings)
    activities = create_activity_adapter(redis=redis_fake, settings=settings)
    await logs.save_record(make_record(13, exercise_minutes=45))
    await logs.save_record(make_record(-1, exercise_minutes=120))
    await activities.save_exercise_activity(make_exercise("Run", minutes=45, day=TODAY))

    result = await _aggregates_use_case(redis_fake, settings)(14, "Europe/Prague")

    assert result.days_analyzed == 14
    assert result.exercise.total_minutes_exercised == 45
    assert result.exercise.total_workouts_logged == 1
    assert "test:aggregates" in redis_fake.store


async def test_aggregates_are_cached_until_a_write(
    redis_fake: RedisFake, settings: Settings
) -> None:
    """Repeated requests reuse the snapshot until the data version changes."""

    cache = AggregationCache()
    use_case = _aggregates_use_case(redis_fake, settings, cache=cache)
    first = await use_case(14, "Europe/Prague")
    second = await use_case(14, "Europe/Prague")
    assert second is first
    assert redis_fake.call_count("mget") == 3

    logs = create_daily_log_adapter(redis=redis_fake, settings=settings)
    await logs.save_record(make_record(13, water_liters=2))
    third = await use_case(14, "Europe/Prague")
    assert third is not first
    assert third.simple_metrics.avg_water_liters == pytest.approx(2 / 14)


async def test_long_windows_run_in_worker_thread(
    redis_fake: RedisFake, settings: Settings, monkeypatch: pytest.MonkeyPatch
) -> None:
    calls = []

    async def fake_to_thread(func, *args, **kwargs):
        calls.append(kwargs["days"])
        return func(*args, **kwargs)

    monkeypatch.setattr("healthlog.application.aggregation.asyncio.to_thread", fake_to_thread)
    use_case = _aggregates_use_case(redis_fake, settings, offload_threshold_days=30)

    await use_case(14, "Europe/Prague")
    await use_case(60, "Europe/Prague")

    assert calls == [60]


async def test_analytics_summary_empty_without_activity(
    redis_fake: RedisFake, settings: Settings
) -> None:
    use_case = GetAnalyticsSummaryUseCase(
        daily_logs=create_daily_log_adapter(redis=redis_fake, settings=settings),
        goals=create_user_goals_adapter(redis=redis_fake, settings=settings),
        aggregates=_aggregates_use_case(redis_fake, settings),
        time_provider=fixed_time,
    )
    summary = await use_case(7, "Europe/Prague")
    assert not summary.has_data
    assert summary.period_summary == "Start tracking to see your analytics"


async def test_analytics_summary_compares_with_previous_period(
    redis_fake: RedisFake, settings: Settings
) -> None:
    """The period before the requested one becomes the comparison baseline."""

    logs = create_daily_log_adapter(redis=redis_fake, settings=settings)
    for offset in range(7, 14):
        await logs.save_record(
            make_record(offset, water_liters=2.5, exercise_minutes=30, sunlight_minutes=20, sleep_hours=8)
        )
    for offset in range(0, 7):
        await logs.save_record(make_record(offset, water_liters=0.5))

    use_case = GetAnalyticsSummaryUseCase(
        daily_logs=logs,
        goals=create_user_goals_adapter(redis=redis_fake, settings=settings),
        aggregates=_aggregates_use_case(redis_fake, settings),
        time_provider=fixed_time,
    )
    summary = await use_case(7, "Europe/Prague")

    assert summary.days_tracked == 7
    assert summary.perfect_days == 7
    assert summary.completion_trend.value == "increasing"
    assert summary.current_streak == 7


async def test_stored_analysis_flags_newer_aggregates(
    redis_fake: RedisFake, settings: Settings
) -> None:
    analysis_repo = create_analysis_adapter(redis=redis_fake, settings=settings)
    use_case = GetStoredAnalysisUseCase(analysis_repo)
    assert await use_case() is None

    old = NOW - timedelta(days=1)
    await analysis_repo.save_analysis(
        StoredAIAnalysis(generated_at=old, data_timestamp=old, recommendations=["Walk more"])
    )
    result = await use_case()
    assert result is not None and not result.needs_regeneration

    await _aggregates_use_case(redis_fake, settings)(14, "Europe/Prague")
    result = await use_case()
    assert result is not None and result.needs_regeneration


async def test_list_records_rejects_inverted_range(
    redis_fake: RedisFake, settings: Settings
) -> None:
    use_case = ListDailyRecordsUseCase(create_daily_log_adapter(redis=redis_fake, settings=settings))
    with pytest.raises(InvalidDateRange):
        await use_case(TODAY, START)


async def test_daily_nutrition_for_a_day(redis_fake: RedisFake, settings: Settings) -> None:
    logs = create_daily_log_adapter(redis=redis_fake, settings=settings)
    await logs.save_record(
        make_record(foods=[make_food("Steak", calories=700, protein=60), make_food("Rice", calories=300)])
    )
    use_case = GetDailyNutritionUseCase(logs, time_provider=fixed_time)

    result = await use_case(START, "Europe/Prague")

    assert result.entry_count == 2
    assert result.totals.calories == pytest.approx(1000)
    assert "Protein" not in [d.name for d in result.deficiencies]
    assert result.percent_of_daily_value["calories"] == pytest.approx(50)
    assert result.part_of_day == "morning"


async def test_nutrition_overview_ends_today(redis_fake: RedisFake, settings: Settings) -> None:
    logs = create_daily_log_adapter(redis=redis_fake, settings=settings)
    await logs.save_record(make_record(13, foods=[make_food(calories=600, protein=20)]))
    await logs.save_record(make_record(12, foods=[make_food(calories=1400, protein=20)]))
    await logs.save_record(make_record(0, foods=[make_food(calories=5000)]))
    use_case = GetNutritionOverviewUseCase(logs, time_provider=fixed_time)

    result = await use_case(7, "Europe/Prague")

    assert result.overview.days_analyzed == 7
    assert result.overview.days_with_data == 2
    assert result.overview.today_intake.calories == pytest.approx(600)
    assert result.overview.average_intake.calories == pytest.approx(1000)
    assert result.summary == result.overview.to_ai_summary()


async def test_list_records_rejects_ranges_longer_than_a_year(
    redis_fake: RedisFake, settings: Settings
) -> None:
    use_case = ListDailyRecordsUseCase(create_daily_log_adapter(redis=redis_fake, settings=settings))
    with pytest.raises(InvalidDateRange):
        await use_case(START, START + timedelta(days=MAX_RANGE_DAYS))
    assert redis_fake.call_count("mget") == 0

    records = await use_case(START, START + timedelta(days=MAX_RANGE_DAYS - 1))
    assert len(records) == MAX_RANGE_DAYS


async def test_analytics_summary_does_not_cache_data_older_than_its_version(
    redis_fake: RedisFake, settings: Settings
) -> None:
    """A write racing the dashboard read must show up in the next aggregates."""

    logs = create_daily_log_adapter(redis=redis_fake, settings=settings)
    await logs.save_record(make_record(13, exercise_minutes=10))

    read_records = logs.list_records

    async def list_then_write(start, end):
        records = await read_records(start, end)
        await logs.save_record(make_record(13, exercise_minutes=90))
        return records

    logs.list_records = list_then_write
    cache = AggregationCache()
    summary = GetAnalyticsSummaryUseCase(
        daily_logs=logs,
        goals=create_user_goals_adapter(redis=redis_fake, settings=settings),
        aggregates=_aggregates_use_case(redis_fake, settings, cache=cache),
        time_provider=fixed_time,
    )
    await summary(7, "Europe/Prague")

    result = await _aggregates_use_case(redis_fake, settings, cache=cache)(7, "Europe/Prague")
    assert result.exercise.total_minutes_exercised == 90


async def test_aggregate_window_requires_version_with_records(
    redis_fake: RedisFake, settings: Settings
) -> None:
    use_case = _aggregates_use_case(redis_fake, settings)
    with pytest.raises(ValueError):
        await use_case.aggregate_window(START, START, [make_record(0)])
