from datetime import datetime, timedelta, timezone

from healthlog.models.aggregates import AggregatedUserData
from healthlog.storage.cache import AggregationCache
from tests.builders import START

END = START + timedelta(days=13)


def _snapshot(days: int = 14) -> AggregatedUserData:
    return AggregatedUserData(
        last_updated=datetime(2025, 1, 20, tzinfo=timezone.utc), days_analyzed=days
    )


def test_miss_then_hit() -> None:
    cache = AggregationCache()
    assert cache.get(START, END, 1) is None
    snapshot = _snapshot()
    cache.put(START, END, 1, snapshot)
    assert cache.get(START, END, 1) is snapshot
    assert len(cache) == 1


def test_windows_are_cached_separately() -> None:
    cache = AggregationCache()
    cache.put(START, END, 1, _snapshot(14))
    cache.put(START, START + timedelta(days=6), 1, _snapshot(7))
    assert cache.get(START, START + timedelta(days=6), 1).days_analyzed == 7
    assert len(cache) == 2


def test_newer_version_evicts_older_entries() -> None:
    cache = AggregationCache()
    cache.put(START, END, 1, _snapshot())
    assert cache.get(START, END, 2) is None
    assert len(cache) == 0


def test_stale_put_is_ignored() -> None:
    cache = AggregationCache()
    cache.get(START, END, 3)
    cache.put(START, END, 2, _snapshot())
    assert len(cache) == 0


def test_clear() -> None:
    cache = AggregationCache()
    cache.put(START, END, 1, _snapshot())
    cache.clear()
    assert cache.get(START, END, 1) is None
