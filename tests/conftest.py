"""Shared test fixtures and doubles."""

from __future__ import annotations

import fnmatch
import sys
from collections.abc import AsyncIterator, Iterator
from pathlib import Path
from typing import Dict, List, Optional

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from healthlog import main
from healthlog.platform.clients import RedisClient, get_redis
from healthlog.platform.config import Settings, get_settings
from healthlog.platform.wiring import get_aggregation_cache
from healthlog.storage.cache import AggregationCache


class RedisFake(RedisClient):
    """In-memory Redis double that records interactions."""

    def __init__(self) -> None:
        self.store: Dict[str, str] = {}
        self.expirations: Dict[str, Optional[int]] = {}
        self.calls: List[str] = []
        self._last_set: tuple[str, str, Optional[int]] | None = None
        self._raises: Exception | None = None

    def fail_with(self, exc: Exception) -> "RedisFake":
        """Make every following call raise ``exc``."""

        self._raises = exc
        return self

    def assert_last_set(self, key: str, value: Optional[str] = None) -> None:
        """Assert the most recent ``set`` call matched the provided values."""

        assert self._last_set is not None, "No set() call was recorded"
        last_key, last_value, _ = self._last_set
        assert last_key == key, f"Expected last set for {key!r}, saw {last_key!r}"
        if value is not None:
            assert last_value == value, f"Expected last set value {value!r}, saw {last_value!r}"

    def call_count(self, name: str) -> int:
        return self.calls.count(name)

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self._raises is not None:
            raise self._raises

    def get(self, key: str) -> Optional[str]:
        self._record("get")
        return self.store.get(key)

    def set(self, key: str, value: str, ex: Optional[int] = None) -> None:
        self._record("set")
        self._last_set = (key, value, ex)
        self.store[key] = value
        self.expirations[key] = ex

    def mget(self, *keys: str) -> List[Optional[str]]:
        self._record("mget")
        return [self.store.get(key) for key in keys]

    def delete(self, *keys: str) -> int:
        self._record("delete")
        removed = 0
        for key in keys:
            if self.store.pop(key, None) is not None:
                removed += 1
        return removed

    def incr(self, key: str) -> int:
        self._record("incr")
        value = int(self.store.get(key, "0")) + 1
        self.store[key] = str(value)
        return value

    def keys(self, pattern: str) -> List[str]:
        self._record("keys")
        return [key for key in self.store if fnmatch.fnmatchcase(key, pattern)]


@pytest.fixture
def settings() -> Settings:
    """Canonical settings instance reused across tests."""

    return Settings(
        api_key="test-key",
        upstash_redis_rest_url="https://redis.example.com",
        upstash_redis_rest_token="redis-token",
        redis_key_prefix="test",
    )


@pytest.fixture
def redis_fake() -> RedisFake:
    return RedisFake()


@pytest.fixture
def aggregation_cache() -> AggregationCache:
    return AggregationCache()


@pytest.fixture
def app(
    settings: Settings,
    redis_fake: RedisFake,
    aggregation_cache: AggregationCache,
) -> Iterator[FastAPI]:
    """Configured FastAPI application instance for integration tests."""

    app = main.app
    overrides = {
        get_settings: lambda: settings,
        get_redis: lambda: redis_fake,
        get_aggregation_cache: lambda: aggregation_cache,
    }
    app.dependency_overrides.update(overrides)
    try:
        yield app
    finally:
        for dependency in overrides:
            app.dependency_overrides.pop(dependency, None)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Async HTTP client bound to the FastAPI app."""

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as api_client:
        yield api_client
