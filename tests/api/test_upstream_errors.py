"""Storage outage handling."""

from __future__ import annotations

import httpx
import pytest

from healthlog.platform.config import Settings
from tests.api.helpers import auth
from tests.conftest import RedisFake

pytestmark = pytest.mark.asyncio

REDIS_REQUEST = httpx.Request("GET", "https://redis.example.com/get/test:goals")


@pytest.mark.parametrize(
    "error",
    [
        pytest.param(httpx.ConnectError("refused", request=REDIS_REQUEST), id="connect"),
        pytest.param(httpx.ReadTimeout("timed out", request=REDIS_REQUEST), id="timeout"),
    ],
)
async def test_unreachable_storage_returns_503(
    client: httpx.AsyncClient, redis_fake: RedisFake, settings: Settings, error: Exception
) -> None:
    """Connection failures surface as a structured 503."""

    redis_fake.fail_with(error)

    response = await client.get("/v2/goals", headers=auth(settings))

    assert response.status_code == 503
    assert response.json() == {
        "error": "UPSTREAM_CONNECTION_FAILED",
        "message": (
            "Could not connect to an upstream dependency service. Please try again shortly."
        ),
        "upstream_host": "redis.example.com",
    }


async def test_health_check_ignores_storage_outage(
    client: httpx.AsyncClient, redis_fake: RedisFake
) -> None:
    redis_fake.fail_with(httpx.ConnectError("refused", request=REDIS_REQUEST))

    response = await client.get("/healthz")

    assert response.status_code == 200
