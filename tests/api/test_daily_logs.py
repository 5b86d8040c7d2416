"""Daily log, goal and activity API integration tests."""

from __future__ import annotations

import json

import httpx
import pytest

from healthlog.platform.config import Settings
from tests.api.helpers import (
    auth,
    days_ago,
    make_daily_log_payload,
    make_exercise_payload,
    make_food_payload,
    make_social_payload,
    stored_dates,
)
from tests.conftest import RedisFake

pytestmark = pytest.mark.asyncio


async def test_save_and_fetch_daily_log(
    client: httpx.AsyncClient, redis_fake: RedisFake, settings: Settings
) -> None:
    """A saved record is returned unchanged and bumps the data version."""

    day = days_ago(0)
    payload = make_daily_log_payload(
        day, food_entries=[make_food_payload("Oatmeal", calories=350, protein=12)]
    )

    response = await client.put(f"/v2/daily-logs/{day}", json=payload, headers=auth(settings))

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": 1}
    redis_fake.assert_last_set(f"test:log:{day}")

    response = await client.get(f"/v2/daily-logs/{day}", headers=auth(settings))

    assert response.status_code == 200
    body = response.json()
    assert body["water_liters"] == 2.0
    assert body["food_entries"][0]["calories"] == 350
    assert body["food_entries"][0]["fiber"] is None


async def test_missing_day_reads_as_empty_record(
    client: httpx.AsyncClient, settings: Settings
) -> None:
    response = await client.get("/v2/daily-logs/2025-03-01", headers=auth(settings))

    assert response.status_code == 200
    assert response.json()["date"] == "2025-03-01"
    assert response.json()["exercise_minutes"] == 0


async def test_save_rejects_mismatched_dates(client: httpx.AsyncClient, settings: Settings) -> None:
    """The body date must match the day in the path."""

    payload = make_daily_log_payload(days_ago(1))

    response = await client.put(f"/v2/daily-logs/{days_ago(0)}", json=payload, headers=auth(settings))

    assert response.status_code == 400


async def test_save_rejects_negative_values(client: httpx.AsyncClient, settings: Settings) -> None:
    day = days_ago(0)
    payload = make_daily_log_payload(day, sleep_hours=-2)

    response = await client.put(f"/v2/daily-logs/{day}", json=payload, headers=auth(settings))

    assert response.status_code == 422


async def test_list_daily_logs_fills_every_day(
    client: httpx.AsyncClient, settings: Settings
) -> None:
    """Ranges return one record per day, oldest first."""

    start, end = days_ago(3), days_ago(0)
    await client.put(
        f"/v2/daily-logs/{days_ago(1)}",
        json=make_daily_log_payload(days_ago(1)),
        headers=auth(settings),
    )

    response = await client.get(
        "/v2/daily-logs",
        params={"start_date": str(start), "end_date": str(end)},
        headers=auth(settings),
    )

    assert response.status_code == 200
    records = response.json()
    assert stored_dates(records) == [str(days_ago(n)) for n in (3, 2, 1, 0)]
    assert [r["exercise_minutes"] for r in records] == [0, 0, 30, 0]


async def test_list_daily_logs_rejects_inverted_range(
    client: httpx.AsyncClient, settings: Settings
) -> None:
    response = await client.get(
        "/v2/daily-logs",
        params={"start_date": str(days_ago(0)), "end_date": str(days_ago(3))},
        headers=auth(settings),
    )

    assert response.status_code == 400


async def test_list_daily_logs_rejects_ranges_longer_than_a_year(
    client: httpx.AsyncClient, redis_fake: RedisFake, settings: Settings
) -> None:
    response = await client.get(
        "/v2/daily-logs",
        params={"start_date": "0001-01-01", "end_date": "9999-12-31"},
        headers=auth(settings),
    )

    assert response.status_code == 400
    assert redis_fake.call_count("mget") == 0


async def test_clear_daily_logs(
    client: httpx.AsyncClient, redis_fake: RedisFake, settings: Settings
) -> None:
    day = days_ago(0)
    await client.put(f"/v2/daily-logs/{day}", json=make_daily_log_payload(day), headers=auth(settings))

    response = await client.delete("/v2/daily-logs", headers=auth(settings))

    assert response.status_code == 200
    assert response.json() == {"status": "cleared", "version": 2}
    assert f"test:log:{day}" not in redis_fake.store


async def test_goals_default_then_update(client: httpx.AsyncClient, settings: Settings) -> None:
    """Goals fall back to defaults until saved."""

    response = await client.get("/v2/goals", headers=auth(settings))
    assert response.status_code == 200
    assert response.json()["water_goal_liters"] == 2.5

    response = await client.put(
        "/v2/goals",
        json={"water_goal_liters": 3.0, "fitness_goal": "buildStrength"},
        headers=auth(settings),
    )
    assert response.status_code == 200

    response = await client.get("/v2/goals", headers=auth(settings))
    assert response.json()["water_goal_liters"] == 3.0
    assert response.json()["fitness_goal"] == "buildStrength"


async def test_log_exercise_and_social_activities(
    client: httpx.AsyncClient, redis_fake: RedisFake, settings: Settings
) -> None:
    """Activities are appended to the list for the day of their timestamp."""

    day = days_ago(0)

    response = await client.post(
        "/v2/exercise-activities", json=make_exercise_payload(day), headers=auth(settings)
    )
    assert response.status_code == 201
    response = await client.post(
        "/v2/social-activities", json=make_social_payload(day), headers=auth(settings)
    )
    assert response.status_code == 201
    assert response.json() == {"status": "ok", "version": 2}

    stored = json.loads(redis_fake.store[f"test:exercise:{day}"])
    assert [item["name"] for item in stored] == ["Morning run"]


async def test_social_activity_rejects_unknown_category(
    client: httpx.AsyncClient, settings: Settings
) -> None:
    payload = make_social_payload(days_ago(0), category="karaoke")

    response = await client.post("/v2/social-activities", json=payload, headers=auth(settings))

    assert response.status_code == 422
