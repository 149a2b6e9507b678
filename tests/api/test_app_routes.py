import inspect
import random

import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.routing import APIRoute
from httpx import ASGITransport, AsyncClient

from config.storage import ENTRIES_KEY
from features.journal.dependencies import get_journal_store
from features.profile.dependencies import get_profile_store
from features.sentiment.dependencies import get_sentiment_service
from features.sentiment.service import SentimentService
from main import create_app


@pytest.fixture
def app(journal_store, profile_store) -> FastAPI:
    app = create_app()
    app.dependency_overrides[get_journal_store] = lambda: journal_store
    app.dependency_overrides[get_profile_store] = lambda: profile_store
    app.dependency_overrides[get_sentiment_service] = lambda: SentimentService(rng=random.Random(0))
    return app


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


async def _save(client: AsyncClient, content: str, mood: int) -> dict:
    response = await client.post("/api/v1/journal/entries", json={"content": content, "mood": mood})
    assert response.status_code == 200
    return response.json()["data"]


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_save_and_list_entries(client):
    saved = await _save(client, "I had a wonderful, peaceful morning", 7)

    assert saved["sentiment"] == "positive"
    assert saved["moodScore"] == 8
    assert saved["isDemo"] is True

    response = await client.get("/api/v1/journal/entries")
    body = response.json()
    assert body["success"] is True
    assert body["meta"]["count"] == 1
    assert body["data"][0]["id"] == saved["id"]

    chat = (await client.get("/api/v1/journal/chat")).json()
    assert chat["data"][0]["type"] == "ai"
    assert "Your mood score of 7/10 suggests you're feeling great." in chat["data"][0]["content"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [{"content": "", "mood": 5}, {"content": "ok", "mood": 11}, {"content": "x" * 1001, "mood": 5}, {"mood": 5}],
)
async def test_invalid_entry_is_rejected(client, body):
    response = await client.post("/api/v1/journal/entries", json=body)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_blank_entry_returns_validation_envelope(client):
    response = await client.post("/api/v1/journal/entries", json={"content": "   ", "mood": 5})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["data"] == {"field": "content"}


@pytest.mark.asyncio
async def test_chat_exchange(client):
    await _save(client, "Busy day", 5)

    response = await client.post("/api/v1/journal/chat", json={"message": "How do I unwind?"})

    body = response.json()
    assert response.status_code == 200
    assert body["data"]["userMessage"]["content"] == "How do I unwind?"
    assert body["data"]["reply"]["type"] == "ai"
    assert body["data"]["isDemo"] is True


@pytest.mark.asyncio
async def test_analytics_follow_new_entries(client):
    empty = (await client.get("/api/v1/analytics/summary")).json()
    assert empty["data"]["totalEntries"] == 0

    await _save(client, "happy and excited", 8)
    await _save(client, "a calm afternoon", 6)

    summary = (await client.get("/api/v1/analytics/summary")).json()["data"]
    assert summary["totalEntries"] == 2
    assert summary["averageMood"] == 7
    assert summary["streakDays"] == 1
    assert summary["todaysMood"] == 6

    trend = (await client.get("/api/v1/analytics/mood-trend")).json()
    assert [point["userMood"] for point in trend["data"]] == [8, 6]

    emotions = (await client.get("/api/v1/analytics/emotions")).json()["data"]
    assert {item["name"] for item in emotions} >= {"Content", "Calm"}

    weekly = (await client.get("/api/v1/analytics/sentiment-weekly")).json()["data"]
    assert weekly[-1]["positive"] == 1
    assert weekly[-1]["neutral"] == 1

    insights = (await client.get("/api/v1/analytics/insights")).json()
    assert insights["success"] is True

    dashboard = (await client.get("/api/v1/analytics/dashboard")).json()["data"]
    assert dashboard["summary"]["totalEntries"] == 2


@pytest.mark.asyncio
async def test_calendar_endpoint(client):
    response = await client.get("/api/v1/analytics/calendar", params={"year": 2024, "month": 2})

    data = response.json()["data"]
    assert data["monthName"] == "February"
    assert len(data["days"]) == 29
    assert data["firstWeekday"] == 4

    assert (await client.get("/api/v1/analytics/calendar", params={"month": 13})).status_code == 422


@pytest.mark.asyncio
async def test_profile_and_settings(client):
    assert (await client.get("/api/v1/profile")).json()["data"] is None

    saved = await client.put("/api/v1/profile", json={"name": "Robin", "email": "robin@example.com"})
    assert saved.status_code == 200
    assert (await client.get("/api/v1/profile")).json()["data"] == {"name": "Robin", "email": "robin@example.com"}

    defaults = (await client.get("/api/v1/profile/settings")).json()["data"]
    assert defaults["notifications"] == {"dailyReminders": True, "weeklyReports": True, "moodAlerts": False}

    await client.put("/api/v1/profile/settings", json={"privacy": {"dataSharing": True}})
    updated = (await client.get("/api/v1/profile/settings")).json()["data"]
    assert updated["privacy"] == {"dataSharing": True, "analytics": True}


@pytest.mark.asyncio
@pytest.mark.parametrize("email", ["a b@c", "x@y@z", "a@.", "<script>@x"])
async def test_profile_rejects_malformed_email(client, email):
    response = await client.put("/api/v1/profile", json={"name": "Robin", "email": email})

    assert response.status_code == 422
    assert (await client.get("/api/v1/profile")).json()["data"] is None


def test_storage_only_routes_are_sync_so_they_run_in_the_threadpool(app):
    endpoints = {
        (method, route.path): route.endpoint
        for route in app.routes
        if isinstance(route, APIRoute)
        for method in route.methods
    }

    blocking = [
        ("GET", "/api/v1/journal/entries"),
        ("GET", "/api/v1/journal/chat"),
        ("GET", "/api/v1/profile"),
        ("PUT", "/api/v1/profile"),
        ("GET", "/api/v1/profile/settings"),
        ("PUT", "/api/v1/profile/settings"),
        ("DELETE", "/api/v1/profile/data"),
        ("DELETE", "/api/v1/profile"),
    ]
    for key in blocking:
        assert not inspect.iscoroutinefunction(endpoints[key]), key


@pytest.mark.asyncio
async def test_clear_data_and_delete_account(client):
    await client.put("/api/v1/profile", json={"name": "Robin", "email": "robin@example.com"})
    await _save(client, "one more entry", 4)

    cleared = await client.delete("/api/v1/profile/data")
    assert cleared.json()["message"] == "All data has been cleared"
    assert (await client.get("/api/v1/journal/entries")).json()["data"] == []
    assert (await client.get("/api/v1/journal/chat")).json()["data"] == []
    assert (await client.get("/api/v1/analytics/summary")).json()["data"]["totalEntries"] == 0
    assert (await client.get("/api/v1/profile")).json()["data"]["name"] == "Robin"

    await client.delete("/api/v1/profile")
    assert (await client.get("/api/v1/profile")).json()["data"] is None


@pytest.mark.asyncio
async def test_corrupt_storage_returns_error_envelope(client, storage):
    storage.save(ENTRIES_KEY, "not a list")

    response = await client.get("/api/v1/journal/entries")

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["data"] == {"operation": "load"}
