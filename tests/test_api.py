"""HTTP surface tests, run in-process against the ASGI app."""

import httpx
import pytest
import pytest_asyncio
from conftest import SlowAdapter, StaticAdapter

from app.api.deps import get_adapters, get_recommendation_engine
from app.core.app import app, lifespan
from app.core.settings import ScoringSettings
from app.services.recommendation.engine import RecommendationEngine

WELLNESS_MESSAGES = [
    "User: I have been doing meditation every morning",
    "User: Yoga classes twice a week",
    "User: Mindfulness helps me stay calm",
    "User: I aim for eight hours of sleep",
]


@pytest_asyncio.fixture
async def client(wellness_items):
    app.dependency_overrides[get_adapters] = lambda: [SlowAdapter("slow"), StaticAdapter("static", wellness_items)]
    app.dependency_overrides[get_recommendation_engine] = lambda: RecommendationEngine(
        ScoringSettings(source_timeout=0.05)
    )
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
        yield http
    app.dependency_overrides.clear()


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestProfileEndpoint:
    @pytest.mark.asyncio
    async def test_builds_profile(self, client):
        response = await client.post("/profile", json={"messages": WELLNESS_MESSAGES})
        assert response.status_code == 200
        body = response.json()
        assert body["archetype"] == "Visionary"
        assert body["categories"][0]["label"] == "Wellness"
        assert 0 <= body["confidence"] <= 100

    @pytest.mark.asyncio
    async def test_insufficient_signal_is_422_with_count(self, client):
        response = await client.post("/profile", json={"messages": WELLNESS_MESSAGES[:2]})
        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail["observed"] == 2
        assert detail["required"] == 3
        assert "2 messages found" in detail["message"]

    @pytest.mark.asyncio
    async def test_transcript_input(self, client):
        transcript = "\n".join(WELLNESS_MESSAGES)
        response = await client.post("/profile", json={"conversation_text": transcript})
        assert response.status_code == 200
        assert response.json()["categories"][0]["label"] == "Wellness"


class TestRecommendationsEndpoint:
    @pytest.mark.asyncio
    async def test_from_evidence(self, client):
        response = await client.post("/recommendations", json={"evidence": {"messages": WELLNESS_MESSAGES}})
        assert response.status_code == 200
        body = response.json()
        assert body["profile"]["archetype"] == "Visionary"
        recommendations = body["recommendations"]
        assert len(recommendations) == 3
        assert all(r["category_group"] == "Wellness" for r in recommendations)
        assert all(0 <= r["match_score"] <= 100 for r in recommendations)

    @pytest.mark.asyncio
    async def test_from_existing_profile(self, client):
        profile = (await client.post("/profile", json={"messages": WELLNESS_MESSAGES})).json()
        response = await client.post("/recommendations", json={"profile": profile})
        assert response.status_code == 200
        assert response.json()["profile"] == profile

    @pytest.mark.asyncio
    async def test_requires_profile_or_evidence(self, client):
        response = await client.post("/recommendations", json={})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_insufficient_evidence(self, client):
        response = await client.post("/recommendations", json={"evidence": {"messages": ["User: hi"]}})
        assert response.status_code == 422
        assert response.json()["detail"]["observed"] == 1


class ClosingAdapter(StaticAdapter):
    def __init__(self, name: str, items):
        super().__init__(name, items)
        self.closed = False

    async def close(self) -> None:
        self.closed = True


class TestLifespanAdapters:
    @pytest.mark.asyncio
    async def test_requests_use_lifespan_adapters_which_are_closed_on_shutdown(self, monkeypatch, wellness_items):
        adapter = ClosingAdapter("static", wellness_items)
        monkeypatch.setattr("app.core.app.build_default_adapters", lambda: [adapter])
        app.dependency_overrides[get_recommendation_engine] = lambda: RecommendationEngine(ScoringSettings())
        try:
            async with lifespan(app):
                transport = httpx.ASGITransport(app=app)
                async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
                    response = await http.post("/recommendations", json={"evidence": {"messages": WELLNESS_MESSAGES}})
                assert response.status_code == 200
                assert len(adapter.calls) == 1
                assert not adapter.closed
        finally:
            app.dependency_overrides.clear()
        assert adapter.closed
