"""API tests against an app wired to fake generation flows."""

import pytest
from fastapi.testclient import TestClient

import insights_hub.routers.trends as trends_router
from insights_hub.main import create_app
from insights_hub.schemas import TrendSummary

from .conftest import FakeFlows


@pytest.fixture
def client(fakes, clock) -> TestClient:
    return TestClient(create_app(flows=fakes.cached(clock=clock)))


class TestStats:

    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_cache_status_after_priming(self, client):
        assert client.get("/api/cache").json()["trendsCached"] is False

        primed = client.post("/api/cache/prime").json()
        assert primed["trends"] == 2
        assert primed["opportunities"] == 2
        assert primed["resources"] == 4

        status = client.get("/api/cache").json()
        assert status["trendsCached"] is True
        assert status["opportunities"] == 2
        assert status["resources"] == 2
        assert status["ttl"]["trends"] == 3600

    def test_prime_failure_is_bad_gateway(self, client, fakes):
        fakes.fail_trends = True
        assert client.post("/api/cache/prime").status_code == 502


class TestDashboard:

    def test_snapshot(self, client, fakes):
        body = client.get("/api/dashboard").json()

        assert body["error"] is None
        assert [t["id"] for t in body["trends"]] == ["a", "b"]
        assert "customerImpact" in body["trends"][0]
        assert body["strategyHighlight"]["serviceOfferings"]
        assert len(body["featuredResources"]) == 3
        assert body["featuredResources"][0]["trendId"] == "a"
        assert [op["trendId"] for op in body["opportunities"]] == ["a", "b"]

    def test_repeat_requests_hit_the_cache(self, client, fakes):
        client.get("/api/dashboard")
        client.get("/api/dashboard")
        assert len(fakes.trend_calls) == 1
        assert len(fakes.opportunity_calls) == 2

    def test_trend_failure_reports_error(self, client, fakes):
        fakes.fail_trends = True
        response = client.get("/api/dashboard")

        assert response.status_code == 200
        body = response.json()
        assert body["error"] == "trend generation failed"
        assert body["trends"] == []
        assert body["strategyHighlight"] is None

    def test_fallback_refetch_reports_error(self, client, fakes):
        fakes.fail_opportunities_for = {"Trend A", "Trend B"}
        body = client.get("/api/dashboard").json()

        assert "opportunities failed" in body["error"]
        assert body["strategyHighlight"] is None
        assert len(body["featuredResources"]) == 3
        # one priming attempt plus one fallback attempt per trend
        assert len(fakes.opportunity_calls) == 4

    def test_fallback_refetches_missing_resources(self, clock):
        fakes = FakeFlows()
        fakes.fail_resources_for = {"Trend A", "Trend B"}
        client = TestClient(create_app(flows=fakes.cached(clock=clock)))

        body = client.get("/api/dashboard").json()

        assert body["featuredResources"] == []
        assert "resources failed" in body["error"]
        assert len(fakes.resource_calls) == 4


class TestTrends:

    def test_list_and_filter(self, client):
        assert client.get("/api/trends").json()["total"] == 2
        assert [t["id"] for t in client.get("/api/trends", params={"trendId": "b"}).json()["trends"]] == ["b"]
        assert client.get("/api/trends", params={"query": "trend a"}).json()["trends"][0]["id"] == "a"

    def test_failure_is_bad_gateway(self, client, fakes):
        fakes.fail_trends = True
        response = client.get("/api/trends")
        assert response.status_code == 502
        assert "trend generation failed" in response.json()["detail"]

    def test_summarize(self, client, monkeypatch):
        async def fake_summarize(news_summary):
            assert news_summary == "A week of agent news"
            return TrendSummary(top_trends=["Agents"], customer_impact=["Faster ops"], consulting_positioning=["Lead"])

        monkeypatch.setattr(trends_router, "summarize_trends", fake_summarize)
        response = client.post("/api/summarize", json={"newsSummary": "A week of agent news"})

        assert response.status_code == 200
        assert response.json()["topTrends"] == ["Agents"]


class TestStrategies:

    def test_one_strategy_per_trend(self, client, fakes):
        fakes.fail_opportunities_for = {"Trend B"}
        body = client.get("/api/strategies").json()

        assert [s["id"] for s in body["strategies"]] == ["strategy-a", "strategy-failed-b"]
        # strategies summarize without customer impact, so they use their own keys
        assert "Customer Impact" not in fakes.opportunity_calls[0].trend_summary_text

    def test_filter_by_trend_id(self, client):
        body = client.get("/api/strategies", params={"trendId": "a"}).json()
        assert [s["trendId"] for s in body["strategies"]] == ["a"]
        assert body["total"] == 2

    def test_strategy_from_trend_data(self, client):
        response = client.post("/api/strategies", json={
            "id": "edge-ai", "title": "Edge AI", "summary": "On-device inference", "category": "Hardware",
        })
        assert response.status_code == 200
        strategy = response.json()["strategies"][0]
        assert strategy["id"] == "strategy-edge-ai"
        assert strategy["newServiceOffering"]["name"].startswith("Service for")


class TestResources:

    def test_resources_are_stamped_and_filterable(self, client):
        body = client.get("/api/resources").json()
        assert body["total"] == 4

        only_b = client.get("/api/resources", params={"trendId": "b"}).json()["resources"]
        assert len(only_b) == 2
        assert {r["trendId"] for r in only_b} == {"b"}

    def test_type_and_tag_filters(self, client):
        assert len(client.get("/api/resources", params={"type": "article"}).json()["resources"]) == 4
        assert client.get("/api/resources", params={"tag": "missing"}).json()["resources"] == []

    def test_failing_trend_is_skipped(self, client, fakes):
        fakes.fail_resources_for = {"Trend A"}
        body = client.get("/api/resources").json()
        assert {r["trendId"] for r in body["resources"]} == {"b"}
