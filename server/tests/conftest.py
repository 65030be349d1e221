"""Shared fixtures: fake generation flows, a manual clock and sample trends."""

import asyncio
from typing import Optional

import pytest

from insights_hub.schemas import (
    ConsultingPositioning,
    CustomerImpact,
    LearningResource,
    LearningResourcesRequest,
    OpportunitiesRequest,
    OpportunitySet,
    Trend,
    TrendsRequest,
)
from insights_hub.services.cache import CachedFlows


class ManualClock:
    """Clock whose time only moves when told to."""

    def __init__(self, start: float = 1_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_trend(trend_id: str, title: Optional[str] = None, industry: str = "Healthcare") -> Trend:
    title = title or f"Trend {trend_id.upper()}"
    return Trend(
        id=trend_id,
        title=title,
        summary=f"Summary of {title}",
        category="Generative AI",
        date="2026-10-17",
        customer_impact=[
            CustomerImpact(industry=industry, impact_analysis=f"{title} changes {industry.lower()}"),
            CustomerImpact(industry="Retail", impact_analysis="Secondary impact"),
        ],
        consulting_positioning=ConsultingPositioning(strategic_advice="Build a practice"),
        momentum=80,
        market_size="$10B by 2030",
    )


class FakeFlows:
    """Stand-ins for the LLM flows that record every call."""

    def __init__(self, trends: Optional[list[Trend]] = None, resources_per_trend: int = 2):
        self.trends = trends if trends is not None else [make_trend("a"), make_trend("b")]
        self.resources_per_trend = resources_per_trend
        self.trend_calls: list[TrendsRequest] = []
        self.opportunity_calls: list[OpportunitiesRequest] = []
        self.resource_calls: list[LearningResourcesRequest] = []
        self.fail_trends = False
        self.fail_opportunities_for: set[str] = set()
        self.fail_resources_for: set[str] = set()
        self.delay = 0.0

    async def generate_trends(self, request: TrendsRequest) -> list[Trend]:
        self.trend_calls.append(request)
        await asyncio.sleep(self.delay)
        if self.fail_trends:
            raise RuntimeError("trend generation failed")
        return list(self.trends)

    async def suggest_opportunities(self, request: OpportunitiesRequest) -> OpportunitySet:
        self.opportunity_calls.append(request)
        await asyncio.sleep(self.delay)
        for title in self.fail_opportunities_for:
            if f"Trend Title: {title}\n" in request.trend_summary_text:
                raise RuntimeError(f"opportunities failed for {title}")
        return OpportunitySet(
            service_offerings=[f"Service for {request.trend_summary_text[:20]}"],
            partnership_opportunities=["Partner with model vendors"],
            target_clients=["Hospitals"],
            actionable_steps=["Hire two ML engineers."],
        )

    async def generate_resources(self, request: LearningResourcesRequest) -> list[LearningResource]:
        self.resource_calls.append(request)
        await asyncio.sleep(self.delay)
        if request.trend_title in self.fail_resources_for:
            raise RuntimeError(f"resources failed for {request.trend_title}")
        return [
            LearningResource(
                id=f"resource-{i}",
                title=f"{request.trend_title} resource {i}",
                type="Article",
                url=f"https://example.com/{i}",
                tags=["LLM", "Tutorial"],
            )
            for i in range(self.resources_per_trend)
        ]

    def cached(self, clock=None, **kwargs) -> CachedFlows:
        if clock is not None:
            kwargs["clock"] = clock
        return CachedFlows(self.generate_trends, self.suggest_opportunities, self.generate_resources, **kwargs)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def fakes() -> FakeFlows:
    return FakeFlows()


@pytest.fixture
def flows(fakes, clock) -> CachedFlows:
    return fakes.cached(clock=clock)


@pytest.fixture
def trends_request() -> TrendsRequest:
    return TrendsRequest(time_period="past 24 hours", number_of_trends=3)
