"""TTL-based memoization of the trend, opportunity and learning-resource flows."""

import asyncio
import json
import logging
import time
from typing import Any, Awaitable, Callable, Generic, Hashable, Optional, TypeVar
from dataclasses import dataclass, field

from ..schemas import (
    LearningResource,
    LearningResourcesRequest,
    OpportunitiesRequest,
    OpportunitySet,
    Trend,
    TrendsRequest,
)

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")

TrendsGenerator = Callable[[TrendsRequest], Awaitable[list[Trend]]]
OpportunitiesGenerator = Callable[[OpportunitiesRequest], Awaitable[OpportunitySet]]
ResourcesGenerator = Callable[[LearningResourcesRequest], Awaitable[list[LearningResource]]]

DEFAULT_TTL = 3600  # 1 hour


@dataclass
class CacheEntry(Generic[InputT, OutputT]):
    """A single memoized generator result."""
    input: InputT
    output: OutputT
    timestamp: float

    def is_fresh(self, now: float, ttl: float) -> bool:
        return now - self.timestamp < ttl


@dataclass
class CacheStore:
    """In-memory slots for the three generator kinds.

    The trends slot holds at most one entry. Opportunities and resources are
    keyed by canonical request keys and grow without bound; they only empty
    when the trends slot is rewritten.
    """
    trends: Optional[CacheEntry[TrendsRequest, list[Trend]]] = None
    opportunities: dict[str, CacheEntry[OpportunitiesRequest, OpportunitySet]] = field(default_factory=dict)
    resources: dict[str, CacheEntry[LearningResourcesRequest, list[LearningResource]]] = field(default_factory=dict)

    def put_trends(self, entry: CacheEntry[TrendsRequest, list[Trend]]) -> None:
        """Replace the trends entry and drop everything derived from the old one."""
        # No await between these statements: readers never see a half-applied refresh.
        self.trends = entry
        self.opportunities.clear()
        self.resources.clear()

    def stats(self) -> dict[str, Any]:
        return {
            "trendsCached": self.trends is not None,
            "trendsCachedAt": self.trends.timestamp if self.trends else None,
            "opportunities": len(self.opportunities),
            "resources": len(self.resources),
        }


def _canonical(payload: dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True, separators=(",", ":"))


def opportunities_key(request: OpportunitiesRequest) -> str:
    """Cache key for opportunities: the trend summary text only."""
    return _canonical({"trendSummaryText": request.trend_summary_text})


def resources_key(request: LearningResourcesRequest) -> str:
    """Cache key for learning resources: trend title and summary only.

    Category and number of resources are left out on purpose, so requests for
    the same trend share one entry whatever count they ask for.
    """
    return _canonical({"trendTitle": request.trend_title, "trendSummary": request.trend_summary})


class CachedFlows:
    """Memoizing wrapper around the three generation flows.

    Each ``get_or_generate_*`` method has the same signature as the flow it
    wraps. Generator exceptions propagate to the caller and leave the store
    untouched.
    """

    def __init__(
        self,
        generate_trends: TrendsGenerator,
        suggest_opportunities: OpportunitiesGenerator,
        generate_resources: ResourcesGenerator,
        *,
        store: Optional[CacheStore] = None,
        trends_ttl: float = DEFAULT_TTL,
        opportunities_ttl: float = DEFAULT_TTL,
        resources_ttl: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.time,
        dedupe_in_flight: bool = True,
        timeout: Optional[float] = None,
    ):
        self._generate_trends = generate_trends
        self._suggest_opportunities = suggest_opportunities
        self._generate_resources = generate_resources
        self.store = store if store is not None else CacheStore()
        self.trends_ttl = trends_ttl
        self.opportunities_ttl = opportunities_ttl
        self.resources_ttl = resources_ttl
        self.clock = clock
        self.dedupe_in_flight = dedupe_in_flight
        self.timeout = timeout
        self._in_flight: dict[str, dict[Hashable, asyncio.Task]] = {
            "trends": {},
            "opportunities": {},
            "resources": {},
        }

    async def get_or_generate_trends(self, request: TrendsRequest) -> list[Trend]:
        now = self.clock()
        entry = self.store.trends
        if entry and entry.input == request and entry.is_fresh(now, self.trends_ttl):
            logger.info("Serving trends from cache")
            return entry.output

        async def produce() -> list[Trend]:
            logger.info("Fetching new trends for %s", request.time_period)
            output = await self._call(self._generate_trends, request)
            self.store.put_trends(CacheEntry(input=request, output=output, timestamp=now))
            logger.info("Cached %d trends; opportunities and resources cleared", len(output))
            return output

        return await self._single_flight("trends", request, produce)

    async def get_or_generate_opportunities(self, request: OpportunitiesRequest) -> OpportunitySet:
        key = opportunities_key(request)
        preview = request.trend_summary_text[:30]
        now = self.clock()
        entry = self.store.opportunities.get(key)
        if entry and entry.is_fresh(now, self.opportunities_ttl):
            logger.info("Serving opportunities for '%s...' from cache", preview)
            return entry.output

        async def produce() -> OpportunitySet:
            logger.info("Fetching new opportunities for '%s...'", preview)
            output = await self._call(self._suggest_opportunities, request)
            self.store.opportunities[key] = CacheEntry(input=request, output=output, timestamp=now)
            return output

        return await self._single_flight("opportunities", key, produce)

    async def get_or_generate_learning_resources(
        self, request: LearningResourcesRequest
    ) -> list[LearningResource]:
        key = resources_key(request)
        now = self.clock()
        entry = self.store.resources.get(key)
        if entry and entry.is_fresh(now, self.resources_ttl):
            logger.info("Serving learning resources for '%s' from cache", request.trend_title)
            return entry.output

        async def produce() -> list[LearningResource]:
            logger.info("Fetching new learning resources for '%s'", request.trend_title)
            output = await self._call(self._generate_resources, request)
            self.store.resources[key] = CacheEntry(input=request, output=output, timestamp=now)
            return output

        return await self._single_flight("resources", key, produce)

    async def _call(self, generator: Callable[[InputT], Awaitable[OutputT]], request: InputT) -> OutputT:
        if self.timeout is None:
            return await generator(request)
        return await asyncio.wait_for(generator(request), timeout=self.timeout)

    async def _single_flight(self, slot: str, key: Hashable, produce: Callable[[], Awaitable[OutputT]]) -> OutputT:
        """Run ``produce`` unless an identical miss is already being generated.

        With deduplication off, concurrent misses each call the generator and
        the last write wins.
        """
        if not self.dedupe_in_flight:
            return await produce()

        pending = self._in_flight[slot]
        task = pending.get(key)
        # A finished task may still be registered until its done-callback runs.
        if task is None or task.done():
            task = asyncio.ensure_future(produce())
            pending[key] = task
            task.add_done_callback(lambda t: _release(pending, key, t))
        else:
            logger.debug("Joining in-flight %s generation", slot)
        return await asyncio.shield(task)


def _release(pending: dict[Hashable, asyncio.Task], key: Hashable, task: asyncio.Task) -> None:
    if pending.get(key) is task:
        del pending[key]
    # Mark the outcome retrieved when every waiter was cancelled.
    if not task.cancelled():
        task.exception()
