"""Cache priming - fetch trends, then enrich every trend concurrently."""

import asyncio
import logging
from typing import Optional

from ..schemas import (
    LearningResource,
    LearningResourcesRequest,
    OpportunitiesRequest,
    OpportunitySet,
    PrimedData,
    Trend,
    TrendOpportunities,
    TrendsRequest,
)
from .cache import CachedFlows

logger = logging.getLogger(__name__)

DEFAULT_RESOURCES_PER_TREND = 3


def opportunity_summary_text(trend: Trend) -> str:
    """Text blob sent to the opportunities flow for a trend."""
    highlights = ", ".join(
        f"{impact.industry}: {impact.impact_analysis}" for impact in trend.customer_impact[:1]
    )
    return (
        f"Trend Title: {trend.title}\n"
        f"Summary: {trend.summary}\n"
        f"Category: {trend.category}\n"
        f"Customer Impact Highlights: {highlights}"
    )


def resources_request_for(trend: Trend, number_of_resources: int) -> LearningResourcesRequest:
    return LearningResourcesRequest(
        trend_title=trend.title,
        trend_summary=trend.summary,
        trend_category=trend.category,
        number_of_resources=number_of_resources,
    )


def stamp_trend_id(resources: list[LearningResource], trend_id: str) -> list[LearningResource]:
    """Copy resources with their originating trend id; cached objects stay untouched."""
    return [resource.model_copy(update={"trend_id": trend_id}) for resource in resources]


async def _opportunities_for(flows: CachedFlows, trend: Trend) -> TrendOpportunities:
    request = OpportunitiesRequest(trend_summary_text=opportunity_summary_text(trend))
    data: Optional[OpportunitySet] = None
    try:
        data = await flows.get_or_generate_opportunities(request)
    except Exception as e:
        logger.warning("Failed to generate opportunities for trend %s during cache priming: %s", trend.id, e)
    return TrendOpportunities(trend_id=trend.id, data=data)


async def _resources_for(flows: CachedFlows, trend: Trend, number_of_resources: int) -> list[LearningResource]:
    request = resources_request_for(trend, number_of_resources)
    try:
        resources = await flows.get_or_generate_learning_resources(request)
    except Exception as e:
        logger.warning("Failed to generate learning resources for trend %s during cache priming: %s", trend.id, e)
        return []
    return stamp_trend_id(resources, trend.id)


async def _enrich(
    flows: CachedFlows, trend: Trend, number_of_resources: int
) -> tuple[TrendOpportunities, list[LearningResource]]:
    opportunities, resources = await asyncio.gather(
        _opportunities_for(flows, trend),
        _resources_for(flows, trend, number_of_resources),
    )
    return opportunities, resources


async def prime_all(
    flows: CachedFlows,
    request: TrendsRequest,
    number_of_resources: int = DEFAULT_RESOURCES_PER_TREND,
) -> PrimedData:
    """Populate all three cache slots and return a consistent snapshot.

    A trend generation failure propagates. Opportunity and resource failures
    are isolated per trend: the trend gets ``data=None`` and no resources.
    """
    logger.info("Priming AI data cache")
    trends = await flows.get_or_generate_trends(request)

    if not trends:
        logger.info("No trends found to prime opportunities and resources")
        return PrimedData(trends=[], opportunities=[], resources=[])

    logger.info("Cache primed with %d trends, fetching opportunities and resources", len(trends))
    enriched = await asyncio.gather(*(_enrich(flows, trend, number_of_resources) for trend in trends))

    opportunities = [item[0] for item in enriched]
    resources = [resource for item in enriched for resource in item[1]]

    logger.info(
        "Cache priming complete: opportunities for %d/%d trends, %d resources",
        sum(1 for op in opportunities if op.data is not None),
        len(trends),
        len(resources),
    )
    return PrimedData(trends=trends, opportunities=opportunities, resources=resources)
