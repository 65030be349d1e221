"""Dashboard endpoint - Trends, a strategy highlight and featured resources in one call."""

import asyncio
import logging
from fastapi import APIRouter, Depends

from ..config import get_settings
from ..dependencies import default_trends_request, get_flows
from ..schemas import OpportunitiesRequest, PrimedData, TrendOpportunities
from ..services.cache import CachedFlows
from ..services.priming import opportunity_summary_text, prime_all, resources_request_for, stamp_trend_id

logger = logging.getLogger(__name__)

router = APIRouter(tags=["dashboard"])

FEATURED_RESOURCES = 3


@router.get("/dashboard")
async def get_dashboard(flows: CachedFlows = Depends(get_flows)):
    """Prime the cache and return the dashboard snapshot.

    Priming errors do not fail the request: they are reported in ``error``
    alongside whatever data could be loaded.
    """
    settings = get_settings()
    error = None

    try:
        primed = await prime_all(flows, default_trends_request(), settings.resources_per_trend)
    except Exception as e:
        logger.error("Dashboard: error during cache priming: %s", e)
        error = str(e) or "An unknown error occurred during initial data priming."
        primed = PrimedData()

    trends = primed.trends
    opportunities = primed.opportunities
    resources = primed.resources

    if trends:
        # Redundant re-fetch through the cache when priming left a section empty
        if all(op.data is None for op in opportunities):
            logger.info("Dashboard: opportunities missing after priming, fetching directly")
            try:
                results = await asyncio.gather(*(
                    flows.get_or_generate_opportunities(
                        OpportunitiesRequest(trend_summary_text=opportunity_summary_text(trend))
                    )
                    for trend in trends
                ))
                opportunities = [
                    TrendOpportunities(trend_id=trend.id, data=data)
                    for trend, data in zip(trends, results)
                ]
            except Exception as e:
                logger.warning("Dashboard: fallback opportunities fetch failed: %s", e)
                error = error or str(e)

        if not resources:
            logger.info("Dashboard: resources missing after priming, fetching directly")
            try:
                batches = await asyncio.gather(*(
                    flows.get_or_generate_learning_resources(
                        resources_request_for(trend, settings.resources_per_trend)
                    )
                    for trend in trends
                ))
                resources = [
                    resource
                    for trend, batch in zip(trends, batches)
                    for resource in stamp_trend_id(batch, trend.id)
                ]
            except Exception as e:
                logger.warning("Dashboard: fallback resources fetch failed: %s", e)
                error = error or str(e)

    highlight = next((op.data for op in opportunities if op.data is not None), None)

    return {
        "trends": trends[:settings.default_number_of_trends],
        "opportunities": opportunities,
        "strategyHighlight": highlight,
        "featuredResources": resources[:FEATURED_RESOURCES],
        "error": error,
    }
