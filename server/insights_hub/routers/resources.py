"""Resources endpoint - Learning resources curated for today's trends."""

import asyncio
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from ..config import get_settings
from ..dependencies import default_trends_request, get_flows
from ..schemas import LearningResource, Trend
from ..services.cache import CachedFlows
from ..services.priming import resources_request_for, stamp_trend_id
from ..services.search import filter_resources

logger = logging.getLogger(__name__)

router = APIRouter(tags=["resources"])


@router.get("/resources")
async def get_resources(
    trend_id: Optional[str] = Query(None, alias="trendId"),
    resource_type: Optional[str] = Query(None, alias="type"),
    tag: Optional[str] = Query(None),
    query: Optional[str] = Query(None),
    flows: CachedFlows = Depends(get_flows),
):
    """Get learning resources for the current trends, optionally filtered."""
    settings = get_settings()

    try:
        trends = await flows.get_or_generate_trends(default_trends_request())
    except Exception as e:
        logger.error("Failed to load learning resources: %s", e)
        raise HTTPException(status_code=502, detail=f"Failed to generate AI trends: {e}")

    async def resources_for(trend: Trend) -> list[LearningResource]:
        try:
            generated = await flows.get_or_generate_learning_resources(
                resources_request_for(trend, settings.resources_per_trend)
            )
        except Exception as e:
            logger.warning("Failed to generate resources for trend %s: %s", trend.id, e)
            return []
        return stamp_trend_id(generated, trend.id)

    batches = await asyncio.gather(*(resources_for(trend) for trend in trends))
    resources = [resource for batch in batches for resource in batch]

    return {
        "resources": filter_resources(
            resources,
            trend_id=trend_id,
            resource_type=resource_type,
            tag=tag,
            query=query,
        ),
        "total": len(resources),
    }
