"""Strategies endpoints - Capitalization strategies for today's trends."""

import asyncio
import logging
from typing import Optional
from pydantic import BaseModel, Field
from fastapi import APIRouter, Depends, HTTPException, Query

from ..dependencies import default_trends_request, get_flows
from ..schemas import CapitalizationStrategy, ConsultingPositioning, OpportunitiesRequest, Trend
from ..services.cache import CachedFlows
from ..services.search import filter_strategies
from ..services.strategies import map_opportunities_to_strategy, strategy_summary_text, today

logger = logging.getLogger(__name__)

router = APIRouter(tags=["strategies"])


class TrendData(BaseModel):
    """A trend described by the caller rather than generated."""
    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    summary: str
    category: str


async def build_strategy(flows: CachedFlows, trend: Trend) -> CapitalizationStrategy:
    """Strategy for one trend; a failed suggestion gives the placeholder strategy."""
    request = OpportunitiesRequest(trend_summary_text=strategy_summary_text(trend))
    opportunities = None
    try:
        opportunities = await flows.get_or_generate_opportunities(request)
    except Exception as e:
        logger.warning('Failed to generate strategy for trend "%s": %s', trend.title, e)
    return map_opportunities_to_strategy(opportunities, trend)


@router.get("/strategies")
async def get_strategies(
    query: Optional[str] = Query(None),
    trend_id: Optional[str] = Query(None, alias="trendId"),
    flows: CachedFlows = Depends(get_flows),
):
    """Get one capitalization strategy per current trend."""
    try:
        trends = await flows.get_or_generate_trends(default_trends_request())
    except Exception as e:
        logger.error("Failed to load strategies data: %s", e)
        raise HTTPException(status_code=502, detail=f"Failed to generate AI trends: {e}")

    strategies = list(await asyncio.gather(*(build_strategy(flows, trend) for trend in trends)))

    return {
        "strategies": filter_strategies(strategies, query=query, trend_id=trend_id),
        "total": len(strategies),
    }


@router.post("/strategies")
async def create_strategy(trend_data: TrendData, flows: CachedFlows = Depends(get_flows)):
    """Generate a strategy for a trend passed in the request body."""
    trend = Trend(
        id=trend_data.id,
        title=trend_data.title,
        summary=trend_data.summary,
        category=trend_data.category,
        date=today(),
        customer_impact=[],
        consulting_positioning=ConsultingPositioning(strategic_advice="Strategy derived from specific trend data."),
        momentum=0,
        market_size="N/A",
    )
    strategy = await build_strategy(flows, trend)
    return {"strategies": [strategy], "total": 1}
