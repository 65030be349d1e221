"""Trends endpoints - Today's AI trends and the weekly news summarizer."""

import logging
from typing import Optional
from pydantic import BaseModel, Field
from fastapi import APIRouter, Depends, HTTPException, Query

from ..agents import summarize_trends
from ..dependencies import default_trends_request, get_flows
from ..services.cache import CachedFlows
from ..services.search import filter_trends

logger = logging.getLogger(__name__)

router = APIRouter(tags=["trends"])


class SummarizeRequest(BaseModel):
    """Request to summarize a week of AI news."""
    news_summary: str = Field(..., min_length=10, alias="newsSummary", description="The week's AI news digest")


@router.get("/trends")
async def get_trends(
    query: Optional[str] = Query(None),
    trend_id: Optional[str] = Query(None, alias="trendId"),
    flows: CachedFlows = Depends(get_flows),
):
    """Get today's AI trends, optionally filtered."""
    try:
        trends = await flows.get_or_generate_trends(default_trends_request())
    except Exception as e:
        logger.error("Failed to fetch AI trends: %s", e)
        raise HTTPException(status_code=502, detail=f"Failed to generate AI trends: {e}")

    return {
        "trends": filter_trends(trends, query=query, trend_id=trend_id),
        "total": len(trends),
    }


@router.post("/summarize")
async def summarize(request: SummarizeRequest):
    """Summarize a news digest into top trends, impact and positioning."""
    try:
        return await summarize_trends(request.news_summary)
    except Exception as e:
        logger.error("Trend summarization failed: %s", e)
        raise HTTPException(status_code=502, detail=f"Failed to summarize trends: {e}")
