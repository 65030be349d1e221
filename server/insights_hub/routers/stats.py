"""Health check and cache status endpoints."""

import platform
import sys
import logging
from fastapi import APIRouter, Depends, HTTPException

from ..config import get_settings
from ..dependencies import default_trends_request, get_flows
from ..services.cache import CachedFlows
from ..services.priming import prime_all

logger = logging.getLogger(__name__)

router = APIRouter(tags=["stats"])


@router.get("/health")
async def health_check():
    """Health check and status endpoint."""
    settings = get_settings()

    return {
        "status": "ok",
        "version": "1.0.0",
        "model": settings.default_model,
        "hasAnthropicKey": bool(settings.anthropic_api_key),
        "hasTavilyKey": bool(settings.tavily_api_key),
        "platform": platform.system().lower(),
        "pythonVersion": sys.version,
    }


@router.get("/cache")
async def get_cache_status(flows: CachedFlows = Depends(get_flows)):
    """Sizes of the trends, opportunities and resources slots."""
    return {
        **flows.store.stats(),
        "ttl": {
            "trends": flows.trends_ttl,
            "opportunities": flows.opportunities_ttl,
            "resources": flows.resources_ttl,
        },
    }


@router.post("/cache/prime")
async def prime_cache(flows: CachedFlows = Depends(get_flows)):
    """Prime all cache slots for the default trends request."""
    settings = get_settings()
    try:
        primed = await prime_all(flows, default_trends_request(), settings.resources_per_trend)
    except Exception as e:
        logger.error("Cache priming failed: %s", e)
        raise HTTPException(status_code=502, detail=f"Failed to generate AI trends: {e}")

    return {
        "trends": len(primed.trends),
        "opportunities": sum(1 for op in primed.opportunities if op.data is not None),
        "resources": len(primed.resources),
        "cache": flows.store.stats(),
    }
