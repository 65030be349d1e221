"""Wiring of the cached generation flows into the FastAPI app."""

from typing import Optional
from fastapi import Request

from .agents import generate_ai_trends, generate_learning_resources, suggest_capitalization_opportunities
from .config import Settings, get_settings
from .schemas import TrendsRequest
from .services.cache import CachedFlows


def create_cached_flows(settings: Optional[Settings] = None) -> CachedFlows:
    """Build the process-wide cache context around the LLM flows."""
    settings = settings or get_settings()
    return CachedFlows(
        generate_ai_trends,
        suggest_capitalization_opportunities,
        generate_learning_resources,
        trends_ttl=settings.trends_cache_ttl,
        opportunities_ttl=settings.opportunities_cache_ttl,
        resources_ttl=settings.resources_cache_ttl,
        dedupe_in_flight=settings.cache_dedupe_in_flight,
        timeout=settings.generation_timeout,
    )


def get_flows(request: Request) -> CachedFlows:
    """FastAPI dependency returning the app's cache context."""
    return request.app.state.flows


def default_trends_request() -> TrendsRequest:
    """The single trends request shape every view uses."""
    settings = get_settings()
    return TrendsRequest(
        time_period=settings.default_time_period,
        number_of_trends=settings.default_number_of_trends,
    )
