"""AI Insights Hub FastAPI Application Entry Point."""

import logging
from typing import Optional
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .dependencies import create_cached_flows
from .services.cache import CachedFlows
from .routers import (
    stats_router,
    dashboard_router,
    trends_router,
    strategies_router,
    resources_router,
)


def create_app(flows: Optional[CachedFlows] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    ``flows`` is the cache context shared by every request; a new one wrapping
    the LLM flows is built when none is given.
    """
    app = FastAPI(
        title="AI Insights Hub",
        description="AI market trends, capitalization strategies and learning resources",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )
    app.state.flows = flows if flows is not None else create_cached_flows()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers with /api prefix
    app.include_router(stats_router, prefix="/api")
    app.include_router(dashboard_router, prefix="/api")
    app.include_router(trends_router, prefix="/api")
    app.include_router(strategies_router, prefix="/api")
    app.include_router(resources_router, prefix="/api")

    return app


app = create_app()


def run():
    """Run the server."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info("AI Insights Hub running at http://localhost:%d", settings.port)
    uvicorn.run(
        "insights_hub.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
