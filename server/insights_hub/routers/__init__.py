"""API Routers for the AI Insights Hub."""

from .stats import router as stats_router
from .dashboard import router as dashboard_router
from .trends import router as trends_router
from .strategies import router as strategies_router
from .resources import router as resources_router

__all__ = [
    "stats_router",
    "dashboard_router",
    "trends_router",
    "strategies_router",
    "resources_router",
]
