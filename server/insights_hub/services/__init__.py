"""Services for the AI Insights Hub."""

from .cache import CacheEntry, CacheStore, CachedFlows, opportunities_key, resources_key
from .priming import prime_all

__all__ = [
    "CacheEntry",
    "CacheStore",
    "CachedFlows",
    "opportunities_key",
    "resources_key",
    "prime_all",
]
