"""Case-insensitive search and filtering over trends, strategies and resources."""

from typing import Optional

from ..schemas import CapitalizationStrategy, LearningResource, Trend


def _contains(text: Optional[str], query: str) -> bool:
    return bool(text) and query in text.lower()


def filter_trends(
    trends: list[Trend],
    query: Optional[str] = None,
    trend_id: Optional[str] = None,
) -> list[Trend]:
    """Filter trends by id, or else by a free-text query."""
    if trend_id:
        return [t for t in trends if t.id == trend_id]
    if not query:
        return trends

    q = query.lower()
    return [
        t for t in trends
        if _contains(t.title, q)
        or _contains(t.summary, q)
        or _contains(t.category, q)
        or any(_contains(ci.industry, q) or _contains(ci.impact_analysis, q) for ci in t.customer_impact)
    ]


def filter_strategies(
    strategies: list[CapitalizationStrategy],
    query: Optional[str] = None,
    trend_id: Optional[str] = None,
) -> list[CapitalizationStrategy]:
    if query:
        q = query.lower()
        strategies = [
            s for s in strategies
            if _contains(s.title, q)
            or _contains(s.description, q)
            or (s.new_service_offering is not None and _contains(s.new_service_offering.name, q))
            or any(_contains(tc.industry, q) or _contains(tc.profile, q) for tc in s.target_clients)
        ]
    if trend_id:
        strategies = [s for s in strategies if s.trend_id == trend_id]
    return strategies


def filter_resources(
    resources: list[LearningResource],
    trend_id: Optional[str] = None,
    resource_type: Optional[str] = None,
    tag: Optional[str] = None,
    query: Optional[str] = None,
) -> list[LearningResource]:
    """Apply trend, type, tag and free-text filters in that order."""
    if trend_id:
        resources = [r for r in resources if r.trend_id == trend_id]
    if resource_type:
        resources = [r for r in resources if r.type.lower() == resource_type.lower()]
    if tag:
        resources = [r for r in resources if tag.lower() in (t.lower() for t in r.tags)]
    if query:
        q = query.lower()
        resources = [
            r for r in resources
            if _contains(r.title, q)
            or _contains(r.summary, q)
            or _contains(r.source, q)
            or _contains(r.type, q)
            or any(_contains(t, q) for t in r.tags)
        ]
    return resources
