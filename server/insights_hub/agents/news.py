"""News fetcher - Uses Tavily to find recent AI news articles."""

import logging
from urllib.parse import urlparse
from tavily import AsyncTavilyClient

from ..config import get_settings
from .state import TrendState, NewsArticle

logger = logging.getLogger(__name__)

NO_ARTICLES = "No articles found for the specified period."


def get_tavily_client() -> AsyncTavilyClient:
    """Get Tavily client with API key."""
    settings = get_settings()
    return AsyncTavilyClient(api_key=settings.tavily_api_key)


def days_for_period(time_period: str) -> int:
    """Rough lookback window in days for a human time period."""
    period = time_period.lower()
    if "month" in period:
        return 30
    if "week" in period:
        return 7
    return 1


def format_articles(articles: list[NewsArticle]) -> str:
    """Format articles as the news digest used in the trends prompt."""
    if not articles:
        return NO_ARTICLES

    return "\n".join(
        f"Title: {a['title']}\nSource: {a['source']}\nDate: {a['published_date']}\nSnippet: {a['snippet']}\n---\n"
        for a in articles
    )


async def fetch_news_articles(time_period: str) -> list[NewsArticle]:
    """Search recent AI news for the given time period."""
    settings = get_settings()
    if not settings.tavily_api_key:
        logger.warning("TAVILY_API_KEY not configured, no news articles fetched")
        return []

    logger.info("Fetching news for period: %s", time_period)
    tavily = get_tavily_client()
    results = await tavily.search(
        query="artificial intelligence industry news",
        topic="news",
        days=days_for_period(time_period),
        max_results=settings.news_max_results,
    )

    articles: list[NewsArticle] = []
    for result in results.get("results", []):
        url = result.get("url", "")
        articles.append({
            "title": result.get("title", "Untitled"),
            "url": url,
            "snippet": result.get("content", ""),
            "published_date": result.get("published_date", ""),
            "source": urlparse(url).netloc or "unknown",
        })
    return articles


async def news_node(state: TrendState) -> dict:
    """News fetcher node - collects articles and builds the digest."""
    articles = await fetch_news_articles(state["time_period"])
    return {
        "articles": articles,
        "news_summary": format_articles(articles),
    }
