"""LangGraph state definitions for the trend analysis graph."""

from typing import TypedDict

from ..schemas import Trend


class NewsArticle(TypedDict):
    """A single AI news article from Tavily."""
    title: str
    url: str
    snippet: str
    published_date: str
    source: str


class TrendState(TypedDict):
    """State for the trend generation workflow.

    Passed from the news fetcher to the analyst node.
    """
    # Requested analysis window, e.g. "past 24 hours"
    time_period: str

    # Upper bound on the number of trends to identify
    number_of_trends: int

    # Articles found by the news fetcher
    articles: list[NewsArticle]

    # Formatted digest handed to the LLM
    news_summary: str

    # Final trends (set by the analyst node)
    trends: list[Trend]
