"""Summarizer - Condenses a week of AI news into trends, impact and positioning."""

from langchain_anthropic import ChatAnthropic

from ..config import get_settings
from ..schemas import TrendSummary
from .opportunities import GenerationError


def get_llm() -> ChatAnthropic:
    """Get Claude LLM for summarization."""
    settings = get_settings()
    return ChatAnthropic(
        model=settings.default_model,
        api_key=settings.anthropic_api_key,
    )


async def summarize_trends(news_summary: str) -> TrendSummary:
    """Identify the top 3-5 trends in a news summary.

    Not cached: every call goes to the LLM.
    """
    llm = get_llm().with_structured_output(TrendSummary)

    prompt = f"""Here is a summary of the week's AI news and events:

{news_summary}

Analyze this summary and identify the top 3-5 most impactful AI trends. For each trend, assess its potential impact on enterprise customers and recommend how our consulting team should strategically position itself. Return the trends, customer impacts, and consulting positioning as lists of strings."""

    output = await llm.ainvoke(prompt)
    if output is None:
        raise GenerationError("Trend summarization returned no output")
    return output
