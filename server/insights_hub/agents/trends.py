"""Trend analyst - Turns a news digest into structured AI trends using LangGraph."""

import re
import logging
from langchain_anthropic import ChatAnthropic
from langgraph.graph import StateGraph, END

from ..config import get_settings
from ..schemas import Trend, TrendList, TrendsRequest
from ..services.strategies import today
from .state import TrendState
from .news import news_node

logger = logging.getLogger(__name__)


def get_llm() -> ChatAnthropic:
    """Get Claude LLM for trend analysis."""
    settings = get_settings()
    return ChatAnthropic(
        model=settings.default_model,
        api_key=settings.anthropic_api_key,
        temperature=0.3,  # factual, structured output
        max_tokens=4096,
    )


def slugify(title: str) -> str:
    """Human-readable id from a title, e.g. "AI in Health" -> "ai-in-health"."""
    slug = re.sub(r"\s+", "-", title.lower())
    return re.sub(r"[^\w-]+", "", slug, flags=re.ASCII)


def build_trends_prompt(news_summary: str, number_of_trends: int, time_period: str, current_date: str) -> str:
    return f"""You are an expert AI market analyst. Your task is to identify up to {number_of_trends} most impactful AI trends from the provided news summary from the {time_period}.
For each trend, provide a comprehensive analysis structured according to the output schema.
The current date is {current_date}. Ensure the 'date' field for each trend reflects the current date of analysis.

News Summary:
{news_summary}

Based on this news summary, identify and describe up to {number_of_trends} AI trends. If you can identify fewer than {number_of_trends} significant trends, provide those you can identify. Ensure each trend is distinct.
For each trend, provide:
- id: A unique, human-readable slug for the trend (e.g. "ai-in-healthcare-advances").
- title: A concise and impactful title.
- summary: A detailed summary explaining the trend.
- category: A relevant category (e.g. "Generative AI", "Robotics", "AI Ethics", "Language Models").
- date: {current_date}
- customerImpact: Impacts on different industries, each with the industry and the impact analysis.
- consultingPositioning: strategicAdvice plus optional newServices, adaptedServices, talkingPoints and risksOrLimitations.
- momentum: An estimated score (0-100) of the trend's current momentum.
- marketSize: An estimated market size (e.g. "$X Billion by YYYY").

If no trends can be identified from the summary, return an empty list."""


async def analyst_node(state: TrendState) -> dict:
    """Analyst node - Asks Claude for structured trends.

    Ids are re-derived from titles and dates pinned to today, whatever the
    model returned.
    """
    current_date = today()
    llm = get_llm().with_structured_output(TrendList)

    prompt = build_trends_prompt(
        news_summary=state["news_summary"],
        number_of_trends=state["number_of_trends"],
        time_period=state["time_period"],
        current_date=current_date,
    )
    output = await llm.ainvoke(prompt)

    if output is None:
        logger.error("Trend generation returned no output from the LLM")
        return {"trends": []}

    trends = [
        trend.model_copy(update={"id": slugify(trend.title), "date": current_date})
        for trend in output.trends
    ]
    return {"trends": trends}


def create_trends_graph():
    """Create the compiled trend generation graph.

    Graph structure:

    START -> fetch_news -> analyze -> END
    """
    workflow = StateGraph(TrendState)

    workflow.add_node("fetch_news", news_node)
    workflow.add_node("analyze", analyst_node)

    workflow.set_entry_point("fetch_news")
    workflow.add_edge("fetch_news", "analyze")
    workflow.add_edge("analyze", END)

    return workflow.compile()


async def generate_ai_trends(request: TrendsRequest) -> list[Trend]:
    """Fetch recent AI news and generate up to ``request.number_of_trends`` trends."""
    graph = create_trends_graph()

    initial_state: TrendState = {
        "time_period": request.time_period,
        "number_of_trends": request.number_of_trends,
        "articles": [],
        "news_summary": "",
        "trends": [],
    }

    final_state = await graph.ainvoke(initial_state)
    return final_state.get("trends", [])
