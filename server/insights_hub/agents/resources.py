"""Research assistant - Recommends learning resources for an AI trend."""

import logging
from langchain_anthropic import ChatAnthropic

from ..config import get_settings
from ..schemas import LearningResource, LearningResourceList, LearningResourcesRequest
from .trends import slugify

logger = logging.getLogger(__name__)


def get_llm() -> ChatAnthropic:
    """Get Claude LLM for resource curation."""
    settings = get_settings()
    return ChatAnthropic(
        model=settings.default_model,
        api_key=settings.anthropic_api_key,
        temperature=0.4,
        max_tokens=4096,
    )


def build_resources_prompt(request: LearningResourcesRequest) -> str:
    n = request.number_of_resources
    return f"""You are an expert AI research assistant. Your task is to find and suggest up to {n} relevant and high-quality learning resources for the provided AI trend.
Prioritize resources that are current, authoritative, and directly related to the practical application or understanding of the trend.
Ensure all URLs are valid and directly link to the resource.
For the 'id' field of each resource, generate a unique, human-readable slug based on its title (e.g. "understanding-generative-ai-course").
For the 'tags' field, provide a list of 2-4 relevant keywords.

AI Trend Information:
Title: {request.trend_title}
Summary: {request.trend_summary}
Category: {request.trend_category}

Based on this AI trend, identify and describe up to {n} learning resources.
If you can identify fewer than {n} significant resources, provide those you can identify.
If no relevant resources can be identified, return an empty list."""


async def generate_learning_resources(request: LearningResourcesRequest) -> list[LearningResource]:
    """Suggest up to ``request.number_of_resources`` resources for one trend."""
    llm = get_llm().with_structured_output(LearningResourceList)
    output = await llm.ainvoke(build_resources_prompt(request))

    if output is None:
        logger.error("Learning resource generation returned no output from the LLM")
        return []

    return [
        resource.model_copy(update={"id": slugify(resource.title)})
        for resource in output.resources
    ]
