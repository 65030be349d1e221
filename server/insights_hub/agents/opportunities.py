"""Strategy consultant - Suggests where to capitalize on AI trends."""

from langchain_anthropic import ChatAnthropic

from ..config import get_settings
from ..schemas import OpportunitiesRequest, OpportunitySet


class GenerationError(RuntimeError):
    """The LLM returned no usable structured output."""


def get_llm() -> ChatAnthropic:
    """Get Claude LLM for opportunity suggestions."""
    settings = get_settings()
    return ChatAnthropic(
        model=settings.default_model,
        api_key=settings.anthropic_api_key,
    )


def build_opportunities_prompt(trend_summary_text: str) -> str:
    return f"""You are a strategy consultant specializing in AI. Based on the following AI trends, suggest concrete recommendations for where and how our consulting company can capitalize.
Include the following sections:
1. Service Offering Ideas: List specific new services the company could offer.
2. Potential Partnership Opportunities: Identify types of partners and the rationale for partnering.
3. Target Client Profiles or Industries: Describe the ideal customers or sectors to focus on.
4. Actionable Steps: Suggest initial, practical steps the team can take. Ensure each actionable step is a complete, concise, and well-formed sentence providing a clear action.

AI Trends:
{trend_summary_text}"""


async def suggest_capitalization_opportunities(request: OpportunitiesRequest) -> OpportunitySet:
    """Suggest service offerings, partnerships, target clients and next steps."""
    llm = get_llm().with_structured_output(OpportunitySet)
    output = await llm.ainvoke(build_opportunities_prompt(request.trend_summary_text))

    if output is None:
        raise GenerationError("Opportunity suggestion returned no output")
    return output
