"""Pydantic models for trends, opportunities, strategies and learning resources.

Field descriptions double as instructions for the LLM when a model is used
as a structured output schema.
"""

from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenCamelModel(CamelModel):
    """Immutable, hashable model used for generator requests."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# ---------------------------------------------------------------------------
# Trends
# ---------------------------------------------------------------------------


class CustomerImpact(CamelModel):
    industry: str = Field(..., description="The industry affected by the trend.")
    impact_analysis: str = Field(..., description="Analysis of how the trend impacts this industry.")


class ConsultingPositioning(CamelModel):
    strategic_advice: str = Field(..., description="Strategic advice for consultants regarding this trend.")
    new_services: Optional[list[str]] = Field(None, description="Potential new service offerings related to the trend.")
    adapted_services: Optional[list[str]] = Field(None, description="Existing services that can be adapted for this trend.")
    talking_points: Optional[list[str]] = Field(None, description="Key talking points for client discussions.")
    risks_or_limitations: Optional[list[str]] = Field(None, description="Potential risks or limitations to consider.")


class Trend(CamelModel):
    """A single AI market trend."""
    id: str = Field(..., description="A unique, human-readable slug for the trend based on its title.")
    title: str = Field(..., description="A concise title for the AI trend.")
    summary: str = Field(..., description="A detailed summary of the AI trend, explaining what it is and its significance.")
    category: str = Field(..., description='The category of the trend (e.g. "Generative AI", "AI Ethics").')
    date: str = Field(..., description="The date of analysis for this trend, formatted as YYYY-MM-DD.")
    customer_impact: list[CustomerImpact] = Field(default_factory=list, description="The trend's impact on various customer industries.")
    consulting_positioning: ConsultingPositioning = Field(..., description="How the consulting team should position itself for this trend.")
    momentum: Optional[float] = Field(None, ge=0, le=100, description="Estimated score (0-100) of the trend's current momentum.")
    market_size: Optional[str] = Field(None, description='Estimated market size related to the trend (e.g. "$10B by 2025").')


class TrendList(BaseModel):
    """Structured output wrapper for a list of trends."""
    trends: list[Trend] = Field(default_factory=list, description="The identified AI trends, most impactful first.")


class TrendsRequest(FrozenCamelModel):
    time_period: str = Field("past 24 hours", description="The time period to analyse, e.g. 'past 24 hours'.")
    number_of_trends: int = Field(3, ge=1, le=5, description="The desired number of top trends.")


class TrendSummary(CamelModel):
    """Output of the weekly summarizer flow."""
    top_trends: list[str] = Field(default_factory=list, description="The top 3-5 most impactful AI trends of the week.")
    customer_impact: list[str] = Field(default_factory=list, description="Each trend's potential impact on enterprise customers.")
    consulting_positioning: list[str] = Field(default_factory=list, description="How the consulting team should position itself for each trend.")


# ---------------------------------------------------------------------------
# Opportunities and strategies
# ---------------------------------------------------------------------------


class OpportunitiesRequest(FrozenCamelModel):
    trend_summary_text: str = Field(..., description="A text summary of the AI trend(s) to capitalize on.")


class OpportunitySet(CamelModel):
    """Capitalization opportunities suggested for a trend."""
    service_offerings: list[str] = Field(default_factory=list, description="Recommended new service offerings.")
    partnership_opportunities: list[str] = Field(default_factory=list, description="Potential partnership opportunities.")
    target_clients: list[str] = Field(default_factory=list, description="Target client profiles or industries.")
    actionable_steps: list[str] = Field(default_factory=list, description="Initial, practical steps. Each step is a complete sentence.")


class ServiceOffering(CamelModel):
    name: str
    scope: str
    value_proposition: str


class PartnershipOpportunity(CamelModel):
    partner_type: str
    rationale: str
    potential_partners: list[str] = Field(default_factory=list)


class TargetClient(CamelModel):
    industry: str
    profile: str


class ActionableStep(CamelModel):
    step: str
    priority: Literal["High", "Medium", "Low"]


class CapitalizationStrategy(CamelModel):
    id: str
    trend_id: str
    title: str
    description: str
    new_service_offering: Optional[ServiceOffering] = None
    partnership_opportunities: list[PartnershipOpportunity] = Field(default_factory=list)
    target_clients: list[TargetClient] = Field(default_factory=list)
    actionable_steps: list[ActionableStep] = Field(default_factory=list)
    date: str


# ---------------------------------------------------------------------------
# Learning resources
# ---------------------------------------------------------------------------


ResourceType = Literal[
    "Paper", "Article", "Course", "Tool", "Video", "Thought Leader",
    "Documentation", "Blog Post", "Tutorial", "Other",
]
SkillLevel = Literal["Beginner", "Intermediate", "Advanced"]


class LearningResource(CamelModel):
    id: str = Field(..., description="A unique, human-readable slug based on the resource title.")
    trend_id: Optional[str] = Field(None, description="ID of the AI trend this resource is related to.")
    title: str = Field(..., description="The title of the learning resource.")
    type: ResourceType = Field(..., description="The type of the learning resource.")
    url: str = Field(..., description="The direct URL to access the resource.")
    authors: Optional[list[str]] = Field(None, description="Authors or creators of the resource.")
    publication_date: Optional[str] = Field(None, description="Publication date, if known (YYYY-MM-DD or 'Recent').")
    summary: Optional[str] = Field(None, description="A brief summary of the resource.")
    source: Optional[str] = Field(None, description="The publisher of the resource (e.g. 'arXiv', 'Coursera').")
    is_free: Optional[bool] = Field(None, description="Whether the resource is freely accessible.")
    time_commitment: Optional[str] = Field(None, description="Estimated time commitment (e.g. '2 hours read').")
    skill_level: Optional[SkillLevel] = Field(None, description="Recommended skill level.")
    tags: list[str] = Field(default_factory=list, description="2-4 relevant tags or keywords.")


class LearningResourceList(BaseModel):
    """Structured output wrapper for a list of learning resources."""
    resources: list[LearningResource] = Field(default_factory=list, description="The suggested learning resources.")


class LearningResourcesRequest(FrozenCamelModel):
    trend_title: str
    trend_summary: str
    trend_category: str
    number_of_resources: int = Field(3, ge=1, le=5)


# ---------------------------------------------------------------------------
# Priming
# ---------------------------------------------------------------------------


class TrendOpportunities(CamelModel):
    trend_id: str
    data: Optional[OpportunitySet] = None


class PrimedData(CamelModel):
    """Snapshot of trends with their per-trend enrichment."""
    trends: list[Trend] = Field(default_factory=list)
    opportunities: list[TrendOpportunities] = Field(default_factory=list)
    resources: list[LearningResource] = Field(default_factory=list)
