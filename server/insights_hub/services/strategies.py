"""Turn opportunity suggestions into capitalization strategies."""

from datetime import date
from typing import Optional

from ..schemas import (
    ActionableStep,
    CapitalizationStrategy,
    OpportunitySet,
    PartnershipOpportunity,
    ServiceOffering,
    TargetClient,
    Trend,
)


def today() -> str:
    """Current date as YYYY-MM-DD."""
    return date.today().isoformat()


def strategy_summary_text(trend: Trend) -> str:
    """Text blob sent to the opportunities flow from the strategies view."""
    return f"Trend Title: {trend.title}\nSummary: {trend.summary}\nCategory: {trend.category}"


def map_opportunities_to_strategy(
    opportunities: Optional[OpportunitySet], trend: Trend
) -> CapitalizationStrategy:
    """Build a strategy for ``trend``; ``None`` opportunities give a placeholder."""
    if opportunities is None:
        return CapitalizationStrategy(
            id=f"strategy-failed-{trend.id}",
            trend_id=trend.id,
            title=f"Strategy Generation Failed for: {trend.title}",
            description=f'Could not generate a capitalization strategy for the AI trend titled "{trend.title}".',
            date=trend.date,
            actionable_steps=[
                ActionableStep(step="Review trend and attempt strategy regeneration if applicable.", priority="High"),
            ],
        )

    new_service_offering = None
    if opportunities.service_offerings:
        new_service_offering = ServiceOffering(
            name=opportunities.service_offerings[0],
            scope="To be defined based on detailed analysis.",
            value_proposition="Leverages insights from the AI trend to deliver value.",
        )

    steps = [ActionableStep(step=step, priority="Medium") for step in opportunities.actionable_steps]
    if "actionable_steps" not in opportunities.model_fields_set:
        steps = [ActionableStep(step="Define specific actionable steps.", priority="Medium")]

    return CapitalizationStrategy(
        id=f"strategy-{trend.id}",
        trend_id=trend.id,
        title=f"Capitalization Strategy for: {trend.title}",
        description=f'Strategic recommendations to capitalize on the AI trend titled "{trend.title}".',
        date=trend.date,
        new_service_offering=new_service_offering,
        partnership_opportunities=[
            PartnershipOpportunity(partner_type="AI/Tech Partner", rationale=rationale)
            for rationale in opportunities.partnership_opportunities
        ],
        target_clients=[
            TargetClient(industry="Various", profile=profile)
            for profile in opportunities.target_clients
        ],
        actionable_steps=steps,
    )
