"""Tests for strategy mapping and search filters."""

import re

from insights_hub.schemas import LearningResource, OpportunitySet
from insights_hub.services.search import filter_resources, filter_strategies, filter_trends
from insights_hub.services.strategies import map_opportunities_to_strategy, strategy_summary_text, today

from .conftest import make_trend


def opportunities() -> OpportunitySet:
    return OpportunitySet(
        service_offerings=["SLM fine-tuning", "Model audits"],
        partnership_opportunities=["Chip vendors", "Cloud providers"],
        target_clients=["Regional banks"],
        actionable_steps=["Publish a point of view.", "Run a pilot."],
    )


class TestMapOpportunities:

    def test_successful_mapping(self):
        trend = make_trend("slm", title="Small Models")
        strategy = map_opportunities_to_strategy(opportunities(), trend)

        assert strategy.id == "strategy-slm"
        assert strategy.trend_id == "slm"
        assert strategy.title == "Capitalization Strategy for: Small Models"
        assert strategy.date == trend.date
        assert strategy.new_service_offering.name == "SLM fine-tuning"
        assert [p.partner_type for p in strategy.partnership_opportunities] == ["AI/Tech Partner"] * 2
        assert [p.rationale for p in strategy.partnership_opportunities] == ["Chip vendors", "Cloud providers"]
        assert strategy.target_clients[0].industry == "Various"
        assert strategy.target_clients[0].profile == "Regional banks"
        assert [s.priority for s in strategy.actionable_steps] == ["Medium", "Medium"]

    def test_failed_mapping(self):
        trend = make_trend("slm", title="Small Models")
        strategy = map_opportunities_to_strategy(None, trend)

        assert strategy.id == "strategy-failed-slm"
        assert strategy.title == "Strategy Generation Failed for: Small Models"
        assert strategy.new_service_offering is None
        assert len(strategy.actionable_steps) == 1
        assert strategy.actionable_steps[0].priority == "High"

    def test_empty_opportunities(self):
        strategy = map_opportunities_to_strategy(OpportunitySet(), make_trend("x"))
        assert strategy.new_service_offering is None
        assert strategy.actionable_steps[0].step == "Define specific actionable steps."

    def test_explicitly_empty_steps_stay_empty(self):
        strategy = map_opportunities_to_strategy(OpportunitySet(actionable_steps=[]), make_trend("x"))
        assert strategy.actionable_steps == []

    def test_strategy_summary_text(self):
        text = strategy_summary_text(make_trend("a", title="Edge AI"))
        assert text == "Trend Title: Edge AI\nSummary: Summary of Edge AI\nCategory: Generative AI"

    def test_today_format(self):
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", today())

    def test_serializes_with_camel_case(self):
        data = map_opportunities_to_strategy(opportunities(), make_trend("a")).model_dump(by_alias=True)
        assert "trendId" in data
        assert "valueProposition" in data["newServiceOffering"]


class TestFilterTrends:

    def test_trend_id_wins_over_query(self):
        trends = [make_trend("a"), make_trend("b")]
        assert [t.id for t in filter_trends(trends, query="nothing", trend_id="b")] == ["b"]

    def test_query_matches_customer_impact(self):
        trends = [make_trend("a", industry="Energy"), make_trend("b", industry="Legal")]
        assert [t.id for t in filter_trends(trends, query="ENERGY")] == ["a"]

    def test_no_filters(self):
        trends = [make_trend("a")]
        assert filter_trends(trends) == trends


class TestFilterStrategies:

    def test_query_and_trend_id(self):
        strategies = [
            map_opportunities_to_strategy(opportunities(), make_trend("a")),
            map_opportunities_to_strategy(None, make_trend("b")),
        ]
        assert [s.trend_id for s in filter_strategies(strategies, query="regional banks")] == ["a"]
        assert [s.trend_id for s in filter_strategies(strategies, query="failed")] == ["b"]
        assert filter_strategies(strategies, query="strategy", trend_id="b")[0].trend_id == "b"


class TestFilterResources:

    def resources(self) -> list[LearningResource]:
        return [
            LearningResource(id="p", trend_id="a", title="Attention paper", type="Paper",
                             url="https://arxiv.org/x", source="arXiv", tags=["NLP"]),
            LearningResource(id="c", trend_id="b", title="Agents course", type="Course",
                             url="https://example.com/c", summary="Build agents", tags=["Agents", "Tutorial"]),
        ]

    def test_by_trend_type_and_tag(self):
        resources = self.resources()
        assert [r.id for r in filter_resources(resources, trend_id="a")] == ["p"]
        assert [r.id for r in filter_resources(resources, resource_type="course")] == ["c"]
        assert [r.id for r in filter_resources(resources, tag="nlp")] == ["p"]

    def test_query_over_source_summary_and_tags(self):
        resources = self.resources()
        assert [r.id for r in filter_resources(resources, query="arxiv")] == ["p"]
        assert [r.id for r in filter_resources(resources, query="build")] == ["c"]
        assert [r.id for r in filter_resources(resources, query="tutorial")] == ["c"]

    def test_filters_combine(self):
        assert filter_resources(self.resources(), trend_id="a", query="agents") == []
