"""LLM generation flows for trends, opportunities and learning resources."""

from .opportunities import GenerationError, suggest_capitalization_opportunities
from .resources import generate_learning_resources
from .summarizer import summarize_trends
from .trends import create_trends_graph, generate_ai_trends

__all__ = [
    "GenerationError",
    "create_trends_graph",
    "generate_ai_trends",
    "generate_learning_resources",
    "suggest_capitalization_opportunities",
    "summarize_trends",
]
