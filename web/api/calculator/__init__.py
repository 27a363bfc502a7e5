"""Calculator API."""

from web.api.calculator.views import (
    get_comparison,
    get_issue_insights,
    get_questions,
    get_results,
)

__all__ = [
    "get_questions",
    "get_results",
    "get_comparison",
    "get_issue_insights",
]
