"""Calculator services."""

from app.services.scoring.calculator import CalculatorService
from app.services.scoring.engine import (
    FULL,
    MODES,
    QUICK,
    apply_red_line_policy,
    build_issue_insights,
    calculate_party_score,
    calculate_scores,
    generate_detailed_comparison,
    select_theses,
)

__all__ = [
    "CalculatorService",
    "FULL",
    "MODES",
    "QUICK",
    "calculate_scores",
    "calculate_party_score",
    "apply_red_line_policy",
    "generate_detailed_comparison",
    "build_issue_insights",
    "select_theses",
]
