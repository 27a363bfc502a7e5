"""Calculator models."""

from app.models.scoring.entities import (
    SKIPPED,
    DetailedComparison,
    IssueInsight,
    ScoreResult,
    ThesisResult,
    UserAnswer,
)

__all__ = [
    "SKIPPED",
    "UserAnswer",
    "ThesisResult",
    "ScoreResult",
    "DetailedComparison",
    "IssueInsight",
]
