"""Models package - entities for all domains."""

from app.models.common import BaseEntity
from app.models.metrics import PartyMetrics, PartyMetricsIssue
from app.models.polls import Poll, PollAverage, PollResult, TrendHighlight
from app.models.reference import (
    MAIN,
    SECONDARY,
    Issue,
    Party,
    PartyPosition,
    PositionDetails,
    PositionSource,
    Thesis,
)
from app.models.scoring import (
    DetailedComparison,
    IssueInsight,
    ScoreResult,
    ThesisResult,
    UserAnswer,
)

__all__ = [
    # Common
    "BaseEntity",
    # Reference
    "MAIN",
    "SECONDARY",
    "Party",
    "Issue",
    "Thesis",
    "PartyPosition",
    "PositionDetails",
    "PositionSource",
    # Scoring
    "UserAnswer",
    "ThesisResult",
    "ScoreResult",
    "DetailedComparison",
    "IssueInsight",
    # Metrics
    "PartyMetrics",
    "PartyMetricsIssue",
    # Polls
    "Poll",
    "PollResult",
    "PollAverage",
    "TrendHighlight",
]
