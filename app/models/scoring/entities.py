"""Calculator domain entities - user input and computed scores."""

from dataclasses import dataclass, field

from app.models.common import BaseEntity

SKIPPED = 0


@dataclass
class UserAnswer(BaseEntity):
    """User stance on a thesis. weight 0 means the question was skipped."""

    thesis_id: str
    value: float
    weight: int = 1

    @property
    def skipped(self) -> bool:
        return self.weight == SKIPPED


@dataclass
class ThesisResult(BaseEntity):
    """Per-thesis comparison of the user and one party."""

    thesis_id: str
    user_value: float
    party_value: float
    difference: float
    weight: int
    confidence: float
    contribution: float


@dataclass
class ScoreResult(BaseEntity):
    """Agreement of the user with one party."""

    party_id: str
    party_name: str
    party_category: str
    total_score: float
    max_possible_score: float
    agreement_percentage: float
    confidence_score: float
    coverage_percentage: int
    thesis_results: list[ThesisResult] = field(default_factory=list)


@dataclass
class DetailedComparison(BaseEntity):
    """Thesis results split into agreement bands."""

    strong_agreements: list[ThesisResult]
    partial_agreements: list[ThesisResult]
    strong_disagreements: list[ThesisResult]


@dataclass
class IssueInsight(BaseEntity):
    """Alignment of the user with a party within one issue."""

    issue_id: str
    title: str
    description: str
    alignment: float
    avg_confidence: float
    count: int
