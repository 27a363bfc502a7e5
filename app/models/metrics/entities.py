"""Party profile metrics - computed from the full position set."""

from dataclasses import dataclass, field

from app.models.common import BaseEntity


@dataclass
class PartyMetricsIssue(BaseEntity):
    """Engagement of a party with one issue."""

    issue_id: str
    count: int
    avg_value: float
    avg_confidence: float
    coverage: float
    depth_score: float
    recency_score: float
    engagement_score: float


@dataclass
class PartyMetrics(BaseEntity):
    """Aggregate statistics over all positions of a party."""

    position_count: int
    avg_confidence: float
    coverage_ratio: float
    avg_value: float
    positive_share: float
    negative_share: float
    neutral_share: float
    top_issues: list[PartyMetricsIssue] = field(default_factory=list)
    latest_update: str | None = None
