"""Party profile API response schemas."""

from pydantic import BaseModel


class IssueMetricsItem(BaseModel):
    """Engagement of a party with one issue."""

    issue_id: str
    title: str
    count: int
    avg_value: float
    avg_confidence: float
    coverage: float
    depth_score: float
    recency_score: float
    engagement_score: float


class MetricsItem(BaseModel):
    """Aggregate party metrics."""

    position_count: int
    avg_confidence: float
    coverage_ratio: float
    avg_value: float
    positive_share: float
    negative_share: float
    neutral_share: float
    latest_update: str | None
    top_issues: list[IssueMetricsItem]


class ProfileItem(BaseModel):
    """Party profile."""

    id: str
    name: str
    short_name: str
    category: str
    poll_percentage: float | None
    description: str
    pros: list[str]
    cons: list[str]
    historical_achievements: list[str]
    controversies: list[str]
    metrics: MetricsItem | None


class ProfilesResponse(BaseModel):
    """Party profiles response."""

    category: str | None
    items: list[ProfileItem]
