"""Party metrics models."""

from app.models.metrics.entities import PartyMetrics, PartyMetricsIssue

__all__ = [
    "PartyMetrics",
    "PartyMetricsIssue",
]
