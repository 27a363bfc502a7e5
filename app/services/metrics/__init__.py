"""Party metrics services."""

from app.services.metrics.engagement import (
    calculate_party_metrics,
    calculate_recency_score,
    compute_position_depth_score,
)
from app.services.metrics.profiles import ProfileService

__all__ = [
    "ProfileService",
    "calculate_party_metrics",
    "calculate_recency_score",
    "compute_position_depth_score",
]
