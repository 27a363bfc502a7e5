"""Party profile API views - thin layer over services."""

from app.container import container
from app.models.metrics import PartyMetrics
from app.models.reference import CATEGORIES
from web.api.errors import NotFoundError, ValidationError

from .schemas import IssueMetricsItem, MetricsItem, ProfileItem, ProfilesResponse


def _metrics_item(metrics: PartyMetrics | None, titles: dict[str, str]) -> MetricsItem | None:
    if metrics is None:
        return None

    top_issues = [
        IssueMetricsItem(title=titles.get(i.issue_id, i.issue_id), **i.to_dict())
        for i in metrics.top_issues
    ]

    return MetricsItem(
        position_count=metrics.position_count,
        avg_confidence=metrics.avg_confidence,
        coverage_ratio=metrics.coverage_ratio,
        avg_value=metrics.avg_value,
        positive_share=metrics.positive_share,
        negative_share=metrics.negative_share,
        neutral_share=metrics.neutral_share,
        latest_update=metrics.latest_update,
        top_issues=top_issues,
    )


def _profile_item(data: dict, titles: dict[str, str]) -> ProfileItem:
    party = data["party"]
    return ProfileItem(
        id=party.id,
        name=party.name,
        short_name=party.short_name,
        category=party.category,
        poll_percentage=party.poll_percentage,
        description=party.description,
        pros=party.pros,
        cons=party.cons,
        historical_achievements=party.historical_achievements,
        controversies=party.controversies,
        metrics=_metrics_item(data["metrics"], titles),
    )


def _issue_titles() -> dict[str, str]:
    return {i.id: i.title for i in container.reference.get_issues()}


def get_profiles(category: str | None = None) -> ProfilesResponse:
    """Get party profiles, optionally for one category."""
    if category is not None and category not in CATEGORIES:
        raise ValidationError(f"Invalid category: {category}. Must be one of {', '.join(CATEGORIES)}")

    titles = _issue_titles()
    items = [_profile_item(d, titles) for d in container.profiles.profiles(category)]
    return ProfilesResponse(category=category, items=items)


def get_profile(party_id: str) -> ProfileItem:
    """Get one party profile."""
    data = container.profiles.profile(party_id)
    if data is None:
        raise NotFoundError(f"Party not found: {party_id}")
    return _profile_item(data, _issue_titles())
