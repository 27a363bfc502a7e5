"""Poll API views - thin layer over services."""

from app.container import container
from app.services.polls.trends import ALL_AGENCIES
from web.api.errors import ValidationError

from .schemas import AverageItem, HighlightItem, PollTrendsResponse


def get_trends(agency: str = ALL_AGENCIES, party_ids: list[str] | None = None) -> PollTrendsResponse:
    """Get poll trends for the recent timeframe."""
    agencies = container.polls.agencies()
    if agency != ALL_AGENCIES and agency not in agencies:
        raise ValidationError(f"Unknown agency: {agency}")

    data = container.polls.overview(agency, party_ids)

    return PollTrendsResponse(
        agency=agency,
        agencies=agencies,
        start=data["start"],
        end=data["end"],
        dates=[p.date for p in data["polls"]],
        series=data["series"],
        averages=[AverageItem(**a.to_dict()) for a in data["averages"]],
        highlights=[HighlightItem(**h.to_dict()) for h in data["highlights"]],
    )
