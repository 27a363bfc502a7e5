"""Poll API response schemas."""

from pydantic import BaseModel


class AverageItem(BaseModel):
    """Party average over the timeframe."""

    party_id: str
    average: float
    change: float
    samples: int


class HighlightItem(BaseModel):
    """Movement between first and last poll."""

    party_id: str
    diff: float
    latest: float
    earliest: float


class PollTrendsResponse(BaseModel):
    """Poll trends response."""

    agency: str
    agencies: list[str]
    start: str | None
    end: str | None
    dates: list[str]
    series: dict[str, list[float | None]]
    averages: list[AverageItem]
    highlights: list[HighlightItem]
