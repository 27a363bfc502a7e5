"""Opinion poll entities."""

from dataclasses import dataclass, field
from datetime import datetime

from app.models.common import BaseEntity
from helpers.dates import parse_timestamp


@dataclass
class PollResult(BaseEntity):
    """Single party figure in a poll. percentage is None when not measured."""

    party_id: str
    percentage: float | None
    original_value: str = ""
    note: str | None = None


@dataclass
class Poll(BaseEntity):
    """One published poll."""

    id: str
    date: str
    agency: str
    results: list[PollResult] = field(default_factory=list)
    date_label: str = ""
    client: str | None = None
    source: str = ""

    @property
    def moment(self) -> datetime | None:
        return parse_timestamp(self.date)

    def percentage(self, party_id: str) -> float | None:
        for result in self.results:
            if result.party_id == party_id:
                return result.percentage
        return None


@dataclass
class PollAverage(BaseEntity):
    """Party average over a poll timeframe."""

    party_id: str
    average: float
    change: float
    samples: int


@dataclass
class TrendHighlight(BaseEntity):
    """Movement of a party between the first and last poll of a timeframe."""

    party_id: str
    diff: float
    latest: float
    earliest: float
