"""Party position - one party's declared stance on one thesis."""

from dataclasses import dataclass, field
from datetime import datetime

from app.models.common import BaseEntity
from helpers.dates import parse_timestamp


@dataclass
class PositionSource(BaseEntity):
    """Provenance of a position."""

    url: str
    date: str | None = None
    type: str = ""
    title: str | None = None


@dataclass
class PositionDetails(BaseEntity):
    """Structured evidence behind a position."""

    arguments: list[str] = field(default_factory=list)
    quotes: list[dict] = field(default_factory=list)
    related_votes: list[dict] = field(default_factory=list)

    @property
    def evidence_units(self) -> int:
        return len(self.arguments) + len(self.quotes) + len(self.related_votes)


@dataclass
class PartyPosition(BaseEntity):
    """Stance of a party on a thesis.

    Attributes:
        value: Signed stance strength, -2..+2.
        confidence: Evidentiary certainty, 0..1.
        last_updated: ISO timestamp; when absent the source date is used.
    """

    party_id: str
    thesis_id: str
    value: float
    confidence: float
    source: PositionSource | None = None
    justification: str | None = None
    details: PositionDetails | None = None
    last_updated: str | None = None

    def resolved_timestamp(self) -> datetime | None:
        """last_updated, else source.date, else None (unknown recency)."""
        moment = parse_timestamp(self.last_updated)
        if moment is not None:
            return moment
        if self.source is not None:
            return parse_timestamp(self.source.date)
        return None
