"""Reference dataset schemas - parties, issues, theses, party positions."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from app.models.reference import Issue, Party, PartyPosition, PositionDetails, PositionSource, Thesis
from helpers.dates import parse_timestamp

SourceType = Literal["program", "hlasovani", "prohlaseni", "rozhovor", "finance"]


def _check_timestamp(value: str | None) -> str | None:
    if value is not None and parse_timestamp(value) is None:
        raise ValueError(f"Invalid ISO 8601 timestamp: {value!r}")
    return value


class PartySchema(BaseModel):
    """Political party."""

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    short_name: str = Field(alias="shortName", default="")
    slug: str = ""
    category: Literal["main", "secondary"] = "secondary"
    poll_percentage: float | None = Field(alias="pollPercentage", default=None, ge=0, le=100)
    description: str = ""
    pros: list[str] = []
    cons: list[str] = []
    historical_achievements: list[str] = Field(alias="historicalAchievements", default=[])
    controversies: list[str] = []

    class Config:
        populate_by_name = True

    def to_entity(self) -> Party:
        return Party(
            id=self.id,
            name=self.name,
            short_name=self.short_name,
            category=self.category,
            poll_percentage=self.poll_percentage,
            slug=self.slug,
            description=self.description,
            pros=list(self.pros),
            cons=list(self.cons),
            historical_achievements=list(self.historical_achievements),
            controversies=list(self.controversies),
        )


class IssueSchema(BaseModel):
    """Topic (téma)."""

    id: str = Field(min_length=1)
    title: str = Field(min_length=1)
    description: str = ""
    order: int = Field(default=0, ge=0)

    def to_entity(self) -> Issue:
        return Issue(id=self.id, title=self.title, description=self.description, order=self.order)


class ThesisSchema(BaseModel):
    """Scored statement (teze)."""

    id: str = Field(min_length=1)
    issue_id: str = Field(alias="issueId", min_length=1)
    text: str = Field(min_length=1)
    scale_min: int = Field(alias="scaleMin", default=-2, ge=-3, le=0)
    scale_max: int = Field(alias="scaleMax", default=2, ge=0, le=3)
    order: int = Field(default=0, ge=0)
    is_active: bool = Field(alias="isActive", default=True)

    class Config:
        populate_by_name = True

    def to_entity(self) -> Thesis:
        return Thesis(
            id=self.id,
            issue_id=self.issue_id,
            text=self.text,
            scale_min=self.scale_min,
            scale_max=self.scale_max,
            order=self.order,
            is_active=self.is_active,
        )


class SourceSchema(BaseModel):
    """Provenance of a position."""

    url: str = Field(min_length=1)
    date: str | None = None
    type: SourceType
    title: str | None = None

    @field_validator("date")
    @classmethod
    def check_date(cls, value: str | None) -> str | None:
        return _check_timestamp(value)


class DetailsSchema(BaseModel):
    """Structured evidence - arguments, quotes, related roll-call votes."""

    arguments: list[str] = []
    quotes: list[dict] = []
    related_votes: list[dict] = Field(alias="relatedVotes", default=[])

    class Config:
        populate_by_name = True


class PartyPositionSchema(BaseModel):
    """Declared stance of a party on a thesis."""

    party_id: str = Field(alias="partyId", min_length=1)
    thesis_id: str = Field(alias="thesisId", min_length=1)
    value: float = Field(ge=-2, le=2)
    confidence: float = Field(ge=0, le=1)
    source: SourceSchema
    justification: str | None = None
    details: DetailsSchema | None = None
    last_updated: str | None = Field(alias="lastUpdated", default=None)

    class Config:
        populate_by_name = True

    @field_validator("last_updated")
    @classmethod
    def check_last_updated(cls, value: str | None) -> str | None:
        return _check_timestamp(value)

    def to_entity(self) -> PartyPosition:
        details = None
        if self.details is not None:
            details = PositionDetails(
                arguments=list(self.details.arguments),
                quotes=list(self.details.quotes),
                related_votes=list(self.details.related_votes),
            )
        return PartyPosition(
            party_id=self.party_id,
            thesis_id=self.thesis_id,
            value=self.value,
            confidence=self.confidence,
            source=PositionSource(
                url=self.source.url,
                date=self.source.date,
                type=self.source.type,
                title=self.source.title,
            ),
            justification=self.justification,
            details=details,
            last_updated=self.last_updated,
        )
