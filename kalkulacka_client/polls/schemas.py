"""Poll dataset schemas."""

from pydantic import BaseModel, Field

from app.models.polls import Poll, PollResult


class PollResultSchema(BaseModel):
    """Single party figure in a poll."""

    party_id: str = Field(alias="partyId")
    percentage: float | None = Field(default=None, ge=0, le=100)
    original_value: str = Field(alias="originalValue", default="")
    note: str | None = None

    class Config:
        populate_by_name = True


class PollSchema(BaseModel):
    """Published poll (průzkum)."""

    id: str
    date: str
    date_label: str = Field(alias="dateLabel", default="")
    agency: str
    client: str | None = None
    source: str = ""
    results: list[PollResultSchema] = []

    class Config:
        populate_by_name = True

    def to_entity(self) -> Poll:
        return Poll(
            id=self.id,
            date=self.date,
            agency=self.agency,
            results=[
                PollResult(
                    party_id=r.party_id,
                    percentage=r.percentage,
                    original_value=r.original_value,
                    note=r.note,
                )
                for r in self.results
            ],
            date_label=self.date_label,
            client=self.client,
            source=self.source,
        )
