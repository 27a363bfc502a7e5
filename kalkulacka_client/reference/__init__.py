"""Reference dataset client - parties, issues, theses, positions."""

from kalkulacka_client.reference.client import ReferenceClient
from kalkulacka_client.reference.schemas import (
    DetailsSchema,
    IssueSchema,
    PartyPositionSchema,
    PartySchema,
    SourceSchema,
    ThesisSchema,
)

__all__ = [
    "ReferenceClient",
    "PartySchema",
    "IssueSchema",
    "ThesisSchema",
    "SourceSchema",
    "DetailsSchema",
    "PartyPositionSchema",
]
