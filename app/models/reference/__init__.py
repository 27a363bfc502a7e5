"""Reference data loaded once per session and never mutated by services."""

from app.models.reference.party import CATEGORIES, MAIN, SECONDARY, Party, category_rank
from app.models.reference.position import PartyPosition, PositionDetails, PositionSource
from app.models.reference.thesis import Issue, Thesis

__all__ = [
    "CATEGORIES",
    "MAIN",
    "SECONDARY",
    "Party",
    "category_rank",
    "Issue",
    "Thesis",
    "PartyPosition",
    "PositionDetails",
    "PositionSource",
]
