"""Repositories package - data access layer over the JSON datasets."""

from app.repositories.base import BaseRepository, DataNotFoundError
from app.repositories.polls import PollRepository
from app.repositories.reference import ReferenceRepository

__all__ = [
    # Base
    "BaseRepository",
    "DataNotFoundError",
    # Reference
    "ReferenceRepository",
    # Polls
    "PollRepository",
]
