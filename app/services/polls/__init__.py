"""Poll services."""

from app.services.polls.service import PollService

__all__ = [
    "PollService",
]
