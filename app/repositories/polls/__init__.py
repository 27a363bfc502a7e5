"""Poll repositories."""

from app.repositories.polls.polls import PollRepository

__all__ = [
    "PollRepository",
]
