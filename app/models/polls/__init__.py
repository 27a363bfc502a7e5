"""Poll models."""

from app.models.polls.entities import Poll, PollAverage, PollResult, TrendHighlight

__all__ = [
    "Poll",
    "PollResult",
    "PollAverage",
    "TrendHighlight",
]
