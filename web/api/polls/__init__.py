"""Poll API."""

from web.api.polls.views import get_trends

__all__ = [
    "get_trends",
]
