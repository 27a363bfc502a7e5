"""Poll dataset client."""

from kalkulacka_client.polls.client import PollClient
from kalkulacka_client.polls.schemas import PollResultSchema, PollSchema

__all__ = [
    "PollClient",
    "PollSchema",
    "PollResultSchema",
]
