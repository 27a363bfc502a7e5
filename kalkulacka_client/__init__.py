"""Dataset client package."""

from kalkulacka_client.base import BaseClient, safe_request, set_api_config
from kalkulacka_client.polls import PollClient
from kalkulacka_client.reference import ReferenceClient

__all__ = [
    # Base
    "BaseClient",
    "safe_request",
    "set_api_config",
    # Clients
    "ReferenceClient",
    "PollClient",
]
