"""Poll dataset client."""

from kalkulacka_client.base import BaseClient
from settings import POLLS_FILE


class PollClient(BaseClient):
    """Client for the aggregated poll dataset."""

    async def polls(self) -> list[dict]:
        """GET complete-polls.json"""
        return await self._get(POLLS_FILE)
