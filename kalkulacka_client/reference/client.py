"""Reference dataset client - parties, issues, theses, positions."""

from kalkulacka_client.base import BaseClient
from settings import ISSUES_FILE, PARTIES_FILE, POSITIONS_FILE, THESES_FILE


class ReferenceClient(BaseClient):
    """Client for the static reference datasets."""

    async def parties(self) -> list[dict]:
        """GET parties.json"""
        return await self._get(PARTIES_FILE)

    async def issues(self) -> list[dict]:
        """GET issues.json"""
        return await self._get(ISSUES_FILE)

    async def theses(self) -> list[dict]:
        """GET theses.json"""
        return await self._get(THESES_FILE)

    async def positions(self) -> list[dict]:
        """GET party_positions.json"""
        return await self._get(POSITIONS_FILE)
