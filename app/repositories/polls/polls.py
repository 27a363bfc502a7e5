"""Poll repository."""

from datetime import datetime, timezone

from loguru import logger

from app.models.polls import Poll
from app.repositories.base import BaseRepository
from kalkulacka_client.polls import PollSchema
from settings import POLLS_FILE

_UNDATED = datetime.min.replace(tzinfo=timezone.utc)


class PollRepository(BaseRepository):
    """Repository for published polls."""

    def get_polls(self) -> list[Poll]:
        """All polls, newest first."""

        def fetch():
            polls = self.load_entities(POLLS_FILE, PollSchema)
            polls.sort(key=lambda p: p.moment or _UNDATED, reverse=True)
            logger.debug("get_polls(): {} polls", len(polls))
            return polls

        return self._cached("polls", fetch)
