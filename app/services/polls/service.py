"""Poll trends service."""

from loguru import logger

from app.repositories.polls import PollRepository
from app.services.polls import trends


class PollService:
    """Timeframe statistics over published polls."""

    def __init__(self, repo: PollRepository):
        self._repo = repo
        logger.debug("PollService initialized")

    def agencies(self) -> list[str]:
        return trends.agencies(self._repo.get_polls())

    def overview(self, agency: str = trends.ALL_AGENCIES, party_ids: list[str] | None = None) -> dict:
        """Timeframe polls, per-party averages and the biggest movers."""
        polls = trends.filter_by_agency(self._repo.get_polls(), agency)
        window = trends.timeframe(polls)
        all_parties = trends.party_ids(window)
        selected = party_ids if party_ids is not None else all_parties

        series = {}
        for party_id in selected:
            values = trends.series(window, party_id)
            if any(v is not None for v in values):
                series[party_id] = values

        logger.info("Poll overview: agency={}, {} of {} polls in timeframe", agency, len(window), len(polls))
        return {
            "agency": agency,
            "polls": window,
            "start": window[0].date if window else None,
            "end": window[-1].date if window else None,
            "parties": all_parties,
            "series": series,
            "averages": trends.timeframe_averages(window, selected),
            "highlights": trends.trend_highlights(window, selected),
        }
