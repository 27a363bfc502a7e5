"""Party profile service."""

from datetime import datetime

from loguru import logger

from app.models.metrics import PartyMetrics
from app.repositories.reference import ReferenceRepository
from app.services.metrics.engagement import calculate_party_metrics


class ProfileService:
    """Party profiles with engagement metrics."""

    def __init__(self, repo: ReferenceRepository):
        self._repo = repo
        logger.debug("ProfileService initialized")

    def metrics(self, now: datetime | None = None) -> dict[str, PartyMetrics]:
        """Engagement metrics for every party with positions.

        Recomputed on each call so recency is measured against the current
        time; the datasets themselves stay cached in the repository.
        """
        metrics = calculate_party_metrics(self._repo.get_positions(), self._repo.get_theses(), now)
        logger.debug("Computed metrics for {} parties", len(metrics))
        return metrics

    def refresh(self) -> None:
        """Reread datasets from disk."""
        self._repo.refresh()

    def profiles(self, category: str | None = None, now: datetime | None = None) -> list[dict]:
        """Parties with their metrics, highest poll share first."""
        metrics = self.metrics(now)
        parties = [p for p in self._repo.get_parties() if category is None or p.category == category]
        parties = sorted(parties, key=lambda p: p.poll_percentage or 0, reverse=True)
        return [{"party": p, "metrics": metrics.get(p.id)} for p in parties]

    def profile(self, party_id: str, now: datetime | None = None) -> dict | None:
        party = self._repo.get_party(party_id)
        if party is None:
            return None
        return {"party": party, "metrics": self.metrics(now).get(party_id)}
