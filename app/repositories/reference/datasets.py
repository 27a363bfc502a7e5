"""Reference repository - parties, issues, theses and party positions."""

from app.models.reference import Issue, Party, PartyPosition, Thesis
from app.repositories.base import BaseRepository
from kalkulacka_client.reference import IssueSchema, PartyPositionSchema, PartySchema, ThesisSchema
from settings import ISSUES_FILE, PARTIES_FILE, POSITIONS_FILE, THESES_FILE


class ReferenceRepository(BaseRepository):
    """Repository for the static reference datasets."""

    def get_parties(self) -> list[Party]:
        return self._cached("parties", lambda: self.load_entities(PARTIES_FILE, PartySchema))

    def get_party(self, party_id: str) -> Party | None:
        return next((p for p in self.get_parties() if p.id == party_id), None)

    def get_issues(self) -> list[Issue]:
        """Issues in display order."""

        def fetch():
            return sorted(self.load_entities(ISSUES_FILE, IssueSchema), key=lambda i: i.order)

        return self._cached("issues", fetch)

    def get_theses(self) -> list[Thesis]:
        return self._cached("theses", lambda: self.load_entities(THESES_FILE, ThesisSchema))

    def get_positions(self) -> list[PartyPosition]:
        return self._cached("positions", lambda: self.load_entities(POSITIONS_FILE, PartyPositionSchema))
