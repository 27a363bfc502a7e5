"""Calculator service - quiz questions and result pages."""

from collections.abc import Iterable, Mapping

from loguru import logger

from app.models.reference import Thesis
from app.models.scoring import DetailedComparison, IssueInsight, ScoreResult, UserAnswer
from app.repositories.reference import ReferenceRepository
from app.services.scoring.engine import (
    FULL,
    apply_red_line_policy,
    build_issue_insights,
    calculate_scores,
    generate_detailed_comparison,
    rank_results,
    select_theses,
)


class CalculatorService:
    """Runs the scoring engine over the reference datasets."""

    def __init__(self, repo: ReferenceRepository):
        self._repo = repo
        logger.debug("CalculatorService initialized")

    def questions(self, mode: str = FULL, seed: int | None = None) -> list[Thesis]:
        """Theses to ask in a quiz run."""
        theses = select_theses(self._repo.get_theses(), mode, seed)
        logger.info("Selected {} theses ({} mode)", len(theses), mode)
        return theses

    def evaluate(
        self,
        answers: Mapping[str, UserAnswer],
        red_lines: Iterable[str] = (),
    ) -> list[ScoreResult]:
        """Ranked results for a quiz submission, red-line penalties applied."""
        results = calculate_scores(answers, self._repo.get_positions(), self._repo.get_parties())

        red_lines = list(red_lines)
        if red_lines:
            results = rank_results(apply_red_line_policy(results, red_lines))

        answered = sum(1 for a in answers.values() if not a.skipped)
        logger.info("Scored {} parties for {} answers ({} red lines)", len(results), answered, len(red_lines))
        return results

    def result_for(
        self,
        answers: Mapping[str, UserAnswer],
        party_id: str,
        red_lines: Iterable[str] = (),
    ) -> ScoreResult | None:
        return next((r for r in self.evaluate(answers, red_lines) if r.party_id == party_id), None)

    def comparison(self, answers: Mapping[str, UserAnswer], party_id: str) -> DetailedComparison | None:
        """Agreement breakdown against one party."""
        result = self.result_for(answers, party_id)
        if result is None:
            logger.warning("No result for party {}", party_id)
            return None
        return generate_detailed_comparison(answers, result)

    def issue_insights(self, answers: Mapping[str, UserAnswer], party_id: str) -> list[IssueInsight]:
        """Per-issue alignment with one party."""
        result = self.result_for(answers, party_id)
        if result is None:
            return []
        return build_issue_insights(result, self._repo.get_theses(), self._repo.get_issues())
