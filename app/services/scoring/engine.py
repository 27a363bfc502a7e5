"""Scoring engine - compares user answers with declared party positions.

Pure functions over in-memory snapshots: nothing here performs I/O, logs or
mutates its inputs. Missing data (no position, no answers) degrades to zero
scores instead of raising.
"""

import random
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace

from app.models.reference import Issue, Party, PartyPosition, Thesis, category_rank
from app.models.scoring import DetailedComparison, IssueInsight, ScoreResult, ThesisResult, UserAnswer
from helpers import formulas

QUICK = "quick"
FULL = "full"
MODES = (QUICK, FULL)
QUICK_MODE_SIZE = 10


def index_positions(positions: Iterable[PartyPosition], party_id: str) -> dict[str, PartyPosition]:
    """Positions of one party keyed by thesis. First occurrence wins on duplicates."""
    by_thesis: dict[str, PartyPosition] = {}
    for position in positions:
        if position.party_id == party_id and position.thesis_id not in by_thesis:
            by_thesis[position.thesis_id] = position
    return by_thesis


def calculate_party_score(
    answers: Mapping[str, UserAnswer],
    positions: Iterable[PartyPosition],
    party: Party,
) -> ScoreResult:
    """Score a single party against the user's answers."""
    party_positions = index_positions(positions, party.id)

    thesis_results: list[ThesisResult] = []
    total_weighted = 0.0
    max_weighted = 0.0
    total_confidence = 0.0
    answered = 0
    non_skipped = 0

    for thesis_id, answer in answers.items():
        if answer.skipped:
            continue
        non_skipped += 1

        position = party_positions.get(thesis_id)
        if position is None:
            continue

        difference = abs(answer.value - position.value)
        contribution = formulas.agreement_score(answer.value, position.value) * answer.weight

        total_weighted += contribution
        max_weighted += answer.weight
        total_confidence += position.confidence
        answered += 1

        thesis_results.append(
            ThesisResult(
                thesis_id=thesis_id,
                user_value=answer.value,
                party_value=position.value,
                difference=difference,
                weight=answer.weight,
                confidence=position.confidence,
                contribution=contribution,
            )
        )

    agreement = total_weighted / max_weighted * 100 if max_weighted > 0 else 0.0
    coverage = answered / non_skipped * 100 if non_skipped else 0.0

    return ScoreResult(
        party_id=party.id,
        party_name=party.name,
        party_category=party.category,
        total_score=total_weighted,
        max_possible_score=max_weighted,
        agreement_percentage=formulas.round_half_up(agreement, 2),
        confidence_score=formulas.round_half_up(formulas.mean(total_confidence, answered), 2),
        coverage_percentage=int(formulas.round_half_up(coverage)),
        thesis_results=thesis_results,
    )


def calculate_scores(
    answers: Mapping[str, UserAnswer],
    positions: list[PartyPosition],
    parties: list[Party],
) -> list[ScoreResult]:
    """Score every party; main parties first, each group by agreement descending."""
    return rank_results([calculate_party_score(answers, positions, party) for party in parties])


def rank_results(results: list[ScoreResult]) -> list[ScoreResult]:
    """Main parties first, then by agreement descending. Ties keep input order."""
    return sorted(results, key=lambda r: (category_rank(r.party_category), -r.agreement_percentage))


def apply_red_line_policy(results: list[ScoreResult], red_line_thesis_ids: Iterable[str]) -> list[ScoreResult]:
    """Deduct a flat penalty for each sharply opposed red-line thesis, floored at 0."""
    red_lines = set(red_line_thesis_ids)
    if not red_lines:
        return [replace(r) for r in results]

    penalized = []
    for result in results:
        differences = [t.difference for t in result.thesis_results if t.thesis_id in red_lines]
        score = max(0.0, result.agreement_percentage - formulas.red_line_penalty(differences))
        penalized.append(replace(result, agreement_percentage=formulas.round_half_up(score, 2)))
    return penalized


def generate_detailed_comparison(answers: Mapping[str, UserAnswer], result: ScoreResult) -> DetailedComparison:
    """Split a party's thesis results into strong/partial agreement and strong disagreement."""
    strong = [t for t in result.thesis_results if t.difference <= 1]
    partial = [t for t in result.thesis_results if t.difference == 2]
    opposed = [t for t in result.thesis_results if t.difference >= 3]

    return DetailedComparison(
        strong_agreements=sorted(strong, key=lambda t: t.contribution, reverse=True),
        partial_agreements=sorted(partial, key=lambda t: t.contribution, reverse=True),
        strong_disagreements=sorted(opposed, key=lambda t: t.weight, reverse=True),
    )


@dataclass
class _IssueTotals:
    """Running totals of one issue's thesis results."""

    weight: float = 0.0
    contribution: float = 0.0
    confidence: float = 0.0
    count: int = 0

    def add(self, thesis_result: ThesisResult) -> None:
        self.weight += thesis_result.weight
        self.contribution += thesis_result.contribution
        self.confidence += thesis_result.confidence
        self.count += 1

    @property
    def alignment(self) -> float:
        if self.weight <= 0:
            return 0.0
        return min(1.0, max(0.0, self.contribution / self.weight))


def build_issue_insights(
    result: ScoreResult,
    theses: Iterable[Thesis],
    issues: Iterable[Issue],
) -> list[IssueInsight]:
    """Per-issue alignment of the user with a party, most answered issues first."""
    thesis_map = {t.id: t for t in theses}
    issue_map = {i.id: i for i in issues}

    totals: dict[str, _IssueTotals] = {}
    for thesis_result in result.thesis_results:
        thesis = thesis_map.get(thesis_result.thesis_id)
        if thesis is None:
            continue
        totals.setdefault(thesis.issue_id, _IssueTotals()).add(thesis_result)

    insights = []
    for issue_id, bucket in totals.items():
        issue = issue_map.get(issue_id)
        insights.append(
            IssueInsight(
                issue_id=issue_id,
                title=issue.title if issue else issue_id,
                description=issue.description if issue else "",
                alignment=bucket.alignment,
                avg_confidence=formulas.mean(bucket.confidence, bucket.count),
                count=bucket.count,
            )
        )

    return sorted(insights, key=lambda i: (-i.count, -i.alignment))


def select_theses(theses: Iterable[Thesis], mode: str = FULL, seed: int | None = None) -> list[Thesis]:
    """Questions for a quiz run: all active theses, or a random sample of 10 in quick mode."""
    if mode not in MODES:
        raise ValueError(f"Unknown quiz mode: {mode}")

    active = sorted((t for t in theses if t.is_active), key=lambda t: t.order)
    if mode == FULL:
        return active

    shuffled = list(active)
    random.Random(seed).shuffle(shuffled)
    return shuffled[:QUICK_MODE_SIZE]
