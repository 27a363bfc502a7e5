"""Tests for the scoring engine."""

import pytest

from app.models.reference import Issue, Party, PartyPosition, Thesis
from app.models.scoring import ScoreResult, ThesisResult, UserAnswer
from app.services.scoring import (
    FULL,
    QUICK,
    apply_red_line_policy,
    build_issue_insights,
    calculate_party_score,
    calculate_scores,
    generate_detailed_comparison,
    select_theses,
)


def answers(*items):
    """(thesis_id, value, weight) tuples keyed by thesis."""
    return {tid: UserAnswer(thesis_id=tid, value=value, weight=weight) for tid, value, weight in items}


def position(party_id, thesis_id, value, confidence=1.0):
    return PartyPosition(party_id=party_id, thesis_id=thesis_id, value=value, confidence=confidence)


def thesis_result(thesis_id, difference, weight=1, contribution=1.0):
    return ThesisResult(
        thesis_id=thesis_id,
        user_value=0,
        party_value=difference,
        difference=difference,
        weight=weight,
        confidence=1.0,
        contribution=contribution,
    )


def score(agreement, thesis_results=()):
    return ScoreResult(
        party_id="p",
        party_name="P",
        party_category="main",
        total_score=0.0,
        max_possible_score=0.0,
        agreement_percentage=agreement,
        confidence_score=1.0,
        coverage_percentage=100,
        thesis_results=list(thesis_results),
    )


PARTY = Party(id="ano", name="ANO", category="main")


class TestPartyScore:
    def test_identical_answers(self):
        user = answers(("t1", 2, 1), ("t2", -1, 3))
        result = calculate_party_score(user, [position("ano", "t1", 2), position("ano", "t2", -1)], PARTY)
        assert result.agreement_percentage == 100
        assert result.coverage_percentage == 100

    def test_opposite_answers(self):
        user = answers(("t1", 2, 1), ("t2", -2, 2))
        result = calculate_party_score(user, [position("ano", "t1", -2), position("ano", "t2", 2)], PARTY)
        assert result.agreement_percentage == 0

    def test_weighted_average(self):
        user = answers(("t1", 2, 3), ("t2", 2, 1))
        result = calculate_party_score(user, [position("ano", "t1", 2), position("ano", "t2", -2)], PARTY)
        assert result.total_score == 3
        assert result.max_possible_score == 4
        assert result.agreement_percentage == 75

    def test_weight_moves_towards_thesis_agreement(self):
        positions = [position("ano", "t1", 2), position("ano", "t2", -2)]
        low = calculate_party_score(answers(("t1", 2, 1), ("t2", 2, 1)), positions, PARTY)
        high = calculate_party_score(answers(("t1", 2, 3), ("t2", 2, 1)), positions, PARTY)
        assert high.agreement_percentage > low.agreement_percentage

    def test_skipped_answers_ignored(self):
        positions = [position("ano", "t1", 2), position("ano", "t2", -2)]
        result = calculate_party_score(answers(("t1", 2, 1), ("t2", 2, 0)), positions, PARTY)
        assert result.agreement_percentage == 100
        assert [t.thesis_id for t in result.thesis_results] == ["t1"]

    def test_coverage(self):
        user = answers(("t1", 1, 1), ("t2", 1, 1))
        result = calculate_party_score(user, [position("ano", "t1", 1)], PARTY)
        assert result.coverage_percentage == 50

    def test_no_positions(self):
        result = calculate_party_score(answers(("t1", 1, 1)), [], PARTY)
        assert result.agreement_percentage == 0
        assert result.confidence_score == 0
        assert result.coverage_percentage == 0
        assert result.thesis_results == []

    def test_all_skipped(self):
        result = calculate_party_score(answers(("t1", 1, 0)), [position("ano", "t1", 1)], PARTY)
        assert result.agreement_percentage == 0
        assert result.coverage_percentage == 0

    def test_confidence_average(self):
        user = answers(("t1", 1, 1), ("t2", 1, 1))
        positions = [position("ano", "t1", 1, 0.5), position("ano", "t2", 1, 1.0)]
        assert calculate_party_score(user, positions, PARTY).confidence_score == 0.75

    def test_first_duplicate_wins(self):
        positions = [position("ano", "t1", 2), position("ano", "t1", -2)]
        result = calculate_party_score(answers(("t1", 2, 1)), positions, PARTY)
        assert result.agreement_percentage == 100
        assert len(result.thesis_results) == 1

    def test_other_party_positions_ignored(self):
        result = calculate_party_score(answers(("t1", 2, 1)), [position("spd", "t1", 2)], PARTY)
        assert result.coverage_percentage == 0

    def test_rounding(self):
        user = answers(("t1", 2, 1), ("t2", 2, 1), ("t3", 2, 1))
        positions = [position("ano", "t1", 2), position("ano", "t2", 2), position("ano", "t3", 1)]
        assert calculate_party_score(user, positions, PARTY).agreement_percentage == 91.67


class TestRanking:
    def test_main_parties_first(self):
        parties = [
            Party(id="small", name="Small", category="secondary"),
            Party(id="big", name="Big", category="main"),
        ]
        positions = [position("small", "t1", 2), position("big", "t1", -2)]
        results = calculate_scores(answers(("t1", 2, 1)), positions, parties)
        assert [r.party_id for r in results] == ["big", "small"]
        assert results[0].agreement_percentage < results[1].agreement_percentage

    def test_agreement_descending_within_category(self):
        parties = [Party(id=pid, name=pid, category="main") for pid in ("a", "b", "c")]
        positions = [position("a", "t1", -2), position("b", "t1", 2), position("c", "t1", 0)]
        results = calculate_scores(answers(("t1", 2, 1)), positions, parties)
        assert [r.party_id for r in results] == ["b", "c", "a"]

    def test_ties_keep_input_order(self):
        parties = [Party(id=pid, name=pid, category="main") for pid in ("x", "y")]
        results = calculate_scores(answers(("t1", 2, 1)), [], parties)
        assert [r.party_id for r in results] == ["x", "y"]


class TestRedLines:
    def test_penalty(self):
        result = score(100, [thesis_result("t1", 3)])
        assert apply_red_line_policy([result], ["t1"])[0].agreement_percentage == 80

    def test_full_opposition_penalty(self):
        result = score(100, [thesis_result("t1", 4)])
        assert apply_red_line_policy([result], ["t1"])[0].agreement_percentage == 80

    def test_penalty_per_conflict(self):
        result = score(90, [thesis_result("t1", 4), thesis_result("t2", 3)])
        assert apply_red_line_policy([result], ["t1", "t2"])[0].agreement_percentage == 50

    def test_floor_at_zero(self):
        result = score(10, [thesis_result("t1", 4)])
        assert apply_red_line_policy([result], ["t1"])[0].agreement_percentage == 0

    def test_small_difference_not_penalized(self):
        result = score(70, [thesis_result("t1", 2)])
        assert apply_red_line_policy([result], ["t1"])[0].agreement_percentage == 70

    def test_no_red_lines(self):
        results = [score(55.5, [thesis_result("t1", 4)])]
        penalized = apply_red_line_policy(results, [])
        assert penalized == results
        assert penalized[0] is not results[0]

    def test_inputs_untouched(self):
        result = score(100, [thesis_result("t1", 4)])
        apply_red_line_policy([result], ["t1"])
        assert result.agreement_percentage == 100


class TestDetailedComparison:
    def test_bands(self):
        result = score(
            50,
            [
                thesis_result("a", 0),
                thesis_result("b", 1),
                thesis_result("c", 2),
                thesis_result("d", 3),
                thesis_result("e", 4),
            ],
        )
        comparison = generate_detailed_comparison({}, result)
        assert {t.thesis_id for t in comparison.strong_agreements} == {"a", "b"}
        assert [t.thesis_id for t in comparison.partial_agreements] == ["c"]
        assert {t.thesis_id for t in comparison.strong_disagreements} == {"d", "e"}

    def test_ordering(self):
        result = score(
            50,
            [
                thesis_result("a", 0, contribution=1.0),
                thesis_result("b", 0, contribution=3.0),
                thesis_result("c", 4, weight=1),
                thesis_result("d", 3, weight=3),
            ],
        )
        comparison = generate_detailed_comparison({}, result)
        assert [t.thesis_id for t in comparison.strong_agreements] == ["b", "a"]
        assert [t.thesis_id for t in comparison.strong_disagreements] == ["d", "c"]

    def test_empty(self):
        comparison = generate_detailed_comparison({}, score(0))
        assert comparison.strong_agreements == []
        assert comparison.partial_agreements == []
        assert comparison.strong_disagreements == []


class TestIssueInsights:
    def test_grouped_by_issue(self):
        theses = [
            Thesis(id="e1", issue_id="economy", text="Nižší daně"),
            Thesis(id="e2", issue_id="economy", text="Vyrovnaný rozpočet"),
            Thesis(id="m1", issue_id="migration", text="Kvóty"),
        ]
        issues = [Issue(id="economy", title="Ekonomika"), Issue(id="migration", title="Migrace")]
        user = answers(("e1", 2, 1), ("e2", 2, 1), ("m1", 2, 1))
        positions = [position("ano", "e1", 2), position("ano", "e2", 0), position("ano", "m1", 2)]
        result = calculate_party_score(user, positions, PARTY)

        insights = build_issue_insights(result, theses, issues)
        assert [i.issue_id for i in insights] == ["economy", "migration"]
        assert insights[0].title == "Ekonomika"
        assert insights[0].count == 2
        assert insights[0].alignment == 0.75
        assert insights[1].alignment == 1.0

    def test_unknown_thesis_dropped(self):
        theses = [Thesis(id="t1", issue_id="energy", text="Jádro")]
        user = answers(("t1", 1, 1), ("t2", 1, 2))
        positions = [position("ano", "t1", 1, 0.6), position("ano", "t2", 1, 0.9)]
        insights = build_issue_insights(calculate_party_score(user, positions, PARTY), theses, [])
        assert len(insights) == 1
        assert insights[0].count == 1
        assert insights[0].avg_confidence == 0.6

    def test_unknown_issue_uses_id(self):
        theses = [Thesis(id="t1", issue_id="energy", text="Jádro")]
        result = calculate_party_score(answers(("t1", 1, 1)), [position("ano", "t1", 1)], PARTY)
        insights = build_issue_insights(result, theses, [])
        assert insights[0].title == "energy"


class TestSelectTheses:
    THESES = [Thesis(id=f"t{i}", issue_id="x", text=f"Teze {i}", order=i) for i in range(15, 0, -1)]

    def test_full_mode(self):
        selected = select_theses(self.THESES, FULL)
        assert [t.order for t in selected] == list(range(1, 16))

    def test_inactive_skipped(self):
        theses = self.THESES + [Thesis(id="off", issue_id="x", text="Vypnuto", is_active=False)]
        assert "off" not in {t.id for t in select_theses(theses, FULL)}

    def test_quick_mode(self):
        selected = select_theses(self.THESES, QUICK, seed=1)
        assert len(selected) == 10
        assert len({t.id for t in selected}) == 10

    def test_quick_mode_seeded(self):
        first = select_theses(self.THESES, QUICK, seed=42)
        second = select_theses(self.THESES, QUICK, seed=42)
        assert [t.id for t in first] == [t.id for t in second]

    def test_quick_mode_few_theses(self):
        assert len(select_theses(self.THESES[:4], QUICK, seed=3)) == 4

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            select_theses(self.THESES, "medium")
