"""Tests for formulas module."""

from helpers import formulas


class TestRounding:
    def test_half_goes_up(self):
        assert formulas.round_half_up(2.5) == 3
        assert formulas.round_half_up(0.125, 2) == 0.13

    def test_negative_half_goes_up(self):
        assert formulas.round_half_up(-2.5) == -2

    def test_one_decimal(self):
        assert formulas.round_half_up(66.66, 1) == 66.7


class TestAgreement:
    def test_identical(self):
        assert formulas.agreement_score(2, 2) == 1.0

    def test_opposed(self):
        assert formulas.agreement_score(2, -2) == 0.0

    def test_one_step(self):
        assert formulas.agreement_score(1, 0) == 0.75

    def test_symmetric(self):
        assert formulas.agreement_score(-1, 2) == formulas.agreement_score(2, -1)


class TestRatios:
    def test_mean_empty(self):
        assert formulas.mean(5.0, 0) == 0.0

    def test_share_empty(self):
        assert formulas.share(3, 0) == 0.0

    def test_capped_ratio(self):
        assert formulas.capped_ratio(2, 4) == 0.5
        assert formulas.capped_ratio(5, 4) == 1.0
        assert formulas.capped_ratio(1, 0) == 1.0


class TestDepth:
    def test_word_count(self):
        assert formulas.word_count(None) == 0
        assert formulas.word_count("  daně  pro   firmy ") == 3

    def test_empty(self):
        assert formulas.depth_score(0, 0) == 0.0

    def test_saturates(self):
        assert formulas.depth_score(500, 20) == 1.0

    def test_justification_only(self):
        assert abs(formulas.depth_score(60, 0) - 0.3) < 1e-9

    def test_evidence_only(self):
        assert abs(formulas.depth_score(0, 2) - 0.2) < 1e-9


class TestRecency:
    def test_unknown(self):
        assert formulas.recency_score(None) == 0.4

    def test_steps(self):
        assert formulas.recency_score(0) == 1.0
        assert formulas.recency_score(90) == 1.0
        assert formulas.recency_score(91) == 0.85
        assert formulas.recency_score(365) == 0.7
        assert formulas.recency_score(500) == 0.55
        assert formulas.recency_score(700) == 0.45
        assert formulas.recency_score(2000) == 0.3

    def test_future_uses_absolute_age(self):
        assert formulas.recency_score(-100) == formulas.recency_score(100)

    def test_monotonic(self):
        ages = [0, 30, 120, 200, 400, 600, 800, 5000]
        scores = [formulas.recency_score(a) for a in ages]
        assert scores == sorted(scores, reverse=True)


class TestEngagementIndex:
    def test_bounds(self):
        assert formulas.engagement_index(0, 0, 0, 0) == 0.0
        assert formulas.engagement_index(1, 1, 1, 1) == 100.0

    def test_coverage_weighs_most(self):
        assert formulas.engagement_index(1, 0, 0, 0) > formulas.engagement_index(0, 1, 0, 0)

    def test_one_decimal(self):
        assert formulas.engagement_index(1, 0, 1, 0.4) == 69.0


class TestRedLinePenalty:
    def test_no_conflict(self):
        assert formulas.red_line_penalty([0, 1, 2]) == 0

    def test_per_conflict(self):
        assert formulas.red_line_penalty([3, 4, 1]) == 40
