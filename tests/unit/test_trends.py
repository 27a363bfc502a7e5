"""Tests for poll trend statistics."""

from datetime import datetime, timezone

from app.models.polls import Poll, PollResult
from app.services.polls import trends


def poll(poll_id, date, agency="STEM", **values):
    results = [PollResult(party_id=pid, percentage=v) for pid, v in values.items()]
    return Poll(id=poll_id, date=date, agency=agency, results=results)


POLLS = [
    poll("p1", "2025-01-10", ano=30.0, spd=12.0),
    poll("p2", "2025-03-01", "Median", ano=32.0, spd=10.0),
    poll("p3", "2025-04-15", ano=33.0, spd=None, stan=8.0),
    poll("p4", "2025-05-01", ano=35.0, spd=14.0, stan=7.0),
]


class TestOrdering:
    def test_newest_first(self):
        assert [p.id for p in trends.newest_first(POLLS)] == ["p4", "p3", "p2", "p1"]

    def test_undated_last(self):
        undated = poll("x", "", ano=1.0)
        assert trends.newest_first([undated] + POLLS)[-1].id == "x"

    def test_agencies(self):
        assert trends.agencies(POLLS) == ["STEM", "Median"]

    def test_filter_by_agency(self):
        assert [p.id for p in trends.filter_by_agency(POLLS, "Median")] == ["p2"]
        assert len(trends.filter_by_agency(POLLS, trends.ALL_AGENCIES)) == 4


class TestMonthsBefore:
    def test_simple(self):
        moment = datetime(2025, 5, 1, tzinfo=timezone.utc)
        assert trends.months_before(moment, 2) == datetime(2025, 3, 1, tzinfo=timezone.utc)

    def test_year_wrap(self):
        moment = datetime(2025, 1, 15, tzinfo=timezone.utc)
        assert trends.months_before(moment, 2) == datetime(2024, 11, 15, tzinfo=timezone.utc)

    def test_clamps_day(self):
        moment = datetime(2025, 3, 31, tzinfo=timezone.utc)
        assert trends.months_before(moment, 1) == datetime(2025, 2, 28, tzinfo=timezone.utc)


class TestTimeframe:
    def test_window_oldest_first(self):
        assert [p.id for p in trends.timeframe(POLLS)] == ["p2", "p3", "p4"]

    def test_narrow_window(self):
        assert [p.id for p in trends.timeframe(POLLS, months=0)] == ["p4"]

    def test_empty(self):
        assert trends.timeframe([]) == []

    def test_undated_falls_back_to_all(self):
        undated = [poll("a", ""), poll("b", "not a date")]
        assert len(trends.timeframe(undated)) == 2


class TestAverages:
    def test_averages(self):
        window = trends.timeframe(POLLS)
        averages = {a.party_id: a for a in trends.timeframe_averages(window)}
        assert averages["ano"].average == (32 + 33 + 35) / 3
        assert averages["ano"].change == 3.0
        assert averages["ano"].samples == 3

    def test_unmeasured_ignored(self):
        averages = {a.party_id: a for a in trends.timeframe_averages(trends.timeframe(POLLS))}
        assert averages["spd"].samples == 2
        assert averages["spd"].average == 12.0
        assert averages["spd"].change == 4.0

    def test_sorted_desc(self):
        averages = trends.timeframe_averages(trends.timeframe(POLLS))
        assert [a.party_id for a in averages] == ["ano", "spd", "stan"]

    def test_party_filter(self):
        averages = trends.timeframe_averages(trends.timeframe(POLLS), ["stan"])
        assert [a.party_id for a in averages] == ["stan"]


class TestHighlights:
    def test_biggest_moves_first(self):
        highlights = trends.trend_highlights(trends.timeframe(POLLS))
        assert [h.party_id for h in highlights] == ["spd", "ano"]
        assert highlights[0].diff == 4.0
        assert highlights[0].earliest == 10.0
        assert highlights[0].latest == 14.0

    def test_needs_two_polls(self):
        assert trends.trend_highlights(POLLS[:1]) == []

    def test_limit(self):
        assert len(trends.trend_highlights(trends.timeframe(POLLS), limit=1)) == 1


class TestSeries:
    def test_series(self):
        window = trends.timeframe(POLLS)
        assert trends.series(window, "spd") == [10.0, None, 14.0]
        assert trends.series(window, "kdu") == [None, None, None]

    def test_party_ids(self):
        assert trends.party_ids(POLLS) == ["ano", "spd", "stan"]
