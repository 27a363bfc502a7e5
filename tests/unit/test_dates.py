"""Tests for timestamp helpers."""

from datetime import datetime, timezone

from helpers.dates import age_in_days, parse_timestamp, to_iso


class TestParseTimestamp:
    def test_zulu(self):
        assert parse_timestamp("2025-05-20T10:00:00Z") == datetime(2025, 5, 20, 10, tzinfo=timezone.utc)

    def test_offset_normalized(self):
        assert parse_timestamp("2025-05-20T12:00:00+02:00") == datetime(2025, 5, 20, 10, tzinfo=timezone.utc)

    def test_date_only_is_utc(self):
        assert parse_timestamp("2025-05-20").tzinfo == timezone.utc

    def test_unusable(self):
        assert parse_timestamp(None) is None
        assert parse_timestamp("") is None
        assert parse_timestamp("květen 2025") is None


class TestFormatting:
    def test_to_iso(self):
        assert to_iso(datetime(2025, 5, 20, 10, 30, tzinfo=timezone.utc)) == "2025-05-20T10:30:00.000Z"

    def test_age(self):
        now = datetime(2025, 6, 1, tzinfo=timezone.utc)
        assert age_in_days(datetime(2025, 5, 22, tzinfo=timezone.utc), now) == 10
        assert age_in_days(datetime(2025, 6, 11, tzinfo=timezone.utc), now) == -10
