"""Tests for date parsing, long-form formatting and day arithmetic."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from memo_engine.brief.dates import (
    DATE_NOT_AVAILABLE,
    STALE_DAYS,
    days_since,
    fixed_clock,
    format_long_date,
    parse_timestamp,
)

from conftest import NOW, days_ago


class TestParseTimestamp:
    def test_offset_timestamp(self):
        parsed = parse_timestamp("2025-11-15T14:00:00-07:00")
        assert parsed == datetime(2025, 11, 15, 21, 0, tzinfo=timezone.utc)

    def test_z_suffix(self):
        parsed = parse_timestamp("2025-11-15T21:00:00Z")
        assert parsed == datetime(2025, 11, 15, 21, 0, tzinfo=timezone.utc)

    def test_date_only_is_utc_midnight(self):
        parsed = parse_timestamp("2025-11-02")
        assert parsed == datetime(2025, 11, 2, tzinfo=timezone.utc)

    def test_garbage_returns_none(self):
        assert parse_timestamp("not-a-date") is None

    def test_empty_and_none(self):
        assert parse_timestamp("") is None
        assert parse_timestamp(None) is None


class TestFormatLongDate:
    def test_long_form_with_weekday_and_zone(self):
        assert (
            format_long_date("2025-11-15T14:00:00-07:00")
            == "Saturday, November 15, 2025 at 9:00 PM UTC"
        )

    def test_morning_hour(self):
        assert (
            format_long_date("2025-11-02T09:05:00+00:00")
            == "Sunday, November 2, 2025 at 9:05 AM UTC"
        )

    def test_midnight_renders_as_twelve_am(self):
        assert format_long_date("2025-11-02") == "Sunday, November 2, 2025 at 12:00 AM UTC"

    def test_invalid_returns_sentinel_and_warns(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert format_long_date("31/02/2025") == DATE_NOT_AVAILABLE
        assert "format_long_date" in caplog.text

    def test_missing_returns_sentinel(self):
        assert format_long_date(None) == DATE_NOT_AVAILABLE
        assert format_long_date("") == DATE_NOT_AVAILABLE


class TestDaysSince:
    def test_whole_days(self):
        assert days_since(days_ago(40), NOW) == 40

    def test_same_instant_is_zero(self):
        assert days_since(NOW.isoformat(), NOW) == 0

    def test_partial_days_floor(self):
        stamp = (NOW - timedelta(days=2, hours=23)).isoformat()
        assert days_since(stamp, NOW) == 2

    def test_future_dates_are_absolute(self):
        stamp = (NOW + timedelta(days=5)).isoformat()
        assert days_since(stamp, NOW) == 5

    def test_invalid_returns_stale_sentinel_and_warns(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert days_since("yesterday-ish", NOW) == STALE_DAYS
        assert "days_since" in caplog.text

    def test_missing_returns_stale_sentinel(self):
        assert days_since(None, NOW) == 999

    def test_naive_now_is_treated_as_utc(self):
        naive_now = NOW.replace(tzinfo=None)
        assert days_since(days_ago(3), naive_now) == 3


class TestFixedClock:
    def test_returns_frozen_moment(self):
        clock = fixed_clock(NOW)
        assert clock() == NOW
        assert clock() == NOW

    def test_naive_moment_becomes_utc(self):
        clock = fixed_clock(datetime(2025, 1, 1, 8, 0))
        assert clock().tzinfo is timezone.utc


class TestExtendedIsoForms:
    def test_offset_without_colon(self):
        assert parse_timestamp("2025-11-15T14:00:00-0700") == datetime(
            2025, 11, 15, 21, 0, tzinfo=timezone.utc
        )

    def test_fractional_seconds_with_z(self):
        parsed = parse_timestamp("2025-11-15T21:00:00.1Z")
        assert parsed == datetime(2025, 11, 15, 21, 0, 0, 100000, tzinfo=timezone.utc)
