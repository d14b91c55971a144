from datetime import datetime, timedelta, timezone

import pytest

from marketplace.utils.timefmt import format_timestamp, parse_timestamp, relative_time

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class TestRelativeTime:
    @pytest.mark.parametrize("delta, expected", [
        (timedelta(minutes=30), "just now"),
        (timedelta(seconds=0), "just now"),
        (timedelta(minutes=59, seconds=59), "just now"),
        (timedelta(hours=1), "1 hour ago"),
        (timedelta(hours=3), "3 hours ago"),
        (timedelta(hours=23, minutes=59), "23 hours ago"),
        (timedelta(days=1), "1 day ago"),
        (timedelta(days=2), "2 days ago"),
        (timedelta(days=29, hours=23), "29 days ago"),
        (timedelta(days=30), "1 month ago"),
        (timedelta(days=59), "1 month ago"),
        (timedelta(days=90), "3 months ago"),
        (timedelta(days=365), "12 months ago"),
    ])
    def test_buckets(self, delta, expected):
        assert relative_time(NOW, NOW - delta) == expected

    def test_future_timestamp_is_just_now(self):
        assert relative_time(NOW, NOW + timedelta(hours=5)) == "just now"


class TestTimestamps:
    def test_format_then_parse(self):
        dt = datetime(2026, 3, 1, 9, 30, 15, 123456, tzinfo=timezone.utc)
        stamp = format_timestamp(dt)
        assert stamp == "2026-03-01T09:30:15.123456Z"
        assert parse_timestamp(stamp) == dt

    def test_parse_plain_iso(self):
        assert parse_timestamp("2026-03-01T09:30:00Z") == datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)
        assert parse_timestamp("2026-03-01T09:30:00") == datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)

    def test_stamps_sort_chronologically(self):
        earlier = format_timestamp(NOW)
        later = format_timestamp(NOW + timedelta(microseconds=1))
        assert earlier < later
