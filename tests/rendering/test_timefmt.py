"""Tests for pkgdoc.rendering.timefmt."""

from datetime import UTC, datetime, timedelta

import pytest

from pkgdoc.rendering.timefmt import relative_age, relative_time


class TestRelativeTime:
    @pytest.mark.parametrize(
        "seconds, expected",
        [
            (0, "just now"),
            (0.999, "just now"),
            (1, "one second ago"),
            (1.5, "one second ago"),
            (1.9, "one second ago"),
            (2, "2 seconds ago"),
            (59, "59 seconds ago"),
            (60, "one minute ago"),
            (90, "one minute ago"),
            (119, "one minute ago"),
            (120, "2 minutes ago"),
            (3599, "59 minutes ago"),
            (3600, "one hour ago"),
            (5400, "one hour ago"),
            (7199, "one hour ago"),
            (7200, "2 hours ago"),
            (86399, "23 hours ago"),
            (86400, "one day ago"),
            (90000, "one day ago"),
            (172799, "one day ago"),
            (172800, "2 days ago"),
            (200000, "2 days ago"),
            (30 * 86400 + 5, "30 days ago"),
        ],
    )
    def test_buckets(self, now, seconds, expected):
        assert relative_time(now - timedelta(seconds=seconds), now=now) == expected

    def test_future_timestamp_is_just_now(self, now):
        assert relative_time(now + timedelta(hours=3), now=now) == "just now"

    def test_naive_datetimes_are_utc(self, now):
        naive = now.replace(tzinfo=None) - timedelta(minutes=5)
        assert relative_time(naive, now=now) == "5 minutes ago"

    def test_defaults_to_current_time(self):
        assert relative_time(datetime.now(UTC)) == "just now"


class TestRelativeAge:
    def test_counts_are_floored(self):
        assert relative_age(timedelta(minutes=2, seconds=59)) == "2 minutes ago"
        assert relative_age(timedelta(hours=5, minutes=59)) == "5 hours ago"
