"""Unit tests for the analytics helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from expressfix.server.services.analytics import average_score, utc_day_bounds


class TestUtcDayBounds:
    def test_bounds_of_utc_instant(self):
        start, end = utc_day_bounds(datetime(2026, 3, 5, 17, 30, tzinfo=timezone.utc))
        assert start == datetime(2026, 3, 5, tzinfo=timezone.utc)
        assert end == datetime(2026, 3, 6, tzinfo=timezone.utc)

    def test_other_timezone_is_converted(self):
        # 01:00 at UTC+3 is still the previous UTC day
        now = datetime(2026, 3, 5, 1, 0, tzinfo=timezone(timedelta(hours=3)))
        start, end = utc_day_bounds(now)
        assert start == datetime(2026, 3, 4, tzinfo=timezone.utc)
        assert end - start == timedelta(days=1)


class TestAverageScore:
    @pytest.mark.parametrize(
        "scores,expected",
        [([], 0), ([80], 80), ([80, 81], 81), ([70, 71, 71], 71), ([99, 70, 85, 90, 72], 83)],
    )
    def test_rounding(self, scores, expected):
        assert average_score(scores) == expected
