"""
Tests for the midnight splitter.
"""

from datetime import date

import pendulum

from timeengine.domain.models import TimeRange
from timeengine.domain.splitter import split_cross_midnight


class TestSplitCrossMidnight:
    """Tests for split_cross_midnight."""

    def test_same_day_entry_is_returned_unchanged(self, monday):
        """Test a same-day entry is not split."""
        ranges = split_cross_midnight(monday, "09:00", "17:00")

        assert ranges == [TimeRange(monday, "09:00", "17:00")]

    def test_crossing_entry_gives_two_ranges(self, monday):
        """Test a cross-midnight entry is split in two."""
        ranges = split_cross_midnight(monday, "21:00", "02:00")

        assert ranges == [
            TimeRange(pendulum.date(2024, 1, 15), "21:00", "24:00"),
            TimeRange(pendulum.date(2024, 1, 16), "00:00", "02:00"),
        ]

    def test_end_at_midnight_leaves_empty_second_range(self, monday):
        """Test ending at 00:00 leaves an empty second range."""
        ranges = split_cross_midnight(monday, "20:00", "00:00")

        assert ranges == [
            TimeRange(pendulum.date(2024, 1, 15), "20:00", "24:00"),
            TimeRange(pendulum.date(2024, 1, 16), "00:00", "00:00"),
        ]

    def test_equal_times_are_treated_as_crossing(self, monday):
        """Test equal start and end times are split."""
        ranges = split_cross_midnight(monday, "20:00", "20:00")

        assert len(ranges) == 2
        assert ranges[0] == TimeRange(pendulum.date(2024, 1, 15), "20:00", "24:00")
        assert ranges[1] == TimeRange(pendulum.date(2024, 1, 16), "00:00", "20:00")

    def test_end_of_day_end_does_not_split(self, monday):
        """Test ending at 24:00 is not split."""
        ranges = split_cross_midnight(monday, "22:00", "24:00")

        assert ranges == [TimeRange(monday, "22:00", "24:00")]

    def test_split_truncates_datetime_to_day(self):
        """Test datetimes are truncated to the day."""
        ranges = split_cross_midnight(pendulum.datetime(2024, 2, 29, 21, 15), "21:00", "02:00")

        assert ranges[0].date == pendulum.date(2024, 2, 29)
        assert ranges[1].date == pendulum.date(2024, 3, 1)

    def test_accepts_plain_dates_across_year_end(self):
        """Test standard library dates across a year end."""
        ranges = split_cross_midnight(date(2024, 12, 31), "23:00", "01:00")

        assert ranges[1].date == pendulum.date(2025, 1, 1)
