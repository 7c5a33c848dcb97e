"""
Tests for backdate validation.
"""

from datetime import date

import pendulum

from timeengine.domain.backdate import validate_backdate_limit


class TestValidateBackdateLimit:
    """Tests for validate_backdate_limit."""

    def test_today_is_valid(self, monday):
        """Test an entry dated today is accepted."""
        result = validate_backdate_limit(monday, 7, monday)

        assert result.valid
        assert result.message is None

    def test_boundary_day_is_valid(self, monday):
        """Test the oldest day inside the window is accepted."""
        assert validate_backdate_limit(pendulum.date(2024, 1, 8), 7, monday).valid

    def test_one_day_beyond_boundary_is_invalid(self, monday):
        """Test the day before the window is refused."""
        result = validate_backdate_limit(pendulum.date(2024, 1, 7), 7, monday)

        assert not result.valid
        assert result.message == "Cannot create time entries older than 7 days"

    def test_future_date_is_invalid_regardless_of_limit(self, monday):
        """Test future dates are refused even with a large limit."""
        result = validate_backdate_limit(pendulum.date(2024, 1, 16), 365, monday)

        assert not result.valid
        assert result.message == "Cannot create time entries for future dates"

    def test_zero_limit_allows_only_today(self, monday):
        """Test a zero-day limit only accepts today."""
        assert validate_backdate_limit(monday, 0, monday).valid
        assert not validate_backdate_limit(pendulum.date(2024, 1, 14), 0, monday).valid

    def test_times_of_day_are_ignored(self):
        """Test datetimes are compared by calendar day."""
        entry = pendulum.datetime(2024, 1, 15, 23, 59)
        now = pendulum.datetime(2024, 1, 15, 0, 1)

        assert validate_backdate_limit(entry, 7, now).valid

    def test_plain_dates_are_accepted(self):
        """Test standard library dates work as input."""
        assert validate_backdate_limit(date(2024, 3, 1), 1, date(2024, 3, 2)).valid

    def test_defaults_to_today(self):
        """Test the window is measured from today when no date is given."""
        assert validate_backdate_limit(pendulum.today(), 7).valid
        assert not validate_backdate_limit(pendulum.today().add(days=1), 7).valid
