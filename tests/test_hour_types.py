"""
Tests for day/evening/night classification.
"""

from timeengine.domain.hour_types import calculate_hour_types, calculate_rule_minutes
from timeengine.domain.models import HourTypeTotals, WorkingHourRule


class TestCalculateHourTypes:
    """Tests for calculate_hour_types with the standard rules."""

    def test_pure_day(self, standard_rules):
        """Test a period inside the day rule."""
        assert calculate_hour_types("09:00", "17:00", standard_rules) == HourTypeTotals(480, 0, 0)

    def test_day_into_evening(self, standard_rules):
        """Test a period running from day into evening."""
        assert calculate_hour_types("09:00", "20:00", standard_rules) == HourTypeTotals(540, 120, 0)

    def test_pure_evening(self, standard_rules):
        """Test a period inside the evening rule."""
        assert calculate_hour_types("18:00", "22:00", standard_rules) == HourTypeTotals(0, 240, 0)

    def test_night_until_end_of_day(self, standard_rules):
        """Test a night period ending at 24:00."""
        assert calculate_hour_types("22:00", "24:00", standard_rules) == HourTypeTotals(0, 0, 120)

    def test_early_morning_inside_wrapped_night(self, standard_rules):
        """Test early morning hours count towards the wrapping night rule."""
        assert calculate_hour_types("00:00", "06:00", standard_rules) == HourTypeTotals(0, 0, 360)

    def test_night_into_day(self, standard_rules):
        """Test a period running from night into day."""
        assert calculate_hour_types("06:00", "10:00", standard_rules) == HourTypeTotals(120, 0, 120)

    def test_evening_into_night(self, standard_rules):
        """Test a period running from evening into night."""
        assert calculate_hour_types("20:00", "23:00", standard_rules) == HourTypeTotals(0, 120, 60)

    def test_all_three_periods(self, standard_rules):
        """Night is counted both before 08:00 and after 22:00."""
        assert calculate_hour_types("07:00", "23:00", standard_rules) == HourTypeTotals(600, 240, 120)

    def test_exact_boundaries(self, standard_rules):
        """Test periods matching rule boundaries exactly."""
        assert calculate_hour_types("08:00", "18:00", standard_rules) == HourTypeTotals(600, 0, 0)

    def test_short_period(self, standard_rules):
        """Test a period of a few minutes."""
        assert calculate_hour_types("10:00", "10:30", standard_rules) == HourTypeTotals(30, 0, 0)

    def test_full_day(self, standard_rules):
        """Test a full day splits across all three rules."""
        assert calculate_hour_types("00:00", "24:00", standard_rules) == HourTypeTotals(600, 240, 600)

    def test_unsplit_range_is_pushed_past_midnight(self, standard_rules):
        """21:00-02:00 only sees the part up to 24:00 against the rule windows."""
        assert calculate_hour_types("21:00", "02:00", standard_rules) == HourTypeTotals(0, 60, 120)

    def test_rule_names_are_case_insensitive(self):
        """Test rule names match regardless of case."""
        rules = [WorkingHourRule(name="DAY", start_time="00:00", end_time="24:00")]

        assert calculate_hour_types("09:00", "10:00", rules).day_minutes == 60

    def test_unknown_rule_names_are_ignored(self):
        """Test rules with other names are left out of the totals."""
        rules = [
            WorkingHourRule(name="Weekend", start_time="00:00", end_time="24:00"),
            WorkingHourRule(name="Day", start_time="08:00", end_time="18:00"),
        ]

        assert calculate_hour_types("09:00", "10:00", rules) == HourTypeTotals(60, 0, 0)

    def test_overlapping_rules_double_count(self):
        """Test overlapping rules both count the shared minutes."""
        rules = [
            WorkingHourRule(name="Day", start_time="08:00", end_time="18:00"),
            WorkingHourRule(name="day", start_time="12:00", end_time="14:00"),
        ]

        assert calculate_hour_types("11:00", "13:00", rules).day_minutes == 180

    def test_no_rules(self):
        """Test no rules give zero minutes."""
        assert calculate_hour_types("09:00", "17:00", []) == HourTypeTotals()


class TestCalculateRuleMinutes:
    """Tests for the per-rule minute mapping."""

    def test_keeps_custom_names(self, standard_rules):
        """Test per-rule minutes are keyed by lower-cased name."""
        rules = standard_rules + [WorkingHourRule(name="Lunch", start_time="12:00", end_time="13:00")]

        minutes = calculate_rule_minutes("11:30", "12:30", rules)

        assert minutes == {"day": 60, "evening": 0, "night": 0, "lunch": 30}
