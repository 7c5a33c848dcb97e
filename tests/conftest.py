"""
Shared fixtures.
"""

import pendulum
import pytest

from timeengine.domain.models import WorkingHourRule


@pytest.fixture
def standard_rules():
    """Day 08-18, Evening 18-22, Night 22-08."""
    return [
        WorkingHourRule(name="Day", start_time="08:00", end_time="18:00"),
        WorkingHourRule(name="Evening", start_time="18:00", end_time="22:00"),
        WorkingHourRule(name="Night", start_time="22:00", end_time="08:00"),
    ]


@pytest.fixture
def monday():
    return pendulum.date(2024, 1, 15)
