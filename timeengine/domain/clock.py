"""
Clock arithmetic on "HH:mm" strings.

Inputs are expected to have been validated upstream (see
``timeengine.schemas.CLOCK_TIME_PATTERN``); nothing here guards against
malformed strings.
"""

MINUTES_PER_DAY = 1440
START_OF_DAY = "00:00"
END_OF_DAY = "24:00"


def time_to_minutes(time: str) -> int:
    """Minutes since midnight. "24:00" is not special-cased and yields 1440."""
    hours, minutes = (int(part) for part in time.split(":"))
    return hours * 60 + minutes


def minutes_to_time(minutes: int) -> str:
    """
    Format a minute offset as "HH:mm".

    Any integer is wrapped into 0-1439 first, so the result is always a
    valid clock string and never "24:00".
    """
    normalized = ((minutes % MINUTES_PER_DAY) + MINUTES_PER_DAY) % MINUTES_PER_DAY
    return f"{normalized // 60:02d}:{normalized % 60:02d}"


def end_minutes(end_time: str) -> int:
    """Minute offset of an end time, with "24:00" meaning end of day."""
    if end_time == END_OF_DAY:
        return MINUTES_PER_DAY
    return time_to_minutes(end_time)


def calculate_duration(start_time: str, end_time: str) -> int:
    """
    Duration in minutes between two clock times.

    An end at or before the start is taken to be on the next day, so equal
    times give a full 24 hours.
    """
    start = time_to_minutes(start_time)
    end = end_minutes(end_time)

    if end <= start:
        end += MINUTES_PER_DAY

    return end - start
