"""Moon phase calculation from calendar dates."""

import math
from datetime import UTC, date, datetime

from blog_functions.domain.moon import MoonPhase

SYNODIC_MONTH_DAYS = 29.53058867
# Julian Day of the new moon on 2000-01-06.
REFERENCE_NEW_MOON_JD = 2451549.5

_PHASES = tuple(MoonPhase)
_BIN_WIDTH = SYNODIC_MONTH_DAYS / len(_PHASES)


def julian_day(value: date | datetime) -> float:
    """Convert a Gregorian calendar date to a Julian Day.

    Dates are taken at 00:00 UT. Datetimes contribute their UTC time of day;
    naive datetimes are assumed to be UTC already.
    """
    day_fraction = 0.0
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(UTC)
        day_fraction = (
            value.hour * 3600 + value.minute * 60 + value.second
        ) / 86400 + value.microsecond / 86_400_000_000

    year, month = value.year, value.month
    if month <= 2:
        year -= 1
        month += 12
    century = year // 100
    gregorian_correction = 2 - century + century // 4
    return (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + value.day
        + day_fraction
        + gregorian_correction
        - 1524.5
    )


def moon_age(value: date | datetime) -> float:
    """Return days since the last new moon, in [0, SYNODIC_MONTH_DAYS)."""
    age = (julian_day(value) - REFERENCE_NEW_MOON_JD) % SYNODIC_MONTH_DAYS
    # A tiny negative difference can round up to exactly one period.
    if age >= SYNODIC_MONTH_DAYS:
        age = 0.0
    return age


def phase_from_age(age: float) -> MoonPhase:
    """Map an age in days onto the eight-phase banding.

    Bins are centred on each phase, so the first boundary sits half a bin
    after the new moon and the last half bin wraps back to it.
    """
    age %= SYNODIC_MONTH_DAYS
    index = math.floor((age + _BIN_WIDTH / 2) / _BIN_WIDTH) % len(_PHASES)
    return _PHASES[index]


def current_phase(value: date | datetime | None = None) -> MoonPhase:
    """Return the moon phase for a date, defaulting to today in UTC."""
    if value is None:
        value = datetime.now(tz=UTC).date()
    return phase_from_age(moon_age(value))
