"""Formatting of distances and times for display."""

from decimal import ROUND_HALF_UP, Decimal

from nearest_stop.domain.models import TimeOfDay

YARDS_PER_MILE = 1760


def _round_half_up(value: float, places: str) -> Decimal:
    # repr keeps the shortest decimal form, so 2.345 rounds as written
    return Decimal(repr(value)).quantize(Decimal(places), rounding=ROUND_HALF_UP)


def format_distance(distance_miles: float) -> str:
    """Format a distance as yards below one mile, otherwise as miles.

    >>> format_distance(0.4)
    '704 yards away'
    >>> format_distance(2.345)
    '2.35 miles away'
    """
    if distance_miles < 1:
        yards = _round_half_up(distance_miles * YARDS_PER_MILE, "1")
        return f"{yards} yards away"
    return f"{_round_half_up(distance_miles, '0.01')} miles away"


def format_time_12h(time: TimeOfDay) -> str:
    """Format a time of day on a 12-hour clock, e.g. '1:00 PM' or '12:05 AM'."""
    period = "PM" if time.hours >= 12 else "AM"
    display_hours = time.hours % 12 or 12
    return f"{display_hours}:{time.minutes:02d} {period}"
