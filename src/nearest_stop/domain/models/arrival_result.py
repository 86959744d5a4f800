"""Arrival result domain model."""

from dataclasses import dataclass

from nearest_stop.domain.models.time_of_day import TimeOfDay


@dataclass(frozen=True)
class ArrivalResult:
    """The next scheduled arrival at a stop."""

    time: TimeOfDay
    minutes_until: int  # 0..1439, wraps past midnight
