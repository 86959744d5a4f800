"""Time of day domain model."""

import re
from dataclasses import dataclass
from datetime import datetime

MINUTES_PER_DAY = 1440

_TIME_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


@dataclass(frozen=True)
class TimeOfDay:
    """A recurring daily wall-clock time with minute precision."""

    hours: int
    minutes: int

    def __post_init__(self) -> None:
        if not 0 <= self.hours <= 23:
            raise ValueError(f"hours must be within [0, 23], got {self.hours}")
        if not 0 <= self.minutes <= 59:
            raise ValueError(f"minutes must be within [0, 59], got {self.minutes}")

    @classmethod
    def parse(cls, value: str) -> "TimeOfDay":
        """Parse a 24-hour "HH:MM" string.

        Single-digit hours ("7:05") are accepted so that equivalent spellings of
        the same time map to the same value.

        Raises:
            ValueError: If the string is not a valid time.
        """
        match = _TIME_PATTERN.match(value)
        if not match:
            raise ValueError(f"Invalid time string {value!r}, expected HH:MM")
        return cls(hours=int(match.group(1)), minutes=int(match.group(2)))

    @classmethod
    def from_datetime(cls, moment: datetime) -> "TimeOfDay":
        """Take the wall-clock hour and minute of a datetime."""
        return cls(hours=moment.hour, minutes=moment.minute)

    @property
    def minutes_since_midnight(self) -> int:
        return self.hours * 60 + self.minutes

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}"
