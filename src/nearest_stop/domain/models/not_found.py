"""Not-found outcome domain model."""

from dataclasses import dataclass
from enum import Enum


class NotFoundReason(str, Enum):
    """Why a lookup produced no result."""

    NO_VALID_STOPS = "no_valid_stops"
    NO_SCHEDULE_AVAILABLE = "no_schedule_available"
    NO_UPCOMING_ARRIVALS = "no_upcoming_arrivals"


@dataclass(frozen=True)
class NotFound:
    """A lookup that completed without a result."""

    reason: NotFoundReason
