"""Location failure domain model."""

from dataclasses import dataclass
from enum import Enum


class LocationFailureReason(str, Enum):
    """Classified reasons a location could not be obtained."""

    PERMISSION_DENIED = "permission_denied"
    POSITION_UNAVAILABLE = "position_unavailable"
    TIMEOUT = "timeout"
    NOT_FOUND = "not_found"
    UNSUPPORTED = "unsupported"
    OTHER = "other"


@dataclass(frozen=True)
class LocationFailure:
    """A location request that did not produce a coordinate."""

    reason: LocationFailureReason
    detail: str | None = None
