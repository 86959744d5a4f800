"""Distance result domain model."""

from dataclasses import dataclass

from nearest_stop.domain.models.stop import Stop


@dataclass(frozen=True)
class DistanceResult:
    """The nearest stop to a query coordinate."""

    stop: Stop
    distance_miles: float
