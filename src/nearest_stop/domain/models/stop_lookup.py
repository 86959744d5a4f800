"""Stop lookup domain model."""

from dataclasses import dataclass

from nearest_stop.domain.models.arrival_result import ArrivalResult
from nearest_stop.domain.models.coordinate import Coordinate
from nearest_stop.domain.models.distance_result import DistanceResult
from nearest_stop.domain.models.not_found import NotFound
from nearest_stop.domain.models.time_of_day import TimeOfDay


@dataclass(frozen=True)
class StopLookup:
    """Outcome of resolving the nearest stop and its next arrival.

    ``arrival`` is None only when no stop was found.
    """

    query: Coordinate
    now: TimeOfDay
    nearest: DistanceResult | NotFound
    arrival: ArrivalResult | NotFound | None = None
