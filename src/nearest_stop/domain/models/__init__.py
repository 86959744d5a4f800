"""Domain models for nearest-stop lookups."""

from nearest_stop.domain.models.arrival_result import ArrivalResult
from nearest_stop.domain.models.coordinate import Coordinate
from nearest_stop.domain.models.distance_result import DistanceResult
from nearest_stop.domain.models.location_failure import LocationFailure, LocationFailureReason
from nearest_stop.domain.models.not_found import NotFound, NotFoundReason
from nearest_stop.domain.models.route import Route, RouteDataset
from nearest_stop.domain.models.stop import Stop
from nearest_stop.domain.models.stop_lookup import StopLookup
from nearest_stop.domain.models.time_of_day import MINUTES_PER_DAY, TimeOfDay

__all__ = [
    "MINUTES_PER_DAY",
    "ArrivalResult",
    "Coordinate",
    "DistanceResult",
    "LocationFailure",
    "LocationFailureReason",
    "NotFound",
    "NotFoundReason",
    "Route",
    "RouteDataset",
    "Stop",
    "StopLookup",
    "TimeOfDay",
]
