"""Domain layer - core models, errors and ports."""

from nearest_stop.domain.errors import DatasetLoadError, GeocodingError
from nearest_stop.domain.models import (
    ArrivalResult,
    Coordinate,
    DistanceResult,
    NotFound,
    NotFoundReason,
    Route,
    RouteDataset,
    Stop,
    TimeOfDay,
)
from nearest_stop.domain.ports import Geocoder, LocationProvider, RouteDatasetSource

__all__ = [
    "ArrivalResult",
    "Coordinate",
    "DatasetLoadError",
    "DistanceResult",
    "GeocodingError",
    "Geocoder",
    "LocationProvider",
    "NotFound",
    "NotFoundReason",
    "Route",
    "RouteDataset",
    "RouteDatasetSource",
    "Stop",
    "TimeOfDay",
]
