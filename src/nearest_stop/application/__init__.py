"""Application layer - resolvers and use cases."""

from nearest_stop.application.arrival_resolver import ArrivalResolver
from nearest_stop.application.distance_resolver import DistanceResolver, haversine_miles
from nearest_stop.application.services import StopLookupService

__all__ = [
    "ArrivalResolver",
    "DistanceResolver",
    "StopLookupService",
    "haversine_miles",
]
