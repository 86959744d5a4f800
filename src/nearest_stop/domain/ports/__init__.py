"""Ports (interfaces) for the ports-and-adapters architecture."""

from nearest_stop.domain.ports.geocoder import Geocoder
from nearest_stop.domain.ports.location_provider import LocationProvider
from nearest_stop.domain.ports.route_dataset_source import RouteDatasetSource

__all__ = [
    "Geocoder",
    "LocationProvider",
    "RouteDatasetSource",
]
