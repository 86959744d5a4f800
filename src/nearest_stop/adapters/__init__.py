"""Adapters layer - external system integrations."""

from nearest_stop.adapters.config import AppConfig
from nearest_stop.adapters.dataset import JsonRouteDatasetSource
from nearest_stop.adapters.geocoding import NominatimGeocoder
from nearest_stop.adapters.location import AddressLocationProvider, FixedLocationProvider

__all__ = [
    "AddressLocationProvider",
    "AppConfig",
    "FixedLocationProvider",
    "JsonRouteDatasetSource",
    "NominatimGeocoder",
]
