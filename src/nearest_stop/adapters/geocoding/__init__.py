"""Geocoding adapters."""

from nearest_stop.adapters.geocoding.coordinate_text import parse_coordinate_text
from nearest_stop.adapters.geocoding.nominatim_geocoder import NominatimGeocoder

__all__ = ["NominatimGeocoder", "parse_coordinate_text"]
