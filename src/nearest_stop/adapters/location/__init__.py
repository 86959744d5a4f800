"""Location provider adapters."""

from nearest_stop.adapters.location.address_location_provider import AddressLocationProvider
from nearest_stop.adapters.location.fixed_location_provider import FixedLocationProvider

__all__ = ["AddressLocationProvider", "FixedLocationProvider"]
