"""Location provider resolving a manually entered address or coordinate pair."""

import logging
from typing import TYPE_CHECKING

from nearest_stop.adapters.geocoding.coordinate_text import parse_coordinate_text
from nearest_stop.domain.errors import GeocodingError
from nearest_stop.domain.models import Coordinate, LocationFailure, LocationFailureReason
from nearest_stop.domain.ports.location_provider import LocationProvider

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from nearest_stop.domain.ports.geocoder import Geocoder


class AddressLocationProvider(LocationProvider):
    """Turns user input into a coordinate, geocoding it when it is an address."""

    def __init__(self, query: str, geocoder: "Geocoder") -> None:
        """Initialize with the raw user input and the geocoder to use."""
        self._query = query
        self._geocoder = geocoder

    async def locate(self) -> Coordinate | LocationFailure:
        """Resolve the input once. Failures are classified, never retried."""
        query = self._query.strip()
        if not query:
            return LocationFailure(
                reason=LocationFailureReason.OTHER, detail="Please enter a location"
            )

        coordinate = parse_coordinate_text(query)
        if coordinate is not None:
            logger.debug(f"Input {query!r} parsed as coordinates")
            return coordinate

        try:
            coordinate = await self._geocoder.geocode(query)
        except TimeoutError:
            logger.warning(f"Geocoding {query!r} timed out")
            return LocationFailure(
                reason=LocationFailureReason.TIMEOUT,
                detail="The request to get location timed out",
            )
        except GeocodingError as e:
            logger.warning(f"Geocoding {query!r} failed: {e}")
            return LocationFailure(reason=LocationFailureReason.POSITION_UNAVAILABLE, detail=str(e))

        if coordinate is None:
            return LocationFailure(reason=LocationFailureReason.NOT_FOUND, detail=query)
        return coordinate
