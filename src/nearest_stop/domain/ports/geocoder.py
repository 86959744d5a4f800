"""Geocoder port."""

from typing import Protocol

from nearest_stop.domain.models.coordinate import Coordinate


class Geocoder(Protocol):
    """Port for turning a free-text address into a coordinate."""

    async def geocode(self, query: str) -> Coordinate | None:
        """Return the best match for the address, or None if nothing matched.

        Raises:
            GeocodingError: If the service fails or responds with unusable data.
            TimeoutError: If the service does not answer in time.
        """
        ...
