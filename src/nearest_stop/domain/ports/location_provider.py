"""Location provider port."""

from typing import Protocol

from nearest_stop.domain.models.coordinate import Coordinate
from nearest_stop.domain.models.location_failure import LocationFailure


class LocationProvider(Protocol):
    """Port for obtaining the user's position once."""

    async def locate(self) -> Coordinate | LocationFailure:
        """Return the current coordinate or a classified failure."""
        ...
