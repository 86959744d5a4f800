"""Location provider returning a position known up front."""

from nearest_stop.domain.models import Coordinate, LocationFailure, LocationFailureReason
from nearest_stop.domain.ports.location_provider import LocationProvider


class FixedLocationProvider(LocationProvider):
    """Provides a coordinate supplied by the caller, e.g. from device coordinates."""

    def __init__(self, coordinate: Coordinate | None) -> None:
        """Initialize with the coordinate, or None when no position source exists."""
        self._coordinate = coordinate

    async def locate(self) -> Coordinate | LocationFailure:
        """Return the configured coordinate."""
        if self._coordinate is None:
            return LocationFailure(
                reason=LocationFailureReason.UNSUPPORTED,
                detail="No position source is available",
            )
        return self._coordinate
