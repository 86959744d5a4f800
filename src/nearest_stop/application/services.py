"""Application services (use cases) for nearest-stop lookups."""

import logging
from typing import TYPE_CHECKING

from nearest_stop.application.arrival_resolver import ArrivalResolver
from nearest_stop.application.distance_resolver import DistanceResolver
from nearest_stop.domain.models import (
    Coordinate,
    DistanceResult,
    LocationFailure,
    RouteDataset,
    StopLookup,
    TimeOfDay,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from nearest_stop.domain.ports import LocationProvider


class StopLookupService:
    """Resolves the nearest stop and its next arrival against a loaded dataset."""

    def __init__(
        self,
        dataset: RouteDataset,
        distance_resolver: DistanceResolver | None = None,
        arrival_resolver: ArrivalResolver | None = None,
    ) -> None:
        """Initialize with the dataset to search.

        Args:
            dataset: Routes loaded once by the caller.
            distance_resolver: Optional resolver override.
            arrival_resolver: Optional resolver override.
        """
        self._dataset = dataset
        self._distance_resolver = distance_resolver or DistanceResolver()
        self._arrival_resolver = arrival_resolver or ArrivalResolver()

    def lookup(self, query: Coordinate, now: TimeOfDay) -> StopLookup:
        """Find the nearest stop to query and the next arrival there."""
        nearest = self._distance_resolver.find_nearest(query, self._dataset.stops())
        if not isinstance(nearest, DistanceResult):
            logger.info(f"No stop found for {query}: {nearest.reason.value}")
            return StopLookup(query=query, now=now, nearest=nearest)

        logger.info(
            f"Nearest stop to {query} is '{nearest.stop.name}' "
            f"at {nearest.distance_miles:.3f} miles"
        )
        arrival = self._arrival_resolver.next_arrival(nearest.stop.schedule, now)
        return StopLookup(query=query, now=now, nearest=nearest, arrival=arrival)

    async def locate_and_lookup(
        self, provider: "LocationProvider", now: TimeOfDay
    ) -> StopLookup | LocationFailure:
        """Ask the provider for a position once, then look up the nearest stop.

        A provider failure is returned unchanged and no search is run.
        """
        location = await provider.locate()
        if isinstance(location, LocationFailure):
            logger.warning(f"Location unavailable: {location.reason.value}")
            return location
        return self.lookup(location, now)
