"""Nearest-stop search by great-circle distance."""

import logging
import math
from collections.abc import Iterable

from nearest_stop.domain.models import (
    Coordinate,
    DistanceResult,
    NotFound,
    NotFoundReason,
    Stop,
)

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371.0
MILES_PER_KM = 0.621371


def haversine_miles(origin: Coordinate, destination: Coordinate) -> float:
    """Calculate the great-circle distance between two coordinates in miles."""
    phi1 = math.radians(origin.latitude)
    phi2 = math.radians(destination.latitude)
    delta_phi = math.radians(destination.latitude - origin.latitude)
    delta_lambda = math.radians(destination.longitude - origin.longitude)

    a = math.sin(delta_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(
        delta_lambda / 2
    ) ** 2
    # Rounding can push a just past 1.0 for antipodal points.
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c * MILES_PER_KM


class DistanceResolver:
    """Finds the stop closest to a query coordinate."""

    def find_nearest(self, query: Coordinate, stops: Iterable[Stop]) -> DistanceResult | NotFound:
        """Scan the stops and return the closest one with its distance.

        Stops without a coordinate are skipped. On equal distances the stop seen
        first wins.

        Args:
            query: Position to measure from.
            stops: Candidate stops, in scan order.

        Returns:
            The nearest stop, or NotFound(NO_VALID_STOPS) if no stop has a coordinate.
        """
        nearest: Stop | None = None
        min_distance = math.inf
        scanned = 0

        for stop in stops:
            if stop.coordinate is None:
                continue
            scanned += 1
            distance = haversine_miles(query, stop.coordinate)
            if distance < min_distance:
                min_distance = distance
                nearest = stop

        logger.debug(f"Scanned {scanned} stop(s) with coordinates")

        if nearest is None:
            return NotFound(reason=NotFoundReason.NO_VALID_STOPS)
        return DistanceResult(stop=nearest, distance_miles=min_distance)
