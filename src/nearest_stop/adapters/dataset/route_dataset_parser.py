"""Parser turning a validated routes document into domain models."""

import logging
import math
from typing import Any

from nearest_stop.adapters.dataset.schema import RouteDocument, RoutesDocument, StopDocument
from nearest_stop.domain.models import Coordinate, Route, RouteDataset, Stop, TimeOfDay

logger = logging.getLogger(__name__)


class RouteDatasetParser:
    """Maps document models to an immutable RouteDataset."""

    @staticmethod
    def parse(document: RoutesDocument) -> RouteDataset:
        """Parse every route of the document."""
        return RouteDataset(
            routes=tuple(RouteDatasetParser._parse_route(route) for route in document.routes)
        )

    @staticmethod
    def _parse_route(route: RouteDocument) -> Route:
        return Route(
            name=route.name,
            stops=tuple(RouteDatasetParser._parse_stop(stop) for stop in route.stops),
        )

    @staticmethod
    def _parse_stop(stop: StopDocument) -> Stop:
        return Stop(
            name=stop.name,
            coordinate=RouteDatasetParser._parse_coordinate(stop),
            schedule=RouteDatasetParser._parse_schedule(stop),
        )

    @staticmethod
    def _to_degrees(value: Any) -> float | None:
        """Convert a raw coordinate component to float, or None if unusable."""
        # bool is an int subclass; true/false are never coordinates
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return None
        try:
            degrees = float(value)
        except (TypeError, ValueError):
            return None
        if math.isnan(degrees) or math.isinf(degrees):
            return None
        return degrees

    @staticmethod
    def _parse_coordinate(stop: StopDocument) -> Coordinate | None:
        """Build the stop's coordinate. 0.0 is a valid latitude and longitude."""
        if stop.latitude is None and stop.longitude is None:
            logger.debug(f"Stop '{stop.name}' has no coordinates")
            return None

        latitude = RouteDatasetParser._to_degrees(stop.latitude)
        longitude = RouteDatasetParser._to_degrees(stop.longitude)
        if latitude is None or longitude is None:
            logger.warning(
                f"Stop '{stop.name}' has unusable coordinates "
                f"({stop.latitude!r}, {stop.longitude!r}); excluded from search"
            )
            return None

        try:
            return Coordinate(latitude=latitude, longitude=longitude)
        except ValueError as e:
            logger.warning(f"Stop '{stop.name}' excluded from search: {e}")
            return None

    @staticmethod
    def _parse_schedule(stop: StopDocument) -> tuple[TimeOfDay, ...] | None:
        """Parse the schedule, skipping entries that are not HH:MM strings."""
        if stop.schedule is None:
            return None

        times: list[TimeOfDay] = []
        for entry in stop.schedule:
            if not isinstance(entry, str):
                logger.warning(f"Skipping non-string schedule entry {entry!r} at '{stop.name}'")
                continue
            try:
                times.append(TimeOfDay.parse(entry))
            except ValueError as e:
                logger.warning(f"Skipping schedule entry at '{stop.name}': {e}")
        return tuple(times)
