"""Route and route dataset domain models."""

from collections.abc import Iterator
from dataclasses import dataclass

from nearest_stop.domain.models.stop import Stop


@dataclass(frozen=True)
class Route:
    """A grouping of stops."""

    stops: tuple[Stop, ...]
    name: str | None = None


@dataclass(frozen=True)
class RouteDataset:
    """The loaded set of routes, passed by reference to every query."""

    routes: tuple[Route, ...]

    def stops(self) -> Iterator[Stop]:
        """Yield every stop of every route, in route order then stop order."""
        for route in self.routes:
            yield from route.stops

    @property
    def stop_count(self) -> int:
        return sum(len(route.stops) for route in self.routes)
