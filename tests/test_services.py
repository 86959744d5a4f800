"""Tests for application services."""

import pytest

from nearest_stop.application.services import StopLookupService
from nearest_stop.domain.models import (
    ArrivalResult,
    Coordinate,
    DistanceResult,
    LocationFailure,
    LocationFailureReason,
    NotFound,
    NotFoundReason,
    Route,
    RouteDataset,
    Stop,
    StopLookup,
    TimeOfDay,
)

JACKSON = Coordinate(latitude=42.2459, longitude=-84.4013)


class MockLocationProvider:
    """Mock location provider for testing."""

    def __init__(self, result: Coordinate | LocationFailure) -> None:
        """Initialize with the result to return."""
        self.result = result
        self.calls = 0

    async def locate(self) -> Coordinate | LocationFailure:
        """Return the configured result."""
        self.calls += 1
        return self.result


def _stop(
    name: str, latitude: float, longitude: float, schedule: tuple[str, ...] | None
) -> Stop:
    return Stop(
        name=name,
        coordinate=Coordinate(latitude=latitude, longitude=longitude),
        schedule=None if schedule is None else tuple(TimeOfDay.parse(t) for t in schedule),
    )


@pytest.fixture
def dataset() -> RouteDataset:
    """Create a dataset with two routes."""
    return RouteDataset(
        routes=(
            Route(
                name="Route 1",
                stops=(
                    _stop("Transit Center", 42.2459, -84.4013, ("06:00", "13:15", "17:45")),
                    _stop("Library", 42.2478, -84.4032, ()),
                    Stop(name="Unmapped", schedule=(TimeOfDay(12, 0),)),
                ),
            ),
            Route(
                name="Route 2",
                stops=(_stop("Westwood Mall", 42.2556, -84.4497, None),),
            ),
        )
    )


def test_lookup_returns_nearest_stop_and_arrival(dataset: RouteDataset) -> None:
    """Given a position next to a stop, when looking up, then its next arrival is reported."""
    service = StopLookupService(dataset)

    lookup = service.lookup(JACKSON, TimeOfDay.parse("13:00"))

    assert isinstance(lookup.nearest, DistanceResult)
    assert lookup.nearest.stop.name == "Transit Center"
    assert lookup.nearest.distance_miles == 0.0
    assert lookup.arrival == ArrivalResult(time=TimeOfDay.parse("13:15"), minutes_until=15)
    assert lookup.query == JACKSON
    assert lookup.now == TimeOfDay.parse("13:00")


def test_lookup_searches_across_routes(dataset: RouteDataset) -> None:
    """Given a position near a stop of the second route, when looking up, then it is chosen."""
    service = StopLookupService(dataset)

    lookup = service.lookup(Coordinate(latitude=42.2557, longitude=-84.4490), TimeOfDay(8, 0))

    assert isinstance(lookup.nearest, DistanceResult)
    assert lookup.nearest.stop.name == "Westwood Mall"
    assert lookup.arrival == NotFound(reason=NotFoundReason.NO_SCHEDULE_AVAILABLE)


def test_lookup_reports_empty_schedule(dataset: RouteDataset) -> None:
    """Given the nearest stop has an empty schedule, when looking up, then no arrivals found."""
    service = StopLookupService(dataset)

    lookup = service.lookup(Coordinate(latitude=42.2479, longitude=-84.4033), TimeOfDay(8, 0))

    assert isinstance(lookup.nearest, DistanceResult)
    assert lookup.nearest.stop.name == "Library"
    assert lookup.arrival == NotFound(reason=NotFoundReason.NO_UPCOMING_ARRIVALS)


def test_lookup_without_valid_stops() -> None:
    """Given no stop has coordinates, when looking up, then no arrival is computed."""
    dataset = RouteDataset(routes=(Route(stops=(Stop(name="A"), Stop(name="B"))),))
    service = StopLookupService(dataset)

    lookup = service.lookup(JACKSON, TimeOfDay(8, 0))

    assert lookup == StopLookup(
        query=JACKSON,
        now=TimeOfDay(8, 0),
        nearest=NotFound(reason=NotFoundReason.NO_VALID_STOPS),
        arrival=None,
    )


def test_lookup_reuses_dataset_across_queries(dataset: RouteDataset) -> None:
    """Given one service, when looking up twice, then each query is independent."""
    service = StopLookupService(dataset)

    first = service.lookup(JACKSON, TimeOfDay(13, 0))
    second = service.lookup(JACKSON, TimeOfDay(18, 0))

    assert first.arrival == ArrivalResult(time=TimeOfDay(13, 15), minutes_until=15)
    assert second.arrival == ArrivalResult(time=TimeOfDay(6, 0), minutes_until=720)


@pytest.mark.asyncio
async def test_locate_and_lookup_uses_provider_once(dataset: RouteDataset) -> None:
    """Given a provider with a position, when locating, then the lookup runs on it."""
    provider = MockLocationProvider(JACKSON)
    service = StopLookupService(dataset)

    outcome = await service.locate_and_lookup(provider, TimeOfDay(13, 0))

    assert isinstance(outcome, StopLookup)
    assert isinstance(outcome.nearest, DistanceResult)
    assert outcome.nearest.stop.name == "Transit Center"
    assert provider.calls == 1


@pytest.mark.asyncio
async def test_locate_and_lookup_returns_failure(dataset: RouteDataset) -> None:
    """Given a failing provider, when locating, then the failure is returned unchanged."""
    failure = LocationFailure(reason=LocationFailureReason.PERMISSION_DENIED)
    provider = MockLocationProvider(failure)
    service = StopLookupService(dataset)

    outcome = await service.locate_and_lookup(provider, TimeOfDay(13, 0))

    assert outcome is failure
    assert provider.calls == 1
