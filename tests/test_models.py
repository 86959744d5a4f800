"""Tests for domain models."""

from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from nearest_stop.domain.models import (
    Coordinate,
    Route,
    RouteDataset,
    Stop,
    TimeOfDay,
)


def test_coordinate_creation() -> None:
    """Given coordinate data, when creating a Coordinate, then all fields are set correctly."""
    coordinate = Coordinate(latitude=42.2459, longitude=-84.4013)

    assert coordinate.latitude == 42.2459
    assert coordinate.longitude == -84.4013


def test_coordinate_accepts_zero() -> None:
    """Given the equator and prime meridian, when creating a Coordinate, then it is valid."""
    coordinate = Coordinate(latitude=0.0, longitude=0.0)

    assert coordinate.latitude == 0.0
    assert coordinate.longitude == 0.0


@pytest.mark.parametrize(("latitude", "longitude"), [(90.1, 0.0), (-91.0, 0.0), (0.0, 180.5)])
def test_coordinate_rejects_out_of_range(latitude: float, longitude: float) -> None:
    """Given an out-of-range position, when creating a Coordinate, then ValueError is raised."""
    with pytest.raises(ValueError, match="must be within"):
        Coordinate(latitude=latitude, longitude=longitude)


def test_coordinate_is_frozen() -> None:
    """Given a Coordinate, when trying to modify it, then raises FrozenInstanceError."""
    coordinate = Coordinate(latitude=1.0, longitude=2.0)

    with pytest.raises(FrozenInstanceError):
        coordinate.latitude = 3.0  # type: ignore[misc]


def test_time_of_day_parse() -> None:
    """Given an HH:MM string, when parsing, then hours and minutes are extracted."""
    time = TimeOfDay.parse("13:15")

    assert time.hours == 13
    assert time.minutes == 15
    assert time.minutes_since_midnight == 795
    assert str(time) == "13:15"


def test_time_of_day_parse_single_digit_hour() -> None:
    """Given '7:05', when parsing, then it equals '07:05'."""
    assert TimeOfDay.parse("7:05") == TimeOfDay.parse("07:05")


@pytest.mark.parametrize("value", ["24:00", "12:60", "noon", "12", "12:5", "", "12:00:00"])
def test_time_of_day_parse_rejects_invalid(value: str) -> None:
    """Given a malformed time string, when parsing, then ValueError is raised."""
    with pytest.raises(ValueError):
        TimeOfDay.parse(value)


def test_time_of_day_from_datetime() -> None:
    """Given a datetime, when converting, then only the wall-clock hour and minute remain."""
    time = TimeOfDay.from_datetime(datetime(2024, 1, 15, 23, 50, 42))

    assert time == TimeOfDay(hours=23, minutes=50)


def test_stop_without_coordinate() -> None:
    """Given a stop without coordinates, when checking, then it has no coordinate."""
    stop = Stop(name="Library")

    assert stop.coordinate is None
    assert stop.schedule is None


def test_dataset_flattens_stops_in_scan_order() -> None:
    """Given several routes, when listing stops, then route order then stop order is kept."""
    first = Stop(name="A", coordinate=Coordinate(latitude=1.0, longitude=1.0))
    second = Stop(name="B")
    third = Stop(name="C", coordinate=Coordinate(latitude=2.0, longitude=2.0))
    dataset = RouteDataset(
        routes=(Route(stops=(first, second), name="1"), Route(stops=(third,), name="2"))
    )

    assert [stop.name for stop in dataset.stops()] == ["A", "B", "C"]
    assert dataset.stop_count == 3
