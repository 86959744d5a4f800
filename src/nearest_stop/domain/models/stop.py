"""Stop domain model."""

from dataclasses import dataclass

from nearest_stop.domain.models.coordinate import Coordinate
from nearest_stop.domain.models.time_of_day import TimeOfDay


@dataclass(frozen=True)
class Stop:
    """A transit boarding point.

    A stop without a coordinate is never a nearest-stop candidate. A schedule of
    None means the stop publishes no schedule at all, while an empty tuple means
    a schedule exists but lists no arrivals.
    """

    name: str
    coordinate: Coordinate | None = None
    schedule: tuple[TimeOfDay, ...] | None = None
