"""Next-arrival computation over a daily schedule."""

from collections.abc import Sequence

from nearest_stop.domain.models import (
    MINUTES_PER_DAY,
    ArrivalResult,
    NotFound,
    NotFoundReason,
    TimeOfDay,
)


def minutes_until(target: TimeOfDay, now: TimeOfDay) -> int:
    """Minutes from now until the next occurrence of target, wrapping past midnight."""
    delta = target.minutes_since_midnight - now.minutes_since_midnight
    if delta < 0:
        delta += MINUTES_PER_DAY
    return delta


class ArrivalResolver:
    """Finds the soonest upcoming arrival in a stop's schedule."""

    def next_arrival(
        self, schedule: Sequence[TimeOfDay] | None, now: TimeOfDay
    ) -> ArrivalResult | NotFound:
        """Return the next scheduled arrival after now.

        An arrival at exactly ``now`` is due in 0 minutes. Earlier times count as
        tomorrow's arrivals. On equal waits the entry listed first wins.

        Args:
            schedule: The stop's schedule, or None when the stop has none.
            now: Current wall-clock time.

        Returns:
            The next arrival, or NotFound(NO_SCHEDULE_AVAILABLE) for a missing
            schedule and NotFound(NO_UPCOMING_ARRIVALS) for an empty one.
        """
        if schedule is None:
            return NotFound(reason=NotFoundReason.NO_SCHEDULE_AVAILABLE)

        best: ArrivalResult | None = None
        for entry in schedule:
            wait = minutes_until(entry, now)
            if best is None or wait < best.minutes_until:
                best = ArrivalResult(time=entry, minutes_until=wait)

        if best is None:
            return NotFound(reason=NotFoundReason.NO_UPCOMING_ARRIVALS)
        return best
