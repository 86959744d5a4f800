"""Presenter turning lookup outcomes into user-facing messages."""

from typing import Any

from nearest_stop.adapters.presentation.formatting import format_distance, format_time_12h
from nearest_stop.domain.models import (
    ArrivalResult,
    DistanceResult,
    LocationFailure,
    LocationFailureReason,
    NotFound,
    NotFoundReason,
    RouteDataset,
    StopLookup,
)

NOT_FOUND_MESSAGES: dict[NotFoundReason, str] = {
    NotFoundReason.NO_VALID_STOPS: "No bus stops with valid coordinates found",
    NotFoundReason.NO_SCHEDULE_AVAILABLE: "No schedule available for this stop",
    NotFoundReason.NO_UPCOMING_ARRIVALS: "No upcoming arrivals found at this stop",
}

NO_VALID_STOPS_HELP = "The bus stop data appears to be incomplete. Please try again later."

LOCATION_FAILURE_MESSAGES: dict[LocationFailureReason, str] = {
    LocationFailureReason.PERMISSION_DENIED: "Please enable location permissions in your settings.",
    LocationFailureReason.POSITION_UNAVAILABLE: "Location information is unavailable.",
    LocationFailureReason.TIMEOUT: "The request to get location timed out.",
    LocationFailureReason.UNSUPPORTED: "Geolocation is not supported here.",
    LocationFailureReason.OTHER: "Please try again.",
}

ADDRESS_HELP = (
    "Please try entering a complete address including:\n"
    "  - Street number and name\n"
    "  - City\n"
    "  - State (e.g., MI for Michigan)\n"
    'Example: "123 Main St, Jackson, MI"'
)

DATASET_ERROR_HELP = "Please check that the routes file exists and contains valid route data."


class TextPresenter:
    """Renders lookups, failures and datasets as plain text lines."""

    def render_lookup(self, lookup: StopLookup) -> list[str]:
        """Render the nearest stop line followed by the arrival line."""
        if isinstance(lookup.nearest, NotFound):
            lines = [NOT_FOUND_MESSAGES[lookup.nearest.reason]]
            if lookup.nearest.reason is NotFoundReason.NO_VALID_STOPS:
                lines.append(NO_VALID_STOPS_HELP)
            return lines

        lines = [self.render_nearest(lookup.nearest)]
        if lookup.arrival is not None:
            lines.append(self.render_arrival(lookup.arrival))
        return lines

    @staticmethod
    def render_nearest(result: DistanceResult) -> str:
        return f"{result.stop.name} ({format_distance(result.distance_miles)})"

    @staticmethod
    def render_arrival(arrival: ArrivalResult | NotFound) -> str:
        if isinstance(arrival, NotFound):
            return NOT_FOUND_MESSAGES[arrival.reason]
        return (
            f"Next bus arrives at {format_time_12h(arrival.time)} "
            f"(in {arrival.minutes_until} minutes)"
        )

    @staticmethod
    def render_location_failure(failure: LocationFailure) -> list[str]:
        """Render a location failure with guidance on what to try next."""
        if failure.reason is LocationFailureReason.NOT_FOUND:
            return ["Location not found", ADDRESS_HELP]

        if failure.reason is LocationFailureReason.OTHER and failure.detail:
            return [failure.detail]

        lines = [f"Unable to determine your location. {LOCATION_FAILURE_MESSAGES[failure.reason]}"]
        if failure.detail:
            lines.append(failure.detail)
        if failure.reason is LocationFailureReason.POSITION_UNAVAILABLE:
            lines.append("Make sure location services are enabled on your device.")
        elif failure.reason is LocationFailureReason.UNSUPPORTED:
            lines.append("Provide coordinates or an address instead.")
        return lines

    @staticmethod
    def render_dataset_error(error: Exception) -> list[str]:
        return ["Error loading bus routes", str(error), DATASET_ERROR_HELP]

    @staticmethod
    def render_dataset(dataset: RouteDataset) -> list[str]:
        """List every stop with its coordinate and schedule status."""
        lines: list[str] = []
        for index, route in enumerate(dataset.routes, 1):
            lines.append(route.name or f"Route {index}")
            for stop in route.stops:
                if stop.coordinate is None:
                    position = "no coordinates"
                else:
                    position = f"{stop.coordinate.latitude}, {stop.coordinate.longitude}"
                if stop.schedule is None:
                    schedule = "no schedule"
                else:
                    schedule = f"{len(stop.schedule)} arrival(s)"
                lines.append(f"  {stop.name} [{position}] {schedule}")
        return lines


def _not_found_to_dict(outcome: NotFound) -> dict[str, Any]:
    return {
        "found": False,
        "reason": outcome.reason.value,
        "message": NOT_FOUND_MESSAGES[outcome.reason],
    }


def lookup_to_dict(lookup: StopLookup) -> dict[str, Any]:
    """Build a JSON-serialisable view of a lookup."""
    result: dict[str, Any] = {
        "query": {"latitude": lookup.query.latitude, "longitude": lookup.query.longitude},
        "now": str(lookup.now),
    }

    if isinstance(lookup.nearest, NotFound):
        result["nearest_stop"] = _not_found_to_dict(lookup.nearest)
    else:
        stop = lookup.nearest.stop
        result["nearest_stop"] = {
            "found": True,
            "name": stop.name,
            "latitude": stop.coordinate.latitude if stop.coordinate else None,
            "longitude": stop.coordinate.longitude if stop.coordinate else None,
            "distance_miles": lookup.nearest.distance_miles,
            "distance_text": format_distance(lookup.nearest.distance_miles),
        }

    if lookup.arrival is None:
        result["next_arrival"] = None
    elif isinstance(lookup.arrival, NotFound):
        result["next_arrival"] = _not_found_to_dict(lookup.arrival)
    else:
        result["next_arrival"] = {
            "found": True,
            "time": str(lookup.arrival.time),
            "time_text": format_time_12h(lookup.arrival.time),
            "minutes_until": lookup.arrival.minutes_until,
        }
    return result


def location_failure_to_dict(failure: LocationFailure) -> dict[str, Any]:
    return {
        "error": "location_unavailable",
        "reason": failure.reason.value,
        "detail": failure.detail,
    }


def dataset_to_dict(dataset: RouteDataset) -> dict[str, Any]:
    return {
        "routes": [
            {
                "name": route.name,
                "stops": [
                    {
                        "name": stop.name,
                        "latitude": stop.coordinate.latitude if stop.coordinate else None,
                        "longitude": stop.coordinate.longitude if stop.coordinate else None,
                        "schedule": None
                        if stop.schedule is None
                        else [str(time) for time in stop.schedule],
                    }
                    for stop in route.stops
                ],
            }
            for route in dataset.routes
        ]
    }
