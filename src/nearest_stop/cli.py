"""Command line interface for nearest-stop lookups."""

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime
from typing import Any

import aiohttp

from nearest_stop.adapters.config import AppConfig
from nearest_stop.adapters.dataset import JsonRouteDatasetSource
from nearest_stop.adapters.geocoding import NominatimGeocoder
from nearest_stop.adapters.location import AddressLocationProvider, FixedLocationProvider
from nearest_stop.adapters.presentation import (
    TextPresenter,
    dataset_to_dict,
    location_failure_to_dict,
    lookup_to_dict,
)
from nearest_stop.application import StopLookupService
from nearest_stop.domain.errors import DatasetLoadError
from nearest_stop.domain.models import Coordinate, LocationFailure, TimeOfDay
from nearest_stop.domain.ports import LocationProvider

logger = logging.getLogger(__name__)


def _configure_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _time_argument(value: str) -> TimeOfDay:
    try:
        return TimeOfDay.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _degrees_argument(low: float, high: float, name: str) -> Any:
    def parse(value: str) -> float:
        try:
            degrees = float(value)
        except ValueError as e:
            raise argparse.ArgumentTypeError(f"{name} must be a number, got {value!r}") from e
        if not low <= degrees <= high:
            raise argparse.ArgumentTypeError(f"{name} must be within [{low:g}, {high:g}]")
        return degrees

    return parse


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nearest-stop",
        description="Find the nearest bus stop and its next scheduled arrival",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Nearest stop to a position
  nearest-stop near 42.2459 -84.4013

  # Nearest stop to an address, as of 13:15
  nearest-stop address "123 Main St, Jackson, MI" --at 13:15

  # List the stops in the routes file
  nearest-stop --routes-file routes.json stops
        """,
    )
    parser.add_argument(
        "--routes-file",
        help="Path or URL of the routes JSON document (overrides ROUTES_FILE)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Near command
    near_parser = subparsers.add_parser("near", help="Look up the stop nearest to coordinates")
    near_parser.add_argument(
        "latitude", type=_degrees_argument(-90.0, 90.0, "latitude"), help="Latitude in degrees"
    )
    near_parser.add_argument(
        "longitude",
        type=_degrees_argument(-180.0, 180.0, "longitude"),
        help="Longitude in degrees",
    )

    # Address command
    address_parser = subparsers.add_parser(
        "address", help="Look up the stop nearest to an address or 'lat, lon' text"
    )
    address_parser.add_argument("query", help="Address or coordinates to search for")

    for lookup_parser in (near_parser, address_parser):
        lookup_parser.add_argument(
            "--at",
            type=_time_argument,
            help="Time of day as HH:MM (default: current local time)",
        )
        lookup_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # Stops command
    stops_parser = subparsers.add_parser("stops", help="List the stops in the routes file")
    stops_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


def _print_lines(lines: list[str], file: Any = None) -> None:
    for line in lines:
        print(line, file=file or sys.stdout)


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _build_provider(
    args: argparse.Namespace, config: AppConfig, session: aiohttp.ClientSession
) -> LocationProvider:
    if args.command == "near":
        return FixedLocationProvider(Coordinate(latitude=args.latitude, longitude=args.longitude))
    geocoder = NominatimGeocoder(
        session,
        base_url=config.geocoder_url,
        timeout_seconds=config.geocoder_timeout,
        user_agent=config.geocoder_user_agent,
    )
    return AddressLocationProvider(args.query, geocoder)


async def _run(args: argparse.Namespace, config: AppConfig) -> int:
    presenter = TextPresenter()

    async with aiohttp.ClientSession() as session:
        source = JsonRouteDatasetSource(
            config.routes_file, session=session, timeout_seconds=config.dataset_timeout
        )
        try:
            dataset = await source.load()
        except DatasetLoadError as e:
            logger.error(f"Error loading bus routes: {e}")
            _print_lines(presenter.render_dataset_error(e), file=sys.stderr)
            return 1

        if args.command == "stops":
            if args.json:
                _print_json(dataset_to_dict(dataset))
            else:
                _print_lines(presenter.render_dataset(dataset))
            return 0

        now = args.at or TimeOfDay.from_datetime(datetime.now())
        service = StopLookupService(dataset)
        outcome = await service.locate_and_lookup(_build_provider(args, config, session), now)

    if isinstance(outcome, LocationFailure):
        if args.json:
            _print_json(location_failure_to_dict(outcome))
        else:
            _print_lines(presenter.render_location_failure(outcome), file=sys.stderr)
        return 1

    if args.json:
        _print_json(lookup_to_dict(outcome))
    else:
        _print_lines(presenter.render_lookup(outcome))
    return 0


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        overrides: dict[str, Any] = {}
        if args.routes_file:
            overrides["routes_file"] = args.routes_file
        config = AppConfig(**overrides)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    _configure_logging(logging.DEBUG if args.verbose else config.log_level_number)

    try:
        return await _run(args, config)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("Unexpected error")
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli_main()
