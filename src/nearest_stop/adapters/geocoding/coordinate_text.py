"""Parsing of coordinates typed in by hand."""

import re

from nearest_stop.domain.models import Coordinate

_PAIR_PATTERN = re.compile(r"^\s*([-+]?\d+(?:\.\d+)?)\s*(?:,\s*|\s+)([-+]?\d+(?:\.\d+)?)\s*$")


def parse_coordinate_text(text: str) -> Coordinate | None:
    """Parse "lat, lon" or "lat lon" decimal degrees.

    Returns None if the text is not a coordinate pair or is out of range, in
    which case it should be treated as an address.
    """
    match = _PAIR_PATTERN.match(text)
    if not match:
        return None
    try:
        return Coordinate(latitude=float(match.group(1)), longitude=float(match.group(2)))
    except ValueError:
        return None
