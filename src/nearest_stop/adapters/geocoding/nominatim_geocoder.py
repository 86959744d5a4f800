"""Geocoder adapter for the OpenStreetMap Nominatim search API.

API Documentation: https://nominatim.org/release-docs/latest/api/Search/
Usage policy requires an identifying User-Agent and at most one request per second.
"""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from nearest_stop.domain.errors import GeocodingError
from nearest_stop.domain.models import Coordinate
from nearest_stop.domain.ports.geocoder import Geocoder

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class NominatimGeocoder(Geocoder):
    """Resolves free-text addresses to coordinates via Nominatim."""

    def __init__(
        self,
        session: "ClientSession",
        base_url: str,
        timeout_seconds: float = 10.0,
        user_agent: str = "nearest-stop/0.1",
    ) -> None:
        """Initialize the geocoder.

        Args:
            session: aiohttp session used for requests.
            base_url: Search endpoint, e.g. https://nominatim.openstreetmap.org/search.
            timeout_seconds: Total timeout per request.
            user_agent: Identifying User-Agent header.
        """
        self._session = session
        self._base_url = base_url
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._headers = {"Accept": "application/json", "User-Agent": user_agent}

    async def geocode(self, query: str) -> Coordinate | None:
        """Return the first match for the address, or None if nothing matched.

        Raises:
            GeocodingError: On a non-200 response, a transport error or malformed data.
            TimeoutError: If the request times out.
        """
        params: dict[str, str | int] = {"format": "json", "q": query, "limit": 1}
        logger.debug(f"Geocoding {query!r} via {self._base_url}")

        try:
            async with self._session.get(
                self._base_url, params=params, headers=self._headers, timeout=self._timeout
            ) as response:
                results = await self._handle_response(response)
        except aiohttp.ClientError as e:
            raise GeocodingError(f"Geocoding request failed: {e}") from e

        if not results:
            logger.info(f"No geocoding results for {query!r}")
            return None
        return self._parse_result(results[0])

    async def _handle_response(self, response: "ClientResponse") -> list[Any]:
        if response.status != 200:
            response_text = await response.text()
            logger.warning(f"Geocoder returned status {response.status}: {response_text[:200]}")
            raise GeocodingError(f"Geocoder returned status {response.status}")

        data = await response.json(content_type=None)
        if not isinstance(data, list):
            raise GeocodingError("Geocoder returned an unexpected payload")
        return data

    @staticmethod
    def _parse_result(result: Any) -> Coordinate:
        """Parse the lat/lon strings of a Nominatim result."""
        if not isinstance(result, dict):
            raise GeocodingError("Geocoder result is not an object")
        try:
            return Coordinate(latitude=float(result["lat"]), longitude=float(result["lon"]))
        except (KeyError, TypeError, ValueError) as e:
            raise GeocodingError(f"Geocoder result has invalid coordinates: {e}") from e
