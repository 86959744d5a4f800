"""Route dataset source reading the routes JSON document from a file or URL."""

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import aiohttp
from pydantic import ValidationError

from nearest_stop.adapters.dataset.route_dataset_parser import RouteDatasetParser
from nearest_stop.adapters.dataset.schema import RoutesDocument
from nearest_stop.domain.errors import DatasetLoadError
from nearest_stop.domain.models import RouteDataset
from nearest_stop.domain.ports.route_dataset_source import RouteDatasetSource

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


def is_url(location: str) -> bool:
    """Check whether the location should be fetched over HTTP."""
    return location.lower().startswith(("http://", "https://"))


class JsonRouteDatasetSource(RouteDatasetSource):
    """Loads routes from a JSON document on disk or served over HTTP."""

    def __init__(
        self,
        location: str,
        session: "ClientSession | None" = None,
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize the source.

        Args:
            location: Filesystem path or http(s) URL of the routes document.
            session: Optional aiohttp session, used for URLs.
            timeout_seconds: Total timeout for fetching a URL.
        """
        self._location = location
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def load(self) -> RouteDataset:
        """Load and parse the routes document.

        Raises:
            DatasetLoadError: If the document cannot be read, is not valid JSON,
                does not match the expected shape, or contains no routes.
        """
        if is_url(self._location):
            text = await self._fetch_text()
        else:
            text = self._read_text()

        document = self._parse_document(text)
        if not document.routes:
            raise DatasetLoadError(f"No routes found in {self._location}")

        dataset = RouteDatasetParser.parse(document)
        logger.info(
            f"Loaded {len(dataset.routes)} route(s) with {dataset.stop_count} stop(s) "
            f"from {self._location}"
        )
        return dataset

    def _read_text(self) -> str:
        path = Path(self._location)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise DatasetLoadError(f"Routes file not found: {path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise DatasetLoadError(f"Could not read routes file {path}: {e}") from e

    async def _fetch_text(self) -> str:
        if self._session is not None:
            return await self._get(self._session)
        async with aiohttp.ClientSession() as session:
            return await self._get(session)

    async def _get(self, session: "ClientSession") -> str:
        try:
            async with session.get(self._location, timeout=self._timeout) as response:
                if response.status != 200:
                    raise DatasetLoadError(
                        f"Routes request to {self._location} returned status {response.status}"
                    )
                return await response.text()
        except aiohttp.ClientError as e:
            raise DatasetLoadError(f"Routes request to {self._location} failed: {e}") from e
        except TimeoutError as e:
            raise DatasetLoadError(f"Routes request to {self._location} timed out") from e

    def _parse_document(self, text: str) -> RoutesDocument:
        try:
            data: Any = json.loads(text)
        except json.JSONDecodeError as e:
            raise DatasetLoadError(f"Invalid JSON format in {self._location}: {e}") from e

        try:
            return RoutesDocument.model_validate(data)
        except ValidationError as e:
            raise DatasetLoadError(
                f"Routes document {self._location} has an unexpected shape: "
                f"{e.error_count()} validation error(s)"
            ) from e
