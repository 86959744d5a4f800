"""Route dataset source port."""

from typing import Protocol

from nearest_stop.domain.models.route import RouteDataset


class RouteDatasetSource(Protocol):
    """Port for loading the route dataset."""

    async def load(self) -> RouteDataset:
        """Load the dataset.

        Raises:
            DatasetLoadError: If the data is missing, malformed or has no routes.
        """
        ...
