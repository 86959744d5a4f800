"""Route dataset adapters."""

from nearest_stop.adapters.dataset.json_route_dataset_source import JsonRouteDatasetSource
from nearest_stop.adapters.dataset.route_dataset_parser import RouteDatasetParser

__all__ = ["JsonRouteDatasetSource", "RouteDatasetParser"]
