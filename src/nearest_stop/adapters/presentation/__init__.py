"""Presentation adapters."""

from nearest_stop.adapters.presentation.formatting import format_distance, format_time_12h
from nearest_stop.adapters.presentation.text_presenter import (
    TextPresenter,
    dataset_to_dict,
    location_failure_to_dict,
    lookup_to_dict,
)

__all__ = [
    "TextPresenter",
    "dataset_to_dict",
    "format_distance",
    "format_time_12h",
    "location_failure_to_dict",
    "lookup_to_dict",
]
