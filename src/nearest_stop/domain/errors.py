"""Errors raised by data sources and external services."""


class DatasetLoadError(Exception):
    """The route dataset could not be loaded or is empty."""


class GeocodingError(Exception):
    """The geocoding service failed or returned an unusable response."""
