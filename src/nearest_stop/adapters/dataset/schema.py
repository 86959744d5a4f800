"""Pydantic schema of the routes JSON document."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StopDocument(BaseModel):
    """A stop entry as it appears in the document.

    Coordinates and schedule entries are kept raw; the parser decides what is
    usable so that one bad stop does not reject the whole dataset.
    """

    model_config = ConfigDict(extra="ignore")

    name: str
    latitude: Any = None
    longitude: Any = None
    schedule: list[Any] | None = None


class RouteDocument(BaseModel):
    """A route entry as it appears in the document."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    stops: list[StopDocument] = Field(default_factory=list)


class RoutesDocument(BaseModel):
    """Top-level routes document."""

    model_config = ConfigDict(extra="ignore")

    routes: list[RouteDocument]
