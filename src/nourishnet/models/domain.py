"""Domain models for delivery locations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence


@dataclass(frozen=True, slots=True)
class Point:
    """A geographic location stored in GeoJSON order (longitude first)."""

    longitude: float
    latitude: float

    @classmethod
    def from_coordinates(cls, coordinates: Sequence[Any]) -> Point:
        """Build a point from a ``[lng, lat]`` pair as stored on vendor and subscriber records."""

        # Imported lazily, geospatial depends on this module.
        from ..services.geospatial import InvalidCoordinate

        if coordinates is None or isinstance(coordinates, (str, bytes)) or len(coordinates) != 2:
            raise InvalidCoordinate("coordinates", coordinates, "expected a [longitude, latitude] pair")
        longitude, latitude = coordinates
        return cls(longitude=longitude, latitude=latitude)

    def as_lng_lat(self) -> tuple[float, float]:
        return (self.longitude, self.latitude)


@dataclass(frozen=True, slots=True)
class Stop:
    """A single delivery destination (one subscriber of the vendor)."""

    id: str
    name: str
    address: str
    location: Point
