"""Geospatial helper functions."""

from __future__ import annotations

import math
from numbers import Real
from typing import Any

from ..models.domain import Point

EARTH_RADIUS_M = 6_371_000.0


class InvalidCoordinate(ValueError):
    """Raised when a latitude/longitude is missing, non-numeric or out of range."""

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


def haversine_m(origin: Point, destination: Point) -> float:
    """Great-circle distance in meters between two points using the Haversine formula."""

    phi1, phi2 = math.radians(origin.latitude), math.radians(destination.latitude)
    d_phi = math.radians(destination.latitude - origin.latitude)
    d_lambda = math.radians(destination.longitude - origin.longitude)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c


def _check_component(field: str, value: Any, limit: float) -> None:
    # bool is an int subclass but never a coordinate
    if value is None or isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidCoordinate(field, value, "must be a number")
    if not math.isfinite(value):
        raise InvalidCoordinate(field, value, "must be finite")
    if not -limit <= value <= limit:
        raise InvalidCoordinate(field, value, f"must be within [-{limit:g}, {limit:g}]")


def validate_point(point: Point, label: str = "point") -> Point:
    """Return ``point`` unchanged if both components are valid, else raise InvalidCoordinate."""

    if not isinstance(point, Point):
        raise InvalidCoordinate(label, point, "expected a Point")
    _check_component(f"{label}.longitude", point.longitude, 180.0)
    _check_component(f"{label}.latitude", point.latitude, 90.0)
    return point
