"""GeoJSON export of sequenced routes for the delivery map."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from shapely.geometry import LineString, Point as ShapelyPoint, mapping

from ...models.domain import Point
from ..routing.models import RouteResult

DEPOT_COLOR = "#e0003e"
STOP_COLOR = "#02d8e0"
PATH_COLOR = "#0000c1"


def _feature(geometry, properties: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "type": "Feature",
        "geometry": mapping(geometry),
        "properties": properties,
    }


def route_to_geojson(
    depot: Point,
    result: RouteResult,
    path: Sequence[tuple[float, float]] | None = None,
) -> Dict[str, Any]:
    """Convert a sequenced route to a GeoJSON FeatureCollection.

    Args:
        depot: Route start, rendered as the vendor marker.
        result: Sequenced route; each step becomes a numbered marker.
        path: Optional road geometry as (lat, lon) pairs, e.g. a decoded OSRM
            polyline. Defaults to straight lines from the depot through the stops.

    Returns:
        FeatureCollection with the depot marker, stop markers and the path line.
    """
    features: List[Dict[str, Any]] = [
        _feature(
            ShapelyPoint(depot.longitude, depot.latitude),
            {"kind": "depot", "label": "START", "color": DEPOT_COLOR},
        )
    ]

    for step in result.steps:
        location = step.stop.location
        features.append(
            _feature(
                ShapelyPoint(location.longitude, location.latitude),
                {
                    "kind": "stop",
                    "order": step.order,
                    "label": str(step.order),
                    "stop_id": step.stop.id,
                    "name": step.stop.name,
                    "address": step.stop.address,
                    "eta_minutes": round(step.cumulative_time_minutes),
                    "distance_from_previous_km": round(step.distance_from_previous / 1000.0, 2),
                    "color": STOP_COLOR,
                },
            )
        )

    if path:
        line_coords = [(lon, lat) for lat, lon in path]
        source = "road"
    else:
        line_coords = [depot.as_lng_lat(), *(step.stop.location.as_lng_lat() for step in result.steps)]
        source = "straight"

    # A LineString needs two distinct positions; an all-depot route has no path.
    if len(set(line_coords)) >= 2:
        features.append(
            _feature(
                LineString(line_coords),
                {
                    "kind": "path",
                    "source": source,
                    "total_distance_km": round(result.total_distance_meters / 1000.0, 1),
                    "color": PATH_COLOR,
                },
            )
        )

    return {"type": "FeatureCollection", "features": features}
