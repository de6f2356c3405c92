"""Route preview orchestration for the vendor delivery map."""

from __future__ import annotations

import logging
from typing import Sequence

import httpx

from ...models.domain import Point, Stop
from ...schemas.routing import (
    RoutePreviewRequest,
    RoutePreviewResponse,
    RouteStepModel,
    SubscriberLocation,
)
from ..export.geojson import route_to_geojson
from ..geospatial import InvalidCoordinate
from ..outputs.routing_formatter import route_result_to_csv, route_result_to_json
from .models import RouteResult, SequencerOptions
from .osrm_client import OSRMClient, build_waypoints, decode_polyline
from .sequencer import compute_route

logger = logging.getLogger(__name__)


def _has_coordinates(subscriber: SubscriberLocation) -> bool:
    return subscriber.coordinates is not None and len(subscriber.coordinates) == 2


def extract_stops(subscribers: Sequence[SubscriberLocation]) -> tuple[list[Stop], list[str]]:
    """Turn subscriber records into stops, skipping those without a location.

    Returns:
        The stops in input order and the ids of skipped subscribers.
    """
    stops: list[Stop] = []
    skipped: list[str] = []
    for subscriber in subscribers:
        if not _has_coordinates(subscriber):
            skipped.append(subscriber.id)
            continue
        stops.append(
            Stop(
                id=subscriber.id,
                name=subscriber.name,
                address=subscriber.address,
                location=Point.from_coordinates(subscriber.coordinates),
            )
        )
    return stops, skipped


def _build_options(payload: RoutePreviewRequest) -> SequencerOptions:
    base = SequencerOptions()
    return SequencerOptions(
        average_speed_kmh=payload.average_speed_kmh
        if payload.average_speed_kmh is not None
        else base.average_speed_kmh,
        per_stop_dwell_minutes=payload.per_stop_dwell_minutes
        if payload.per_stop_dwell_minutes is not None
        else base.per_stop_dwell_minutes,
    )


def _unavailable_response(stops: Sequence[Stop], metadata: dict) -> RoutePreviewResponse:
    """Unordered stop list shown when no route can be computed."""
    return RoutePreviewResponse(
        status="unavailable",
        stop_count=len(stops),
        steps=[
            RouteStepModel(
                order=position,
                stop_id=stop.id,
                name=stop.name,
                address=stop.address,
                coordinates=list(stop.location.as_lng_lat()),
            )
            for position, stop in enumerate(stops, start=1)
        ],
        metadata=metadata,
    )


def _refine_with_road_network(depot: Point, result: RouteResult, metadata: dict) -> dict | None:
    """Query OSRM for the road distance/time of the sequenced route.

    Returns the first OSRM route, or None when the service could not be used;
    the failure reason is recorded in ``metadata``.
    """
    if not result.steps:
        return None
    try:
        osrm_client = OSRMClient()
        data = osrm_client.route(build_waypoints(depot, result))
    except (ConnectionError, ValueError, httpx.HTTPError) as exc:
        logger.warning(f"OSRM route request failed: {exc}. Returning straight-line estimates only.")
        metadata["road_network_error"] = str(exc)
        return None
    return data["routes"][0]


def build_route_preview(payload: RoutePreviewRequest) -> RoutePreviewResponse:
    """Sequence a vendor's subscribers into a delivery route for display."""
    options = _build_options(payload)
    metadata: dict = {
        "algorithm": "nearest_neighbor",
        "average_speed_kmh": options.average_speed_kmh,
        "per_stop_dwell_minutes": options.per_stop_dwell_minutes,
    }

    stops, skipped = extract_stops(payload.subscribers)
    metadata["skipped_stops"] = skipped
    if skipped:
        logger.info(f"Skipped {len(skipped)} subscribers without a location")

    try:
        depot = Point.from_coordinates(payload.depot)
        result = compute_route(depot, stops, options)
    except InvalidCoordinate as exc:
        logger.warning(f"Route unavailable for {len(stops)} stops: {exc}")
        metadata["reason"] = str(exc)
        return _unavailable_response(stops, metadata)

    actual_total_distance_km = None
    actual_total_time_minutes = None
    road_path = None
    if payload.refine_with_road_network:
        road_route = _refine_with_road_network(depot, result, metadata)
        if road_route is not None:
            actual_total_distance_km = round(road_route["distance"] / 1000.0, 1)
            actual_total_time_minutes = round(road_route["duration"] / 60.0)
            geometry = road_route.get("geometry")
            if isinstance(geometry, str) and geometry:
                road_path = decode_polyline(geometry)

    metadata["route_panel"] = route_result_to_json(result)
    metadata["map_overlays"] = route_to_geojson(depot, result, path=road_path)

    return RoutePreviewResponse(
        status="ok",
        stop_count=result.stop_count,
        total_distance_m=result.total_distance_meters,
        total_time_minutes=result.total_time_minutes,
        actual_total_distance_km=actual_total_distance_km,
        actual_total_time_minutes=actual_total_time_minutes,
        steps=[
            RouteStepModel(
                order=step.order,
                stop_id=step.stop.id,
                name=step.stop.name,
                address=step.stop.address,
                coordinates=list(step.stop.location.as_lng_lat()),
                distance_from_previous_m=step.distance_from_previous,
                cumulative_time_minutes=step.cumulative_time_minutes,
                eta_minutes=round(step.cumulative_time_minutes),
            )
            for step in result.steps
        ],
        metadata=metadata,
    )


def export_route_csv(payload: RoutePreviewRequest) -> str:
    """Sequence the subscribers and render the route as CSV rows.

    Unlike the preview there is no fallback: malformed locations raise
    ``InvalidCoordinate``.
    """
    depot = Point.from_coordinates(payload.depot)
    stops, skipped = extract_stops(payload.subscribers)
    if skipped:
        logger.info(f"Skipped {len(skipped)} subscribers without a location")
    result = compute_route(depot, stops, _build_options(payload))
    return route_result_to_csv(result)
