"""Nearest-neighbor sequencing of delivery stops.

Orders a vendor's stops greedily: starting at the depot, always drive to the
closest stop not yet visited. This is an O(n^2) heuristic meant for the tens
of stops a single vendor delivers, not an optimal TSP solution.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ...models.domain import Point, Stop
from ..geospatial import haversine_m, validate_point
from .models import RouteResult, RouteStep, SequencerOptions

logger = logging.getLogger(__name__)


def _validate_inputs(depot: Point, stops: Sequence[Stop]) -> None:
    validate_point(depot, "depot")
    for index, stop in enumerate(stops):
        validate_point(stop.location, f"stops[{index}].location")


def _nearest(current: Point, candidates: Sequence[Stop]) -> tuple[int, float]:
    """Index and distance of the closest candidate; the first one wins on ties."""
    nearest_index = 0
    nearest_distance = haversine_m(current, candidates[0].location)
    for index in range(1, len(candidates)):
        distance = haversine_m(current, candidates[index].location)
        if distance < nearest_distance:
            nearest_distance = distance
            nearest_index = index
    return nearest_index, nearest_distance


def compute_route(
    depot: Point,
    stops: Sequence[Stop],
    options: SequencerOptions | None = None,
) -> RouteResult:
    """Sequence ``stops`` starting from ``depot`` using the nearest-neighbor heuristic.

    Every coordinate is validated up front, so the call either returns a
    complete route or raises ``InvalidCoordinate`` without a partial result.

    Args:
        depot: Start of the route (the vendor location). Not part of the steps.
        stops: Stops to visit. The sequence itself is not modified.
        options: Speed and dwell assumptions for arrival estimates (defaults to settings).

    Returns:
        RouteResult with one step per stop, 1-based ``order`` and cumulative ETAs.
    """
    options = options or SequencerOptions()
    _validate_inputs(depot, stops)

    if not stops:
        return RouteResult(steps=(), total_distance_meters=0.0)

    unvisited = list(stops)
    steps: list[RouteStep] = []
    current = depot
    cumulative_meters = 0.0

    while unvisited:
        index, distance = _nearest(current, unvisited)
        stop = unvisited.pop(index)
        cumulative_meters += distance
        visited = len(steps) + 1
        drive_minutes = (cumulative_meters / 1000.0) / options.average_speed_kmh * 60.0
        steps.append(
            RouteStep(
                stop=stop,
                order=visited,
                distance_from_previous=distance,
                cumulative_time_minutes=drive_minutes + visited * options.per_stop_dwell_minutes,
            )
        )
        current = stop.location

    total_distance = sum(step.distance_from_previous for step in steps)
    logger.debug(
        "Sequenced %d stops, total distance %.1f m, last ETA %.1f min",
        len(steps),
        total_distance,
        steps[-1].cumulative_time_minutes,
    )
    return RouteResult(steps=tuple(steps), total_distance_meters=total_distance)
