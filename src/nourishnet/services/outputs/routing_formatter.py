"""Serializers for sequenced routes."""

from __future__ import annotations

import csv
import io

from ..routing.models import RouteResult


def route_result_to_json(result: RouteResult) -> dict:
    """Route panel payload: stop order, rounded ETAs and kilometre distances."""
    return {
        "stop_count": result.stop_count,
        "total_distance_km": round(result.total_distance_meters / 1000.0, 1),
        "total_time_minutes": round(result.total_time_minutes),
        "stops": [
            {
                "order": step.order,
                "stop_id": step.stop.id,
                "name": step.stop.name,
                "address": step.stop.address,
                "eta_minutes": round(step.cumulative_time_minutes),
                "distance_from_previous_km": round(step.distance_from_previous / 1000.0, 2),
            }
            for step in result.steps
        ],
    }


def route_result_to_csv(result: RouteResult) -> str:
    buffer = io.StringIO()
    fieldnames = [
        "order",
        "stop_id",
        "name",
        "address",
        "longitude",
        "latitude",
        "distance_from_previous_m",
        "cumulative_time_minutes",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    for step in result.steps:
        writer.writerow(
            {
                "order": step.order,
                "stop_id": step.stop.id,
                "name": step.stop.name,
                "address": step.stop.address,
                "longitude": step.stop.location.longitude,
                "latitude": step.stop.location.latitude,
                "distance_from_previous_m": step.distance_from_previous,
                "cumulative_time_minutes": step.cumulative_time_minutes,
            }
        )
    return buffer.getvalue()
