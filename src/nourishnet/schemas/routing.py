"""Route preview request/response schemas."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class SubscriberLocation(BaseModel):
    """A vendor subscriber as supplied by the data-fetching layer."""

    id: str
    name: str = ""
    address: str = ""
    coordinates: Optional[List[float]] = Field(
        default=None,
        description="GeoJSON [longitude, latitude] pair; subscribers without one are skipped.",
    )


class RoutePreviewRequest(BaseModel):
    depot: List[float] = Field(..., description="Vendor location as a GeoJSON [longitude, latitude] pair.")
    subscribers: List[SubscriberLocation] = Field(default_factory=list)
    average_speed_kmh: Optional[float] = Field(None, gt=0)
    per_stop_dwell_minutes: Optional[float] = Field(None, ge=0)
    refine_with_road_network: bool = Field(
        default=False,
        description="Ask the road-routing service for actual distance/time of the sequenced route.",
    )


class RouteStepModel(BaseModel):
    order: int
    stop_id: str
    name: str
    address: str
    coordinates: List[float]
    distance_from_previous_m: Optional[float] = None
    cumulative_time_minutes: Optional[float] = None
    eta_minutes: Optional[int] = None


class RoutePreviewResponse(BaseModel):
    status: Literal["ok", "unavailable"]
    stop_count: int
    total_distance_m: Optional[float] = None
    total_time_minutes: Optional[float] = None
    actual_total_distance_km: Optional[float] = None
    actual_total_time_minutes: Optional[int] = None
    steps: List[RouteStepModel]
    metadata: dict
