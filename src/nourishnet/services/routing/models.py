"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass, field

from ...config import settings
from ...models.domain import Stop


@dataclass(frozen=True, slots=True)
class SequencerOptions:
    average_speed_kmh: float = field(default_factory=lambda: settings.average_speed_kmh)
    per_stop_dwell_minutes: float = field(default_factory=lambda: settings.per_stop_dwell_minutes)

    def __post_init__(self) -> None:
        if not self.average_speed_kmh > 0:
            raise ValueError(f"average_speed_kmh must be positive, got {self.average_speed_kmh!r}")
        if not self.per_stop_dwell_minutes >= 0:
            raise ValueError(f"per_stop_dwell_minutes must be non-negative, got {self.per_stop_dwell_minutes!r}")


@dataclass(frozen=True, slots=True)
class RouteStep:
    stop: Stop
    order: int
    distance_from_previous: float
    cumulative_time_minutes: float


@dataclass(frozen=True, slots=True)
class RouteResult:
    steps: tuple[RouteStep, ...] = ()
    total_distance_meters: float = 0.0

    @property
    def stop_count(self) -> int:
        return len(self.steps)

    @property
    def total_time_minutes(self) -> float:
        """Estimated arrival at the last stop, 0 for an empty route."""
        return self.steps[-1].cumulative_time_minutes if self.steps else 0.0

    @property
    def ordered_ids(self) -> list[str]:
        return [step.stop.id for step in self.steps]
