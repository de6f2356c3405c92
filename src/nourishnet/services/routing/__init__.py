"""Delivery route sequencing."""

from .models import RouteResult, RouteStep, SequencerOptions
from .sequencer import compute_route

__all__ = ["compute_route", "RouteResult", "RouteStep", "SequencerOptions"]
