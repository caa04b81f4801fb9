"""Immutable flight path values and their construction."""

from flightpath.path.builder import (
    build_flight_path,
    fallback_waypoints,
    max_speed_for_duration,
    sanitize_waypoints,
)
from flightpath.path.types import FlightPath

__all__ = [
    "FlightPath",
    "build_flight_path",
    "fallback_waypoints",
    "max_speed_for_duration",
    "sanitize_waypoints",
]
