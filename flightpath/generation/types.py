"""Data types for path generation results and diagnostics."""

from dataclasses import dataclass
from enum import StrEnum

import numpy as np

from flightpath.path.types import FlightPath


class SelectionSource(StrEnum):
    """Where a path's intermediate waypoints came from.

    NONE: No intermediates (count of 0, or degenerate geometry).
    PREPLACED: All intermediates taken from the candidate pool.
    DYNAMIC: All intermediates synthesized.
    HYBRID: Every suitable candidate used, remainder synthesized.
    """

    NONE = "none"
    PREPLACED = "preplaced"
    DYNAMIC = "dynamic"
    HYBRID = "hybrid"


@dataclass(frozen=True, slots=True)
class DurationCheck:
    """Advisory minimum-flight-duration assessment of a generated path.

    Evaluated at the reference speed from config; the caller that assigns
    the actual traversal speed owns enforcement.
    """

    total_length: float
    required_length: float  # min_duration * reference_speed
    min_duration: float
    reference_speed: float
    is_short: bool
    needs_extension: bool  # short and still below the extension waypoint cap


@dataclass(frozen=True)
class GenerationResult:
    """A generated path plus the diagnostics needed to reproduce and audit it."""

    path: FlightPath
    seed: int  # effective seed, drawn if the caller passed none
    difficulty_level: int
    requested_count: int
    source: SelectionSource
    candidates_offered: int
    candidates_suitable: int
    preplaced_used: int
    dynamic_used: int
    duration_check: DurationCheck


@dataclass(frozen=True)
class WaypointSelection:
    """Intermediate waypoints chosen for one path, already sorted by progress."""

    waypoints: list[np.ndarray]  # each shape (3,)
    source: SelectionSource
    candidates_suitable: int
    preplaced_used: int
    dynamic_used: int
