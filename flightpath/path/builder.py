"""FlightPath construction with recoverable handling of malformed input."""

import logging
from collections.abc import Sequence

import numpy as np

from flightpath.path.types import FlightPath
from flightpath.spline.arc_length import DEFAULT_SAMPLES_PER_SEGMENT, build_arc_length_table
from flightpath.spline.catmull_rom import DEFAULT_TENSION, add_phantom_points
from flightpath.spline.vectors import FORWARD, ORIGIN, as_points, read_only

log = logging.getLogger(__name__)


def sanitize_waypoints(waypoints: np.ndarray) -> np.ndarray:
    """Replace non-finite waypoints with the last valid one.

    A leading non-finite point takes the first finite point after it, or
    the origin when none exists.
    """
    pts = waypoints.copy()
    finite = np.all(np.isfinite(pts), axis=1)
    if finite.all():
        return pts

    log.warning(
        "Replacing %d non-finite waypoint(s) with the last valid value",
        int((~finite).sum()),
    )
    valid_idx = np.flatnonzero(finite)
    last_valid = pts[valid_idx[0]].copy() if len(valid_idx) else ORIGIN.copy()
    for i in range(len(pts)):
        if finite[i]:
            last_valid = pts[i].copy()
        else:
            pts[i] = last_valid
    return pts


def fallback_waypoints(waypoints: np.ndarray) -> np.ndarray:
    """Two-point stand-in for an under-specified path: start, start + forward."""
    start = waypoints[0] if len(waypoints) else ORIGIN
    if not np.all(np.isfinite(start)):
        start = ORIGIN
    return np.vstack([start, start + FORWARD])


def build_flight_path(
    waypoints: Sequence[Sequence[float]] | np.ndarray,
    seed: int = 0,
    tension: float = DEFAULT_TENSION,
    samples_per_segment: int = DEFAULT_SAMPLES_PER_SEGMENT,
) -> FlightPath:
    """Build an immutable FlightPath from real waypoints.

    Never returns None: fewer than 2 waypoints yields a degenerate
    two-point fallback path and a logged warning.

    Args:
        waypoints: Spawn, intermediates, and target, in travel order.
        seed: Seed that produced the waypoints, kept for reproduction.
        tension: Catmull-Rom tension.
        samples_per_segment: Arc-length samples per segment.

    Returns:
        FlightPath with its arc-length table built.
    """
    pts = as_points(waypoints)
    if len(pts) < 2:
        log.warning(
            "Need at least 2 waypoints (spawn and target), got %d; "
            "using fallback path",
            len(pts),
        )
        pts = fallback_waypoints(pts)
    pts = sanitize_waypoints(pts)

    curve = add_phantom_points(pts)
    table = build_arc_length_table(curve, samples_per_segment, tension)

    return FlightPath(
        waypoints=read_only(pts),
        curve_waypoints=table.curve_waypoints,
        arc_length_table=table,
        total_length=table.total_length,
        seed=int(seed),
        tension=float(tension),
        intermediate_count=max(0, len(pts) - 2),
    )


def max_speed_for_duration(path: FlightPath, min_duration: float) -> float:
    """Highest traversal speed that still keeps the path in flight for ``min_duration``.

    Returns inf when no limit applies (non-positive duration). Zero-length
    paths return 0.0 since no positive speed can satisfy the minimum.
    """
    if min_duration <= 0.0:
        return float("inf")
    return path.total_length / min_duration
