"""Intermediate waypoint selection and synthesis.

Implements the individual stages of the hybrid sourcing policy:
1. Difficulty-weighted count draw
2. Candidate filtering against the spawn->target corridor
3. Seeded Fisher-Yates subset selection
4. Dynamic synthesis with lateral/vertical deviation and zone clamping
5. Ordering by progress along the spawn->target axis

Every function that consumes randomness takes the caller's Generator
explicitly; the draw order documented on each function is part of the
determinism contract.
"""

import logging
from collections.abc import Sequence

import numpy as np

from flightpath.config.settings import DifficultyWaypointPolicy, FlightZone, WaypointConfig
from flightpath.spline.vectors import EPS, RIGHT, UP, as_vector, normalize

log = logging.getLogger(__name__)


def select_waypoint_count(
    policy: DifficultyWaypointPolicy, rng: np.random.Generator
) -> int:
    """Draw the number of intermediate waypoints for one path.

    Consumes one uniform draw unless min_count == max_count. The weighting
    biases toward max_count as chance_of_max grows but never guarantees it:

        weighted = clamp01(u * (1 + c) - c * 0.5)
        count = min + round(weighted * (max - min))
    """
    if policy.min_count == policy.max_count:
        return policy.min_count

    u = float(rng.random())
    c = policy.chance_of_max
    weighted = min(max(u * (1.0 + c) - c * 0.5, 0.0), 1.0)
    span = policy.max_count - policy.min_count
    return policy.min_count + int(round(weighted * span))


def path_axis(spawn: np.ndarray, target: np.ndarray) -> tuple[np.ndarray, float]:
    """Unit spawn->target direction and straight-line length.

    Degenerate (coincident) endpoints give a zero direction and length 0.
    """
    offset = target - spawn
    length = float(np.linalg.norm(offset))
    if not np.isfinite(length) or length < EPS:
        return np.zeros(3), 0.0
    return offset / length, length


def filter_candidates(
    spawn: np.ndarray,
    target: np.ndarray,
    candidates: Sequence[np.ndarray],
    min_distance_from_endpoints: float,
    max_lateral_distance: float,
) -> list[np.ndarray]:
    """Keep candidates that sit inside the spawn->target corridor.

    A candidate survives when it is at least min_distance_from_endpoints
    from both endpoints, its projection onto the axis lies within
    [min_distance, length - min_distance], and it is no further than
    max_lateral_distance from the straight line. Input order is preserved.
    """
    direction, length = path_axis(spawn, target)
    if length == 0.0:
        return []

    d_min = min_distance_from_endpoints
    suitable: list[np.ndarray] = []
    for point in candidates:
        point = as_vector(point)
        if not np.all(np.isfinite(point)):
            continue
        if np.linalg.norm(point - spawn) < d_min or np.linalg.norm(point - target) < d_min:
            continue
        projected = float(np.dot(point - spawn, direction))
        if projected < d_min or projected > length - d_min:
            continue
        lateral = float(np.linalg.norm(point - (spawn + direction * projected)))
        if lateral > max_lateral_distance:
            continue
        suitable.append(point)
    return suitable


def select_random_subset(
    candidates: Sequence[np.ndarray], count: int, rng: np.random.Generator
) -> list[np.ndarray]:
    """Seeded Fisher-Yates shuffle, then take the first ``count``.

    Draws one integer per swap, for i from len-1 down to 1. When there are
    no more candidates than requested, all are returned without drawing.
    """
    if len(candidates) <= count:
        return [c.copy() for c in candidates]

    shuffled = [c.copy() for c in candidates]
    for i in range(len(shuffled) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled[:count]


def lateral_axis(direction: np.ndarray) -> np.ndarray:
    """Horizontal direction perpendicular to the path.

    Uses the world up axis as reference, falling back to the right axis for
    vertical paths, and to the right axis itself if both are degenerate.
    """
    perpendicular = normalize(np.cross(direction, UP), fallback=np.zeros(3))
    if np.dot(perpendicular, perpendicular) < 1e-3:
        perpendicular = normalize(np.cross(direction, RIGHT), fallback=np.zeros(3))
    if np.dot(perpendicular, perpendicular) < 1e-3:
        perpendicular = RIGHT.copy()
    return perpendicular


def clamp_to_zone(point: np.ndarray, zone: FlightZone) -> np.ndarray:
    """Clamp x/z into the zone box and y into the [min_height, max_height] band."""
    lo = zone.minimum
    hi = zone.maximum
    return np.array(
        [
            min(max(point[0], lo[0]), hi[0]),
            min(max(point[1], zone.min_height), zone.max_height),
            min(max(point[2], lo[2]), hi[2]),
        ]
    )


def generate_dynamic_waypoint(
    spawn: np.ndarray,
    target: np.ndarray,
    progress: float,
    rng: np.random.Generator,
    waypoint_config: WaypointConfig,
    zone: FlightZone,
) -> np.ndarray:
    """Synthesize one waypoint at ``progress`` (0..1) along spawn->target.

    Consumes two uniform draws, lateral offset first, then vertical.
    """
    offset = target - spawn
    base = spawn + offset * progress
    direction = normalize(offset, fallback=np.zeros(3))
    perpendicular = lateral_axis(direction)

    lateral = (float(rng.random()) * 2.0 - 1.0) * waypoint_config.lateral_deviation_range
    vertical = (float(rng.random()) * 2.0 - 1.0) * waypoint_config.vertical_deviation_range

    waypoint = base + perpendicular * lateral + UP * vertical
    return clamp_to_zone(waypoint, zone)


def generate_dynamic_waypoints(
    spawn: np.ndarray,
    target: np.ndarray,
    count: int,
    rng: np.random.Generator,
    waypoint_config: WaypointConfig,
    zone: FlightZone,
) -> list[np.ndarray]:
    """Synthesize ``count`` waypoints evenly spaced at (i + 1) / (count + 1)."""
    return [
        generate_dynamic_waypoint(
            spawn, target, (i + 1.0) / (count + 1.0), rng, waypoint_config, zone
        )
        for i in range(count)
    ]


def sort_by_progress(
    spawn: np.ndarray, target: np.ndarray, waypoints: list[np.ndarray]
) -> list[np.ndarray]:
    """Order waypoints by projection onto the spawn->target axis.

    Stable: waypoints with equal projection keep their selection order.
    """
    if len(waypoints) <= 1:
        return list(waypoints)
    direction, _ = path_axis(spawn, target)
    return sorted(waypoints, key=lambda p: float(np.dot(p - spawn, direction)))
