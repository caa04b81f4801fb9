"""Flight path data structure with precomputed arc-length data."""

from dataclasses import dataclass

import numpy as np

from flightpath.spline.arc_length import ArcLengthTable


@dataclass(frozen=True)
class FlightPath:
    """Immutable path through a set of waypoints, traversable at constant speed.

    Holds the real waypoints (spawn + intermediates + target), the control
    points with phantoms added, and the arc-length table built over them.
    All queries are pure functions of distance or normalized time. Uses
    frozen=True but omits slots=True since numpy arrays don't interact well
    with __slots__; the arrays themselves are flagged read-only.
    """

    waypoints: np.ndarray  # float64 (n, 3), n >= 2, no phantoms
    curve_waypoints: np.ndarray  # float64 (n + 2, 3), phantoms at both ends
    arc_length_table: ArcLengthTable
    total_length: float
    seed: int
    tension: float
    intermediate_count: int

    @property
    def spawn_point(self) -> np.ndarray:
        return self.waypoints[0].copy()

    @property
    def target_point(self) -> np.ndarray:
        return self.waypoints[-1].copy()

    def position_at_distance(self, distance: float) -> np.ndarray:
        """World position at ``distance`` along the curve, clamped to the ends."""
        return self.arc_length_table.position_at_length(distance)

    def tangent_at_distance(self, distance: float) -> np.ndarray:
        """Unit direction of travel at ``distance`` along the curve."""
        return self.arc_length_table.tangent_at_length(distance)

    def position_at_time(self, normalized_time: float) -> np.ndarray:
        return self.position_at_distance(self.distance_at_time(normalized_time))

    def tangent_at_time(self, normalized_time: float) -> np.ndarray:
        return self.tangent_at_distance(self.distance_at_time(normalized_time))

    def distance_at_time(self, normalized_time: float) -> float:
        """Distance for a normalized time, clamped to [0, 1] first."""
        t = float(normalized_time)
        if np.isnan(t):
            t = 0.0
        return min(max(t, 0.0), 1.0) * self.total_length

    def time_at_distance(self, distance: float) -> float:
        """Normalized time in [0, 1] for a distance; 0 for zero-length paths."""
        if self.total_length <= 0.0:
            return 0.0
        d = float(distance)
        if np.isnan(d):
            return 0.0
        return min(max(d / self.total_length, 0.0), 1.0)

    def is_at_end(self, distance: float) -> bool:
        """True once ``distance`` reaches the end of the path."""
        return float(distance) >= self.total_length

    def sample_points(self, num_points: int = 50) -> np.ndarray:
        """Evenly time-spaced positions along the path, shape (num_points, 3).

        Fewer than 2 points are raised to 2 (start and end).
        """
        num_points = max(2, int(num_points))
        times = np.arange(num_points, dtype=np.float64) / (num_points - 1)
        return np.stack([self.position_at_time(t) for t in times])

    def estimated_duration(self, speed: float) -> float:
        """Seconds to traverse the path at ``speed``; inf for non-positive speeds."""
        if speed <= 0.0:
            return float("inf")
        return self.total_length / speed

    def __str__(self) -> str:
        return (
            f"FlightPath[waypoints={len(self.waypoints)}, "
            f"intermediates={self.intermediate_count}, "
            f"length={self.total_length:.2f}, seed={self.seed}]"
        )
