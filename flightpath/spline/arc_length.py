"""Arc-length parameterization for multi-segment Catmull-Rom curves.

The table is sampled once per curve and cached on the path. Each segment
contributes ``samples_per_segment`` chord lengths, so a curve with S
segments yields a table of S * samples + 1 cumulative lengths starting at
0.0. Distance queries binary-search the table, interpolate the local
parameter between the bracketing samples, and evaluate the spline there.
"""

import logging
from dataclasses import dataclass

import numpy as np

from flightpath.spline.catmull_rom import (
    DEFAULT_TENSION,
    evaluate_segment,
    segment_controls,
    segment_count,
    unit_tangent,
)
from flightpath.spline.vectors import as_points, read_only

log = logging.getLogger(__name__)

DEFAULT_SAMPLES_PER_SEGMENT = 20


@dataclass(frozen=True)
class ArcLengthTable:
    """Immutable cumulative arc-length lookup over a control point array.

    Uses frozen=True but omits slots=True since numpy arrays don't
    interact well with __slots__. Arrays are flagged read-only.
    """

    lengths: np.ndarray  # float64, shape (segments * samples + 1,), non-decreasing
    curve_waypoints: np.ndarray  # float64, shape (n + 2, 3), includes phantoms
    samples_per_segment: int
    tension: float

    @property
    def total_length(self) -> float:
        return float(self.lengths[-1])

    @property
    def segment_count(self) -> int:
        return segment_count(self.curve_waypoints)

    def locate(self, target: float) -> tuple[int, float]:
        """Map a distance along the curve to (segment_index, local_t).

        Distances are clamped to [0, total_length]; NaN is treated as 0.
        """
        target = self._clamp(target)
        total = self.total_length
        last_segment = self.segment_count - 1
        if target <= 0.0:
            return 0, 0.0
        if target >= total:
            return last_segment, 1.0

        high = int(np.searchsorted(self.lengths, target, side="left"))
        low = high - 1
        start = self.lengths[low]
        span = self.lengths[high] - start
        frac = (target - start) / span if span > 0.0 else 0.0

        segment = min(low // self.samples_per_segment, last_segment)
        sample = low - segment * self.samples_per_segment
        local_t = (sample + frac) / self.samples_per_segment
        return segment, float(min(max(local_t, 0.0), 1.0))

    def length_at(self, segment: int, local_t: float) -> float:
        """Inverse of locate(): cumulative length at a curve parameter."""
        segment = min(max(int(segment), 0), self.segment_count - 1)
        position = (segment + min(max(float(local_t), 0.0), 1.0)) * self.samples_per_segment
        low = min(int(np.floor(position)), len(self.lengths) - 2)
        frac = position - low
        return float(self.lengths[low] + frac * (self.lengths[low + 1] - self.lengths[low]))

    def position_at_length(self, target: float) -> np.ndarray:
        """Point on the curve at arc length ``target``.

        Clamps to the first and last real waypoints outside (0, total_length).
        """
        target = self._clamp(target)
        if target <= 0.0:
            return self.curve_waypoints[1].copy()
        if target >= self.total_length:
            return self.curve_waypoints[-2].copy()
        segment, local_t = self.locate(target)
        control = segment_controls(self.curve_waypoints, segment)
        return evaluate_segment(control, np.array([local_t]), self.tension)[0]

    def tangent_at_length(self, target: float) -> np.ndarray:
        """Unit direction of travel at arc length ``target``."""
        segment, local_t = self.locate(target)
        control = segment_controls(self.curve_waypoints, segment)
        return unit_tangent(control, local_t, self.tension)

    def _clamp(self, target: float) -> float:
        target = float(target)
        if np.isnan(target):
            return 0.0
        return min(max(target, 0.0), self.total_length)


def build_arc_length_table(
    curve_waypoints: np.ndarray,
    samples_per_segment: int = DEFAULT_SAMPLES_PER_SEGMENT,
    tension: float = DEFAULT_TENSION,
) -> ArcLengthTable:
    """Sample every segment and accumulate chord lengths into a lookup table.

    Args:
        curve_waypoints: Control points including phantoms, at least 4.
        samples_per_segment: Chords per segment; values below 2 are raised to 2.
        tension: Spline tension.

    Returns:
        ArcLengthTable with a finite, non-decreasing length array.

    Raises:
        ValueError: If fewer than 4 control points are given.
    """
    pts = as_points(curve_waypoints)
    n_segments = segment_count(pts)
    if n_segments < 1:
        raise ValueError(
            f"need at least 4 control points (including phantoms), got {len(pts)}"
        )
    samples = max(2, int(samples_per_segment))
    ts = np.arange(samples + 1, dtype=np.float64) / samples

    chunks: list[np.ndarray] = [np.zeros(1)]
    running = 0.0
    for segment in range(n_segments):
        sampled = evaluate_segment(segment_controls(pts, segment), ts, tension)
        steps = np.linalg.norm(np.diff(sampled, axis=0), axis=1)
        bad = ~np.isfinite(steps)
        if bad.any():
            log.warning(
                "Segment %d produced %d non-finite chord lengths; treating as 0",
                segment,
                int(bad.sum()),
            )
            steps[bad] = 0.0
        cumulative = running + np.cumsum(steps)
        chunks.append(cumulative)
        running = float(cumulative[-1])

    lengths = np.concatenate(chunks)
    # cumsum of non-negative steps is already sorted; guard against round-off
    lengths = np.maximum.accumulate(lengths)

    log.debug(
        "Arc-length table: %d segments x %d samples, total %.4f",
        n_segments,
        samples,
        running,
    )
    return ArcLengthTable(
        lengths=read_only(lengths),
        curve_waypoints=read_only(pts.copy()),
        samples_per_segment=samples,
        tension=float(tension),
    )
