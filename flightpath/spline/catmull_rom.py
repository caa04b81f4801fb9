"""Catmull-Rom curve evaluation with a tension parameter.

A segment interpolates between p1 and p2, using p0 and p3 as the outer
control points:

    P(t) = tension * ((-t^3 + 2t^2 - t)  * p0 +
                      (3t^3 - 5t^2 + 2)  * p1 +
                      (-3t^3 + 4t^2 + t) * p2 +
                      (t^3 - t^2)        * p3)

With tension 0.5 this is the standard uniform Catmull-Rom spline and the
curve passes through p1 at t=0 and p2 at t=1. Paths with only a couple of
real waypoints get phantom control points extrapolated past each end so
every real segment has a full 4-point window.
"""

import logging

import numpy as np

from flightpath.spline.vectors import FORWARD, as_points, is_finite, normalize

log = logging.getLogger(__name__)

DEFAULT_TENSION = 0.5


def _position_basis(t: np.ndarray) -> np.ndarray:
    """Blend weights for p0..p3, shape (len(t), 4)."""
    t2 = t * t
    t3 = t2 * t
    return np.stack(
        [
            -t3 + 2.0 * t2 - t,
            3.0 * t3 - 5.0 * t2 + 2.0,
            -3.0 * t3 + 4.0 * t2 + t,
            t3 - t2,
        ],
        axis=-1,
    )


def _tangent_basis(t: np.ndarray) -> np.ndarray:
    """Derivative of the position blend weights, shape (len(t), 4)."""
    t2 = t * t
    return np.stack(
        [
            -3.0 * t2 + 4.0 * t - 1.0,
            9.0 * t2 - 10.0 * t,
            -9.0 * t2 + 8.0 * t + 1.0,
            3.0 * t2 - 2.0 * t,
        ],
        axis=-1,
    )


def evaluate_position(
    p0: np.ndarray,
    p1: np.ndarray,
    p2: np.ndarray,
    p3: np.ndarray,
    t: float,
    tension: float = DEFAULT_TENSION,
) -> np.ndarray:
    """Position on the segment between p1 and p2 at parameter t (clamped to [0, 1])."""
    control = np.stack([p0, p1, p2, p3]).astype(np.float64)
    weights = _position_basis(np.array([min(max(float(t), 0.0), 1.0)]))[0]
    return tension * (weights @ control)


def evaluate_tangent(
    p0: np.ndarray,
    p1: np.ndarray,
    p2: np.ndarray,
    p3: np.ndarray,
    t: float,
    tension: float = DEFAULT_TENSION,
) -> np.ndarray:
    """Derivative of the segment at t. Not normalized; see normalize()."""
    control = np.stack([p0, p1, p2, p3]).astype(np.float64)
    weights = _tangent_basis(np.array([min(max(float(t), 0.0), 1.0)]))[0]
    return tension * (weights @ control)


def evaluate_segment(
    control: np.ndarray, ts: np.ndarray, tension: float = DEFAULT_TENSION
) -> np.ndarray:
    """Vectorized position evaluation at many parameters.

    Args:
        control: Array of shape (4, 3) holding p0..p3.
        ts: Parameter values, clamped to [0, 1].
        tension: Spline tension.

    Returns:
        Array of shape (len(ts), 3).
    """
    ts = np.clip(np.asarray(ts, dtype=np.float64), 0.0, 1.0)
    return tension * (_position_basis(ts) @ control)


def unit_tangent(
    control: np.ndarray, t: float, tension: float = DEFAULT_TENSION
) -> np.ndarray:
    """Normalized tangent at t, falling back to world forward when degenerate."""
    return normalize(evaluate_tangent(*control, t, tension=tension), fallback=FORWARD)


def add_phantom_points(waypoints: np.ndarray) -> np.ndarray:
    """Extrapolate one phantom control point past each end of the path.

    phantom = 2 * endpoint - adjacent. Applied at both ends for any input
    of two or more points, so an N-point path yields N + 2 control points
    and N - 1 fully-controlled segments. A phantom that overflows falls
    back to its endpoint.

    Raises:
        ValueError: If fewer than 2 waypoints are given.
    """
    pts = as_points(waypoints)
    if len(pts) < 2:
        raise ValueError(f"need at least 2 waypoints, got {len(pts)}")
    with np.errstate(over="ignore", invalid="ignore"):
        before = 2.0 * pts[0] - pts[1]
        after = 2.0 * pts[-1] - pts[-2]
    if not is_finite(before):
        log.warning("Leading phantom point is not finite; using the first waypoint")
        before = pts[0].copy()
    if not is_finite(after):
        log.warning("Trailing phantom point is not finite; using the last waypoint")
        after = pts[-1].copy()
    return np.vstack([before, pts, after])


def segment_count(curve_waypoints: np.ndarray) -> int:
    """Number of interpolated segments for a control point array."""
    return max(0, len(curve_waypoints) - 3)


def segment_controls(curve_waypoints: np.ndarray, segment: int) -> np.ndarray:
    """The (4, 3) control window for ``segment``."""
    return curve_waypoints[segment : segment + 4]
