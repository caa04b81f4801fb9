"""Small 3-D vector helpers shared by the spline and generation code."""

from collections.abc import Sequence

import numpy as np

# Magnitudes below this are treated as zero-length
EPS = 1e-4

UP = np.array([0.0, 1.0, 0.0])
RIGHT = np.array([1.0, 0.0, 0.0])
FORWARD = np.array([0.0, 0.0, 1.0])
ORIGIN = np.zeros(3)


def as_vector(value: Sequence[float] | np.ndarray) -> np.ndarray:
    """Coerce a length-3 sequence into a fresh float64 array of shape (3,)."""
    vec = np.array(value, dtype=np.float64).reshape(-1)
    if vec.shape != (3,):
        raise ValueError(f"expected a 3-D point, got shape {vec.shape}")
    return vec


def as_points(values: Sequence[Sequence[float]] | np.ndarray) -> np.ndarray:
    """Coerce a sequence of 3-D points into a float64 array of shape (n, 3)."""
    pts = np.array(values, dtype=np.float64)
    if pts.size == 0:
        return np.zeros((0, 3))
    if pts.ndim != 2 or pts.shape[1] != 3:
        raise ValueError(f"expected an (n, 3) point array, got shape {pts.shape}")
    return pts


def is_finite(vec: np.ndarray) -> bool:
    return bool(np.all(np.isfinite(vec)))


def normalize(vec: np.ndarray, fallback: np.ndarray = FORWARD) -> np.ndarray:
    """Return ``vec`` scaled to unit length.

    Falls back to a copy of ``fallback`` when the magnitude is below EPS or
    not finite, so callers never see NaN.
    """
    mag = float(np.linalg.norm(vec))
    if not np.isfinite(mag) or mag < EPS:
        return np.array(fallback, dtype=np.float64)
    return vec / mag


def distance(a: np.ndarray, b: np.ndarray) -> float:
    return float(np.linalg.norm(b - a))


def read_only(arr: np.ndarray) -> np.ndarray:
    """Mark an array as immutable in place and return it."""
    arr.setflags(write=False)
    return arr
