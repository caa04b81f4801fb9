"""Candidate waypoint sources consumed by the path generator.

The generator only reads candidates; it never mutates or keeps them.
Discovery can be expensive, so CachedWaypointSource scans once and keeps
the result until the owner explicitly refreshes or invalidates it.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Protocol, runtime_checkable

import numpy as np

from flightpath.spline.vectors import as_points, read_only

log = logging.getLogger(__name__)


@runtime_checkable
class WaypointSource(Protocol):
    """Read-only supplier of candidate intermediate positions."""

    def get_candidates(self) -> Sequence[np.ndarray]: ...


def _freeze(points: Iterable[Sequence[float]] | np.ndarray) -> tuple[np.ndarray, ...]:
    pts = as_points(list(points) if not isinstance(points, np.ndarray) else points)
    return tuple(read_only(p.copy()) for p in pts)


class StaticWaypointSource:
    """Fixed candidate pool, copied at construction."""

    def __init__(self, points: Iterable[Sequence[float]] | np.ndarray = ()) -> None:
        self._points = _freeze(points)

    def get_candidates(self) -> tuple[np.ndarray, ...]:
        return self._points

    def __len__(self) -> int:
        return len(self._points)


class CachedWaypointSource:
    """Caches the result of a discovery callable until explicitly refreshed.

    Args:
        discover: Zero-argument callable returning the current candidate
            positions (e.g. a scene scan).
    """

    def __init__(self, discover: Callable[[], Iterable[Sequence[float]]]) -> None:
        self._discover = discover
        self._cache: tuple[np.ndarray, ...] | None = None

    @property
    def is_cached(self) -> bool:
        return self._cache is not None

    def get_candidates(self) -> tuple[np.ndarray, ...]:
        if self._cache is None:
            self.refresh()
        return self._cache  # type: ignore[return-value]

    def refresh(self) -> tuple[np.ndarray, ...]:
        """Re-run discovery now and replace the cached pool."""
        self._cache = _freeze(self._discover())
        log.info("Discovered %d candidate waypoints", len(self._cache))
        return self._cache

    def invalidate(self) -> None:
        """Drop the cache; the next get_candidates() call rediscovers."""
        self._cache = None
