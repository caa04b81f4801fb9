"""Flight path generation with difficulty-scaled hybrid waypoint sourcing.

Pipeline for one path request:
1. Resolve the seed and create a per-call Generator
2. Draw the intermediate waypoint count from the difficulty policy
3. Filter the candidate pool to the spawn->target corridor
4. Select candidates (shuffle) and/or synthesize the remainder
5. Sort by progress, assemble [spawn, *intermediates, target]
6. Build the FlightPath and run the advisory duration check

Random draws happen in a fixed order (count, shuffle swaps, then lateral
and vertical offsets per synthesized waypoint), so identical inputs and
seed reproduce the same path exactly.
"""

import logging
from collections.abc import Sequence

import numpy as np

from flightpath.config.defaults import DEFAULT_CONFIG
from flightpath.config.settings import FlightPathConfig
from flightpath.generation.duration import check_min_duration
from flightpath.generation.selection import (
    filter_candidates,
    generate_dynamic_waypoints,
    path_axis,
    select_random_subset,
    select_waypoint_count,
    sort_by_progress,
)
from flightpath.generation.sources import WaypointSource
from flightpath.generation.types import GenerationResult, SelectionSource, WaypointSelection
from flightpath.path.builder import build_flight_path
from flightpath.reproducibility.seed import create_rng, resolve_seed
from flightpath.spline.vectors import as_vector, is_finite

log = logging.getLogger(__name__)


def _no_intermediates(suitable: int = 0) -> WaypointSelection:
    return WaypointSelection(
        waypoints=[],
        source=SelectionSource.NONE,
        candidates_suitable=suitable,
        preplaced_used=0,
        dynamic_used=0,
    )


def select_intermediates(
    spawn: np.ndarray,
    target: np.ndarray,
    count: int,
    candidates: Sequence[np.ndarray],
    config: FlightPathConfig,
    rng: np.random.Generator,
) -> WaypointSelection:
    """Choose ``count`` intermediate waypoints, preferring suitable candidates.

    Args:
        spawn: Path start.
        target: Path end.
        count: Number of intermediates requested.
        candidates: Read-only candidate pool (may be empty).
        config: Generation configuration.
        rng: Per-call Generator; consumed by shuffle and synthesis.

    Returns:
        WaypointSelection sorted by progress along spawn->target. Falls back
        to no intermediates when the spawn->target axis is degenerate.
    """
    if count <= 0:
        return _no_intermediates()

    _, length = path_axis(spawn, target)
    if length == 0.0:
        log.warning(
            "Spawn and target coincide; generating path without intermediate waypoints"
        )
        return _no_intermediates()

    wp = config.waypoints
    suitable = filter_candidates(
        spawn,
        target,
        candidates,
        wp.min_distance_from_endpoints,
        wp.lateral_deviation_range * 2.0,
    )

    if len(suitable) >= count:
        chosen = select_random_subset(suitable, count, rng)
        preplaced, dynamic = chosen, []
        source = SelectionSource.PREPLACED
    elif suitable:
        preplaced = [p.copy() for p in suitable]
        dynamic = generate_dynamic_waypoints(
            spawn, target, count - len(suitable), rng, wp, config.zone
        )
        source = SelectionSource.HYBRID
    else:
        preplaced = []
        dynamic = generate_dynamic_waypoints(spawn, target, count, rng, wp, config.zone)
        source = SelectionSource.DYNAMIC

    finite_dynamic = [p for p in dynamic if is_finite(p)]
    if len(finite_dynamic) != len(dynamic):
        log.warning(
            "Dropped %d non-finite synthesized waypoint(s)",
            len(dynamic) - len(finite_dynamic),
        )
        dynamic = finite_dynamic

    ordered = sort_by_progress(spawn, target, preplaced + dynamic)
    if not ordered:
        return _no_intermediates(len(suitable))

    log.debug(
        "Selected %d intermediate waypoints (source: %s, %d suitable candidates)",
        len(ordered),
        source,
        len(suitable),
    )
    return WaypointSelection(
        waypoints=ordered,
        source=source,
        candidates_suitable=len(suitable),
        preplaced_used=len(preplaced),
        dynamic_used=len(dynamic),
    )


def generate_path(
    spawn: Sequence[float] | np.ndarray,
    target: Sequence[float] | np.ndarray,
    difficulty_level: int,
    config: FlightPathConfig = DEFAULT_CONFIG,
    source: WaypointSource | None = None,
    seed: int | None = None,
) -> GenerationResult:
    """Generate a flight path from spawn to target.

    Args:
        spawn: Start position (x, y, z).
        target: End position (x, y, z).
        difficulty_level: Difficulty level; clamped to the configured table.
        config: Generation configuration, passed by value.
        source: Optional candidate waypoint source. Ignored when
            config.waypoints.prefer_preplaced is False.
        seed: Optional seed. When omitted one is drawn and reported on the
            result for reproduction.

    Returns:
        GenerationResult with the path and sourcing diagnostics.
    """
    spawn = as_vector(spawn)
    target = as_vector(target)

    actual_seed = resolve_seed(seed)
    if seed is None:
        log.info("No seed given; drew seed %d", actual_seed)
    rng = create_rng(actual_seed)

    policy = config.policy_for_level(difficulty_level)
    if policy.level != difficulty_level:
        log.debug(
            "Difficulty level %d not configured; using level %d",
            difficulty_level,
            policy.level,
        )
    count = select_waypoint_count(policy, rng)

    candidates: Sequence[np.ndarray] = ()
    if source is not None and config.waypoints.prefer_preplaced:
        candidates = source.get_candidates()

    log.info(
        "Generating path - seed %d, difficulty %d, waypoints %d, candidates available %d",
        actual_seed,
        difficulty_level,
        count,
        len(candidates),
    )

    if is_finite(spawn) and is_finite(target):
        selection = select_intermediates(spawn, target, count, candidates, config, rng)
    else:
        log.warning("Non-finite spawn or target; generating path without intermediates")
        selection = _no_intermediates()

    waypoints = np.vstack([spawn, *selection.waypoints, target])
    path = build_flight_path(
        waypoints,
        seed=actual_seed,
        tension=config.spline.tension,
        samples_per_segment=config.spline.arc_length_samples,
    )
    duration_check = check_min_duration(path, config.duration)

    log.info("Path generated: %s (source: %s)", path, selection.source)

    return GenerationResult(
        path=path,
        seed=actual_seed,
        difficulty_level=difficulty_level,
        requested_count=count,
        source=selection.source,
        candidates_offered=len(candidates),
        candidates_suitable=selection.candidates_suitable,
        preplaced_used=selection.preplaced_used,
        dynamic_used=selection.dynamic_used,
        duration_check=duration_check,
    )


class PathGenerator:
    """Holds a config and candidate source and generates paths on request.

    Stateless between calls apart from whatever caching the source does;
    each generate_path() call owns its own random Generator, so one
    instance can serve many callers.
    """

    def __init__(
        self,
        config: FlightPathConfig = DEFAULT_CONFIG,
        source: WaypointSource | None = None,
    ) -> None:
        self.config = config
        self.source = source

    def generate_path(
        self,
        spawn: Sequence[float] | np.ndarray,
        target: Sequence[float] | np.ndarray,
        difficulty_level: int,
        seed: int | None = None,
    ) -> GenerationResult:
        return generate_path(
            spawn,
            target,
            difficulty_level,
            config=self.config,
            source=self.source,
            seed=seed,
        )

    def refresh_candidates(self) -> int:
        """Ask the source to rediscover candidates, if it supports it.

        Returns the number of candidates now available.
        """
        if self.source is None:
            return 0
        refresh = getattr(self.source, "refresh", None)
        if refresh is not None:
            refresh()
        return len(self.source.get_candidates())
