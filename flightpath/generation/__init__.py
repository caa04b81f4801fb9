"""Path generation: candidate sources, waypoint selection, and orchestration."""

from flightpath.generation.duration import check_min_duration
from flightpath.generation.generator import PathGenerator, generate_path, select_intermediates
from flightpath.generation.selection import (
    clamp_to_zone,
    filter_candidates,
    generate_dynamic_waypoint,
    generate_dynamic_waypoints,
    select_random_subset,
    select_waypoint_count,
    sort_by_progress,
)
from flightpath.generation.sources import (
    CachedWaypointSource,
    StaticWaypointSource,
    WaypointSource,
)
from flightpath.generation.types import (
    DurationCheck,
    GenerationResult,
    SelectionSource,
    WaypointSelection,
)

__all__ = [
    "CachedWaypointSource",
    "DurationCheck",
    "GenerationResult",
    "PathGenerator",
    "SelectionSource",
    "StaticWaypointSource",
    "WaypointSelection",
    "WaypointSource",
    "check_min_duration",
    "clamp_to_zone",
    "filter_candidates",
    "generate_dynamic_waypoint",
    "generate_dynamic_waypoints",
    "generate_path",
    "select_intermediates",
    "select_random_subset",
    "select_waypoint_count",
    "sort_by_progress",
]
