"""Flight path configuration system with frozen, hashable, serializable dataclasses."""

from flightpath.config.settings import (
    DEFAULT_DIFFICULTY_POLICIES,
    DifficultyWaypointPolicy,
    DurationConfig,
    FlightPathConfig,
    FlightZone,
    SplineConfig,
    WaypointConfig,
)
from flightpath.config.defaults import DEFAULT_CONFIG
from flightpath.config.hashing import config_hash, full_config_hash, generation_config_hash
from flightpath.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_DIFFICULTY_POLICIES",
    "DifficultyWaypointPolicy",
    "DurationConfig",
    "FlightPathConfig",
    "FlightZone",
    "SplineConfig",
    "WaypointConfig",
    "config_hash",
    "full_config_hash",
    "generation_config_hash",
    "config_from_dict",
    "config_from_json",
    "config_to_dict",
    "config_to_json",
]
