"""Config fingerprints for reproducing generated paths.

Two fingerprints are reported alongside generated paths: the geometry hash
covers only the settings that change where a path goes, and the full hash
identifies the config file as written.
"""

import hashlib
import json
from dataclasses import asdict, is_dataclass
from typing import Any

from flightpath.config.settings import FlightPathConfig

# Sub-configs that determine waypoint placement and curve shape
GEOMETRY_SECTIONS = ("spline", "waypoints", "zone", "difficulty")


def _digest(payload: Any) -> str:
    serialized = json.dumps(payload, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()[:16]


def config_hash(config: Any) -> str:
    """First 16 hex chars of SHA-256 over the sorted JSON form of a config.

    Accepts any dataclass, so sub-configs (e.g. ``config.zone``) can be
    fingerprinted on their own.
    """
    if not is_dataclass(config):
        raise TypeError(f"expected a config dataclass, got {type(config).__name__}")
    return _digest(asdict(config))


def generation_config_hash(config: FlightPathConfig) -> str:
    """Fingerprint of the settings that shape generated geometry.

    Paths generated with the same seed and the same generation hash are
    identical. Description, tags and the advisory duration settings are
    left out, so relabelling a config or retuning the duration check keeps
    old seeds replayable.
    """
    full = asdict(config)
    return _digest({name: full[name] for name in GEOMETRY_SECTIONS})


def full_config_hash(config: FlightPathConfig) -> str:
    """Fingerprint of the entire config, labels included."""
    return config_hash(config)
