"""JSON serialization and deserialization for flight path configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from flightpath.config.settings import FlightPathConfig

# cast=[tuple] turns JSON arrays back into tuples; the float hook accepts
# integer literals such as "size": [20, 8, 20] in hand-written files.
_DACITE_CONFIG = DaciteConfig(
    cast=[tuple],
    type_hooks={float: float},
    check_types=True,
    strict=True,
)


def config_to_json(config: FlightPathConfig) -> str:
    """Serialize a FlightPathConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> FlightPathConfig:
    """Deserialize a JSON string to a FlightPathConfig.

    Uses dacite with strict=True to reject unknown keys (catches schema drift).
    Missing keys fall back to dataclass defaults, so partial files are valid.
    """
    data = json.loads(json_str)
    return config_from_dict(data)


def config_to_dict(config: FlightPathConfig) -> dict[str, Any]:
    """Convert a FlightPathConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> FlightPathConfig:
    """Reconstruct a FlightPathConfig from a plain dictionary."""
    return from_dict(
        data_class=FlightPathConfig,
        data=d,
        config=_DACITE_CONFIG,
    )
