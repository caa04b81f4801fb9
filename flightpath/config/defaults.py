"""Default configuration: single source of truth for path generation parameters."""

from flightpath.config.settings import FlightPathConfig

# Default config with all stock values: tension=0.5, 20 arc-length samples,
# lateral=3.0, vertical=1.5, min endpoint distance=2.0, 20x8x20 flight zone,
# heights 1.5..6.0, min duration 3s at reference speed 5, five difficulty levels.
DEFAULT_CONFIG = FlightPathConfig()
