"""Advisory minimum-flight-duration check.

Generation does not know the speed a path will eventually be flown at, so
the check runs at the configured reference speed and only reports. The
component that assigns traversal speed enforces the minimum, using
max_speed_for_duration() from flightpath.path.
"""

import logging

from flightpath.config.settings import DurationConfig
from flightpath.generation.types import DurationCheck
from flightpath.path.types import FlightPath

log = logging.getLogger(__name__)


def check_min_duration(path: FlightPath, config: DurationConfig) -> DurationCheck:
    """Compare the path length against min_flight_duration * reference_speed."""
    required = config.min_flight_duration * config.reference_speed
    is_short = path.total_length < required
    needs_extension = is_short and path.intermediate_count < config.max_extension_waypoints

    if needs_extension:
        log.warning(
            "Path length %.2f is below %.2f (%.1fs at reference speed %.2f) "
            "with %d intermediate waypoint(s); speed assignment must compensate",
            path.total_length,
            required,
            config.min_flight_duration,
            config.reference_speed,
            path.intermediate_count,
        )
    elif is_short:
        log.info(
            "Path length %.2f is below %.2f but already has %d intermediate waypoints",
            path.total_length,
            required,
            path.intermediate_count,
        )

    return DurationCheck(
        total_length=path.total_length,
        required_length=required,
        min_duration=config.min_flight_duration,
        reference_speed=config.reference_speed,
        is_short=is_short,
        needs_extension=needs_extension,
    )
