"""Catmull-Rom spline math and arc-length parameterization."""

from flightpath.spline.arc_length import (
    DEFAULT_SAMPLES_PER_SEGMENT,
    ArcLengthTable,
    build_arc_length_table,
)
from flightpath.spline.catmull_rom import (
    DEFAULT_TENSION,
    add_phantom_points,
    evaluate_position,
    evaluate_segment,
    evaluate_tangent,
    segment_count,
    unit_tangent,
)
from flightpath.spline.vectors import FORWARD, RIGHT, UP, as_points, as_vector, normalize

__all__ = [
    "ArcLengthTable",
    "DEFAULT_SAMPLES_PER_SEGMENT",
    "DEFAULT_TENSION",
    "FORWARD",
    "RIGHT",
    "UP",
    "add_phantom_points",
    "as_points",
    "as_vector",
    "build_arc_length_table",
    "evaluate_position",
    "evaluate_segment",
    "evaluate_tangent",
    "normalize",
    "segment_count",
    "unit_tangent",
]
