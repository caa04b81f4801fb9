"""Smooth, reproducible multi-waypoint flight paths with constant-speed traversal."""

__version__ = "0.1.0"
