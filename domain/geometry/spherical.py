"""Geometry Bounded Context - Spherical Earth Model.

The whole system works on a sphere of fixed radius. Conversions between
arc length in meters and central angle in radians live here.
"""

from __future__ import annotations

EARTH_RADIUS_M = 6_371_000.0


def to_radians(distance_m: float) -> float:
    """Central angle subtended by an arc of `distance_m` meters."""
    return distance_m / EARTH_RADIUS_M


def to_meters(distance_rad: float) -> float:
    """Arc length in meters of a central angle given in radians."""
    return distance_rad * EARTH_RADIUS_M
