"""Geometry Bounded Context - Azimuth Helpers.

An azimuth is an angle in radians measured clockwise from geographic north.
Its canonical range is [0, 2*pi). The "mathematical" convention measures
counter-clockwise instead; both conversions are the same involution.
"""

from __future__ import annotations

import math

from domain.geometry.numerics import PI2, floor_mod

OCTANT_WIDTH = PI2 / 8


def is_canonical(azimuth: float) -> bool:
    return 0 <= azimuth < PI2


def canonicalize(azimuth: float) -> float:
    """Bring any angle into [0, 2*pi)."""
    if is_canonical(azimuth):
        return azimuth
    azimuth = math.fmod(azimuth, PI2)
    if azimuth < 0:
        azimuth += PI2
    # fmod of a tiny negative value can round up to exactly 2*pi
    return 0.0 if azimuth >= PI2 else azimuth


def _require_canonical(azimuth: float) -> None:
    if not is_canonical(azimuth):
        raise ValueError(f"Azimuth {azimuth} is not in [0, 2pi)")


def to_math(azimuth: float) -> float:
    """Convert a canonical azimuth to the counter-clockwise convention."""
    _require_canonical(azimuth)
    return canonicalize(-azimuth)


def from_math(angle: float) -> float:
    """Convert a canonical counter-clockwise angle to an azimuth."""
    _require_canonical(angle)
    return canonicalize(-angle)


def to_octant_string(azimuth: float, n: str, e: str, s: str, w: str) -> str:
    """Name the compass octant containing `azimuth`.

    Octants are centered on the cardinal and intercardinal directions, so
    north covers [-pi/8, pi/8). Intercardinal names are built from the
    given letters, north/south first (e.g. "NE", "SW").

    Raises:
        ValueError: If azimuth is not canonical
    """
    _require_canonical(azimuth)
    names = (n, n + e, e, s + e, s, s + w, w, n + w)
    shifted = floor_mod(azimuth + OCTANT_WIDTH / 2, PI2)
    return names[int(shifted // OCTANT_WIDTH) % 8]
