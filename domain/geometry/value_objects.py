"""Geometry Bounded Context - Value Objects.

Immutable geographic coordinates on the spherical earth model.
All validation occurs at construction time via Pydantic.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

from domain.geometry.azimuth import canonicalize, from_math
from domain.geometry.numerics import haversin
from domain.geometry.spherical import to_meters


class GeoPoint(BaseModel):
    """Point on the earth's surface, coordinates in radians (Value Object).

    Invariants:
        longitude in [-pi, pi]
        latitude in [-pi/2, pi/2]

    Pydantic frozen models compare by value, so two GeoPoints built from the
    same coordinates are equal and hash alike.
    """

    longitude: float = Field(ge=-math.pi, le=math.pi)
    latitude: float = Field(ge=-math.pi / 2, le=math.pi / 2)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_degrees(cls, longitude: float, latitude: float) -> "GeoPoint":
        return cls(longitude=math.radians(longitude), latitude=math.radians(latitude))

    def distance_to(self, other: "GeoPoint") -> float:
        """Great-circle distance in meters (haversine formula)."""
        angle = 2 * math.asin(
            math.sqrt(
                haversin(self.latitude - other.latitude)
                + math.cos(self.latitude)
                * math.cos(other.latitude)
                * haversin(self.longitude - other.longitude)
            )
        )
        return to_meters(angle)

    def azimuth_to(self, other: "GeoPoint") -> float:
        """Initial bearing towards `other`, clockwise from north, in [0, 2pi)."""
        angle = math.atan2(
            math.sin(self.longitude - other.longitude) * math.cos(other.latitude),
            math.cos(self.latitude) * math.sin(other.latitude)
            - math.sin(self.latitude)
            * math.cos(other.latitude)
            * math.cos(self.longitude - other.longitude),
        )
        return from_math(canonicalize(angle))

    def __str__(self) -> str:
        return (
            f"({math.degrees(self.longitude):.4f}, "
            f"{math.degrees(self.latitude):.4f})"
        )
