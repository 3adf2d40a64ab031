"""Terrain Bounded Context - Domain Services.

Pure domain logic turning discrete elevation rasters into continuous fields
and sampling them along viewing rays.
NO I/O operations - tile files are opened by infrastructure adapters
under `src/infrastructure/terrain/hgt_adapter.py` via domain ports.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray
from pyproj import Geod

from domain.geometry.azimuth import is_canonical
from domain.geometry.numerics import bilerp, lerp, sq
from domain.geometry.spherical import EARTH_RADIUS_M, to_meters
from domain.geometry.value_objects import GeoPoint
from domain.terrain.repositories import (
    SAMPLES_PER_RADIAN,
    DiscreteElevationModel,
    sample_index,
)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
# Ground distance between two neighbouring grid samples (~30.9 m)
SAMPLE_SPACING_M = to_meters(1 / SAMPLES_PER_RADIAN)

# Profile positions are tabulated every 2**12 m along the ray
PROFILE_STEP_EXPONENT = 12
PROFILE_STEP_M = float(2**PROFILE_STEP_EXPONENT)

# Sphere with the system earth radius for direct geodesic computations
_sphere = Geod(a=EARTH_RADIUS_M, b=EARTH_RADIUS_M)


# ---------------------------------------------------------------------------
# Continuous Elevation Model
# ---------------------------------------------------------------------------
class ContinuousElevationModel:
    """Smooth elevation and slope fields over a discrete elevation model.

    Values are bilinearly interpolated in grid-index space from the four
    samples surrounding the query point. Samples outside the discrete
    model's extent read as 0 (sea level), which also flattens slopes
    computed next to the data edge.

    The continuous model borrows the discrete model; closing stays the
    caller's responsibility.
    """

    def __init__(self, discrete_model: DiscreteElevationModel) -> None:
        if discrete_model is None:
            raise ValueError("discrete_model is required")
        self.discrete_model = discrete_model

    def elevation_at(self, point: GeoPoint) -> float:
        """Interpolated elevation in meters at `point`."""
        return self._elevation_at(point.longitude, point.latitude)

    def slope_at(self, point: GeoPoint) -> float:
        """Interpolated terrain slope in radians (0 = flat) at `point`."""
        return self._slope_at(point.longitude, point.latitude)

    def _elevation_at(self, longitude: float, latitude: float) -> float:
        return self._interpolate(self._elevation_sample, longitude, latitude)

    def _slope_at(self, longitude: float, latitude: float) -> float:
        return self._interpolate(self._slope_sample, longitude, latitude)

    @staticmethod
    def _interpolate(sample, longitude: float, latitude: float) -> float:
        x_index = sample_index(longitude)
        y_index = sample_index(latitude)
        x0 = math.floor(x_index)
        y0 = math.floor(y_index)
        return bilerp(
            sample(x0, y0),
            sample(x0 + 1, y0),
            sample(x0, y0 + 1),
            sample(x0 + 1, y0 + 1),
            x_index - x0,
            y_index - y0,
        )

    def _elevation_sample(self, x: int, y: int) -> float:
        if not self.discrete_model.extent.contains(x, y):
            return 0.0
        return float(self.discrete_model.elevation_sample(x, y))

    def _slope_sample(self, x: int, y: int) -> float:
        # Angle between the terrain normal (from +x and +y deltas) and vertical
        origin = self._elevation_sample(x, y)
        delta_x = self._elevation_sample(x + 1, y) - origin
        delta_y = self._elevation_sample(x, y + 1) - origin
        return math.acos(
            SAMPLE_SPACING_M
            / math.sqrt(sq(delta_x) + sq(delta_y) + sq(SAMPLE_SPACING_M))
        )


# ---------------------------------------------------------------------------
# Elevation Profile
# ---------------------------------------------------------------------------
class ElevationProfile:
    """Positions and terrain values along one great-circle ray.

    Positions are tabulated every PROFILE_STEP_M meters from the origin with
    the spherical direct geodesic, up to the first tabulated distance past
    `length`. Queries in between interpolate longitude and latitude
    linearly between the two bracketing table entries.

    Args:
        model: Continuous elevation model to sample
        origin: Start of the ray
        azimuth: Canonical azimuth of the ray in radians
        length: Ray length in meters, positive

    Raises:
        ValueError: If azimuth is not canonical or length is not positive
    """

    def __init__(
        self,
        model: ContinuousElevationModel,
        origin: GeoPoint,
        azimuth: float,
        length: float,
    ) -> None:
        if not is_canonical(azimuth):
            raise ValueError(f"Azimuth {azimuth} is not in [0, 2pi)")
        if not length > 0:
            raise ValueError(f"length must be positive, got {length}")

        self.model = model
        self.origin = origin
        self.azimuth = azimuth
        self.length = float(length)
        self._longitudes, self._latitudes = self._tabulate_positions()

    def _tabulate_positions(self) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        count = int(math.ldexp(self.length, -PROFILE_STEP_EXPONENT)) + 2
        distances = np.arange(count, dtype=np.float64) * PROFILE_STEP_M
        lons, lats, _ = _sphere.fwd(
            np.full(count, math.degrees(self.origin.longitude)),
            np.full(count, math.degrees(self.origin.latitude)),
            np.full(count, math.degrees(self.azimuth)),
            distances,
        )
        return np.radians(lons), np.radians(lats)

    def _check_distance(self, x: float) -> None:
        if not 0 <= x <= self.length:
            raise ValueError(f"Distance {x} outside profile [0, {self.length}]")

    def _coordinates_at(self, x: float) -> tuple[float, float]:
        offset = math.ldexp(x, -PROFILE_STEP_EXPONENT)
        i = int(offset)
        fraction = offset - i
        longitude = lerp(
            float(self._longitudes[i]), float(self._longitudes[i + 1]), fraction
        )
        latitude = lerp(
            float(self._latitudes[i]), float(self._latitudes[i + 1]), fraction
        )
        return longitude, latitude

    def position_at(self, x: float) -> GeoPoint:
        """Geographic position `x` meters along the ray."""
        self._check_distance(x)
        longitude, latitude = self._coordinates_at(x)
        return GeoPoint(longitude=longitude, latitude=latitude)

    def elevation_at(self, x: float) -> float:
        """Terrain elevation in meters `x` meters along the ray."""
        self._check_distance(x)
        return self.model._elevation_at(*self._coordinates_at(x))

    def slope_at(self, x: float) -> float:
        """Terrain slope in radians `x` meters along the ray."""
        self._check_distance(x)
        return self.model._slope_at(*self._coordinates_at(x))
