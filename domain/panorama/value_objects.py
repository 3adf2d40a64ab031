"""Panorama Bounded Context - Value Objects.

View parameters mapping pixels to viewing angles, the immutable per-pixel
panorama raster and its single-use builder.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, Field, model_validator

from domain.geometry.azimuth import canonicalize, is_canonical, to_octant_string
from domain.geometry.numerics import PI2, angular_distance
from domain.geometry.value_objects import GeoPoint
from domain.panorama.errors import PanoramaAlreadyBuiltError

# ---------------------------------------------------------------------------
# Channel Constants
# ---------------------------------------------------------------------------
CHANNELS = ("distance", "longitude", "latitude", "elevation", "slope")
NO_HIT_DISTANCE = math.inf


# ---------------------------------------------------------------------------
# PanoramaParameters
# ---------------------------------------------------------------------------
class PanoramaParameters(BaseModel):
    """Observer pose and output raster geometry (Value Object).

    Pixels are square: the horizontal field of view spread over `width`
    columns fixes the angle per pixel, which in turn fixes the vertical
    field of view. Column 0 is the left edge, row 0 the top edge.

    Invariants:
        center_azimuth in [0, 2pi)
        horizontal_field_of_view in (0, 2pi]
        max_distance, width, height > 0
    """

    observer_position: GeoPoint
    observer_elevation: int  # meters
    center_azimuth: float
    horizontal_field_of_view: float = Field(gt=0, le=PI2)
    max_distance: int = Field(gt=0)  # meters
    width: int = Field(gt=0)
    height: int = Field(gt=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_azimuth(self) -> "PanoramaParameters":
        if not is_canonical(self.center_azimuth):
            raise ValueError(f"center_azimuth {self.center_azimuth} not in [0, 2pi)")
        return self

    @property
    def angle_per_pixel(self) -> float:
        if self.width == 1:
            return self.horizontal_field_of_view
        return self.horizontal_field_of_view / (self.width - 1)

    @property
    def vertical_field_of_view(self) -> float:
        return self.angle_per_pixel * (self.height - 1)

    @property
    def horizontal_center_index(self) -> float:
        return (self.width - 1) / 2

    @property
    def vertical_center_index(self) -> float:
        return (self.height - 1) / 2

    def azimuth_for_x(self, x: float) -> float:
        """Canonical azimuth of (fractional) column x."""
        if not 0 <= x <= self.width - 1:
            raise ValueError(f"x={x} outside [0, {self.width - 1}]")
        delta = (x - self.horizontal_center_index) * self.angle_per_pixel
        return canonicalize(self.center_azimuth + delta)

    def x_for_azimuth(self, azimuth: float) -> float:
        """Fractional column looking towards `azimuth`."""
        delta = angular_distance(self.center_azimuth, azimuth)
        if abs(delta) > self.horizontal_field_of_view / 2:
            raise ValueError(f"Azimuth {azimuth} outside the field of view")
        return delta / self.angle_per_pixel + self.horizontal_center_index

    def altitude_for_y(self, y: float) -> float:
        """Altitude angle (positive upward) of (fractional) row y."""
        if not 0 <= y <= self.height - 1:
            raise ValueError(f"y={y} outside [0, {self.height - 1}]")
        return (self.vertical_center_index - y) * self.angle_per_pixel

    def y_for_altitude(self, altitude: float) -> float:
        """Fractional row looking at `altitude`."""
        if abs(altitude) > self.vertical_field_of_view / 2:
            raise ValueError(f"Altitude {altitude} outside the field of view")
        return self.vertical_center_index - altitude / self.angle_per_pixel

    def is_valid_sample_index(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def linear_sample_index(self, x: int, y: int) -> int:
        if not self.is_valid_sample_index(x, y):
            raise ValueError(f"Pixel ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.width + x


# ---------------------------------------------------------------------------
# PixelObservation
# ---------------------------------------------------------------------------
class PixelObservation(BaseModel):
    """What one panorama pixel shows, in display units (Value Object)."""

    x: int
    y: int
    longitude_deg: float
    latitude_deg: float
    distance_km: float  # inf when the ray hits no terrain
    elevation_m: float
    azimuth_deg: float
    octant: str
    altitude_deg: float

    model_config = ConfigDict(frozen=True)

    def describe(self) -> str:
        """Multi-line human readable summary."""
        return (
            f"Position : {self.latitude_deg:.4f}N {self.longitude_deg:.4f}E\n"
            f"Distance : {self.distance_km:.1f} km\n"
            f"Altitude : {self.elevation_m:.0f} m\n"
            f"Azimuth : {self.azimuth_deg:.1f} ({self.octant})\t"
            f"Elevation : {self.altitude_deg:.1f}"
        )


# ---------------------------------------------------------------------------
# Panorama
# ---------------------------------------------------------------------------
class Panorama(BaseModel):
    """Per-pixel terrain data of a computed panorama (Value Object).

    Every channel is a read-only float32 array of shape (height, width),
    indexed [y, x]. Pixels whose ray hits no terrain keep distance = +inf
    and 0 in every other channel.
    """

    parameters: PanoramaParameters
    distance: NDArray[np.float32]  # meters along the viewing ray
    longitude: NDArray[np.float32]  # radians
    latitude: NDArray[np.float32]  # radians
    elevation: NDArray[np.float32]  # meters
    slope: NDArray[np.float32]  # radians

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @model_validator(mode="after")
    def validate_channels(self) -> "Panorama":
        shape = (self.parameters.height, self.parameters.width)
        for name in CHANNELS:
            data = getattr(self, name)
            if data.shape != shape:
                raise ValueError(f"{name} must have shape {shape}, got {data.shape}")
            # Arrays already frozen (handed over by PanoramaBuilder) are kept;
            # anything else gets an owned read-only copy
            if data.dtype != np.float32 or data.flags.writeable:
                data = np.array(data, dtype=np.float32, copy=True, order="C")
                data.flags.writeable = False
                object.__setattr__(self, name, data)
        return self

    def _check_index(self, x: int, y: int) -> None:
        if not self.parameters.is_valid_sample_index(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside panorama")

    def distance_at(self, x: int, y: int, default: float | None = None) -> float:
        """Distance to the hit along the viewing ray.

        With `default`, invalid indices return it instead of raising, which
        suits neighbourhood lookups at the image border.
        """
        if default is not None and not self.parameters.is_valid_sample_index(x, y):
            return default
        self._check_index(x, y)
        return float(self.distance[y, x])

    def longitude_at(self, x: int, y: int) -> float:
        self._check_index(x, y)
        return float(self.longitude[y, x])

    def latitude_at(self, x: int, y: int) -> float:
        self._check_index(x, y)
        return float(self.latitude[y, x])

    def elevation_at(self, x: int, y: int) -> float:
        self._check_index(x, y)
        return float(self.elevation[y, x])

    def slope_at(self, x: int, y: int) -> float:
        self._check_index(x, y)
        return float(self.slope[y, x])

    def observation_at(self, x: int, y: int) -> PixelObservation:
        """Summarize pixel (x, y) in degrees, kilometers and compass terms."""
        self._check_index(x, y)
        azimuth = self.parameters.azimuth_for_x(x)
        return PixelObservation(
            x=x,
            y=y,
            longitude_deg=math.degrees(self.longitude_at(x, y)),
            latitude_deg=math.degrees(self.latitude_at(x, y)),
            distance_km=self.distance_at(x, y) / 1000,
            elevation_m=self.elevation_at(x, y),
            azimuth_deg=math.degrees(azimuth),
            octant=to_octant_string(azimuth, "N", "E", "S", "W"),
            altitude_deg=math.degrees(self.parameters.altitude_for_y(y)),
        )


# ---------------------------------------------------------------------------
# PanoramaBuilder
# ---------------------------------------------------------------------------
class PanoramaBuilder:
    """Single-use builder filling a Panorama pixel by pixel.

    Setters return the builder for chaining. build() hands the arrays to
    the Panorama and drops them; any later call raises
    PanoramaAlreadyBuiltError.
    """

    def __init__(self, parameters: PanoramaParameters) -> None:
        self.parameters = parameters
        shape = (parameters.height, parameters.width)
        self._channels: dict[str, NDArray[np.float32]] | None = {
            name: np.zeros(shape, dtype=np.float32) for name in CHANNELS
        }
        self._channels["distance"].fill(NO_HIT_DISTANCE)

    @property
    def built(self) -> bool:
        return self._channels is None

    def _set(self, channel: str, x: int, y: int, value: float) -> "PanoramaBuilder":
        if self._channels is None:
            raise PanoramaAlreadyBuiltError("Panorama already built")
        if not self.parameters.is_valid_sample_index(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside panorama")
        self._channels[channel][y, x] = value
        return self

    def set_distance_at(self, x: int, y: int, distance: float) -> "PanoramaBuilder":
        return self._set("distance", x, y, distance)

    def set_longitude_at(self, x: int, y: int, longitude: float) -> "PanoramaBuilder":
        return self._set("longitude", x, y, longitude)

    def set_latitude_at(self, x: int, y: int, latitude: float) -> "PanoramaBuilder":
        return self._set("latitude", x, y, latitude)

    def set_elevation_at(self, x: int, y: int, elevation: float) -> "PanoramaBuilder":
        return self._set("elevation", x, y, elevation)

    def set_slope_at(self, x: int, y: int, slope: float) -> "PanoramaBuilder":
        return self._set("slope", x, y, slope)

    def build(self) -> Panorama:
        """Freeze the arrays into a Panorama and invalidate this builder."""
        if self._channels is None:
            raise PanoramaAlreadyBuiltError("Panorama already built")
        channels, self._channels = self._channels, None
        for data in channels.values():
            data.flags.writeable = False
        return Panorama(parameters=self.parameters, **channels)
