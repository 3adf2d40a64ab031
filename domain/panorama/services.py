"""Panorama Bounded Context - Domain Services.

Per-pixel search for the first terrain intersection of each viewing ray.
NO I/O operations - the elevation data arrives through a
ContinuousElevationModel built on a domain port.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable

from domain.geometry.numerics import (
    first_interval_containing_root,
    improve_root,
    sq,
)
from domain.geometry.spherical import EARTH_RADIUS_M
from domain.panorama.value_objects import (
    Panorama,
    PanoramaBuilder,
    PanoramaParameters,
)
from domain.terrain.services import ContinuousElevationModel, ElevationProfile

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
COARSE_STEP_M = 64.0  # Bracketing window along the ground
FINE_STEP_M = 4.0  # Bisection stops once the bracket is this narrow

REFRACTION_COEFFICIENT = 0.13
# Earth curvature and atmospheric refraction folded into one quadratic term
CURVATURE_DELTA = (1 - REFRACTION_COEFFICIENT) / (2 * EARTH_RADIUS_M)


def ray_to_ground_distance(
    profile: ElevationProfile, ray_origin: float, ray_slope: float
) -> Callable[[float], float]:
    """Height of a viewing ray above the terrain as a function of distance.

    Args:
        profile: Terrain along the ray's azimuth
        ray_origin: Elevation of the ray at distance 0, in meters
        ray_slope: Tangent of the ray's altitude angle

    Returns:
        h(x) = ray_origin + x * ray_slope - terrain(x) + CURVATURE_DELTA * x**2,
        negative once the ray is below ground.
    """

    def distance_to_ground(x: float) -> float:
        terrain = profile.elevation_at(x)
        return ray_origin + x * ray_slope - terrain + CURVATURE_DELTA * sq(x)

    return distance_to_ground


class PanoramaComputer:
    """Computes panoramas over one continuous elevation model.

    Each column is one azimuth with its own ElevationProfile. Rows are
    searched from the bottom of the image upward; a ray pointing higher
    never hits terrain closer than the ray just below it, so every search
    starts at the previous hit and a column stops at its first miss.
    """

    def __init__(self, model: ContinuousElevationModel) -> None:
        if model is None:
            raise ValueError("model is required")
        self.model = model

    def compute_panorama(self, parameters: PanoramaParameters) -> Panorama:
        """Search every pixel of `parameters` for its first terrain hit.

        Returns:
            Panorama with distance = +inf for rays that hit nothing within
            parameters.max_distance.
        """
        logger.info(
            "Computing %dx%d panorama from %s, max distance %d m",
            parameters.width,
            parameters.height,
            parameters.observer_position,
            parameters.max_distance,
        )
        builder = PanoramaBuilder(parameters)
        hits = 0
        for x in range(parameters.width):
            hits += self._compute_column(builder, parameters, x)

        panorama = builder.build()
        logger.info(
            "Panorama done: %d of %d pixels hit terrain",
            hits,
            parameters.width * parameters.height,
        )
        return panorama

    def _compute_column(
        self, builder: PanoramaBuilder, parameters: PanoramaParameters, x: int
    ) -> int:
        max_distance = float(parameters.max_distance)
        profile = ElevationProfile(
            self.model,
            parameters.observer_position,
            parameters.azimuth_for_x(x),
            max_distance,
        )
        min_distance = 0.0
        hits = 0

        for y in range(parameters.height - 1, -1, -1):
            altitude = parameters.altitude_for_y(y)
            distance_to_ground = ray_to_ground_distance(
                profile, parameters.observer_elevation, math.tan(altitude)
            )
            lower = first_interval_containing_root(
                distance_to_ground, min_distance, max_distance, COARSE_STEP_M
            )
            if lower > max_distance:
                logger.debug("Column %d: no terrain hit from row %d upward", x, y)
                break

            upper = min(lower + COARSE_STEP_M, max_distance)
            hit = improve_root(distance_to_ground, lower, upper, FINE_STEP_M)
            position = profile.position_at(hit)

            builder.set_distance_at(x, y, hit / math.cos(altitude))
            builder.set_elevation_at(x, y, profile.elevation_at(hit))
            builder.set_longitude_at(x, y, position.longitude)
            builder.set_latitude_at(x, y, position.latitude)
            builder.set_slope_at(x, y, profile.slope_at(hit))

            min_distance = hit
            hits += 1

        return hits
