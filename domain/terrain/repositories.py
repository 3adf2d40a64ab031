"""Domain Port(s) for Elevation Data.

Defines the sampling contract that raster-backed elevation models implement.
No concrete I/O here: raw tile files are read by infrastructure adapters.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from types import TracebackType
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from domain.geometry.intervals import Interval2D

if TYPE_CHECKING:
    from domain.terrain.composite import CompositeElevationModel

# ---------------------------------------------------------------------------
# Grid Constants
# ---------------------------------------------------------------------------
SAMPLES_PER_DEGREE = 3600
SAMPLES_PER_RADIAN = SAMPLES_PER_DEGREE / math.radians(1)


def sample_index(angle: float) -> float:
    """Fractional grid index of a longitude or latitude given in radians."""
    return angle * SAMPLES_PER_RADIAN


@runtime_checkable
class DiscreteElevationModel(Protocol):
    """Port for elevation rasters addressed by integer grid indices.

    One grid step is 1/3600 of a degree. Index (0, 0) is at longitude 0,
    latitude 0; x grows eastward and y northward.

    Implementations may subclass this Protocol explicitly to inherit the
    `union` and context-manager defaults below.
    """

    @property
    def extent(self) -> Interval2D:
        """Rectangle of valid (x, y) indices."""
        ...

    def elevation_sample(self, x: int, y: int) -> float:
        """Elevation in meters at grid index (x, y).

        Raises:
            SampleOutOfExtentError: If (x, y) is not in `extent`
        """
        ...

    def close(self) -> None:
        """Release backing resources. Safe to call more than once."""
        ...

    def union(self, other: "DiscreteElevationModel") -> "CompositeElevationModel":
        """Virtual model covering both this model and `other`.

        This model wins where the two extents overlap.

        Raises:
            ValueError: If the extents do not union into a rectangle
        """
        from domain.terrain.composite import CompositeElevationModel

        return CompositeElevationModel(self, other)

    def __enter__(self) -> "DiscreteElevationModel":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class TerrainRepository(Protocol):
    """Port for obtaining discrete elevation models from external sources.

    Implementations live in infrastructure (e.g., HGT adapter).
    """

    def load_tile(self, longitude: int, latitude: int) -> DiscreteElevationModel:
        """Open the one-degree tile with the given south-west corner."""
        ...

    def load_mosaic(
        self, longitudes: Sequence[int], latitudes: Sequence[int]
    ) -> DiscreteElevationModel:
        """Open a block of tiles as one virtual model."""
        ...
