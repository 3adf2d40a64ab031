"""Terrain Bounded Context - Error Hierarchy.

Custom exceptions for elevation model operations. Precondition failures
also derive from ValueError so callers can catch them generically.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domain.geometry.intervals import Interval2D


class TerrainError(Exception):
    """Base error for terrain operations."""


class InvalidTileError(TerrainError, ValueError):
    """Tile file has a malformed name or the wrong length."""


class ElevationModelClosedError(TerrainError, RuntimeError):
    """Elevation model was sampled after its backing data was released."""


class SampleOutOfExtentError(TerrainError, ValueError):
    """Grid coordinate is outside the elevation model extent.

    Attributes:
        x: Offending column index
        y: Offending row index
        extent: The model's Interval2D
    """

    def __init__(self, x: int, y: int, extent: "Interval2D") -> None:
        self.x = x
        self.y = y
        self.extent = extent
        super().__init__(f"Sample ({x}, {y}) outside extent {extent}")
