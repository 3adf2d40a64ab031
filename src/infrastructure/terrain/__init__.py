"""Infrastructure adapters for the terrain bounded context.

This module provides the infrastructure layer implementations for terrain
operations, including reading raw HGT elevation tiles.
"""

from .hgt_adapter import HgtElevationModel, HgtTerrainAdapter, hgt_tile_name

__all__ = ["HgtElevationModel", "HgtTerrainAdapter", "hgt_tile_name"]
