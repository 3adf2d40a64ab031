"""HGT adapter for the elevation model ports.

Implements raw SRTM-style ".hgt" tiles as discrete elevation models backed by
a read-only numpy memory map, and a repository that assembles tiles into one
virtual model.

Tile format:
- File name ends with "[N|S]dd[E|W]ddd.hgt" naming the south-west corner
- Exactly 3601 x 3601 signed 16-bit big-endian samples (meters)
- Row-major, first row is the northern edge

Lifecycle (to avoid resource leaks):
1) Validate file existence, name and length before mapping anything
2) Map the file read-only
3) Sample while open
4) close() drops the mapping; later samples raise ElevationModelClosedError
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from pathlib import Path

import numpy as np

from domain.geometry.intervals import Interval1D, Interval2D
from domain.terrain.composite import fold_models
from domain.terrain.errors import (
    ElevationModelClosedError,
    InvalidTileError,
    SampleOutOfExtentError,
)
from domain.terrain.repositories import SAMPLES_PER_DEGREE, DiscreteElevationModel

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Tile Format Constants
# ---------------------------------------------------------------------------
TILE_SIDE = SAMPLES_PER_DEGREE + 1  # 3601 samples, edges shared with neighbours
TILE_FILE_LENGTH = 2 * TILE_SIDE * TILE_SIDE
TILE_NAME_LENGTH = 11
TILE_DTYPE = np.dtype(">i2")

_TILE_NAME_RE = re.compile(r"([NS])(\d{2})([EW])(\d{3})\.hgt")


def hgt_tile_name(longitude: int, latitude: int) -> str:
    """File name of the tile whose south-west corner is at the given degrees.

    Example:
        >>> hgt_tile_name(7, 46)
        'N46E007.hgt'
        >>> hgt_tile_name(-1, -12)
        'S12W001.hgt'
    """
    lat_letter = "N" if latitude >= 0 else "S"
    lon_letter = "E" if longitude >= 0 else "W"
    return f"{lat_letter}{abs(latitude):02d}{lon_letter}{abs(longitude):03d}.hgt"


def parse_tile_name(file_name: str) -> tuple[int, int]:
    """Return (longitude, latitude) in degrees of a tile's south-west corner.

    Only the last 11 characters of the name are considered, so prefixes such
    as "srtm_" are allowed.

    Raises:
        InvalidTileError: If the name does not end with a valid tile name
    """
    if len(file_name) < TILE_NAME_LENGTH:
        raise InvalidTileError(f"Tile name too short: {file_name!r}")
    match = _TILE_NAME_RE.fullmatch(file_name[-TILE_NAME_LENGTH:])
    if match is None:
        raise InvalidTileError(
            f"Tile name must end with [N|S]dd[E|W]ddd.hgt: {file_name!r}"
        )
    lat_letter, lat_deg, lon_letter, lon_deg = match.groups()
    latitude = -int(lat_deg) if lat_letter == "S" else int(lat_deg)
    longitude = -int(lon_deg) if lon_letter == "W" else int(lon_deg)
    return longitude, latitude


def tile_extent(longitude: int, latitude: int) -> Interval2D:
    """Index extent of the one-degree tile with the given south-west corner."""
    x_from = longitude * SAMPLES_PER_DEGREE
    y_from = latitude * SAMPLES_PER_DEGREE
    return Interval2D(
        x=Interval1D(included_from=x_from, included_to=x_from + SAMPLES_PER_DEGREE),
        y=Interval1D(included_from=y_from, included_to=y_from + SAMPLES_PER_DEGREE),
    )


class HgtElevationModel(DiscreteElevationModel):
    """One HGT tile as a discrete elevation model.

    Use as a context manager (or call close()) to release the mapping.

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidTileError: If the name or the length of the file is invalid
    """

    def __init__(self, file_path: Path | str) -> None:
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(str(path))

        longitude, latitude = parse_tile_name(path.name)

        try:
            size = path.stat().st_size
        except OSError as e:
            # Log only filename, errno and strerror to avoid leaking absolute paths
            logger.error(
                "Failed to stat %s (errno=%s, strerror=%s)",
                path.name,
                getattr(e, "errno", "unknown"),
                getattr(e, "strerror", "unknown"),
            )
            raise

        if size != TILE_FILE_LENGTH:
            raise InvalidTileError(
                f"Tile {path.name} has {size} bytes, expected {TILE_FILE_LENGTH}"
            )

        self.name = path.name
        self._extent = tile_extent(longitude, latitude)
        self._samples: np.memmap | None = np.memmap(
            path, dtype=TILE_DTYPE, mode="r", shape=(TILE_SIDE, TILE_SIDE)
        )
        logger.debug("HGT %s: mapped tile with extent %s", self.name, self._extent)

    @property
    def extent(self) -> Interval2D:
        return self._extent

    @property
    def closed(self) -> bool:
        return self._samples is None

    def elevation_sample(self, x: int, y: int) -> float:
        if self._samples is None:
            raise ElevationModelClosedError(f"HGT tile {self.name} is closed")
        if not self._extent.contains(x, y):
            raise SampleOutOfExtentError(x, y, self._extent)
        column = x - self._extent.x.included_from
        row = self._extent.y.included_to - y
        return float(self._samples[row, column])

    def close(self) -> None:
        if self._samples is not None:
            logger.debug("HGT %s: released", self.name)
        self._samples = None


class HgtTerrainAdapter:
    """Infrastructure adapter opening HGT tiles from a directory.

    Parameters
    ----------
    directory: Path | str
        Folder holding tiles named after their south-west corner.
    """

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    def load_tile(self, longitude: int, latitude: int) -> HgtElevationModel:
        """Open the tile whose south-west corner is at the given degrees."""
        return HgtElevationModel(self.directory / hgt_tile_name(longitude, latitude))

    def load_mosaic(
        self, longitudes: Sequence[int], latitudes: Sequence[int]
    ) -> DiscreteElevationModel:
        """Open a rectangular block of tiles and fold them into one model.

        Each latitude row is folded west to east first, then the rows south
        to north, so every partial union stays rectangular.

        Args:
            longitudes: South-west corner longitudes, e.g. range(6, 10)
            latitudes: South-west corner latitudes, e.g. range(45, 47)

        Raises:
            ValueError: If either range is empty
        """
        if len(longitudes) == 0 or len(latitudes) == 0:
            raise ValueError("Tile mosaic needs at least one longitude and latitude")

        opened: list[HgtElevationModel] = []
        try:
            rows = []
            for latitude in latitudes:
                row = []
                for longitude in longitudes:
                    tile = self.load_tile(longitude, latitude)
                    opened.append(tile)
                    row.append(tile)
                rows.append(fold_models(row))
            mosaic = fold_models(rows)
        except Exception:
            for tile in opened:
                tile.close()
            raise

        logger.info(
            "Loaded %d HGT tiles from %s, extent %s",
            len(opened),
            self.directory.name,
            mosaic.extent,
        )
        return mosaic
