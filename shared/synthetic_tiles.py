"""Synthetic HGT tiles - not real terrain data.

Each tile is a full-size 3601 x 3601 grid so it passes the same name and
length validation as a real SRTM tile. Values are chosen so tests can
predict samples exactly.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import numpy as np
from numpy.typing import NDArray

TILE_SIDE = 3601

# Corner markers of the ramp tile, keyed by (row, column)
RAMP_CORNERS: dict[tuple[int, int], int] = {
    (0, 0): 1111,  # north-west
    (0, TILE_SIDE - 1): 2222,  # north-east
    (TILE_SIDE - 1, 0): 3333,  # south-west
    (TILE_SIDE - 1, TILE_SIDE - 1): 4444,  # south-east
}
RAMP_BASE_M = 1000
RAMP_COLUMNS_PER_METER = 36

PLATEAU_EAST_M = 2000
PLATEAU_NORTH_M = 3000


def ramp_elevation(column: int) -> int:
    """Elevation of the ramp tile away from its corners."""
    return RAMP_BASE_M + column // RAMP_COLUMNS_PER_METER


def _ramp() -> NDArray[np.int16]:
    columns = np.arange(TILE_SIDE)
    row = (RAMP_BASE_M + columns // RAMP_COLUMNS_PER_METER).astype(np.int16)
    data = np.tile(row, (TILE_SIDE, 1))
    for (r, c), value in RAMP_CORNERS.items():
        data[r, c] = value
    return data


def _plateau(elevation: int) -> Callable[[], NDArray[np.int16]]:
    def build() -> NDArray[np.int16]:
        return np.full((TILE_SIDE, TILE_SIDE), elevation, dtype=np.int16)

    return build


TILE_BUILDERS: dict[str, Callable[[], NDArray[np.int16]]] = {
    "N46E007.hgt": _ramp,
    "N46E008.hgt": _plateau(PLATEAU_EAST_M),
    "N47E007.hgt": _plateau(PLATEAU_NORTH_M),
}


def write_tile(path: Path, data: NDArray[np.integer]) -> None:
    """Write samples as big-endian signed 16-bit integers, north row first."""
    if data.shape != (TILE_SIDE, TILE_SIDE):
        raise ValueError(f"Tile must be {TILE_SIDE}x{TILE_SIDE}, got {data.shape}")
    path.write_bytes(data.astype(">i2").tobytes())


def write_all_tiles(directory: Path) -> list[Path]:
    """Write every synthetic tile into `directory` and return their paths."""
    directory.mkdir(parents=True, exist_ok=True)
    paths = []
    for name, build in TILE_BUILDERS.items():
        path = directory / name
        write_tile(path, build())
        paths.append(path)
    return paths
