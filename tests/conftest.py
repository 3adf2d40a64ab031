"""Root pytest configuration for all tests.

Provides:
- `FakeElevationModel`: in-memory DiscreteElevationModel for domain tests
  (no I/O, values from a plain function of the grid index)
- `tile_dir`: session-scoped directory holding the synthetic HGT tiles
  from shared/synthetic_tiles.py
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from domain.geometry.intervals import Interval1D, Interval2D
from domain.terrain.errors import ElevationModelClosedError, SampleOutOfExtentError
from domain.terrain.repositories import DiscreteElevationModel
from shared.synthetic_tiles import write_all_tiles


def make_extent(x_from: int, x_to: int, y_from: int, y_to: int) -> Interval2D:
    return Interval2D(
        x=Interval1D(included_from=x_from, included_to=x_to),
        y=Interval1D(included_from=y_from, included_to=y_to),
    )


class FakeElevationModel(DiscreteElevationModel):
    """Discrete elevation model answering from a function of (x, y)."""

    def __init__(
        self,
        extent: Interval2D,
        elevation: Callable[[int, int], float] = lambda x, y: 0.0,
    ) -> None:
        self._extent = extent
        self._elevation = elevation
        self.closed = False
        self.close_calls = 0

    @property
    def extent(self) -> Interval2D:
        return self._extent

    def elevation_sample(self, x: int, y: int) -> float:
        if self.closed:
            raise ElevationModelClosedError("fake model is closed")
        if not self._extent.contains(x, y):
            raise SampleOutOfExtentError(x, y, self._extent)
        return float(self._elevation(x, y))

    def close(self) -> None:
        self.closed = True
        self.close_calls += 1


@pytest.fixture(scope="session")
def tile_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Directory with every synthetic HGT tile (written once per session)."""
    directory = tmp_path_factory.mktemp("hgt")
    write_all_tiles(directory)
    return directory
