"""Composite elevation model: two discrete models behind one extent."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import reduce

from domain.geometry.intervals import Interval2D
from domain.terrain.errors import SampleOutOfExtentError
from domain.terrain.repositories import DiscreteElevationModel

logger = logging.getLogger(__name__)


class CompositeElevationModel(DiscreteElevationModel):
    """Union of two discrete elevation models.

    The composite owns both children: closing it closes them. Where the
    children overlap, `first` answers. Indices inside the bounding extent
    but covered by neither child read as 0.
    """

    def __init__(
        self, first: DiscreteElevationModel, second: DiscreteElevationModel
    ) -> None:
        if not first.extent.is_unionable_with(second.extent):
            raise ValueError(
                f"Extents {first.extent} and {second.extent} are not unionable"
            )
        self.first = first
        self.second = second
        self._extent = first.extent.union(second.extent)
        logger.debug("Composite elevation model over %s", self._extent)

    @property
    def extent(self) -> Interval2D:
        return self._extent

    def elevation_sample(self, x: int, y: int) -> float:
        if not self._extent.contains(x, y):
            raise SampleOutOfExtentError(x, y, self._extent)
        if self.first.extent.contains(x, y):
            return self.first.elevation_sample(x, y)
        if self.second.extent.contains(x, y):
            return self.second.elevation_sample(x, y)
        return 0.0

    def close(self) -> None:
        self.first.close()
        self.second.close()


def fold_models(models: Sequence[DiscreteElevationModel]) -> DiscreteElevationModel:
    """Fold models into one by repeated pairwise union, left to right.

    Earlier models take precedence on overlapping indices. A single model
    is returned unchanged.

    Raises:
        ValueError: If `models` is empty or two partial unions do not fit
    """
    if not models:
        raise ValueError("Cannot fold an empty sequence of elevation models")
    return reduce(CompositeElevationModel, models)
