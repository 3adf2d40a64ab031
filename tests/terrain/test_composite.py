"""Tests for CompositeElevationModel and model folding (no I/O)."""

from __future__ import annotations

import pytest

from domain.terrain.composite import CompositeElevationModel, fold_models
from domain.terrain.errors import SampleOutOfExtentError
from domain.terrain.repositories import DiscreteElevationModel
from tests.conftest import FakeElevationModel, make_extent


def constant(value: float):
    return lambda x, y: value


@pytest.fixture
def west() -> FakeElevationModel:
    return FakeElevationModel(make_extent(0, 10, 0, 10), constant(100.0))


@pytest.fixture
def east() -> FakeElevationModel:
    return FakeElevationModel(make_extent(10, 20, 0, 10), constant(200.0))


def test_extent_is_union_of_children(west, east):
    composite = CompositeElevationModel(west, east)

    assert composite.extent == make_extent(0, 20, 0, 10)


def test_samples_come_from_owning_child(west, east):
    composite = CompositeElevationModel(west, east)

    assert composite.elevation_sample(3, 5) == 100.0
    assert composite.elevation_sample(17, 5) == 200.0


def test_first_model_wins_on_shared_edge(west, east):
    assert CompositeElevationModel(west, east).elevation_sample(10, 5) == 100.0
    assert CompositeElevationModel(east, west).elevation_sample(10, 5) == 200.0


def test_sample_outside_extent_raises(west, east):
    composite = CompositeElevationModel(west, east)

    with pytest.raises(SampleOutOfExtentError) as exc_info:
        composite.elevation_sample(21, 5)

    assert exc_info.value.x == 21
    assert exc_info.value.extent == composite.extent


def test_gap_between_models_is_rejected(west):
    far_east = FakeElevationModel(make_extent(12, 20, 0, 10))

    with pytest.raises(ValueError, match="not unionable"):
        CompositeElevationModel(west, far_east)


def test_union_method_builds_composite(west, east):
    composite = west.union(east)

    assert isinstance(composite, CompositeElevationModel)
    assert composite.elevation_sample(15, 0) == 200.0


def test_union_method_rejects_l_shape(west):
    north_east = FakeElevationModel(make_extent(11, 20, 11, 20))

    with pytest.raises(ValueError):
        west.union(north_east)


def test_close_releases_both_children(west, east):
    composite = CompositeElevationModel(west, east)

    composite.close()

    assert west.closed and east.closed


def test_context_manager_closes(west, east):
    with CompositeElevationModel(west, east) as composite:
        assert composite.elevation_sample(0, 0) == 100.0

    assert west.closed and east.closed


def test_composite_satisfies_port(west, east):
    assert isinstance(CompositeElevationModel(west, east), DiscreteElevationModel)


# ===========================================================================
# fold_models
# ===========================================================================
def test_fold_single_model_is_returned_unchanged(west):
    assert fold_models([west]) is west


def test_fold_empty_raises():
    with pytest.raises(ValueError, match="empty"):
        fold_models([])


def test_fold_row_of_tiles():
    tiles = [
        FakeElevationModel(make_extent(10 * i, 10 * (i + 1), 0, 10), constant(i))
        for i in range(4)
    ]

    mosaic = fold_models(tiles)

    assert mosaic.extent == make_extent(0, 40, 0, 10)
    assert [mosaic.elevation_sample(10 * i + 5, 5) for i in range(4)] == [
        0.0,
        1.0,
        2.0,
        3.0,
    ]
    # Shared edges belong to the earlier tile
    assert mosaic.elevation_sample(20, 5) == 1.0


def test_fold_overlapping_models_earlier_wins():
    big = FakeElevationModel(make_extent(0, 10, 0, 10), constant(1.0))
    inner = FakeElevationModel(make_extent(2, 4, 2, 4), constant(2.0))

    assert fold_models([big, inner]).elevation_sample(3, 3) == 1.0
    assert fold_models([inner, big]).elevation_sample(3, 3) == 2.0
