"""Tests for the scalar numeric primitives (interpolation, root finding)."""

from __future__ import annotations

import math

import pytest

from domain.geometry.numerics import (
    PI2,
    angular_distance,
    bilerp,
    first_interval_containing_root,
    floor_mod,
    haversin,
    improve_root,
    lerp,
)


# ===========================================================================
# Basic helpers
# ===========================================================================
def test_floor_mod_has_sign_of_divisor():
    assert floor_mod(7.0, 3.0) == pytest.approx(1.0)
    assert floor_mod(-1.0, 3.0) == pytest.approx(2.0)
    assert floor_mod(-7.5, -2.0) == pytest.approx(-1.5)


def test_haversin():
    assert haversin(0.0) == 0.0
    assert haversin(math.pi) == pytest.approx(1.0)


@pytest.mark.parametrize(
    "a1, a2, expected",
    [
        (0.0, math.pi / 2, math.pi / 2),
        (math.pi / 2, 0.0, -math.pi / 2),
        (0.1, PI2 - 0.1, -0.2),
        (PI2 - 0.1, 0.1, 0.2),
    ],
)
def test_angular_distance_takes_shortest_way(a1, a2, expected):
    assert angular_distance(a1, a2) == pytest.approx(expected)


def test_angular_distance_range():
    for i in range(-20, 21):
        d = angular_distance(0.3, i * 0.7)
        assert -math.pi <= d < math.pi


def test_lerp_endpoints_and_midpoint():
    assert lerp(2.0, 6.0, 0.0) == 2.0
    assert lerp(2.0, 6.0, 1.0) == 6.0
    assert lerp(2.0, 6.0, 0.5) == 4.0


def test_bilerp_returns_corners_at_integer_offsets():
    z00, z10, z01, z11 = 1.0, 2.0, 3.0, 5.0

    assert bilerp(z00, z10, z01, z11, 0, 0) == z00
    assert bilerp(z00, z10, z01, z11, 1, 0) == z10
    assert bilerp(z00, z10, z01, z11, 0, 1) == z01
    assert bilerp(z00, z10, z01, z11, 1, 1) == z11


def test_bilerp_center_is_mean_of_corners():
    assert bilerp(1.0, 2.0, 3.0, 6.0, 0.5, 0.5) == pytest.approx(3.0)


# ===========================================================================
# first_interval_containing_root
# ===========================================================================
def test_first_interval_finds_leftmost_bracket():
    # Roots at 3 and 7: the window containing 3 comes first
    f = lambda x: (x - 3) * (x - 7)  # noqa: E731

    assert first_interval_containing_root(f, 0.0, 10.0, 1.0) == 2.0


def test_first_interval_accepts_root_on_window_edge():
    assert first_interval_containing_root(lambda x: x - 4, 0.0, 10.0, 2.0) == 2.0


def test_first_interval_returns_inf_without_root():
    assert first_interval_containing_root(lambda x: x + 1, 0.0, 10.0, 1.0) == math.inf


def test_first_interval_ignores_partial_last_window():
    # Root at 9.5 lies past the last full window [6, 9]
    f = lambda x: x - 9.5  # noqa: E731

    assert first_interval_containing_root(f, 0.0, 10.0, 3.0) == math.inf


def test_first_interval_misses_double_crossing_inside_one_window():
    f = lambda x: (x - 1.2) * (x - 1.8)  # noqa: E731

    assert first_interval_containing_root(f, 0.0, 4.0, 1.0) == math.inf


def test_first_interval_rejects_inverted_range():
    with pytest.raises(ValueError):
        first_interval_containing_root(lambda x: x, 5.0, 1.0, 1.0)


@pytest.mark.parametrize("step", [0.0, -1.0])
def test_first_interval_rejects_non_positive_step(step):
    with pytest.raises(ValueError, match="step must be positive"):
        first_interval_containing_root(lambda x: x, 0.0, 1.0, step)


# ===========================================================================
# improve_root
# ===========================================================================
def test_improve_root_converges_to_root():
    root = improve_root(lambda x: x - 5, 0.0, 10.0, 1e-6)

    assert abs(root - 5.0) <= 1e-6
    assert root <= 5.0  # lower bound of the final bracket


def test_improve_root_decreasing_function():
    root = improve_root(lambda x: 2.0 - x * x, 0.0, 2.0, 1e-9)

    assert root == pytest.approx(math.sqrt(2.0), abs=1e-9)


def test_improve_root_bracket_already_narrow():
    assert improve_root(lambda x: x - 1.5, 1.0, 2.0, 4.0) == 1.0


def test_improve_root_rejects_bracket_without_sign_change():
    with pytest.raises(ValueError, match="does not bracket a root"):
        improve_root(lambda x: x * x + 1, -1.0, 1.0, 1e-3)


def test_improve_root_keeps_root_on_lower_edge():
    assert improve_root(lambda x: x - 1.0, 1.0, 3.0, 1e-3) == 1.0
