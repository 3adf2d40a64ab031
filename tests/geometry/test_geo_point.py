"""Tests for GeoPoint value object and spherical distance/azimuth."""

from __future__ import annotations

import math

import pytest
from pyproj import Geod

from domain.geometry.spherical import EARTH_RADIUS_M, to_meters, to_radians
from domain.geometry.value_objects import GeoPoint

_sphere = Geod(a=EARTH_RADIUS_M, b=EARTH_RADIUS_M)

ONE_DEGREE_M = EARTH_RADIUS_M * math.radians(1)


# ===========================================================================
# Invariants
# ===========================================================================
class TestGeoPointInvariants:
    @pytest.mark.parametrize(
        "longitude, latitude",
        [
            (-math.pi - 1e-9, 0.0),
            (math.pi + 1e-9, 0.0),
            (0.0, -math.pi / 2 - 1e-9),
            (0.0, math.pi / 2 + 1e-9),
        ],
    )
    def test_out_of_range_rejected(self, longitude, latitude):
        with pytest.raises(ValueError):
            GeoPoint(longitude=longitude, latitude=latitude)

    def test_bounds_are_inclusive(self):
        GeoPoint(longitude=-math.pi, latitude=-math.pi / 2)
        GeoPoint(longitude=math.pi, latitude=math.pi / 2)

    def test_equality_by_value(self):
        assert GeoPoint(longitude=0.1, latitude=0.2) == GeoPoint(
            longitude=0.1, latitude=0.2
        )

    def test_immutable(self):
        point = GeoPoint(longitude=0.1, latitude=0.2)
        with pytest.raises(Exception):  # ValidationError or AttributeError
            point.latitude = 0.0

    def test_from_degrees(self):
        point = GeoPoint.from_degrees(7.65, 46.73)

        assert point.longitude == pytest.approx(math.radians(7.65))
        assert point.latitude == pytest.approx(math.radians(46.73))

    def test_str_in_degrees(self):
        assert str(GeoPoint.from_degrees(6.5, 46.25)) == "(6.5000, 46.2500)"


# ===========================================================================
# Distances
# ===========================================================================
def test_meter_radian_conversion():
    assert to_meters(to_radians(12_345.0)) == pytest.approx(12_345.0)
    assert to_radians(EARTH_RADIUS_M) == pytest.approx(1.0)


def test_distance_one_degree_along_equator():
    origin = GeoPoint(longitude=0.0, latitude=0.0)
    east = GeoPoint.from_degrees(1.0, 0.0)

    assert origin.distance_to(east) == pytest.approx(ONE_DEGREE_M)


def test_distance_to_self_is_zero():
    point = GeoPoint.from_degrees(7.65, 46.73)

    assert point.distance_to(point) == 0.0


def test_distance_is_symmetric():
    a = GeoPoint.from_degrees(6.631, 46.521)
    b = GeoPoint.from_degrees(37.623, 55.753)

    assert a.distance_to(b) == pytest.approx(b.distance_to(a))


@pytest.mark.parametrize(
    "start, end",
    [
        ((6.631, 46.521), (37.623, 55.753)),
        ((7.65, 46.73), (7.70, 46.70)),
        ((-45.0, -20.0), (-45.1, -20.1)),
    ],
)
def test_distance_and_azimuth_match_pyproj_sphere(start, end):
    a = GeoPoint.from_degrees(*start)
    b = GeoPoint.from_degrees(*end)
    az, _, dist = _sphere.inv(start[0], start[1], end[0], end[1])

    assert a.distance_to(b) == pytest.approx(dist, rel=1e-9)
    assert math.degrees(a.azimuth_to(b)) == pytest.approx(az % 360, abs=1e-6)


# ===========================================================================
# Azimuths
# ===========================================================================
@pytest.mark.parametrize(
    "target, expected_deg",
    [
        ((0.0, 1.0), 0.0),  # north
        ((1.0, 0.0), 90.0),  # east
        ((0.0, -1.0), 180.0),  # south
        ((-1.0, 0.0), 270.0),  # west
    ],
)
def test_azimuth_cardinal_directions(target, expected_deg):
    origin = GeoPoint(longitude=0.0, latitude=0.0)

    azimuth = origin.azimuth_to(GeoPoint.from_degrees(*target))

    assert math.degrees(azimuth) == pytest.approx(expected_deg, abs=1e-9)
    assert 0 <= azimuth < 2 * math.pi
