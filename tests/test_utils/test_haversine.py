"""
Tests for the great circle distance helpers.
"""

import math

import pytest

from geobase.utils.haversine import EARTH_RADIUS_KM, haversine_km, round_half_up


def test_same_point_is_zero():
    assert haversine_km(0.8, 0.04, 0.8, 0.04) == 0


def test_pole_to_equator():
    distance = haversine_km(math.pi / 2, 0, 0, 0)

    assert distance == pytest.approx(math.pi / 2 * EARTH_RADIUS_KM)


def test_antipodal_points():
    distance = haversine_km(0, 0, 0, math.pi)

    assert distance == pytest.approx(math.pi * EARTH_RADIUS_KM)


def test_symmetric():
    paris = (math.radians(48.82), math.radians(2.345))
    nice = (math.radians(43.6484), math.radians(7.215872))

    assert haversine_km(*paris, *nice) == pytest.approx(haversine_km(*nice, *paris))
    assert round_half_up(haversine_km(*paris, *nice)) == 686


@pytest.mark.parametrize('value,expected', [
    (0.49, 0),
    (2.5, 3),
    (675.748, 676),
    (34.518, 35),
    (11.041, 11),
])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected
