import math

import pytest

from launderette.services.geo import (
    EARTH_RADIUS_MILES,
    haversine,
    haversine_km,
    haversine_miles,
)

LONDON = (51.5074, -0.1278)
MANCHESTER = (53.4808, -2.2426)


def test_zero_distance_to_self():
    assert haversine_miles(*LONDON, *LONDON) == 0.0


def test_distance_is_symmetric():
    there = haversine_miles(*LONDON, *MANCHESTER)
    back = haversine_miles(*MANCHESTER, *LONDON)
    assert there == pytest.approx(back)


def test_known_city_distance():
    assert haversine_miles(*LONDON, *MANCHESTER) == pytest.approx(163, abs=2)
    assert haversine_km(*LONDON, *MANCHESTER) == pytest.approx(262, abs=3)


def test_one_degree_of_latitude():
    assert haversine_miles(0, 0, 1, 0) == pytest.approx(EARTH_RADIUS_MILES * math.pi / 180)


def test_antipodes_are_half_the_circumference():
    assert haversine(0, 0, 0, 180, 1.0) == pytest.approx(math.pi)


def test_nan_propagates():
    assert math.isnan(haversine_miles(float("nan"), 0, 1, 1))
