from __future__ import annotations

import math

import pytest

from radarlayout.geometry.coordinates import bounded_box, bounded_interval, bounded_ring, round_half_up, unwrap_angle
from radarlayout.geometry.primitives import Bounds, Point, Polar


def test_round_half_up():
    assert round_half_up(136.5) == 137
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2


def test_bounded_interval_accepts_either_order():
    assert bounded_interval(5, 0, 10) == 5
    assert bounded_interval(-1, 10, 0) == 0
    assert bounded_interval(11, 10, 0) == 10


def test_bounded_ring_keeps_angle():
    coord = bounded_ring(Polar(r=500, t=1.0), 10, 100)
    assert coord == Polar(r=100, t=1.0)


def test_bounded_box():
    bounds = Bounds(min_x=-1, min_y=-2, max_x=3, max_y=4)
    assert bounded_box(Point(10, -10), bounds) == Point(3, -2)
    assert bounds.width == 4 and bounds.height == 6


@pytest.mark.parametrize(
    "angle, center, expected",
    [
        (3.0, -math.pi, 3.0 - 2 * math.pi),
        (-3.0, 0.0, -3.0),
        (0.1, 2 * math.pi, 0.1 + 2 * math.pi),
    ],
)
def test_unwrap_angle(angle, center, expected):
    assert unwrap_angle(angle, center) == pytest.approx(expected)


def test_polar_round_trip_of_a_point():
    point = Polar(r=2.0, t=math.pi / 3).to_point()
    assert point.x == pytest.approx(1.0)
    assert point.to_polar().t == pytest.approx(math.pi / 3)
