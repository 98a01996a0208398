from __future__ import annotations

import pytest

from radarlayout.geometry.rings import generate_rings


def radii(n, target):
    return [ring.radius for ring in generate_rings(n, target)]


def test_four_rings_use_base_pattern():
    assert radii(4, 400) == [130, 220, 310, 400]


def test_four_rings_scale_to_target():
    assert radii(4, 200) == [65, 110, 155, 200]


def test_five_rings_interpolate_and_round_half_up():
    assert radii(5, 400) == [130, 198, 265, 333, 400]


@pytest.mark.parametrize("n", range(4, 9))
def test_endpoints_and_monotonic(n):
    values = radii(n, 400)
    assert len(values) == n
    assert values[0] == 130
    assert values[-1] == 400
    assert all(a < b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("n", range(4, 9))
def test_radii_floored_at_ten(n):
    assert min(radii(n, 10)) >= 10
    assert min(radii(n, 1)) == 10


@pytest.mark.parametrize("n", range(4, 9))
def test_linear_scaling(n):
    base = radii(n, 400)
    doubled = radii(n, 800)
    for a, b in zip(base, doubled):
        assert abs(b - 2 * a) <= 1
