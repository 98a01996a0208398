from __future__ import annotations

import math

from radarlayout.geometry.primitives import Bounds, Point, Polar

TWO_PI = 2.0 * math.pi


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (Python's round() is banker's rounding)."""
    return int(math.floor(value + 0.5))


def bounded_interval(value: float, low: float, high: float) -> float:
    """
    Constrain `value` to the interval spanned by `low` and `high`.

    The bounds may be given in either order.
    """
    lo = min(low, high)
    hi = max(low, high)
    return min(max(value, lo), hi)


def bounded_ring(coord: Polar, r_min: float, r_max: float) -> Polar:
    return Polar(r=bounded_interval(coord.r, r_min, r_max), t=coord.t)


def bounded_box(point: Point, bounds: Bounds) -> Point:
    return Point(
        x=bounded_interval(point.x, bounds.min_x, bounds.max_x),
        y=bounded_interval(point.y, bounds.min_y, bounds.max_y),
    )


def unwrap_angle(angle: float, center: float) -> float:
    """
    Shift `angle` by whole turns so it lies in [center - pi, center + pi).

    Args:
        angle: Angle in radians, typically from atan2 (range [-pi, pi]).
        center: Reference angle, e.g. the mid angle of a wedge.

    Returns:
        The equivalent angle closest to `center`.
    """
    return angle - TWO_PI * math.floor((angle - center + math.pi) / TWO_PI)
