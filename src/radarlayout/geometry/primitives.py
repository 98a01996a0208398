"""
Geometric Primitives for the radar plane.

The radar uses screen-style Cartesian coordinates centred on the chart
origin; angles are radians measured with atan2.
"""
from __future__ import annotations

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Point:
    """A point in the radar plane."""
    x: float
    y: float

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def to_polar(self) -> Polar:
        return Polar(r=self.magnitude, t=math.atan2(self.y, self.x))


@dataclass(frozen=True)
class Polar:
    """A polar coordinate: radius `r` and angle `t` in radians."""
    r: float
    t: float

    def to_point(self) -> Point:
        return Point(self.r * math.cos(self.t), self.r * math.sin(self.t))


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned rectangle."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def contains(self, point: Point, eps: float = 1e-9) -> bool:
        return (self.min_x - eps <= point.x <= self.max_x + eps
                and self.min_y - eps <= point.y <= self.max_y + eps)
