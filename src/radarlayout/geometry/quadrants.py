"""Quadrant generation: angular windows, direction vectors and display order."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List
import math

import numpy as np

from radarlayout.geometry.primitives import Bounds

BOUNDS_MARGIN = 20.0

# Cardinal axis angles, including the wrapped copies needed once a window
# has been normalised to start below its end.
_AXIS_ANGLES = np.array([
    -math.pi,
    -math.pi / 2,
    0.0,
    math.pi / 2,
    math.pi,
    3 * math.pi / 2,
    2 * math.pi,
])


@dataclass(frozen=True)
class Quadrant:
    """
    One angular sector.

    `radial_min`/`radial_max` are in half-turn units (multiples of pi);
    (`factor_x`, `factor_y`) is the unit vector at the window's mid angle.
    """
    radial_min: float
    radial_max: float
    factor_x: float
    factor_y: float

    @property
    def angle_min(self) -> float:
        return self.radial_min * math.pi

    @property
    def angle_max(self) -> float:
        return self.radial_max * math.pi

    @property
    def angle_range(self) -> float:
        return (self.radial_max - self.radial_min) * math.pi


def generate_quadrants(num_quadrants: int) -> List[Quadrant]:
    """
    Split the full turn into `num_quadrants` equal windows.

    Windows start at -pi. A two-quadrant radar is rotated by -pi/2 so the
    chart is split vertically instead of horizontally.
    """
    angle_per_quadrant = 2.0 / num_quadrants
    rotation_offset = -0.5 if num_quadrants == 2 else 0.0

    quadrants = []
    for i in range(num_quadrants):
        start = -1.0 + i * angle_per_quadrant + rotation_offset
        end = -1.0 + (i + 1) * angle_per_quadrant + rotation_offset
        mid_angle = -math.pi + (i + 0.5) * angle_per_quadrant * math.pi + rotation_offset * math.pi
        quadrants.append(Quadrant(
            radial_min=start,
            radial_max=end,
            factor_x=math.cos(mid_angle),
            factor_y=math.sin(mid_angle),
        ))
    return quadrants


def compute_quadrant_bounds(start_angle: float, end_angle: float, radius: float) -> Bounds:
    """
    Cartesian bounding rectangle of the circular sector [start_angle, end_angle].

    Args:
        start_angle: Window start in radians.
        end_angle: Window end in radians.
        radius: Outer radius of the sector.

    Returns:
        Bounds enlarged by a fixed margin on every side.
    """
    two_pi = 2.0 * math.pi
    end = end_angle
    while end <= start_angle:
        end += two_pi

    # Move each axis angle up to the first copy >= start
    axis = _AXIS_ANGLES + two_pi * np.ceil(np.maximum(start_angle - _AXIS_ANGLES, 0.0) / two_pi)
    candidates = np.concatenate(([start_angle, end], axis[axis <= end]))

    cos_a = np.cos(candidates)
    sin_a = np.sin(candidates)
    return Bounds(
        min_x=float(cos_a.min()) * radius - BOUNDS_MARGIN,
        min_y=float(sin_a.min()) * radius - BOUNDS_MARGIN,
        max_x=float(cos_a.max()) * radius + BOUNDS_MARGIN,
        max_y=float(sin_a.max()) * radius + BOUNDS_MARGIN,
    )


def generate_quadrant_order(num_quadrants: int) -> List[int]:
    """
    Legend and id traversal order.

    Four quadrants keep the historic order [2, 3, 1, 0]; any other count
    starts at the bottom-left quadrant and walks round modulo the count.
    """
    if num_quadrants == 4:
        return [2, 3, 1, 0]
    start = num_quadrants // 2
    return [(start + i) % num_quadrants for i in range(num_quadrants)]
