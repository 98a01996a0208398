"""
Segment Calculator
==================
A segment (wedge) is the padded region owned by one (quadrant, ring) pair.

Why is this file needed?
------------------------
1. Placement: the entry processor distributes entries over the segment's
   padded polar window.
2. Containment: the collision resolver pushes entries around freely and then
   pulls every one of them back into its segment with `clamp`.

The same Segment object is shared by every entry of its group.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence, TYPE_CHECKING

import numpy as np

from radarlayout.geometry.coordinates import TWO_PI, bounded_box, bounded_interval, bounded_ring, unwrap_angle
from radarlayout.geometry.primitives import Bounds, Point, Polar
from radarlayout.geometry.quadrants import Quadrant, compute_quadrant_bounds
from radarlayout.geometry.rings import Ring

if TYPE_CHECKING:
    import numpy.typing as npt

    from radarlayout.model.entry import Entry

INNERMOST_RADIUS = 30.0
COLLAPSED_HALF_WIDTH = 1.0
ANGULAR_EPSILON = 0.01


@dataclass(frozen=True)
class Segment:
    quadrant: int
    ring: int
    inner_radius: float
    outer_radius: float
    angle_min: float
    angle_max: float
    bounds: Bounds
    random_between: Optional[Callable[[float, float], float]] = field(default=None, repr=False, compare=False)

    @property
    def angle_range(self) -> float:
        return self.angle_max - self.angle_min

    @property
    def radius_range(self) -> float:
        return self.outer_radius - self.inner_radius

    @property
    def mid_radius(self) -> float:
        return (self.inner_radius + self.outer_radius) / 2

    @property
    def mid_angle(self) -> float:
        return (self.angle_min + self.angle_max) / 2

    def clamp(self, point: Point) -> Point:
        """
        Project `point` into the segment.

        The Cartesian rectangle is applied first, then radius and angle are
        clamped in polar space. The angle is unwrapped around the wedge centre
        so windows reaching past +-pi clamp to the nearest edge.
        """
        boxed = bounded_box(point, self.bounds)
        coord = bounded_ring(boxed.to_polar(), self.inner_radius, self.outer_radius)
        t = unwrap_angle(coord.t, self.mid_angle)
        return Polar(r=coord.r, t=bounded_interval(t, self.angle_min, self.angle_max)).to_point()

    def clamp_arrays(
        self,
        xs: npt.NDArray[np.float64],
        ys: npt.NDArray[np.float64],
    ) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """Vectorised `clamp` for many points of the same segment."""
        bx = np.clip(xs, self.bounds.min_x, self.bounds.max_x)
        by = np.clip(ys, self.bounds.min_y, self.bounds.max_y)
        r = np.clip(np.hypot(bx, by), self.inner_radius, self.outer_radius)
        t = np.arctan2(by, bx)
        t = t - TWO_PI * np.floor((t - self.mid_angle + np.pi) / TWO_PI)
        t = np.clip(t, self.angle_min, self.angle_max)
        return r * np.cos(t), r * np.sin(t)

    def clip(self, entry: Entry) -> Point:
        """Clamp an entry's position and write the result back onto it."""
        clipped = self.clamp(Point(entry.x, entry.y))
        entry.x = clipped.x
        entry.y = clipped.y
        return clipped

    def random_point(self) -> Point:
        if self.random_between is None:
            raise RuntimeError("Segment was created without a random source.")
        return Polar(
            t=self.random_between(self.angle_min, self.angle_max),
            r=self.random_between(self.inner_radius, self.outer_radius),
        ).to_point()

    def contains(self, point: Point, tol: float = 1e-6) -> bool:
        coord = point.to_polar()
        t = unwrap_angle(coord.t, self.mid_angle)
        return (self.inner_radius - tol <= coord.r <= self.outer_radius + tol
                and self.angle_min - tol <= t <= self.angle_max + tol)


def padded_radii(ring_index: int, rings: Sequence[Ring], radial_padding: float) -> tuple[float, float]:
    """
    Inner and outer radius of a ring band after radial padding.

    If padding would invert the band it collapses to a 2-unit band around
    the unpadded midpoint.
    """
    base_inner = INNERMOST_RADIUS if ring_index == 0 else float(rings[ring_index - 1].radius)
    base_outer = float(rings[ring_index].radius)

    inner = base_inner + radial_padding
    outer = base_outer - radial_padding
    if outer <= inner:
        midpoint = (base_inner + base_outer) / 2
        inner = max(0.0, midpoint - COLLAPSED_HALF_WIDTH)
        outer = midpoint + COLLAPSED_HALF_WIDTH
    return inner, outer


def create_segment(
    quadrant_index: int,
    ring_index: int,
    quadrants: Sequence[Quadrant],
    rings: Sequence[Ring],
    radial_padding: float,
    angular_padding: float,
    random_between: Optional[Callable[[float, float], float]] = None,
) -> Segment:
    """
    Build the padded wedge for one (quadrant, ring) pair.

    Args:
        quadrant_index: 0-based quadrant index.
        ring_index: 0-based ring index.
        quadrants: Output of `generate_quadrants`.
        rings: Output of `generate_rings`.
        radial_padding: Padding applied to both radii, in pixels.
        angular_padding: Padding applied to both angular edges, in pixels of
            arc length at the band's mid radius.
        random_between: Uniform sampler used by `Segment.random_point`.

    Returns:
        The Segment. Its radial and angular windows are never inverted.
    """
    quadrant = quadrants[quadrant_index]
    min_angle = quadrant.angle_min
    max_angle = quadrant.angle_max

    inner_radius, outer_radius = padded_radii(ring_index, rings, radial_padding)

    ring_center = (inner_radius + outer_radius) / 2
    padding = angular_padding / max(ring_center, 1.0)
    padding = min(padding, max(0.0, (max_angle - min_angle) / 2 - ANGULAR_EPSILON))

    angle_min = min_angle + padding
    angle_max = max_angle - padding
    if angle_max <= angle_min:
        angle_min, angle_max = min_angle, max_angle

    return Segment(
        quadrant=quadrant_index,
        ring=ring_index,
        inner_radius=inner_radius,
        outer_radius=outer_radius,
        angle_min=angle_min,
        angle_max=angle_max,
        bounds=compute_quadrant_bounds(angle_min, angle_max, outer_radius),
        random_between=random_between,
    )
