"""
Radar geometry: quadrant windows, ring radii and padded segments.

Pure Python/NumPy, no rendering.
"""
from radarlayout.geometry.primitives import Bounds, Point, Polar
from radarlayout.geometry.quadrants import Quadrant, compute_quadrant_bounds, generate_quadrant_order, generate_quadrants
from radarlayout.geometry.rings import Ring, generate_rings
from radarlayout.geometry.segment import Segment, create_segment

__all__ = [
    "Bounds", "Point", "Polar",
    "Quadrant", "compute_quadrant_bounds", "generate_quadrant_order", "generate_quadrants",
    "Ring", "generate_rings",
    "Segment", "create_segment",
]
