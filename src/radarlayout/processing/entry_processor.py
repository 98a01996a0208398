"""
Entry Processor
===============
Turns the caller's raw entries into placed, numbered, coloured blips.

Steps (see `EntryProcessor.process_entries`):
1. Segmentation: bucket entries by quadrant and ring.
2. Segment and colour assignment.
3. Grid placement inside each segment, with seeded jitter.
4. Sequential ids in legend order.
5. Adaptive collision radii from segment density.

Entries are mutated in place.
"""
from __future__ import annotations

import logging
import math
from typing import List, Sequence, Tuple, TYPE_CHECKING

from radarlayout.geometry.primitives import Polar
from radarlayout.geometry.quadrants import Quadrant, generate_quadrant_order
from radarlayout.geometry.rings import Ring
from radarlayout.geometry.segment import Segment, create_segment, padded_radii

if TYPE_CHECKING:
    from radarlayout.model.entry import Entry
    from radarlayout.model.radar import RadarConfig
    from radarlayout.rng import SeededRandom

logger = logging.getLogger(__name__)

Segmented = List[List[List["Entry"]]]

# Grid sizing
CAPACITY_DIVISOR = 0.7
MIN_CAPACITY = 3
MIN_DIVISIONS = 2
JITTER_MARGIN = 0.15
JITTER_SPAN = 0.7

# Collision radius
RADIUS_SAFETY_FACTOR = 0.55
MIN_COLLISION_RADIUS = 12.0
DENSE_COLLISION_RADIUS = 13.0
VERY_DENSE_COLLISION_RADIUS = 14.0
NARROW_RING_SHRINK = 0.9
NARROW_RING_MIN_RADIUS = 10.0


class EntryProcessor:
    """
    Positions, segments, numbers and sizes radar entries.

    The processor holds no state between calls except the random source it
    was given, which it advances.
    """

    def __init__(
        self,
        config: RadarConfig,
        quadrants: Sequence[Quadrant],
        rings: Sequence[Ring],
        rng: SeededRandom,
    ) -> None:
        self.config = config
        self.quadrants = quadrants
        self.rings = rings
        self.rng = rng
        self.num_quadrants = len(quadrants)
        self.num_rings = len(rings)

    def process_entries(self, entries: List[Entry]) -> Segmented:
        """
        Run every processing step over `entries`.

        Returns:
            The entries bucketed as [quadrant][ring], each bucket sorted by label.
        """
        segmented = self.segment_entries(entries)
        segments = self.assign_segments_and_colors(segmented)
        self.position_entries(segmented, segments)
        self.assign_ids(segmented)
        self.calculate_collision_radii(segmented)
        logger.info(f"Processed {len(entries)} entries over {self.num_quadrants}x{self.num_rings} segments.")
        return segmented

    def segment_entries(self, entries: Sequence[Entry]) -> Segmented:
        segmented: Segmented = [[[] for _ in range(self.num_rings)] for _ in range(self.num_quadrants)]
        for entry in entries:
            segmented[entry.quadrant][entry.ring].append(entry)
        return segmented

    def create_segment(self, quadrant: int, ring: int) -> Segment:
        return create_segment(
            quadrant, ring, self.quadrants, self.rings,
            radial_padding=self.config.segment_radial_padding,
            angular_padding=self.config.segment_angular_padding,
            random_between=self.rng.between,
        )

    def assign_segments_and_colors(self, segmented: Segmented) -> dict[Tuple[int, int], Segment]:
        """Give every entry its group's shared Segment and its display colour."""
        segments: dict[Tuple[int, int], Segment] = {}
        for quadrant in range(self.num_quadrants):
            for ring in range(self.num_rings):
                group = segmented[quadrant][ring]
                if not group:
                    continue
                segment = self.create_segment(quadrant, ring)
                segments[(quadrant, ring)] = segment
                for entry in group:
                    entry.segment = segment
                    if entry.active or self.config.print_layout:
                        entry.color = self.config.rings[ring].color
                    else:
                        entry.color = self.config.colors.inactive
        return segments

    def position_entries(self, segmented: Segmented, segments: dict[Tuple[int, int], Segment]) -> None:
        for quadrant in range(self.num_quadrants):
            for ring in range(self.num_rings):
                group = segmented[quadrant][ring]
                if group:
                    self.grid_position(group, segments[(quadrant, ring)])

    def grid_divisions(self, count: int, segment: Segment) -> Tuple[int, int]:
        """
        Choose (angular, radial) grid divisions for `count` entries in `segment`.

        Ring 0 measures its arc at the inner radius, where the wedge is
        narrowest, every other ring at its mid radius.
        """
        effective_radius = segment.inner_radius if segment.ring == 0 else segment.mid_radius
        arc_length = segment.angle_range * effective_radius
        radial_depth = segment.radius_range

        item_size = self.config.blip_collision_radius or 14
        max_angular = max(MIN_CAPACITY, math.floor(arc_length / (item_size * CAPACITY_DIVISOR)))
        max_radial = max(MIN_CAPACITY, math.floor(radial_depth / (item_size * CAPACITY_DIVISOR)))

        if count == 1:
            return 1, 1

        if count <= 4:
            angular = min(count, max_angular)
            return angular, math.ceil(count / angular)

        base = math.ceil(math.sqrt(count))
        aspect_ratio = arc_length / max(radial_depth, 1)

        if aspect_ratio > 2:
            angular = min(max_angular, math.ceil(base * 1.5))
        elif aspect_ratio > 1:
            angular = min(max_angular, math.ceil(base * 1.2))
        elif aspect_ratio < 0.5:
            radial_bias = 0.85 if segment.ring == 0 else 0.7
            angular = min(max_angular, max(3, math.floor(base * radial_bias)))
        else:
            angular = min(max_angular, max(3, base))
        radial = math.ceil(count / angular)

        angular = max(MIN_DIVISIONS, min(angular, max_angular))
        radial = max(MIN_DIVISIONS, min(radial, max_radial))
        return angular, radial

    def grid_position(self, entries: Sequence[Entry], segment: Segment) -> None:
        """Place each entry in its grid cell with a jittered offset inside the cell."""
        angular_divisions, radial_divisions = self.grid_divisions(len(entries), segment)
        logger.debug(
            f"Segment ({segment.quadrant}, {segment.ring}): {len(entries)} entries "
            f"on a {angular_divisions}x{radial_divisions} grid"
        )

        total_cells = angular_divisions * radial_divisions
        for i, entry in enumerate(entries):
            angular_index = i % angular_divisions
            radial_index = i // angular_divisions

            # Wrap overflow back onto the grid
            if radial_index >= radial_divisions:
                cell = i % total_cells
                angular_index = cell % angular_divisions
                radial_index = cell // angular_divisions

            angular_fraction = (angular_index + JITTER_MARGIN + self.rng.next() * JITTER_SPAN) / angular_divisions
            radial_fraction = (radial_index + JITTER_MARGIN + self.rng.next() * JITTER_SPAN) / radial_divisions

            point = Polar(
                t=segment.angle_min + angular_fraction * segment.angle_range,
                r=segment.inner_radius + radial_fraction * segment.radius_range,
            ).to_point()
            entry.x = point.x
            entry.y = point.y
            entry.vx = 0.0
            entry.vy = 0.0

    def assign_ids(self, segmented: Segmented) -> None:
        """Number entries 1..N in legend order, alphabetically inside each group."""
        next_id = 1
        for quadrant in generate_quadrant_order(self.num_quadrants):
            for ring in range(self.num_rings):
                group = segmented[quadrant][ring]
                group.sort(key=lambda e: e.label)
                for entry in group:
                    entry.id = str(next_id)
                    next_id += 1

    def collision_radius(self, quadrant: int, ring: int, count: int) -> float:
        """Adaptive collision radius for a group of `count` entries."""
        inner, outer = padded_radii(ring, self.rings, self.config.segment_radial_padding)
        angle_range = self.quadrants[quadrant].angle_range
        ring_center = (inner + outer) / 2
        thickness = outer - inner

        area_per_entry = angle_range * ring_center * thickness / count
        radius = max(MIN_COLLISION_RADIUS, math.sqrt(area_per_entry / math.pi) * RADIUS_SAFETY_FACTOR)

        if count > 10:
            radius = max(radius, DENSE_COLLISION_RADIUS)
        if count > 15:
            radius = max(radius, VERY_DENSE_COLLISION_RADIUS)

        # Innermost wedges get very narrow once the turn is cut into many quadrants
        if ring == 0 and self.num_quadrants >= 6:
            radius = max(NARROW_RING_MIN_RADIUS, radius * NARROW_RING_SHRINK)
        return radius

    def calculate_collision_radii(self, segmented: Segmented) -> None:
        for quadrant in range(self.num_quadrants):
            for ring in range(self.num_rings):
                group = segmented[quadrant][ring]
                if not group:
                    continue
                radius = self.collision_radius(quadrant, ring, len(group))
                for entry in group:
                    entry.collision_radius = radius
