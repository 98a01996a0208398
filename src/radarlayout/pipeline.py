"""
Radar Layout Pipeline
=====================
One synchronous call from a raw RadarConfig to final entry positions.

Why is this file needed?
------------------------
1. Ordering: defaults, validation, geometry, placement and collision
   resolution must run in a fixed order for the layout to be reproducible.
2. Isolation: each call owns its random source; nothing is cached between
   calls, so independent layouts may run concurrently.

Classes:
    RadarLayout: Result container handed to rendering collaborators.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Dict, List, Optional, TYPE_CHECKING

import numpy as np

from radarlayout.config import ChartDimensions, apply_config_defaults, calculate_dimensions
from radarlayout.geometry.primitives import Bounds
from radarlayout.geometry.quadrants import Quadrant, compute_quadrant_bounds, generate_quadrants
from radarlayout.geometry.rings import Ring, generate_rings
from radarlayout.processing.entry_processor import EntryProcessor
from radarlayout.rng import SeededRandom
from radarlayout.solvers.collision import DEFAULT_STEPS, resolve_collisions
from radarlayout.validation import validate_config

if TYPE_CHECKING:
    import numpy.typing as npt

    from radarlayout.model.entry import Entry
    from radarlayout.model.radar import RadarConfig

logger = logging.getLogger(__name__)


@dataclass
class RadarLayout:
    """Everything a renderer needs to draw one radar."""
    config: RadarConfig
    dimensions: ChartDimensions
    quadrants: List[Quadrant]
    rings: List[Ring]
    quadrant_bounds: List[Bounds]
    entries: List[Entry]
    segmented: List[List[List[Entry]]] = field(default_factory=list)

    @property
    def outer_radius(self) -> int:
        return self.rings[-1].radius

    def entry_by_id(self) -> Dict[str, Entry]:
        return {entry.id: entry for entry in self.entries if entry.id is not None}

    def positions(self) -> npt.NDArray[np.float64]:
        """(N, 2) array of entry positions, in input order."""
        return np.array([[entry.x, entry.y] for entry in self.entries], dtype=np.float64).reshape(-1, 2)


def layout_radar(config: RadarConfig, *, steps: Optional[int] = None) -> RadarLayout:
    """
    Lay out every entry of `config`.

    Entries are mutated in place. If validation fails, the error propagates
    before any entry is touched.

    Args:
        config: The radar configuration.
        steps: Collision-resolution steps, defaults to 400.

    Returns:
        The RadarLayout with generated geometry and positioned entries.
    """
    prepared = apply_config_defaults(config)
    dimensions = calculate_dimensions(prepared)
    validate_config(prepared)

    rng = SeededRandom(prepared.seed)
    quadrants = generate_quadrants(prepared.num_quadrants)
    rings = generate_rings(prepared.num_rings, dimensions.target_outer_radius)
    outer_radius = rings[-1].radius
    quadrant_bounds = [compute_quadrant_bounds(q.angle_min, q.angle_max, outer_radius) for q in quadrants]
    logger.info(
        f"Laying out {len(prepared.entries)} entries on {len(quadrants)} quadrants x {len(rings)} rings "
        f"(outer radius {outer_radius}, seed {prepared.seed})"
    )

    for entry in prepared.entries:
        entry.reset_layout()

    processor = EntryProcessor(prepared, quadrants, rings, rng)
    segmented = processor.process_entries(prepared.entries)
    resolve_collisions(
        prepared.entries, rng,
        steps=DEFAULT_STEPS if steps is None else steps,
        default_radius=prepared.blip_collision_radius,
    )

    return RadarLayout(
        config=prepared,
        dimensions=dimensions,
        quadrants=quadrants,
        rings=rings,
        quadrant_bounds=quadrant_bounds,
        entries=prepared.entries,
        segmented=segmented,
    )
