"""Ring radii derived from a fixed four-ring reference pattern."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

import numpy as np

from radarlayout.geometry.coordinates import round_half_up

BASE_PATTERN = (130.0, 220.0, 310.0, 400.0)
MAX_BASE_RADIUS = 400.0
MIN_RING_RADIUS = 10


@dataclass(frozen=True)
class Ring:
    radius: int


def ring_template(num_rings: int) -> List[float]:
    """Unscaled radii for `num_rings` rings, in reference-pattern pixels."""
    if num_rings == 4:
        return list(BASE_PATTERN)

    last = len(BASE_PATTERN) - 1
    positions = np.arange(num_rings) / (num_rings - 1) * last
    # np.interp holds the last pattern value once the position reaches it
    return [float(r) for r in np.interp(positions, np.arange(len(BASE_PATTERN)), BASE_PATTERN)]


def generate_rings(num_rings: int, target_outer_radius: float) -> List[Ring]:
    """
    Ring radii for `num_rings` rings whose outermost ring lands on `target_outer_radius`.

    Radii are rounded to whole pixels and never drop below 10.
    """
    scale = target_outer_radius / MAX_BASE_RADIUS
    return [Ring(radius=max(MIN_RING_RADIUS, round_half_up(r * scale))) for r in ring_template(num_rings)]
