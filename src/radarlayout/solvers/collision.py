"""
Collision Resolver
==================
Declutters placed entries with an iterative pairwise-repulsion pass.

Overlapping pairs come from a SciPy k-d tree and are resolved by a Numba
kernel; entries are clipped back into their segment after every step.
"""
from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Sequence, TYPE_CHECKING

import numba as nb
import numpy as np
from scipy.spatial import cKDTree

if TYPE_CHECKING:
    import numpy.typing as npt

    from radarlayout.geometry.segment import Segment
    from radarlayout.model.entry import Entry
    from radarlayout.rng import SeededRandom

logger = logging.getLogger(__name__)

VELOCITY_DECAY = 0.15
ALPHA_DECAY = 0.008
ALPHA_MIN = 0.00005
COLLIDE_STRENGTH = 1.0
COLLIDE_ITERATIONS = 6
DEFAULT_STEPS = 400


@nb.njit(cache=True)
def _sine_next(state: npt.NDArray[np.int64]) -> float:
    """Same sequence as SeededRandom.next; `state` holds the seed and is advanced."""
    x = math.sin(float(state[0])) * 10000.0
    state[0] += 1
    return x - math.floor(x)


@nb.njit(cache=True)
def _collide_pairs(
    x: npt.NDArray[np.float64],
    y: npt.NDArray[np.float64],
    vx: npt.NDArray[np.float64],
    vy: npt.NDArray[np.float64],
    radii: npt.NDArray[np.float64],
    pairs_i: npt.NDArray[np.int64],
    pairs_j: npt.NDArray[np.int64],
    strength: float,
    state: npt.NDArray[np.int64],
) -> None:
    """
    One collide sub-iteration over candidate pairs sorted by (i, j), i < j.

    Velocities are updated in place, pair after pair. The predicted position
    of `i` is taken once per `i`, the partner's with its current velocity.
    """
    current = -1
    xi = 0.0
    yi = 0.0
    ri = 0.0
    ri2 = 0.0
    for k in range(pairs_i.shape[0]):
        i = pairs_i[k]
        j = pairs_j[k]
        if i != current:
            current = i
            xi = x[i] + vx[i]
            yi = y[i] + vy[i]
            ri = radii[i]
            ri2 = ri * ri

        rj = radii[j]
        r = ri + rj
        dx = xi - x[j] - vx[j]
        dy = yi - y[j] - vy[j]
        l = dx * dx + dy * dy
        if l >= r * r:
            continue

        # Coincident points get pushed apart in a tiny random direction
        if dx == 0.0:
            dx = (_sine_next(state) - 0.5) * 1e-6
            l += dx * dx
        if dy == 0.0:
            dy = (_sine_next(state) - 0.5) * 1e-6
            l += dy * dy

        l = math.sqrt(l)
        l = (r - l) / l * strength
        dx *= l
        dy *= l
        rj2 = rj * rj
        w = rj2 / (ri2 + rj2)
        vx[i] += dx * w
        vy[i] += dy * w
        w = 1.0 - w
        vx[j] -= dx * w
        vy[j] -= dy * w


class ForceLayout:
    """
    Iterative pairwise-repulsion pass that declutters entries inside their segments.

    Every step cools `alpha`, runs the collide force, integrates velocities
    and clips each entry back into its segment. The clipped position is also
    stored as the entry's rendered position.
    """

    def __init__(
        self,
        entries: Sequence[Entry],
        rng: SeededRandom,
        *,
        default_radius: float = 14.0,
        velocity_decay: float = VELOCITY_DECAY,
        alpha_decay: float = ALPHA_DECAY,
        alpha_min: float = ALPHA_MIN,
        strength: float = COLLIDE_STRENGTH,
        iterations: int = COLLIDE_ITERATIONS,
    ) -> None:
        self.entries = list(entries)
        self.rng = rng
        self.velocity_decay = 1.0 - velocity_decay
        self.alpha = 1.0
        self.alpha_target = 0.0
        self.alpha_decay = alpha_decay
        self.alpha_min = alpha_min
        self.strength = strength
        self.iterations = iterations
        self.steps_run = 0

        n = len(self.entries)
        self.x: npt.NDArray[np.float64] = np.array([e.x for e in self.entries], dtype=np.float64).reshape(n)
        self.y: npt.NDArray[np.float64] = np.array([e.y for e in self.entries], dtype=np.float64).reshape(n)
        self.vx: npt.NDArray[np.float64] = np.array([e.vx for e in self.entries], dtype=np.float64).reshape(n)
        self.vy: npt.NDArray[np.float64] = np.array([e.vy for e in self.entries], dtype=np.float64).reshape(n)
        self.radii: npt.NDArray[np.float64] = np.array(
            [e.collision_radius or default_radius for e in self.entries], dtype=np.float64
        ).reshape(n)

        self._groups = self._group_by_segment()

    def _group_by_segment(self) -> List[tuple[Segment, npt.NDArray[np.int64]]]:
        groups: Dict[int, tuple[Segment, List[int]]] = {}
        for index, entry in enumerate(self.entries):
            if entry.segment is None:
                continue
            groups.setdefault(id(entry.segment), (entry.segment, []))[1].append(index)
        return [(segment, np.array(indices, dtype=np.int64)) for segment, indices in groups.values()]

    def _candidate_pairs(self) -> tuple[npt.NDArray[np.int64], npt.NDArray[np.int64]]:
        px = self.x + self.vx
        py = self.y + self.vy
        tree = cKDTree(np.column_stack((px, py)))
        pairs = tree.query_pairs(2.0 * float(self.radii.max()), output_type="ndarray")
        if pairs.size == 0:
            empty = np.empty(0, dtype=np.int64)
            return empty, empty
        order = np.lexsort((pairs[:, 1], pairs[:, 0]))
        pairs = pairs[order].astype(np.int64)
        return np.ascontiguousarray(pairs[:, 0]), np.ascontiguousarray(pairs[:, 1])

    def _collide(self) -> None:
        state = np.array([self.rng.seed], dtype=np.int64)
        for _ in range(self.iterations):
            pairs_i, pairs_j = self._candidate_pairs()
            if pairs_i.size == 0:
                continue
            _collide_pairs(self.x, self.y, self.vx, self.vy, self.radii, pairs_i, pairs_j, self.strength, state)
        self.rng.seed = int(state[0])

    def _clip(self) -> None:
        for segment, indices in self._groups:
            cx, cy = segment.clamp_arrays(self.x[indices], self.y[indices])
            self.x[indices] = cx
            self.y[indices] = cy

        for index, entry in enumerate(self.entries):
            entry.x = float(self.x[index])
            entry.y = float(self.y[index])
            entry.vx = float(self.vx[index])
            entry.vy = float(self.vy[index])
            entry.rendered_x = entry.x
            entry.rendered_y = entry.y

    def step(self) -> None:
        self.alpha += (self.alpha_target - self.alpha) * self.alpha_decay
        if len(self.entries) > 1:
            self._collide()
        self.vx *= self.velocity_decay
        self.vy *= self.velocity_decay
        self.x += self.vx
        self.y += self.vy
        self._clip()
        self.steps_run += 1

    def tick(self, steps: int = DEFAULT_STEPS) -> ForceLayout:
        """Run exactly `steps` steps, regardless of alpha."""
        for _ in range(steps):
            self.step()
        logger.debug(f"Collision pass: {steps} steps over {len(self.entries)} entries, alpha={self.alpha:.5f}")
        return self

    def settle(self, max_steps: Optional[int] = None) -> ForceLayout:
        """Keep stepping until alpha cools below `alpha_min` (or `max_steps` is reached)."""
        taken = 0
        while self.alpha >= self.alpha_min and (max_steps is None or taken < max_steps):
            self.step()
            taken += 1
        logger.debug(f"Settled after {taken} additional steps, alpha={self.alpha:.6f}")
        return self

    def min_separation_ratio(self) -> float:
        """Smallest pairwise distance divided by the pair's combined radius (inf for < 2 entries)."""
        if len(self.entries) < 2:
            return math.inf
        points = np.column_stack((self.x, self.y))
        delta = points[:, None, :] - points[None, :, :]
        distance = np.sqrt((delta ** 2).sum(axis=-1))
        combined = self.radii[:, None] + self.radii[None, :]
        upper = np.triu_indices(len(self.entries), k=1)
        return float((distance[upper] / combined[upper]).min())


def resolve_collisions(
    entries: Sequence[Entry],
    rng: SeededRandom,
    *,
    steps: int = DEFAULT_STEPS,
    default_radius: float = 14.0,
) -> ForceLayout:
    """Run the decluttering pass over `entries` in place and return the finished layout."""
    layout = ForceLayout(entries, rng, default_radius=default_radius)
    if layout.entries:
        layout.tick(steps)
    return layout
