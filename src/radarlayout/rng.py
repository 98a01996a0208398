"""
Seeded Random Source
====================
Deterministic pseudo-random numbers for reproducible radar layouts.

The generator is the classic sine hash: the same seed yields the same sequence
in every process. It is NOT suitable for anything security related.
"""
from __future__ import annotations

import math
from typing import Optional

DEFAULT_SEED = 42


class SeededRandom:
    """Sine-based pseudo-random generator."""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self.seed: int = seed
        self.initial_seed: int = seed

    def next(self) -> float:
        """Return the next value in [0, 1)."""
        x = math.sin(self.seed) * 10000
        self.seed += 1
        return x - math.floor(x)

    def between(self, min_value: float, max_value: float) -> float:
        return min_value + self.next() * (max_value - min_value)

    def normal_between(self, min_value: float, max_value: float) -> float:
        """Average of two draws, a crude bias towards the centre of the range."""
        return min_value + (self.next() + self.next()) * 0.5 * (max_value - min_value)

    def reset(self, seed: Optional[int] = None) -> None:
        self.seed = self.initial_seed if seed is None else seed
