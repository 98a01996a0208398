from __future__ import annotations

import pytest

from radarlayout.geometry.quadrants import generate_quadrants
from radarlayout.geometry.rings import generate_rings
from radarlayout.model.entry import Entry
from radarlayout.model.radar import ColorScheme, QuadrantSpec, RadarConfig, RingSpec

RING_SPECS = [
    RingSpec("ADOPT", "#93c47d"),
    RingSpec("TRIAL", "#93d2c2"),
    RingSpec("ASSESS", "#fbdb84"),
    RingSpec("HOLD", "#efafa9"),
]


def make_config(num_quadrants: int = 4, num_rings: int = 4, entries=None, **kwargs) -> RadarConfig:
    rings = [RING_SPECS[i % len(RING_SPECS)] for i in range(num_rings)]
    return RadarConfig(
        quadrants=[QuadrantSpec(f"Q{i}") for i in range(num_quadrants)],
        rings=rings,
        entries=list(entries or []),
        colors=ColorScheme(inactive="#ddd"),
        **kwargs,
    )


@pytest.fixture
def sample_entries() -> list[Entry]:
    return [
        Entry(label="Tech A", quadrant=0, ring=0, active=True, moved=0),
        Entry(label="Tech B", quadrant=0, ring=1, active=True, moved=1),
        Entry(label="Tech C", quadrant=1, ring=0, active=True, moved=0),
        Entry(label="Tech D", quadrant=1, ring=1, active=False, moved=0),
        Entry(label="Tech E", quadrant=2, ring=2, active=True, moved=-1),
        Entry(label="Tech F", quadrant=3, ring=3, active=True, moved=2),
    ]


@pytest.fixture
def geometry_4x4():
    return generate_quadrants(4), generate_rings(4, 400)


@pytest.fixture
def config_factory():
    return make_config
