"""
Radar Configuration (Data Model)
================================
This module defines the input structure of one radar layout run.

Why is this file needed?
------------------------
1. Single source of truth: quadrants, rings, entries and numeric options are
   gathered in one object that is passed through the whole pipeline.
2. Interop: `RadarConfig.from_dict` accepts the plain dictionaries produced by
   config loaders, so callers never need to know the dataclasses.

Classes:
    QuadrantSpec: A named angular sector.
    RingSpec: A named, coloured band.
    ColorScheme: Chart colours used by the layout (inactive entries).
    RadarConfig: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from radarlayout.model.entry import Entry
from radarlayout.rng import DEFAULT_SEED

DEFAULT_WIDTH = 1450
DEFAULT_HEIGHT = 1000
DEFAULT_CHART_PADDING = 60
DEFAULT_RADIAL_PADDING = 16.0
DEFAULT_ANGULAR_PADDING = 12.0
DEFAULT_COLLISION_RADIUS = 14.0


@dataclass(frozen=True)
class QuadrantSpec:
    name: str


@dataclass(frozen=True)
class RingSpec:
    name: str
    color: str


@dataclass(frozen=True)
class ColorScheme:
    background: str = "#fff"
    grid: str = "#dddde0"
    inactive: str = "#ddd"


@dataclass
class RadarConfig:
    """
    Everything one layout run needs.

    Padding values are pixel-equivalent units. `entries` are owned by the
    caller and mutated in place by the layout engine.
    """
    quadrants: List[QuadrantSpec] = field(default_factory=list)
    rings: List[RingSpec] = field(default_factory=list)
    entries: List[Entry] = field(default_factory=list)

    segment_radial_padding: float = DEFAULT_RADIAL_PADDING
    segment_angular_padding: float = DEFAULT_ANGULAR_PADDING
    blip_collision_radius: float = DEFAULT_COLLISION_RADIUS
    seed: int = DEFAULT_SEED
    print_layout: bool = True
    colors: ColorScheme = field(default_factory=ColorScheme)

    # Chart size, used to derive the target outer radius
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    chart_padding: float = DEFAULT_CHART_PADDING
    title: Optional[str] = None
    width_override: bool = False
    height_override: bool = False

    @property
    def num_quadrants(self) -> int:
        return len(self.quadrants)

    @property
    def num_rings(self) -> int:
        return len(self.rings)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> RadarConfig:
        """Build a config from plain dictionaries. Unknown keys are ignored."""
        colors = data.get("colors") or {}
        kwargs: Dict[str, Any] = {
            "quadrants": [QuadrantSpec(name=str(q.get("name", ""))) for q in data.get("quadrants", [])],
            "rings": [RingSpec(name=str(r.get("name", "")), color=str(r.get("color", ""))) for r in data.get("rings", [])],
            "entries": [e if isinstance(e, Entry) else Entry.from_dict(e) for e in data.get("entries", [])],
            "colors": ColorScheme(**{k: v for k, v in colors.items() if k in ("background", "grid", "inactive")}),
        }
        for key in (
            "segment_radial_padding", "segment_angular_padding", "blip_collision_radius", "seed",
            "print_layout", "width", "height", "chart_padding", "title", "width_override", "height_override",
        ):
            if key in data:
                kwargs[key] = data[key]
        return cls(**kwargs)
