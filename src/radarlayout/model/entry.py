"""Radar entries (blips) and their movement indicator."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Dict, Optional, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from radarlayout.geometry.segment import Segment


class Moved(StrEnum):
    NONE = "none"
    IN = "in"
    OUT = "out"
    NEW = "new"

    @classmethod
    def parse(cls, value: Union[Moved, str, int, None]) -> Moved:
        """Accept enum members, their string values or the legacy integer codes."""
        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            legacy = {0: cls.NONE, 1: cls.IN, -1: cls.OUT, 2: cls.NEW}
            if value not in legacy:
                raise ValueError(f"Unknown moved code: {value}")
            return legacy[value]
        return cls(value)


@dataclass(eq=False)
class Entry:
    """
    One plotted item.

    The caller fills in label, quadrant, ring, active and moved. Everything
    else is computed by the layout engine and overwritten on every run.
    """
    label: str
    quadrant: int
    ring: int
    active: bool = True
    moved: Moved = Moved.NONE
    link: Optional[str] = None

    # Engine-computed state
    x: float = float("nan")
    y: float = float("nan")
    vx: float = 0.0
    vy: float = 0.0
    id: Optional[str] = None
    color: Optional[str] = None
    collision_radius: Optional[float] = None
    segment: Optional[Segment] = field(default=None, repr=False)
    rendered_x: Optional[float] = None
    rendered_y: Optional[float] = None

    def __post_init__(self) -> None:
        self.moved = Moved.parse(self.moved)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Entry:
        return cls(
            label=str(data["label"]),
            quadrant=int(data["quadrant"]),
            ring=int(data["ring"]),
            active=bool(data.get("active", True)),
            moved=Moved.parse(data.get("moved")),
            link=data.get("link"),
        )

    def reset_layout(self) -> None:
        """Forget every engine-computed attribute."""
        self.x = float("nan")
        self.y = float("nan")
        self.vx = 0.0
        self.vy = 0.0
        self.id = None
        self.color = None
        self.collision_radius = None
        self.segment = None
        self.rendered_x = None
        self.rendered_y = None

    def to_dict(self) -> Dict[str, Any]:
        """Plain, serialisable view of the entry for rendering collaborators."""
        return {
            "label": self.label,
            "quadrant": self.quadrant,
            "ring": self.ring,
            "active": self.active,
            "moved": str(self.moved),
            "link": self.link,
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "color": self.color,
            "collision_radius": self.collision_radius,
        }
