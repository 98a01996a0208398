"""Geometry and collision-resolution engine for technology radar charts."""
from radarlayout.model.entry import Entry, Moved
from radarlayout.model.radar import ColorScheme, QuadrantSpec, RadarConfig, RingSpec
from radarlayout.pipeline import RadarLayout, layout_radar
from radarlayout.rng import SeededRandom
from radarlayout.validation import (
    ConfigShapeError,
    ConfigValidationError,
    EntryBoundsError,
    validate_config,
    validate_config_all,
)

__all__ = [
    "ColorScheme",
    "ConfigShapeError",
    "ConfigValidationError",
    "Entry",
    "EntryBoundsError",
    "Moved",
    "QuadrantSpec",
    "RadarConfig",
    "RadarLayout",
    "RingSpec",
    "SeededRandom",
    "layout_radar",
    "validate_config",
    "validate_config_all",
]
