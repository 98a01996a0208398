"""
Configuration Defaults & Chart Dimensions
=========================================
This module prepares a RadarConfig before any geometry is generated.

Why is this file needed?
------------------------
1. Complexity scaling: radars with many quadrants or rings get a larger
   canvas and a slightly smaller default collision radius so they do not
   overcrowd.
2. Dimensions: the target outer radius of the ring system is derived from
   the canvas size, the chart padding and the space reserved for the title
   and footer in print layout.

Exports:
    ChartDimensions: Derived sizes of the chart area.
    apply_config_defaults: Returns a config with complexity scaling applied.
    calculate_dimensions: Computes ChartDimensions for a config.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
import logging

from radarlayout.geometry.coordinates import round_half_up
from radarlayout.model.radar import RadarConfig

logger = logging.getLogger(__name__)

TITLE_HEIGHT = 60
FOOTER_HEIGHT = 40
MAX_COMPLEXITY_MULTIPLIER = 1.3
MIN_OUTER_RADIUS = 10.0


@dataclass(frozen=True)
class ChartDimensions:
    title_height: float
    footer_height: float
    available_height: float
    available_width: float
    target_outer_radius: float


def complexity_multiplier(num_quadrants: int, num_rings: int) -> float:
    return 1 + (num_quadrants - 4) * 0.05 + (num_rings - 4) * 0.03


def apply_config_defaults(config: RadarConfig) -> RadarConfig:
    """
    Return a copy of `config` with grid-complexity scaling applied.

    The caller's config object is left untouched; entries are shared.
    """
    num_quadrants = config.num_quadrants
    num_rings = config.num_rings
    if num_quadrants < 5 and num_rings < 6:
        return dataclasses.replace(config)

    multiplier = min(complexity_multiplier(num_quadrants, num_rings), MAX_COMPLEXITY_MULTIPLIER)
    width = config.width if config.width_override else round_half_up(config.width * multiplier)
    height = config.height if config.height_override else round_half_up(config.height * multiplier)

    collision_radius = config.blip_collision_radius
    if num_quadrants >= 7 or num_rings >= 7:
        collision_radius = max(10.0, collision_radius * 0.9)

    logger.debug(
        f"Complex grid ({num_quadrants}x{num_rings}): canvas {width}x{height}, "
        f"collision radius {collision_radius:.2f}"
    )
    return dataclasses.replace(config, width=width, height=height, blip_collision_radius=collision_radius)


def calculate_dimensions(config: RadarConfig) -> ChartDimensions:
    """Reserve title/footer space and derive the outer radius of the ring system."""
    title_height = TITLE_HEIGHT if config.print_layout and config.title else 0
    footer_height = FOOTER_HEIGHT if config.print_layout else 0
    minimum_chart_size = 2 * config.chart_padding + 40

    available_height = max(minimum_chart_size, config.height - title_height - footer_height)
    available_width = max(minimum_chart_size, config.width)

    raw_outer_radius = min(available_width, available_height) / 2 - config.chart_padding
    return ChartDimensions(
        title_height=title_height,
        footer_height=footer_height,
        available_height=available_height,
        available_width=available_width,
        target_outer_radius=max(MIN_OUTER_RADIUS, raw_outer_radius),
    )
