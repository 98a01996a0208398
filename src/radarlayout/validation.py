"""
Structural checks run before any geometry is computed.

Both entry points only read the config; nothing is mutated.
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from radarlayout.model.radar import RadarConfig

logger = logging.getLogger(__name__)

QUADRANT_RANGE: Tuple[int, int] = (2, 8)
RING_RANGE: Tuple[int, int] = (4, 8)


class ConfigValidationError(ValueError):
    """Base class for invalid radar configurations."""

    def __init__(self, message: str, field: str, value: Any, valid_range: Tuple[int, int]) -> None:
        super().__init__(message)
        self.field = field
        self.value = value
        self.valid_range = valid_range


class ConfigShapeError(ConfigValidationError):
    """Quadrant or ring count outside the supported range."""


class EntryBoundsError(ConfigValidationError):
    """An entry refers to a quadrant or ring that does not exist."""

    def __init__(self, message: str, field: str, value: Any, valid_range: Tuple[int, int], label: str) -> None:
        super().__init__(message, field, value, valid_range)
        self.label = label


def _check_shape(field: str, count: int, valid_range: Tuple[int, int]) -> Optional[ConfigShapeError]:
    low, high = valid_range
    if low <= count <= high:
        return None
    return ConfigShapeError(
        f"Number of {field} must be between {low} and {high} (found: {count})",
        field, count, valid_range,
    )


def validate_config_all(config: RadarConfig) -> List[ConfigValidationError]:
    """Collect every violation instead of stopping at the first one."""
    errors: List[ConfigValidationError] = []

    for field, count, valid_range in (
        ("quadrants", config.num_quadrants, QUADRANT_RANGE),
        ("rings", config.num_rings, RING_RANGE),
    ):
        error = _check_shape(field, count, valid_range)
        if error is not None:
            errors.append(error)

    for index, entry in enumerate(config.entries):
        for field, value, count in (
            ("quadrant", entry.quadrant, config.num_quadrants),
            ("ring", entry.ring, config.num_rings),
        ):
            if 0 <= value < count:
                continue
            valid_range = (0, count - 1)
            errors.append(EntryBoundsError(
                f"Entry '{entry.label}' has invalid {field}: {value} (must be 0-{count - 1})",
                f"entries[{index}].{field}", value, valid_range, entry.label,
            ))

    return errors


def validate_config(config: RadarConfig) -> None:
    """
    Raise the first violation found.

    Raises:
        ConfigShapeError: quadrant count outside [2, 8] or ring count outside [4, 8].
        EntryBoundsError: an entry's quadrant or ring index is out of range.
    """
    errors = validate_config_all(config)
    if errors:
        logger.error(str(errors[0]))
        raise errors[0]
