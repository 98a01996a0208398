from __future__ import annotations

import math

import pytest

from radarlayout import layout_radar
from radarlayout.model.entry import Entry
from radarlayout.validation import (
    ConfigShapeError,
    ConfigValidationError,
    EntryBoundsError,
    validate_config,
    validate_config_all,
)


def test_valid_config_passes(config_factory, sample_entries):
    config = config_factory(entries=sample_entries)
    validate_config(config)
    assert validate_config_all(config) == []
    assert all(e.id is None for e in sample_entries)


@pytest.mark.parametrize("num_quadrants", [0, 1, 9])
def test_quadrant_count_out_of_range(config_factory, num_quadrants):
    with pytest.raises(ConfigShapeError) as info:
        validate_config(config_factory(num_quadrants=num_quadrants))
    assert info.value.field == "quadrants"
    assert info.value.value == num_quadrants
    assert info.value.valid_range == (2, 8)


@pytest.mark.parametrize("num_rings", [3, 9])
def test_ring_count_out_of_range(config_factory, num_rings):
    with pytest.raises(ConfigShapeError) as info:
        validate_config(config_factory(num_rings=num_rings))
    assert info.value.field == "rings"
    assert "between 4 and 8" in str(info.value)


def test_entry_quadrant_out_of_range(config_factory):
    entry = Entry(label="Rogue", quadrant=4, ring=0)
    with pytest.raises(EntryBoundsError) as info:
        validate_config(config_factory(entries=[entry]))
    error = info.value
    assert error.label == "Rogue"
    assert error.field == "entries[0].quadrant"
    assert error.value == 4
    assert error.valid_range == (0, 3)
    assert "Rogue" in str(error) and "4" in str(error) and "0-3" in str(error)


def test_entry_ring_out_of_range(config_factory):
    entries = [Entry(label="Fine", quadrant=0, ring=0), Entry(label="Negative", quadrant=0, ring=-1)]
    with pytest.raises(EntryBoundsError) as info:
        validate_config(config_factory(entries=entries))
    assert info.value.field == "entries[1].ring"
    assert info.value.value == -1


def test_errors_share_a_base_class():
    assert issubclass(ConfigShapeError, ConfigValidationError)
    assert issubclass(EntryBoundsError, ConfigValidationError)
    assert issubclass(ConfigValidationError, ValueError)


def test_validate_all_collects_every_violation(config_factory):
    entries = [Entry(label="A", quadrant=7, ring=0), Entry(label="B", quadrant=0, ring=5)]
    errors = validate_config_all(config_factory(num_quadrants=1, entries=entries))
    assert isinstance(errors[0], ConfigShapeError)
    assert [e.field for e in errors[1:]] == ["entries[0].quadrant", "entries[1].ring"]


def test_layout_raises_before_touching_entries(config_factory):
    entry = Entry(label="X", quadrant=0, ring=0)
    with pytest.raises(ConfigShapeError):
        layout_radar(config_factory(num_rings=3, entries=[entry]))
    assert entry.id is None
    assert entry.segment is None
    assert math.isnan(entry.x) and math.isnan(entry.y)
