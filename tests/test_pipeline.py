from __future__ import annotations

import math

import numpy as np
import pytest

from radarlayout import Entry, SeededRandom, layout_radar
from radarlayout.__main__ import build_demo_config, main
from radarlayout.geometry.primitives import Point


def random_entries(count, num_quadrants, num_rings, seed=11):
    rng = SeededRandom(seed)
    return [
        Entry(
            label=f"Entry {i:03d}",
            quadrant=int(rng.next() * num_quadrants),
            ring=int(rng.next() * num_rings),
            active=rng.next() > 0.3,
        )
        for i in range(count)
    ]


def test_sample_layout(config_factory, sample_entries):
    layout = layout_radar(config_factory(entries=sample_entries))
    assert layout.outer_radius == 420
    assert [r.radius for r in layout.rings] == [137, 231, 326, 420]
    assert len(layout.quadrant_bounds) == 4
    for entry in sample_entries:
        assert entry.segment.contains(Point(entry.x, entry.y))
        assert entry.rendered_x == entry.x
    assert sorted(int(e.id) for e in sample_entries) == [1, 2, 3, 4, 5, 6]
    assert layout.positions().shape == (6, 2)
    assert set(layout.entry_by_id()) == {"1", "2", "3", "4", "5", "6"}



def test_single_entry_radar(config_factory):
    entry = Entry(label="X", quadrant=0, ring=0)
    layout = layout_radar(config_factory(entries=[entry]))
    assert entry.id == "1"
    assert entry.collision_radius >= 12
    assert math.isfinite(entry.x) and math.isfinite(entry.y)
    segment = entry.segment
    assert (segment.quadrant, segment.ring) == (0, 0)
    assert (segment.inner_radius, segment.outer_radius) == (46, 121)
    assert segment.contains(Point(entry.x, entry.y))
    assert layout.entry_by_id() == {"1": entry}

@pytest.mark.parametrize("num_quadrants", [2, 3, 4, 5, 6, 7, 8])
def test_every_quadrant_count_stays_in_segments(config_factory, num_quadrants):
    entries = random_entries(40, num_quadrants, 5)
    layout = layout_radar(config_factory(num_quadrants=num_quadrants, num_rings=5, entries=entries), steps=60)
    for entry in layout.entries:
        assert 0 <= entry.quadrant < num_quadrants
        assert entry.segment.quadrant == entry.quadrant
        assert entry.segment.ring == entry.ring
        assert entry.segment.contains(Point(entry.x, entry.y))


def test_dense_segment_is_decluttered(config_factory):
    entries = [Entry(label=f"Crowd {i:02d}", quadrant=0, ring=3) for i in range(20)]
    layout = layout_radar(config_factory(entries=entries))
    radius = entries[0].collision_radius
    assert radius >= 13

    points = layout.positions()
    for i in range(len(points)):
        for j in range(i + 1, len(points)):
            distance = float(np.hypot(*(points[i] - points[j])))
            assert distance >= 0.75 * 2 * radius


def test_same_seed_is_reproducible(config_factory):
    first = layout_radar(config_factory(entries=random_entries(30, 4, 4), seed=99), steps=80)
    second = layout_radar(config_factory(entries=random_entries(30, 4, 4), seed=99), steps=80)
    np.testing.assert_array_equal(first.positions(), second.positions())
    assert [e.id for e in first.entries] == [e.id for e in second.entries]


def test_different_seeds_differ(config_factory):
    first = layout_radar(config_factory(entries=random_entries(30, 4, 4), seed=1), steps=10)
    second = layout_radar(config_factory(entries=random_entries(30, 4, 4), seed=2), steps=10)
    assert not np.allclose(first.positions(), second.positions())


def test_rerun_overwrites_previous_state(config_factory, sample_entries):
    config = config_factory(entries=sample_entries)
    first = layout_radar(config, steps=30).positions().copy()
    second = layout_radar(config, steps=30).positions()
    np.testing.assert_array_equal(first, second)


def test_empty_radar(config_factory):
    layout = layout_radar(config_factory())
    assert layout.entries == []
    assert layout.positions().shape == (0, 2)


def test_complex_grid_gets_larger_radius(config_factory):
    layout = layout_radar(config_factory(num_quadrants=8, num_rings=8), steps=1)
    assert layout.config.width == 1885
    assert layout.outer_radius == 570
    radii = [ring.radius for ring in layout.rings]
    assert radii == sorted(set(radii))


def test_entries_keep_layout_data(config_factory, sample_entries):
    layout_radar(config_factory(entries=sample_entries), steps=5)
    data = sample_entries[0].to_dict()
    assert data["label"] == "Tech A"
    assert data["id"] == "5"
    assert data["moved"] == "none"
    assert math.isfinite(data["x"]) and math.isfinite(data["y"])


def test_demo_config_is_valid():
    config = build_demo_config(6, 5, 50, seed=3)
    assert config.num_quadrants == 6
    assert all(0 <= e.quadrant < 6 and 0 <= e.ring < 5 for e in config.entries)


def test_cli_prints_table(capsys):
    assert main(["--entries", "12", "--steps", "10"]) == 0
    lines = [line for line in capsys.readouterr().out.splitlines() if line.strip() and " - " not in line]
    assert lines[0].split()[:2] == ["id", "label"]
    assert len(lines) == 13
    assert lines[1].split()[0] == "1"


def test_cli_rejects_bad_grid(capsys):
    assert main(["--quadrants", "9", "--steps", "1"]) == 1


def test_cli_explicit_canvas(capsys):
    assert main(["--entries", "3", "--steps", "1", "--width", "800", "--height", "700"]) == 0
    config = build_demo_config(4, 4, 3, seed=42, width=800, height=700)
    assert (config.width, config.height) == (800, 700)
    assert config.width_override and config.height_override


def test_cli_writes_log_file(tmp_path, capsys):
    log_file = tmp_path / "layout.log"
    assert main(["--entries", "5", "--steps", "2", "--log-file", str(log_file)]) == 0
    text = log_file.read_text(encoding="utf-8")
    assert "radarlayout.pipeline - INFO - Laying out 5 entries" in text
