"""Command-line interface: lay out a synthetic radar and print the result."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from radarlayout.logging_config import setup_logging
from radarlayout.model.entry import Entry, Moved
from radarlayout.model.radar import QuadrantSpec, RadarConfig, RingSpec
from radarlayout.pipeline import layout_radar
from radarlayout.rng import DEFAULT_SEED, SeededRandom
from radarlayout.validation import ConfigValidationError

logger = logging.getLogger("radarlayout")

RING_PALETTE = ["#5ba300", "#009eb0", "#c7ba00", "#e09b96", "#8e7cc3", "#f6b26b", "#76a5af", "#a61c00"]
MOVED_CYCLE = [Moved.NONE, Moved.NONE, Moved.IN, Moved.OUT, Moved.NEW]


def build_demo_config(
    num_quadrants: int,
    num_rings: int,
    num_entries: int,
    seed: int,
    print_layout: bool = True,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> RadarConfig:
    """A radar with generated names; entry placement is drawn from its own seeded source."""
    picker = SeededRandom(seed + 1)
    entries = [
        Entry(
            label=f"Technology {i + 1:03d}",
            quadrant=int(picker.next() * num_quadrants),
            ring=int(picker.next() * num_rings),
            active=picker.next() > 0.2,
            moved=MOVED_CYCLE[i % len(MOVED_CYCLE)],
        )
        for i in range(num_entries)
    ]
    sizes = {}
    if width is not None:
        sizes.update(width=width, width_override=True)
    if height is not None:
        sizes.update(height=height, height_override=True)
    return RadarConfig(
        quadrants=[QuadrantSpec(name=f"Quadrant {i + 1}") for i in range(num_quadrants)],
        rings=[RingSpec(name=f"Ring {i + 1}", color=RING_PALETTE[i % len(RING_PALETTE)]) for i in range(num_rings)],
        entries=entries,
        seed=seed,
        print_layout=print_layout,
        **sizes,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="radarlayout", description="Lay out a synthetic technology radar.")
    parser.add_argument("--quadrants", type=int, default=4)
    parser.add_argument("--rings", type=int, default=4)
    parser.add_argument("--entries", type=int, default=40)
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument("--width", type=int, default=None, help="canvas width in pixels")
    parser.add_argument("--height", type=int, default=None, help="canvas height in pixels")
    parser.add_argument("--steps", type=int, default=None, help="collision steps (default 400)")
    parser.add_argument("--no-print-layout", action="store_true")
    parser.add_argument("--debug", action="store_true")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.debug else logging.INFO, args.log_file)

    config = build_demo_config(
        args.quadrants, args.rings, args.entries, args.seed,
        print_layout=not args.no_print_layout, width=args.width, height=args.height,
    )
    try:
        layout = layout_radar(config, steps=args.steps)
    except ConfigValidationError as e:
        logger.error(f"Invalid radar: {e} (field '{e.field}', valid range {e.valid_range})")
        return 1

    print(f"{'id':>4}  {'label':<16} {'q':>2} {'r':>2} {'x':>9} {'y':>9} {'radius':>7}")
    for entry in sorted(layout.entries, key=lambda e: int(e.id)):
        print(
            f"{entry.id:>4}  {entry.label:<16} {entry.quadrant:>2} {entry.ring:>2} "
            f"{entry.x:>9.2f} {entry.y:>9.2f} {entry.collision_radius:>7.2f}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
