"""Command line entry point: generate a terrain, erode it and report the result."""

from __future__ import annotations

import argparse
import csv
import random
from typing import Sequence

from erosionsim.scene import Scene

STEP_VALUE = 1000
DEFAULT_DROPLETS = 40000
DEFAULT_LIFETIME = 30


def round_droplet_count(value: int, step: int = STEP_VALUE) -> int:
    """Round a droplet count toward zero to a whole number of ``step``s."""
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    quotient = abs(value) // step
    return (quotient if value >= 0 else -quotient) * step


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="erosionsim",
        description="Generate Perlin noise terrain and apply hydraulic erosion.",
    )
    parser.add_argument("--width", type=int, default=300, help="grid width in vertices")
    parser.add_argument("--depth", type=int, default=300, help="grid depth in vertices")
    parser.add_argument("--spacing", type=float, default=1.0, help="distance between vertices")
    parser.add_argument("--frequency", type=float, default=3.0, help="noise frequency")
    parser.add_argument("--octaves", type=int, default=6, help="noise octaves")
    parser.add_argument("--height", type=int, default=90, help="maximum terrain height")
    parser.add_argument("--droplets", type=int, default=DEFAULT_DROPLETS, help="droplets to simulate")
    parser.add_argument("--lifetime", type=int, default=DEFAULT_LIFETIME, help="droplet lifetime")
    parser.add_argument("--lock-ratio", action="store_true", help="use the width as the depth too")
    parser.add_argument("--seed", type=int, default=None, help="random seed for droplet placement")
    parser.add_argument("--output", default=None, help="write the eroded grid as x,y,z CSV here")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    depth = args.width if args.lock_ratio else args.depth

    scene = Scene(args.width, depth, args.spacing, random.Random(args.seed))
    plane = scene.plane
    plane.set_noise_frequency(args.frequency)
    plane.set_noise_octaves(args.octaves)
    plane.max_height = args.height
    plane.regenerate()

    droplets = round_droplet_count(args.droplets)
    print(f"Erosion droplets {droplets}")
    print(f"Droplet Lifetime {args.lifetime}")
    batches = scene.call_erosion_event(droplets, args.lifetime)

    grid_heights = [vertex[1] for vertex in plane.height_grid]
    print(f"Batches {batches}")
    print(f"Trail points {len(plane.trail_points)}")
    if grid_heights:
        print(f"Height min {min(grid_heights):.4f} max {max(grid_heights):.4f}")

    if args.output:
        with open(args.output, "w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle)
            writer.writerows(plane.height_grid)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())