#!/usr/bin/env python3
"""
Render a generated level as ASCII art for debugging.

Usage:
    uv run tools/render_dungeon_ascii.py --strategy partition --width 80 --height 40 --seed 42
    uv run tools/render_dungeon_ascii.py --strategy scatter --seed 7
    uv run tools/render_dungeon_ascii.py --preset halls-pillared --seed 3
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path so we can import levelgen
sys.path.insert(0, str(Path(__file__).parent.parent))

from levelgen import (
    LevelConfigError,
    generate_partitioned,
    generate_preset,
    generate_scattered,
    list_presets,
)
from levelgen.connectivity import is_fully_connected
from levelgen.render import render_ascii


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a generated level as ASCII art")
    parser.add_argument(
        "--strategy",
        choices=["partition", "scatter"],
        default="partition",
        help="Generation strategy (default: partition)",
    )
    parser.add_argument("--preset", choices=list_presets(), help="Use a named preset instead")
    parser.add_argument("--width", type=int, default=80, help="Grid width in tiles")
    parser.add_argument("--height", type=int, default=40, help="Grid height in tiles")
    parser.add_argument("--min-room-size", type=int, default=5, help="Partition: smallest room side")
    parser.add_argument("--max-depth", type=int, default=4, help="Partition: maximum split depth")
    parser.add_argument("--min-rooms", type=int, default=10, help="Scatter: fewest target rooms")
    parser.add_argument("--max-rooms", type=int, default=19, help="Scatter: most target rooms")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible generation")
    return parser


def main() -> int:
    args = build_parser().parse_args()

    try:
        if args.preset:
            level = generate_preset(args.preset, seed=args.seed)
        elif args.strategy == "partition":
            level = generate_partitioned(
                args.width, args.height, args.min_room_size, args.max_depth, seed=args.seed
            )
        else:
            level = generate_scattered(
                args.width, args.height, (args.min_rooms, args.max_rooms), seed=args.seed
            )
    except LevelConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    spawn = level.spawn_point()
    print(render_ascii(level.grid, marks={spawn: "@"}))

    # Print some debug info
    print(f"\n--- Debug Info ---")
    print(f"Strategy: {level.strategy}")
    print(f"Map size: {level.width}x{level.height} tiles")
    print(f"Rooms generated: {len(level.rooms)}")
    print(f"Corridors: {len(level.corridors)}")
    print(f"Spawn point: ({spawn.x}, {spawn.y})")
    print(f"Fully connected: {is_fully_connected(level.grid)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
