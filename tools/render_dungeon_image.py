#!/usr/bin/env python3
"""
Render a generated level to an image file for visual inspection.

Useful for:
- Tuning generation parameters
- Eyeballing corridor routing and decoration
- Comparing the two strategies side by side

Usage:
    uv run tools/render_dungeon_image.py                        # Default: partition, random seed
    uv run tools/render_dungeon_image.py --preset halls         # Named preset
    uv run tools/render_dungeon_image.py --seed 42              # Reproducible level
    uv run tools/render_dungeon_image.py --output my.png        # Custom output path
"""

import argparse
import sys
from pathlib import Path

import cv2

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from levelgen import LevelConfigError, generate_preset, list_presets
from levelgen.render import render_image


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Render a generated level to an image file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--preset", "-p",
        choices=list_presets(),
        default="bsp-small",
        help="Generation preset (default: bsp-small)",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for reproducible levels",
    )
    parser.add_argument(
        "--tile-size", "-t",
        type=int,
        default=8,
        help="Pixels per tile (default: 8)",
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default="level_render.png",
        help="Output image path (default: level_render.png)",
    )
    parser.add_argument(
        "--show-grid",
        action="store_true",
        help="Overlay a tile grid on the image",
    )

    args = parser.parse_args()

    if args.seed is not None:
        print(f"Using random seed: {args.seed}")

    print(f"Generating level from preset '{args.preset}'...")
    try:
        level = generate_preset(args.preset, seed=args.seed)
    except LevelConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    print(f"Level size: {level.width}x{level.height} tiles")

    spawn = level.spawn_point()
    image = render_image(
        level.grid,
        tile_size=args.tile_size,
        show_grid=args.show_grid,
        marks={spawn: (0, 255, 0)},  # Green dot at spawn
    )
    print(f"Spawn point: tile ({spawn.x}, {spawn.y})")

    output_path = Path(args.output)
    cv2.imwrite(str(output_path), image)
    print(f"Saved to: {output_path.absolute()}")

    # Print room info
    print(f"\nRooms ({len(level.rooms)}):")
    for index, room in enumerate(level.rooms):
        print(f"  Room {index}: at tile ({room.x}, {room.y}), size {room.width}x{room.height}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
