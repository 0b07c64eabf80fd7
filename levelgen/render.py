"""
Debug rendering of generated levels, as ASCII text or as an image.
"""

from typing import Dict, Optional, Tuple

import cv2
import numpy as np

from .geometry import Point
from .grid import TileGrid
from .tiles import TILE_TO_ASCII, TileKind

# BGR, as OpenCV expects
TILE_COLORS: Dict[TileKind, Tuple[int, int, int]] = {
    TileKind.WALL: (96, 96, 96),
    TileKind.FLOOR: (200, 200, 200),
    TileKind.WATER: (200, 110, 30),
    TileKind.GRASS: (60, 170, 60),
    TileKind.PILLAR: (50, 50, 50),
}


def render_ascii(grid: TileGrid, marks: Optional[Dict[Point, str]] = None) -> str:
    """
    Convert a grid to an ASCII string, one line per row.

    `marks` overrides the glyph at specific tiles (e.g. '@' for the spawn point).
    """
    marks = marks or {}
    lines = []
    for y in range(grid.height):
        line = ""
        for x in range(grid.width):
            mark = marks.get(Point(x, y))
            if mark is not None:
                line += mark
            else:
                line += TILE_TO_ASCII.get(grid.get(x, y), "?")
        lines.append(line)
    return "\n".join(lines)


def render_image(
    grid: TileGrid,
    tile_size: int = 8,
    show_grid: bool = False,
    marks: Optional[Dict[Point, Tuple[int, int, int]]] = None,
) -> np.ndarray:
    """
    Paint a grid as a BGR image, `tile_size` pixels per tile.

    `marks` draws a filled dot of the given colour in the middle of each
    listed tile.
    """
    palette = np.zeros((len(TileKind), 3), dtype=np.uint8)
    for tile, color in TILE_COLORS.items():
        palette[int(tile)] = color

    # One pixel per tile, then scale up without smoothing
    image = palette[grid.tiles]
    image = np.repeat(np.repeat(image, tile_size, axis=0), tile_size, axis=1)
    image = np.ascontiguousarray(image)

    height_pixels, width_pixels = image.shape[:2]
    if show_grid:
        for col in range(grid.width + 1):
            x = col * tile_size
            cv2.line(image, (x, 0), (x, height_pixels), (64, 64, 64), 1)
        for row in range(grid.height + 1):
            y = row * tile_size
            cv2.line(image, (0, y), (width_pixels, y), (64, 64, 64), 1)

    for point, color in (marks or {}).items():
        center = (point.x * tile_size + tile_size // 2, point.y * tile_size + tile_size // 2)
        cv2.circle(image, center, max(1, tile_size // 3), color, -1)

    return image
