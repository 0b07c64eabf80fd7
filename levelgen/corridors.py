"""
Corridor carving shared by both strategies.

Corridors are L-shaped: one straight run along each axis. The partition
strategy carves one-tile-wide runs; the scatter strategy sweeps a
rectangular brush along the path to get wide halls.
"""

import logging
import random
from typing import List, Optional

from .geometry import Point
from .grid import TileGrid
from .rooms import RoomSet
from .tiles import TileKind, is_transparent, is_walkable

logger = logging.getLogger(__name__)


def corridor_path(start: Point, end: Point) -> List[Point]:
    """
    Lattice points of an L-shaped path: horizontal run to end.x, then
    vertical run to end.y. Both endpoints are included.
    """
    path = [start]
    x, y = start.x, start.y

    while x != end.x:
        x += 1 if end.x > x else -1
        path.append(Point(x, y))

    while y != end.y:
        y += 1 if end.y > y else -1
        path.append(Point(x, y))

    return path


class CorridorRouter:
    """Carves corridors into a grid, never touching its outer border."""

    def __init__(self, grid: TileGrid, rng: random.Random) -> None:
        self.grid = grid
        self.rng = rng

    def carve_horizontal(self, x_start: int, x_end: int, y: int) -> int:
        """Carves FLOOR along row `y` between two columns, inclusive. Returns tiles carved."""
        carved = 0
        for x in range(min(x_start, x_end), max(x_start, x_end) + 1):
            if not self.grid.is_interior(x, y):
                continue
            self.grid.set(x, y, TileKind.FLOOR)
            carved += 1
        return carved

    def carve_vertical(self, y_start: int, y_end: int, x: int) -> int:
        """Carves FLOOR along column `x` between two rows, inclusive. Returns tiles carved."""
        carved = 0
        for y in range(min(y_start, y_end), max(y_start, y_end) + 1):
            if not self.grid.is_interior(x, y):
                continue
            self.grid.set(x, y, TileKind.FLOOR)
            carved += 1
        return carved

    def connect(self, start: Point, end: Point, horizontal_first: bool) -> None:
        """
        Joins two points with a thin L-shaped corridor.

        horizontal_first runs along start's row then down end's column;
        otherwise it runs along start's column then across end's row.
        """
        if horizontal_first:
            self.carve_horizontal(start.x, end.x, start.y)
            self.carve_vertical(start.y, end.y, end.x)
        else:
            self.carve_vertical(start.y, end.y, start.x)
            self.carve_horizontal(start.x, end.x, end.y)

    def connect_thick(
        self,
        start: Point,
        end: Point,
        half_width_x: int,
        half_width_y: int,
        water_chance: float = 0.0,
        grass_chance: float = 0.0,
        rooms: Optional[RoomSet] = None,
    ) -> int:
        """
        Sweeps a (2*half_width_x+1) x (2*half_width_y+1) brush along the
        L-shaped path from start to end.

        Every brushed tile gets its own roll and becomes WATER, GRASS or
        FLOOR. Tiles on the grid border are left alone, and so are solid
        tiles standing inside a room's interior (pillars).

        Returns:
            Number of tile writes performed
        """
        writes = 0
        for point in corridor_path(start, end):
            for dx in range(-half_width_x, half_width_x + 1):
                for dy in range(-half_width_y, half_width_y + 1):
                    x = point.x + dx
                    y = point.y + dy
                    if not self.grid.is_interior(x, y):
                        continue
                    if self._is_protected(x, y, rooms):
                        continue

                    roll = self.rng.random()
                    if roll < water_chance:
                        tile = TileKind.WATER
                    elif roll < water_chance + grass_chance:
                        tile = TileKind.GRASS
                    else:
                        tile = TileKind.FLOOR
                    self.grid.set(x, y, tile)
                    writes += 1

        logger.debug("thick corridor %s -> %s: %d writes", start, end, writes)
        return writes

    def _is_protected(self, x: int, y: int, rooms: Optional[RoomSet]) -> bool:
        if rooms is None:
            return False
        # Caller has already bounds-checked (x, y)
        tile = int(self.grid.tiles[y, x])
        if is_walkable(tile) or is_transparent(tile):
            return False
        return rooms.contains_point(Point(x, y), interior=True)
