import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .geometry import Point, Rect
from .grid import TileGrid
from .rooms import RoomSet
from .tiles import TileKind, is_walkable

logger = logging.getLogger(__name__)

Corridor = Tuple[Point, Point]


@dataclass
class GeneratedLevel:
    """
    Everything a generation pass hands to the renderer / game loop.

    corridors lists the (start, end) pairs that were actually joined,
    in the order they were carved.
    """

    grid: TileGrid
    rooms: RoomSet
    corridors: List[Corridor] = field(default_factory=list)
    seed: Optional[int] = None
    strategy: str = ""

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def spawn_point(self) -> Point:
        """
        Pick a walkable starting tile for the player.

        Prefers the first room, near its centre. Falls back to the first
        walkable tile anywhere, and as a last resort carves a floor tile
        at the centre of the grid.
        """
        if len(self.rooms) > 0:
            tile = find_walkable_tile_in_room(self.grid, self.rooms[0])
            if tile is not None:
                return tile

        for x in range(1, self.grid.width - 1):
            for y in range(1, self.grid.height - 1):
                if is_walkable(self.grid.get(x, y)):
                    return Point(x, y)

        center = Point(self.grid.width // 2, self.grid.height // 2)
        logger.warning("No walkable tile in level, carving spawn point at %s", center)
        self.grid.set(center.x, center.y, TileKind.FLOOR)
        return center


def find_walkable_tile_in_room(grid: TileGrid, room: Rect) -> Optional[Point]:
    """
    Find a walkable tile within a room, preferring tiles near the center.

    Searches square rings of growing radius around the room's centre.

    Returns:
        Position of a walkable tile within the room, or None if it has none
    """
    center = room.center
    if room.contains(center) and is_walkable(grid.get(center.x, center.y)):
        return center

    for offset in range(1, max(room.width, room.height)):
        for dx in range(-offset, offset + 1):
            for dy in range(-offset, offset + 1):
                if abs(dx) != offset and abs(dy) != offset:
                    continue  # Only check the perimeter of current offset
                point = Point(center.x + dx, center.y + dy)
                if room.contains(point) and is_walkable(grid.get(point.x, point.y)):
                    return point

    return None
