"""
Scatter Strategy
================

Big halls dropped at random, then stitched together with wide corridors.

1. Pick a target room count
2. Keep sampling a room size and position until the target is reached or
   we run out of attempts. A sample is rejected if it comes within
   `room_buffer` tiles of a room we already kept. Each kept room gets its
   inside carved (its outer ring stays wall) and, if it's large, pillars.
3. Join room i to room i+1, close the loop from the last room back to the
   first, then add a few random extra links for alternate routes
4. Knock single-tile alcoves into some room walls
"""

import logging
import random
from typing import List, Optional, Tuple

from .config import ScatterConfig
from .corridors import CorridorRouter
from .geometry import Point, Rect
from .grid import TileGrid
from .level import Corridor, GeneratedLevel
from .rooms import RoomSet
from .tiles import TileKind

logger = logging.getLogger(__name__)

# Wall sides, in the order they are drawn
NORTH, EAST, SOUTH, WEST = range(4)


class ScatterStrategy:
    name = "scatter"

    def __init__(self, config: ScatterConfig) -> None:
        config.validate()
        self.config = config
        self.rng = random.Random(config.seed)
        self.grid = TileGrid(config.width, config.height)
        self.rooms = RoomSet()
        self.corridors: List[Corridor] = []
        self.router = CorridorRouter(self.grid, self.rng)

    def generate(self) -> GeneratedLevel:
        self.grid.fill(TileKind.WALL)

        target = self.rng.randint(*self.config.room_count_range)
        self.place_rooms(target, self.config.max_attempts)
        self.connect_all()
        self.decorate()

        logger.debug(
            "scatter level %dx%d: %d/%d rooms, %d corridors",
            self.config.width,
            self.config.height,
            len(self.rooms),
            target,
            len(self.corridors),
        )
        return GeneratedLevel(
            grid=self.grid,
            rooms=self.rooms,
            corridors=list(self.corridors),
            seed=self.config.seed,
            strategy=self.name,
        )

    def place_rooms(self, target_count: int, max_attempts: int) -> int:
        """
        Rejection-sample rooms until `target_count` are placed or
        `max_attempts` samples have been drawn.

        Returns:
            Number of attempts used
        """
        config = self.config
        margin = config.placement_margin
        attempts = 0

        while len(self.rooms) < target_count and attempts < max_attempts:
            attempts += 1

            room_width = self.rng.randint(*config.room_width_range)
            room_height = self.rng.randint(*config.room_height_range)

            x_limit = config.width - room_width - margin
            y_limit = config.height - room_height - margin
            if x_limit <= margin or y_limit <= margin:
                # Room can't fit with its margins on this grid
                continue

            room = Rect(
                self.rng.randrange(margin, x_limit),
                self.rng.randrange(margin, y_limit),
                room_width,
                room_height,
            )

            if self.rooms.overlaps_any(room, config.room_buffer):
                continue

            self.rooms.add(room)
            self.create_room(room)

        if len(self.rooms) < target_count:
            logger.debug(
                "placed %d of %d rooms after %d attempts",
                len(self.rooms),
                target_count,
                attempts,
            )
        return attempts

    def create_room(self, room: Rect) -> None:
        """Carve the inside of a room, leaving its outer ring as wall."""
        self.grid.fill_rect(room.interior(), TileKind.FLOOR)

        config = self.config
        if room.width > config.pillar_min_width and room.height > config.pillar_min_height:
            self.add_pillars(room)

    def add_pillars(self, room: Rect) -> None:
        positions = [
            Point(room.x + 3, room.y + 3),
            Point(room.right - 4, room.y + 3),
            Point(room.x + 3, room.bottom - 4),
            Point(room.right - 4, room.bottom - 4),
        ]
        for position in positions:
            if self.rng.random() < self.config.pillar_chance:
                self.grid[position] = TileKind.PILLAR

        if (
            room.width > self.config.center_pillar_min_width
            and room.height > self.config.center_pillar_min_height
        ):
            self.grid[room.center] = TileKind.PILLAR

    def connect(self, first: int, second: int) -> None:
        start = self.rooms[first].center
        end = self.rooms[second].center
        self.router.connect_thick(
            start,
            end,
            self.config.corridor_half_width_x,
            self.config.corridor_half_width_y,
            water_chance=self.config.corridor_water_chance,
            grass_chance=self.config.corridor_grass_chance,
            rooms=self.rooms,
        )
        self.corridors.append((start, end))

    def connect_all(self) -> None:
        room_count = len(self.rooms)
        if room_count < 2:
            return

        for index in range(room_count - 1):
            self.connect(index, index + 1)

        # Close the loop so every room has two ways in
        if room_count > 2:
            self.connect(room_count - 1, 0)

        extra = self.rng.randint(*self.config.extra_connections_range)
        for _ in range(extra):
            first = self.rng.randrange(room_count)
            second = self.rng.randrange(room_count)
            if first != second:
                self.connect(first, second)

    def decorate(self) -> None:
        for room in self.rooms:
            if self.rng.random() < self.config.alcove_chance:
                self.add_alcove(room)

    def add_alcove(self, room: Rect) -> Optional[Point]:
        """
        Open one tile of a room's wall ring on a random side.

        Returns:
            The opened tile, or None if the chosen wall is too short
        """
        margin = self.config.alcove_corner_margin
        side = self.rng.randrange(4)

        if side in (NORTH, SOUTH):
            span: Tuple[int, int] = (room.x + margin, room.right - margin)
        else:
            span = (room.y + margin, room.bottom - margin)

        if span[1] <= span[0]:
            return None
        offset = self.rng.randrange(*span)

        if side == NORTH:
            alcove = Point(offset, room.y)
        elif side == EAST:
            alcove = Point(room.right - 1, offset)
        elif side == SOUTH:
            alcove = Point(offset, room.bottom - 1)
        else:
            alcove = Point(room.x, offset)

        if not self.grid.is_interior(alcove.x, alcove.y):
            return None
        self.grid[alcove] = TileKind.FLOOR
        return alcove


def generate_scattered(
    width: int = 300,
    height: int = 120,
    room_count_range: Tuple[int, int] = (10, 19),
    seed: Optional[int] = None,
    **options,
) -> GeneratedLevel:
    """
    Generate a level with the scatter strategy.

    Parameters:
        width, height: Grid size in tiles
        room_count_range: Inclusive (low, high) range the target room count is drawn from
        seed: RNG seed; None for an unpredictable level
        options: Any other ScatterConfig field (room_buffer, alcove_chance, ...)
    """
    config = ScatterConfig(
        width=width,
        height=height,
        room_count_range=room_count_range,
        seed=seed,
        **options,
    )
    return ScatterStrategy(config).generate()
