"""
Partition Strategy
==================

Binary space partitioning, one room per leaf:

1. Start with a single region covering the whole grid
2. Recursively cut each region in two, until max_depth is reached or the
   region is too small to cut
   - Regions that are clearly longer on one axis are cut across that axis
   - Roughly square regions are cut across a random axis
3. Place one random room inside each leaf region (post-order)
4. Walk the tree from the root; at each internal node, join a room from
   the left subtree to a room from the right subtree with an L-shaped
   corridor. Since every node joins its two halves, the whole level ends
   up connected.
5. Sprinkle water and grass over the floor

All randomness comes from one random.Random stream, consumed in a fixed
order, so the same config and seed always produce the same grid.
"""

import logging
import random
from typing import List, Optional

from .config import PartitionConfig
from .corridors import CorridorRouter
from .geometry import Rect
from .grid import TileGrid
from .level import Corridor, GeneratedLevel
from .partition import ROOT, NodeHandle, PartitionTree
from .rooms import RoomSet
from .tiles import TileKind

logger = logging.getLogger(__name__)


class PartitionStrategy:
    """
    Runs one partition generation pass.

    The tree, grid and room list belong to this instance for the duration
    of `generate()`; create a new strategy for each level.
    """

    name = "partition"

    def __init__(self, config: PartitionConfig) -> None:
        config.validate()
        self.config = config
        self.rng = random.Random(config.seed)
        self.grid = TileGrid(config.width, config.height)
        self.tree = PartitionTree(Rect(0, 0, config.width, config.height))
        self.rooms = RoomSet()
        self.corridors: List[Corridor] = []
        self.router = CorridorRouter(self.grid, self.rng)

    def generate(self) -> GeneratedLevel:
        self.grid.fill(TileKind.WALL)

        self.split(ROOT, 0)
        self.create_rooms(ROOT)
        self.connect_rooms(ROOT)
        self.add_random_elements(self.config.water_chance, self.config.grass_chance)

        logger.debug(
            "partition level %dx%d: %d nodes, %d leaves, %d rooms, %d corridors",
            self.config.width,
            self.config.height,
            len(self.tree),
            len(self.tree.leaves()),
            len(self.rooms),
            len(self.corridors),
        )
        return GeneratedLevel(
            grid=self.grid,
            rooms=self.rooms,
            corridors=list(self.corridors),
            seed=self.config.seed,
            strategy=self.name,
        )

    def _choose_cut_height(self, region: Rect) -> bool:
        """
        Decide whether to cut a region with a horizontal line (dividing its
        height) or a vertical one (dividing its width).

        Draws from the RNG only when the aspect ratio doesn't decide.
        """
        threshold = self.config.aspect_threshold
        if region.width / region.height >= threshold:
            return False
        if region.height / region.width >= threshold:
            return True
        return self.rng.randrange(2) == 0

    def split(self, handle: NodeHandle, depth: int) -> None:
        if depth >= self.config.max_depth:
            return

        region = self.tree.node(handle).region
        min_size = self.config.min_room_size
        cut_height = self._choose_cut_height(region)

        axis_length = region.height if cut_height else region.width
        max_offset = axis_length - min_size
        if max_offset <= min_size:
            logger.debug("region %s too small to split at depth %d", region, depth)
            return

        offset = self.rng.randrange(min_size, max_offset)

        if cut_height:
            first = Rect(region.x, region.y, region.width, offset)
            second = Rect(region.x, region.y + offset, region.width, region.height - offset)
        else:
            first = Rect(region.x, region.y, offset, region.height)
            second = Rect(region.x + offset, region.y, region.width - offset, region.height)

        left, right = self.tree.split_node(handle, first, second)
        self.split(left, depth + 1)
        self.split(right, depth + 1)

    def create_rooms(self, handle: NodeHandle) -> None:
        children = self.tree.children(handle)
        if children is not None:
            left, right = children
            self.create_rooms(left)
            self.create_rooms(right)
            return

        node = self.tree.node(handle)
        region = node.region
        min_size = self.config.min_room_size

        if region.width <= min_size or region.height <= min_size:
            return

        # Keep rooms off the outer wall ring of the grid
        x0 = max(region.left, 1)
        y0 = max(region.top, 1)
        x1 = min(region.right, self.config.width - 1)
        y1 = min(region.bottom, self.config.height - 1)
        usable_width = x1 - x0
        usable_height = y1 - y0
        if usable_width < min_size or usable_height < min_size:
            logger.debug("leaf %s has no room for a %d-tile room", region, min_size)
            return

        room_width = self.rng.randint(min_size, usable_width)
        room_height = self.rng.randint(min_size, usable_height)
        room_x = self.rng.randint(x0, x1 - room_width)
        room_y = self.rng.randint(y0, y1 - room_height)

        room = Rect(room_x, room_y, room_width, room_height)
        node.room = room
        self.rooms.add(room)
        self.grid.fill_rect(room, TileKind.FLOOR)

    def get_room(self, handle: NodeHandle) -> Optional[Rect]:
        """
        The room that stands for a whole subtree: the node's own room, or
        else the first one found searching left before right.
        """
        node = self.tree.node(handle)
        if node.room is not None:
            return node.room

        children = self.tree.children(handle)
        if children is None:
            return None

        left, right = children
        room = self.get_room(left)
        if room is not None:
            return room
        return self.get_room(right)

    def connect_rooms(self, handle: NodeHandle) -> None:
        children = self.tree.children(handle)
        if children is None:
            return

        left, right = children
        room_a = self.get_room(left)
        room_b = self.get_room(right)

        if room_a is not None and room_b is not None:
            center_a = room_a.center
            center_b = room_b.center
            horizontal_first = self.rng.randrange(2) == 0
            self.router.connect(center_a, center_b, horizontal_first)
            self.corridors.append((center_a, center_b))
        else:
            logger.debug("node %d: a subtree has no room, skipping corridor", handle)

        self.connect_rooms(left)
        self.connect_rooms(right)

    def add_random_elements(self, water_chance: float, grass_chance: float) -> None:
        """Turn some interior floor tiles into water or grass, one roll per tile."""
        for x in range(1, self.config.width - 1):
            for y in range(1, self.config.height - 1):
                if self.grid.tiles[y, x] != TileKind.FLOOR:
                    continue

                roll = self.rng.random()
                if roll < water_chance:
                    self.grid.set(x, y, TileKind.WATER)
                elif roll < water_chance + grass_chance:
                    self.grid.set(x, y, TileKind.GRASS)


def generate_partitioned(
    width: int,
    height: int,
    min_room_size: int,
    max_depth: int,
    seed: Optional[int] = None,
    **options,
) -> GeneratedLevel:
    """
    Generate a level with the partition strategy.

    Parameters:
        width, height: Grid size in tiles
        min_room_size: Smallest room side, also the smallest region cut
        max_depth: Maximum number of times the grid is cut in two along any branch
        seed: RNG seed; None for an unpredictable level
        options: Any other PartitionConfig field (water_chance, grass_chance, ...)

    Returns:
        The finished level (grid, rooms, corridors)
    """
    config = PartitionConfig(
        width=width,
        height=height,
        min_room_size=min_room_size,
        max_depth=max_depth,
        seed=seed,
        **options,
    )
    return PartitionStrategy(config).generate()
