"""
Reachability checks over a generated grid.

These answer "is everything joined up?" for tests and debug tools; they
don't produce paths for agents to follow.
"""

from collections import deque
from typing import Callable, Deque, List, Set

from .geometry import Point
from .grid import TileGrid
from .tiles import is_carved

Passable = Callable[[int], bool]

# 4-directional neighbors: (dx, dy)
DIRECTIONS = [(0, -1), (0, 1), (-1, 0), (1, 0)]  # North, South, West, East


def reachable_from(grid: TileGrid, start: Point, passable: Passable = is_carved) -> Set[Point]:
    """
    Flood fill from `start`, returning every tile reachable through
    passable tiles. Returns an empty set if `start` itself is blocked.
    """
    if not grid.in_bounds(start.x, start.y) or not passable(grid.get(start.x, start.y)):
        return set()

    visited: Set[Point] = {start}
    queue: Deque[Point] = deque([start])

    while queue:
        current = queue.popleft()
        for dx, dy in DIRECTIONS:
            neighbor = current.offset(dx, dy)
            if neighbor in visited:
                continue
            if not grid.in_bounds(neighbor.x, neighbor.y):
                continue
            if not passable(grid.get(neighbor.x, neighbor.y)):
                continue
            visited.add(neighbor)
            queue.append(neighbor)

    return visited


def are_connected(grid: TileGrid, a: Point, b: Point, passable: Passable = is_carved) -> bool:
    return b in reachable_from(grid, a, passable)


def passable_tiles(grid: TileGrid, passable: Passable = is_carved) -> List[Point]:
    return [
        Point(x, y)
        for x in range(grid.width)
        for y in range(grid.height)
        if passable(grid.get(x, y))
    ]


def is_fully_connected(grid: TileGrid, passable: Passable = is_carved) -> bool:
    """True if all passable tiles form one region (and there is at least one)."""
    tiles = passable_tiles(grid, passable)
    if not tiles:
        return False
    return len(reachable_from(grid, tiles[0], passable)) == len(tiles)
