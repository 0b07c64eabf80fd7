"""Tests for GeneratedLevel and spawn point selection."""

from levelgen.geometry import Point, Rect
from levelgen.grid import TileGrid
from levelgen.level import GeneratedLevel, find_walkable_tile_in_room
from levelgen.partition_strategy import generate_partitioned
from levelgen.rooms import RoomSet
from levelgen.tiles import TileKind, is_walkable


def level_with_room(room: Rect, width: int = 20, height: int = 15) -> GeneratedLevel:
    grid = TileGrid(width, height)
    grid.fill_rect(room, TileKind.FLOOR)
    return GeneratedLevel(grid=grid, rooms=RoomSet([room]))


class TestSpawnPoint:
    """Tests for picking the player's starting tile."""

    def test_center_of_first_room(self):
        level = level_with_room(Rect(2, 2, 6, 4))
        assert level.spawn_point() == Point(5, 4)

    def test_avoids_unwalkable_center(self):
        level = level_with_room(Rect(2, 2, 6, 4))
        level.grid.set(5, 4, TileKind.WATER)

        spawn = level.spawn_point()

        assert spawn != Point(5, 4)
        assert level.rooms[0].contains(spawn)
        assert is_walkable(level.grid[spawn])
        # Nearest ring around the centre
        assert max(abs(spawn.x - 5), abs(spawn.y - 4)) == 1

    def test_falls_back_to_any_walkable_tile(self):
        grid = TileGrid(10, 10)
        grid.set(6, 3, TileKind.GRASS)
        level = GeneratedLevel(grid=grid, rooms=RoomSet())

        assert level.spawn_point() == Point(6, 3)

    def test_carves_center_when_nothing_is_walkable(self):
        level = GeneratedLevel(grid=TileGrid(9, 7), rooms=RoomSet())

        spawn = level.spawn_point()

        assert spawn == Point(4, 3)
        assert level.grid[spawn] == TileKind.FLOOR

    def test_room_without_walkable_tiles(self):
        grid = TileGrid(10, 10)
        assert find_walkable_tile_in_room(grid, Rect(2, 2, 3, 3)) is None

    def test_generated_level_spawn_is_walkable(self):
        level = generate_partitioned(60, 30, 5, 3, seed=6)
        spawn = level.spawn_point()
        assert is_walkable(level.grid[spawn])
