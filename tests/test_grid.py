"""Unit tests for the grid, rect and room-set data model."""

import numpy as np
import pytest

from levelgen.geometry import Point, Rect
from levelgen.grid import GridBoundsError, TileGrid
from levelgen.rooms import RoomSet
from levelgen.tiles import TileKind


class TestRect:
    """Tests for Rect geometry."""

    def test_edges(self):
        rect = Rect(2, 3, 5, 4)
        assert rect.left == 2
        assert rect.right == 7
        assert rect.top == 3
        assert rect.bottom == 7

    def test_center_uses_integer_division(self):
        assert Rect(2, 3, 5, 4).center == Point(4, 5)
        assert Rect(0, 0, 1, 1).center == Point(0, 0)

    def test_empty(self):
        assert Rect(4, 4, 0, 3).is_empty
        assert Rect(4, 4, 3, 0).is_empty
        assert not Rect(4, 4, 1, 1).is_empty

    def test_equality_is_structural(self):
        assert Rect(1, 2, 3, 4) == Rect(1, 2, 3, 4)
        assert Rect(1, 2, 3, 4) != Rect(1, 2, 4, 3)

    def test_negative_size_is_rejected(self):
        with pytest.raises(ValueError):
            Rect(0, 0, -1, 2)

    def test_contains_is_half_open(self):
        rect = Rect(1, 1, 3, 2)
        assert rect.contains(Point(1, 1))
        assert rect.contains(Point(3, 2))
        assert not rect.contains(Point(4, 1))
        assert not rect.contains(Point(1, 3))
        assert not rect.contains(Point(0, 1))

    def test_interior_drops_the_wall_ring(self):
        assert Rect(10, 10, 12, 10).interior() == Rect(11, 11, 10, 8)
        assert Rect(0, 0, 2, 2).interior().is_empty

    def test_inflate(self):
        assert Rect(5, 5, 2, 2).inflate(1) == Rect(4, 4, 4, 4)

    def test_overlap_without_buffer(self):
        a = Rect(0, 0, 4, 4)
        assert a.overlaps(Rect(3, 3, 4, 4))
        # Touching edges is not overlapping
        assert not a.overlaps(Rect(4, 0, 4, 4))
        assert not a.overlaps(Rect(0, 4, 4, 4))

    def test_overlap_with_buffer(self):
        a = Rect(0, 0, 4, 4)
        b = Rect(6, 0, 4, 4)  # Two empty columns between them
        assert not a.overlaps(b, buffer=2)
        assert a.overlaps(b, buffer=3)
        assert b.overlaps(a, buffer=3)

    def test_cells_covers_every_tile(self):
        cells = list(Rect(1, 2, 3, 2).cells())
        assert len(cells) == 6
        assert len(set(cells)) == 6
        assert cells[0] == Point(1, 2)


class TestTileGrid:
    """Tests for TileGrid storage and bounds checking."""

    def test_starts_as_all_walls(self):
        grid = TileGrid(7, 4)
        assert grid.count(TileKind.WALL) == 28
        assert grid.shape == (4, 7)

    def test_rejects_empty_grid(self):
        with pytest.raises(ValueError):
            TileGrid(0, 5)
        with pytest.raises(ValueError):
            TileGrid(5, -1)

    def test_get_and_set(self):
        grid = TileGrid(5, 5)
        grid.set(3, 1, TileKind.WATER)
        assert grid.get(3, 1) == TileKind.WATER
        assert isinstance(grid.get(3, 1), TileKind)
        # Array is [row, column]
        assert grid.tiles[1, 3] == TileKind.WATER

    def test_point_indexing(self):
        grid = TileGrid(5, 5)
        grid[Point(2, 4)] = TileKind.GRASS
        assert grid[Point(2, 4)] == TileKind.GRASS

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (5, 0), (0, 3), (10, 10)])
    def test_out_of_bounds_access_raises(self, x, y):
        grid = TileGrid(5, 3)
        with pytest.raises(GridBoundsError):
            grid.get(x, y)
        with pytest.raises(IndexError):
            grid.set(x, y, TileKind.FLOOR)

    def test_interior(self):
        grid = TileGrid(5, 4)
        assert grid.is_interior(1, 1)
        assert grid.is_interior(3, 2)
        assert not grid.is_interior(0, 1)
        assert not grid.is_interior(4, 1)
        assert not grid.is_interior(1, 3)

    def test_border_cells_are_unique_and_complete(self):
        grid = TileGrid(6, 4)
        border = list(grid.border_cells())
        assert len(border) == len(set(border)) == 2 * 6 + 2 * 4 - 4
        assert all(not grid.is_interior(p.x, p.y) for p in border)

    def test_border_cells_of_single_row(self):
        grid = TileGrid(4, 1)
        assert len(list(grid.border_cells())) == 4

    def test_fill_rect(self):
        grid = TileGrid(10, 8)
        grid.fill_rect(Rect(2, 3, 4, 2), TileKind.FLOOR)
        assert grid.count(TileKind.FLOOR) == 8
        assert grid.get(2, 3) == TileKind.FLOOR
        assert grid.get(5, 4) == TileKind.FLOOR
        assert grid.get(6, 4) == TileKind.WALL

    def test_fill_rect_outside_grid_raises(self):
        grid = TileGrid(10, 8)
        with pytest.raises(GridBoundsError):
            grid.fill_rect(Rect(8, 0, 4, 2), TileKind.FLOOR)

    def test_copy_is_independent(self):
        grid = TileGrid(4, 4)
        clone = grid.copy()
        assert clone == grid
        clone.set(1, 1, TileKind.FLOOR)
        assert clone != grid
        assert grid.get(1, 1) == TileKind.WALL

    def test_from_array(self):
        tiles = np.array([[0, 1, 0], [2, 3, 4]])
        grid = TileGrid.from_array(tiles)
        assert (grid.width, grid.height) == (3, 2)
        assert grid.get(2, 1) == TileKind.PILLAR


class TestRoomSet:
    """Tests for the ordered room collection."""

    def test_preserves_order(self):
        rooms = RoomSet()
        assert rooms.add(Rect(1, 1, 4, 4)) == 0
        assert rooms.add(Rect(10, 1, 6, 4)) == 1
        assert len(rooms) == 2
        assert list(rooms) == [Rect(1, 1, 4, 4), Rect(10, 1, 6, 4)]
        assert rooms.centers() == [Point(3, 3), Point(13, 3)]

    def test_containing(self):
        rooms = RoomSet([Rect(1, 1, 4, 4), Rect(10, 1, 6, 4)])
        assert rooms.containing(Point(12, 2)) == 1
        assert rooms.containing(Point(7, 2)) is None

    def test_interior_containment_ignores_wall_ring(self):
        rooms = RoomSet([Rect(1, 1, 4, 4)])
        assert rooms.contains_point(Point(1, 2))
        assert not rooms.contains_point(Point(1, 2), interior=True)
        assert rooms.contains_point(Point(2, 2), interior=True)

    def test_overlaps_any(self):
        rooms = RoomSet([Rect(0, 0, 4, 4)])
        assert rooms.overlaps_any(Rect(2, 2, 4, 4))
        assert not rooms.overlaps_any(Rect(8, 0, 4, 4), buffer=4)
        assert rooms.overlaps_any(Rect(8, 0, 4, 4), buffer=5)
        assert not RoomSet().overlaps_any(Rect(0, 0, 1, 1), buffer=100)
