"""
TileGrid: the 2-D tile array a generator writes into.

The tiles live in a numpy int array indexed [y, x] (row, column), which is
the layout renderers and image tools expect. The public accessors take
(x, y) and are bounds-checked.
"""

from typing import Iterator, Tuple

import numpy as np

from .geometry import Point, Rect
from .tiles import TileKind


class GridBoundsError(IndexError):
    """Raised when a coordinate falls outside the grid."""


class TileGrid:
    def __init__(self, width: int, height: int, fill: TileKind = TileKind.WALL) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Grid must be at least 1x1, got {width}x{height}")
        self.width: int = width
        self.height: int = height
        self.tiles: np.ndarray = np.full((height, width), int(fill), dtype=np.int8)

    @classmethod
    def from_array(cls, tiles: np.ndarray) -> "TileGrid":
        """Wraps a copy of an existing [row, column] tile array."""
        height, width = tiles.shape
        grid = cls(width, height)
        grid.tiles[:, :] = tiles
        return grid

    @property
    def shape(self) -> Tuple[int, int]:
        return self.tiles.shape

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_interior(self, x: int, y: int) -> bool:
        """True if (x, y) is inside the grid and not on its outer 1-tile border."""
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise GridBoundsError(
                f"({x}, {y}) is outside the {self.width}x{self.height} grid"
            )

    def get(self, x: int, y: int) -> TileKind:
        self._check(x, y)
        return TileKind(int(self.tiles[y, x]))

    def set(self, x: int, y: int, tile: TileKind) -> None:
        self._check(x, y)
        self.tiles[y, x] = int(tile)

    def __getitem__(self, point: Point) -> TileKind:
        return self.get(point.x, point.y)

    def __setitem__(self, point: Point, tile: TileKind) -> None:
        self.set(point.x, point.y, tile)

    def fill(self, tile: TileKind) -> None:
        self.tiles.fill(int(tile))

    def fill_rect(self, rect: Rect, tile: TileKind) -> None:
        """Stamps `tile` over every cell of `rect`. The rect must lie inside the grid."""
        if rect.is_empty:
            return
        self._check(rect.left, rect.top)
        self._check(rect.right - 1, rect.bottom - 1)
        self.tiles[rect.top : rect.bottom, rect.left : rect.right] = int(tile)

    def count(self, tile: TileKind) -> int:
        return int(np.count_nonzero(self.tiles == int(tile)))

    def border_cells(self) -> Iterator[Point]:
        """Yields every cell of the outer 1-tile border once."""
        for x in range(self.width):
            yield Point(x, 0)
            if self.height > 1:
                yield Point(x, self.height - 1)
        for y in range(1, self.height - 1):
            yield Point(0, y)
            if self.width > 1:
                yield Point(self.width - 1, y)

    def copy(self) -> "TileGrid":
        return TileGrid.from_array(self.tiles)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TileGrid):
            return NotImplemented
        return np.array_equal(self.tiles, other.tiles)

    def __repr__(self) -> str:
        return f"TileGrid({self.width}x{self.height})"
