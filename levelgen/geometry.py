"""
Integer grid geometry shared by both generation strategies.

Coordinates are (x, y) with x growing east and y growing south. Rect edges
follow the half-open convention: a Rect covers x in [left, right) and
y in [top, bottom).
"""

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Point:
    """A tile coordinate."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle of tiles."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Rect size must be non-negative, got {self.width}x{self.height}")

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.x + self.width // 2, self.y + self.height // 2)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    @property
    def area(self) -> int:
        return self.width * self.height

    def contains(self, point: Point) -> bool:
        return self.left <= point.x < self.right and self.top <= point.y < self.bottom

    def interior(self) -> "Rect":
        """Returns this rect shrunk by one tile on every side (its inside, minus the wall ring)."""
        return Rect(
            self.x + 1,
            self.y + 1,
            max(0, self.width - 2),
            max(0, self.height - 2),
        )

    def inflate(self, amount: int) -> "Rect":
        """Returns this rect grown by `amount` tiles on every side."""
        return Rect(
            self.x - amount,
            self.y - amount,
            max(0, self.width + 2 * amount),
            max(0, self.height + 2 * amount),
        )

    def overlaps(self, other: "Rect", buffer: int = 0) -> bool:
        """
        Check whether two rects come closer than `buffer` tiles to each other.

        With buffer=0 this is a plain intersection test; rects that merely
        share an edge do not overlap.
        """
        return not (
            self.right + buffer <= other.left
            or other.right + buffer <= self.left
            or self.bottom + buffer <= other.top
            or other.bottom + buffer <= self.top
        )

    def cells(self) -> Iterator[Point]:
        """Yields every tile of the rect, column by column."""
        for x in range(self.left, self.right):
            for y in range(self.top, self.bottom):
                yield Point(x, y)
