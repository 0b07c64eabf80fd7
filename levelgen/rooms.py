"""Ordered collection of placed rooms."""

from typing import Iterator, List, Optional

from .geometry import Point, Rect


class RoomSet:
    """
    The rooms a generator placed, in placement order.

    Order matters: the scatter strategy chains corridors room i -> i+1,
    and collaborators conventionally spawn the player in room 0.
    """

    def __init__(self, rooms: Optional[List[Rect]] = None) -> None:
        self._rooms: List[Rect] = list(rooms) if rooms else []

    def add(self, room: Rect) -> int:
        """Appends a room and returns its index."""
        self._rooms.append(room)
        return len(self._rooms) - 1

    def __len__(self) -> int:
        return len(self._rooms)

    def __iter__(self) -> Iterator[Rect]:
        return iter(self._rooms)

    def __getitem__(self, index: int) -> Rect:
        return self._rooms[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RoomSet):
            return NotImplemented
        return self._rooms == other._rooms

    def __repr__(self) -> str:
        return f"RoomSet({self._rooms!r})"

    def centers(self) -> List[Point]:
        return [room.center for room in self._rooms]

    def containing(self, point: Point, interior: bool = False) -> Optional[int]:
        """
        Returns the index of the first room containing `point`, or None.

        With interior=True the room's wall ring does not count.
        """
        for index, room in enumerate(self._rooms):
            area = room.interior() if interior else room
            if area.contains(point):
                return index
        return None

    def contains_point(self, point: Point, interior: bool = False) -> bool:
        return self.containing(point, interior=interior) is not None

    def overlaps_any(self, candidate: Rect, buffer: int = 0) -> bool:
        """Check if `candidate` comes within `buffer` tiles of any room."""
        return any(room.overlaps(candidate, buffer) for room in self._rooms)
