from enum import IntEnum
from typing import Dict, Set


class TileKind(IntEnum):
    """
    Terrain kinds stored in a TileGrid.

    Values are small ints so a grid can live in a numpy int array.
    WALL is zero so a freshly zeroed array is already all walls.
    """

    WALL = 0
    FLOOR = 1
    WATER = 2
    GRASS = 3
    PILLAR = 4


# Tiles an agent can stand on
WALKABLE_TILES: Set[TileKind] = {
    TileKind.FLOOR,
    TileKind.GRASS,
}

# Tiles that do not block line of sight
TRANSPARENT_TILES: Set[TileKind] = {
    TileKind.FLOOR,
    TileKind.GRASS,
    TileKind.WATER,
}

# Anything a generator has dug out of the rock. Water counts: it sits on
# carved floor, it just can't be walked on.
CARVED_TILES: Set[TileKind] = {
    TileKind.FLOOR,
    TileKind.GRASS,
    TileKind.WATER,
}

TILE_TO_ASCII: Dict[TileKind, str] = {
    TileKind.WALL: "#",
    TileKind.FLOOR: ".",
    TileKind.WATER: "~",
    TileKind.GRASS: '"',
    TileKind.PILLAR: "O",
}

ASCII_TO_TILE: Dict[str, TileKind] = {char: tile for tile, char in TILE_TO_ASCII.items()}


def is_walkable(tile: int) -> bool:
    return tile in WALKABLE_TILES


def is_transparent(tile: int) -> bool:
    return tile in TRANSPARENT_TILES


def is_carved(tile: int) -> bool:
    return tile in CARVED_TILES
