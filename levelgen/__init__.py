"""Procedural dungeon level generation."""

from levelgen.tiles import TileKind, WALKABLE_TILES, TRANSPARENT_TILES, CARVED_TILES
from levelgen.geometry import Point, Rect
from levelgen.grid import TileGrid, GridBoundsError
from levelgen.rooms import RoomSet
from levelgen.config import PartitionConfig, ScatterConfig, LevelConfigError
from levelgen.level import GeneratedLevel
from levelgen.corridors import CorridorRouter, corridor_path
from levelgen.partition import PartitionTree, PartitionNode
from levelgen.partition_strategy import PartitionStrategy, generate_partitioned
from levelgen.scatter import ScatterStrategy, generate_scattered
from levelgen.presets import get_preset, list_presets, register_preset, generate_preset
