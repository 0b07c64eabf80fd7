"""
Generation parameters for both strategies.

Configs are validated once, up front. Only inputs no generator could ever
work with are rejected here; parameters that merely produce sparse or
empty levels (rooms too big for the grid, a depth of zero, ...) are
accepted and yield degenerate output instead.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


class LevelConfigError(ValueError):
    """Raised for generation parameters that violate a precondition."""


def _check_size(width: int, height: int) -> None:
    if width < 1 or height < 1:
        raise LevelConfigError(f"Grid must be at least 1x1, got {width}x{height}")


def _check_chance(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise LevelConfigError(f"{name} must be between 0 and 1, got {value}")


def _check_range(name: str, bounds: Tuple[int, int], minimum: int = 0) -> None:
    low, high = bounds
    if low < minimum:
        raise LevelConfigError(f"{name} lower bound must be >= {minimum}, got {low}")
    if high < low:
        raise LevelConfigError(f"{name} is inverted: {bounds}")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise LevelConfigError(f"{name} must be >= 0, got {value}")


@dataclass
class PartitionConfig:
    """Parameters for the binary space partition strategy."""

    width: int
    height: int
    min_room_size: int
    max_depth: int
    seed: Optional[int] = None
    water_chance: float = 0.05
    grass_chance: float = 0.10
    # Aspect ratio (longer / shorter side) at which the longer side is
    # always the one that gets cut
    aspect_threshold: float = 1.25

    def validate(self) -> None:
        _check_size(self.width, self.height)
        if self.min_room_size <= 0:
            raise LevelConfigError(f"min_room_size must be positive, got {self.min_room_size}")
        _check_non_negative("max_depth", self.max_depth)
        _check_chance("water_chance", self.water_chance)
        _check_chance("grass_chance", self.grass_chance)
        if self.water_chance + self.grass_chance > 1.0:
            raise LevelConfigError("water_chance + grass_chance must not exceed 1")
        if self.aspect_threshold < 1.0:
            raise LevelConfigError(f"aspect_threshold must be >= 1, got {self.aspect_threshold}")


@dataclass
class ScatterConfig:
    """
    Parameters for the scatter strategy.

    All (low, high) ranges are inclusive on both ends. The defaults give
    large halls joined by wide corridors on a 300x120 map.
    """

    width: int = 300
    height: int = 120
    room_count_range: Tuple[int, int] = (10, 19)
    seed: Optional[int] = None
    max_attempts: int = 500
    room_width_range: Tuple[int, int] = (12, 13)
    room_height_range: Tuple[int, int] = (10, 11)
    # Minimum distance between a room and the grid edge
    placement_margin: int = 3
    # Minimum empty tiles between two rooms
    room_buffer: int = 4

    corridor_half_width_x: int = 6
    corridor_half_width_y: int = 4
    corridor_water_chance: float = 0.01
    corridor_grass_chance: float = 0.02
    extra_connections_range: Tuple[int, int] = (1, 2)

    alcove_chance: float = 0.6
    # Alcoves stay at least this far from a wall's ends
    alcove_corner_margin: int = 3

    pillar_chance: float = 0.7
    # Rooms strictly larger than these get corner pillars...
    pillar_min_width: int = 15
    pillar_min_height: int = 10
    # ...and strictly larger than these also get a centre pillar
    center_pillar_min_width: int = 18
    center_pillar_min_height: int = 12

    def validate(self) -> None:
        _check_size(self.width, self.height)
        _check_range("room_count_range", self.room_count_range)
        _check_non_negative("max_attempts", self.max_attempts)
        _check_range("room_width_range", self.room_width_range, minimum=1)
        _check_range("room_height_range", self.room_height_range, minimum=1)
        if self.placement_margin < 1:
            raise LevelConfigError(
                f"placement_margin must be >= 1 to keep rooms off the border, got {self.placement_margin}"
            )
        _check_non_negative("room_buffer", self.room_buffer)
        _check_non_negative("corridor_half_width_x", self.corridor_half_width_x)
        _check_non_negative("corridor_half_width_y", self.corridor_half_width_y)
        _check_chance("corridor_water_chance", self.corridor_water_chance)
        _check_chance("corridor_grass_chance", self.corridor_grass_chance)
        if self.corridor_water_chance + self.corridor_grass_chance > 1.0:
            raise LevelConfigError(
                "corridor_water_chance + corridor_grass_chance must not exceed 1"
            )
        _check_range("extra_connections_range", self.extra_connections_range)
        _check_chance("alcove_chance", self.alcove_chance)
        _check_non_negative("alcove_corner_margin", self.alcove_corner_margin)
        _check_chance("pillar_chance", self.pillar_chance)
        if self.pillar_min_width < 4 or self.pillar_min_height < 4:
            raise LevelConfigError("pillar_min_width and pillar_min_height must be >= 4")
