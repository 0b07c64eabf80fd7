"""Named generation presets, used by the command-line tools."""

from dataclasses import replace
from typing import Dict, Optional, Union

from .config import PartitionConfig, ScatterConfig
from .level import GeneratedLevel
from .partition_strategy import PartitionStrategy
from .scatter import ScatterStrategy

LevelConfig = Union[PartitionConfig, ScatterConfig]

# Registry of available presets
_PRESETS: Dict[str, LevelConfig] = {}


def register_preset(name: str, config: LevelConfig) -> None:
    """Register a preset config under `name`."""
    _PRESETS[name] = config


def get_preset(name: str) -> LevelConfig:
    """Get a preset config by name."""
    if name not in _PRESETS:
        raise ValueError(f"Unknown preset: {name}")
    return _PRESETS[name]


def list_presets() -> list[str]:
    """List all registered preset names."""
    return sorted(_PRESETS.keys())


def generate_level(config: LevelConfig) -> GeneratedLevel:
    """Run whichever strategy matches the config type."""
    if isinstance(config, PartitionConfig):
        return PartitionStrategy(config).generate()
    return ScatterStrategy(config).generate()


def generate_preset(name: str, seed: Optional[int] = None) -> GeneratedLevel:
    """Generate a level from a registered preset, overriding its seed."""
    return generate_level(replace(get_preset(name), seed=seed))


register_preset("bsp-small", PartitionConfig(width=80, height=40, min_room_size=5, max_depth=4))
register_preset("bsp-large", PartitionConfig(width=160, height=60, min_room_size=6, max_depth=6))
register_preset("halls", ScatterConfig())
register_preset(
    "halls-pillared",
    ScatterConfig(
        room_count_range=(6, 10),
        room_width_range=(20, 24),
        room_height_range=(14, 16),
    ),
)
