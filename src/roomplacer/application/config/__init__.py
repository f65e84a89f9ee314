"""Room file schema and loading.

Public API:
    - RoomConfiguration: Root configuration model
    - WorldConfig: Room extent overrides
    - PerspectiveConfig: Perspective model overrides
    - FurnitureKindConfig: Extra or replacement catalog entry
    - FurnitureItemConfig: Furniture entity in the room
    - PositionConfig: Starting position of an entity
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_world_bounds, config_to_perspective, config_to_catalog,
      config_to_world: Convert configuration to domain objects

Example:
    >>> from pathlib import Path
    >>> from roomplacer.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("living-room.json"))
    ...     print(f"{len(config.furniture)} furniture entities")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
    Error: Room file not found: living-room.json
"""

from roomplacer.application.config.adapter import (
    config_to_catalog,
    config_to_perspective,
    config_to_world,
    config_to_world_bounds,
    kind_config_to_domain,
)
from roomplacer.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from roomplacer.application.config.schema import (
    SUPPORTED_VERSIONS,
    FurnitureItemConfig,
    FurnitureKindConfig,
    PerspectiveConfig,
    PositionConfig,
    RoomConfiguration,
    WorldConfig,
)

__all__ = [
    # Loader
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    # Schema
    "SUPPORTED_VERSIONS",
    "FurnitureItemConfig",
    "FurnitureKindConfig",
    "PerspectiveConfig",
    "PositionConfig",
    "RoomConfiguration",
    "WorldConfig",
    # Adapter
    "config_to_catalog",
    "config_to_perspective",
    "config_to_world",
    "config_to_world_bounds",
    "kind_config_to_domain",
]
