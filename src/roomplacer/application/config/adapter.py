"""Adapter to convert RoomConfiguration into domain objects.

This module turns the Pydantic room file models into the frozen domain
value objects and the in-memory entity store used by the placement engine.
"""

from roomplacer.application.config.schema import (
    FurnitureKindConfig,
    RoomConfiguration,
)
from roomplacer.domain.catalog import FurnitureCatalog
from roomplacer.domain.value_objects import (
    FurnitureBounds,
    FurnitureConfig,
    FurnitureConstraints,
    PerspectiveModel,
    Transform,
    WorldBounds,
)
from roomplacer.infrastructure.world import World


def config_to_world_bounds(config: RoomConfiguration) -> WorldBounds:
    """Build WorldBounds from the room file, keeping defaults for unset fields."""
    if config.world is None:
        return WorldBounds()
    return WorldBounds(**config.world.model_dump(exclude_none=True))


def config_to_perspective(config: RoomConfiguration) -> PerspectiveModel:
    """Build the PerspectiveModel from the room file."""
    if config.perspective is None:
        return PerspectiveModel()
    return PerspectiveModel(**config.perspective.model_dump(exclude_none=True))


def kind_config_to_domain(entry: FurnitureKindConfig) -> FurnitureConfig:
    """Convert a catalog entry from the room file to a FurnitureConfig."""
    return FurnitureConfig(
        kind=entry.kind,
        bounds=FurnitureBounds(
            width=entry.width,
            height=entry.height,
            depth=entry.depth,
            default_y=entry.default_y,
        ),
        constraints=FurnitureConstraints(
            wall_mounted=entry.wall_mounted,
            occupies_floor=entry.occupies_floor,
            rotatable=entry.rotatable,
            variable_height=entry.variable_height,
            min_y=entry.min_y,
            max_y=entry.max_y,
        ),
        display_name=entry.display_name,
    )


def config_to_catalog(config: RoomConfiguration) -> FurnitureCatalog:
    """Build the catalog: the built-in inventory plus the room file's entries.

    Entries in the room file replace built-in entries of the same kind.
    """
    return FurnitureCatalog().with_overrides(
        kind_config_to_domain(entry) for entry in config.catalog
    )


def config_to_world(config: RoomConfiguration) -> World:
    """Build the entity store with every furniture entity of the room file.

    Example:
        >>> from roomplacer.application.config.schema import FurnitureItemConfig
        >>> config = RoomConfiguration(
        ...     schema_version="1.0",
        ...     furniture=[FurnitureItemConfig(id="lamp-1", kind="lamp")],
        ... )
        >>> config_to_world(config).kinds
        {'lamp-1': 'lamp'}
    """
    world = World()
    for item in config.furniture:
        transform = None
        if item.position is not None:
            transform = Transform(item.position.x, item.position.y, item.position.z)
        world.add_entity(item.id, item.kind, transform)
    return world
