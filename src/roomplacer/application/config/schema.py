"""Pydantic configuration schema models for room files.

This module defines the configuration schema for JSON-based room files: the
room extents, the perspective model, extra catalog entries and the list of
furniture entities to lay out. It uses Pydantic v2 for validation.

Value checks that the domain already performs (for example WorldBounds
extents) are delegated to the domain dataclasses so the rules live in one
place.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from roomplacer.domain.catalog import CAT_KIND, DEFAULT_FURNITURE_CONFIGS
from roomplacer.domain.value_objects import PerspectiveModel, WorldBounds

# Supported schema versions for room files
# Version 1.0: Initial schema with world, perspective, catalog and furniture
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class WorldConfig(BaseModel):
    """Overrides for the room extents.

    Every field is optional; unset fields keep the standard room values.

    Attributes:
        min_x: Left edge of the world.
        max_x: Right edge of the world.
        min_z: Back edge of the floor.
        max_z: Front edge of the floor.
        wall_z: Depth of the back wall.
        visible_min_x: Left edge of the visible layout area.
        visible_max_x: Right edge of the visible layout area.
        visible_min_z: Back edge of the visible floor.
        visible_max_z: Front edge of the visible floor.
    """

    model_config = ConfigDict(extra="forbid")

    min_x: float | None = None
    max_x: float | None = None
    min_z: float | None = None
    max_z: float | None = None
    wall_z: float | None = None
    visible_min_x: float | None = None
    visible_max_x: float | None = None
    visible_min_z: float | None = None
    visible_max_z: float | None = None

    @model_validator(mode="after")
    def validate_extents(self) -> "WorldConfig":
        """Validate the merged extents with the domain rules."""
        WorldBounds(**self.model_dump(exclude_none=True))
        return self


class PerspectiveConfig(BaseModel):
    """Overrides for the perspective model.

    Attributes:
        min_scale: Scale at the back wall.
        max_scale: Scale at the front of the room.
        world_depth: Depth over which the scale is interpolated.
    """

    model_config = ConfigDict(extra="forbid")

    min_scale: float | None = Field(default=None, gt=0)
    max_scale: float | None = Field(default=None, gt=0)
    world_depth: float | None = Field(default=None, gt=0)

    @model_validator(mode="after")
    def validate_scales(self) -> "PerspectiveConfig":
        """Validate that max_scale is not below min_scale after merging."""
        PerspectiveModel(**self.model_dump(exclude_none=True))
        return self


class FurnitureKindConfig(BaseModel):
    """A catalog entry added by the room file, or replacing a built-in one.

    Attributes:
        kind: Furniture kind identifier.
        display_name: Human-readable name.
        width: Raw width.
        height: Raw height.
        depth: Raw depth; zero for flat items.
        default_y: Default height above the floor.
        wall_mounted: Whether the item hangs on or stands against the wall.
        occupies_floor: Whether the item takes up floor space.
        rotatable: Whether the item may be rotated by the host.
        variable_height: Whether the item may hang at different heights.
        min_y: Lowest allowed Y for variable-height items.
        max_y: Highest allowed top edge for variable-height items.
    """

    model_config = ConfigDict(extra="forbid")

    kind: str = Field(min_length=1)
    display_name: str = ""
    width: float = Field(ge=0)
    height: float = Field(ge=0)
    depth: float = Field(default=0.0, ge=0)
    default_y: float | None = None
    wall_mounted: bool = False
    occupies_floor: bool = True
    rotatable: bool = False
    variable_height: bool = False
    min_y: float | None = None
    max_y: float | None = None

    @field_validator("kind")
    @classmethod
    def validate_not_cat(cls, v: str) -> str:
        """The cat kind is reserved and never treated as furniture."""
        if v == CAT_KIND:
            raise ValueError(f"'{CAT_KIND}' is reserved and cannot be a furniture kind")
        return v

    @model_validator(mode="after")
    def validate_height_range(self) -> "FurnitureKindConfig":
        """Validate that max_y >= min_y when both are set."""
        if self.min_y is not None and self.max_y is not None and self.max_y < self.min_y:
            raise ValueError(
                f"max_y ({self.max_y}) must be greater than or equal to min_y ({self.min_y})"
            )
        return self


class PositionConfig(BaseModel):
    """Starting position of a furniture entity."""

    model_config = ConfigDict(extra="forbid")

    x: float
    y: float = 0.0
    z: float


class FurnitureItemConfig(BaseModel):
    """A furniture entity in the room.

    Attributes:
        id: Unique entity id.
        kind: Furniture kind, or ``"cat"``.
        position: Optional starting position; entities without one are
            unplaced until a layout runs.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    kind: str = Field(min_length=1)
    position: PositionConfig | None = None


class RoomConfiguration(BaseModel):
    """Root configuration model for room files.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        world: Optional room extent overrides
        perspective: Optional perspective overrides
        catalog: Extra or replacement catalog entries
        furniture: Entities in the room
        seed: Optional seed for reproducible layouts

    Example:
        >>> config = RoomConfiguration(
        ...     schema_version="1.0",
        ...     furniture=[FurnitureItemConfig(id="couch-1", kind="couch")],
        ... )
        >>> config.furniture[0].kind
        'couch'
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    world: WorldConfig | None = Field(default=None, description="Room extents (optional)")
    perspective: PerspectiveConfig | None = Field(
        default=None, description="Perspective model (optional)"
    )
    catalog: list[FurnitureKindConfig] = Field(default_factory=list)
    furniture: list[FurnitureItemConfig] = Field(default_factory=list)
    seed: int | None = None

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted
        for forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @model_validator(mode="after")
    def validate_furniture(self) -> "RoomConfiguration":
        """Validate entity ids are unique and every kind is known."""
        seen: set[str] = set()
        for item in self.furniture:
            if item.id in seen:
                raise ValueError(f"Duplicate furniture id '{item.id}'")
            seen.add(item.id)

        known = set(DEFAULT_FURNITURE_CONFIGS) | {entry.kind for entry in self.catalog}
        known.add(CAT_KIND)
        for item in self.furniture:
            if item.kind not in known:
                raise ValueError(
                    f"Unknown furniture kind '{item.kind}' for '{item.id}'. "
                    f"Add it to the catalog section or use one of: {sorted(known)}"
                )
        return self
