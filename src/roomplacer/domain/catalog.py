"""Furniture catalog with the default room inventory."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .value_objects import FurnitureBounds, FurnitureConfig, FurnitureConstraints

# Standard z-depth for free-standing floor furniture
STANDARD_FLOOR_FURNITURE_DEPTH = 80.0

# Kind used by the cat; never treated as furniture
CAT_KIND = "cat"


def _wall(kind: str, name: str, width: float, height: float, default_y: float) -> FurnitureConfig:
    return FurnitureConfig(
        kind=kind,
        bounds=FurnitureBounds(width=width, height=height, depth=0.0, default_y=default_y),
        constraints=FurnitureConstraints(wall_mounted=True, occupies_floor=False),
        display_name=name,
    )


def _painting(
    kind: str,
    name: str,
    width: float,
    height: float,
    default_y: float,
    max_y: float,
) -> FurnitureConfig:
    return FurnitureConfig(
        kind=kind,
        bounds=FurnitureBounds(width=width, height=height, depth=0.0, default_y=default_y),
        constraints=FurnitureConstraints(
            wall_mounted=True,
            occupies_floor=False,
            variable_height=True,
            min_y=50.0,
            max_y=max_y,
        ),
        display_name=name,
    )


def _floor(kind: str, name: str, width: float, height: float) -> FurnitureConfig:
    return FurnitureConfig(
        kind=kind,
        bounds=FurnitureBounds(
            width=width, height=height, depth=STANDARD_FLOOR_FURNITURE_DEPTH
        ),
        constraints=FurnitureConstraints(
            wall_mounted=False, occupies_floor=True, rotatable=True
        ),
        display_name=name,
    )


DEFAULT_FURNITURE_CONFIGS: dict[str, FurnitureConfig] = {
    config.kind: config
    for config in (
        # Wall-mounted furniture (no floor space)
        _wall("door", "Door", 240.0, 400.0, 0.0),
        _wall("window", "Window", 520.0, 450.0, 150.0),
        _painting("painting-cat-large", "Cat Painting (Large)", 210.0, 150.0, 250.0, 650.0),
        _painting("painting-cat-small", "Cat Painting (Small)", 150.0, 210.0, 220.0, 620.0),
        _painting(
            "painting-abstract-large", "Abstract Painting (Large)", 210.0, 150.0, 250.0, 650.0
        ),
        _painting(
            "painting-abstract-small", "Abstract Painting (Small)", 150.0, 210.0, 220.0, 620.0
        ),
        # Wall-adjacent furniture: against the wall but still on the floor
        FurnitureConfig(
            kind="counter",
            bounds=FurnitureBounds(width=350.0, height=180.0, depth=0.0),
            constraints=FurnitureConstraints(wall_mounted=True, occupies_floor=True),
            display_name="Kitchen Counter",
        ),
        FurnitureConfig(
            kind="bookshelf",
            bounds=FurnitureBounds(width=280.0, height=600.0, depth=0.0),
            constraints=FurnitureConstraints(wall_mounted=True, occupies_floor=True),
            display_name="Bookshelf",
        ),
        # Free-standing floor furniture
        _floor("couch", "Couch", 459.0, 204.0),
        _floor("furniture", "Scratching Post", 80.0, 130.0),
        _floor("lamp", "Lamp", 32.0, 40.0),
        # Floor decorations
        FurnitureConfig(
            kind="rug",
            bounds=FurnitureBounds(width=280.0, height=160.0, depth=0.0),
            constraints=FurnitureConstraints(
                wall_mounted=False, occupies_floor=False, rotatable=True
            ),
            display_name="Rug",
        ),
    )
}


class FurnitureCatalog:
    """Read-only lookup from furniture kind to its configuration.

    Example:
        >>> catalog = FurnitureCatalog()
        >>> catalog.get("door").bounds.width
        240.0
        >>> catalog.get("spaceship") is None
        True
    """

    def __init__(self, configs: Mapping[str, FurnitureConfig] | None = None) -> None:
        self._configs: dict[str, FurnitureConfig] = dict(
            DEFAULT_FURNITURE_CONFIGS if configs is None else configs
        )

    def get(self, kind: str) -> FurnitureConfig | None:
        """Return the configuration for a kind, or None if unknown."""
        return self._configs.get(kind)

    def kinds(self) -> list[str]:
        """Return all known kinds in catalog order."""
        return list(self._configs)

    def __contains__(self, kind: object) -> bool:
        return kind in self._configs

    def with_overrides(self, configs: Iterable[FurnitureConfig]) -> FurnitureCatalog:
        """Return a new catalog with the given entries added or replaced."""
        merged = dict(self._configs)
        for config in configs:
            merged[config.kind] = config
        return FurnitureCatalog(merged)
