"""Furniture layer classification."""

from __future__ import annotations

from roomplacer.domain.value_objects import FurnitureConfig, FurnitureLayer


def classify_layer(kind: str, config: FurnitureConfig | None) -> FurnitureLayer:
    """Determine which collision layer a furniture kind belongs to.

    Wall-mounted items are WALL. Rugs, and any flat item that does not
    occupy floor space, are RUG. Everything else, including kinds missing
    from the catalog, is UPRIGHT.

    Args:
        kind: The furniture kind.
        config: The catalog entry for the kind, or None if unknown.

    Returns:
        The layer that decides which collision rule applies.
    """
    if config is None:
        return FurnitureLayer.UPRIGHT

    if config.constraints.wall_mounted:
        return FurnitureLayer.WALL

    if kind == "rug" or (
        config.bounds.depth == 0 and not config.constraints.occupies_floor
    ):
        return FurnitureLayer.RUG

    return FurnitureLayer.UPRIGHT
