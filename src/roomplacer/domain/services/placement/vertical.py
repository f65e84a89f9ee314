"""Vertical candidate generation for variable-height wall items."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from roomplacer.domain.value_objects import FurnitureBounds, FurnitureConstraints

from .config import PlacementConfig

if TYPE_CHECKING:
    from roomplacer.contracts import RandomSourceProtocol


def generate_y_positions(
    bounds: FurnitureBounds,
    constraints: FurnitureConstraints,
    rng: RandomSourceProtocol,
    config: PlacementConfig | None = None,
) -> list[float]:
    """Build the priority-ordered Y candidates for a variable-height item.

    High positions come first so paintings clear the furniture below them,
    followed by the default height and its neighbours, low positions,
    midpoints, a coarse sweep of the range and two random fill-ins. The
    result is deduplicated after rounding and capped; it is deliberately
    not sorted, and callers must try candidates in the order given.

    Args:
        bounds: Raw bounds of the item.
        constraints: Constraints carrying min_y and max_y.
        rng: Random source for the fill-in candidates.
        config: Placement configuration (limit and spacing).

    Returns:
        Rounded Y offsets in priority order.

    Example:
        >>> import random
        >>> bounds = FurnitureBounds(width=10, height=20, depth=0, default_y=40)
        >>> constraints = FurnitureConstraints(
        ...     wall_mounted=True, occupies_floor=False, variable_height=True,
        ...     min_y=0, max_y=100)
        >>> generate_y_positions(bounds, constraints, random.Random(1))[0]
        80.0
    """
    config = config or PlacementConfig()
    height = bounds.height

    min_y = constraints.min_y
    if min_y is None:
        min_y = bounds.default_y if bounds.default_y is not None else 0.0
    max_y = constraints.max_y
    if max_y is None:
        max_y = (bounds.default_y or 0.0) + 100.0
    default_y = bounds.default_y if bounds.default_y is not None else min_y

    positions: list[float] = [
        # Top edge at the ceiling of the range first
        max_y - height,
        max_y - height - 20,
        max_y - height - 50,
        default_y,
        default_y + 50,
        default_y + 100,
        # Low positions are most likely to hit furniture
        min_y + 100,
        min_y + 50,
        min_y,
    ]

    mid_y = (min_y + max_y) / 2
    positions.extend([mid_y, mid_y - 50, mid_y + 50])

    spacing = config.y_candidate_spacing
    y_range = max_y - min_y
    step = max(50.0, y_range / 4)

    y = min_y
    while y <= max_y - height:
        if not any(abs(pos - y) < spacing for pos in positions):
            positions.append(y)
        y += step

    for _ in range(2):
        random_y = min_y + rng.random() * (y_range - height)
        if not any(abs(pos - random_y) < spacing for pos in positions):
            positions.append(random_y)

    unique: list[float] = []
    seen: set[float] = set()
    for pos in positions:
        # Halves round up
        rounded = float(math.floor(pos + 0.5))
        if rounded in seen:
            continue
        seen.add(rounded)
        unique.append(rounded)
        if len(unique) >= config.y_candidate_limit:
            break
    return unique
