"""Randomized search for a valid position of a single furniture item.

Wall items are searched along the visible wall using gap finding, random
samples and a shuffled grid, each filtered by a cheap pre-check before the
full collision test. Rugs are sampled from the rug oracle's safe region.
Other floor items are sampled uniformly over the visible floor.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from roomplacer.domain.value_objects import (
    FurnitureConfig,
    FurnitureLayer,
    Transform,
    WallRect,
    WorldBounds,
)

from .collision import CollisionDetector
from .config import PlacementConfig
from .layers import classify_layer
from .models import PlacementResult, WallGap
from .vertical import generate_y_positions

if TYPE_CHECKING:
    from roomplacer.contracts import RandomSourceProtocol, RugBoundsOracleProtocol

logger = logging.getLogger(__name__)


class PositionSearch:
    """Finds a valid position for one item against the current room.

    Attributes:
        detector: Collision detector holding the store and catalog.
        rng: Injected random source.
        rug_oracle: Oracle for rug-safe sampling and correction.
    """

    def __init__(
        self,
        detector: CollisionDetector,
        rng: RandomSourceProtocol,
        rug_oracle: RugBoundsOracleProtocol,
    ) -> None:
        self.detector = detector
        self.rng = rng
        self.rug_oracle = rug_oracle

    @property
    def world(self) -> WorldBounds:
        return self.detector.world

    @property
    def config(self) -> PlacementConfig:
        return self.detector.config

    def y_candidates(self, config: FurnitureConfig) -> list[float]:
        """Y offsets to try for an item, in priority order."""
        if config.constraints.variable_height:
            return generate_y_positions(
                config.bounds, config.constraints, self.rng, self.config
            )
        return [config.bounds.default_y or 0.0]

    def wall_z(self, config: FurnitureConfig) -> float:
        """Z of a wall item: on the wall, or half its depth out for wall+floor items."""
        if config.constraints.occupies_floor:
            return self.world.wall_z + config.bounds.depth / 2
        return self.world.wall_z

    def random_wall_x(self, width: float) -> float:
        """Uniform X keeping an item of the given width on the visible wall."""
        world = self.world
        return (
            world.visible_min_x
            + width / 2
            + self.rng.random() * (world.wall_width - width)
        )

    def find_random_valid_position(
        self, kind: str, max_attempts: int | None = None
    ) -> PlacementResult:
        """Search for a valid position of a furniture kind.

        Each attempt proposes an (x, z) candidate and tries it at every Y
        candidate in order; the first position that passes
        can_place_furniture wins.

        Args:
            kind: Furniture kind to place.
            max_attempts: Attempt budget. Variable-height kinds always use
                the larger variable-height budget.

        Returns:
            The found position, or a failure after the budget is spent.
        """
        config = self.detector.catalog.get(kind)
        if config is None:
            return PlacementResult.fail(f"Unknown furniture type: {kind}")

        if config.constraints.variable_height:
            attempts = self.config.variable_height_attempts
        elif max_attempts is not None:
            attempts = max_attempts
        else:
            attempts = self.config.max_attempts

        layer = classify_layer(kind, config)

        for attempt in range(attempts):
            # Random fill-in heights are redrawn on every attempt
            y_candidates = self.y_candidates(config)
            gap: WallGap | None = None
            if layer == FurnitureLayer.WALL:
                gap_or_x = self.find_smart_wall_position(config, attempt)
                if isinstance(gap_or_x, WallGap):
                    gap = gap_or_x
                    x, z = gap.x, gap.z
                elif gap_or_x is not None:
                    x, z = gap_or_x, self.wall_z(config)
                else:
                    x, z = self.random_wall_x(config.bounds.width), self.wall_z(config)
            elif layer == FurnitureLayer.RUG:
                x, z = self.sample_rug_position()
            else:
                x, z = self.sample_floor_position(config)

            ys = y_candidates
            if gap is not None and config.constraints.variable_height:
                ys = [gap.y] + [y for y in y_candidates if y != gap.y]

            for y in ys:
                result = self.detector.can_place_furniture(kind, Transform(x, y, z))
                if result.success:
                    logger.debug(
                        f"Found position for {kind} at ({x:.0f}, {y:.0f}, {z:.0f}) "
                        f"on attempt {attempt + 1}"
                    )
                    return result

        logger.debug(f"Exhausted {attempts} attempts for {kind}")
        return PlacementResult.fail(
            f"Could not find valid position after {attempts} attempts"
        )

    def sample_rug_position(self) -> tuple[float, float]:
        """Sample a rug center inside the safe region and correct it."""
        bounds = self.rug_oracle.get_safe_rug_bounds()
        x = self.rng.uniform(bounds.min_x, bounds.max_x)
        z = self.rng.uniform(bounds.min_z, bounds.max_z)
        return self.rug_oracle.find_valid_rug_position(x, z)

    def sample_floor_position(self, config: FurnitureConfig) -> tuple[float, float]:
        """Uniform center on the visible floor, half a footprint from the edges."""
        world = self.world
        width = config.bounds.width
        depth = config.bounds.depth
        x = world.visible_min_x + width / 2 + self.rng.random() * (
            world.visible_max_x - world.visible_min_x - width
        )
        z = world.visible_min_z + depth / 2 + self.rng.random() * (
            world.visible_max_z - world.visible_min_z - depth
        )
        return x, z

    def find_smart_wall_position(
        self, config: FurnitureConfig, attempt: int
    ) -> WallGap | float | None:
        """Propose a wall candidate for one search attempt.

        Early attempts may use gap finding, the next ones sample random X,
        and later ones walk a shuffled grid along the wall. Random and grid
        candidates are only returned when the cheap pre-check passes.

        Returns:
            A WallGap from gap finding, an X coordinate, or None if every
            strategy declined.
        """
        bounds = config.bounds
        world = self.world
        y = bounds.default_y or 0.0

        use_gap_finding = self.rng.random() < self.config.gap_probability
        if attempt < self.config.gap_attempts and use_gap_finding:
            gap = self.find_wall_gap(config)
            if gap is not None:
                return gap

        if attempt < self.config.random_wall_attempts:
            x = self.random_wall_x(bounds.width)
            if self.is_position_likely_valid(config, x, y, self.wall_z(config)):
                return x

        cell = max(bounds.width + self.config.grid_cell_padding, self.config.min_grid_cell)
        cell_count = math.floor(world.wall_width / cell)
        if cell_count <= 0:
            return None

        cells = list(range(cell_count))
        self.rng.shuffle(cells)

        low = world.visible_min_x + bounds.width / 2
        high = world.visible_max_x - bounds.width / 2
        for index in cells:
            base_x = low + index * cell
            offset = (self.rng.random() - 0.5) * cell * self.config.grid_jitter
            x = max(low, min(high, base_x + offset))
            if self.is_position_likely_valid(config, x, y, self.wall_z(config)):
                return x

        return None

    def find_wall_gap(self, config: FurnitureConfig) -> WallGap | None:
        """Find a free span on the wall wide enough for an item.

        For each Y level, placed wall items whose height band overlaps are
        sorted by X and the spans at the left edge, between neighbours and
        at the right edge are checked, in that order. Gaps between
        neighbours are collected and one is picked at random. The item is
        jittered inside the chosen span without leaving it.

        Args:
            config: Catalog entry of the item to place.

        Returns:
            The first gap found, or None if no Y level has one.
        """
        bounds = config.bounds
        world = self.world
        buffer = self.config.gap_buffer
        needed = bounds.width + buffer * 2
        z = self.wall_z(config)

        for y in self.y_candidates(config):
            blockers: list[tuple[float, float]] = []
            for _, existing, transform in self.detector.placed_wall_items():
                existing_min_y = transform.y
                existing_max_y = transform.y + existing.bounds.height
                if (
                    y + bounds.height + buffer <= existing_min_y
                    or y - buffer >= existing_max_y
                ):
                    continue
                half = existing.bounds.width / 2
                # Clip to the visible wall; items parked beside it drop out
                span_min = max(transform.x - half, world.visible_min_x)
                span_max = min(transform.x + half, world.visible_max_x)
                if span_max <= span_min:
                    continue
                blockers.append((span_min, span_max))

            blockers.sort(key=lambda span: (span[0] + span[1]) / 2)

            left_space = (
                blockers[0][0] - world.visible_min_x if blockers else world.wall_width
            )
            if left_space >= needed:
                offset = self.rng.random() * (left_space - needed)
                return WallGap(
                    x=world.visible_min_x + buffer + bounds.width / 2 + offset, z=z, y=y
                )

            gaps: list[WallGap] = []
            for (_, current_max), (next_min, _) in zip(blockers, blockers[1:]):
                gap_size = next_min - current_max
                if gap_size >= needed:
                    offset = self.rng.random() * (gap_size - needed)
                    gaps.append(
                        WallGap(x=current_max + buffer + bounds.width / 2 + offset, z=z, y=y)
                    )
            if gaps:
                return self.rng.choice(gaps)

            if blockers:
                last_max = blockers[-1][1]
                right_space = world.visible_max_x - last_max
                if right_space >= needed:
                    offset = self.rng.random() * (right_space - needed)
                    return WallGap(
                        x=last_max + buffer + bounds.width / 2 + offset, z=z, y=y
                    )

        return None

    def is_position_likely_valid(
        self, config: FurnitureConfig, x: float, y: float, z: float
    ) -> bool:
        """Cheap wall-plane pre-check using conservative widths.

        Uses the larger of raw and effective width for both items, so it
        may reject a candidate the full check would accept but never
        accepts one the full check would reject.
        """
        scaler = self.detector.scaler
        proposed = scaler.conservative_wall_rect(config, x, y, z)
        for _, existing, transform in self.detector.placed_wall_items():
            other: WallRect = scaler.conservative_wall_rect(
                existing, transform.x, transform.y, transform.z
            )
            if proposed.overlaps(other, self.config.wall_x_buffer, self.config.wall_y_buffer):
                return False
        return True
