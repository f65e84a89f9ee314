"""Wall partitioning for bulk layouts.

A bulk layout splits the visible wall into X-axis partitions: one per
fixed-height wall item, sized for that item, followed by one per painting
sharing the remaining width. Items are then dropped into partitions, which
spreads wall furniture along the whole wall instead of clustering it where
a random search happens to succeed first.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from roomplacer.domain.value_objects import FurnitureConfig, Transform

from .models import Partition, PlacedPainting
from .search import PositionSearch

logger = logging.getLogger(__name__)


class WallPartitioner:
    """Creates wall partitions and places wall items inside them.

    Attributes:
        search: Position search, which also provides the collision detector,
            the random source and the Y candidates.
    """

    def __init__(self, search: PositionSearch) -> None:
        self.search = search
        self.detector = search.detector
        self.config = search.config
        self.rng = search.rng

    def create_partitions(
        self,
        fixed_items: Sequence[FurnitureConfig],
        paintings: Sequence[FurnitureConfig],
    ) -> list[Partition]:
        """Split the visible wall into partitions for one bulk layout.

        When every fixed item (at its minimum partition width) and painting
        fits on the wall, each fixed item gets a partition slightly wider
        than that minimum, laid out left to right in shuffled order and
        reserved for its kind, and the remaining width is split equally
        between the paintings.
        Otherwise every item gets an equal partition wide enough for the
        widest effective item, and partitions may run past the wall.

        Args:
            fixed_items: Catalog entries of the fixed-height wall items.
            paintings: Catalog entries of the variable-height wall items.

        Returns:
            Partitions ordered left to right.
        """
        world = self.search.world
        wall_width = world.wall_width
        minimum_widths = [self.fixed_partition_width(item) for item in fixed_items]
        fixed_total = sum(minimum_widths)
        painting_total = sum(item.bounds.width for item in paintings)

        if fixed_total + painting_total > wall_width:
            return self._create_oversized_partitions(fixed_items, paintings)

        slack = wall_width - fixed_total - painting_total
        max_extra = slack / len(fixed_items) if fixed_items else 0.0
        half_jitter = self.config.partition_jitter / 2

        order = list(zip(fixed_items, minimum_widths))
        self.rng.shuffle(order)

        partitions: list[Partition] = []
        current_x = world.visible_min_x
        for item, minimum in order:
            extra = self.config.partition_padding + self.rng.uniform(-half_jitter, half_jitter)
            extra = max(0.0, min(max_extra, extra))
            max_x = min(current_x + minimum + extra, world.visible_max_x)
            partitions.append(
                Partition(min_x=current_x, max_x=max_x, reserved_kind=item.kind)
            )
            logger.debug(
                f"Partition for {item.kind}: {current_x:.0f}-{max_x:.0f}"
            )
            current_x = max_x

        if paintings:
            painting_width = (world.visible_max_x - current_x) / len(paintings)
            for _ in paintings:
                max_x = min(current_x + painting_width, world.visible_max_x)
                partitions.append(Partition(min_x=current_x, max_x=max_x))
                logger.debug(f"Painting partition: {current_x:.0f}-{max_x:.0f}")
                current_x = max_x

        return partitions

    def fixed_partition_width(self, item: FurnitureConfig) -> float:
        """Narrowest partition that keeps a fixed item clear of its neighbours.

        Neighbouring wall items need `wall_x_buffer` between their effective
        edges, so a partition is never narrower than the effective width
        plus that buffer, nor narrower than the raw width. The wall
        tolerance is added on top so rounding never closes the buffer.
        """
        effective = self.detector.scaler.effective_size(
            item.bounds.width, self.search.wall_z(item)
        )
        clearance = self.config.wall_x_buffer + self.config.wall_tolerance
        return max(item.bounds.width, effective + clearance)

    def _create_oversized_partitions(
        self,
        fixed_items: Sequence[FurnitureConfig],
        paintings: Sequence[FurnitureConfig],
    ) -> list[Partition]:
        world = self.search.world
        scaler = self.detector.scaler
        items = [*fixed_items, *paintings]
        if not items:
            return []

        max_effective = max(
            scaler.effective_size(item.bounds.width, self.search.wall_z(item))
            for item in items
        )
        width = max(
            world.wall_width / len(items), max_effective + self.config.oversized_spacing
        )
        logger.warning(
            f"Wall items need more than {world.wall_width:.0f} units; "
            f"using {len(items)} equal partitions of {width:.0f}"
        )
        return [
            Partition(
                min_x=world.visible_min_x + index * width,
                max_x=world.visible_min_x + (index + 1) * width,
            )
            for index in range(len(items))
        ]

    def place_in_partition(
        self, config: FurnitureConfig, partition: Partition
    ) -> Transform | None:
        """Place a wall item near the center of a partition.

        The item is jittered sideways while keeping its effective edges
        clear of the partition edges, clamped to the visible wall, and
        validated against placed items at each Y candidate.

        Returns:
            The validated position, or None if no Y candidate fits.
        """
        world = self.search.world
        z = self.search.wall_z(config)
        effective_width = self.detector.scaler.effective_size(config.bounds.width, z)

        bound = min(
            self.config.max_partition_offset,
            (
                partition.width
                - effective_width
                - self.config.wall_x_buffer
                - self.config.wall_tolerance
            )
            / 2,
        )
        bound = max(0.0, bound)
        x = partition.center + self.rng.uniform(-bound, bound)
        x = max(x, world.visible_min_x + effective_width / 2)
        x = min(x, world.visible_max_x - effective_width / 2)

        for y in self.search.y_candidates(config):
            position = Transform(x, y, z)
            if self.detector.can_place_furniture(config.kind, position).success:
                return position
        return None

    def can_place_painting_above(
        self, fixed: FurnitureConfig, painting: FurnitureConfig
    ) -> bool:
        """Check if a painting fits between a fixed item's top and the ceiling."""
        item_top = (fixed.bounds.default_y or 0.0) + fixed.bounds.height
        painting_top = item_top + self.config.overlay_clearance + painting.bounds.height
        return painting_top <= self.config.ceiling_y

    def place_painting_as_overlay(
        self,
        painting: FurnitureConfig,
        partition: Partition,
        placed: Sequence[PlacedPainting],
    ) -> Transform | None:
        """Hang a painting in a partition that already holds an item.

        Y candidates too close to a painting in the same column are
        skipped; the rest are validated against placed wall items.

        Args:
            painting: Catalog entry of the painting.
            partition: Partition to share.
            placed: Paintings already hung in this bulk layout.

        Returns:
            The validated position, or None.
        """
        if not painting.constraints.variable_height:
            return None

        bound = min(
            self.config.max_overlay_offset,
            (partition.width - painting.bounds.width) / 2,
        )
        bound = max(0.0, bound)
        x = partition.center + self.rng.uniform(-bound, bound)
        z = self.search.wall_z(painting)

        for y in self.search.y_candidates(painting):
            if self._conflicts_with_paintings(x, y, placed):
                continue
            position = Transform(x, y, z)
            result = self.detector.can_place_furniture(painting.kind, position)
            if result.success:
                return position
            logger.debug(f"Overlay y={y:.0f} for {painting.kind} rejected: {result.reason}")
        return None

    def _conflicts_with_paintings(
        self, x: float, y: float, placed: Sequence[PlacedPainting]
    ) -> bool:
        for other in placed:
            if abs(other.x - x) < self.config.painting_x_proximity:
                if abs(other.y - y) < self.config.painting_min_separation:
                    return True
        return False
