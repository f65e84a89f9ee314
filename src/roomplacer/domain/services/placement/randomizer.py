"""Bulk randomization of every furniture item in the room."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from roomplacer.domain.catalog import CAT_KIND
from roomplacer.domain.value_objects import (
    PARKED_SENTINEL,
    FurnitureConfig,
    FurnitureLayer,
    Transform,
)

from .layers import classify_layer
from .models import (
    Partition,
    PlacedPainting,
    PlacementFailure,
    PlacementResult,
    RandomizeReport,
)
from .partitioner import WallPartitioner
from .search import PositionSearch

if TYPE_CHECKING:
    from roomplacer.contracts import EntityStoreProtocol

logger = logging.getLogger(__name__)


class BulkLayoutService:
    """Lays out all furniture in the room in one pass.

    Fixed-height wall items go into wall partitions first, paintings are
    hung next, and floor items are placed last. Each placement is written
    to the store as soon as it is made so later items avoid it. Items that
    cannot be placed stay at the parking sentinel until every phase has
    run, then move to parking spots off the visible field and are reported.

    Attributes:
        search: Single-item position search.
        partitioner: Wall partitioner for the wall phase.
    """

    def __init__(self, search: PositionSearch, partitioner: WallPartitioner | None = None) -> None:
        self.search = search
        self.partitioner = partitioner or WallPartitioner(search)
        self.detector = search.detector
        self.config = search.config
        self.rng = search.rng
        self._parking_counter = 0

    @property
    def store(self) -> EntityStoreProtocol:
        return self.detector.store

    def randomize_all_furniture(self) -> RandomizeReport:
        """Place every non-cat entity at a fresh random position.

        Returns:
            Count of placed items and the parked failures. An empty room
            returns an empty report and leaves the store untouched.
        """
        report = RandomizeReport()
        self._parking_counter = 0

        entities = [
            (entity_id, kind)
            for entity_id, kind in list(self.store.kinds.items())
            if kind != CAT_KIND
        ]
        if not entities:
            return report

        for entity_id, _ in entities:
            self.store.transforms[entity_id] = PARKED_SENTINEL

        fixed: list[tuple[str, FurnitureConfig]] = []
        paintings: list[tuple[str, FurnitureConfig]] = []
        floor: list[tuple[str, str]] = []
        for entity_id, kind in entities:
            config = self.detector.catalog.get(kind)
            if config is not None and config.constraints.wall_mounted:
                if config.constraints.variable_height:
                    paintings.append((entity_id, config))
                else:
                    fixed.append((entity_id, config))
            else:
                floor.append((entity_id, kind))

        logger.debug(
            f"Randomizing {len(fixed)} wall items, {len(paintings)} paintings "
            f"and {len(floor)} floor items"
        )

        partitions = self.partitioner.create_partitions(
            [config for _, config in fixed], [config for _, config in paintings]
        )
        self._place_fixed_items(fixed, partitions, report)
        self._place_paintings(paintings, partitions, report)
        self._place_floor_items(floor, report)
        self._park_failures(report)

        logger.info(
            f"Randomized layout: {report.success_count} placed, {len(report.failed)} parked"
        )
        return report

    def _place_fixed_items(
        self,
        items: list[tuple[str, FurnitureConfig]],
        partitions: list[Partition],
        report: RandomizeReport,
    ) -> None:
        order = list(items)
        self.rng.shuffle(order)
        available = list(partitions)
        self.rng.shuffle(available)

        for entity_id, config in order:
            partition = self._first_free_partition(available, config.kind)
            if partition is None:
                self._fail(entity_id, config.kind, "No wall partition available", report)
                continue

            position = self.partitioner.place_in_partition(config, partition)
            if position is None:
                self._fail(
                    entity_id, config.kind, "Did not fit in assigned wall partition", report
                )
                continue

            partition.assign(config.kind)
            self._place(entity_id, position, report)

    @staticmethod
    def _first_free_partition(partitions: list[Partition], kind: str) -> Partition | None:
        free = [partition for partition in partitions if not partition.occupied]
        for partition in free:
            if partition.reserved_kind == kind:
                return partition
        return free[0] if free else None

    def _place_paintings(
        self,
        paintings: list[tuple[str, FurnitureConfig]],
        partitions: list[Partition],
        report: RandomizeReport,
    ) -> None:
        order = list(paintings)
        self.rng.shuffle(order)
        placed: list[PlacedPainting] = []

        for entity_id, config in order:
            position = (
                self._overlay_above_fixed_item(config, partitions, placed)
                or self._own_partition(config, partitions, placed)
                or self._share_painting_partition(config, partitions, placed)
            )
            if position is None:
                self._fail(
                    entity_id, config.kind, "No suitable partition found for painting", report
                )
                continue

            placed.append(PlacedPainting(entity_id, config.kind, position.x, position.y))
            self._place(entity_id, position, report)

    def _is_painting_kind(self, kind: str | None) -> bool:
        if kind is None:
            return False
        config = self.detector.catalog.get(kind)
        return config is not None and config.constraints.variable_height

    def _overlay_above_fixed_item(
        self,
        painting: FurnitureConfig,
        partitions: list[Partition],
        placed: list[PlacedPainting],
    ) -> Transform | None:
        candidates = []
        for partition in partitions:
            if not partition.occupied or self._is_painting_kind(partition.assigned_kind):
                continue
            fixed = self.detector.catalog.get(partition.assigned_kind)
            if fixed is not None and self.partitioner.can_place_painting_above(fixed, painting):
                candidates.append(partition)
        if not candidates:
            return None

        partition = self.rng.choice(candidates)
        position = self.partitioner.place_painting_as_overlay(painting, partition, placed)
        if position is not None:
            logger.debug(
                f"{painting.kind} hung above {partition.assigned_kind} at x={position.x:.0f}"
            )
        return position

    def _own_partition(
        self,
        painting: FurnitureConfig,
        partitions: list[Partition],
        placed: list[PlacedPainting],
    ) -> Transform | None:
        proximity = self.config.free_partition_proximity
        candidates = [
            partition
            for partition in partitions
            if not partition.occupied
            and not any(abs(other.x - partition.center) < proximity for other in placed)
        ]
        if not candidates:
            return None

        partition = self.rng.choice(candidates)
        position = self.partitioner.place_in_partition(painting, partition)
        if position is not None:
            partition.assign(painting.kind)
            logger.debug(f"{painting.kind} takes its own partition at x={position.x:.0f}")
        return position

    def _share_painting_partition(
        self,
        painting: FurnitureConfig,
        partitions: list[Partition],
        placed: list[PlacedPainting],
    ) -> Transform | None:
        for partition in partitions:
            if not partition.occupied or not self._is_painting_kind(partition.assigned_kind):
                continue
            position = self.partitioner.place_painting_as_overlay(painting, partition, placed)
            if position is not None:
                logger.debug(
                    f"{painting.kind} shares a partition with {partition.assigned_kind}"
                )
                return position
        return None

    def _place_floor_items(
        self, items: list[tuple[str, str]], report: RandomizeReport
    ) -> None:
        for entity_id, kind in items:
            result = self.find_smart_floor_position(kind)
            if not result.success:
                result = self.search.find_random_valid_position(kind)
            if result.success and result.position is not None:
                self._place(entity_id, result.position, report)
            else:
                self._fail(entity_id, kind, result.reason or "Placement failed", report)

    def find_smart_floor_position(self, kind: str) -> PlacementResult:
        """Spread a floor item over the visible floor.

        Tries a shuffled lattice over the visible floor first, then random
        samples that prefer spots away from existing floor furniture. Rug
        candidates are corrected through the rug oracle before testing.

        Args:
            kind: Furniture kind to place.

        Returns:
            The found position, or a failure once the attempt budget is
            spent.
        """
        config = self.detector.catalog.get(kind)
        if config is None:
            return PlacementResult.fail(f"Unknown furniture type: {kind}")

        world = self.search.world
        is_rug = classify_layer(kind, config) == FurnitureLayer.RUG
        y = config.bounds.default_y or 0.0
        budget = self.config.floor_attempts // 2

        steps = self.config.floor_grid_steps
        x_step = (world.visible_max_x - world.visible_min_x) / steps
        z_step = (world.visible_max_z - world.visible_min_z) / steps
        lattice = [
            (world.visible_min_x + i * x_step, world.visible_min_z + j * z_step)
            for i in range(steps + 1)
            for j in range(steps + 1)
        ]
        self.rng.shuffle(lattice)

        for x, z in lattice[:budget]:
            result = self._try_floor_candidate(kind, x, y, z, is_rug)
            if result.success:
                return result

        occupied = self.detector.get_occupied_spaces()
        centers = [(rect.center_x, rect.center_z) for rect in occupied]

        def nearest(x: float, z: float) -> float:
            return min(
                (math.hypot(x - cx, z - cz) for cx, cz in centers), default=math.inf
            )

        for _ in range(budget):
            best_x, best_z = self._random_floor_point()
            best_distance = nearest(best_x, best_z)
            if centers and best_distance < self.config.density_threshold:
                for _ in range(self.config.density_retries):
                    x, z = self._random_floor_point()
                    distance = nearest(x, z)
                    if distance > best_distance:
                        best_x, best_z, best_distance = x, z, distance

            result = self._try_floor_candidate(kind, best_x, y, best_z, is_rug)
            if result.success:
                return result

        return PlacementResult.fail(
            "Could not find valid floor position after smart placement attempts"
        )

    def _random_floor_point(self) -> tuple[float, float]:
        world = self.search.world
        return (
            self.rng.uniform(world.visible_min_x, world.visible_max_x),
            self.rng.uniform(world.visible_min_z, world.visible_max_z),
        )

    def _try_floor_candidate(
        self, kind: str, x: float, y: float, z: float, is_rug: bool
    ) -> PlacementResult:
        if is_rug:
            x, z = self.search.rug_oracle.find_valid_rug_position(x, z)
        return self.detector.can_place_furniture(kind, Transform(x, y, z))

    def get_parking_position(self, kind: str) -> Transform:
        """Next parking spot off the visible field for a failed item.

        Wall items alternate between the left and right of the visible
        wall, stacking upward; floor items are lined up in rows in front
        of the visible floor.
        """
        world = self.search.world
        config = self.detector.catalog.get(kind)
        counter = self._parking_counter
        self._parking_counter += 1

        if config is not None and config.constraints.wall_mounted:
            distance = max(
                self.config.parking_wall_distance, config.bounds.width / 2 + 100
            )
            if counter % 2 == 0:
                x = world.visible_min_x - distance
            else:
                x = world.visible_max_x + distance
            y = (config.bounds.default_y or 0.0) + (counter // 2) * self.config.parking_row_height
            return Transform(x, y, world.wall_z)

        spacing = self.config.parking_spacing
        x = world.visible_min_x + (counter % 4) * spacing
        z = world.visible_max_z + 50 + (counter // 4) * spacing
        return Transform(x, 0.0, z)

    def _place(self, entity_id: str, position: Transform, report: RandomizeReport) -> None:
        self.store.transforms[entity_id] = position
        report.success_count += 1

    def _fail(
        self, entity_id: str, kind: str, reason: str, report: RandomizeReport
    ) -> None:
        # Stays at PARKED_SENTINEL, which collision checks skip
        report.failed.append(PlacementFailure(entity_id=entity_id, kind=kind, reason=reason))
        logger.debug(f"Failed to place {entity_id} ({kind}): {reason}")

    def _park_failures(self, report: RandomizeReport) -> None:
        for failure in report.failed:
            parking = self.get_parking_position(failure.kind)
            self.store.transforms[failure.entity_id] = parking
            logger.debug(
                f"Parked {failure.entity_id} ({failure.kind}) at "
                f"({parking.x:.0f}, {parking.y:.0f}, {parking.z:.0f})"
            )
