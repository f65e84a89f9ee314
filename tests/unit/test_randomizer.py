"""Unit tests for bulk layout randomization and parking."""

import random

import pytest

from roomplacer.domain.catalog import FurnitureCatalog
from roomplacer.domain.services import FurniturePlacementService
from roomplacer.domain.value_objects import (
    PARKED_SENTINEL,
    FurnitureBounds,
    FurnitureConfig,
    FurnitureConstraints,
    Transform,
)
from roomplacer.infrastructure.world import World

FULL_ROOM = [
    ("door-1", "door"),
    ("window-1", "window"),
    ("counter-1", "counter"),
    ("painting-1", "painting-cat-small"),
    ("couch-1", "couch"),
    ("post-1", "furniture"),
    ("lamp-1", "lamp"),
    ("rug-1", "rug"),
]


def _populate(world: World, entities: list[tuple[str, str]]) -> None:
    for entity_id, kind in entities:
        world.add_entity(entity_id, kind)


@pytest.fixture
def stage_service(world: World, rng: random.Random) -> FurniturePlacementService:
    """Service with a floor kind wider than the room."""
    catalog = FurnitureCatalog().with_overrides(
        [
            FurnitureConfig(
                kind="stage",
                bounds=FurnitureBounds(width=2000.0, height=100.0, depth=80.0),
                constraints=FurnitureConstraints(wall_mounted=False, occupies_floor=True),
            )
        ]
    )
    return FurniturePlacementService(world, catalog=catalog, rng=rng)


class TestRandomizeAllFurniture:
    """Tests for randomize_all_furniture()."""

    def test_empty_room(self, service: FurniturePlacementService, world: World) -> None:
        report = service.randomize_all_furniture()
        assert report.total == 0
        assert report.success_count == 0
        assert world.transforms == {}

    def test_cat_is_never_moved(self, service: FurniturePlacementService, place) -> None:
        place("cat-1", "cat", 700.0, 0.0, 600.0)
        report = service.randomize_all_furniture()
        assert report.total == 0
        assert service.store.transforms["cat-1"] == Transform(700.0, 0.0, 600.0)

    def test_every_entity_is_accounted_for(
        self, service: FurniturePlacementService, world: World
    ) -> None:
        _populate(world, FULL_ROOM)
        world.add_entity("cat-1", "cat", Transform(700.0, 0.0, 600.0))

        report = service.randomize_all_furniture()

        assert report.total == len(FULL_ROOM)
        assert set(world.transforms) == {entity_id for entity_id, _ in FULL_ROOM} | {"cat-1"}
        assert world.transforms["cat-1"] == Transform(700.0, 0.0, 600.0)

    def test_fixed_items_placed_when_widths_fit(
        self, service: FurniturePlacementService, world: World
    ) -> None:
        _populate(world, [("door-1", "door"), ("window-1", "window"), ("counter-1", "counter")])
        report = service.randomize_all_furniture()
        assert report.failed == []
        for entity_id in ("door-1", "window-1", "counter-1"):
            assert world.transforms[entity_id].z == 0.0
            assert 100.0 <= world.transforms[entity_id].x <= 1300.0

    def test_paintings_placed_with_fixed_items(
        self, service: FurniturePlacementService, world: World
    ) -> None:
        _populate(
            world,
            [
                ("door-1", "door"),
                ("counter-1", "counter"),
                ("painting-1", "painting-cat-small"),
                ("painting-2", "painting-cat-small"),
            ],
        )
        report = service.randomize_all_furniture()
        assert report.failed == []
        assert report.success_count == 4

    def test_placed_items_do_not_collide(
        self, service: FurniturePlacementService, world: World
    ) -> None:
        _populate(world, FULL_ROOM)
        kinds = dict(world.kinds)

        report = service.randomize_all_furniture()

        for failure in report.failed:
            world.remove_entity(failure.entity_id)
        for entity_id in world.entity_ids():
            result = service.can_place_furniture(
                kinds[entity_id], world.transforms[entity_id], exclude_id=entity_id
            )
            assert result.success, f"{entity_id}: {result.reason}"

    def test_unknown_kind_is_parked(
        self, service: FurniturePlacementService, world: World
    ) -> None:
        world.add_entity("ship-1", "spaceship")
        report = service.randomize_all_furniture()
        assert report.success_count == 0
        assert len(report.failed) == 1
        assert report.failed[0].reason == "Unknown furniture type: spaceship"
        assert world.transforms["ship-1"] == Transform(100.0, 0.0, 850.0)

    def test_unplaceable_floor_item_is_parked(
        self, stage_service: FurniturePlacementService, world: World
    ) -> None:
        world.add_entity("stage-1", "stage")
        report = stage_service.randomize_all_furniture()
        failure = report.failed[0]
        assert failure.entity_id == "stage-1"
        assert failure.reason == "Could not find valid position after 100 attempts"
        assert world.transforms["stage-1"] == Transform(100.0, 0.0, 850.0)

    def test_failed_items_do_not_block_later_floor_items(
        self,
        stage_service: FurniturePlacementService,
        world: World,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        world.add_entity("stage-1", "stage")
        world.add_entity("lamp-1", "lamp")
        bulk = stage_service.bulk
        find = bulk.find_smart_floor_position
        stage_during_layout = []
        lamp_spot_free = []

        def recording_find(kind: str):
            stage_during_layout.append(world.transforms["stage-1"])
            if kind == "lamp":
                result = stage_service.can_place_furniture(
                    "lamp", Transform(700.0, 0.0, 790.0)
                )
                lamp_spot_free.append(result.success)
            return find(kind)

        monkeypatch.setattr(bulk, "find_smart_floor_position", recording_find)
        report = stage_service.randomize_all_furniture()

        assert stage_during_layout == [PARKED_SENTINEL, PARKED_SENTINEL]
        assert lamp_spot_free == [True]
        assert [failure.entity_id for failure in report.failed] == ["stage-1"]
        assert world.transforms["stage-1"] == Transform(100.0, 0.0, 850.0)
        assert not world.transforms["lamp-1"].is_parked

    def test_narrow_fixed_items_are_never_parked(self) -> None:
        sconce = FurnitureConfig(
            kind="sconce",
            bounds=FurnitureBounds(width=60.0, height=80.0, depth=0.0, default_y=200.0),
            constraints=FurnitureConstraints(wall_mounted=True, occupies_floor=False),
        )
        catalog = FurnitureCatalog().with_overrides([sconce])
        for seed in range(50):
            world = World()
            _populate(world, [(f"sconce-{i}", "sconce") for i in range(4)])
            service = FurniturePlacementService(world, catalog=catalog, rng=random.Random(seed))
            report = service.randomize_all_furniture()
            assert report.failed == [], f"seed {seed}: {report.failed}"
            assert report.success_count == 4

    def test_overfull_wall_parks_extras(
        self, service: FurniturePlacementService, world: World
    ) -> None:
        _populate(world, [(f"window-{i}", "window") for i in range(8)])
        report = service.randomize_all_furniture()
        assert report.total == 8
        assert report.failed
        for failure in report.failed:
            parked = world.transforms[failure.entity_id]
            assert parked.x < 100.0 or parked.x > 1300.0

    def test_previous_positions_are_discarded(
        self, service: FurniturePlacementService, place
    ) -> None:
        place("couch-1", "couch", -500.0, 0.0, 600.0)
        service.randomize_all_furniture()
        assert not service.store.transforms["couch-1"].is_parked

    def test_seeded_layouts_repeat(self) -> None:
        layouts = []
        for _ in range(2):
            world = World()
            _populate(world, FULL_ROOM)
            FurniturePlacementService(world, rng=random.Random(99)).randomize_all_furniture()
            layouts.append(dict(world.transforms))
        assert layouts[0] == layouts[1]


class TestSmartFloorPosition:
    """Tests for find_smart_floor_position()."""

    def test_unknown_kind(self, service: FurniturePlacementService) -> None:
        result = service.bulk.find_smart_floor_position("spaceship")
        assert result.reason == "Unknown furniture type: spaceship"

    def test_lamp_on_visible_floor(self, service: FurniturePlacementService) -> None:
        result = service.bulk.find_smart_floor_position("lamp")
        assert result.success
        assert 100.0 <= result.position.x <= 1300.0
        assert 50.0 <= result.position.z <= 800.0

    def test_rug_is_corrected(self, service: FurniturePlacementService) -> None:
        result = service.bulk.find_smart_floor_position("rug")
        assert result.success
        assert not service.rug_oracle.would_rug_go_into_wall(
            result.position.x, result.position.z
        )

    def test_failure_reason(self, stage_service: FurniturePlacementService) -> None:
        result = stage_service.bulk.find_smart_floor_position("stage")
        assert result.reason == (
            "Could not find valid floor position after smart placement attempts"
        )


class TestParkingPosition:
    """Tests for get_parking_position()."""

    def test_wall_items_alternate_sides(self, service: FurniturePlacementService) -> None:
        bulk = service.bulk
        assert bulk.get_parking_position("door") == Transform(-200.0, 0.0, 0.0)
        assert bulk.get_parking_position("door") == Transform(1600.0, 0.0, 0.0)
        assert bulk.get_parking_position("door") == Transform(-200.0, 150.0, 0.0)

    def test_wide_wall_item_parks_further_out(
        self, service: FurniturePlacementService
    ) -> None:
        assert service.bulk.get_parking_position("window") == Transform(-260.0, 150.0, 0.0)

    def test_floor_items_fill_rows(self, service: FurniturePlacementService) -> None:
        bulk = service.bulk
        spots = [bulk.get_parking_position("lamp") for _ in range(5)]
        assert spots == [
            Transform(100.0, 0.0, 850.0),
            Transform(200.0, 0.0, 850.0),
            Transform(300.0, 0.0, 850.0),
            Transform(400.0, 0.0, 850.0),
            Transform(100.0, 0.0, 950.0),
        ]

    def test_counter_resets_each_layout(
        self, stage_service: FurniturePlacementService, world: World
    ) -> None:
        stage_service.bulk.get_parking_position("lamp")
        stage_service.bulk.get_parking_position("lamp")
        world.add_entity("stage-1", "stage")
        stage_service.randomize_all_furniture()
        assert world.transforms["stage-1"] == Transform(100.0, 0.0, 850.0)
