"""Unit tests for collision detection through the placement facade."""

import pytest

from roomplacer.domain.services import FurniturePlacementService
from roomplacer.domain.value_objects import FurnitureLayer, Transform


class TestBoundaryChecks:
    """Tests for the checks that run before any collision test."""

    def test_unknown_kind(self, service: FurniturePlacementService) -> None:
        result = service.can_place_furniture("spaceship", Transform(500.0, 0.0, 400.0))
        assert not result.success
        assert result.reason == "Unknown furniture type: spaceship"

    def test_outside_world_x(self, service: FurniturePlacementService) -> None:
        result = service.can_place_furniture("door", Transform(100.0, 0.0, 0.0))
        assert result.reason == "Outside world X boundaries"

    def test_outside_world_z(self, service: FurniturePlacementService) -> None:
        result = service.can_place_furniture("couch", Transform(700.0, 0.0, 1190.0))
        assert result.reason == "Outside world Z boundaries"

    def test_wall_item_off_the_wall(self, service: FurniturePlacementService) -> None:
        result = service.can_place_furniture("door", Transform(500.0, 0.0, 10.0))
        assert result.reason == "Wall-mounted items must be on the wall"

    def test_wall_adjacent_item_off_the_wall(self, service: FurniturePlacementService) -> None:
        result = service.can_place_furniture("counter", Transform(500.0, 0.0, 5.0))
        assert result.reason == "Wall-adjacent furniture must be against the wall"

    def test_wall_position_within_tolerance(self, service: FurniturePlacementService) -> None:
        result = service.can_place_furniture("door", Transform(500.0, 0.0, 1e-9))
        assert result.success

    def test_success_carries_position(self, service: FurniturePlacementService) -> None:
        position = Transform(500.0, 0.0, 0.0)
        result = service.can_place_furniture("door", position)
        assert result.success
        assert result.position == position
        assert result.reason is None


class TestFloorCollision:
    """Tests for shadow-based collision on the floor layers."""

    def test_upright_items_collide(self, service: FurniturePlacementService, place) -> None:
        place("couch-1", "couch", 700.0, 0.0, 600.0)
        result = service.can_place_furniture("lamp", Transform(700.0, 0.0, 600.0))
        assert result.reason == "Shadow would overlap with existing couch"

    def test_rugs_collide(self, service: FurniturePlacementService, place) -> None:
        place("rug-1", "rug", 700.0, 0.0, 950.0)
        result = service.can_place_furniture("rug", Transform(720.0, 0.0, 950.0))
        assert result.reason == "Rug would overlap with existing rug"

    def test_upright_may_stand_on_rug(self, service: FurniturePlacementService, place) -> None:
        place("rug-1", "rug", 700.0, 0.0, 600.0)
        assert service.can_place_furniture("couch", Transform(700.0, 0.0, 600.0)).success

    def test_rug_may_go_under_upright(self, service: FurniturePlacementService, place) -> None:
        place("couch-1", "couch", 700.0, 0.0, 600.0)
        assert service.can_place_furniture("rug", Transform(700.0, 0.0, 600.0)).success

    def test_distant_uprights_do_not_collide(
        self, service: FurniturePlacementService, place
    ) -> None:
        place("couch-1", "couch", 400.0, 0.0, 600.0)
        assert service.can_place_furniture("lamp", Transform(1100.0, 0.0, 600.0)).success

    def test_exclude_id_ignores_moving_entity(
        self, service: FurniturePlacementService, place
    ) -> None:
        place("couch-1", "couch", 700.0, 0.0, 600.0)
        result = service.can_place_furniture(
            "couch", Transform(710.0, 0.0, 600.0), exclude_id="couch-1"
        )
        assert result.success

    def test_cat_is_ignored(self, service: FurniturePlacementService, place) -> None:
        place("cat-1", "cat", 700.0, 0.0, 600.0)
        assert service.can_place_furniture("lamp", Transform(700.0, 0.0, 600.0)).success

    def test_parked_entity_is_ignored(self, service: FurniturePlacementService, place) -> None:
        place("couch-1", "couch", -9999.0, 0.0, -9999.0)
        assert service.can_place_furniture("couch", Transform(700.0, 0.0, 600.0)).success

    def test_entity_without_transform_is_ignored(
        self, service: FurniturePlacementService, world
    ) -> None:
        world.add_entity("couch-1", "couch")
        assert service.can_place_furniture("couch", Transform(700.0, 0.0, 600.0)).success

    def test_floor_items_ignore_wall_items(
        self, service: FurniturePlacementService, place
    ) -> None:
        place("door-1", "door", 500.0, 0.0, 0.0)
        assert service.can_place_furniture("couch", Transform(500.0, 0.0, 100.0)).success


class TestWallCollision:
    """Tests for wall-plane collision."""

    def test_neighbour_within_buffer_collides(
        self, service: FurniturePlacementService, place
    ) -> None:
        place("door-1", "door", 500.0, 0.0, 0.0)
        result = service.can_place_furniture("window", Transform(700.0, 150.0, 0.0))
        assert result.reason == "Would overlap with existing door on wall"

    def test_neighbour_outside_buffer_is_clear(
        self, service: FurniturePlacementService, place
    ) -> None:
        place("door-1", "door", 500.0, 0.0, 0.0)
        assert service.can_place_furniture("window", Transform(750.0, 150.0, 0.0)).success

    def test_painting_above_door_is_clear(
        self, service: FurniturePlacementService, place
    ) -> None:
        place("door-1", "door", 500.0, 0.0, 0.0)
        result = service.can_place_furniture("painting-cat-large", Transform(500.0, 420.0, 0.0))
        assert result.success

    def test_painting_too_close_above_door_collides(
        self, service: FurniturePlacementService, place
    ) -> None:
        place("door-1", "door", 500.0, 0.0, 0.0)
        result = service.can_place_furniture("painting-cat-large", Transform(500.0, 410.0, 0.0))
        assert not result.success

    def test_wall_items_ignore_floor_items(
        self, service: FurniturePlacementService, place
    ) -> None:
        place("lamp-1", "lamp", 500.0, 0.0, 60.0)
        assert service.can_place_furniture("door", Transform(500.0, 0.0, 0.0)).success


class TestFloorQueries:
    """Tests for floor footprints and cat movement."""

    def test_couch_floor_bounds(self, service: FurniturePlacementService, place) -> None:
        place("couch-1", "couch", 500.0, 0.0, 400.0)
        bounds = service.get_furniture_floor_bounds("couch-1")
        assert bounds is not None
        assert bounds.x == pytest.approx(293.45)
        assert bounds.x + bounds.width == pytest.approx(706.55)
        assert bounds.z == pytest.approx(364.0)
        assert bounds.z + bounds.depth == pytest.approx(436.0)

    def test_non_floor_item_has_no_floor_bounds(
        self, service: FurniturePlacementService, place
    ) -> None:
        place("rug-1", "rug", 500.0, 0.0, 950.0)
        assert service.get_furniture_floor_bounds("rug-1") is None

    def test_unknown_entity_has_no_floor_bounds(self, service: FurniturePlacementService) -> None:
        assert service.get_furniture_floor_bounds("ghost") is None

    def test_occupied_spaces_skip_parked_and_flat_items(
        self, service: FurniturePlacementService, place
    ) -> None:
        place("couch-1", "couch", 500.0, 0.0, 400.0)
        place("lamp-1", "lamp", -200.0, 0.0, 400.0)
        place("rug-1", "rug", 900.0, 0.0, 950.0)
        place("door-1", "door", 900.0, 0.0, 0.0)
        spaces = service.get_occupied_spaces()
        assert len(spaces) == 1
        assert spaces[0].center_x == pytest.approx(500.0)

    def test_cat_blocked_by_couch(self, service: FurniturePlacementService, place) -> None:
        place("couch-1", "couch", 500.0, 0.0, 400.0)
        assert not service.can_cat_move_to(500.0, 400.0)

    def test_cat_free_away_from_couch(self, service: FurniturePlacementService, place) -> None:
        place("couch-1", "couch", 500.0, 0.0, 400.0)
        assert service.can_cat_move_to(500.0, 700.0)

    def test_cat_may_walk_on_rug(self, service: FurniturePlacementService, place) -> None:
        place("rug-1", "rug", 500.0, 0.0, 950.0)
        assert service.can_cat_move_to(500.0, 950.0)

    def test_cat_radius(self, service: FurniturePlacementService, place) -> None:
        place("couch-1", "couch", 500.0, 0.0, 400.0)
        # couch front edge is at z=436
        assert service.can_cat_move_to(500.0, 470.0, radius=30.0)
        assert not service.can_cat_move_to(500.0, 470.0, radius=40.0)


class TestLayerQueries:
    """Tests for the facade's layer and size queries."""

    def test_layer_by_kind(self, service: FurniturePlacementService) -> None:
        assert service.get_furniture_layer("door") == FurnitureLayer.WALL
        assert service.get_furniture_layer("rug") == FurnitureLayer.RUG
        assert service.get_furniture_layer("couch") == FurnitureLayer.UPRIGHT

    def test_effective_size(self, service: FurniturePlacementService) -> None:
        assert service.get_effective_size(100.0, 600.0) == pytest.approx(115.0)

    def test_shadow_bounds(self, service: FurniturePlacementService) -> None:
        shadow = service.get_shadow_bounds("lamp", 300.0, 600.0)
        assert shadow.center_x == pytest.approx(300.0)
        assert shadow.width == pytest.approx(32 * 0.7 * 1.15)

    def test_fixed_height_y_positions(self, service: FurniturePlacementService) -> None:
        assert service.generate_y_positions("window") == [150.0]
        assert service.generate_y_positions("couch") == [0.0]

    def test_unknown_kind_y_positions(self, service: FurniturePlacementService) -> None:
        assert service.generate_y_positions("spaceship") == []
