"""Pytest configuration and shared fixtures for placement tests."""

from __future__ import annotations

import json
import random
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from roomplacer.domain.catalog import FurnitureCatalog
from roomplacer.domain.services import FurniturePlacementService
from roomplacer.domain.value_objects import Transform
from roomplacer.infrastructure.world import World


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Engine fixtures
# =============================================================================


@pytest.fixture
def world() -> World:
    """Empty in-memory entity store."""
    return World()


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible searches."""
    return random.Random(1234)


@pytest.fixture
def catalog() -> FurnitureCatalog:
    """Built-in furniture catalog."""
    return FurnitureCatalog()


@pytest.fixture
def service(world: World, rng: random.Random) -> FurniturePlacementService:
    """Placement service over the empty world with default room settings."""
    return FurniturePlacementService(world, rng=rng)


@pytest.fixture
def place(world: World) -> Callable[..., None]:
    """Register an entity already standing at a position in the world."""

    def _place(entity_id: str, kind: str, x: float, y: float, z: float) -> None:
        world.add_entity(entity_id, kind, Transform(x, y, z))

    return _place


# =============================================================================
# Room file fixtures
# =============================================================================


@pytest.fixture
def room_data() -> dict[str, Any]:
    """A room with the full default inventory and the cat."""
    return {
        "schema_version": "1.0",
        "seed": 7,
        "furniture": [
            {"id": "door-1", "kind": "door"},
            {"id": "window-1", "kind": "window"},
            {"id": "counter-1", "kind": "counter"},
            {"id": "painting-1", "kind": "painting-cat-small"},
            {"id": "couch-1", "kind": "couch"},
            {"id": "post-1", "kind": "furniture"},
            {"id": "lamp-1", "kind": "lamp"},
            {"id": "rug-1", "kind": "rug"},
            {"id": "cat-1", "kind": "cat", "position": {"x": 700, "z": 600}},
        ],
    }


@pytest.fixture
def room_file(tmp_path: Path, room_data: dict[str, Any]) -> Path:
    """Room file on disk with the default inventory."""
    path = tmp_path / "room.json"
    path.write_text(json.dumps(room_data), encoding="utf-8")
    return path
