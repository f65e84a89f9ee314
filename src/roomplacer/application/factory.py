"""Service factory for dependency injection."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from roomplacer.domain.services import PlacementConfig

if TYPE_CHECKING:
    from roomplacer.application.config import RoomConfiguration
    from roomplacer.contracts import RandomSourceProtocol
    from roomplacer.domain.services import FurniturePlacementService
    from roomplacer.infrastructure.formatters import (
        JsonLayoutExporter,
        LayoutReportFormatter,
        PlacementResultFormatter,
    )


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Centralizes construction so the CLI and tests build the placement
    service the same way, and so tests can swap in a factory with their
    own tunables.

    Attributes:
        placement_config: Tunables passed to every placement service.

    Example:
        ```python
        config = load_config(Path("living-room.json"))
        service = ServiceFactory().create_placement_service(config, seed=42)
        report = service.randomize_all_furniture()
        ```
    """

    placement_config: PlacementConfig = field(default_factory=PlacementConfig)

    def create_random_source(self, seed: int | None = None) -> RandomSourceProtocol:
        """Create the random source; seeded sources give reproducible layouts."""
        return random.Random(seed)

    def create_placement_service(
        self, config: RoomConfiguration, seed: int | None = None
    ) -> FurniturePlacementService:
        """Create a placement service for a room file.

        The service gets a fresh entity store populated from the room file.

        Args:
            config: Validated room configuration.
            seed: Seed override; falls back to the room file's seed.

        Returns:
            A ready placement service.
        """
        from roomplacer.application.config import (
            config_to_catalog,
            config_to_perspective,
            config_to_world,
            config_to_world_bounds,
        )
        from roomplacer.domain.services import FurniturePlacementService

        return FurniturePlacementService(
            store=config_to_world(config),
            catalog=config_to_catalog(config),
            world=config_to_world_bounds(config),
            perspective=config_to_perspective(config),
            config=self.placement_config,
            rng=self.create_random_source(seed if seed is not None else config.seed),
        )

    def get_layout_report_formatter(self) -> LayoutReportFormatter:
        """Create layout report formatter instance."""
        from roomplacer.infrastructure.formatters import LayoutReportFormatter

        return LayoutReportFormatter()

    def get_placement_result_formatter(self) -> PlacementResultFormatter:
        """Create placement result formatter instance."""
        from roomplacer.infrastructure.formatters import PlacementResultFormatter

        return PlacementResultFormatter()

    def get_json_exporter(self) -> JsonLayoutExporter:
        """Create JSON exporter instance."""
        from roomplacer.infrastructure.formatters import JsonLayoutExporter

        return JsonLayoutExporter()


# Default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
