"""In-memory entity store."""

from __future__ import annotations

from dataclasses import dataclass, field

from roomplacer.domain.value_objects import Transform


@dataclass
class World:
    """Minimal entity store holding transforms and kinds.

    Hosts with their own entity-component store only need to expose the
    same two mappings; this class exists for the CLI and for tests.

    Attributes:
        transforms: Mutable map of entity id to its current transform.
        kinds: Map of entity id to its furniture kind (or ``"cat"``).
    """

    transforms: dict[str, Transform] = field(default_factory=dict)
    kinds: dict[str, str] = field(default_factory=dict)

    def add_entity(
        self, entity_id: str, kind: str, transform: Transform | None = None
    ) -> None:
        """Register an entity, optionally with a starting transform.

        Raises:
            ValueError: If the id is already registered.
        """
        if entity_id in self.kinds:
            raise ValueError(f"Entity already exists: {entity_id}")
        self.kinds[entity_id] = kind
        if transform is not None:
            self.transforms[entity_id] = transform

    def remove_entity(self, entity_id: str) -> None:
        """Remove an entity and its transform if present."""
        self.kinds.pop(entity_id, None)
        self.transforms.pop(entity_id, None)

    def entity_ids(self) -> list[str]:
        return list(self.kinds)
