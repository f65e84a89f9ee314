"""Collaborator protocols for dependency injection.

The placement engine never owns entity data, catalog data or randomness.
These protocols describe what it borrows from its host so the host (a game
loop, a CLI, a test) can plug in its own implementations.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, Sequence
from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from roomplacer.domain.value_objects import FurnitureConfig, RugBounds, Transform

T = TypeVar("T")


@runtime_checkable
class EntityStoreProtocol(Protocol):
    """Shared mutable store of placed entities.

    The engine reads and writes ``transforms`` and only reads ``kinds``.
    Callers must serialize access; the engine assumes exclusive use for the
    duration of each call.

    Example:
        ```python
        class World:
            def __init__(self) -> None:
                self.transforms: dict[str, Transform] = {}
                self.kinds: dict[str, str] = {}
        ```
    """

    transforms: MutableMapping[str, "Transform"]
    kinds: Mapping[str, str]


class FurnitureCatalogProtocol(Protocol):
    """Static lookup from furniture kind to its configuration."""

    def get(self, kind: str) -> "FurnitureConfig | None":
        """Return the configuration for a kind, or None if unknown."""
        ...

    def kinds(self) -> list[str]:
        """Return all known kinds."""
        ...


class RugBoundsOracleProtocol(Protocol):
    """Rug-specific placement rules that depend on the screen projection.

    Rugs are flat, so a rug close to the back wall can visually climb the
    wall even though its world footprint is legal. The oracle knows how
    the floor is drawn and corrects such positions.
    """

    def get_safe_rug_bounds(self) -> "RugBounds":
        """Return the region where rug centers should be sampled."""
        ...

    def find_valid_rug_position(self, x: float, z: float) -> tuple[float, float]:
        """Return a position near (x, z) where the rug does not intrude on the wall."""
        ...


class RandomSourceProtocol(Protocol):
    """Single source of randomness for shuffles and random picks.

    ``random.Random`` satisfies this protocol; seed it for reproducible
    layouts.
    """

    def random(self) -> float:
        """Return a float in [0, 1)."""
        ...

    def uniform(self, a: float, b: float) -> float:
        """Return a float between a and b."""
        ...

    def shuffle(self, items: list[T]) -> None:
        """Shuffle a list in place."""
        ...

    def choice(self, items: Sequence[T]) -> T:
        """Return one element of a non-empty sequence."""
        ...
