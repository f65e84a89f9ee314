"""Result and bookkeeping models for the placement engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from roomplacer.domain.value_objects import Transform


@dataclass(frozen=True)
class PlacementResult:
    """Outcome of a placement query or search.

    Failures are reported through ``reason``; the engine never raises for
    an invalid or unreachable position.

    Attributes:
        success: Whether the position is (or a position was found) valid.
        position: The validated position on success.
        reason: Human-readable explanation on failure.
    """

    success: bool
    position: Transform | None = None
    reason: str | None = None

    @classmethod
    def ok(cls, position: Transform) -> PlacementResult:
        return cls(success=True, position=position)

    @classmethod
    def fail(cls, reason: str) -> PlacementResult:
        return cls(success=False, reason=reason)


@dataclass(frozen=True)
class PlacementFailure:
    """An item that a bulk layout could not place and parked instead."""

    entity_id: str
    kind: str
    reason: str


@dataclass
class RandomizeReport:
    """Summary of a bulk layout.

    Every furniture entity is counted in ``success_count`` or listed in
    ``failed``; failed entities are parked off the visible field.
    """

    success_count: int = 0
    failed: list[PlacementFailure] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.success_count + len(self.failed)


@dataclass(frozen=True)
class WallGap:
    """Free spot on the wall found by gap finding."""

    x: float
    z: float
    y: float


@dataclass
class Partition:
    """X-axis wall segment reserved during one bulk layout.

    Attributes:
        min_x: Left edge of the segment.
        max_x: Right edge of the segment.
        occupied: Whether an item has been placed in it.
        assigned_kind: Kind of the item placed in it.
        reserved_kind: Kind the segment was sized for, if any.
    """

    min_x: float
    max_x: float
    occupied: bool = False
    assigned_kind: str | None = None
    reserved_kind: str | None = None

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def center(self) -> float:
        return (self.min_x + self.max_x) / 2

    def assign(self, kind: str) -> None:
        self.occupied = True
        self.assigned_kind = kind


@dataclass(frozen=True)
class PlacedPainting:
    """Position of a painting already hung during a bulk layout."""

    entity_id: str
    kind: str
    x: float
    y: float
