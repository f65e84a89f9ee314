"""Contracts between the placement engine and its host."""

from roomplacer.contracts.protocols import (
    EntityStoreProtocol,
    FurnitureCatalogProtocol,
    RandomSourceProtocol,
    RugBoundsOracleProtocol,
)

__all__ = [
    "EntityStoreProtocol",
    "FurnitureCatalogProtocol",
    "RandomSourceProtocol",
    "RugBoundsOracleProtocol",
]
