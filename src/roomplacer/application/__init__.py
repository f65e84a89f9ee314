"""Application layer - room files and service wiring."""

from .factory import ServiceFactory, get_factory, reset_factory, set_factory

__all__ = [
    "ServiceFactory",
    "get_factory",
    "reset_factory",
    "set_factory",
]
