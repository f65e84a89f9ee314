"""Infrastructure layer - entity store and formatters."""

from .formatters import JsonLayoutExporter, LayoutReportFormatter, PlacementResultFormatter
from .world import World

__all__ = [
    "JsonLayoutExporter",
    "LayoutReportFormatter",
    "PlacementResultFormatter",
    "World",
]
