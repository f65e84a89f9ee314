"""2.5D furniture placement and collision engine."""

__version__ = "0.1.0"
