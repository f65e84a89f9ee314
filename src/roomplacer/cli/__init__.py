"""Command-line interface for roomplacer."""
