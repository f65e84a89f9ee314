"""CLI command implementations for the roomplacer application.

This package contains subcommands for the roomplacer CLI, including:
- validate: Validate a room file
"""

from roomplacer.cli.commands.validate import display_load_error, load_or_exit, validate_command

__all__ = ["display_load_error", "load_or_exit", "validate_command"]
