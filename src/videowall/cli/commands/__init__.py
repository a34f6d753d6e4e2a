"""CLI command implementations for the videowall application.

This package contains subcommands for the videowall CLI, including:
- validate: Validate a catalog configuration file
"""

from videowall.cli.commands.validate import validate_command

__all__ = ["validate_command"]
