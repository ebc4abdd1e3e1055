"""CLI command implementations for the cutstock application.

- validate: Validate a job file
"""

from cutstock.cli.commands.validate import validate_command

__all__ = ["validate_command"]
