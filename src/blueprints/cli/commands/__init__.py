"""CLI command implementations for the blueprints application.

This package contains subcommands for the blueprints CLI, including:
- demo: Run every demonstration in turn
- list: Show the keys each registry knows
"""

from blueprints.cli.commands.demo import demo_command
from blueprints.cli.commands.listing import list_command

__all__ = ["demo_command", "list_command"]
