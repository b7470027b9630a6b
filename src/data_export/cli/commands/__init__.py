"""
CLI command modules for data_export.

Each command module defines a single Typer-compatible command function.
"""

from data_export.cli.commands.export import export_command
from data_export.cli.commands.names import names_command

__all__ = [
    "export_command",
    "names_command",
]
