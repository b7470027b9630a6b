"""
CLI package for data_export.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from data_export.cli.app import app, main

__all__ = [
    "app",
    "main",
]
