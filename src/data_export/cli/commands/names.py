from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from data_export.config import get_config
from data_export.naming import resolve_file_name

console = Console()


def names_command(
    count: int = typer.Option(3, "--count", "-n", min=1, help="Number of segments to preview"),
    pattern: Optional[str] = typer.Option(None, "--pattern", help="File name pattern"),
    extension: Optional[str] = typer.Option(None, "--extension", help="File extension"),
    max_length: Optional[int] = typer.Option(
        None,
        "--max-length",
        help="Maximum file name length, extension excluded",
    ),
):
    """
    Preview the file names a run would produce.
    """
    cfg = get_config()
    pattern = pattern if pattern is not None else cfg.file_name_pattern
    extension = extension if extension is not None else cfg.file_extension
    max_length = max_length if max_length is not None else cfg.max_file_name_length

    table = Table(title=f"File names for {pattern!r}")
    table.add_column("Segment", justify="right")
    table.add_column("File name", style="bold")

    for index in range(count):
        table.add_row(str(index), resolve_file_name(pattern, index, extension, max_length))

    console.print(table)
