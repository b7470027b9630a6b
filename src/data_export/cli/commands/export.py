from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from data_export.cancellation import CancellationSource
from data_export.cli.utils import cancel_on_interrupt, load_records
from data_export.config import get_config
from data_export.core.pipeline import ExportPipeline, create_context
from data_export.logger import log_info
from data_export.providers import get_provider

console = Console()


def export_command(
    input_file: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Output folder (defaults to paths.output_dir from config)",
    ),
    fmt: str = typer.Option(
        "json",
        "--format",
        "-f",
        help="Output format: json or csv",
    ),
    pattern: Optional[str] = typer.Option(
        None,
        "--pattern",
        help="File name pattern, %Misc.FileNumber% is replaced by the segment number",
    ),
    extension: Optional[str] = typer.Option(
        None,
        "--extension",
        help="File extension (defaults to the provider's extension)",
    ),
    max_length: Optional[int] = typer.Option(
        None,
        "--max-length",
        help="Maximum file name length, extension excluded",
    ),
    segment_size: Optional[int] = typer.Option(
        None,
        "--segment-size",
        "-s",
        help="Records per output file (0 writes a single file)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export JSON records into segmented output files.
    """
    cfg = get_config()

    try:
        provider = get_provider(fmt)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--format") from exc

    try:
        records = load_records(input_file)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(
            f"{input_file} is neither a JSON array nor JSON lines: {exc}",
            param_hint="INPUT_FILE",
        ) from exc
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="INPUT_FILE") from exc
    if verbose:
        console.log(f"Loaded {len(records)} record(s) from {input_file}")

    source = CancellationSource()
    ctx = create_context(
        out,
        config=cfg,
        cancellation=source.token,
        file_name_pattern=pattern,
        file_extension=extension if extension is not None else provider.file_extension,
        max_file_name_length=max_length,
    )
    size = segment_size if segment_size is not None else cfg.segment_size

    with cancel_on_interrupt(source):
        result = ExportPipeline(ctx, provider, segment_size=size).run(records)

    log_info("CLI export finished: %d record(s) from %s", result.successful_exported_records, input_file)

    table = Table(title="Export Summary")
    table.add_column("Segment", justify="right")
    table.add_column("File", style="bold")

    for index, path in enumerate(result.files):
        table.add_row(str(index), path)

    console.print(table)
    console.print(
        f"Exported [bold]{result.successful_exported_records}[/bold] record(s) "
        f"in {result.segments} file(s)"
    )

    if result.canceled:
        console.print("[yellow]Export was canceled[/yellow]")
        raise typer.Exit(code=1)
