"""
csv_provider.py
Writes each segment as a CSV file with a header row.

Columns come from the first record of the segment; keys missing from later
records are written empty, extra keys are ignored.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Sequence

from data_export.logger import get_logger

if TYPE_CHECKING:
    from data_export.core.context import ExecutionContext

log = get_logger("csv_provider")


class CsvExportProvider:
    name = "csv"
    file_extension = ".csv"

    def __init__(self, delimiter: str = ",", columns: Optional[Sequence[str]] = None):
        self.delimiter = delimiter
        self.columns = list(columns) if columns else None

    def execute(self, context: "ExecutionContext") -> None:
        segmenter = context.segmenter
        output_path = Path(context.file_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        written = 0
        with output_path.open("w", encoding="utf-8", newline="") as f:
            writer = None
            for record in segmenter.iter_records():
                if context.is_canceled():
                    log.info("Export canceled while writing %s", output_path.name)
                    break

                if writer is None:
                    fieldnames: List[str] = self.columns or [str(k) for k in record.keys()]
                    writer = csv.DictWriter(
                        f,
                        fieldnames=fieldnames,
                        delimiter=self.delimiter,
                        extrasaction="ignore",
                    )
                    writer.writeheader()

                writer.writerow({str(k): v for k, v in record.items()})
                context.increment_success_count()
                written += 1

        log.info(
            "Wrote segment %d to %s (records=%d)",
            segmenter.file_index,
            output_path,
            written,
        )
