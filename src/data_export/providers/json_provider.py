"""
json_provider.py
Writes each segment as one JSON array of records.

Records are converted with ``to_json_compatible`` so dataclasses, nested
mappings and sequences survive as structures rather than strings.
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, List

from data_export.logger import get_logger

if TYPE_CHECKING:
    from data_export.core.context import ExecutionContext

log = get_logger("json_provider")


def to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Primitives pass through
    - dataclasses -> dict (recursively)
    - mappings -> dict with string keys (recursively)
    - list / tuple / set -> list (recursively)
    - Unknown objects -> __dict__ if present, else str(obj)
    """
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if is_dataclass(obj) and not isinstance(obj, type):
        return {k: to_json_compatible(v) for k, v in asdict(obj).items()}

    if hasattr(obj, "items"):
        return {str(k): to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [to_json_compatible(v) for v in obj]

    if hasattr(obj, "__dict__"):
        return {k: to_json_compatible(v) for k, v in obj.__dict__.items()}

    return str(obj)


class JsonExportProvider:
    name = "json"
    file_extension = ".json"

    def __init__(self, indent: int | None = 2):
        self.indent = indent

    def execute(self, context: "ExecutionContext") -> None:
        segmenter = context.segmenter
        output_path = Path(context.file_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        rows: List[Any] = []
        for record in segmenter.iter_records():
            if context.is_canceled():
                log.info("Export canceled while writing %s", output_path.name)
                break
            rows.append(to_json_compatible(record))

        payload = json.dumps(rows, indent=self.indent, ensure_ascii=False)
        with output_path.open("w", encoding="utf-8") as f:
            f.write(payload)

        context.increment_success_count(len(rows))
        log.info(
            "Wrote segment %d to %s (records=%d, size=%d bytes)",
            segmenter.file_index,
            output_path,
            len(rows),
            output_path.stat().st_size,
        )
