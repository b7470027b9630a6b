from __future__ import annotations

import json
import signal
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List

from rich.console import Console

from data_export.cancellation import CancellationSource

console = Console()


def load_records(path: Path) -> List[Dict[str, Any]]:
    """
    Read records from a JSON array file or a JSON-lines file.
    """
    if not path.exists():
        raise FileNotFoundError(path)

    text = path.read_text(encoding="utf-8")
    stripped = text.lstrip()

    if stripped.startswith("["):
        data = json.loads(text)
    else:
        data = [json.loads(line) for line in text.splitlines() if line.strip()]

    bad = [i for i, row in enumerate(data) if not isinstance(row, dict)]
    if bad:
        raise ValueError(f"{path}: expected JSON objects, found non-object at index {bad[0]}")

    return data


@contextmanager
def cancel_on_interrupt(source: CancellationSource) -> Iterator[CancellationSource]:
    """
    Turn Ctrl+C into a cancellation request for the duration of the block.
    """

    def _handler(signum, frame):
        console.log("[yellow]Interrupt received, finishing current segment...[/yellow]")
        source.cancel()

    previous = signal.signal(signal.SIGINT, _handler)
    try:
        yield source
    finally:
        signal.signal(signal.SIGINT, previous)
