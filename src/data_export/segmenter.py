# src/data_export/segmenter.py

from __future__ import annotations

from itertools import islice
from typing import Any, Iterable, Iterator, List, Mapping, Protocol, Sequence, runtime_checkable


@runtime_checkable
class ExportSegmenter(Protocol):
    """
    What an execution context needs from a segmenter.

    Attributes:
        file_index: Zero-based index of the segment (output file) this
            segmenter currently supplies.
    """

    @property
    def file_index(self) -> int: ...

    def dispose(self) -> None:
        """Release open handles and buffers. Called once by the owning context."""
        ...


class RecordSegmenter:
    """
    Supplies the records of a single output segment.

    Attributes:
        file_index: Zero-based index of the segment.
        records: The records of the segment, in export order.
    """

    def __init__(self, records: Sequence[Mapping[str, Any]], file_index: int = 0):
        self._records: List[Mapping[str, Any]] = list(records)
        self._file_index = file_index
        self._disposed = False

    @property
    def file_index(self) -> int:
        return self._file_index

    @property
    def records(self) -> List[Mapping[str, Any]]:
        return self._records

    @property
    def record_count(self) -> int:
        return len(self._records)

    @property
    def disposed(self) -> bool:
        return self._disposed

    def iter_records(self) -> Iterator[Mapping[str, Any]]:
        if self._disposed:
            raise RuntimeError(f"Segmenter for segment {self._file_index} has been disposed")
        return iter(self._records)

    def dispose(self) -> None:
        if self._disposed:
            raise RuntimeError(f"Segmenter for segment {self._file_index} disposed twice")

        self._records = []
        self._disposed = True

    def __repr__(self) -> str:
        state = "disposed" if self._disposed else f"{len(self._records)} records"
        return f"<RecordSegmenter #{self._file_index}: {state}>"


def chunk_records(
    records: Iterable[Mapping[str, Any]],
    segment_size: int,
) -> Iterator[List[Mapping[str, Any]]]:
    """
    Split ``records`` into sequential segments of at most ``segment_size``.

    A non-positive ``segment_size`` yields everything as one segment. An empty
    input yields nothing.
    """
    if segment_size <= 0:
        everything = list(records)
        if everything:
            yield everything
        return

    it = iter(records)
    while True:
        chunk = list(islice(it, segment_size))
        if not chunk:
            return
        yield chunk
