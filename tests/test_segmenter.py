# tests/test_segmenter.py

from __future__ import annotations

import pytest

from data_export.segmenter import ExportSegmenter, RecordSegmenter, chunk_records


def test_record_segmenter_satisfies_protocol() -> None:
    assert isinstance(RecordSegmenter([], file_index=0), ExportSegmenter)


def test_record_segmenter_exposes_records() -> None:
    seg = RecordSegmenter([{"id": 1}, {"id": 2}], file_index=4)

    assert seg.file_index == 4
    assert seg.record_count == 2
    assert [r["id"] for r in seg.iter_records()] == [1, 2]


def test_dispose_clears_records_and_blocks_reads() -> None:
    seg = RecordSegmenter([{"id": 1}], file_index=0)
    seg.dispose()

    assert seg.disposed
    assert seg.record_count == 0
    with pytest.raises(RuntimeError):
        seg.iter_records()


def test_double_dispose_is_an_error() -> None:
    seg = RecordSegmenter([], file_index=0)
    seg.dispose()
    with pytest.raises(RuntimeError):
        seg.dispose()


def test_chunk_records_splits_sequentially() -> None:
    records = [{"id": i} for i in range(7)]
    chunks = list(chunk_records(records, 3))

    assert [len(c) for c in chunks] == [3, 3, 1]
    assert [r["id"] for c in chunks for r in c] == list(range(7))


def test_chunk_records_single_segment_when_size_not_positive() -> None:
    records = [{"id": i} for i in range(4)]
    assert list(chunk_records(records, 0)) == [records]


def test_chunk_records_empty_input() -> None:
    assert list(chunk_records([], 10)) == []
    assert list(chunk_records(iter([]), 0)) == []
