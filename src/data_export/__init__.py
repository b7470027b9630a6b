"""
data_export: run-scoped execution context for segmented batch exports.

Typical use:

    from data_export import CancellationSource, ExportPipeline, create_context
    from data_export.providers import JsonExportProvider

    source = CancellationSource()
    ctx = create_context("out", cancellation=source.token, file_extension=".json")
    result = ExportPipeline(ctx, JsonExportProvider(), segment_size=500).run(records)
"""

__version__ = "0.1.0"

from data_export.cancellation import CancellationSource, CancellationToken
from data_export.core.context import ExecutionContext, SegmenterSlot
from data_export.core.exceptions import (
    ConfigurationError,
    ContextClosedError,
    ExportContextError,
    ExportPipelineError,
    InvalidIncrementError,
    InvalidSegmentIndexError,
    SegmenterNotAttachedError,
    SegmenterReleaseError,
    SegmenterAlreadyReleasedError,
)
from data_export.core.pipeline import ExportPipeline, ExportResult, create_context
from data_export.naming import FILE_NUMBER_PLACEHOLDER, resolve_file_name, sanitize_file_name
from data_export.segmenter import ExportSegmenter, RecordSegmenter, chunk_records

__all__ = [
    "__version__",
    "CancellationSource",
    "CancellationToken",
    "ExecutionContext",
    "SegmenterSlot",
    "ExportPipeline",
    "ExportResult",
    "create_context",
    "ExportSegmenter",
    "RecordSegmenter",
    "chunk_records",
    "FILE_NUMBER_PLACEHOLDER",
    "resolve_file_name",
    "sanitize_file_name",
    "ConfigurationError",
    "ContextClosedError",
    "ExportContextError",
    "ExportPipelineError",
    "InvalidIncrementError",
    "InvalidSegmentIndexError",
    "SegmenterNotAttachedError",
    "SegmenterReleaseError",
    "SegmenterAlreadyReleasedError",
]
