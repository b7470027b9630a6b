from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Mapping, Optional

from data_export.cancellation import CancellationToken
from data_export.config import get_config
from data_export.core.context import ExecutionContext
from data_export.core.exceptions import ExportPipelineError, SegmenterReleaseError
from data_export.logger import get_logger
from data_export.providers.base import ExportProvider
from data_export.segmenter import ExportSegmenter, RecordSegmenter, chunk_records

log = get_logger("pipeline")


@dataclass
class ExportResult:
    """Outcome of one export run."""

    files: List[str] = field(default_factory=list)
    segments: int = 0
    successful_exported_records: int = 0
    canceled: bool = False
    release_errors: List[str] = field(default_factory=list)


def create_context(
    folder: Optional[str | os.PathLike] = None,
    *,
    config: Any = None,
    cancellation: Optional[CancellationToken] = None,
    **overrides: Any,
) -> ExecutionContext:
    """
    Build an ``ExecutionContext`` from configuration defaults.

    ``overrides`` are passed straight to ``ExecutionContext``; ``None`` values
    fall back to the ``naming`` and ``export`` sections of the configuration.
    """
    cfg = config if config is not None else get_config()
    options = {k: v for k, v in overrides.items() if v is not None}

    options.setdefault("file_name_pattern", cfg.file_name_pattern)
    options.setdefault("file_extension", cfg.file_extension)
    options.setdefault("max_file_name_length", cfg.max_file_name_length)
    options.setdefault("language_id", int(cfg.export.get("language_id", 0)))

    target = os.path.abspath(os.fspath(folder if folder is not None else cfg.output_dir))
    return ExecutionContext(target, cancellation=cancellation, **options)


class ExportPipeline:
    """
    Drives a single export run.
    Segmenting, naming and writing live in their own modules; this class only
    sequences them and guarantees the context is closed at the end.
    """

    def __init__(
        self,
        context: ExecutionContext,
        provider: ExportProvider,
        segment_size: int = 0,
        segmenter_factory: Callable[..., ExportSegmenter] = RecordSegmenter,
    ):
        self.ctx = context
        self.provider = provider
        self.segment_size = segment_size
        self.segmenter_factory = segmenter_factory
        self.log = log

    def run(self, records: Iterable[Mapping[str, Any]]) -> ExportResult:
        result = ExportResult()
        provider_name = getattr(self.provider, "name", type(self.provider).__name__)
        self.log.info("Export run starting (provider=%s, folder=%s)", provider_name, self.ctx.folder)

        try:
            for file_index, chunk in enumerate(chunk_records(records, self.segment_size)):
                if self.ctx.is_canceled():
                    result.canceled = True
                    self.log.info("Export canceled before segment %d", file_index)
                    break

                try:
                    self.ctx.attach_segmenter(self.segmenter_factory(chunk, file_index=file_index))
                except SegmenterReleaseError as exc:
                    # New segmenter is owned already; keep going.
                    self.log.warning("Continuing after segmenter teardown failure: %s", exc)
                    result.release_errors.append(str(exc))

                exported_before = self.ctx.successful_exported_records
                try:
                    self.provider.execute(self.ctx)
                except Exception as exc:
                    self.log.exception("Provider %s failed on segment %d", provider_name, file_index)
                    raise ExportPipelineError(
                        f"Provider {provider_name} failed on segment {file_index}: {exc}"
                    ) from exc

                result.files.append(self.ctx.current_file_path())
                result.segments += 1

                # Provider stopped inside the segment.
                exported = self.ctx.successful_exported_records - exported_before
                if self.ctx.is_canceled() and exported < len(chunk):
                    result.canceled = True
                    self.log.info("Export canceled during segment %d", file_index)
                    break

        finally:
            try:
                self.ctx.close()
            except SegmenterReleaseError as exc:
                self.log.warning("Segmenter teardown failed at end of run: %s", exc)
                result.release_errors.append(str(exc))

            result.successful_exported_records = self.ctx.successful_exported_records
            self.log.info(
                "Export run finished: %d segment(s), %d record(s) exported%s",
                result.segments,
                result.successful_exported_records,
                " (canceled)" if result.canceled else "",
            )

        return result
