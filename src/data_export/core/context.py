from __future__ import annotations

import enum
import os
import weakref
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from data_export.cancellation import CancellationToken
from data_export.core.exceptions import (
    ContextClosedError,
    InvalidIncrementError,
    SegmenterAlreadyReleasedError,
    SegmenterNotAttachedError,
    SegmenterReleaseError,
)
from data_export.logger import get_logger
from data_export.naming import resolve_file_name
from data_export.segmenter import ExportSegmenter

_EMPTY: Mapping[str, Any] = MappingProxyType({})


class SegmenterSlot(enum.Enum):
    EMPTY = "empty"
    OWNED = "owned"
    RELEASED = "released"


class ExecutionContext:
    """
    Run-scoped state handed to an export provider.

    One context is created per export run. It owns the active segmenter
    (releasing the previous one whenever a new one is attached), derives the
    output file name of the current segment, exposes the cancellation flag,
    and carries the success counter and a free-form property bag.

    Only the segmenter, ``successful_exported_records`` and
    ``custom_properties`` change during a run, and only from the thread
    driving it. ``is_canceled()`` is the one member safe to read from any
    thread.
    """

    def __init__(
        self,
        folder: str | os.PathLike,
        *,
        file_name_pattern: str,
        file_extension: str = "",
        max_file_name_length: int = 0,
        cancellation: Optional[CancellationToken] = None,
        store: Optional[Mapping[str, Any]] = None,
        customer: Optional[Mapping[str, Any]] = None,
        currency: Optional[Mapping[str, Any]] = None,
        language_id: int = 0,
        configuration_data: Any = None,
        logger: Any = None,
    ):
        self._folder = os.fspath(folder)
        self._file_name_pattern = file_name_pattern
        self._file_extension = file_extension or ""
        self._max_file_name_length = int(max_file_name_length)

        self._cancellation = cancellation if cancellation is not None else CancellationToken.none()

        self._store = _read_only(store)
        self._customer = _read_only(customer)
        self._currency = _read_only(currency)
        self._language_id = int(language_id)
        self._configuration_data = configuration_data

        self.log = logger if logger is not None else get_logger("context")

        self._segmenter: Optional[ExportSegmenter] = None
        self._slot = SegmenterSlot.EMPTY
        self._released: "weakref.WeakSet[ExportSegmenter]" = weakref.WeakSet()
        self._released_strong: List[ExportSegmenter] = []
        self._custom_properties: Dict[str, Any] = {}
        self._successful_exported_records = 0

    # ---------------------------------------------------------
    # Segmenter ownership
    # ---------------------------------------------------------
    @property
    def segmenter(self) -> Optional[ExportSegmenter]:
        return self._segmenter

    @property
    def segmenter_state(self) -> SegmenterSlot:
        return self._slot

    def attach_segmenter(self, new_segmenter: ExportSegmenter) -> None:
        """
        Take ownership of ``new_segmenter``, releasing the current one first.

        If the previous segmenter fails while disposing, ``new_segmenter`` is
        owned anyway and ``SegmenterReleaseError`` is raised afterwards.
        """
        if self._slot is SegmenterSlot.RELEASED:
            raise ContextClosedError("Execution context is closed; cannot attach a segmenter")
        if new_segmenter is None:
            raise TypeError("attach_segmenter() requires a segmenter, got None")

        previous = self._segmenter
        if previous is new_segmenter:
            return
        if self._was_released(new_segmenter):
            raise SegmenterAlreadyReleasedError(
                f"Segmenter {new_segmenter!r} was already released by this context"
            )

        release_error: Optional[BaseException] = None
        if previous is not None:
            try:
                self._release(previous)
            except Exception as exc:
                release_error = exc
                self.log.exception("Releasing segmenter %r failed", previous)

        self._segmenter = new_segmenter
        self._slot = SegmenterSlot.OWNED
        self.log.debug("Attached segmenter %r", new_segmenter)

        if release_error is not None:
            raise SegmenterReleaseError(
                f"Segmenter {previous!r} failed during teardown: {release_error}",
                segmenter=previous,
            ) from release_error

    def close(self) -> None:
        """
        End of run: release the owned segmenter. Safe to call more than once.

        A teardown failure is logged and re-raised as ``SegmenterReleaseError``;
        the context is closed either way.
        """
        if self._slot is SegmenterSlot.RELEASED:
            return

        segmenter, self._segmenter = self._segmenter, None
        self._slot = SegmenterSlot.RELEASED

        if segmenter is None:
            return

        try:
            self._release(segmenter)
        except Exception as exc:
            self.log.exception("Releasing segmenter %r on close failed", segmenter)
            raise SegmenterReleaseError(
                f"Segmenter {segmenter!r} failed during teardown: {exc}",
                segmenter=segmenter,
            ) from exc

    def _release(self, segmenter: ExportSegmenter) -> None:
        # Recorded before dispose() so a failed teardown is never retried.
        try:
            self._released.add(segmenter)
        except TypeError:
            self._released_strong.append(segmenter)
        segmenter.dispose()

    def _was_released(self, segmenter: ExportSegmenter) -> bool:
        try:
            if segmenter in self._released:
                return True
        except TypeError:
            pass
        return any(s is segmenter for s in self._released_strong)

    def __enter__(self) -> "ExecutionContext":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ---------------------------------------------------------
    # File naming
    # ---------------------------------------------------------
    def current_file_name(self) -> str:
        """Resolve the file name of the segment the current segmenter supplies."""
        segmenter = self._segmenter
        if segmenter is None:
            raise SegmenterNotAttachedError(
                "No segmenter attached; the current file index is undefined"
            )

        return resolve_file_name(
            self._file_name_pattern,
            segmenter.file_index,
            self._file_extension,
            self._max_file_name_length,
        )

    def current_file_path(self) -> str:
        return os.path.join(self._folder, self.current_file_name())

    @property
    def file_name(self) -> str:
        return self.current_file_name()

    @property
    def file_path(self) -> str:
        return self.current_file_path()

    # ---------------------------------------------------------
    # Cancellation
    # ---------------------------------------------------------
    def is_canceled(self) -> bool:
        return self._cancellation.is_cancellation_requested

    @property
    def canceled(self) -> bool:
        return self.is_canceled()

    # ---------------------------------------------------------
    # Counters and custom data
    # ---------------------------------------------------------
    @property
    def successful_exported_records(self) -> int:
        return self._successful_exported_records

    def increment_success_count(self, n: int = 1) -> int:
        if n < 0:
            raise InvalidIncrementError(f"Success count cannot be decremented (n={n})")

        self._successful_exported_records += n
        return self._successful_exported_records

    @property
    def custom_properties(self) -> Dict[str, Any]:
        return self._custom_properties

    # ---------------------------------------------------------
    # Read-only run metadata
    # ---------------------------------------------------------
    @property
    def folder(self) -> str:
        return self._folder

    @property
    def file_name_pattern(self) -> str:
        return self._file_name_pattern

    @property
    def file_extension(self) -> str:
        return self._file_extension

    @property
    def max_file_name_length(self) -> int:
        return self._max_file_name_length

    @property
    def store(self) -> Mapping[str, Any]:
        return self._store

    @property
    def customer(self) -> Mapping[str, Any]:
        return self._customer

    @property
    def currency(self) -> Mapping[str, Any]:
        return self._currency

    @property
    def language_id(self) -> int:
        return self._language_id

    @property
    def configuration_data(self) -> Any:
        return self._configuration_data

    def __repr__(self) -> str:
        return (
            f"<ExecutionContext folder={self._folder!r} segmenter={self._slot.value} "
            f"exported={self._successful_exported_records}>"
        )


def _read_only(record: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    if record is None:
        return _EMPTY
    return MappingProxyType(dict(record))
