"""
base.py
Contract between the export pipeline and the providers that write files.

A provider is handed the run's ``ExecutionContext`` once per segment. It reads
the records of ``context.segmenter``, writes them to ``context.file_path``,
polls ``context.is_canceled()`` between records and calls
``context.increment_success_count()`` for every record written.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Protocol, Type

if TYPE_CHECKING:
    from data_export.core.context import ExecutionContext


class ExportProvider(Protocol):
    name: str
    file_extension: str

    def execute(self, context: "ExecutionContext") -> None:
        ...


def get_provider(name: str, **kwargs) -> ExportProvider:
    """Instantiate a provider by its short name (``json`` or ``csv``)."""
    from .csv_provider import CsvExportProvider
    from .json_provider import JsonExportProvider

    providers: Dict[str, Type] = {
        JsonExportProvider.name: JsonExportProvider,
        CsvExportProvider.name: CsvExportProvider,
    }

    try:
        provider_cls = providers[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown export provider {name!r}. Expected one of: {', '.join(sorted(providers))}"
        ) from None

    return provider_cls(**kwargs)
