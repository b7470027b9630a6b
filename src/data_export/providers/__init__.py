"""
Providers package.

Re-exports the export providers the pipeline can drive.
"""

from __future__ import annotations

from .base import ExportProvider, get_provider
from .csv_provider import CsvExportProvider
from .json_provider import JsonExportProvider

__all__ = [
    "ExportProvider",
    "CsvExportProvider",
    "JsonExportProvider",
    "get_provider",
]
