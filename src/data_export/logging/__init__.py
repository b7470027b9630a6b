"""
Logging package for ``data_export``.

Use ``get_logger("<module>")`` in modules to share the console and run-log
handlers and write to a module-specific log file.
"""

from .logger import get_logger, log_info

__all__ = [
    "get_logger",
    "log_info",
]
