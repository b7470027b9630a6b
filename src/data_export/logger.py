"""
Short import path for the logging package.

    from data_export.logger import get_logger
"""

from data_export.logging import get_logger, log_info

__all__ = [
    "get_logger",
    "log_info",
]
