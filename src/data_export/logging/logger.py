"""
Logging setup for data_export.

Every logger lives under the ``data_export`` namespace. The namespace root
writes to the console and to a run log (``logs/data_export.log`` by default);
each module logger adds its own ``logs/data_export_<module>.log``. Level,
file name, directory and rotation come from the ``logging`` section of
``config/data_export.yml``; ``debug: true`` forces DEBUG.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Optional

from data_export.config import get_config

PROJECT_ROOT = Path(__file__).resolve().parents[3]
NAMESPACE = "data_export"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ROTATE_MAX_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5


@dataclass(frozen=True)
class LogSettings:
    level: int
    console_level: int
    log_dir: Path
    run_log: str
    rotate: bool

    @classmethod
    def from_config(cls, cfg) -> "LogSettings":
        debug = bool(getattr(cfg, "debug", False))
        level_name = str(cfg.logging.get("level", "INFO")).upper()
        level = logging.DEBUG if debug else getattr(logging, level_name, logging.INFO)

        log_dir = Path(cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs")
        if not log_dir.is_absolute():
            log_dir = PROJECT_ROOT / log_dir

        return cls(
            level=level,
            console_level=logging.DEBUG if debug else logging.INFO,
            log_dir=log_dir,
            run_log=str(cfg.logging.get("file", "data_export.log")),
            rotate=bool(cfg.logging.get("rotate", False)),
        )

    def file_handler(self, filename: str) -> logging.Handler:
        self.log_dir.mkdir(parents=True, exist_ok=True)
        path = self.log_dir / filename

        if self.rotate:
            handler: logging.Handler = RotatingFileHandler(
                path,
                maxBytes=ROTATE_MAX_BYTES,
                backupCount=ROTATE_BACKUPS,
                encoding="utf-8",
            )
        else:
            handler = logging.FileHandler(path, encoding="utf-8")

        handler.setLevel(self.level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        return handler


_settings: Optional[LogSettings] = None
_loggers: Dict[str, Logger] = {}


def _namespace_logger() -> Logger:
    """Configure the ``data_export`` root logger on first use."""
    global _settings

    root = logging.getLogger(NAMESPACE)
    if _settings is not None:
        return root

    settings = LogSettings.from_config(get_config())
    root.setLevel(settings.level)
    root.propagate = False
    root.addHandler(settings.file_handler(settings.run_log))

    console = StreamHandler()
    console.setLevel(settings.console_level)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(console)

    _settings = settings
    _loggers[NAMESPACE] = root
    return root


def get_logger(name: str | None = None) -> Logger:
    """Return ``data_export.<name>``, creating its module log file once.

    ``name`` may be given with or without the ``data_export.`` prefix; no
    name returns the namespace root.
    """
    root = _namespace_logger()
    if not name or name == NAMESPACE:
        return root

    full_name = name if name.startswith(NAMESPACE + ".") else f"{NAMESPACE}.{name}"
    if full_name in _loggers:
        return _loggers[full_name]

    logger = logging.getLogger(full_name)
    logger.setLevel(_settings.level)
    logger.addHandler(_settings.file_handler(f"{full_name.replace('.', '_')}.log"))
    logger.propagate = True

    _loggers[full_name] = logger
    return logger


def log_info(message: str, *args, **kwargs) -> None:
    """Write an INFO record to the run log."""
    _namespace_logger().info(message, *args, **kwargs)
