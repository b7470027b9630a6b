# tests/test_logging.py

from __future__ import annotations

import logging

from data_export.logger import get_logger, log_info


def test_module_loggers_live_under_namespace() -> None:
    log = get_logger("pipeline")
    assert log.name == "data_export.pipeline"
    assert get_logger("data_export.pipeline") is log


def test_root_logger_does_not_propagate() -> None:
    root = get_logger()
    assert root.name == "data_export"
    assert root.propagate is False
    assert get_logger("data_export") is root


def test_module_logger_gets_its_own_file() -> None:
    log = get_logger("naming_preview")
    files = [
        h.baseFilename for h in log.handlers if isinstance(h, logging.FileHandler)
    ]
    assert len(files) == 1
    assert files[0].endswith("data_export_naming_preview.log")


def test_log_info_reaches_run_log(caplog) -> None:
    root = get_logger()
    root.addHandler(caplog.handler)
    try:
        log_info("exported %d records", 3)
    finally:
        root.removeHandler(caplog.handler)

    assert "exported 3 records" in caplog.text
