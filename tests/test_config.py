# tests/test_config.py

from __future__ import annotations

import pytest

from data_export import config as config_module
from data_export.config import ExportConfig, get_config, load_config
from data_export.core.exceptions import ConfigurationError


def test_default_config_file_loads() -> None:
    cfg = load_config()
    assert "%Misc.FileNumber%" in cfg.file_name_pattern
    assert cfg.max_file_name_length > 0
    assert isinstance(cfg.logging, dict)


def test_get_config_is_cached() -> None:
    assert get_config() is get_config()


def test_env_var_overrides_config_path(tmp_path, monkeypatch) -> None:
    path = tmp_path / "custom.yml"
    path.write_text(
        "naming:\n  file_name_pattern: feed-%Misc.FileNumber%\n  file_extension: .xml\n",
        encoding="utf-8",
    )
    monkeypatch.setenv(config_module.CONFIG_ENV_VAR, str(path))

    cfg = load_config()
    assert cfg.file_name_pattern == "feed-%Misc.FileNumber%"
    assert cfg.file_extension == ".xml"


def test_missing_config_file_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yml")


def test_non_mapping_config_is_rejected(tmp_path) -> None:
    path = tmp_path / "list.yml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_config(path)


def test_empty_sections_fall_back_to_defaults() -> None:
    cfg = ExportConfig({})
    assert cfg.file_name_pattern == "export-%Misc.FileNumber%"
    assert cfg.file_extension == ""
    assert cfg.segment_size == 0
    assert cfg.debug is False
