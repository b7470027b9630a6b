import os
from pathlib import Path

import yaml

from data_export.core.exceptions import ConfigurationError

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "data_export.yml"
CONFIG_ENV_VAR = "DATA_EXPORT_CONFIG"


class ExportConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.naming = data.get("naming", {}) or {}
        self.export = data.get("export", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.debug = data.get("debug", False)

    @property
    def file_name_pattern(self) -> str:
        return str(self.naming.get("file_name_pattern", "export-%Misc.FileNumber%"))

    @property
    def file_extension(self) -> str:
        return str(self.naming.get("file_extension", ""))

    @property
    def max_file_name_length(self) -> int:
        return int(self.naming.get("max_file_name_length", 120))

    @property
    def segment_size(self) -> int:
        return int(self.export.get("segment_size", 0))

    @property
    def output_dir(self) -> str:
        return str(self.paths.get("output_dir", "outputs"))


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else DEFAULT_CONFIG_PATH


def load_config(path=None) -> 'ExportConfig':
    path = Path(path) if path is not None else config_path()
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file must contain a mapping: {path}")

    return ExportConfig(data)

_config_cache = None

def get_config() -> 'ExportConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
