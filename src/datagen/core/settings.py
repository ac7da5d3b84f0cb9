import json
import pathlib
from typing import Any

import yaml


class ConfigError(ValueError):
    """Raised when a configuration document cannot be loaded or built."""


DEFAULTS: dict[str, Any] = {
    "delimiter": ",",
}


class Settings:
    """
    Loads table configuration documents.
    JSON is the native format; .yaml/.yml files go through PyYAML.
    """

    YAML_SUFFIXES = (".yaml", ".yml")

    def __init__(self, defaults: dict[str, Any] = None):
        self.defaults = DEFAULTS if defaults is None else defaults

    def load(self, path: str) -> dict[str, Any]:
        """
        Reads the document at `path` layered over the defaults.
        """
        return self.merge_configs(self.defaults, self.load_document(path))

    def load_document(self, path: str) -> dict[str, Any]:
        doc_path = pathlib.Path(path)
        if not doc_path.is_file():
            raise ConfigError(f"Configuration file not found: {doc_path}")

        try:
            if doc_path.suffix.lower() in self.YAML_SUFFIXES:
                data = self._read_yaml(doc_path)
            else:
                data = self._read_json(doc_path)
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
            raise ConfigError(f"Malformed configuration in {doc_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read configuration {doc_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(
                f"Configuration in {doc_path} must be a mapping at the top level")
        return data

    def _read_json(self, path: pathlib.Path) -> Any:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _read_yaml(self, path: pathlib.Path) -> Any:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def merge_configs(base: dict, override: dict) -> dict:
        """
        Mezcla recursiva de diccionarios de configuración.
        """
        result = base.copy()
        for key, value in override.items():
            if isinstance(value, dict) and key in result and isinstance(result[key], dict):
                result[key] = Settings.merge_configs(result[key], value)
            else:
                result[key] = value
        return result
