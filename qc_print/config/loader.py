from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import LayoutConfig, PrintConfig

"""Config loader.

Responsibilities:
- Load the YAML config (default ``config/qc_print.yml``)
- Validate it against ``config_schema.json`` shipped with this package
- Apply defaults for optional keys
"""

DEFAULT_CONFIG_PATH = Path("config/qc_print.yml")
SCHEMA_PATH = Path(__file__).parent / "config_schema.json"


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: If the schema file is missing or not valid JSON, or if the
            config data fails validation (missing required keys, wrong types,
            unknown keys).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def default_config() -> PrintConfig:
    """Built-in configuration used when no config file exists."""
    return PrintConfig(source_directory="./data")


def load_config(path: Path) -> PrintConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")

    _validate_config_schema(data)

    layout_raw = data.get("layout") or {}
    try:
        layout = LayoutConfig(**layout_raw)
    except ValueError as e:
        raise ConfigError(f"invalid layout: {e}") from e

    defaults = default_config()
    return PrintConfig(
        source_directory=data["source_directory"],
        output_directory=data.get("output_directory", defaults.output_directory),
        title=data.get("title", defaults.title),
        layout=layout,
    )
