"""Store configuration: settings schema and docstore.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "docstore.yaml"
ENV_PREFIX = "DOCSTORE_"


class Settings(BaseModel):
    app_name:  str = "docstore"
    id_prefix: str = Field(default="doc-", min_length=1, description="Text prefix for generated document ids")
    id_start:  int = Field(default=1, ge=1, description="First value of the id counter")


def _read_config_file(path: Path) -> dict[str, Any]:
    """Return the mapping in path, {} if the file is missing or empty."""
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping of settings, got {type(data).__name__}")
    return data


def _read_env() -> dict[str, str]:
    """Collect non-empty DOCSTORE_<FIELD> values for known settings."""
    values = {}
    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            values[name] = val
    return values


def load_config(overrides: dict[str, Any] | None = None, path: str | Path = CONFIG_FILE) -> Settings:
    """Build Settings from the config file, then DOCSTORE_<FIELD> env vars, then non-None overrides.

    Raises ValueError if the config file is not valid YAML or not a mapping;
    out-of-range values raise pydantic's ValidationError.
    """
    data = _read_config_file(Path(path))
    data.update(_read_env())
    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
