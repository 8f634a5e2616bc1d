"""Typed configuration for naming and rendering choices."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import ujson as json
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError
from .naming import artifact_file_name

IDENTIFIER_PART = r"^[A-Za-z0-9_]*$"


class GeneratorConfig(BaseModel):
    """Naming conventions and field ordering for generated artifacts."""

    model_suffix: str = Field(default="Model", pattern=IDENTIFIER_PART)
    file_suffix: str = Field(default="_model")
    extension: str = Field(default=".dart")
    nested_list_suffix: str = Field(default="List", min_length=1, pattern=IDENTIFIER_PART)
    field_order: Literal["document", "sorted"] = "document"

    model_config = {"extra": "forbid", "protected_namespaces": ()}

    @field_validator("extension")
    @classmethod
    def extension_has_dot(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError("extension must start with '.' and be non-empty")
        return value

    def artifact_name(self, schema_name: str) -> str:
        return artifact_file_name(schema_name, self.file_suffix, self.extension)


def load_generator_config(path: str | Path) -> GeneratorConfig:
    """Load a config from YAML or JSON."""
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc
    data: Any
    try:
        if path.suffix in {".yaml", ".yml"}:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, ValueError) as exc:
        raise ConfigError(f"Cannot parse config {path}: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config {path}: expected a mapping")
    try:
        return GeneratorConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config {path}: {exc}") from exc


def save_generator_config(config: GeneratorConfig, path: str | Path) -> None:
    """Persist a config as YAML or JSON based on file suffix."""
    path = Path(path)
    if path.suffix in {".yaml", ".yml"}:
        text = yaml.safe_dump(config.model_dump(mode="python"), sort_keys=False)
    else:
        text = json.dumps(config.model_dump(mode="python"), indent=2)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
    except OSError as exc:
        raise ConfigError(f"Cannot write config {path}: {exc}") from exc
