"""Typed generator configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import ujson as json
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator


class TypeMapping(BaseModel):
    """Declared C# types for each primitive JSON kind."""

    text: str = "string"
    number: str = "double"
    boolean: str = "bool"
    generic: str = "object"
    # "{}" is replaced with the element type
    collection: str = "List<{}>"

    model_config = {"extra": "ignore", "frozen": True}

    @field_validator("text", "number", "boolean", "generic")
    @classmethod
    def require_type_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("type names must not be blank")
        return value

    @field_validator("collection")
    @classmethod
    def require_placeholder(cls, value: str) -> str:
        if "{}" not in value:
            raise ValueError("collection must contain a '{}' element placeholder")
        return value

    def collection_of(self, element: str) -> str:
        return self.collection.replace("{}", element)


class GeneratorConfig(BaseModel):
    """Top-level generator settings."""

    indent: int = Field(default=4, ge=1, le=16)
    # None leaves descent unbounded.
    max_depth: int | None = Field(default=None, gt=0)
    request_suffix: str = "Request"
    handler_suffix: str = "Handler"
    file_extension: str = ".cs"
    types: TypeMapping = Field(default_factory=TypeMapping)

    model_config = {"extra": "ignore", "frozen": True}

    @field_validator("file_extension")
    @classmethod
    def require_leading_dot(cls, value: str) -> str:
        if not value.startswith("."):
            raise ValueError("file_extension must start with '.'")
        return value

    def summary(self) -> dict[str, Any]:
        """Return a JSON-friendly summary for display."""
        return {
            "indent": self.indent,
            "max_depth": self.max_depth,
            "root_suffix": self.request_suffix,
            "file": f"<name>{self.handler_suffix}{self.file_extension}",
            "types": self.types.model_dump(),
        }


def load_generator_config(path: str | Path) -> GeneratorConfig:
    """Load a config from YAML or JSON."""
    path = Path(path)
    data: Any
    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix in {".yaml", ".yml"}:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
        return GeneratorConfig(**(data or {}))
    except (TypeError, ValueError, ValidationError, yaml.YAMLError) as exc:
        raise ValueError(f"Invalid config {path}") from exc


def save_generator_config(config: GeneratorConfig, path: str | Path) -> None:
    """Persist a config as YAML or JSON based on file suffix."""
    path = Path(path)
    if path.suffix in {".yaml", ".yml"}:
        path.write_text(yaml.safe_dump(config.model_dump(mode="python"), sort_keys=False))
    else:
        path.write_text(json.dumps(config.model_dump(mode="python"), indent=2))
