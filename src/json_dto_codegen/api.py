"""Public API for downstream modules."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any

import ujson as json

from .compiler import ShapeCompiler
from .config import GeneratorConfig, load_generator_config, save_generator_config
from .errors import MalformedJsonError

__all__ = [
    "GeneratorConfig",
    "load_config",
    "save_config",
    "parse_json",
    "generate_code",
    "generate_from_text",
    "request_type_name",
    "handler_file_path",
    "generate_handler_file",
]


def load_config(path: str | Path) -> GeneratorConfig:
    """Read a generator config from disk."""
    return load_generator_config(path)


def save_config(config: GeneratorConfig, path: str | Path) -> None:
    """Persist a generator config to disk."""
    save_generator_config(config, path)


def parse_json(text: str) -> Any:
    """Parse a JSON document after trimming surrounding whitespace."""
    payload = text.strip()
    if not payload:
        raise MalformedJsonError("JSON input is empty")
    try:
        document = json.loads(payload)
    except ValueError as exc:
        raise MalformedJsonError(f"Invalid JSON input: {exc}") from exc
    _reject_non_finite(document)
    return document


def _reject_non_finite(document: Any) -> None:
    """ujson accepts NaN/Infinity literals, which are not JSON."""
    pending = [document]
    while pending:
        value = pending.pop()
        if isinstance(value, float) and not math.isfinite(value):
            raise MalformedJsonError(f"Invalid JSON input: non-finite number {value!r}")
        if isinstance(value, dict):
            pending.extend(value.values())
        elif isinstance(value, list):
            pending.extend(value)


def generate_code(document: Any, base_name: str, config: GeneratorConfig | None = None) -> str:
    """Emit C# declarations for an already-parsed document."""
    return ShapeCompiler(config).generate(document, base_name)


def generate_from_text(text: str, base_name: str, config: GeneratorConfig | None = None) -> str:
    """Parse ``text`` and emit C# declarations rooted at ``base_name``."""
    return generate_code(parse_json(text), base_name, config)


def request_type_name(handler_name: str, config: GeneratorConfig | None = None) -> str:
    """Name of the root generated type for a handler, e.g. ``CreateUserRequest``."""
    cfg = config or GeneratorConfig()
    return f"{handler_name}{cfg.request_suffix}"


def handler_file_path(
    handler_name: str,
    output_dir: str | Path,
    config: GeneratorConfig | None = None,
) -> Path:
    """Destination file for a handler's generated code."""
    cfg = config or GeneratorConfig()
    return Path(output_dir) / f"{handler_name}{cfg.handler_suffix}{cfg.file_extension}"


def generate_handler_file(
    json_text: str,
    handler_name: str,
    output_dir: str | Path,
    config: GeneratorConfig | None = None,
) -> Path:
    """Generate the request DTOs for a handler and write them to disk.

    Nothing is written unless parsing and generation both succeed. Returns the
    path of the written file.
    """
    if not handler_name.strip():
        msg = "Handler name must not be blank"
        raise ValueError(msg)
    code = generate_from_text(json_text, request_type_name(handler_name, config), config)
    out_path = handler_file_path(handler_name, output_dir, config)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(code + "\n", encoding="utf-8")
    return out_path
