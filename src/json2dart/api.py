"""Public API for downstream modules."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import ujson as json
from rich.console import Console

from .codegen import DartModelGenerator
from .config import GeneratorConfig
from .descriptors import Schema
from .emitter import ArtifactEmitter
from .errors import FileOpenError, FileReadError, ParseError
from .inference import SchemaInferrer
from .naming import file_stem

__all__ = [
    "GeneratorConfig",
    "Schema",
    "load_document",
    "infer_schemas",
    "render_schema",
    "generate_models",
]


def load_document(path: str | Path) -> dict[str, Any]:
    """Read and decode a JSON document whose top level is an object."""
    path = Path(path)
    try:
        handle = path.open("rb")
    except OSError as exc:
        raise FileOpenError(f"file open error: {path}: {exc}") from exc
    with handle:
        try:
            raw = handle.read()
        except OSError as exc:
            raise FileReadError(f"file read error: {path}: {exc}") from exc
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise ParseError(f"json decode error in {path}: {exc}") from exc
    if not isinstance(data, dict):
        msg = f"json decode error in {path}: top level must be an object, got {type(data).__name__}"
        raise ParseError(msg)
    return data


def infer_schemas(
    document: dict[str, Any],
    root_name: str,
    config: GeneratorConfig | None = None,
) -> list[Schema]:
    """Infer every schema in ``document`` without rendering anything.

    Schemas are returned in emission order: children before parents, the
    root last.
    """
    config = config or GeneratorConfig()
    schemas: list[Schema] = []
    inferrer = SchemaInferrer(schemas.append, nested_list_suffix=config.nested_list_suffix)
    inferrer.infer(root_name, document)
    return schemas


def render_schema(schema: Schema, config: GeneratorConfig | None = None) -> str:
    """Render one schema to artifact text."""
    return DartModelGenerator(config=config).render(schema)


def generate_models(
    input_path: str | Path,
    out_dir: str | Path | None = None,
    root_name: str | None = None,
    config: GeneratorConfig | None = None,
    console: Console | None = None,
) -> list[Path]:
    """Entry point used by the CLI to run a full generation.

    Artifacts land in ``out_dir``, which defaults to the directory holding
    the input document. Returns the written paths in emission order.
    """
    input_path = Path(input_path)
    config = config or GeneratorConfig()
    document = load_document(input_path)
    emitter = ArtifactEmitter(
        out_dir if out_dir is not None else input_path.parent,
        config=config,
        console=console,
    )
    generator = DartModelGenerator(sink=emitter, config=config)
    inferrer = SchemaInferrer(generator, nested_list_suffix=config.nested_list_suffix)
    inferrer.infer(root_name or file_stem(input_path), document)
    return list(emitter.emitted)
