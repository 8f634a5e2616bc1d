"""Command-line utilities for the json2dart package."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import get_version
from .api import generate_models, infer_schemas, load_document
from .config import GeneratorConfig, load_generator_config, save_generator_config
from .errors import InputMissing, Json2DartError
from .naming import file_stem, model_type_name, to_camel_case

app = typer.Typer(help="Generate Dart model classes from a sample JSON document")
console = Console()
err_console = Console(stderr=True)

USAGE = "usage: json2dart generate [FILE]"


def _load_config(path: Path | None) -> GeneratorConfig:
    if path is None:
        return GeneratorConfig()
    return load_generator_config(path)


def _fail(exc: Json2DartError) -> typer.Exit:
    err_console.print(f"[bold red]error:[/] {escape(str(exc))}")
    return typer.Exit(code=1)


@app.command()
def version() -> None:
    """Print the installed package version."""
    typer.echo(get_version())


@app.command()
def generate(
    file: Annotated[
        Path | None, typer.Argument(help="Sample JSON document to infer models from.")
    ] = None,
    out_dir: Annotated[
        Path | None,
        typer.Option(help="Directory for generated files (defaults to the input's directory)."),
    ] = None,
    name: Annotated[
        str | None, typer.Option(help="Root schema name (defaults to the input file stem).")
    ] = None,
    config: Annotated[
        Path | None, typer.Option(help="YAML/JSON generator config.")
    ] = None,
) -> None:
    """Infer schemas from FILE and write one model file per schema."""
    try:
        if file is None:
            raise InputMissing(USAGE)
        cfg = _load_config(config)
        written = generate_models(
            file, out_dir=out_dir, root_name=name, config=cfg, console=console
        )
    except Json2DartError as exc:
        raise _fail(exc) from exc
    console.print(f"[bold green]Models written:[/] {len(written)}")


@app.command()
def inspect(
    file: Annotated[Path, typer.Argument(help="Sample JSON document to inspect.")],
    name: Annotated[
        str | None, typer.Option(help="Root schema name (defaults to the input file stem).")
    ] = None,
    config: Annotated[
        Path | None, typer.Option(help="YAML/JSON generator config.")
    ] = None,
) -> None:
    """Print the inferred schemas without writing anything."""
    try:
        cfg = _load_config(config)
        document = load_document(file)
        schemas = infer_schemas(document, name or file_stem(file), config=cfg)
    except Json2DartError as exc:
        raise _fail(exc) from exc
    for schema in schemas:
        table = Table(title=model_type_name(schema.name, cfg.model_suffix))
        table.add_column("Key")
        table.add_column("Field")
        table.add_column("Type")
        for descriptor in schema.ordered(cfg.field_order):
            table.add_row(
                escape(descriptor.name),
                escape(to_camel_case(descriptor.name)),
                escape(descriptor.describe()),
            )
        console.print(table)


@app.command("init-config")
def init_config(
    out: Annotated[Path, typer.Argument(help="Config path to write (.yaml/.yml or .json).")] = Path(
        "json2dart.yaml"
    ),
    force: Annotated[bool, typer.Option(help="Overwrite an existing file.")] = False,
) -> None:
    """Write a generator config holding the default settings."""
    if out.exists() and not force:
        raise typer.BadParameter(f"{out} already exists (use --force to overwrite)")
    try:
        save_generator_config(GeneratorConfig(), out)
    except Json2DartError as exc:
        raise _fail(exc) from exc
    console.print(f"[bold green]Config written:[/] {escape(str(out))}")
