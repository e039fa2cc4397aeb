"""Command-line utilities for the json_dto_codegen package."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer
import ujson as json
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from . import get_version
from .api import generate_from_text, generate_handler_file, load_config, request_type_name
from .config import GeneratorConfig
from .errors import CodegenError, MalformedJsonError

app = typer.Typer(help="Generate C# DTO classes from sample JSON payloads")
console = Console()
err_console = Console(stderr=True)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", exists=True, readable=True, help="Generator config (YAML/JSON)."),
]


def _read_source(json_file: Path | None) -> str:
    if json_file is None:
        return sys.stdin.read()
    if not json_file.exists():
        raise typer.BadParameter(f"{json_file} does not exist")
    try:
        return json_file.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedJsonError(f"{json_file} is not valid UTF-8: {exc}") from exc


def _resolve_config(path: Path | None) -> GeneratorConfig:
    if path is None:
        return GeneratorConfig()
    try:
        return load_config(path)
    except ValueError as exc:
        err_console.print(f"[red]Config error:[/] {exc}")
        raise typer.Exit(code=1) from exc


@app.command()
def version() -> None:
    """Print the installed package version."""
    typer.echo(get_version())


@app.command()
def generate(
    handler_name: Annotated[str, typer.Argument(help="Handler name, e.g. CreateUser.")],
    json_file: Annotated[
        Path | None, typer.Argument(help="Sample JSON payload (stdin when omitted).")
    ] = None,
    out_dir: Annotated[Path, typer.Option(help="Directory receiving the handler file.")] = Path("."),
    config: ConfigOption = None,
) -> None:
    """Write <HANDLER_NAME>Handler.cs containing the request DTOs."""
    cfg = _resolve_config(config)
    try:
        text = _read_source(json_file)
        path = generate_handler_file(text, handler_name, out_dir, cfg)
    except (CodegenError, ValueError) as exc:
        err_console.print(f"[red]Generation failed:[/] {exc}")
        raise typer.Exit(code=1) from exc
    console.print("[bold green]Code generated successfully![/]")
    console.print(f"[bold]Root type:[/] {request_type_name(handler_name, cfg)}")
    console.print(f"[bold]Written:[/] {path}")


@app.command()
def preview(
    base_name: Annotated[str, typer.Argument(help="Name of the root generated type.")],
    json_file: Annotated[
        Path | None, typer.Argument(help="Sample JSON payload (stdin when omitted).")
    ] = None,
    pretty: Annotated[bool, typer.Option(help="Syntax-highlight the output.")] = False,
    config: ConfigOption = None,
) -> None:
    """Print the generated declarations without writing a file."""
    cfg = _resolve_config(config)
    try:
        text = _read_source(json_file)
        code = generate_from_text(text, base_name, cfg)
    except CodegenError as exc:
        err_console.print(f"[red]Generation failed:[/] {exc}")
        raise typer.Exit(code=1) from exc
    if pretty:
        console.print(Syntax(code, "csharp"))
    else:
        typer.echo(code)


@app.command("show-config")
def show_config(config: ConfigOption = None) -> None:
    """Display the effective generator settings."""
    cfg = _resolve_config(config)
    table = Table(title=f"Generator config ({config or 'defaults'})")
    table.add_column("Setting")
    table.add_column("Value")
    for key, value in cfg.summary().items():
        table.add_row(key, json.dumps(value) if isinstance(value, dict) else str(value))
    console.print(table)


@app.command("config-schema")
def config_schema(
    out: Annotated[Path, typer.Argument(help="Output path (usually .json).")],
    pretty: Annotated[bool, typer.Option(help="Write pretty-printed JSON.")] = True,
) -> None:
    """Export the JSON Schema for the generator config."""
    schema = GeneratorConfig.model_json_schema()
    out.write_text(json.dumps(schema, indent=2 if pretty else 0))
    console.print(f"[bold green]Config schema written:[/] {out}")


def main() -> None:
    """Entry point for `python -m json_dto_codegen.cli`."""
    app()


if __name__ == "__main__":
    main()
