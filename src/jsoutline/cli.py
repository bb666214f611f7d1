import json

from dataclasses import asdict
from rich.console import Console
from rich.table import Table
from typing import Optional

import typer

from jsoutline import __version__
from jsoutline.info import get_entity_info, get_file_outline
from jsoutline.locate import locate_entity
from jsoutline.repository import RepositoryNotFoundError

app = typer.Typer(
    help="jsoutline - structural outlines of JavaScript source files",
    no_args_is_help=True,
)

console = Console()


def _filter_none(d):
    """Drop None values so absent optional fields are omitted from JSON."""
    if isinstance(d, dict):
        return {k: _filter_none(v) for k, v in d.items() if v is not None}
    elif isinstance(d, (list, tuple)):
        return [_filter_none(item) for item in d]
    else:
        return d


def _extent(element) -> str:
    return f"{element.extent.start}-{element.extent.end}"


@app.command()
def outline(
    file_path: str,
    as_json: bool = typer.Option(False, "--json", "-j", help="Output full parse result as JSON"),
):
    """Show the classes, functions, methods, imports and exports of a file.

    Args:
        file_path: Path to a JavaScript file
    """
    try:
        result = get_file_outline(file_path)
    except (FileNotFoundError, ValueError, RepositoryNotFoundError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    if as_json:
        typer.echo(json.dumps(_filter_none(result.to_dict()), indent=2))
        return

    table = Table(title=file_path)
    table.add_column("Kind")
    table.add_column("Signature")
    table.add_column("Extent")
    table.add_column("Summary")
    for element in result.elements:
        signature = element.signature
        if element.class_name:
            signature = f"{element.class_name}.{signature}"
        table.add_row(element.kind, signature, _extent(element), element.summary or "")
    console.print(table)

    for edge in result.imports:
        console.print(f"import [bold]{edge.source}[/bold] (line {edge.extent.start})")
    for edge in result.exports:
        names = ", ".join(item.public_name for item in edge.exported_items)
        console.print(f"export {edge.kind}: {names} (line {edge.extent.start})")


@app.command()
def info(location: str):
    """Get detailed information about a declaration.

    Args:
        location: Path to entity in format "file_path:entity_name"
                 (entity_name may be "Class.method")

    Examples:
        jsoutline info src/session.js:validateSession
        jsoutline info src/session.js:Session.refresh
    """
    if ":" not in location:
        typer.echo("Error: Expected location in format file_path:entity_name", err=True)
        raise typer.Exit(code=1)

    file_path, entity_name = location.rsplit(":", 1)
    if not entity_name:
        typer.echo("Error: Entity name is empty", err=True)
        raise typer.Exit(code=1)

    try:
        element = get_entity_info(file_path, entity_name)
    except (FileNotFoundError, ValueError, RepositoryNotFoundError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    if element is None:
        typer.echo(f"Error: Entity '{entity_name}' not found in {file_path}", err=True)
        raise typer.Exit(code=1)

    # Wrap in discriminated structure
    output = {element.kind: _filter_none(asdict(element))}
    typer.echo(json.dumps(output, indent=2))


@app.command()
def locate(
    entity_name: str,
    as_json: bool = typer.Option(False, "--json", "-j", help="Output results as JSON"),
):
    """Locate classes, functions and methods by name.

    Args:
        entity_name: The name of the entity to search for
    """
    try:
        elements = locate_entity(entity_name)
    except RepositoryNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    if as_json:
        results = [
            {"kind": e.kind, "path": e.path, "extent": asdict(e.extent)}
            for e in elements
        ]
        typer.echo(json.dumps(results, indent=2))
        return

    table = Table()
    table.add_column("Kind")
    table.add_column("Path")
    table.add_column("Extent")
    for element in elements:
        table.add_row(element.kind, element.path, _extent(element))
    console.print(table)


def _version_callback(value: bool):
    """Show version and exit."""
    if value:
        console.print(f"jsoutline version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    )):
    pass
