"""
enu CLI - Entry point.

Commands operate on an enu.toml manifest (default: ./enu.toml):

- check: build every enum type and report problems
- show: print one enum type as a table or as JSON
- export: write the client-side JSON payload for all enum types
"""

import logging
import os
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from enu._version import get_version
from enu.core.errors import EnuError
from enu.core.export import document_to_json
from enu.core.manifest import DEFAULT_MANIFEST, EnumManifest, build_enums, load_manifest
from enu.core.registry import EnumType

console = Console()

# Environment variable consulted when --verbose is not given
LOG_LEVEL_VAR = "ENU_LOG_LEVEL"

app = typer.Typer(
    help="enu - declarative integer-backed enum types",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"enu {get_version()}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    level_name = "DEBUG" if verbose else os.getenv(LOG_LEVEL_VAR, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """enu CLI main callback for global options."""
    configure_logging(verbose)


def _load(manifest: str) -> tuple[EnumManifest, dict[str, EnumType]]:
    manifest_path = Path(manifest).resolve()
    try:
        mf = load_manifest(manifest_path)
        return mf, build_enums(mf)
    except EnuError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def check(
    manifest: str = typer.Option(DEFAULT_MANIFEST, "--manifest", "-m", help="Path to enu.toml"),
) -> None:
    """
    Build every enum type declared in the manifest.

    Exits with code 1 on the first rejected declaration.
    """
    mf, enums = _load(manifest)

    for enum_type in enums.values():
        default = enum_type.default() if len(enum_type) else "-"
        parent = f" (extends {enum_type.parent.name})" if enum_type.parent is not None else ""
        typer.echo(f"✓ {enum_type.name}{parent}: {len(enum_type)} options, default {default}")

    typer.echo(f"{mf.project.name} {mf.project.version}: {len(enums)} enum types OK")


@app.command()
def show(
    name: str = typer.Argument(..., help="Enum type name"),
    manifest: str = typer.Option(DEFAULT_MANIFEST, "--manifest", "-m", help="Path to enu.toml"),
    format: str = typer.Option("table", "--format", "-f", help="Output format: 'table' or 'json'"),
) -> None:
    """Show the options of one enum type."""
    _, enums = _load(manifest)

    enum_type = enums.get(name)
    if enum_type is None:
        typer.echo(f"Error: unknown enum '{name}'. Available: {', '.join(enums)}", err=True)
        raise typer.Exit(code=1)

    if format == "json":
        typer.echo(enum_type.to_spec().model_dump_json(indent=2))
        return
    if format != "table":
        typer.echo(f"Error: unknown format '{format}'", err=True)
        raise typer.Exit(code=1)

    inherited = enum_type.parent.options() if enum_type.parent is not None else {}
    table = Table(title=enum_type.title or enum_type.name)
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Value", justify="right")
    table.add_column("Inherited")
    for option in enum_type.iterate_indexed():
        table.add_row(
            str(option.position),
            option.name,
            str(option.value),
            "yes" if option.name in inherited else "",
        )
    console.print(table)


@app.command()
def export(
    manifest: str = typer.Option(DEFAULT_MANIFEST, "--manifest", "-m", help="Path to enu.toml"),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output file (default: [export] output, else stdout)"
    ),
    indent: int | None = typer.Option(
        None, "--indent", help="JSON indentation (default: [export] indent, else compact)"
    ),
) -> None:
    """Export {EnumName: {option: option}} JSON for client-side code."""
    mf, enums = _load(manifest)

    effective_indent = indent if indent is not None else mf.export.indent
    content = document_to_json(enums.values(), indent=effective_indent)

    if output is not None:
        output_path = Path(output)
    elif mf.export.output is not None:
        # Manifest paths are relative to the manifest
        output_path = mf.path.parent / mf.export.output
    else:
        typer.echo(content)
        return

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content + "\n", encoding="utf-8")
    typer.echo(f"✓ Exported {len(enums)} enum types to {output_path}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
