# tinyclass/cli.py
"""
tinyclass CLI - inspect YAML class schemas.

Commands:
    tinyclass version                       Show version
    tinyclass check SCHEMA                  Linearize every class in a schema
    tinyclass mro SCHEMA CLASS              Print a class's linearization
    tinyclass attributes SCHEMA CLASS       Print every valid attribute
    tinyclass new SCHEMA CLASS key=value    Construct an instance, print its fields
"""

from __future__ import annotations

import importlib.metadata
import logging
from pathlib import Path
from typing import List

import typer
import yaml

from tinyclass.config import ConfigError, build_registry, load_schema
from tinyclass.core import AttributeRegistry, ObjectConstructor, fields_of
from tinyclass.exceptions import TinyClassError, class_label
from tinyclass.logging import configure_logging, get_logger
from tinyclass.logging_tags import CLI

app = typer.Typer(
    name="tinyclass",
    help="tinyclass - declare classes, inspect their C3 order and attributes.",
    no_args_is_help=True,
    add_completion=False,
)
logger = get_logger(__name__)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


def _load(schema_path: Path) -> AttributeRegistry:
    try:
        schema = load_schema(schema_path)
        configure_logging(min(schema.logging.level_number, logging.getLogger().level))
        return build_registry(schema)
    except (ConfigError, TinyClassError) as e:
        logger.error(f"{CLI} Failed to load schema: {e}")
        raise typer.Exit(code=1)


def _require_declared(registry: AttributeRegistry, class_name: str) -> None:
    if not registry.is_declared(class_name):
        logger.error(f"{CLI} Class {class_name!r} is not declared in the schema")
        raise typer.Exit(code=1)


# ---------------------------------------------------------
# Version
# ---------------------------------------------------------
@app.command()
def version() -> None:
    """Show the installed tinyclass version."""
    try:
        v = importlib.metadata.version("tinyclass")
    except importlib.metadata.PackageNotFoundError:
        from tinyclass import __version__ as v
    typer.echo(f"tinyclass version {v}")


# ---------------------------------------------------------
# Hierarchy inspection
# ---------------------------------------------------------
@app.command()
def check(schema_path: Path = typer.Argument(..., help="YAML class schema.")) -> None:
    """Linearize every declared class; fail on inconsistent hierarchies."""
    registry = _load(schema_path)

    failed = 0
    for cls in registry.declared_classes():
        try:
            registry.linearize(cls)
        except TinyClassError as e:
            failed += 1
            typer.echo(f"FAIL {class_label(cls)}: {e}")
        else:
            typer.echo(f"ok   {class_label(cls)}")

    if failed:
        raise typer.Exit(code=1)


@app.command()
def mro(
    schema_path: Path = typer.Argument(..., help="YAML class schema."),
    class_name: str = typer.Argument(..., help="Class to linearize."),
) -> None:
    """Print the C3 linearization of a class, one class per line."""
    registry = _load(schema_path)
    _require_declared(registry, class_name)
    try:
        linearization = registry.linearize(class_name)
    except TinyClassError as e:
        logger.error(f"{CLI} {e}")
        raise typer.Exit(code=1)

    for cls in linearization:
        typer.echo(class_label(cls))


@app.command()
def attributes(
    schema_path: Path = typer.Argument(..., help="YAML class schema."),
    class_name: str = typer.Argument(..., help="Class to inspect."),
) -> None:
    """Print every attribute a class accepts, sorted."""
    registry = _load(schema_path)
    _require_declared(registry, class_name)
    try:
        names = registry.all_attributes_for(class_name)
    except TinyClassError as e:
        logger.error(f"{CLI} {e}")
        raise typer.Exit(code=1)

    for name in sorted(names):
        typer.echo(name)


# ---------------------------------------------------------
# Construction
# ---------------------------------------------------------
@app.command()
def new(
    schema_path: Path = typer.Argument(..., help="YAML class schema."),
    class_name: str = typer.Argument(..., help="Class to construct."),
    assignments: List[str] = typer.Argument(None, help="Attribute values as key=value."),
) -> None:
    """Construct an instance from key=value pairs and print its fields as YAML."""
    registry = _load(schema_path)

    params = {}
    for item in assignments or []:
        key, sep, value = item.partition("=")
        if not sep:
            logger.error(f"{CLI} Expected key=value, got {item!r}")
            raise typer.Exit(code=1)
        params[key] = yaml.safe_load(value) if value else None

    try:
        instance = ObjectConstructor(registry).new(class_name, params)
    except TinyClassError as e:
        logger.error(f"{CLI} {e}")
        raise typer.Exit(code=1)

    typer.echo(yaml.safe_dump(fields_of(instance), sort_keys=True).rstrip())


if __name__ == "__main__":
    app()
