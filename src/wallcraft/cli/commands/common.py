"""Helpers shared by the wallcraft CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from wallcraft.application.config import ConfigError, load_settings
from wallcraft.domain import Design, DesignArchive, PlacementSettings
from wallcraft.infrastructure import DesignFormatError, JsonDesignCodec, StorageError

__all__ = [
    "display_format_error",
    "exit_on_storage_error",
    "load_design_or_exit",
    "load_settings_or_exit",
    "resolve_settings",
    "write_design",
]


def display_format_error(error: ConfigError | DesignFormatError) -> None:
    """Display a configuration or design file loading error."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation" and error.details:
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            value = detail.get("value")
            typer.echo(f"  {path}: {message}", err=True)
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def load_settings_or_exit(config_file: Path | None) -> PlacementSettings | None:
    """Load settings from --config, or None to derive them from the design."""
    if config_file is None:
        return None
    try:
        return load_settings(config_file)
    except ConfigError as e:
        display_format_error(e)
        raise typer.Exit(code=1)


def resolve_settings(design: Design, settings: PlacementSettings | None) -> PlacementSettings:
    if settings is not None:
        return settings
    return PlacementSettings.from_templates(design.block_templates)


def load_design_or_exit(design_file: Path, codec: JsonDesignCodec | None = None) -> Design:
    """Read a single design file, exiting with code 1 on any error.

    The id stored in the file is kept so that a design written back keeps
    its identity.
    """
    codec = codec or JsonDesignCodec(keep_ids=True)
    try:
        result = codec.read(design_file)
    except DesignFormatError as e:
        display_format_error(e)
        raise typer.Exit(code=1)
    if isinstance(result, DesignArchive):
        typer.echo(
            f"Error: {design_file} is an archive of {len(result.designs)} designs; "
            "expected a single design",
            err=True,
        )
        raise typer.Exit(code=1)
    return result


def write_design(design: Design, output: Path | None) -> None:
    """Write a design to a file, or to stdout without a path."""
    codec = JsonDesignCodec()
    if output is None:
        typer.echo(codec.serialize(design).decode("utf-8"))
        return
    try:
        codec.write(design, output)
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Wrote: {output}")


def exit_on_storage_error(error: StorageError) -> NoReturn:
    typer.echo(f"Error: {error.message}", err=True)
    raise typer.Exit(code=1)
