"""Designs commands for managing the saved design store.

Saved designs are addressed by their index in the store, as listed by
`wallcraft designs list`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from wallcraft.domain import DesignArchive
from wallcraft.infrastructure import (
    DEFAULT_STORE_PATH,
    DesignFormatError,
    JsonDesignCodec,
    JsonDesignStorage,
    StorageError,
)

from .common import display_format_error, exit_on_storage_error, load_design_or_exit

designs_app = typer.Typer(
    name="designs",
    help="Manage saved wall designs.",
)

StoreOption = Annotated[
    Path,
    typer.Option("--store", "-s", help="Path to the design store file"),
]


@designs_app.command(name="list")
def list_designs(store: StoreOption = DEFAULT_STORE_PATH) -> None:
    """List saved designs with their index."""
    try:
        designs = JsonDesignStorage(store).load()
    except StorageError as e:
        exit_on_storage_error(e)

    if not designs:
        typer.echo("No saved designs.")
        return

    for index, design in enumerate(designs):
        preview = design.preview or design.build_preview()
        created = design.created_at.strftime("%Y-%m-%d %H:%M")
        typer.echo(
            f"  [{index}] {design.name} - {preview.block_count} blocks, "
            f"{preview.wall_dimensions}, created {created}"
        )


@designs_app.command(name="show")
def show_design(
    index: Annotated[int, typer.Argument(help="Index of the design")],
    store: StoreOption = DEFAULT_STORE_PATH,
) -> None:
    """Print a saved design as JSON."""
    try:
        design = JsonDesignStorage(store).get(index)
    except StorageError as e:
        exit_on_storage_error(e)
    typer.echo(JsonDesignCodec().serialize(design).decode("utf-8"))


@designs_app.command(name="save")
def save_design(
    design_file: Annotated[Path, typer.Argument(help="Design file to save")],
    store: StoreOption = DEFAULT_STORE_PATH,
) -> None:
    """Save a design file into the store, replacing a design with the same id."""
    design = load_design_or_exit(design_file)
    try:
        JsonDesignStorage(store).save(design)
    except StorageError as e:
        exit_on_storage_error(e)
    typer.echo(f"Saved design '{design.name}'")


@designs_app.command(name="delete")
def delete_design(
    index: Annotated[int, typer.Argument(help="Index of the design")],
    store: StoreOption = DEFAULT_STORE_PATH,
) -> None:
    """Delete a saved design."""
    try:
        removed = JsonDesignStorage(store).delete(index)
    except StorageError as e:
        exit_on_storage_error(e)
    typer.echo(f"Deleted design '{removed.name}'")


@designs_app.command(name="import")
def import_designs(
    design_file: Annotated[
        Path,
        typer.Argument(help="Design file or archive to import"),
    ],
    overwrite: Annotated[
        bool,
        typer.Option("--overwrite", help="Replace saved designs with the same name"),
    ] = False,
    store: StoreOption = DEFAULT_STORE_PATH,
) -> None:
    """Import a design file or archive into the store.

    Designs whose name is already saved are skipped unless --overwrite is
    given.
    """
    codec = JsonDesignCodec()
    try:
        result = codec.read(design_file)
    except DesignFormatError as e:
        display_format_error(e)
        raise typer.Exit(code=1)

    designs = result.designs if isinstance(result, DesignArchive) else [result]
    try:
        summary = JsonDesignStorage(store).import_batch(designs, overwrite=overwrite)
    except StorageError as e:
        exit_on_storage_error(e)

    typer.echo(
        f"Imported {summary.imported}, overwrote {summary.overwritten}, "
        f"skipped {summary.skipped} design(s)"
    )


@designs_app.command(name="export")
def export_designs(
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="File to write"),
    ],
    index: Annotated[
        int | None,
        typer.Option("--index", "-i", help="Export only this design"),
    ] = None,
    store: StoreOption = DEFAULT_STORE_PATH,
) -> None:
    """Export one saved design, or all of them as an archive."""
    storage = JsonDesignStorage(store)
    try:
        if index is not None:
            payload = storage.get(index)
            count = 1
        else:
            designs = storage.load()
            payload = DesignArchive(designs=designs)
            count = len(designs)
    except StorageError as e:
        exit_on_storage_error(e)

    try:
        JsonDesignCodec().write(payload, output)
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Exported {count} design{'' if count == 1 else 's'} to {output}")
