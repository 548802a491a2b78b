"""Placement commands: dropping and moving blocks, checks and layouts."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Annotated

import typer

from wallcraft.application import (
    BlockSizeInput,
    DropBlockCommand,
    GenerateLayoutCommand,
    MoveBlockCommand,
)
from wallcraft.application.templates import TemplateCatalog
from wallcraft.domain import (
    Design,
    PlacementService,
    Position,
    Rect,
    Wall,
    classify_overlap,
    is_horizontally_overflowing,
    is_vertically_overflowing,
)
from wallcraft.infrastructure import new_design_id

from .common import (
    load_design_or_exit,
    load_settings_or_exit,
    resolve_settings,
    write_design,
)

__all__ = ["check", "layout", "place"]


def _fmt(position: Position) -> str:
    return f"({position.x:g}, {position.y:g})"


def place(
    design_file: Annotated[
        Path,
        typer.Argument(help="Design file to place the block in"),
    ],
    x: Annotated[float, typer.Option("--x", help="Requested left edge")],
    y: Annotated[float, typer.Option("--y", help="Requested top edge")],
    template: Annotated[
        str | None,
        typer.Option("--template", "-t", help="Template id to size the new block from"),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option("--width", "-w", help="Block width (instead of --template)"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", "-h", help="Block height (instead of --template)"),
    ] = None,
    color: Annotated[
        str | None,
        typer.Option("--color", help="Fill colour of the new block"),
    ] = None,
    move: Annotated[
        str | None,
        typer.Option("--move", "-m", help="Move the block with this id instead of adding one"),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON placement configuration"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the updated design to this file"),
    ] = None,
) -> None:
    """Drop a new block onto a design, or move an existing one.

    The requested position is resolved the way the editor resolves a drop:
    grid snapping, edge snapping, then the fallback searches.

    Examples:
        wallcraft place kitchen.json --x 40 --y 10 --template template-1
        wallcraft place kitchen.json --x 0 --y 0 --width 30 --height 30 -o out.json
        wallcraft place kitchen.json --x 90 --y 0 --move 3f2a...
    """
    settings = load_settings_or_exit(config_file)
    design = load_design_or_exit(design_file)
    target = Position(x, y)

    if move is not None:
        result = MoveBlockCommand(settings).execute(design, move, target)
        verb = "Moved"
    else:
        size = None
        if width is not None or height is not None:
            if width is None or height is None:
                typer.echo("Error: --width and --height must be given together", err=True)
                raise typer.Exit(code=1)
            size = BlockSizeInput(width=width, height=height)
        result = DropBlockCommand(settings).execute(
            design, target, template_id=template, size=size, color=color
        )
        verb = "Placed"

    if not result.is_valid or result.block is None or result.position is None:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    line = f"{verb} block {result.block.id} at {_fmt(result.position)}"
    if result.was_adjusted:
        line += f" (requested {_fmt(target)})"
    typer.echo(line)
    if result.block.is_overflow:
        typer.echo("Block overflows the wall edge")
    for warning in result.warnings:
        typer.echo(f"Warning: {warning}")

    if output is not None:
        write_design(design, output)


def check(
    design_file: Annotated[
        Path,
        typer.Argument(help="Design file to check against"),
    ],
    x: Annotated[float, typer.Option("--x", help="Left edge")],
    y: Annotated[float, typer.Option("--y", help="Top edge")],
    width: Annotated[float, typer.Option("--width", "-w", help="Block width")],
    height: Annotated[float, typer.Option("--height", "-h", help="Block height")],
    exclude: Annotated[
        str | None,
        typer.Option("--exclude", "-e", help="Id of a block to ignore (the one being moved)"),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON placement configuration"),
    ] = None,
) -> None:
    """Check whether a rectangle can be placed on a design.

    Exit codes:
        0 - The rectangle can be placed
        1 - The input could not be loaded
        2 - The rectangle collides or lies outside the tolerated bounds
    """
    settings = load_settings_or_exit(config_file)
    design = load_design_or_exit(design_file)
    if width <= 0 or height <= 0:
        typer.echo("Error: Block dimensions must be positive", err=True)
        raise typer.Exit(code=1)

    service = PlacementService(resolve_settings(design, settings))
    rect = Rect(x, y, width, height)
    placeable = service.can_place(rect, design.blocks, design.wall, exclude)
    acceptable = service.is_acceptable(rect, design.blocks, design.wall, exclude)

    overflow = [
        side
        for side, flag in (
            ("horizontal", is_horizontally_overflowing(rect, design.wall)),
            ("vertical", is_vertically_overflowing(rect, design.wall)),
        )
        if flag
    ]
    report = classify_overlap(
        rect,
        design.blocks,
        threshold=service.settings.small_overlap_threshold,
        exclude_block_id=exclude,
    )

    typer.echo(f"Collision-free placement: {'yes' if placeable else 'no'}")
    typer.echo(f"Within tolerated bounds: {'yes' if acceptable else 'no'}")
    typer.echo(f"Overflow: {', '.join(overflow) if overflow else 'none'}")
    if report.has_overlap:
        kind = "small" if report.is_small else "significant"
        ids = [b.id for b in report.offenders + report.significant]
        typer.echo(f"Overlap: {kind} ({', '.join(ids)})")
    else:
        typer.echo("Overlap: none")

    if not acceptable:
        raise typer.Exit(code=2)


def layout(
    design_file: Annotated[
        Path | None,
        typer.Argument(help="Design file to fill (omit to start a new design)"),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option("--width", "-w", help="Wall width for a new design"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", "-h", help="Wall height for a new design"),
    ] = None,
    name: Annotated[
        str,
        typer.Option("--name", "-n", help="Name of a new design"),
    ] = "Generated Design",
    max_blocks: Annotated[
        int,
        typer.Option("--max-blocks", "-b", help="Maximum number of blocks"),
    ] = 50,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Random seed for a reproducible layout"),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON placement configuration"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the generated design to this file"),
    ] = None,
) -> None:
    """Generate a random layout, replacing any existing blocks.

    Examples:
        wallcraft layout --width 300 --height 250 --seed 7 -o wall.json
        wallcraft layout kitchen.json --max-blocks 20
    """
    settings = load_settings_or_exit(config_file)
    if design_file is not None:
        design = load_design_or_exit(design_file)
    else:
        if width is None or height is None:
            typer.echo(
                "Error: Provide a design file or both --width and --height", err=True
            )
            raise typer.Exit(code=1)
        try:
            wall = Wall(width, height)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        design = Design(
            id=new_design_id(),
            name=name,
            wall=wall,
            block_templates=TemplateCatalog().default_templates(),
        )

    rng = random.Random(seed) if seed is not None else None
    result = GenerateLayoutCommand(settings, rng=rng).execute(design, max_blocks)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    typer.echo(
        f"Generated {len(result.blocks)} of {result.requested} blocks "
        f"({result.overflow_count} overflowing)"
    )
    for warning in result.warnings:
        typer.echo(f"Warning: {warning}")

    if output is not None:
        write_design(design, output)
