"""Validate command for checking design files.

This module provides the `validate` command that checks a design file or
archive for format errors and reports placement problems in its blocks.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from wallcraft.domain import (
    Design,
    DesignArchive,
    PlacementSettings,
    is_overflowing,
    is_valid_horizontal_position,
    is_valid_vertical_position,
    overlaps,
)
from wallcraft.infrastructure import DesignFormatError, JsonDesignCodec

from .common import display_format_error

__all__ = ["find_design_warnings", "validate_command"]


def find_design_warnings(design: Design) -> list[str]:
    """List placement problems of the blocks in a design.

    Reports blocks that overlap each other, blocks outside the overflow
    tolerance derived from the design's templates, and stale overflow flags.
    """
    settings = PlacementSettings.from_templates(design.block_templates)
    warnings: list[str] = []
    blocks = design.blocks
    for i, block in enumerate(blocks):
        for other in blocks[i + 1 :]:
            if overlaps(block, other):
                warnings.append(f"Blocks {block.id} and {other.id} overlap")
        if not (
            is_valid_horizontal_position(block, design.wall, settings.max_block_width)
            and is_valid_vertical_position(block, design.wall, settings.max_block_height)
        ):
            warnings.append(f"Block {block.id} lies outside the tolerated wall bounds")
        if block.is_overflow != is_overflowing(block, design.wall):
            warnings.append(f"Block {block.id} has a stale overflow flag")
    return warnings


def validate_command(
    design_file: Annotated[
        Path,
        typer.Argument(help="Path to the design file or archive to validate"),
    ],
) -> None:
    """Validate a design file.

    Checks the design file for:
    - JSON syntax errors
    - Format errors (missing blocks, blockTemplates or wall dimensions)
    - Overlapping blocks and blocks beyond the overflow tolerance

    Exit codes:
        0 - Design file is valid with no warnings
        1 - Design file has errors (cannot be imported)
        2 - Design file is valid but has warnings

    Example:
        wallcraft validate kitchen.json
    """
    typer.echo(f"Validating {design_file}...")
    typer.echo()

    try:
        result = JsonDesignCodec(keep_ids=True).read(design_file)
    except DesignFormatError as e:
        display_format_error(e)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    designs = result.designs if isinstance(result, DesignArchive) else [result]
    warning_count = 0
    for design in designs:
        warnings = find_design_warnings(design)
        preview = design.preview or design.build_preview()
        typer.echo(
            f"{design.name}: {preview.block_count} blocks on a "
            f"{preview.wall_dimensions} wall, {preview.template_count} templates"
        )
        for warning in warnings:
            typer.echo(f"  Warning: {warning}")
        warning_count += len(warnings)

    typer.echo()
    if warning_count:
        typer.echo(f"Validation passed with {warning_count} warning(s)")
        raise typer.Exit(code=2)
    typer.echo("Validation passed. Design file is valid.")
