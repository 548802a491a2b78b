"""Application commands (use cases) for editing wall designs."""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import Callable, Sequence

from wallcraft.domain import (
    Block,
    Design,
    PlacementService,
    PlacementSettings,
    Position,
    Rect,
    Size,
    classify_overlap,
    is_overflowing,
)
from wallcraft.domain.services import LayoutGenerator, new_block_id

from .dtos import BlockSizeInput, LayoutOutput, PlacementOutput

logger = logging.getLogger(__name__)


def _settings_for(design: Design, settings: PlacementSettings | None) -> PlacementSettings:
    """Explicit settings win; otherwise tolerances follow the design's templates."""
    if settings is not None:
        return settings
    return PlacementSettings.from_templates(design.block_templates)


class DropBlockCommand:
    """Command to drop a new block onto a design.

    The block is sized either from one of the design's templates or from an
    explicit size, placed at the resolved drop position and appended to the
    design.
    """

    def __init__(
        self,
        settings: PlacementSettings | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self.settings = settings
        self.id_factory = id_factory or new_block_id

    def execute(
        self,
        design: Design,
        target: Position,
        template_id: str | None = None,
        size: BlockSizeInput | None = None,
        color: str | None = None,
    ) -> PlacementOutput:
        """Execute the drop.

        Args:
            design: Design to add the block to. Modified in place on success.
            target: Requested top-left position.
            template_id: Id of a template in the design's catalog.
            size: Explicit block size, used when no template is given.
            color: Fill colour override.

        Returns:
            PlacementOutput with the new block, or errors.
        """
        errors: list[str] = []
        fill = color
        if template_id is not None and size is None:
            template = design.find_template(template_id)
            if template is None:
                return PlacementOutput(
                    requested=target, errors=[f"Unknown template: {template_id}"]
                )
            block_size = template.size
            fill = fill or template.color
        elif size is not None and template_id is None:
            errors.extend(size.validate())
            if errors:
                return PlacementOutput(requested=target, errors=errors)
            block_size = Size(size.width, size.height)
        else:
            errors.append("Specify exactly one of template_id or size")
            return PlacementOutput(requested=target, errors=errors)

        if not block_size.fits_within(design.wall):
            return PlacementOutput(
                requested=target,
                errors=[
                    f"Block size {block_size.width:g}x{block_size.height:g} does not "
                    f"fit on a {design.wall.width:g}x{design.wall.height:g} wall"
                ],
            )

        service = PlacementService(_settings_for(design, self.settings))
        position = service.resolve_drop_position(
            target, block_size, design.blocks, design.wall
        )
        rect = Rect.at(position, block_size)

        warnings: list[str] = []
        if not service.is_acceptable(rect, design.blocks, design.wall):
            warnings.append(
                "No collision-free position found; block kept at the requested position"
            )

        block = Block(
            x=rect.x,
            y=rect.y,
            width=rect.width,
            height=rect.height,
            id=self.id_factory(),
            color=fill or "#ffffff",
            is_overflow=is_overflowing(rect, design.wall),
        )
        design.add_block(block)
        design.preview = design.build_preview()
        logger.debug("Dropped block %s at %s (requested %s)", block.id, position, target)
        return PlacementOutput(
            block=block, position=position, requested=target, warnings=warnings
        )


class MoveBlockCommand:
    """Command to move an existing block to a new position.

    The moving block is excluded from its own collision set. Overlap at the
    raw target is classified first so that callers can tell the user why the
    block did not land exactly under the pointer.
    """

    def __init__(self, settings: PlacementSettings | None = None) -> None:
        self.settings = settings

    def execute(self, design: Design, block_id: str, target: Position) -> PlacementOutput:
        """Execute the move.

        Args:
            design: Design containing the block. Modified in place on success.
            block_id: Id of the block to move.
            target: Requested top-left position.

        Returns:
            PlacementOutput with the moved block, or errors.
        """
        block = design.find_block(block_id)
        if block is None:
            return PlacementOutput(requested=target, errors=[f"Unknown block: {block_id}"])

        settings = _settings_for(design, self.settings)
        service = PlacementService(settings)
        block_size = block.size

        warnings: list[str] = []
        report = classify_overlap(
            Rect.at(target, block_size),
            design.blocks,
            threshold=settings.small_overlap_threshold,
            exclude_block_id=block_id,
        )
        if report.is_small:
            warnings.append(
                f"Block slightly overlapped {len(report.offenders)} block(s) "
                "and was repositioned"
            )

        position = service.resolve_drop_position(
            target, block_size, design.blocks, design.wall, exclude_block_id=block_id
        )
        rect = Rect.at(position, block_size)
        if not service.is_acceptable(rect, design.blocks, design.wall, block_id):
            warnings.append(
                "No collision-free position found; block kept at the requested position"
            )

        moved = replace(
            block,
            x=position.x,
            y=position.y,
            is_overflow=is_overflowing(rect, design.wall),
        )
        design.replace_block(moved)
        logger.debug("Moved block %s to %s (requested %s)", block_id, position, target)
        return PlacementOutput(
            block=moved,
            position=position,
            requested=target,
            overlap=report,
            warnings=warnings,
        )


class GenerateLayoutCommand:
    """Command to replace a design's blocks with a generated layout."""

    def __init__(
        self,
        settings: PlacementSettings | None = None,
        rng: random.Random | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self.settings = settings
        self.rng = rng
        self.id_factory = id_factory

    def execute(
        self,
        design: Design,
        max_blocks: int = 50,
        block_sizes: Sequence[BlockSizeInput] | None = None,
    ) -> LayoutOutput:
        """Execute layout generation.

        Args:
            design: Design whose blocks are replaced. Modified in place on success.
            max_blocks: Maximum number of blocks to place.
            block_sizes: Size catalog. Defaults to the design's templates.

        Returns:
            LayoutOutput with the generated blocks, or errors.
        """
        errors: list[str] = []
        if max_blocks < 1:
            errors.append("max_blocks must be at least 1")

        if block_sizes is None:
            sizes = [t.size for t in design.block_templates]
            if not sizes:
                errors.append("Design has no block templates to generate from")
        else:
            sizes = []
            for item in block_sizes:
                errors.extend(item.validate())
                sizes.append(Size(item.width, item.height))
            if not sizes:
                errors.append("At least one block size is required")

        if errors:
            return LayoutOutput(requested=max_blocks, errors=errors)

        generator = LayoutGenerator(
            _settings_for(design, self.settings), self.rng, self.id_factory
        )
        blocks = generator.generate(design.wall, sizes, max_blocks)

        warnings: list[str] = []
        if len(blocks) < max_blocks:
            warnings.append(
                f"Placed {len(blocks)} of {max_blocks} blocks; the wall is full"
            )

        design.blocks = blocks
        design.preview = design.build_preview()
        return LayoutOutput(blocks=blocks, requested=max_blocks, warnings=warnings)
