"""Placement strategy orchestration.

PlacementService chains the candidate generators from cheapest and most
cursor-faithful to most exhaustive:

1. snap the drop target to the grid,
2. snap against neighbouring block edges (strictly inside the wall),
3. scored grid scan inside the wall,
4. the edge snap from step 2 when it only fits with overflow,
5. search around the drop target,
6. adjacency search with the multi-phase overflow scan,

and finally falls back to the raw target. Placement is advisory: a drop is
never refused here, callers decide whether to accept the result.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable

from ..value_objects import (
    DEFAULT_SETTINGS,
    Block,
    PlacementSettings,
    Position,
    Rect,
    Size,
    Wall,
)
from .candidates import (
    adjacent_to_blocks,
    adjacent_to_target,
    grid_scan_within_wall,
    nearby_search,
    overflow_scan,
    random_sample,
    snap_to_adjacent_edges,
    snap_to_grid_candidate,
)
from .validator import can_place_block, is_acceptable_position

logger = logging.getLogger(__name__)

__all__ = [
    "PlacementService",
    "find_adjacent_position",
    "find_position_within_wall",
    "find_valid_position",
    "resolve_drop_position",
]


class PlacementService:
    """Finds positions for blocks on a wall.

    All methods are pure: they read the given blocks and never mutate them,
    so repeated calls with the same arguments return the same result.

    Attributes:
        settings: Tunable search parameters.
    """

    def __init__(self, settings: PlacementSettings | None = None) -> None:
        self.settings = settings or DEFAULT_SETTINGS

    def can_place(
        self,
        rect: Rect,
        existing_blocks: Iterable[Block],
        wall: Wall,
        exclude_block_id: str | None = None,
    ) -> bool:
        """Validator check with this service's vertical tolerance."""
        return can_place_block(
            rect,
            existing_blocks,
            wall,
            exclude_block_id,
            max_block_height=self.settings.max_block_height,
        )

    def is_acceptable(
        self,
        rect: Rect,
        existing_blocks: Iterable[Block],
        wall: Wall,
        exclude_block_id: str | None = None,
    ) -> bool:
        """Validator check plus the tolerant horizontal bound."""
        return is_acceptable_position(
            rect,
            existing_blocks,
            wall,
            exclude_block_id,
            max_block_width=self.settings.max_block_width,
            max_block_height=self.settings.max_block_height,
        )

    def resolve_drop_position(
        self,
        target: Position,
        block_size: Size,
        existing_blocks: Iterable[Block],
        wall: Wall,
        exclude_block_id: str | None = None,
    ) -> Position:
        """Decide where a dropped or dragged block should land.

        Args:
            target: Requested top-left position of the block.
            block_size: Size of the block being dropped.
            existing_blocks: Blocks already on the wall.
            wall: The wall being designed.
            exclude_block_id: Id of the block being moved, if any.

        Returns:
            The chosen position. When the size cannot be placed at all or no
            strategy succeeds, the target is returned unchanged.
        """
        blocks = tuple(existing_blocks)
        settings = self.settings
        if not block_size.fits_within(wall):
            logger.warning(
                "Cannot place block of size %sx%s on a %sx%s wall",
                block_size.width,
                block_size.height,
                wall.width,
                wall.height,
            )
            return target

        snapped = snap_to_grid_candidate(
            target, block_size, blocks, wall, settings, exclude_block_id
        )
        if snapped is not None:
            logger.debug("Drop resolved by grid snap: %s", snapped)
            return snapped

        edge_snap = snap_to_adjacent_edges(
            target, block_size, blocks, wall, settings, exclude_block_id
        )
        if edge_snap is not None and edge_snap.in_bounds:
            logger.debug("Drop resolved by edge snap: %s", edge_snap.position)
            return edge_snap.position

        scanned = grid_scan_within_wall(
            block_size, blocks, wall, settings, exclude_block_id
        )
        if scanned is not None:
            logger.debug("Drop resolved by grid scan: %s", scanned)
            return scanned

        if edge_snap is not None:
            logger.debug("Drop resolved by overflowing edge snap: %s", edge_snap.position)
            return edge_snap.position

        nearby = nearby_search(
            target, block_size, blocks, wall, settings, exclude_block_id
        )
        if nearby is not None:
            logger.debug("Drop resolved by nearby search: %s", nearby)
            return nearby

        fallback = self.find_valid_position(
            block_size, blocks, wall, exclude_block_id
        )
        if fallback is not None:
            logger.debug("Drop resolved by fallback search: %s", fallback)
            return fallback

        logger.warning("No valid position found, keeping drop target %s", target)
        return target

    def find_position_within_wall(
        self,
        block_size: Size,
        existing_blocks: Iterable[Block],
        wall: Wall,
        exclude_block_id: str | None = None,
    ) -> Position | None:
        """Best scoring position strictly inside the wall, or None."""
        return grid_scan_within_wall(
            block_size, tuple(existing_blocks), wall, self.settings, exclude_block_id
        )

    def find_adjacent_position(
        self,
        block_size: Size,
        target_block: Rect,
        existing_blocks: Iterable[Block],
        wall: Wall,
        drag_position: Position,
        exclude_block_id: str | None = None,
    ) -> Position | None:
        """Position touching target_block closest to the drag pointer, or None."""
        return adjacent_to_target(
            block_size,
            target_block,
            tuple(existing_blocks),
            wall,
            drag_position,
            self.settings,
            exclude_block_id,
        )

    def find_valid_position(
        self,
        block_size: Size,
        existing_blocks: Iterable[Block],
        wall: Wall,
        exclude_block_id: str | None = None,
        rng: random.Random | None = None,
    ) -> Position | None:
        """Adjacency-first search used by layout generation and as last resort.

        Phases, strict before tolerant:
        1. the top-left corner when the wall holds no other block,
        2. touching an existing block, strictly inside the wall,
        3. random sampling inside the wall (only when rng is given),
        4. touching an existing block, overflow tolerated,
        5. the multi-phase overflow scan.

        Args:
            block_size: Size of the block to place.
            existing_blocks: Blocks already on the wall.
            wall: The wall being designed.
            exclude_block_id: Id of the block being moved, if any.
            rng: Random source for phase 3. Without it the search is
                deterministic.

        Returns:
            A valid position, or None.
        """
        if not block_size.fits_within(wall):
            return None
        blocks = tuple(existing_blocks)
        settings = self.settings

        others = [b for b in blocks if b.id != exclude_block_id]
        if not others:
            origin = Position(0, 0)
            if self.is_acceptable(Rect.at(origin, block_size), blocks, wall, exclude_block_id):
                return origin

        position = adjacent_to_blocks(
            block_size, blocks, wall, settings, exclude_block_id, strict=True
        )
        if position is not None:
            return position

        if rng is not None:
            position = random_sample(
                block_size, blocks, wall, rng, settings, exclude_block_id
            )
            if position is not None:
                return position

        position = adjacent_to_blocks(
            block_size, blocks, wall, settings, exclude_block_id, strict=False
        )
        if position is not None:
            return position

        return overflow_scan(block_size, blocks, wall, settings, exclude_block_id)


def resolve_drop_position(
    target: Position,
    block_size: Size,
    existing_blocks: Iterable[Block],
    wall: Wall,
    exclude_block_id: str | None = None,
    settings: PlacementSettings | None = None,
) -> Position:
    """Functional shortcut for PlacementService.resolve_drop_position."""
    return PlacementService(settings).resolve_drop_position(
        target, block_size, existing_blocks, wall, exclude_block_id
    )


def find_position_within_wall(
    block_size: Size,
    existing_blocks: Iterable[Block],
    wall: Wall,
    exclude_block_id: str | None = None,
    settings: PlacementSettings | None = None,
) -> Position | None:
    return PlacementService(settings).find_position_within_wall(
        block_size, existing_blocks, wall, exclude_block_id
    )


def find_adjacent_position(
    block_size: Size,
    target_block: Rect,
    existing_blocks: Iterable[Block],
    wall: Wall,
    drag_position: Position,
    exclude_block_id: str | None = None,
    settings: PlacementSettings | None = None,
) -> Position | None:
    return PlacementService(settings).find_adjacent_position(
        block_size, target_block, existing_blocks, wall, drag_position, exclude_block_id
    )


def find_valid_position(
    block_size: Size,
    existing_blocks: Iterable[Block],
    wall: Wall,
    exclude_block_id: str | None = None,
    settings: PlacementSettings | None = None,
    rng: random.Random | None = None,
) -> Position | None:
    return PlacementService(settings).find_valid_position(
        block_size, existing_blocks, wall, exclude_block_id, rng
    )
