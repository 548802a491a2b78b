"""Placement validation: may a rectangle occupy a position on the wall?

can_place_block checks only the wall's floor and ceiling, not its sides.
Dragging a block sideways past the wall edge is allowed at this level;
callers that need the horizontal tolerance use is_acceptable_position
instead. The one exception is a block as wide as the wall, which has no room
to move sideways and must sit at x == 0.
"""

from __future__ import annotations

from typing import Iterable

from ..value_objects import Block, Rect, Wall
from .geometry import (
    is_valid_horizontal_position,
    is_valid_vertical_position,
    is_within_wall,
    overlaps,
)

__all__ = [
    "can_place",
    "can_place_block",
    "collides",
    "is_acceptable_position",
]


def collides(
    candidate: Rect,
    existing_blocks: Iterable[Block],
    exclude_block_id: str | None = None,
) -> bool:
    """Check whether the candidate overlaps any block except the excluded one."""
    for block in existing_blocks:
        if exclude_block_id is not None and block.id == exclude_block_id:
            continue
        if overlaps(candidate, block):
            return True
    return False


def can_place_block(
    candidate: Rect,
    existing_blocks: Iterable[Block],
    wall: Wall,
    exclude_block_id: str | None = None,
    max_block_height: float = 30,
) -> bool:
    """Check whether a rectangle may legally occupy its position.

    Args:
        candidate: Rectangle at the position under test.
        existing_blocks: Blocks already on the wall.
        wall: The wall being designed.
        exclude_block_id: Id of the block being moved, ignored for collisions.
        max_block_height: Tolerance for overflowing the top of the wall.

    Returns:
        False if the candidate is larger than the wall, breaks the tolerant
        vertical bound, or overlaps another block. Horizontal overflow is not
        checked here unless the candidate is as wide as the wall.
    """
    if candidate.width > wall.width or candidate.height > wall.height:
        return False
    if candidate.width == wall.width and not is_valid_horizontal_position(candidate, wall):
        return False
    if not is_valid_vertical_position(candidate, wall, max_block_height):
        return False
    return not collides(candidate, existing_blocks, exclude_block_id)


can_place = can_place_block


def is_acceptable_position(
    candidate: Rect,
    existing_blocks: Iterable[Block],
    wall: Wall,
    exclude_block_id: str | None = None,
    max_block_width: float = 60,
    max_block_height: float = 30,
    strict: bool = False,
) -> bool:
    """Validator plus the horizontal bound, as used by the search strategies.

    Args:
        candidate: Rectangle at the position under test.
        existing_blocks: Blocks already on the wall.
        wall: The wall being designed.
        exclude_block_id: Id of the block being moved.
        max_block_width: Horizontal overflow tolerance.
        max_block_height: Vertical overflow tolerance.
        strict: Require the candidate to lie entirely within the wall instead
            of applying the overflow tolerances.
    """
    if strict and not is_within_wall(candidate, wall):
        return False
    if not is_valid_horizontal_position(candidate, wall, max_block_width):
        return False
    return can_place_block(
        candidate, existing_blocks, wall, exclude_block_id, max_block_height
    )
