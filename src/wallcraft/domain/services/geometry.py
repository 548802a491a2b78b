"""Rectangle primitives used by every placement routine.

Two families of bound checks live here:
- strict overflow tests (is_*_overflowing) used to flag blocks for display,
- tolerant position tests (is_valid_*_position) used while searching for a
  placement, which let a block hang past the wall edges by up to one template
  size. Vertically a block may only hang over the top edge, never the bottom.
"""

from __future__ import annotations

import math

from ..value_objects import Position, Rect, Wall

__all__ = [
    "intersection",
    "is_adjacent",
    "is_horizontally_overflowing",
    "is_overflowing",
    "is_valid_horizontal_position",
    "is_valid_vertical_position",
    "is_vertically_overflowing",
    "is_within_wall",
    "overlap_area",
    "overlap_percentage",
    "overlaps",
    "snap_to_grid",
]


def overlaps(a: Rect, b: Rect) -> bool:
    """Check whether two rectangles share positive area.

    Rectangles that only touch along an edge or a corner do not overlap.
    """
    return not (
        a.right <= b.left
        or b.right <= a.left
        or a.bottom <= b.top
        or b.bottom <= a.top
    )


def intersection(a: Rect, b: Rect) -> Rect | None:
    """Intersection rectangle of a and b, or None if they do not overlap."""
    if not overlaps(a, b):
        return None
    left = max(a.left, b.left)
    top = max(a.top, b.top)
    return Rect(
        x=left,
        y=top,
        width=min(a.right, b.right) - left,
        height=min(a.bottom, b.bottom) - top,
    )


def overlap_area(a: Rect, b: Rect) -> float:
    shared = intersection(a, b)
    return shared.area if shared is not None else 0.0


def overlap_percentage(a: Rect, b: Rect) -> float:
    """Percentage of a's area covered by b.

    The result is relative to a, so overlap_percentage(a, b) and
    overlap_percentage(b, a) differ when the rectangles differ in size.

    Returns:
        A value in [0, 100]; 0 when the rectangles do not overlap.
    """
    area = overlap_area(a, b)
    if area == 0:
        return 0.0
    return min(100.0, area / a.area * 100)


def is_horizontally_overflowing(rect: Rect, wall: Wall) -> bool:
    return rect.left < 0 or rect.right > wall.width


def is_vertically_overflowing(rect: Rect, wall: Wall) -> bool:
    return rect.top < 0 or rect.bottom > wall.height


def is_overflowing(rect: Rect, wall: Wall) -> bool:
    """Strict test used for the block overflow display flag."""
    return is_horizontally_overflowing(rect, wall) or is_vertically_overflowing(
        rect, wall
    )


def is_within_wall(rect: Rect, wall: Wall) -> bool:
    return wall.contains(rect)


def is_valid_horizontal_position(
    rect: Rect, wall: Wall, max_block_width: float = 60
) -> bool:
    """Tolerant horizontal bound: up to max_block_width past either side.

    A block as wide as the wall gets no tolerance and only fits at x == 0.
    """
    if rect.width >= wall.width:
        max_block_width = 0
    return rect.left >= -max_block_width and rect.right <= wall.width + max_block_width


def is_valid_vertical_position(
    rect: Rect, wall: Wall, max_block_height: float = 30
) -> bool:
    """Tolerant vertical bound: may rise above the top, never below the floor.

    A block as tall as the wall gets no tolerance and only fits at y == 0.
    """
    if rect.height >= wall.height:
        max_block_height = 0
    return rect.top >= -max_block_height and rect.bottom <= wall.height


def is_adjacent(a: Rect, b: Rect) -> bool:
    """Check whether two rectangles touch along an edge without overlapping.

    Corner-only contact does not count; the shared edge must have positive
    length.
    """
    if overlaps(a, b):
        return False
    shares_vertical_edge = (a.right == b.left or b.right == a.left) and (
        min(a.bottom, b.bottom) - max(a.top, b.top) > 0
    )
    shares_horizontal_edge = (a.bottom == b.top or b.bottom == a.top) and (
        min(a.right, b.right) - max(a.left, b.left) > 0
    )
    return shares_vertical_edge or shares_horizontal_edge


def snap_to_grid(position: Position, grid_size: float = 15) -> Position:
    """Round a position to the nearest multiple of grid_size, halves rounding up."""
    if grid_size <= 0:
        raise ValueError("Grid size must be positive")
    return Position(
        math.floor(position.x / grid_size + 0.5) * grid_size,
        math.floor(position.y / grid_size + 0.5) * grid_size,
    )
