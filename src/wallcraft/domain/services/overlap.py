"""Overlap classification for drag-and-drop feedback.

These checks never decide final placement, which always requires zero
overlap. They let the editor warn about a slightly overlapping drop and
silently recompute the position of a badly overlapping one. The "small" and
"significant" thresholds are independent parameters.
"""

from __future__ import annotations

from typing import Iterable

from ..value_objects import Block, OverlapReport, Rect
from .geometry import overlap_percentage

__all__ = [
    "classify_overlap",
    "has_significant_overlap",
]


def classify_overlap(
    candidate: Rect,
    existing_blocks: Iterable[Block],
    threshold: float = 25.0,
    exclude_block_id: str | None = None,
) -> OverlapReport:
    """Sort the blocks a candidate overlaps into small and large overlaps.

    Percentages are relative to the candidate's area.

    Args:
        candidate: Rectangle at the proposed position.
        existing_blocks: Blocks already on the wall.
        threshold: Percentage below which an overlap counts as small.
        exclude_block_id: Id of the block being moved.

    Returns:
        OverlapReport whose is_small is True when the candidate overlaps at
        least one block and every overlap is below the threshold.
    """
    offenders: list[Block] = []
    significant: list[Block] = []
    for block in existing_blocks:
        if exclude_block_id is not None and block.id == exclude_block_id:
            continue
        percentage = overlap_percentage(candidate, block)
        if percentage <= 0:
            continue
        if percentage < threshold:
            offenders.append(block)
        else:
            significant.append(block)
    return OverlapReport(
        is_small=bool(offenders) and not significant,
        offenders=tuple(offenders),
        significant=tuple(significant),
    )


def has_significant_overlap(a: Rect, b: Rect, threshold: float = 25.0) -> bool:
    """True if b covers more than threshold percent of a's area."""
    return overlap_percentage(a, b) > threshold
