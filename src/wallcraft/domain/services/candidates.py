"""Candidate position generators for block placement.

Each generator implements one search strategy and returns the first
acceptable position it finds, or None. Generators are deterministic except
random_sample, which draws from the random.Random instance it is given.

Search breadth is capped (scan_candidate_limit, random_attempts,
shuffled_grid_attempts) so that a single query stays fast enough for
interactive dragging.
"""

from __future__ import annotations

import bisect
import logging
import math
import random
from typing import Iterable, Sequence

from ..value_objects import (
    DEFAULT_SETTINGS,
    Block,
    PlacementSettings,
    Position,
    Rect,
    Size,
    SnapCandidate,
    Wall,
)
from .geometry import snap_to_grid
from .validator import is_acceptable_position

logger = logging.getLogger(__name__)

__all__ = [
    "adjacent_to_blocks",
    "adjacent_to_target",
    "grid_scan_within_wall",
    "nearby_search",
    "overflow_scan",
    "random_sample",
    "snap_to_adjacent_edges",
    "snap_to_grid_candidate",
    "touching_positions",
]

# Preference order of the positions around an anchor block.
RANK_RIGHT = 1
RANK_LEFT = 2
RANK_BELOW = 3
RANK_ABOVE = 4
RANK_LOWER_CORNER = 5
RANK_UPPER_CORNER = 6


def _active_blocks(
    blocks: Iterable[Block], exclude_block_id: str | None
) -> list[Block]:
    return [b for b in blocks if exclude_block_id is None or b.id != exclude_block_id]


def _accepts(
    rect: Rect,
    blocks: Sequence[Block],
    wall: Wall,
    settings: PlacementSettings,
    exclude_block_id: str | None,
    strict: bool = False,
) -> bool:
    return is_acceptable_position(
        rect,
        blocks,
        wall,
        exclude_block_id,
        max_block_width=settings.max_block_width,
        max_block_height=settings.max_block_height,
        strict=strict,
    )


def _axis(start: float, stop: float, step: float) -> list[float]:
    """Values from start to stop (inclusive) spaced by step.

    stop itself is always included so that scans reach positions flush with
    the far wall edge even when the span is not a multiple of step.
    """
    if stop < start:
        return []
    count = math.floor((stop - start) / step + 1e-9)
    values = [start + i * step for i in range(count + 1)]
    if values[-1] < stop:
        values.append(stop)
    return values


def touching_positions(anchor: Rect, size: Size) -> list[tuple[int, Position]]:
    """The eight positions where a block of size touches the anchor.

    Returns:
        (rank, position) pairs: right, left, below, above, then the two lower
        and the two upper diagonal corners.
    """
    w, h = size.width, size.height
    return [
        (RANK_RIGHT, Position(anchor.right, anchor.top)),
        (RANK_LEFT, Position(anchor.left - w, anchor.top)),
        (RANK_BELOW, Position(anchor.left, anchor.bottom)),
        (RANK_ABOVE, Position(anchor.left, anchor.top - h)),
        (RANK_LOWER_CORNER, Position(anchor.right, anchor.bottom)),
        (RANK_LOWER_CORNER, Position(anchor.left - w, anchor.bottom)),
        (RANK_UPPER_CORNER, Position(anchor.right, anchor.top - h)),
        (RANK_UPPER_CORNER, Position(anchor.left - w, anchor.top - h)),
    ]


def adjacent_to_blocks(
    size: Size,
    blocks: Sequence[Block],
    wall: Wall,
    settings: PlacementSettings = DEFAULT_SETTINGS,
    exclude_block_id: str | None = None,
    strict: bool = False,
) -> Position | None:
    """Place the block touching one of the existing blocks.

    Candidates from all blocks are ordered by rank first (every "right of"
    position before any "left of" position) and by block order second.

    Args:
        size: Size of the block to place.
        blocks: Blocks already on the wall.
        wall: The wall being designed.
        settings: Placement settings.
        exclude_block_id: Id of the block being moved.
        strict: Require the block to lie entirely within the wall.

    Returns:
        The first acceptable position, or None.
    """
    if not size.fits_within(wall):
        return None
    candidates: list[tuple[int, int, Position]] = []
    for index, anchor in enumerate(_active_blocks(blocks, exclude_block_id)):
        for rank, position in touching_positions(anchor, size):
            candidates.append((rank, index, position))
    candidates.sort(key=lambda item: (item[0], item[1]))

    for _, _, position in candidates:
        rect = Rect.at(position, size)
        if _accepts(rect, blocks, wall, settings, exclude_block_id, strict=strict):
            return position
    return None


def adjacent_to_target(
    size: Size,
    target_block: Rect,
    blocks: Sequence[Block],
    wall: Wall,
    drag_position: Position,
    settings: PlacementSettings = DEFAULT_SETTINGS,
    exclude_block_id: str | None = None,
) -> Position | None:
    """Place the block touching one specific block, nearest the drag pointer.

    The eight touching positions are tried in order of increasing distance
    from drag_position; ties keep the rank order.
    """
    if not size.fits_within(wall):
        return None
    candidates = sorted(
        touching_positions(target_block, size),
        key=lambda item: item[1].distance_to(drag_position),
    )
    for _, position in candidates:
        rect = Rect.at(position, size)
        if _accepts(rect, blocks, wall, settings, exclude_block_id):
            return position
    return None


def _between(values: list[float], low: float, high: float) -> list[float]:
    """The sorted values strictly between low and high."""
    return values[bisect.bisect_right(values, low) : bisect.bisect_left(values, high)]


def grid_scan_within_wall(
    size: Size,
    blocks: Sequence[Block],
    wall: Wall,
    settings: PlacementSettings = DEFAULT_SETTINGS,
    exclude_block_id: str | None = None,
) -> Position | None:
    """Pick the best scoring free position strictly inside the wall.

    Only positions that can score are generated: the step grid along the
    four wall edges and, for every block, the step grid along the lines flush
    with its sides (limited to the stretch where the two would share an
    edge) plus the positions aligned with its corners. Any free grid position
    can slide left onto one of these, so the scan finds room whenever the
    full grid has some, while its cost follows the wall perimeter and the
    number of blocks rather than the wall area.

    Positions touching a wall edge score edge_score; each touched block adds
    adjacency_score, plus a single adjacency_bonus when any block is touched.
    Occupied positions are not scored. Candidates are ordered by score, then
    top-to-bottom and left-to-right, and at most scan_candidate_limit of them
    are tested. The block must lie strictly within the wall.
    """
    if not size.fits_within(wall):
        return None
    active = _active_blocks(blocks, exclude_block_id)
    step = (
        settings.fine_scan_step
        if len(active) <= settings.dense_scan_threshold
        else settings.coarse_scan_step
    )
    w, h = size.width, size.height
    max_x = wall.width - w
    max_y = wall.height - h
    columns = _axis(0, max_x, step)
    rows = _axis(0, max_y, step)

    positions: set[tuple[float, float]] = set()
    for x in (0, max_x):
        positions.update((x, y) for y in rows)
    for y in (0, max_y):
        positions.update((x, y) for x in columns)
    for block in active:
        side_rows = _between(rows, block.top - h, block.bottom)
        side_rows += [block.top, block.bottom - h]
        for x in (block.right, block.left - w):
            positions.update((x, y) for y in side_rows)
        end_columns = _between(columns, block.left - w, block.right)
        end_columns += [block.left, block.right - w]
        for y in (block.bottom, block.top - h):
            positions.update((x, y) for x in end_columns)

    # Block edges as plain tuples for the inner loop.
    edges = [(b.left, b.top, b.right, b.bottom) for b in active]
    scored: list[tuple[int, float, float]] = []
    for x, y in positions:
        if x < 0 or y < 0 or x > max_x or y > max_y:
            continue
        right, bottom = x + w, y + h
        touching = 0
        for left_b, top_b, right_b, bottom_b in edges:
            if x < right_b and left_b < right and y < bottom_b and top_b < bottom:
                break
            if (right == left_b or right_b == x) and min(bottom, bottom_b) > max(y, top_b):
                touching += 1
            elif (bottom == top_b or bottom_b == y) and min(right, right_b) > max(x, left_b):
                touching += 1
        else:
            score = 0
            if x == 0 or y == 0 or right == wall.width or bottom == wall.height:
                score += settings.edge_score
            if touching:
                score += touching * settings.adjacency_score + settings.adjacency_bonus
            scored.append((score, y, x))

    scored.sort(key=lambda item: (-item[0], item[1], item[2]))
    logger.debug(
        "Grid scan (step %s) scored %d free positions", step, len(scored)
    )
    for _, y, x in scored[: settings.scan_candidate_limit]:
        rect = Rect(x, y, w, h)
        if _accepts(rect, blocks, wall, settings, exclude_block_id, strict=True):
            return rect.position
    return None


def overflow_scan(
    size: Size,
    blocks: Sequence[Block],
    wall: Wall,
    settings: PlacementSettings = DEFAULT_SETTINGS,
    exclude_block_id: str | None = None,
) -> Position | None:
    """Row-major scan that tolerates overflowing the wall.

    Phase one lets the block rise above the top edge by up to
    max_block_height. Phase two additionally extends the scan past the right
    edge by up to max_block_width.
    """
    if not size.fits_within(wall):
        return None
    step = settings.overflow_scan_step
    rows = _axis(-settings.max_block_height, wall.height - size.height, step)
    inner_columns = _axis(0, wall.width - size.width, step)
    inner_limit = inner_columns[-1]
    outer_columns = [
        x
        for x in _axis(0, wall.width + settings.max_block_width - size.width, step)
        if x > inner_limit
    ]

    for phase, columns in (("top overflow", inner_columns), ("side overflow", outer_columns)):
        for y in rows:
            for x in columns:
                rect = Rect(x, y, size.width, size.height)
                if _accepts(rect, blocks, wall, settings, exclude_block_id):
                    logger.debug("Overflow scan found (%s, %s) in %s phase", x, y, phase)
                    return rect.position
    return None


def random_sample(
    size: Size,
    blocks: Sequence[Block],
    wall: Wall,
    rng: random.Random,
    settings: PlacementSettings = DEFAULT_SETTINGS,
    exclude_block_id: str | None = None,
) -> Position | None:
    """Try random positions strictly within the wall.

    Sparse walls (up to sparse_layout_limit blocks) draw random_attempts
    uniform positions. Denser walls shuffle a regular grid with a step of
    half the block's shorter side and test the first shuffled_grid_attempts.
    """
    if not size.fits_within(wall):
        return None
    max_x = wall.width - size.width
    max_y = wall.height - size.height

    if len(_active_blocks(blocks, exclude_block_id)) <= settings.sparse_layout_limit:
        for _ in range(settings.random_attempts):
            position = Position(
                min(max_x, math.floor(rng.random() * (max_x + 1))),
                min(max_y, math.floor(rng.random() * (max_y + 1))),
            )
            rect = Rect.at(position, size)
            if _accepts(rect, blocks, wall, settings, exclude_block_id, strict=True):
                return position
        return None

    step = min(size.width, size.height) / 2
    positions = [
        Position(x, y) for y in _axis(0, max_y, step) for x in _axis(0, max_x, step)
    ]
    rng.shuffle(positions)
    for position in positions[: settings.shuffled_grid_attempts]:
        rect = Rect.at(position, size)
        if _accepts(rect, blocks, wall, settings, exclude_block_id, strict=True):
            return position
    return None


def snap_to_grid_candidate(
    target: Position,
    size: Size,
    blocks: Sequence[Block],
    wall: Wall,
    settings: PlacementSettings = DEFAULT_SETTINGS,
    exclude_block_id: str | None = None,
) -> Position | None:
    """The target rounded to the snapping grid, if that position is valid."""
    if not size.fits_within(wall):
        return None
    snapped = snap_to_grid(target, settings.grid_size)
    rect = Rect.at(snapped, size)
    if _accepts(rect, blocks, wall, settings, exclude_block_id):
        return snapped
    return None


def _edge_proposals(anchor: Block, target: Position, size: Size) -> list[Position]:
    w, h = size.width, size.height
    proposals: list[Position] = []
    # Side snaps keep the target's row and need some vertical overlap.
    if target.y < anchor.bottom and target.y + h > anchor.top:
        proposals.append(Position(anchor.right, target.y))
        proposals.append(Position(anchor.left - w, target.y))
    if target.x < anchor.right and target.x + w > anchor.left:
        proposals.append(Position(target.x, anchor.bottom))
        proposals.append(Position(target.x, anchor.top - h))
    proposals.extend(
        [
            Position(anchor.right, anchor.top),
            Position(anchor.right, anchor.bottom - h),
            Position(anchor.left - w, anchor.top),
            Position(anchor.left - w, anchor.bottom - h),
            Position(anchor.left, anchor.bottom),
            Position(anchor.right - w, anchor.bottom),
            Position(anchor.left, anchor.top - h),
            Position(anchor.right - w, anchor.top - h),
        ]
    )
    return proposals


def snap_to_adjacent_edges(
    target: Position,
    size: Size,
    blocks: Sequence[Block],
    wall: Wall,
    settings: PlacementSettings = DEFAULT_SETTINGS,
    exclude_block_id: str | None = None,
) -> SnapCandidate | None:
    """Snap the target against nearby block edges and corners.

    Only valid positions within snap_distance of the target are considered.
    Positions strictly inside the wall beat overflowing ones; among equals the
    closest to the target wins.

    Returns:
        The best SnapCandidate, or None if nothing is close enough.
    """
    if not size.fits_within(wall):
        return None
    options: list[SnapCandidate] = []
    for anchor in _active_blocks(blocks, exclude_block_id):
        for position in _edge_proposals(anchor, target, size):
            distance = position.distance_to(target)
            if distance > settings.snap_distance:
                continue
            rect = Rect.at(position, size)
            if not _accepts(rect, blocks, wall, settings, exclude_block_id):
                continue
            options.append(SnapCandidate(position, distance, wall.contains(rect)))
    if not options:
        return None
    return min(options, key=lambda option: (not option.in_bounds, option.distance))


def nearby_search(
    target: Position,
    size: Size,
    blocks: Sequence[Block],
    wall: Wall,
    settings: PlacementSettings = DEFAULT_SETTINGS,
    exclude_block_id: str | None = None,
) -> Position | None:
    """Closest valid position within nearby_radius of the target.

    Offsets on a nearby_step grid are tried nearest first; ties are broken
    top-to-bottom, then left-to-right, so the result is reproducible.
    """
    if not size.fits_within(wall):
        return None
    step = settings.nearby_step
    reach = math.floor(settings.nearby_radius / step)
    offsets: list[tuple[float, float, float]] = []
    for i in range(-reach, reach + 1):
        for j in range(-reach, reach + 1):
            dx, dy = j * step, i * step
            distance = math.hypot(dx, dy)
            if distance <= settings.nearby_radius:
                offsets.append((distance, dy, dx))
    offsets.sort()

    for _, dy, dx in offsets:
        position = target.offset(dx, dy)
        rect = Rect.at(position, size)
        if _accepts(rect, blocks, wall, settings, exclude_block_id):
            return position
    return None
