"""Domain services for block placement on a wall.

This package provides the placement engine, leaves first:
- Geometry primitives (overlap, overflow and bound predicates)
- Placement validation
- Candidate position generators
- The drop position orchestrator
- Layout generation and overlap classification
"""

from .candidates import (
    adjacent_to_blocks,
    adjacent_to_target,
    grid_scan_within_wall,
    nearby_search,
    overflow_scan,
    random_sample,
    snap_to_adjacent_edges,
    snap_to_grid_candidate,
    touching_positions,
)
from .geometry import (
    intersection,
    is_adjacent,
    is_horizontally_overflowing,
    is_overflowing,
    is_valid_horizontal_position,
    is_valid_vertical_position,
    is_vertically_overflowing,
    is_within_wall,
    overlap_area,
    overlap_percentage,
    overlaps,
    snap_to_grid,
)
from .layout_generator import LayoutGenerator, generate_layout, new_block_id
from .overlap import classify_overlap, has_significant_overlap
from .placement import (
    PlacementService,
    find_adjacent_position,
    find_position_within_wall,
    find_valid_position,
    resolve_drop_position,
)
from .validator import can_place, can_place_block, collides, is_acceptable_position

__all__ = [
    "LayoutGenerator",
    "PlacementService",
    "adjacent_to_blocks",
    "adjacent_to_target",
    "can_place",
    "can_place_block",
    "classify_overlap",
    "collides",
    "find_adjacent_position",
    "find_position_within_wall",
    "find_valid_position",
    "generate_layout",
    "grid_scan_within_wall",
    "has_significant_overlap",
    "intersection",
    "is_acceptable_position",
    "is_adjacent",
    "is_horizontally_overflowing",
    "is_overflowing",
    "is_valid_horizontal_position",
    "is_valid_vertical_position",
    "is_vertically_overflowing",
    "is_within_wall",
    "nearby_search",
    "new_block_id",
    "overflow_scan",
    "overlap_area",
    "overlap_percentage",
    "overlaps",
    "random_sample",
    "resolve_drop_position",
    "snap_to_adjacent_edges",
    "snap_to_grid",
    "snap_to_grid_candidate",
    "touching_positions",
]
