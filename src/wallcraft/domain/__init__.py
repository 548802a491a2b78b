"""Domain layer - wall geometry and the placement engine."""

from .entities import Design, DesignArchive, DesignPreview
from .services import (
    LayoutGenerator,
    PlacementService,
    can_place,
    can_place_block,
    classify_overlap,
    find_adjacent_position,
    find_position_within_wall,
    find_valid_position,
    generate_layout,
    has_significant_overlap,
    is_horizontally_overflowing,
    is_overflowing,
    is_valid_horizontal_position,
    is_valid_vertical_position,
    is_vertically_overflowing,
    overlap_percentage,
    overlaps,
    resolve_drop_position,
)
from .value_objects import (
    DEFAULT_PALETTE,
    DEFAULT_SETTINGS,
    Block,
    BlockTemplate,
    OverlapReport,
    PlacementSettings,
    Position,
    Rect,
    Size,
    SnapCandidate,
    Wall,
)

__all__ = [
    "Block",
    "BlockTemplate",
    "DEFAULT_PALETTE",
    "DEFAULT_SETTINGS",
    "Design",
    "DesignArchive",
    "DesignPreview",
    "LayoutGenerator",
    "OverlapReport",
    "PlacementService",
    "PlacementSettings",
    "Position",
    "Rect",
    "Size",
    "SnapCandidate",
    "Wall",
    "can_place",
    "can_place_block",
    "classify_overlap",
    "find_adjacent_position",
    "find_position_within_wall",
    "find_valid_position",
    "generate_layout",
    "has_significant_overlap",
    "is_horizontally_overflowing",
    "is_overflowing",
    "is_valid_horizontal_position",
    "is_valid_vertical_position",
    "is_vertically_overflowing",
    "overlap_percentage",
    "overlaps",
    "resolve_drop_position",
]
