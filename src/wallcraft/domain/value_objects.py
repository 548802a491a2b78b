"""Immutable value objects for wall geometry and block placement.

Coordinates are wall-local with the origin at the top-left corner of the
wall; y grows downwards. Positions may be negative or exceed the wall extent
when a block is allowed to overflow the wall edges.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Iterable

DEFAULT_PALETTE: tuple[str, ...] = (
    "#e74c3c",
    "#3498db",
    "#2ecc71",
    "#f1c40f",
    "#9b59b6",
    "#e67e22",
    "#e91e63",
    "#8d6e63",
    "#95a5a6",
    "#1abc9c",
)


@dataclass(frozen=True)
class Position:
    """Top-left corner of a block in wall coordinates."""

    x: float
    y: float

    def distance_to(self, other: Position) -> float:
        """Euclidean distance to another position."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def offset(self, dx: float, dy: float) -> Position:
        return Position(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Size:
    """Requested block dimensions.

    Unlike Rect, a Size is not validated on construction. Placement searches
    receive sizes straight from callers and answer "no position" for sizes
    that cannot be placed instead of raising.
    """

    width: float
    height: float

    @property
    def is_positive(self) -> bool:
        """True if both dimensions are strictly positive."""
        return self.width > 0 and self.height > 0

    def fits_within(self, wall: Wall) -> bool:
        """True if the size is positive and no larger than the wall."""
        return (
            self.is_positive
            and self.width <= wall.width
            and self.height <= wall.height
        )


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle with a top-left origin.

    Attributes:
        x: Left edge.
        y: Top edge.
        width: Horizontal extent, strictly positive.
        height: Vertical extent, strictly positive.
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Rectangle dimensions must be positive")

    @classmethod
    def at(cls, position: Position, size: Size) -> Rect:
        """Build a rectangle of the given size at a position."""
        return cls(x=position.x, y=position.y, width=size.width, height=size.height)

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def moved_to(self, position: Position) -> Rect:
        return replace(self, x=position.x, y=position.y)


@dataclass(frozen=True)
class Wall:
    """The bounded canvas blocks are placed onto.

    Attributes:
        width: Wall width, strictly positive.
        height: Wall height, strictly positive.
        background_color: Display colour of the wall surface.
    """

    width: float
    height: float
    background_color: str = "#f5f5f5"

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("Wall width must be positive")
        if self.height <= 0:
            raise ValueError("Wall height must be positive")

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def contains(self, rect: Rect) -> bool:
        """Strict containment: the rectangle lies entirely on the wall."""
        return (
            rect.left >= 0
            and rect.top >= 0
            and rect.right <= self.width
            and rect.bottom <= self.height
        )


@dataclass(frozen=True)
class Block(Rect):
    """A placed tile on the wall.

    The id is assigned once and is kept when the block is moved, so that a
    moving block can be excluded from its own collision set.

    Attributes:
        id: Unique block identifier.
        color: Fill colour.
        texture_image: Optional texture payload (PNG data URL).
        is_overflow: True if the block extends past the wall edges.
    """

    id: str = ""
    color: str = "#ffffff"
    texture_image: str | None = None
    is_overflow: bool = False

    def __post_init__(self) -> None:
        super().__post_init__()
        if not self.id:
            raise ValueError("Block id must not be empty")

    def as_rect(self) -> Rect:
        """Plain geometry of this block."""
        return Rect(self.x, self.y, self.width, self.height)

    def with_overflow(self, is_overflow: bool) -> Block:
        return replace(self, is_overflow=is_overflow)


@dataclass(frozen=True)
class BlockTemplate:
    """Prototype that supplies size and colour for new blocks."""

    id: str
    width: float
    height: float
    color: str

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Template dimensions must be positive")

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def instantiate(self, block_id: str, position: Position) -> Block:
        """Create a block from this template at a position."""
        return Block(
            x=position.x,
            y=position.y,
            width=self.width,
            height=self.height,
            id=block_id,
            color=self.color,
        )


@dataclass(frozen=True)
class SnapCandidate:
    """Result of snapping to neighbouring block edges.

    Attributes:
        position: The snapped position.
        distance: Distance from the requested target.
        in_bounds: True if the block lies strictly within the wall there.
    """

    position: Position
    distance: float
    in_bounds: bool


@dataclass(frozen=True)
class OverlapReport:
    """Classification of a candidate's overlap with existing blocks.

    Attributes:
        is_small: True if the candidate only overlaps blocks by less than the
            threshold percentage of its own area.
        offenders: Blocks overlapped by more than 0% and less than the threshold.
        significant: Blocks overlapped by at least the threshold.
    """

    is_small: bool
    offenders: tuple[Block, ...] = ()
    significant: tuple[Block, ...] = ()

    @property
    def has_overlap(self) -> bool:
        return bool(self.offenders or self.significant)


@dataclass(frozen=True)
class PlacementSettings:
    """Tunable parameters of the placement engine.

    Defaults match the stock template catalog, whose largest block is 60x30.

    Attributes:
        max_block_width: Horizontal overflow tolerance on both wall sides.
        max_block_height: Vertical overflow tolerance above the wall top.
        grid_size: Snap-to-grid spacing.
        snap_distance: Maximum distance for snapping to neighbour edges.
        fine_scan_step: Grid scan step for sparse walls.
        coarse_scan_step: Grid scan step once the wall holds more than
            dense_scan_threshold blocks.
        dense_scan_threshold: Block count separating fine and coarse scans.
        scan_candidate_limit: Maximum grid scan candidates tested.
        edge_score: Score for positions touching a wall edge.
        adjacency_score: Score per neighbouring block touched.
        adjacency_bonus: One-off score when any neighbour is touched.
        overflow_scan_step: Step of the multi-phase overflow scan.
        random_attempts: Random positions tried on sparse walls.
        sparse_layout_limit: Block count up to which random sampling is used.
        shuffled_grid_attempts: Shuffled grid positions tried on dense walls.
        nearby_radius: Radius of the search around a drop target.
        nearby_step: Step of the search around a drop target.
        small_overlap_threshold: Percentage below which an overlap is "small".
        significant_overlap_threshold: Percentage above which an overlap is
            "significant".
        layout_attempts_multiplier: Attempts per requested block in layouts.
        palette: Colours used for generated blocks.
    """

    max_block_width: float = 60
    max_block_height: float = 30
    grid_size: float = 15
    snap_distance: float = 10
    fine_scan_step: float = 2
    coarse_scan_step: float = 4
    dense_scan_threshold: int = 30
    scan_candidate_limit: int = 200
    edge_score: int = 8
    adjacency_score: int = 12
    adjacency_bonus: int = 5
    overflow_scan_step: float = 5
    random_attempts: int = 150
    sparse_layout_limit: int = 50
    shuffled_grid_attempts: int = 100
    nearby_radius: float = 20
    nearby_step: float = 2
    small_overlap_threshold: float = 25.0
    significant_overlap_threshold: float = 25.0
    layout_attempts_multiplier: int = 3
    palette: tuple[str, ...] = field(default=DEFAULT_PALETTE)

    def __post_init__(self) -> None:
        if self.max_block_width < 0 or self.max_block_height < 0:
            raise ValueError("Overflow tolerances must be non-negative")
        for name in (
            "grid_size",
            "fine_scan_step",
            "coarse_scan_step",
            "overflow_scan_step",
            "nearby_step",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.snap_distance < 0 or self.nearby_radius < 0:
            raise ValueError("Search distances must be non-negative")
        if self.scan_candidate_limit < 1:
            raise ValueError("scan_candidate_limit must be at least 1")
        if self.random_attempts < 0 or self.shuffled_grid_attempts < 0:
            raise ValueError("Sampling attempts must be non-negative")
        for name in ("small_overlap_threshold", "significant_overlap_threshold"):
            if not 0 <= getattr(self, name) <= 100:
                raise ValueError(f"{name} must be between 0 and 100")
        if self.layout_attempts_multiplier < 1:
            raise ValueError("layout_attempts_multiplier must be at least 1")
        if not self.palette:
            raise ValueError("palette must contain at least one colour")

    @classmethod
    def from_templates(
        cls, templates: Iterable[BlockTemplate], **overrides: object
    ) -> PlacementSettings:
        """Derive overflow tolerances from the largest template.

        Args:
            templates: Template catalog of the design.
            **overrides: Any other settings to override.

        Returns:
            Settings whose max_block_width/height match the catalog. Falls
            back to the defaults when the catalog is empty.
        """
        templates = list(templates)
        if templates:
            overrides.setdefault("max_block_width", max(t.width for t in templates))
            overrides.setdefault(
                "max_block_height", max(t.height for t in templates)
            )
        return cls(**overrides)  # type: ignore[arg-type]


DEFAULT_SETTINGS = PlacementSettings()
