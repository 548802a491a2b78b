"""Pydantic schema for placement engine configuration files.

A configuration file tunes the search strategies without code changes:

    {
        "schema_version": "1.0",
        "bounds": {"max_block_width": 90, "max_block_height": 45},
        "search": {"scan_candidate_limit": 300}
    }

Every section is optional and falls back to the engine defaults.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from wallcraft.domain.value_objects import DEFAULT_PALETTE

# Supported schema versions for configuration files
# Version 1.0: Initial schema with bounds, snapping, search, overlap and layout
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class BoundsConfig(BaseModel):
    """Overflow tolerances around the wall.

    Attributes:
        max_block_width: How far a block may extend past the left or right
            wall edge. Usually the widest template width.
        max_block_height: How far a block may rise above the top wall edge.
            Usually the tallest template height.
    """

    model_config = ConfigDict(extra="forbid")

    max_block_width: float = Field(default=60, ge=0)
    max_block_height: float = Field(default=30, ge=0)


class SnappingConfig(BaseModel):
    """Snapping behaviour while dragging."""

    model_config = ConfigDict(extra="forbid")

    grid_size: float = Field(default=15, gt=0)
    snap_distance: float = Field(default=10, ge=0)


class SearchConfig(BaseModel):
    """Breadth and scoring of the fallback searches.

    Attributes:
        fine_scan_step: Grid scan step on sparse walls.
        coarse_scan_step: Grid scan step on walls with many blocks.
        dense_scan_threshold: Block count above which the coarse step is used.
        scan_candidate_limit: Maximum number of scored grid positions tested.
        edge_score: Score for grid positions touching a wall edge.
        adjacency_score: Score per neighbouring block touched.
        adjacency_bonus: One-off score when any block is touched.
        overflow_scan_step: Step of the overflow-tolerant scan.
        random_attempts: Random positions tried on sparse walls.
        sparse_layout_limit: Block count up to which pure random sampling is used.
        shuffled_grid_attempts: Shuffled grid positions tried on dense walls.
        nearby_radius: Search radius around a drop target.
        nearby_step: Step of the search around a drop target.
    """

    model_config = ConfigDict(extra="forbid")

    fine_scan_step: float = Field(default=2, gt=0)
    coarse_scan_step: float = Field(default=4, gt=0)
    dense_scan_threshold: int = Field(default=30, ge=0)
    scan_candidate_limit: int = Field(default=200, ge=1, le=10_000)
    edge_score: int = Field(default=8, ge=0)
    adjacency_score: int = Field(default=12, ge=0)
    adjacency_bonus: int = Field(default=5, ge=0)
    overflow_scan_step: float = Field(default=5, gt=0)
    random_attempts: int = Field(default=150, ge=0, le=10_000)
    sparse_layout_limit: int = Field(default=50, ge=0)
    shuffled_grid_attempts: int = Field(default=100, ge=0, le=10_000)
    nearby_radius: float = Field(default=20, ge=0)
    nearby_step: float = Field(default=2, gt=0)

    @model_validator(mode="after")
    def validate_scan_steps(self) -> "SearchConfig":
        """The coarse step must not be finer than the fine step."""
        if self.coarse_scan_step < self.fine_scan_step:
            raise ValueError("coarse_scan_step must be >= fine_scan_step")
        return self


class OverlapConfig(BaseModel):
    """Thresholds of the drag-and-drop overlap classifier (percentages)."""

    model_config = ConfigDict(extra="forbid")

    small_threshold: float = Field(default=25.0, ge=0, le=100)
    significant_threshold: float = Field(default=25.0, ge=0, le=100)


class LayoutConfig(BaseModel):
    """Automatic layout generation.

    Attributes:
        attempts_multiplier: Placement attempts allowed per requested block.
        palette: Colours assigned to generated blocks.
    """

    model_config = ConfigDict(extra="forbid")

    attempts_multiplier: int = Field(default=3, ge=1, le=100)
    palette: list[str] = Field(default_factory=lambda: list(DEFAULT_PALETTE), min_length=1)

    @field_validator("palette")
    @classmethod
    def validate_palette(cls, v: list[str]) -> list[str]:
        """Colours must be #rgb or #rrggbb hex strings."""
        import re

        for color in v:
            if not re.match(r"^#(?:[0-9a-fA-F]{3}){1,2}$", color):
                raise ValueError(f"Invalid colour '{color}'. Use #rgb or #rrggbb")
        return v


class PlacementConfiguration(BaseModel):
    """Root configuration model for the placement engine.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        bounds: Overflow tolerances
        snapping: Grid and edge snapping
        search: Fallback search breadth and scoring
        overlap: Overlap classifier thresholds
        layout: Layout generation
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    bounds: BoundsConfig = Field(default_factory=BoundsConfig)
    snapping: SnappingConfig = Field(default_factory=SnappingConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    overlap: OverlapConfig = Field(default_factory=OverlapConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
