"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from wallcraft.domain import Block, OverlapReport, Position


@dataclass
class BlockSizeInput:
    """Input DTO for an explicit block size."""

    width: float
    height: float

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.width <= 0:
            errors.append("Block width must be positive")
        if self.height <= 0:
            errors.append("Block height must be positive")
        return errors


@dataclass
class PlacementOutput:
    """Output DTO of a drop or move.

    Attributes:
        block: The placed or moved block, None when the command failed.
        position: Where the block landed.
        requested: The position the caller asked for.
        overlap: Overlap classification at the requested position (moves only).
        errors: Error messages if the command failed.
        warnings: Non-fatal notes, such as a block left overlapping others.
    """

    block: Block | None = None
    position: Position | None = None
    requested: Position | None = None
    overlap: OverlapReport | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the command succeeded."""
        return len(self.errors) == 0

    @property
    def was_adjusted(self) -> bool:
        """True if the block did not land at the requested position."""
        return self.position is not None and self.position != self.requested


@dataclass
class LayoutOutput:
    """Output DTO of automatic layout generation.

    Attributes:
        blocks: The generated blocks in placement order.
        requested: Number of blocks asked for.
        errors: Error messages if generation failed.
        warnings: Non-fatal notes, such as a partly filled wall.
    """

    blocks: list[Block] = field(default_factory=list)
    requested: int = 0
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the layout was generated successfully."""
        return len(self.errors) == 0

    @property
    def overflow_count(self) -> int:
        return sum(1 for block in self.blocks if block.is_overflow)
