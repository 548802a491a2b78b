"""Domain entities - objects with identity that aggregate value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .value_objects import Block, BlockTemplate, Wall


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DesignPreview:
    """Summary shown when browsing saved designs."""

    block_count: int
    wall_dimensions: str
    template_count: int


@dataclass
class Design:
    """A named wall design: the wall, its blocks and the template catalog.

    Designs are the unit of persistence. The placement engine never stores
    designs itself; it only produces block positions within them.
    """

    id: str
    name: str
    wall: Wall
    blocks: list[Block] = field(default_factory=list)
    block_templates: list[BlockTemplate] = field(default_factory=list)
    created_at: datetime = field(default_factory=_now)
    preview: DesignPreview | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Design id must not be empty")
        ids = [block.id for block in self.blocks]
        if len(ids) != len(set(ids)):
            raise ValueError("Block ids must be unique within a design")

    def find_block(self, block_id: str) -> Block | None:
        for block in self.blocks:
            if block.id == block_id:
                return block
        return None

    def find_template(self, template_id: str) -> BlockTemplate | None:
        for template in self.block_templates:
            if template.id == template_id:
                return template
        return None

    def add_block(self, block: Block) -> None:
        if self.find_block(block.id) is not None:
            raise ValueError(f"Duplicate block id: {block.id}")
        self.blocks.append(block)

    def replace_block(self, block: Block) -> None:
        """Swap in a new version of an existing block, keeping its order."""
        for index, existing in enumerate(self.blocks):
            if existing.id == block.id:
                self.blocks[index] = block
                return
        raise KeyError(block.id)

    def remove_block(self, block_id: str) -> Block:
        block = self.find_block(block_id)
        if block is None:
            raise KeyError(block_id)
        self.blocks.remove(block)
        return block

    def build_preview(self) -> DesignPreview:
        """Compute the browse preview from the current state."""
        return DesignPreview(
            block_count=len(self.blocks),
            wall_dimensions=f"{self.wall.width:g}×{self.wall.height:g}cm",
            template_count=len(self.block_templates),
        )


@dataclass
class DesignArchive:
    """Container for exporting several designs in one file."""

    designs: list[Design] = field(default_factory=list)
    export_date: datetime = field(default_factory=_now)
