"""Pydantic wire models for design files.

Design files use camelCase keys (``blockTemplates``, ``createdAt``,
``backgroundColor``, ``isOverflow``, ``exportDate``). Unknown keys are
ignored so files written by newer editors still load.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from wallcraft.domain.entities import Design, DesignArchive, DesignPreview
from wallcraft.domain.value_objects import Block, BlockTemplate, Wall


class WireModel(BaseModel):
    """Base for all design file models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class WallSchema(WireModel):
    width: float = Field(gt=0, strict=True)
    height: float = Field(gt=0, strict=True)
    background_color: str = "#f5f5f5"

    def to_domain(self) -> Wall:
        return Wall(self.width, self.height, self.background_color)

    @classmethod
    def from_domain(cls, wall: Wall) -> WallSchema:
        return cls(
            width=wall.width,
            height=wall.height,
            background_color=wall.background_color,
        )


class BlockSchema(WireModel):
    id: str = Field(min_length=1)
    x: float
    y: float
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    color: str = "#ffffff"
    texture_image: str | None = None
    is_overflow: bool = False

    def to_domain(self) -> Block:
        return Block(
            x=self.x,
            y=self.y,
            width=self.width,
            height=self.height,
            id=self.id,
            color=self.color,
            texture_image=self.texture_image,
            is_overflow=self.is_overflow,
        )

    @classmethod
    def from_domain(cls, block: Block) -> BlockSchema:
        return cls(
            id=block.id,
            x=block.x,
            y=block.y,
            width=block.width,
            height=block.height,
            color=block.color,
            texture_image=block.texture_image,
            is_overflow=block.is_overflow,
        )


class BlockTemplateSchema(WireModel):
    """Template entry; editors store templates as blocks parked at the origin."""

    id: str = Field(min_length=1)
    x: float = 0
    y: float = 0
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    color: str = "#ffffff"

    def to_domain(self) -> BlockTemplate:
        return BlockTemplate(self.id, self.width, self.height, self.color)

    @classmethod
    def from_domain(cls, template: BlockTemplate) -> BlockTemplateSchema:
        return cls(
            id=template.id,
            width=template.width,
            height=template.height,
            color=template.color,
        )


class PreviewSchema(WireModel):
    block_count: int = Field(ge=0)
    wall_dimensions: str
    template_count: int = Field(ge=0)

    def to_domain(self) -> DesignPreview:
        return DesignPreview(self.block_count, self.wall_dimensions, self.template_count)

    @classmethod
    def from_domain(cls, preview: DesignPreview) -> PreviewSchema:
        return cls(
            block_count=preview.block_count,
            wall_dimensions=preview.wall_dimensions,
            template_count=preview.template_count,
        )


class DesignSchema(WireModel):
    """A single design file.

    The name, the blocks and blockTemplates arrays and the wall are required;
    id, createdAt and preview are filled in on import when missing.
    """

    id: str | None = None
    name: str
    wall: WallSchema
    blocks: list[BlockSchema]
    block_templates: list[BlockTemplateSchema]
    created_at: datetime | None = None
    preview: PreviewSchema | None = None

    def to_domain(self, design_id: str) -> Design:
        """Build a domain Design under the given id.

        A missing preview is computed from the design contents.
        """
        design = Design(
            id=design_id,
            name=self.name,
            wall=self.wall.to_domain(),
            blocks=[block.to_domain() for block in self.blocks],
            block_templates=[t.to_domain() for t in self.block_templates],
            created_at=self.created_at or datetime.now(timezone.utc),
        )
        design.preview = (
            self.preview.to_domain() if self.preview is not None else design.build_preview()
        )
        return design

    @classmethod
    def from_domain(cls, design: Design) -> DesignSchema:
        preview = design.preview or design.build_preview()
        return cls(
            id=design.id,
            name=design.name,
            wall=WallSchema.from_domain(design.wall),
            blocks=[BlockSchema.from_domain(b) for b in design.blocks],
            block_templates=[
                BlockTemplateSchema.from_domain(t) for t in design.block_templates
            ],
            created_at=design.created_at,
            preview=PreviewSchema.from_domain(preview),
        )


class DesignArchiveSchema(WireModel):
    """A multi-design export archive."""

    export_date: datetime | None = None
    designs: list[DesignSchema] = Field(min_length=1)


__all__ = [
    "BlockSchema",
    "BlockTemplateSchema",
    "DesignArchiveSchema",
    "DesignSchema",
    "PreviewSchema",
    "WallSchema",
    "WireModel",
]
