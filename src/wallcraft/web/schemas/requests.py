"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from wallcraft.web.schemas.common import (
    BlockSpecSchema,
    PositionSchema,
    RectSchema,
    SizeSchema,
    WallSpecSchema,
)


class PlacementContextRequest(BaseModel):
    """Wall, existing blocks and optional engine configuration."""

    wall: WallSpecSchema = Field(..., description="The wall being designed")
    blocks: list[BlockSpecSchema] = Field(
        default_factory=list, description="Blocks already on the wall"
    )
    exclude_block_id: str | None = Field(
        default=None, description="Id of the block being moved"
    )
    config: dict[str, Any] | None = Field(
        default=None, description="Optional placement configuration JSON"
    )


class ResolveRequest(PlacementContextRequest):
    """Request to resolve a drop position."""

    target: PositionSchema = Field(..., description="Requested top-left position")
    size: SizeSchema = Field(..., description="Size of the dropped block")


class CheckRequest(PlacementContextRequest):
    """Request to check a rectangle against the wall and its blocks."""

    rect: RectSchema = Field(..., description="Rectangle to check")


class WithinWallRequest(PlacementContextRequest):
    """Request for the best position strictly inside the wall."""

    size: SizeSchema = Field(..., description="Size of the block to place")


class AdjacentRequest(PlacementContextRequest):
    """Request for a position touching a target block."""

    size: SizeSchema = Field(..., description="Size of the block to place")
    target_block: RectSchema = Field(..., description="Block to place against")
    drag_position: PositionSchema = Field(..., description="Current pointer position")


class OverlapRequest(BaseModel):
    """Request to classify a candidate's overlap with existing blocks."""

    candidate: RectSchema = Field(..., description="Rectangle at the proposed position")
    blocks: list[BlockSpecSchema] = Field(
        default_factory=list, description="Blocks already on the wall"
    )
    threshold: float = Field(
        default=25.0, ge=0, le=100, description="Small overlap threshold in percent"
    )
    exclude_block_id: str | None = Field(
        default=None, description="Id of the block being moved"
    )


class LayoutRequest(BaseModel):
    """Request for automatic layout generation."""

    wall: WallSpecSchema = Field(..., description="The wall to fill")
    block_sizes: list[SizeSchema] | None = Field(
        default=None, description="Size catalog; defaults to the bundled templates"
    )
    max_blocks: int = Field(default=50, ge=1, le=1000, description="Maximum blocks")
    seed: int | None = Field(default=None, description="Random seed")
    config: dict[str, Any] | None = Field(
        default=None, description="Optional placement configuration JSON"
    )


class DesignImportRequest(BaseModel):
    """Request to import a design file or archive into storage."""

    data: dict[str, Any] = Field(..., description="Design file or archive JSON")
    overwrite: bool = Field(
        default=False, description="Replace saved designs with the same name"
    )


class CropAreaSchema(BaseModel):
    """Pixel rectangle of a source image."""

    x: int = Field(..., ge=0, description="Left edge in pixels")
    y: int = Field(..., ge=0, description="Top edge in pixels")
    width: int = Field(..., gt=0, description="Width in pixels")
    height: int = Field(..., gt=0, description="Height in pixels")


class CropRequest(BaseModel):
    """Request to crop a texture image."""

    image: str = Field(..., description="Source image data URL")
    area: CropAreaSchema = Field(..., description="Pixel rectangle to cut out")


class BlendRequest(BaseModel):
    """Request to tint a texture image."""

    image: str = Field(..., description="Source image data URL")
    color: str = Field(..., description="Tint colour")
    strength: float = Field(default=0.5, ge=0, le=1, description="Tint strength")


class ResizeRequest(BaseModel):
    """Request to downscale a texture image for cropping."""

    image: str = Field(..., description="Source image data URL")
    max_size: int = Field(default=400, gt=0, description="Maximum edge length")
