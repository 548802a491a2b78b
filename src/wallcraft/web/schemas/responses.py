"""Pydantic response schemas for the REST API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from wallcraft.web.schemas.common import BlockSpecSchema, PositionSchema


class ResolveResponse(BaseModel):
    """Response for drop position resolution."""

    position: PositionSchema = Field(..., description="Resolved position")
    requested: PositionSchema = Field(..., description="Requested position")
    was_adjusted: bool = Field(..., description="Position differs from the request")
    is_overflow: bool = Field(..., description="Block extends past the wall there")
    is_valid: bool = Field(..., description="Position is collision-free and in bounds")


class CheckResponse(BaseModel):
    """Response for a placement check."""

    can_place: bool = Field(..., description="No collision and vertically in bounds")
    is_acceptable: bool = Field(..., description="Also within the horizontal tolerance")
    within_wall: bool = Field(..., description="Entirely on the wall")
    horizontal_overflow: bool = Field(..., description="Extends past a side")
    vertical_overflow: bool = Field(..., description="Extends past the top or bottom")


class SearchResponse(BaseModel):
    """Response for position searches."""

    found: bool = Field(..., description="Whether a position was found")
    position: PositionSchema | None = Field(default=None, description="The position")


class OverlapResponse(BaseModel):
    """Response for overlap classification."""

    is_small: bool = Field(..., description="Only small overlaps")
    has_overlap: bool = Field(..., description="Overlaps any block")
    offenders: list[str] = Field(default_factory=list, description="Slightly overlapped ids")
    significant: list[str] = Field(
        default_factory=list, description="Significantly overlapped ids"
    )


class LayoutResponse(BaseModel):
    """Response for layout generation."""

    blocks: list[BlockSpecSchema] = Field(default_factory=list, description="Placed blocks")
    requested: int = Field(..., description="Blocks asked for")
    placed: int = Field(..., description="Blocks placed")
    overflow_count: int = Field(..., description="Blocks extending past the wall")
    warnings: list[str] = Field(default_factory=list, description="Warnings")


class TemplateSchema(BaseModel):
    """Bundled block template."""

    id: str = Field(..., description="Template id")
    width: float = Field(..., description="Width")
    height: float = Field(..., description="Height")
    color: str = Field(..., description="Colour")
    description: str = Field(default="", description="Description")


class TemplateListSchema(BaseModel):
    """Response for listing templates."""

    templates: list[TemplateSchema] = Field(..., description="Available templates")


class DesignSummarySchema(BaseModel):
    """Saved design as shown when browsing."""

    index: int = Field(..., description="Storage index")
    id: str = Field(..., description="Design id")
    name: str = Field(..., description="Design name")
    created_at: datetime = Field(..., description="Creation time")
    block_count: int = Field(..., description="Number of blocks")
    wall_dimensions: str = Field(..., description="Wall dimensions label")
    template_count: int = Field(..., description="Number of templates")


class DesignListSchema(BaseModel):
    """Response for listing saved designs."""

    designs: list[DesignSummarySchema] = Field(..., description="Saved designs")


class ImportSummarySchema(BaseModel):
    """Response for design import."""

    imported: int = Field(..., description="Designs added")
    overwritten: int = Field(..., description="Designs replaced")
    skipped: int = Field(..., description="Designs skipped")


class ImageSchema(BaseModel):
    """Response carrying a processed image."""

    image: str = Field(..., description="PNG data URL")


class ResizedImageSchema(BaseModel):
    """Response for image downscaling."""

    image: str = Field(..., description="PNG data URL")
    original_width: int = Field(..., description="Source width in pixels")
    original_height: int = Field(..., description="Source height in pixels")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
