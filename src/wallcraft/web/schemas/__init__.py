"""Pydantic schemas for the REST API."""

from wallcraft.web.schemas.common import (
    BlockSpecSchema,
    PositionSchema,
    RectSchema,
    SizeSchema,
    WallSpecSchema,
)
from wallcraft.web.schemas.requests import (
    AdjacentRequest,
    BlendRequest,
    CheckRequest,
    CropAreaSchema,
    CropRequest,
    DesignImportRequest,
    LayoutRequest,
    OverlapRequest,
    PlacementContextRequest,
    ResizeRequest,
    ResolveRequest,
    WithinWallRequest,
)
from wallcraft.web.schemas.responses import (
    CheckResponse,
    DesignListSchema,
    DesignSummarySchema,
    ErrorResponseSchema,
    ImageSchema,
    ImportSummarySchema,
    LayoutResponse,
    OverlapResponse,
    ResizedImageSchema,
    ResolveResponse,
    SearchResponse,
    TemplateListSchema,
    TemplateSchema,
)

__all__ = [
    # Common
    "BlockSpecSchema",
    "PositionSchema",
    "RectSchema",
    "SizeSchema",
    "WallSpecSchema",
    # Requests
    "AdjacentRequest",
    "BlendRequest",
    "CheckRequest",
    "CropAreaSchema",
    "CropRequest",
    "DesignImportRequest",
    "LayoutRequest",
    "OverlapRequest",
    "PlacementContextRequest",
    "ResizeRequest",
    "ResolveRequest",
    "WithinWallRequest",
    # Responses
    "CheckResponse",
    "DesignListSchema",
    "DesignSummarySchema",
    "ErrorResponseSchema",
    "ImageSchema",
    "ImportSummarySchema",
    "LayoutResponse",
    "OverlapResponse",
    "ResizedImageSchema",
    "ResolveResponse",
    "SearchResponse",
    "TemplateListSchema",
    "TemplateSchema",
]
