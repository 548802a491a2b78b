"""Texture processing endpoints."""

from fastapi import APIRouter

from wallcraft.contracts import CropArea
from wallcraft.web.dependencies import TextureProcessorDep
from wallcraft.web.schemas.requests import BlendRequest, CropRequest, ResizeRequest
from wallcraft.web.schemas.responses import ImageSchema, ResizedImageSchema

router = APIRouter(prefix="/textures", tags=["textures"])


@router.post("/crop", response_model=ImageSchema)
async def crop_texture(request: CropRequest, processor: TextureProcessorDep) -> ImageSchema:
    """Cut a rectangle out of an uploaded image."""
    area = CropArea(
        x=request.area.x,
        y=request.area.y,
        width=request.area.width,
        height=request.area.height,
    )
    return ImageSchema(image=processor.crop(request.image, area))


@router.post("/blend", response_model=ImageSchema)
async def blend_texture(request: BlendRequest, processor: TextureProcessorDep) -> ImageSchema:
    """Tint an image with a block colour."""
    return ImageSchema(
        image=processor.blend_with_color(request.image, request.color, request.strength)
    )


@router.post("/resize", response_model=ResizedImageSchema)
async def resize_texture(
    request: ResizeRequest, processor: TextureProcessorDep
) -> ResizedImageSchema:
    """Downscale an image so it can be cropped comfortably."""
    resized = processor.resize_for_cropping(request.image, request.max_size)
    return ResizedImageSchema(
        image=resized.data_url,
        original_width=resized.original_width,
        original_height=resized.original_height,
    )
