"""Pillow-based texture processing for block fills.

Images travel as data URLs (``data:image/png;base64,...``). Every operation
returns a PNG data URL. Texture results only ever populate a block's
texture_image and never influence placement.
"""

from __future__ import annotations

import base64
import binascii
import io
import logging
from typing import Any

from PIL import Image, ImageChops, ImageColor, UnidentifiedImageError

from wallcraft.contracts.dtos import CropArea, ResizedImage

logger = logging.getLogger(__name__)

TEXTURE_TILE_SIZE = 128


class TextureError(Exception):
    """Exception raised for texture processing errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (load_error, invalid_crop,
            invalid_parameter)
        details: Additional error details
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def decode_data_url(data_url: str) -> Image.Image:
    """Load an image from a base64 data URL.

    Raises:
        TextureError: If the URL is malformed or does not hold an image.
    """
    header, sep, payload = data_url.partition(",")
    if not sep or not header.startswith("data:") or not header.endswith(";base64"):
        raise TextureError("Image must be a base64 data URL", error_type="load_error")
    try:
        raw = base64.b64decode(payload, validate=True)
        image = Image.open(io.BytesIO(raw))
        image.load()
    except (binascii.Error, UnidentifiedImageError, OSError) as e:
        raise TextureError(f"Failed to load image: {e}", error_type="load_error")
    return image


def encode_data_url(image: Image.Image) -> str:
    """Encode an image as a PNG data URL."""
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    b64 = base64.b64encode(buffer.getvalue()).decode("utf-8")
    return f"data:image/png;base64,{b64}"


class PillowTextureProcessor:
    """Crops, tints and downsizes texture images with Pillow.

    Attributes:
        tile_size: Edge length of tinted texture tiles.
    """

    def __init__(self, tile_size: int = TEXTURE_TILE_SIZE) -> None:
        self.tile_size = tile_size

    def crop(self, image: str, area: CropArea) -> str:
        """Cut a rectangle out of an image.

        Parts of the area outside the source come out transparent; an area
        entirely outside the source is rejected.

        Raises:
            TextureError: If the image cannot be loaded or the area misses it.
        """
        source = decode_data_url(image).convert("RGBA")
        if area.x >= source.width or area.y >= source.height:
            raise TextureError(
                f"Crop area at ({area.x}, {area.y}) lies outside the "
                f"{source.width}x{source.height} image",
                error_type="invalid_crop",
            )
        cropped = source.crop((area.x, area.y, area.x + area.width, area.y + area.height))
        return encode_data_url(cropped)

    def blend_with_color(self, image: str, color: str, strength: float = 0.5) -> str:
        """Tint an image with a colour while keeping its texture detail.

        The image is scaled to a square tile, multiplied with the colour at
        the given strength, then overlaid with the original at the remaining
        strength.

        Args:
            image: Source image data URL.
            color: CSS colour, e.g. "#3498db".
            strength: Colour weight between 0 (original) and 1 (full tint).

        Raises:
            TextureError: If the image cannot be loaded or a parameter is invalid.
        """
        if not 0 <= strength <= 1:
            raise TextureError(
                f"Blend strength must be between 0 and 1, got {strength}",
                error_type="invalid_parameter",
            )
        try:
            rgb = ImageColor.getrgb(color)[:3]
        except ValueError:
            raise TextureError(f"Invalid colour: {color}", error_type="invalid_parameter")

        size = (self.tile_size, self.tile_size)
        source = decode_data_url(image).convert("RGBA").resize(size)
        base = source.convert("RGB")

        fill = Image.new("RGB", size, rgb)
        tinted = Image.blend(base, ImageChops.multiply(base, fill), strength)
        detailed = Image.blend(tinted, ImageChops.overlay(tinted, base), 1 - strength)

        result = detailed.convert("RGBA")
        result.putalpha(source.getchannel("A"))
        return encode_data_url(result)

    def resize_for_cropping(self, image: str, max_size: int = 400) -> ResizedImage:
        """Downscale an image to fit a max_size square, keeping the aspect ratio.

        Images already within the limit are re-encoded unchanged in size.

        Raises:
            TextureError: If the image cannot be loaded or max_size is not positive.
        """
        if max_size <= 0:
            raise TextureError(
                f"max_size must be positive, got {max_size}",
                error_type="invalid_parameter",
            )
        source = decode_data_url(image)
        width, height = source.size
        resized = source
        if width > max_size or height > max_size:
            ratio = min(max_size / width, max_size / height)
            new_size = (max(1, round(width * ratio)), max(1, round(height * ratio)))
            resized = source.resize(new_size, Image.Resampling.LANCZOS)
            logger.debug("Resized %dx%d image to %dx%d", width, height, *new_size)
        return ResizedImage(
            data_url=encode_data_url(resized),
            original_width=width,
            original_height=height,
        )


__all__ = [
    "PillowTextureProcessor",
    "TEXTURE_TILE_SIZE",
    "TextureError",
    "decode_data_url",
    "encode_data_url",
]
