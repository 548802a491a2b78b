"""Unit tests for Pillow texture processing."""

import base64
import io

import pytest
from PIL import Image

from wallcraft.contracts.dtos import CropArea
from wallcraft.infrastructure import PillowTextureProcessor, TextureError
from wallcraft.infrastructure.textures import decode_data_url, encode_data_url


def png_data_url(width: int, height: int, color=(200, 100, 50, 255)) -> str:
    image = Image.new("RGBA", (width, height), color)
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buffer.getvalue()).decode("ascii")


@pytest.fixture
def processor() -> PillowTextureProcessor:
    return PillowTextureProcessor()


class TestDataUrls:
    """Tests for data URL decoding and encoding."""

    def test_round_trip(self) -> None:
        image = decode_data_url(png_data_url(8, 4))
        assert image.size == (8, 4)
        assert encode_data_url(image).startswith("data:image/png;base64,")

    @pytest.mark.parametrize(
        "value",
        [
            "not a data url",
            "data:image/png,plain",
            "data:image/png;base64,@@@",
            "data:image/png;base64," + base64.b64encode(b"not an image").decode("ascii"),
        ],
    )
    def test_rejects_bad_input(self, value: str) -> None:
        with pytest.raises(TextureError) as exc_info:
            decode_data_url(value)
        assert exc_info.value.error_type == "load_error"


class TestCrop:
    """Tests for PillowTextureProcessor.crop()."""

    def test_crop_size(self, processor: PillowTextureProcessor) -> None:
        result = processor.crop(png_data_url(100, 80), CropArea(10, 20, 30, 40))
        assert decode_data_url(result).size == (30, 40)

    def test_area_past_edge_is_transparent(self, processor: PillowTextureProcessor) -> None:
        result = decode_data_url(processor.crop(png_data_url(50, 50), CropArea(40, 40, 20, 20)))

        assert result.size == (20, 20)
        assert result.getpixel((0, 0))[3] == 255
        assert result.getpixel((19, 19))[3] == 0

    def test_area_outside_image(self, processor: PillowTextureProcessor) -> None:
        with pytest.raises(TextureError) as exc_info:
            processor.crop(png_data_url(50, 50), CropArea(50, 0, 10, 10))
        assert exc_info.value.error_type == "invalid_crop"

    def test_crop_area_validation(self) -> None:
        with pytest.raises(ValueError):
            CropArea(0, 0, 0, 10)
        with pytest.raises(ValueError):
            CropArea(-1, 0, 10, 10)


class TestBlendWithColor:
    """Tests for PillowTextureProcessor.blend_with_color()."""

    def test_output_is_tile_sized(self, processor: PillowTextureProcessor) -> None:
        result = processor.blend_with_color(png_data_url(300, 200), "#3498db")
        assert decode_data_url(result).size == (128, 128)

    def test_zero_strength_keeps_overlay_of_original(
        self, processor: PillowTextureProcessor
    ) -> None:
        """At zero strength the tint is skipped and only the overlay applies."""
        white = png_data_url(4, 4, (255, 255, 255, 255))
        result = decode_data_url(processor.blend_with_color(white, "#000000", 0))
        assert result.getpixel((0, 0)) == (255, 255, 255, 255)

    def test_full_strength_multiplies(self, processor: PillowTextureProcessor) -> None:
        white = png_data_url(4, 4, (255, 255, 255, 255))
        result = decode_data_url(processor.blend_with_color(white, "#ff0000", 1))
        assert result.getpixel((0, 0)) == (255, 0, 0, 255)

    def test_keeps_transparency(self, processor: PillowTextureProcessor) -> None:
        clear = png_data_url(4, 4, (255, 255, 255, 0))
        result = decode_data_url(processor.blend_with_color(clear, "#ff0000"))
        assert result.getpixel((0, 0))[3] == 0

    @pytest.mark.parametrize("strength", [-0.1, 1.5])
    def test_rejects_strength(self, processor: PillowTextureProcessor, strength: float) -> None:
        with pytest.raises(TextureError) as exc_info:
            processor.blend_with_color(png_data_url(4, 4), "#ff0000", strength)
        assert exc_info.value.error_type == "invalid_parameter"

    def test_rejects_colour(self, processor: PillowTextureProcessor) -> None:
        with pytest.raises(TextureError, match="Invalid colour"):
            processor.blend_with_color(png_data_url(4, 4), "not-a-colour")


class TestResizeForCropping:
    """Tests for PillowTextureProcessor.resize_for_cropping()."""

    def test_downscales_keeping_aspect(self, processor: PillowTextureProcessor) -> None:
        result = processor.resize_for_cropping(png_data_url(800, 400))

        assert (result.original_width, result.original_height) == (800, 400)
        assert decode_data_url(result.data_url).size == (400, 200)

    def test_small_image_unchanged(self, processor: PillowTextureProcessor) -> None:
        result = processor.resize_for_cropping(png_data_url(120, 90))
        assert decode_data_url(result.data_url).size == (120, 90)

    def test_custom_max_size(self, processor: PillowTextureProcessor) -> None:
        result = processor.resize_for_cropping(png_data_url(100, 300), max_size=150)
        assert decode_data_url(result.data_url).size == (50, 150)

    def test_rejects_non_positive_max_size(self, processor: PillowTextureProcessor) -> None:
        with pytest.raises(TextureError) as exc_info:
            processor.resize_for_cropping(png_data_url(10, 10), max_size=0)
        assert exc_info.value.error_type == "invalid_parameter"
