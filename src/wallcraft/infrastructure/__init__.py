"""Infrastructure layer - design files, storage and texture processing."""

from .codec import DesignFormatError, JsonDesignCodec, new_design_id
from .storage import DEFAULT_STORE_PATH, JsonDesignStorage, StorageError
from .textures import PillowTextureProcessor, TextureError

__all__ = [
    "DEFAULT_STORE_PATH",
    "DesignFormatError",
    "JsonDesignCodec",
    "JsonDesignStorage",
    "PillowTextureProcessor",
    "StorageError",
    "TextureError",
    "new_design_id",
]
