"""Contracts module - collaborator protocols and the DTOs they exchange.

Example:
    ```python
    from wallcraft.contracts import DesignStorageProtocol

    def count_designs(storage: DesignStorageProtocol) -> int:
        return len(storage.load())
    ```
"""

from .dtos import (
    CropArea as CropArea,
    ImportSummary as ImportSummary,
    ResizedImage as ResizedImage,
)
from .protocols import (
    DesignCodecProtocol as DesignCodecProtocol,
    DesignStorageProtocol as DesignStorageProtocol,
    TextureProcessorProtocol as TextureProcessorProtocol,
)

__all__ = [
    "CropArea",
    "DesignCodecProtocol",
    "DesignStorageProtocol",
    "ImportSummary",
    "ResizedImage",
    "TextureProcessorProtocol",
]
