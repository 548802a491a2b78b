"""Protocols for the collaborators around the placement engine.

The placement engine is pure computation. Persistence, file framing and
texture processing sit behind these protocols so that the application layer
and the web/CLI surfaces can be tested with in-memory doubles.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from wallcraft.contracts.dtos import CropArea, ImportSummary, ResizedImage
    from wallcraft.domain.entities import Design, DesignArchive


@runtime_checkable
class DesignStorageProtocol(Protocol):
    """Persistence of named designs.

    Designs are updated in place by id; batch imports detect duplicates by
    name.
    """

    def load(self) -> list[Design]:
        """Return all stored designs in storage order."""
        ...

    def save(self, design: Design) -> None:
        """Insert the design, or replace the stored design with the same id."""
        ...

    def delete(self, index: int) -> Design:
        """Remove and return the design at a storage index."""
        ...

    def import_batch(
        self, designs: Sequence[Design], overwrite: bool = False
    ) -> ImportSummary:
        """Store several designs, resolving name clashes per overwrite."""
        ...


@runtime_checkable
class DesignCodecProtocol(Protocol):
    """File framing for design export and import."""

    def serialize(self, payload: Design | DesignArchive) -> bytes:
        ...

    def parse(self, data: bytes) -> Design | DesignArchive:
        """Decode and validate a design or archive.

        Raises:
            DesignFormatError: If the data is not a valid design file.
        """
        ...


@runtime_checkable
class TextureProcessorProtocol(Protocol):
    """Image operations used to build block textures.

    All images are exchanged as data URLs. Results only ever populate a
    block's texture_image; they never influence placement.
    """

    def crop(self, image: str, area: CropArea) -> str:
        ...

    def blend_with_color(self, image: str, color: str, strength: float = 0.5) -> str:
        ...

    def resize_for_cropping(self, image: str, max_size: int = 400) -> ResizedImage:
        ...


__all__ = [
    "DesignCodecProtocol",
    "DesignStorageProtocol",
    "TextureProcessorProtocol",
]
