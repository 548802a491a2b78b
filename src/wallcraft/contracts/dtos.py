"""Shared DTOs exchanged with the collaborator protocols."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ImportSummary:
    """Outcome of importing a batch of designs into storage.

    Attributes:
        imported: Designs added under a new name.
        overwritten: Designs that replaced a stored design of the same name.
        skipped: Designs ignored because the name exists and overwrite is off.
    """

    imported: int = 0
    overwritten: int = 0
    skipped: int = 0

    @property
    def total(self) -> int:
        return self.imported + self.overwritten + self.skipped


@dataclass(frozen=True)
class CropArea:
    """Pixel rectangle to cut out of a source image."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Crop dimensions must be positive")
        if self.x < 0 or self.y < 0:
            raise ValueError("Crop origin must be non-negative")


@dataclass(frozen=True)
class ResizedImage:
    """A downscaled image plus the size of the original."""

    data_url: str
    original_width: int
    original_height: int
