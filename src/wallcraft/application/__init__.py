"""Application layer - use cases and orchestration."""

from .commands import DropBlockCommand, GenerateLayoutCommand, MoveBlockCommand
from .dtos import BlockSizeInput, LayoutOutput, PlacementOutput

__all__ = [
    "BlockSizeInput",
    "DropBlockCommand",
    "GenerateLayoutCommand",
    "LayoutOutput",
    "MoveBlockCommand",
    "PlacementOutput",
]
