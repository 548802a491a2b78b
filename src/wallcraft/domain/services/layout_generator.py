"""Automatic wall layout generation."""

from __future__ import annotations

import logging
import random
import uuid
from typing import Callable, Iterable, Protocol

from ..value_objects import Block, PlacementSettings, Rect, Size, Wall
from .geometry import is_overflowing
from .placement import PlacementService

logger = logging.getLogger(__name__)

__all__ = [
    "LayoutGenerator",
    "generate_layout",
    "new_block_id",
]


class _Sized(Protocol):
    width: float
    height: float


def new_block_id() -> str:
    return uuid.uuid4().hex


class LayoutGenerator:
    """Fills a wall with randomly sized, randomly coloured blocks.

    Each attempt picks a size from the catalog and asks the placement service
    for a position; failed attempts still count against the attempt budget,
    so generation always terminates. A partly filled wall is a valid result.

    Attributes:
        placement: Placement service used to find positions.
        rng: Random source for sizes, colours and sampling. Seed it to make
            layouts reproducible.
        id_factory: Callable producing new block ids.
    """

    def __init__(
        self,
        settings: PlacementSettings | None = None,
        rng: random.Random | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self.placement = PlacementService(settings)
        self.rng = rng or random.Random()
        self.id_factory = id_factory or new_block_id

    @property
    def settings(self) -> PlacementSettings:
        return self.placement.settings

    def generate(
        self,
        wall: Wall,
        block_sizes: Iterable[_Sized],
        max_blocks: int = 50,
    ) -> list[Block]:
        """Generate a layout.

        Args:
            wall: The wall to fill.
            block_sizes: Catalog of sizes (Size, BlockTemplate or anything with
                width and height) to choose from uniformly.
            max_blocks: Maximum number of blocks to place.

        Returns:
            The placed blocks in placement order.
        """
        sizes = [Size(item.width, item.height) for item in block_sizes]
        if not sizes or max_blocks <= 0:
            return []

        blocks: list[Block] = []
        attempts = 0
        max_attempts = max_blocks * self.settings.layout_attempts_multiplier

        while len(blocks) < max_blocks and attempts < max_attempts:
            attempts += 1
            size = self.rng.choice(sizes)
            position = self.placement.find_valid_position(
                size, blocks, wall, rng=self.rng
            )
            if position is None:
                continue
            rect = Rect.at(position, size)
            blocks.append(
                Block(
                    x=rect.x,
                    y=rect.y,
                    width=rect.width,
                    height=rect.height,
                    id=self.id_factory(),
                    color=self.rng.choice(self.settings.palette),
                    is_overflow=is_overflowing(rect, wall),
                )
            )

        logger.info(
            "Generated %d of %d blocks in %d attempts", len(blocks), max_blocks, attempts
        )
        return blocks


def generate_layout(
    wall: Wall,
    block_sizes: Iterable[_Sized],
    max_blocks: int = 50,
    settings: PlacementSettings | None = None,
    rng: random.Random | None = None,
    id_factory: Callable[[], str] | None = None,
) -> list[Block]:
    """Functional shortcut for LayoutGenerator.generate."""
    return LayoutGenerator(settings, rng, id_factory).generate(
        wall, block_sizes, max_blocks
    )
