"""Pytest configuration and shared fixtures for wallcraft tests."""

from __future__ import annotations

import itertools
from pathlib import Path
from typing import Callable

import pytest

from wallcraft.domain import Block, BlockTemplate, Design, Wall

FIXTURES_PATH = Path(__file__).parent / "fixtures"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


def make_block(
    x: float,
    y: float,
    width: float = 60,
    height: float = 30,
    block_id: str | None = None,
    color: str = "#ffffff",
) -> Block:
    """Create a test block; the id defaults to its coordinates."""
    return Block(
        x=x,
        y=y,
        width=width,
        height=height,
        id=block_id or f"b-{x:g}-{y:g}",
        color=color,
    )


@pytest.fixture
def wall() -> Wall:
    """A 200x100 wall."""
    return Wall(200, 100)


@pytest.fixture
def large_wall() -> Wall:
    """A 300x150 wall."""
    return Wall(300, 150)


@pytest.fixture
def full_wall_blocks() -> list[Block]:
    """Four 60x30 blocks filling a 120x60 wall."""
    return [
        make_block(0, 0, block_id="a"),
        make_block(60, 0, block_id="b"),
        make_block(0, 30, block_id="c"),
        make_block(60, 30, block_id="d"),
    ]


@pytest.fixture
def id_factory() -> Callable[[], str]:
    """Deterministic id factory producing block-1, block-2, ..."""
    counter = itertools.count(1)
    return lambda: f"block-{next(counter)}"


@pytest.fixture
def default_templates() -> list[BlockTemplate]:
    return [
        BlockTemplate("template-1", 60, 30, "#ffffff"),
        BlockTemplate("template-2", 60, 30, "#eeeeee"),
        BlockTemplate("template-3", 60, 30, "#222222"),
    ]


@pytest.fixture
def design(large_wall: Wall, default_templates: list[BlockTemplate]) -> Design:
    """A 300x150 design holding one block in the top-left corner."""
    return Design(
        id="design-1",
        name="Kitchen",
        wall=large_wall,
        blocks=[make_block(0, 0, block_id="first")],
        block_templates=default_templates,
    )
