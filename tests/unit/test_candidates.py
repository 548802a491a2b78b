"""Unit tests for the candidate position generators."""

import random
import time

from wallcraft.domain import Block, PlacementSettings, Position, Rect, Size, Wall
from wallcraft.domain.services import (
    adjacent_to_blocks,
    adjacent_to_target,
    grid_scan_within_wall,
    nearby_search,
    overflow_scan,
    overlaps,
    random_sample,
    snap_to_adjacent_edges,
    snap_to_grid_candidate,
    touching_positions,
)

from conftest import make_block

BLOCK = Size(60, 30)


class TestTouchingPositions:
    """Tests for touching_positions()."""

    def test_rank_order(self) -> None:
        anchor = Rect(100, 50, 60, 30)
        ranked = touching_positions(anchor, BLOCK)
        assert [rank for rank, _ in ranked] == [1, 2, 3, 4, 5, 5, 6, 6]
        assert ranked[0][1] == Position(160, 50)
        assert ranked[1][1] == Position(40, 50)
        assert ranked[2][1] == Position(100, 80)
        assert ranked[3][1] == Position(100, 20)

    def test_positions_touch_anchor(self) -> None:
        anchor = Rect(100, 50, 60, 30)
        for _, position in touching_positions(anchor, BLOCK):
            assert not overlaps(Rect.at(position, BLOCK), anchor)


class TestAdjacentToBlocks:
    """Tests for adjacent_to_blocks()."""

    def test_prefers_right_of_first_block(self, large_wall: Wall) -> None:
        blocks = [make_block(0, 0)]
        assert adjacent_to_blocks(BLOCK, blocks, large_wall) == Position(60, 0)

    def test_rank_beats_block_order(self, large_wall: Wall) -> None:
        """A "right of" candidate on the second block beats "left of" the first."""
        blocks = [make_block(240, 0, block_id="edge"), make_block(0, 60, block_id="inner")]
        position = adjacent_to_blocks(BLOCK, blocks, large_wall, strict=True)
        assert position == Position(60, 60)

    def test_strict_skips_overflowing_positions(self, full_wall_blocks: list[Block]) -> None:
        wall = Wall(120, 60)
        assert adjacent_to_blocks(BLOCK, full_wall_blocks, wall, strict=True) is None
        assert adjacent_to_blocks(BLOCK, full_wall_blocks, wall) == Position(120, 0)

    def test_no_blocks(self, wall: Wall) -> None:
        assert adjacent_to_blocks(BLOCK, [], wall) is None

    def test_size_larger_than_wall(self, wall: Wall) -> None:
        assert adjacent_to_blocks(Size(300, 30), [make_block(0, 0)], wall) is None


class TestAdjacentToTarget:
    """Tests for adjacent_to_target()."""

    def test_nearest_to_drag_pointer(self, large_wall: Wall) -> None:
        target = make_block(100, 50, block_id="target")
        right = adjacent_to_target(BLOCK, target, [target], large_wall, Position(170, 55))
        left = adjacent_to_target(BLOCK, target, [target], large_wall, Position(30, 50))
        assert right == Position(160, 50)
        assert left == Position(40, 50)

    def test_skips_occupied_side(self, large_wall: Wall) -> None:
        target = make_block(100, 50, block_id="target")
        blocker = make_block(160, 50, block_id="blocker")
        position = adjacent_to_target(
            BLOCK, target, [target, blocker], large_wall, Position(170, 55)
        )
        assert position is not None
        assert position != Position(160, 50)
        assert not overlaps(Rect.at(position, BLOCK), blocker)


class TestGridScanWithinWall:
    """Tests for grid_scan_within_wall()."""

    def test_empty_wall_prefers_origin(self, wall: Wall) -> None:
        assert grid_scan_within_wall(BLOCK, [], wall) == Position(0, 0)

    def test_prefers_adjacent_edge_position(self, wall: Wall) -> None:
        blocks = [make_block(0, 0)]
        assert grid_scan_within_wall(BLOCK, blocks, wall) == Position(60, 0)

    def test_full_wall(self, full_wall_blocks: list[Block]) -> None:
        assert grid_scan_within_wall(BLOCK, full_wall_blocks, Wall(120, 60)) is None

    def test_reaches_far_edge_with_uneven_span(self) -> None:
        """Positions flush with the far edge are scanned even off the step grid."""
        wall = Wall(61, 30)
        blocks = [make_block(0, 0, width=1, block_id="sliver")]
        assert grid_scan_within_wall(BLOCK, blocks, wall) == Position(1, 0)

    def test_result_lies_within_wall(self, wall: Wall) -> None:
        blocks = [make_block(0, 0), make_block(60, 0), make_block(0, 30)]
        position = grid_scan_within_wall(BLOCK, blocks, wall)
        assert position is not None
        assert wall.contains(Rect.at(position, BLOCK))

    def test_flush_with_off_grid_block_edge(self, wall: Wall) -> None:
        """A neighbour whose edge misses the step grid can still be touched."""
        blocks = [make_block(0, 0, width=61)]
        assert grid_scan_within_wall(BLOCK, blocks, wall) == Position(61, 0)

    def test_finds_single_enclosed_gap(self) -> None:
        wall = Wall(180, 90)
        blocks = [
            make_block(x, y)
            for y in (0, 30, 60)
            for x in (0, 60, 120)
            if (x, y) != (60, 30)
        ]
        assert grid_scan_within_wall(BLOCK, blocks, wall) == Position(60, 30)

    def test_large_wall_scan_is_fast(self) -> None:
        """The scan cost follows the blocks, not the wall area."""
        wall = Wall(1200, 600)
        blocks = [make_block(x * 91 + 3, y * 97 + 5) for y in range(2) for x in range(13)]

        start = time.perf_counter()
        position = grid_scan_within_wall(BLOCK, blocks, wall)
        elapsed = time.perf_counter() - start

        assert position is not None
        assert not any(overlaps(Rect.at(position, BLOCK), block) for block in blocks)
        assert elapsed < 0.5


class TestOverflowScan:
    """Tests for overflow_scan()."""

    def test_top_overflow_phase(self, full_wall_blocks: list[Block]) -> None:
        assert overflow_scan(BLOCK, full_wall_blocks, Wall(120, 60)) == Position(0, -30)

    def test_side_overflow_phase(self, full_wall_blocks: list[Block]) -> None:
        settings = PlacementSettings(max_block_height=0)
        position = overflow_scan(BLOCK, full_wall_blocks, Wall(120, 60), settings)
        assert position == Position(120, 0)

    def test_no_room_anywhere(self, full_wall_blocks: list[Block]) -> None:
        settings = PlacementSettings(max_block_width=0, max_block_height=0)
        assert overflow_scan(BLOCK, full_wall_blocks, Wall(120, 60), settings) is None


class TestRandomSample:
    """Tests for random_sample()."""

    def test_sparse_wall_position_is_free(self, wall: Wall) -> None:
        blocks = [make_block(0, 0)]
        position = random_sample(BLOCK, blocks, wall, random.Random(3))
        assert position is not None
        rect = Rect.at(position, BLOCK)
        assert wall.contains(rect)
        assert not overlaps(rect, blocks[0])

    def test_same_seed_same_position(self, wall: Wall) -> None:
        first = random_sample(BLOCK, [], wall, random.Random(11))
        second = random_sample(BLOCK, [], wall, random.Random(11))
        assert first == second

    def test_dense_wall_uses_shuffled_grid(self, wall: Wall) -> None:
        settings = PlacementSettings(sparse_layout_limit=0)
        blocks = [make_block(0, 0)]
        position = random_sample(BLOCK, blocks, wall, random.Random(5), settings)
        assert position is not None
        assert position.x in (*range(0, 136, 15), 140)
        assert position.y in (*range(0, 61, 15), 70)
        assert not overlaps(Rect.at(position, BLOCK), blocks[0])

    def test_full_wall(self, full_wall_blocks: list[Block]) -> None:
        assert random_sample(BLOCK, full_wall_blocks, Wall(120, 60), random.Random(1)) is None


class TestSnapping:
    """Tests for grid and edge snapping."""

    def test_grid_snap(self, large_wall: Wall) -> None:
        blocks = [make_block(0, 0)]
        position = snap_to_grid_candidate(Position(62, 2), BLOCK, blocks, large_wall)
        assert position == Position(60, 0)

    def test_grid_snap_rejects_collision(self, large_wall: Wall) -> None:
        blocks = [make_block(0, 0)]
        assert snap_to_grid_candidate(Position(52, 3), BLOCK, blocks, large_wall) is None

    def test_edge_snap_keeps_row(self, large_wall: Wall) -> None:
        blocks = [make_block(0, 0)]
        snap = snap_to_adjacent_edges(Position(52, 3), BLOCK, blocks, large_wall)
        assert snap is not None
        assert snap.position == Position(60, 3)
        assert snap.distance == 8
        assert snap.in_bounds

    def test_edge_snap_out_of_reach(self, large_wall: Wall) -> None:
        blocks = [make_block(0, 0)]
        assert snap_to_adjacent_edges(Position(150, 100), BLOCK, blocks, large_wall) is None

    def test_edge_snap_prefers_in_bounds(self) -> None:
        """An in-bounds snap wins over a closer one that overflows."""
        wall = Wall(200, 100)
        blocks = [make_block(62, 5, block_id="side")]
        snap = snap_to_adjacent_edges(Position(0, -3), BLOCK, blocks, wall)
        assert snap is not None
        assert snap.in_bounds
        assert snap.position == Position(2, 5)


class TestNearbySearch:
    """Tests for nearby_search()."""

    def test_nearest_free_position(self, large_wall: Wall) -> None:
        blocks = [make_block(0, 0)]
        assert nearby_search(Position(56, 0), BLOCK, blocks, large_wall) == Position(60, 0)

    def test_target_itself_when_free(self, large_wall: Wall) -> None:
        assert nearby_search(Position(33, 41), BLOCK, [], large_wall) == Position(33, 41)

    def test_nothing_within_radius(self, full_wall_blocks: list[Block]) -> None:
        assert nearby_search(Position(30, 15), BLOCK, full_wall_blocks, Wall(120, 60)) is None
