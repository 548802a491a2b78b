"""Unit tests for the rectangle primitives.

Tests cover:
- overlaps() symmetry and edge/corner contact
- overlap_percentage() relative to the first rectangle
- strict overflow flags versus tolerant position bounds
- is_adjacent() edge contact
- snap_to_grid() rounding
"""

import pytest

from wallcraft.domain import Position, Rect, Wall
from wallcraft.domain.services import (
    intersection,
    is_adjacent,
    is_horizontally_overflowing,
    is_overflowing,
    is_valid_horizontal_position,
    is_valid_vertical_position,
    is_vertically_overflowing,
    is_within_wall,
    overlap_area,
    overlap_percentage,
    overlaps,
    snap_to_grid,
)


class TestOverlaps:
    """Tests for overlaps()."""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (Rect(0, 0, 60, 30), Rect(30, 10, 60, 30), True),
            (Rect(0, 0, 60, 30), Rect(60, 0, 60, 30), False),
            (Rect(0, 0, 60, 30), Rect(0, 30, 60, 30), False),
            (Rect(0, 0, 60, 30), Rect(60, 30, 60, 30), False),
            (Rect(0, 0, 60, 30), Rect(10, 5, 10, 10), True),
            (Rect(0, 0, 60, 30), Rect(200, 200, 10, 10), False),
        ],
    )
    def test_overlaps_is_symmetric(self, a: Rect, b: Rect, expected: bool) -> None:
        """overlaps(a, b) and overlaps(b, a) agree."""
        assert overlaps(a, b) is expected
        assert overlaps(b, a) is expected

    def test_identical_rectangles_overlap(self) -> None:
        rect = Rect(10, 10, 60, 30)
        assert overlaps(rect, Rect(10, 10, 60, 30))

    def test_intersection_rectangle(self) -> None:
        shared = intersection(Rect(0, 0, 60, 30), Rect(40, 20, 60, 30))
        assert shared == Rect(40, 20, 20, 10)

    def test_no_intersection_when_touching(self) -> None:
        assert intersection(Rect(0, 0, 60, 30), Rect(60, 0, 60, 30)) is None
        assert overlap_area(Rect(0, 0, 60, 30), Rect(60, 0, 60, 30)) == 0.0


class TestOverlapPercentage:
    """Tests for overlap_percentage()."""

    def test_zero_without_overlap(self) -> None:
        assert overlap_percentage(Rect(0, 0, 60, 30), Rect(60, 0, 60, 30)) == 0

    def test_self_overlap_is_full(self) -> None:
        rect = Rect(5, 5, 60, 30)
        assert overlap_percentage(rect, rect) == 100

    def test_relative_to_first_rectangle(self) -> None:
        """A small rectangle inside a large one covers 100% of itself only."""
        small = Rect(0, 0, 10, 10)
        large = Rect(0, 0, 100, 100)
        assert overlap_percentage(small, large) == 100
        assert overlap_percentage(large, small) == pytest.approx(1.0)

    def test_five_unit_sliver(self) -> None:
        """A 5-wide overlap of two 60-wide blocks is about 8.3%."""
        percentage = overlap_percentage(Rect(55, 0, 60, 30), Rect(0, 0, 60, 30))
        assert percentage == pytest.approx(5 / 60 * 100)


class TestOverflow:
    """Tests for the strict overflow flags."""

    def test_inside_wall_does_not_overflow(self, wall: Wall) -> None:
        rect = Rect(0, 0, 200, 100)
        assert not is_overflowing(rect, wall)
        assert is_within_wall(rect, wall)

    def test_horizontal_overflow(self, wall: Wall) -> None:
        assert is_horizontally_overflowing(Rect(-1, 0, 60, 30), wall)
        assert is_horizontally_overflowing(Rect(141, 0, 60, 30), wall)
        assert not is_vertically_overflowing(Rect(141, 0, 60, 30), wall)

    def test_vertical_overflow(self, wall: Wall) -> None:
        assert is_vertically_overflowing(Rect(0, -5, 60, 30), wall)
        assert is_vertically_overflowing(Rect(0, 71, 60, 30), wall)
        assert is_overflowing(Rect(0, 71, 60, 30), wall)


class TestTolerantBounds:
    """Tests for the tolerant position predicates used during search."""

    def test_horizontal_tolerance_on_both_sides(self, wall: Wall) -> None:
        assert is_valid_horizontal_position(Rect(-60, 0, 60, 30), wall)
        assert is_valid_horizontal_position(Rect(200, 0, 60, 30), wall)
        assert not is_valid_horizontal_position(Rect(-61, 0, 60, 30), wall)
        assert not is_valid_horizontal_position(Rect(201, 0, 60, 30), wall)

    def test_vertical_tolerance_only_above(self, wall: Wall) -> None:
        assert is_valid_vertical_position(Rect(0, -30, 60, 30), wall)
        assert not is_valid_vertical_position(Rect(0, -31, 60, 30), wall)
        assert is_valid_vertical_position(Rect(0, 70, 60, 30), wall)
        assert not is_valid_vertical_position(Rect(0, 71, 60, 30), wall)

    def test_custom_tolerances(self, wall: Wall) -> None:
        assert is_valid_horizontal_position(Rect(-90, 0, 60, 30), wall, max_block_width=90)
        assert not is_valid_vertical_position(Rect(0, -1, 60, 30), wall, max_block_height=0)

    def test_wall_sized_dimension_has_no_tolerance(self, wall: Wall) -> None:
        assert is_valid_horizontal_position(Rect(0, 0, 200, 30), wall)
        assert not is_valid_horizontal_position(Rect(-1, 0, 200, 30), wall)
        assert is_valid_vertical_position(Rect(0, 0, 60, 100), wall)
        assert not is_valid_vertical_position(Rect(0, -1, 60, 100), wall)


class TestIsAdjacent:
    """Tests for is_adjacent()."""

    def test_shared_vertical_edge(self) -> None:
        assert is_adjacent(Rect(0, 0, 60, 30), Rect(60, 10, 60, 30))

    def test_shared_horizontal_edge(self) -> None:
        assert is_adjacent(Rect(0, 0, 60, 30), Rect(30, 30, 60, 30))

    def test_corner_contact_is_not_adjacent(self) -> None:
        assert not is_adjacent(Rect(0, 0, 60, 30), Rect(60, 30, 60, 30))

    def test_overlapping_is_not_adjacent(self) -> None:
        assert not is_adjacent(Rect(0, 0, 60, 30), Rect(30, 0, 60, 30))

    def test_gap_is_not_adjacent(self) -> None:
        assert not is_adjacent(Rect(0, 0, 60, 30), Rect(61, 0, 60, 30))


class TestSnapToGrid:
    """Tests for snap_to_grid()."""

    @pytest.mark.parametrize(
        "position, expected",
        [
            (Position(0, 0), Position(0, 0)),
            (Position(22, 8), Position(15, 15)),
            (Position(7.5, 7.4), Position(15, 0)),
            (Position(-8, -7), Position(-15, 0)),
            (Position(1000, 1000), Position(1005, 1005)),
        ],
    )
    def test_rounds_to_nearest_multiple(self, position: Position, expected: Position) -> None:
        assert snap_to_grid(position) == expected

    def test_custom_grid(self) -> None:
        assert snap_to_grid(Position(12, 26), grid_size=10) == Position(10, 30)

    def test_rejects_non_positive_grid(self) -> None:
        with pytest.raises(ValueError, match="Grid size must be positive"):
            snap_to_grid(Position(1, 1), grid_size=0)
