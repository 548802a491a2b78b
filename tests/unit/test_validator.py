"""Unit tests for placement validation.

The plain validator only checks the wall's floor and ceiling, while the
acceptance check used by the searches also applies the horizontal bound.
"""

from wallcraft.domain import Rect, Wall, can_place, can_place_block
from wallcraft.domain.services import collides, is_acceptable_position

from conftest import make_block


class TestCanPlaceBlock:
    """Tests for can_place_block()."""

    def test_empty_wall_accepts_block(self, wall: Wall) -> None:
        assert can_place_block(Rect(0, 0, 60, 30), [], wall)

    def test_alias(self) -> None:
        assert can_place is can_place_block

    def test_rejects_overlap(self, wall: Wall) -> None:
        existing = [make_block(0, 0)]
        assert not can_place_block(Rect(30, 10, 60, 30), existing, wall)

    def test_accepts_touching_edge(self, wall: Wall) -> None:
        existing = [make_block(0, 0)]
        assert can_place_block(Rect(60, 0, 60, 30), existing, wall)
        assert can_place_block(Rect(0, 30, 60, 30), existing, wall)

    def test_excluded_block_is_ignored(self, wall: Wall) -> None:
        existing = [make_block(0, 0, block_id="moving")]
        rect = Rect(10, 0, 60, 30)
        assert not can_place_block(rect, existing, wall)
        assert can_place_block(rect, existing, wall, exclude_block_id="moving")

    def test_rejects_block_larger_than_wall(self, wall: Wall) -> None:
        assert not can_place_block(Rect(0, 0, 201, 30), [], wall)
        assert not can_place_block(Rect(0, 0, 60, 101), [], wall)

    def test_wall_sized_block_at_origin(self, wall: Wall) -> None:
        assert can_place_block(Rect(0, 0, 200, 100), [], wall)

    def test_wall_sized_block_has_no_overflow_tolerance(self, wall: Wall) -> None:
        """A block as large as the wall fits nowhere but the origin."""
        assert not can_place_block(Rect(0, -10, 200, 100), [], wall)
        assert not can_place_block(Rect(-50, 0, 200, 100), [], wall)
        assert not can_place_block(Rect(50, 0, 200, 100), [], wall)

    def test_full_width_block_stays_flush_with_the_sides(self, wall: Wall) -> None:
        assert can_place_block(Rect(0, -30, 200, 30), [], wall)
        assert not can_place_block(Rect(-10, 0, 200, 30), [], wall)

    def test_full_height_block_cannot_rise_above_the_top(self, wall: Wall) -> None:
        assert not can_place_block(Rect(0, -5, 60, 100), [], wall)
        assert can_place_block(Rect(-70, 0, 60, 100), [], wall)

    def test_rejects_below_floor(self, wall: Wall) -> None:
        assert not can_place_block(Rect(0, 71, 60, 30), [], wall)

    def test_top_overflow_within_tolerance(self, wall: Wall) -> None:
        assert can_place_block(Rect(0, -30, 60, 30), [], wall)
        assert not can_place_block(Rect(0, -31, 60, 30), [], wall)
        assert not can_place_block(Rect(0, -10, 60, 30), [], wall, max_block_height=5)

    def test_horizontal_overflow_is_not_checked(self, wall: Wall) -> None:
        """Sideways drags past the wall edge are left to the callers."""
        assert can_place_block(Rect(-70, 0, 60, 30), [], wall)
        assert can_place_block(Rect(500, 0, 60, 30), [], wall)


class TestIsAcceptablePosition:
    """Tests for is_acceptable_position()."""

    def test_applies_horizontal_bound(self, wall: Wall) -> None:
        rect = Rect(-70, 0, 60, 30)
        assert can_place_block(rect, [], wall)
        assert not is_acceptable_position(rect, [], wall)

    def test_horizontal_overflow_within_tolerance(self, wall: Wall) -> None:
        assert is_acceptable_position(Rect(-60, 0, 60, 30), [], wall)
        assert is_acceptable_position(Rect(200, 0, 60, 30), [], wall)

    def test_strict_requires_wall_containment(self, wall: Wall) -> None:
        rect = Rect(150, 0, 60, 30)
        assert is_acceptable_position(rect, [], wall)
        assert not is_acceptable_position(rect, [], wall, strict=True)

    def test_still_rejects_collisions(self, wall: Wall) -> None:
        existing = [make_block(0, 0)]
        assert not is_acceptable_position(Rect(20, 0, 60, 30), existing, wall)


class TestCollides:
    """Tests for collides()."""

    def test_no_blocks(self) -> None:
        assert not collides(Rect(0, 0, 10, 10), [])

    def test_exclusion_of_unknown_id_changes_nothing(self) -> None:
        existing = [make_block(0, 0)]
        assert collides(Rect(0, 0, 10, 10), existing, exclude_block_id="missing")
