"""Placement endpoints: drop resolution, checks and position searches."""

from fastapi import APIRouter

from wallcraft.domain import (
    Block,
    PlacementService,
    Rect,
    classify_overlap,
    is_horizontally_overflowing,
    is_overflowing,
    is_vertically_overflowing,
)
from wallcraft.web.dependencies import settings_from_request
from wallcraft.web.schemas.common import PositionSchema
from wallcraft.web.schemas.requests import (
    AdjacentRequest,
    CheckRequest,
    OverlapRequest,
    PlacementContextRequest,
    ResolveRequest,
    WithinWallRequest,
)
from wallcraft.web.schemas.responses import (
    CheckResponse,
    OverlapResponse,
    ResolveResponse,
    SearchResponse,
)

router = APIRouter(prefix="/placement", tags=["placement"])


def _context(request: PlacementContextRequest) -> tuple[PlacementService, list[Block]]:
    service = PlacementService(settings_from_request(request.config))
    return service, [block.to_domain() for block in request.blocks]


def _search_response(position) -> SearchResponse:
    if position is None:
        return SearchResponse(found=False)
    return SearchResponse(found=True, position=PositionSchema.from_domain(position))


@router.post("/resolve", response_model=ResolveResponse)
async def resolve_drop(request: ResolveRequest) -> ResolveResponse:
    """Resolve where a dropped or dragged block should land.

    Args:
        request: Wall, blocks, requested position and block size.

    Returns:
        The resolved position and whether it is a valid placement.
    """
    service, blocks = _context(request)
    wall = request.wall.to_domain()
    size = request.size.to_domain()
    target = request.target.to_domain()

    position = service.resolve_drop_position(
        target, size, blocks, wall, request.exclude_block_id
    )
    is_valid = size.fits_within(wall) and service.is_acceptable(
        Rect.at(position, size), blocks, wall, request.exclude_block_id
    )
    return ResolveResponse(
        position=PositionSchema.from_domain(position),
        requested=request.target,
        was_adjusted=position != target,
        is_overflow=size.fits_within(wall) and is_overflowing(Rect.at(position, size), wall),
        is_valid=is_valid,
    )


@router.post("/check", response_model=CheckResponse)
async def check_placement(request: CheckRequest) -> CheckResponse:
    """Check a rectangle against the wall and the existing blocks."""
    service, blocks = _context(request)
    wall = request.wall.to_domain()
    rect = request.rect.to_domain()
    return CheckResponse(
        can_place=service.can_place(rect, blocks, wall, request.exclude_block_id),
        is_acceptable=service.is_acceptable(rect, blocks, wall, request.exclude_block_id),
        within_wall=wall.contains(rect),
        horizontal_overflow=is_horizontally_overflowing(rect, wall),
        vertical_overflow=is_vertically_overflowing(rect, wall),
    )


@router.post("/within-wall", response_model=SearchResponse)
async def find_within_wall(request: WithinWallRequest) -> SearchResponse:
    """Find the best scoring position strictly inside the wall."""
    service, blocks = _context(request)
    position = service.find_position_within_wall(
        request.size.to_domain(),
        blocks,
        request.wall.to_domain(),
        request.exclude_block_id,
    )
    return _search_response(position)


@router.post("/adjacent", response_model=SearchResponse)
async def find_adjacent(request: AdjacentRequest) -> SearchResponse:
    """Find the position touching a target block closest to the pointer."""
    service, blocks = _context(request)
    position = service.find_adjacent_position(
        request.size.to_domain(),
        request.target_block.to_domain(),
        blocks,
        request.wall.to_domain(),
        request.drag_position.to_domain(),
        request.exclude_block_id,
    )
    return _search_response(position)


@router.post("/overlap", response_model=OverlapResponse)
async def classify(request: OverlapRequest) -> OverlapResponse:
    """Classify how much a candidate overlaps the existing blocks."""
    report = classify_overlap(
        request.candidate.to_domain(),
        [block.to_domain() for block in request.blocks],
        threshold=request.threshold,
        exclude_block_id=request.exclude_block_id,
    )
    return OverlapResponse(
        is_small=report.is_small,
        has_overlap=report.has_overlap,
        offenders=[b.id for b in report.offenders],
        significant=[b.id for b in report.significant],
    )
