"""Layout generation endpoints."""

import random

from fastapi import APIRouter

from wallcraft.application import BlockSizeInput, GenerateLayoutCommand
from wallcraft.domain import Design
from wallcraft.infrastructure import new_design_id
from wallcraft.web.dependencies import TemplateCatalogDep, settings_from_request
from wallcraft.web.exceptions import LayoutGenerationError
from wallcraft.web.schemas.common import BlockSpecSchema
from wallcraft.web.schemas.requests import LayoutRequest
from wallcraft.web.schemas.responses import LayoutResponse

router = APIRouter(prefix="/layout", tags=["layout"])


@router.post("/generate", response_model=LayoutResponse)
async def generate_layout(
    request: LayoutRequest,
    catalog: TemplateCatalogDep,
) -> LayoutResponse:
    """Fill a wall with randomly placed blocks.

    Args:
        request: Wall, size catalog, block budget and optional seed.
        catalog: Injected TemplateCatalog supplying the default sizes.

    Returns:
        The generated blocks.

    Raises:
        LayoutGenerationError: If the inputs cannot produce a layout.
    """
    design = Design(
        id=new_design_id(),
        name="Generated Design",
        wall=request.wall.to_domain(),
        block_templates=catalog.default_templates(),
    )
    sizes = None
    if request.block_sizes is not None:
        sizes = [BlockSizeInput(s.width, s.height) for s in request.block_sizes]

    settings = None if request.config is None else settings_from_request(request.config)
    rng = random.Random(request.seed) if request.seed is not None else None
    output = GenerateLayoutCommand(settings, rng=rng).execute(
        design, request.max_blocks, sizes
    )
    if not output.is_valid:
        raise LayoutGenerationError(output.errors)

    return LayoutResponse(
        blocks=[BlockSpecSchema.from_domain(b) for b in output.blocks],
        requested=output.requested,
        placed=len(output.blocks),
        overflow_count=output.overflow_count,
        warnings=output.warnings,
    )
