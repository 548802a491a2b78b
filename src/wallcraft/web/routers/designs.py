"""Saved design endpoints."""

from typing import Any

from fastapi import APIRouter, status

from wallcraft.domain import Design, DesignArchive
from wallcraft.infrastructure import DesignFormatError, JsonDesignCodec
from wallcraft.web.dependencies import DesignCodecDep, DesignStorageDep
from wallcraft.web.schemas.requests import DesignImportRequest
from wallcraft.web.schemas.responses import (
    DesignListSchema,
    DesignSummarySchema,
    ErrorResponseSchema,
    ImportSummarySchema,
)

router = APIRouter(prefix="/designs", tags=["designs"])


def _summary(index: int, design: Design) -> DesignSummarySchema:
    preview = design.preview or design.build_preview()
    return DesignSummarySchema(
        index=index,
        id=design.id,
        name=design.name,
        created_at=design.created_at,
        block_count=preview.block_count,
        wall_dimensions=preview.wall_dimensions,
        template_count=preview.template_count,
    )


@router.get("", response_model=DesignListSchema)
async def list_designs(storage: DesignStorageDep) -> DesignListSchema:
    """List saved designs in storage order."""
    return DesignListSchema(
        designs=[_summary(i, d) for i, d in enumerate(storage.load())]
    )


@router.get("/export")
async def export_designs(
    storage: DesignStorageDep, codec: DesignCodecDep
) -> dict[str, Any]:
    """Export all saved designs as an archive."""
    return codec.to_dict(DesignArchive(designs=storage.load()))


@router.get("/{index}", responses={404: {"model": ErrorResponseSchema}})
async def get_design(
    index: int, storage: DesignStorageDep, codec: DesignCodecDep
) -> dict[str, Any]:
    """Get a saved design in design file format.

    Raises:
        StorageError: If the index is out of range (handled by exception handler).
    """
    return codec.to_dict(storage.get(index))


@router.post(
    "",
    response_model=DesignSummarySchema,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponseSchema}},
)
async def save_design(
    data: dict[str, Any], storage: DesignStorageDep
) -> DesignSummarySchema:
    """Save a design, replacing a stored design with the same id.

    The body is a single design in design file format.

    Raises:
        DesignFormatError: If the body is not a valid design.
    """
    result = JsonDesignCodec(keep_ids=True).from_dict(data)
    if isinstance(result, DesignArchive):
        raise DesignFormatError(
            "Expected a single design, got an archive", error_type="validation"
        )
    storage.save(result)
    index = next(i for i, d in enumerate(storage.load()) if d.id == result.id)
    return _summary(index, result)


@router.delete(
    "/{index}",
    response_model=DesignSummarySchema,
    responses={404: {"model": ErrorResponseSchema}},
)
async def delete_design(index: int, storage: DesignStorageDep) -> DesignSummarySchema:
    """Delete a saved design and return its summary."""
    return _summary(index, storage.delete(index))


@router.post("/import", response_model=ImportSummarySchema)
async def import_designs(
    request: DesignImportRequest,
    storage: DesignStorageDep,
    codec: DesignCodecDep,
) -> ImportSummarySchema:
    """Import a design file or archive; duplicates are matched by name."""
    result = codec.from_dict(request.data)
    designs = result.designs if isinstance(result, DesignArchive) else [result]
    summary = storage.import_batch(designs, overwrite=request.overwrite)
    return ImportSummarySchema(
        imported=summary.imported,
        overwritten=summary.overwritten,
        skipped=summary.skipped,
    )
