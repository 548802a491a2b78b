"""Block template endpoints."""

from fastapi import APIRouter

from wallcraft.web.dependencies import TemplateCatalogDep
from wallcraft.web.schemas.responses import (
    ErrorResponseSchema,
    TemplateListSchema,
    TemplateSchema,
)

router = APIRouter(prefix="/templates", tags=["templates"])


def _to_schema(template, description: str) -> TemplateSchema:
    return TemplateSchema(
        id=template.id,
        width=template.width,
        height=template.height,
        color=template.color,
        description=description,
    )


@router.get("", response_model=TemplateListSchema)
async def list_templates(catalog: TemplateCatalogDep) -> TemplateListSchema:
    """List the bundled block templates."""
    return TemplateListSchema(
        templates=[_to_schema(t, d) for t, d in catalog.list_templates()]
    )


@router.get(
    "/{template_id}",
    response_model=TemplateSchema,
    responses={404: {"model": ErrorResponseSchema}},
)
async def get_template(template_id: str, catalog: TemplateCatalogDep) -> TemplateSchema:
    """Get a bundled template.

    Raises:
        TemplateNotFoundError: If template does not exist (handled by exception handler).
    """
    template = catalog.get_template(template_id)
    descriptions = {t.id: d for t, d in catalog.list_templates()}
    return _to_schema(template, descriptions.get(template_id, ""))
