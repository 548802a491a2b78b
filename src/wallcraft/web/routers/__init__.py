"""API routers for the REST API."""

from wallcraft.web.routers.designs import router as designs_router
from wallcraft.web.routers.layout import router as layout_router
from wallcraft.web.routers.placement import router as placement_router
from wallcraft.web.routers.templates import router as templates_router
from wallcraft.web.routers.textures import router as textures_router

__all__ = [
    "designs_router",
    "layout_router",
    "placement_router",
    "templates_router",
    "textures_router",
]
