"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wallcraft import __version__
from wallcraft.web.exceptions import register_exception_handlers
from wallcraft.web.routers import (
    designs_router,
    layout_router,
    placement_router,
    templates_router,
    textures_router,
)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="Wallcraft API",
        description="REST API for placing blocks on wall designs",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # CORS middleware for browser access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(placement_router, prefix="/api/v1")
    app.include_router(layout_router, prefix="/api/v1")
    app.include_router(designs_router, prefix="/api/v1")
    app.include_router(templates_router, prefix="/api/v1")
    app.include_router(textures_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()
