"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from wallcraft.application.config import ConfigError
from wallcraft.application.templates import TemplateNotFoundError
from wallcraft.infrastructure import DesignFormatError, StorageError, TextureError


class LayoutGenerationError(Exception):
    """Raised when layout generation fails."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Layout generation failed: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": f"config_{exc.error_type}",
                "details": exc.details or None,
            },
        )

    @app.exception_handler(DesignFormatError)
    async def design_format_error_handler(
        request: Request, exc: DesignFormatError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        status_code = 404 if exc.error_type == "index_out_of_range" else 500
        return JSONResponse(
            status_code=status_code,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": None,
            },
        )

    @app.exception_handler(TextureError)
    async def texture_error_handler(request: Request, exc: TextureError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(LayoutGenerationError)
    async def layout_error_handler(
        request: Request, exc: LayoutGenerationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Layout generation failed",
                "error_type": "generation",
                "details": [{"message": e} for e in exc.errors],
            },
        )

    @app.exception_handler(TemplateNotFoundError)
    async def template_not_found_handler(
        request: Request, exc: TemplateNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": f"Template not found: {exc.template_id}",
                "error_type": "not_found",
                "details": None,
            },
        )
