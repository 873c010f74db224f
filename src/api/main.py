"""FastAPI application main module.

This module builds the FastAPI application for the ShopList service, wires
the routers and error handlers, and serves as the entry point for the API
server.
"""

import logging
from typing import Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src import __version__
from src.api.exceptions import MalformedRequestError, MethodNotAllowedError, ShoppingListException
from src.api.logging_config import RequestLoggingMiddleware
from src.api.routes import products, shopping_list
from src.config import Settings, get_settings

# Configure module logger
logger = logging.getLogger(__name__)

USAGE_TEXT = (
    "Example usage of the available endpoints:\n"
    "  GET /products\n"
    "  GET /products?category=warzywa\n"
    "  GET /products/most-used\n"
    "  POST /shopping-list/add\n"
)


def _error_response(exc: ShoppingListException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def shopping_list_exception_handler(
    request: Request, exc: ShoppingListException
) -> JSONResponse:
    """Map domain errors to ``{"error": message}`` responses."""
    log = logger.warning if exc.status_code < 500 else logger.error
    log(
        exc.message,
        extra={
            "path": request.url.path,
            "status_code": exc.status_code,
            "details": exc.details,
        },
    )
    return _error_response(exc)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report undecodable or ill-typed request bodies as 400."""
    return await shopping_list_exception_handler(request, MalformedRequestError(str(exc.errors())))


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render routing errors (unknown path, wrong method) in the error format."""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return await shopping_list_exception_handler(
            request, MethodNotAllowedError(request.method, request.url.path)
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Settings to use. Defaults to ``get_settings()``.

    Returns:
        Configured application instance.
    """
    settings = settings or get_settings()

    application = FastAPI(
        title="ShopList API",
        description="In-memory shopping list with product usage tracking",
        version=__version__,
    )
    application.state.settings = settings

    if settings.log_requests:
        application.add_middleware(RequestLoggingMiddleware)

    application.add_exception_handler(ShoppingListException, shopping_list_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Include routers
    application.include_router(products.router)
    application.include_router(shopping_list.router)

    @application.get("/", response_class=PlainTextResponse)
    def usage() -> str:
        """Describe the available endpoints."""
        return USAGE_TEXT

    @application.get("/ping")
    def ping() -> Dict[str, str]:
        """Health check endpoint.

        Returns:
            Dictionary with status key set to "ok".

        Example:
            >>> response = client.get("/ping")
            >>> assert response.json() == {"status": "ok"}
        """
        return {"status": "ok"}

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    from src.api.logging_config import setup_logging

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    uvicorn.run(app, host=settings.host, port=settings.port)
