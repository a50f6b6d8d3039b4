"""
FastAPI Application
==================

Main FastAPI application serving the Positronic Database Client welcome page,
its static assets and the PositronicDB placeholder endpoints.
"""

from contextlib import asynccontextmanager
import uuid
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from positronic import PRODUCT_NAME
from positronic.config.settings import get_settings, Settings
from positronic.config.logging import get_logger
from positronic.core.rendering.welcome_page import WelcomePageError, WelcomePageRenderer
from positronic.models.schemas import ErrorResponse
from positronic.api.routes.database import router as database_router
from positronic.api.routes.health import router as health_router
from positronic.api.routes.welcome import router as welcome_router

logger = get_logger(__name__)

STATIC_DIR = Path(__file__).parent.parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting FastAPI application", app_name=app.title)

    try:
        app.state.welcome_renderer = WelcomePageRenderer(settings=app.state.settings)
        logger.info("Welcome page renderer initialized")
    except Exception as e:
        logger.error("Failed to initialize welcome page renderer", error=str(e))
        raise RuntimeError(f"Welcome page renderer initialization failed: {e}")

    logger.info(f"{PRODUCT_NAME} loaded")

    try:
        yield
    finally:
        logger.info("Shutting down FastAPI application")


async def add_request_id(request: Request, call_next):  # type: ignore
    """Add request ID to all requests."""
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id

    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id

    return response


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    error_code: str,
    details: Optional[dict] = None,
) -> JSONResponse:
    error_response = ErrorResponse(
        error=error,
        error_code=error_code,
        details=details if request.app.state.settings.debug else None,
        request_id=getattr(request.state, "request_id", None),
    )
    return JSONResponse(status_code=status_code, content=error_response.model_dump(mode="json"))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """HTTP exception handler with structured error response."""
    logger.error(
        "HTTP exception",
        status_code=exc.status_code,
        detail=exc.detail,
        request_id=getattr(request.state, "request_id", None),
    )
    return _error_response(request, exc.status_code, str(exc.detail), str(exc.status_code))


async def welcome_page_exception_handler(request: Request, exc: WelcomePageError) -> JSONResponse:
    """Handle welcome page rendering failures."""
    logger.error(
        "Welcome page error",
        error_message=str(exc),
        request_id=getattr(request.state, "request_id", None),
    )
    return _error_response(
        request,
        500,
        "The welcome page could not be rendered.",
        "WELCOME_RENDER_ERROR",
        {"message": str(exc)},
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """General exception handler for unexpected errors.

    Runs outside the request ID middleware, so the header is set here.
    """
    request_id = getattr(request.state, "request_id", None)
    logger.error(
        "Unhandled exception",
        exception=str(exc),
        request_id=request_id,
        exc_info=True,
    )
    response = _error_response(
        request, 500, "Internal server error", "INTERNAL_ERROR", {"exception": str(exc)}
    )
    if request_id:
        response.headers["X-Request-ID"] = request_id
    return response


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory function for creating FastAPI app instance.

    Args:
        settings: Settings to build the app with, defaults to the global settings

    Returns:
        FastAPI application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Multi-database management console",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.enable_docs else None,
        redoc_url="/redoc" if settings.enable_docs else None,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_hosts,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.middleware("http")(add_request_id)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(WelcomePageError, welcome_page_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(welcome_router)
    app.include_router(health_router)
    app.include_router(database_router)
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    return app


app = create_app()


def run_development_server() -> None:
    """Run development server with auto-reload."""
    settings = get_settings()
    uvicorn.run(
        "positronic.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


if __name__ == "__main__":
    run_development_server()
