"""FastAPI application entry point.

Tierboard API - tier ratings and Top-10 leaderboard.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from tierboard.errors import TierboardError
from tierboard.routes import api_router
from tierboard.settings import get_settings
from tierboard.stores.ratings_file import close_store, init_store

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown events.
    """
    # Startup
    settings = get_settings()
    store = init_store(settings.ratings_file)
    logger.info(f"Ratings document: {store.path.resolve()}")
    if settings.static_dir.is_dir():
        logger.info(f"Front-end page: http://localhost:{settings.port}")
    logger.info(f"API: http://localhost:{settings.port}/api")

    yield

    # Shutdown
    close_store()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Tier ratings and Top-10 leaderboard API",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(TierboardError)
    async def tierboard_exception_handler(request: Request, exc: TierboardError) -> JSONResponse:
        """Request-level errors in the {success, msg} envelope."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "msg": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Undecodable request bodies are client errors."""
        return JSONResponse(
            status_code=400,
            content={"success": False, "msg": "Request body must be valid JSON"},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler returning the error envelope."""
        logger.exception("Unhandled error")
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "msg": str(exc) if settings.debug else "Internal server error",
            },
        )

    # Health check endpoint
    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, bool]:
        """Health check endpoint."""
        return {"ok": True}

    # Include API routes
    app.include_router(api_router)

    # Front-end page; mounted last so API routes win
    if settings.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "tierboard.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
