"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from meetnotes.api.errors import register_error_handlers
from meetnotes.api.router import router as api_router
from meetnotes.api.web.views import STATIC_DIR
from meetnotes.api.web.views import router as web_router
from meetnotes.config import Settings, get_settings
from meetnotes.infrastructure.database import Database
from meetnotes.infrastructure.gemini_client import GeminiClient
from meetnotes.infrastructure.mailer import EmailClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings: Settings = app.state.settings

    logger.info("Starting MeetNotes application...")
    logger.info(f"Environment: {settings.environment}")
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; summarize requests will fail")

    # Startup: shared clients built once from the same settings object
    app.state.database = Database(settings)
    app.state.gemini_client = GeminiClient.from_settings(settings)
    app.state.email_client = EmailClient(settings)

    yield

    # Shutdown: release HTTP session and pooled connections
    await app.state.gemini_client.close()
    await app.state.database.dispose()
    logger.info("Shutting down MeetNotes application...")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    docs_kwargs = {}
    if settings.is_production:
        docs_kwargs = {"docs_url": None, "redoc_url": None, "openapi_url": None}

    app = FastAPI(
        title="MeetNotes",
        description="AI meeting notes summarizer with editable, shareable summaries",
        version="0.1.0",
        lifespan=lifespan,
        **docs_kwargs,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    # Mount static files
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    # Include routers
    app.include_router(api_router)
    app.include_router(web_router)

    @app.get("/health")
    async def health_check(request: Request) -> JSONResponse:
        """Lightweight health check with DB connectivity test."""
        try:
            await request.app.state.database.ping()
            return JSONResponse({"status": "healthy", "database": "connected"})
        except Exception as e:
            logger.warning(f"Health check failed: {e}")
            return JSONResponse(
                {"status": "unhealthy", "database": "disconnected"},
                status_code=503,
            )

    return app


settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Create app instance
app = create_app(settings)
