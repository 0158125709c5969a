"""FastAPI application for the VoiceStore server."""

import logging

import uvicorn
from fastapi import FastAPI

from voicestore.domain_service import VoiceprintService

from .dependencies import build_voiceprint_service
from .exception_handlers import register_exception_handlers
from .settings import settings

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:     %(name)s - %(message)s",
)

logger = logging.getLogger(__name__)


def create_app(service: VoiceprintService | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        service: Voiceprint service to serve. Defaults to one built from
            settings, with an empty in-memory index.
    """
    app = FastAPI(
        title="VoiceStore Server",
        description="Per-device voiceprint sample management",
        version="1.0.0",
        debug=settings.debug,
    )
    app.state.voiceprint_service = service or build_voiceprint_service()

    register_exception_handlers(app)

    # Health check endpoint
    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Check server health status."""
        return {"status": "healthy", "version": "1.0.0"}

    from .routers.voiceprints import router as voiceprints_router

    app.include_router(voiceprints_router)

    return app


def run_server() -> None:
    """Run the server using uvicorn."""
    app = create_app()
    logger.info(f"Starting VoiceStore server on {settings.host}:{settings.port}")
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


# Application instance for ASGI servers
app = create_app()
