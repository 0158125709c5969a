"""Application layer - FastAPI application and composition root."""

from voicestore.app.main import app, create_app, run_server

__all__ = ["app", "create_app", "run_server"]
