"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends, Request

from voicestore.domain_service import VoiceprintService
from voicestore.storage import InMemoryVoiceprintIndex, LocalFileStore
from voicestore.storage.settings import settings as storage_settings


def build_voiceprint_service() -> VoiceprintService:
    """Create a voiceprint service from configured settings."""
    return VoiceprintService(
        index=InMemoryVoiceprintIndex(),
        file_store=LocalFileStore(storage_settings.root_dir),
    )


def get_voiceprint_service(request: Request) -> VoiceprintService:
    """Get the application's voiceprint service."""
    return request.app.state.voiceprint_service


# Type aliases for dependency injection
VoiceprintServiceDep = Annotated[VoiceprintService, Depends(get_voiceprint_service)]
