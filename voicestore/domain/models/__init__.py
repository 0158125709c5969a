"""Domain models."""

from voicestore.domain.models.export import ExportPayload, Statistics
from voicestore.domain.models.voiceprint import (
    UNNAMED_VOICEPRINT,
    Voiceprint,
    VoiceprintStatus,
    derive_name,
)

__all__ = [
    "ExportPayload",
    "Statistics",
    "Voiceprint",
    "VoiceprintStatus",
    "UNNAMED_VOICEPRINT",
    "derive_name",
]
