"""Domain service layer."""

from voicestore.domain_service.export import ExportAggregator
from voicestore.domain_service.voiceprint import VoiceprintService

__all__ = [
    "ExportAggregator",
    "VoiceprintService",
]
