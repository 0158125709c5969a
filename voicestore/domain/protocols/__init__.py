"""Domain protocols."""

from voicestore.domain.protocols.index import VoiceprintIndexProtocol
from voicestore.domain.protocols.storage import FileStoreProtocol

__all__ = [
    "FileStoreProtocol",
    "VoiceprintIndexProtocol",
]
