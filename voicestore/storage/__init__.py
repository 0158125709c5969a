"""Storage layer."""

from voicestore.storage.index import InMemoryVoiceprintIndex
from voicestore.storage.local_storage import LocalFileStore

__all__ = ["InMemoryVoiceprintIndex", "LocalFileStore"]
