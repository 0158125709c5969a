"""Storage Protocol for voice sample files."""

from pathlib import Path
from typing import Protocol


class FileStoreProtocol(Protocol):
    """Protocol for persisting voice sample bytes."""

    def path_for(self, device_id: str, file_name: str) -> Path:
        """Resolve where a device's file is stored."""
        ...

    def ensure_directory(self, device_id: str) -> Path:
        """Create the device's directory if missing."""
        ...

    def write(self, path: Path, data: bytes) -> int:
        """Write bytes to a new file and return the number written."""
        ...

    def delete(self, path: str | Path) -> bool:
        """Remove a file, returning whether anything was removed."""
        ...
