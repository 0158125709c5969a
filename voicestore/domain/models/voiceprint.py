"""Voiceprint domain model for uploaded voice samples."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from ulid import ULID

# Display format for timestamps in serialized records
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

UNNAMED_VOICEPRINT = "unnamed voiceprint"


def _generate_ulid() -> str:
    """Generate a new ULID string."""
    return str(ULID())


def _utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


def _format_time(value: datetime | None) -> str | None:
    return value.strftime(TIME_FORMAT) if value is not None else None


class VoiceprintStatus(str, Enum):
    """Lifecycle status of a voiceprint."""

    ACTIVE = "active"
    INACTIVE = "inactive"


def derive_name(name: str | None, original_file_name: str | None) -> str:
    """Resolve the display name for a new voiceprint.

    Args:
        name: Name supplied by the caller, if any.
        original_file_name: File name declared by the uploader.

    Returns:
        The stripped name when non-blank, otherwise the file name without its
        last extension, otherwise a fixed placeholder.
    """
    if name is not None and name.strip():
        return name.strip()
    if original_file_name:
        stem, dot, _ = original_file_name.rpartition(".")
        return stem if dot and stem else original_file_name
    return UNNAMED_VOICEPRINT


@dataclass(eq=False)
class Voiceprint:
    """Voice sample record owned by a device partition.

    ``file_path``, ``file_size`` and ``original_file_name`` stay unset until
    the backing bytes are written; see :meth:`finalize`.
    """

    name: str
    description: str | None = None
    id: str = field(default_factory=_generate_ulid)
    status: VoiceprintStatus = VoiceprintStatus.ACTIVE
    file_path: str | None = None
    original_file_name: str | None = None
    file_size: int | None = None
    created_time: datetime = field(default_factory=_utc_now)
    updated_time: datetime | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Voiceprint):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def finalize(
        self,
        file_path: str,
        file_size: int,
        original_file_name: str | None,
    ) -> None:
        """Attach persistence details once the file write has completed.

        Args:
            file_path: Location of the written file.
            file_size: Number of bytes written.
            original_file_name: File name declared by the uploader.
        """
        self.file_path = file_path
        self.file_size = file_size
        self.original_file_name = original_file_name
        self.created_time = _utc_now()

    @property
    def is_finalized(self) -> bool:
        return self.file_path is not None and self.file_size is not None

    @property
    def is_valid(self) -> bool:
        """Whether the record is complete and active."""
        return (
            bool(self.id and self.id.strip())
            and bool(self.name and self.name.strip())
            and bool(self.file_path and self.file_path.strip())
            and self.status == VoiceprintStatus.ACTIVE
        )

    @property
    def file_extension(self) -> str:
        """Lowercased extension of the original file name, without the dot."""
        if self.original_file_name and "." in self.original_file_name:
            return self.original_file_name.rsplit(".", 1)[1].lower()
        return "unknown"

    @property
    def formatted_file_size(self) -> str:
        """Human readable file size."""
        if self.file_size is None:
            return "unknown"
        if self.file_size < 1024:
            return f"{self.file_size} B"
        if self.file_size < 1024 * 1024:
            return f"{self.file_size / 1024:.2f} KB"
        return f"{self.file_size / (1024 * 1024):.2f} MB"

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready mapping."""
        return {
            "id": self.id,
            "name": self.name,
            "filePath": self.file_path,
            "originalFileName": self.original_file_name,
            "fileSize": self.file_size,
            "createdTime": _format_time(self.created_time),
            "updatedTime": _format_time(self.updated_time),
            "description": self.description,
            "status": self.status.value,
        }
