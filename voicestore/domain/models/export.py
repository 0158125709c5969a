"""Export and statistics views over the voiceprint index."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from voicestore.domain.models.voiceprint import Voiceprint


def _utc_now() -> datetime:
    """Get current UTC datetime truncated to seconds."""
    return datetime.now(UTC).replace(microsecond=0)


@dataclass
class ExportPayload:
    """Snapshot of one device partition or of the whole index.

    Single-device exports fill ``voiceprints`` and ``total_count``; global
    exports fill ``voiceprints_by_device``, ``total_devices`` and
    ``total_voiceprints``.
    """

    device_id: str | None = None
    voiceprints: list[Voiceprint] | None = None
    total_count: int | None = None
    voiceprints_by_device: dict[str, list[Voiceprint]] | None = None
    total_devices: int | None = None
    total_voiceprints: int | None = None
    export_time: datetime = field(default_factory=_utc_now)

    @property
    def is_global(self) -> bool:
        return self.device_id is None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready mapping."""
        data: dict[str, Any] = {
            "exportTime": self.export_time.isoformat(),
            "deviceId": self.device_id,
        }
        if self.is_global:
            data["voiceprintsByDevice"] = {
                device_id: [vp.to_dict() for vp in records]
                for device_id, records in (self.voiceprints_by_device or {}).items()
            }
            data["totalDevices"] = self.total_devices
            data["totalVoiceprints"] = self.total_voiceprints
        else:
            data["voiceprints"] = [vp.to_dict() for vp in self.voiceprints or []]
            data["totalCount"] = self.total_count
        return data


@dataclass
class Statistics:
    """Aggregate counts over all device partitions."""

    total_devices: int
    total_voiceprints: int
    average_per_device: float
    per_device_counts: dict[str, int]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready mapping."""
        return {
            "totalDevices": self.total_devices,
            "totalVoiceprints": self.total_voiceprints,
            "averagePerDevice": self.average_per_device,
            "perDeviceCounts": dict(self.per_device_counts),
        }
