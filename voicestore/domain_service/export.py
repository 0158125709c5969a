"""Export and statistics over the voiceprint index."""

import logging

from voicestore.domain.models import ExportPayload, Statistics
from voicestore.domain.protocols import VoiceprintIndexProtocol

logger = logging.getLogger(__name__)


class ExportAggregator:
    """Builds snapshot views of the index."""

    def __init__(self, index: VoiceprintIndexProtocol) -> None:
        self.index = index

    def export(self, device_id: str | None = None) -> ExportPayload:
        """Export one device's voiceprints, or all of them.

        Args:
            device_id: Device to export. None or blank exports every device.

        Returns:
            ExportPayload for a single device or for the whole index.
        """
        if device_id is not None and device_id.strip():
            voiceprints = self.index.list(device_id)
            logger.info(
                f"Exported {len(voiceprints)} voiceprints for device {device_id}"
            )
            return ExportPayload(
                device_id=device_id,
                voiceprints=voiceprints,
                total_count=len(voiceprints),
            )

        snapshot = self.index.snapshot()
        total = sum(len(records) for records in snapshot.values())
        logger.info(f"Exported {total} voiceprints across {len(snapshot)} devices")
        return ExportPayload(
            device_id=None,
            voiceprints_by_device=snapshot,
            total_devices=len(snapshot),
            total_voiceprints=total,
        )

    def statistics(self) -> Statistics:
        """Summarize voiceprint counts per device."""
        counts = self.index.counts()
        total_devices = len(counts)
        total_voiceprints = sum(counts.values())
        return Statistics(
            total_devices=total_devices,
            total_voiceprints=total_voiceprints,
            average_per_device=(
                total_voiceprints / total_devices if total_devices > 0 else 0.0
            ),
            per_device_counts=counts,
        )
