"""Index Protocol for voiceprint metadata."""

from __future__ import annotations

from typing import Protocol

from voicestore.domain.models import Voiceprint


class VoiceprintIndexProtocol(Protocol):
    """Protocol for the device-partitioned voiceprint index."""

    def list(self, device_id: str) -> list[Voiceprint]:
        """Get a device's voiceprints in insertion order.

        Args:
            device_id: The device's identifier

        Returns:
            Records of the device, empty if the device is unknown
        """
        ...

    def list_all(self) -> list[Voiceprint]:
        """Get the voiceprints of every device.

        Returns:
            Records of all partitions, each partition in insertion order
        """
        ...

    def get(self, device_id: str, voiceprint_id: str) -> Voiceprint | None:
        """Get a single voiceprint.

        Args:
            device_id: The device's identifier
            voiceprint_id: The voiceprint's id

        Returns:
            The record, or None if not present
        """
        ...

    def insert(self, device_id: str, voiceprint: Voiceprint) -> None:
        """Append a finalized voiceprint to a device partition.

        Args:
            device_id: The device's identifier
            voiceprint: Record to append
        """
        ...

    def remove(self, device_id: str, voiceprint_id: str) -> Voiceprint | None:
        """Remove a voiceprint from a device partition.

        Args:
            device_id: The device's identifier
            voiceprint_id: The voiceprint's id

        Returns:
            The removed record, or None if nothing was removed
        """
        ...

    def snapshot(self) -> dict[str, list[Voiceprint]]:
        """Copy every partition.

        Returns:
            Dictionary mapping device ids to their records
        """
        ...

    def counts(self) -> dict[str, int]:
        """Count the records of every partition.

        Returns:
            Dictionary mapping device ids to record counts
        """
        ...
