"""In-memory voiceprint index partitioned by device."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

from voicestore.domain.models import Voiceprint

logger = logging.getLogger(__name__)


@dataclass
class _Partition:
    """Records of one device guarded by their own lock."""

    records: list[Voiceprint] = field(default_factory=list)
    lock: threading.Lock = field(default_factory=threading.Lock)


class InMemoryVoiceprintIndex:
    """Thread-safe mapping from device id to its voiceprints.

    Implements VoiceprintIndexProtocol from voicestore.domain.protocols.index.

    Every partition has its own lock, so writes to different devices never
    wait on each other. The registry lock only guards creation of partitions
    and is never held while a partition is being mutated. Partitions are kept
    once created, even when they become empty.

    State lives only in memory: empty at startup, discarded at shutdown.
    """

    def __init__(self) -> None:
        self._partitions: dict[str, _Partition] = {}
        self._registry_lock = threading.Lock()

    def _partition(self, device_id: str) -> _Partition | None:
        return self._partitions.get(device_id)

    def _partition_or_create(self, device_id: str) -> _Partition:
        partition = self._partitions.get(device_id)
        if partition is not None:
            return partition
        with self._registry_lock:
            partition = self._partitions.get(device_id)
            if partition is None:
                partition = _Partition()
                self._partitions[device_id] = partition
                logger.debug(f"Created partition for device {device_id}")
            return partition

    def _partition_items(self) -> list[tuple[str, _Partition]]:
        with self._registry_lock:
            return list(self._partitions.items())

    def list(self, device_id: str) -> list[Voiceprint]:
        """Get a device's voiceprints in insertion order."""
        partition = self._partition(device_id)
        if partition is None:
            return []
        with partition.lock:
            return list(partition.records)

    def list_all(self) -> list[Voiceprint]:
        """Get the voiceprints of every device."""
        result: list[Voiceprint] = []
        for _, partition in self._partition_items():
            with partition.lock:
                result.extend(partition.records)
        return result

    def get(self, device_id: str, voiceprint_id: str) -> Voiceprint | None:
        """Get a single voiceprint."""
        partition = self._partition(device_id)
        if partition is None:
            return None
        with partition.lock:
            return next(
                (vp for vp in partition.records if vp.id == voiceprint_id), None
            )

    def insert(self, device_id: str, voiceprint: Voiceprint) -> None:
        """Append a voiceprint, creating the partition on first use."""
        partition = self._partition_or_create(device_id)
        with partition.lock:
            partition.records.append(voiceprint)

    def remove(self, device_id: str, voiceprint_id: str) -> Voiceprint | None:
        """Remove the first voiceprint with a matching id.

        Returns:
            The removed record, or None for an unknown device or id
        """
        partition = self._partition(device_id)
        if partition is None:
            return None
        with partition.lock:
            for i, vp in enumerate(partition.records):
                if vp.id == voiceprint_id:
                    return partition.records.pop(i)
        return None

    def snapshot(self) -> dict[str, list[Voiceprint]]:
        """Copy every partition, each under its own lock."""
        snapshot: dict[str, list[Voiceprint]] = {}
        for device_id, partition in self._partition_items():
            with partition.lock:
                snapshot[device_id] = list(partition.records)
        return snapshot

    def counts(self) -> dict[str, int]:
        """Count the records of every partition."""
        counts: dict[str, int] = {}
        for device_id, partition in self._partition_items():
            with partition.lock:
                counts[device_id] = len(partition.records)
        return counts

    def __len__(self) -> int:
        return sum(self.counts().values())
