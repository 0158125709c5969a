"""Voiceprint service.

Coordinates the add path (validate, name, write, index), the delete path
(unindex, then remove the file) and the read path (list, export, statistics).
A record enters the index only after its file has been written, so the index
never points at a file that does not exist. A crash between the write and the
insert can leave an orphan file behind.
"""

from __future__ import annotations

import logging
from pathlib import Path

from voicestore.domain.exceptions import (
    FileAlreadyExistsError,
    FileNameCollisionError,
    VoiceprintNotFoundError,
)
from voicestore.domain.filename_generator import FileNameGenerator
from voicestore.domain.models import (
    ExportPayload,
    Statistics,
    Voiceprint,
    derive_name,
)
from voicestore.domain.protocols import FileStoreProtocol, VoiceprintIndexProtocol
from voicestore.domain.validation import ValidationGate
from voicestore.domain_service.export import ExportAggregator
from voicestore.domain_service.settings import settings

logger = logging.getLogger(__name__)


class VoiceprintService:
    """Service for managing per-device voiceprints."""

    def __init__(
        self,
        index: VoiceprintIndexProtocol,
        file_store: FileStoreProtocol,
        validation_gate: ValidationGate | None = None,
        filename_generator: FileNameGenerator | None = None,
        filename_max_attempts: int = settings.filename_max_attempts,
    ) -> None:
        """Initialize voiceprint service.

        Args:
            index: Voiceprint metadata index.
            file_store: Store for the voice sample files.
            validation_gate: Upload validator. Defaults to configured limits.
            filename_generator: File name source. Defaults to a generator
                backed by the system random source.
            filename_max_attempts: Tries at finding an unused file name.
        """
        self.index = index
        self.file_store = file_store
        self.validation_gate = validation_gate or ValidationGate(
            max_file_size=settings.max_file_size,
            allowed_content_types=settings.allowed_content_types,
        )
        self.filename_generator = filename_generator or FileNameGenerator(
            default_extension=settings.default_extension
        )
        self.filename_max_attempts = filename_max_attempts
        self._aggregator = ExportAggregator(index)

    def list(self, device_id: str) -> list[Voiceprint]:
        """Get a device's voiceprints in upload order."""
        logger.debug(f"Listing voiceprints for device {device_id}")
        return self.index.list(device_id)

    def list_all(self) -> list[Voiceprint]:
        """Get the voiceprints of every device."""
        logger.debug("Listing all voiceprints")
        return self.index.list_all()

    def add(
        self,
        device_id: str,
        data: bytes,
        content_type: str | None,
        original_file_name: str | None,
        name: str | None = None,
        description: str | None = None,
    ) -> Voiceprint:
        """Store an uploaded voice sample for a device.

        Args:
            device_id: Owning device.
            data: Audio file contents.
            content_type: Declared MIME type.
            original_file_name: File name declared by the uploader.
            name: Display name. Defaults to the file name without extension.
            description: Optional description.

        Returns:
            The stored, finalized Voiceprint.

        Raises:
            ValidationError: If the upload or device id is rejected.
            StorageError: If the file cannot be written.
        """
        self.validation_gate.validate(len(data), content_type, original_file_name)

        voiceprint = Voiceprint(
            name=derive_name(name, original_file_name),
            description=description,
        )
        logger.info(f"Adding voiceprint '{voiceprint.name}' for device {device_id}")

        self.file_store.ensure_directory(device_id)
        file_path, file_size = self._write_unique(device_id, data, original_file_name)

        voiceprint.finalize(
            file_path=str(file_path),
            file_size=file_size,
            original_file_name=original_file_name,
        )
        self.index.insert(device_id, voiceprint)

        logger.info(f"Voiceprint added: {voiceprint.name} (ID: {voiceprint.id})")
        return voiceprint

    def _write_unique(
        self,
        device_id: str,
        data: bytes,
        original_file_name: str | None,
    ) -> tuple[Path, int]:
        for attempt in range(1, self.filename_max_attempts + 1):
            file_name = self.filename_generator.generate(original_file_name)
            path = self.file_store.path_for(device_id, file_name)
            try:
                return path, self.file_store.write(path, data)
            except FileAlreadyExistsError:
                logger.warning(
                    f"Generated file name already in use: {path} "
                    f"(attempt {attempt}/{self.filename_max_attempts})"
                )
        raise FileNameCollisionError(
            f"No unused file name for device {device_id} after "
            f"{self.filename_max_attempts} attempts"
        )

    def remove(self, device_id: str, voiceprint_id: str) -> bool:
        """Remove a voiceprint and its file.

        The file is removed on a best-effort basis; a failure there does not
        undo the removal from the index.

        Returns:
            True if the voiceprint existed and was removed.
        """
        return self._remove(device_id, voiceprint_id) is not None

    def delete(self, device_id: str, voiceprint_id: str) -> Voiceprint:
        """Remove a voiceprint, failing if it does not exist.

        Returns:
            The removed Voiceprint.

        Raises:
            VoiceprintNotFoundError: If the device has no such voiceprint.
        """
        voiceprint = self._remove(device_id, voiceprint_id)
        if voiceprint is None:
            raise VoiceprintNotFoundError(device_id, voiceprint_id)
        return voiceprint

    def _remove(self, device_id: str, voiceprint_id: str) -> Voiceprint | None:
        logger.info(f"Removing voiceprint {voiceprint_id} from device {device_id}")

        voiceprint = self.index.remove(device_id, voiceprint_id)
        if voiceprint is None:
            logger.warning(
                f"Voiceprint to remove not found: {voiceprint_id} "
                f"(device {device_id})"
            )
            return None

        if voiceprint.file_path:
            self.file_store.delete(voiceprint.file_path)
        logger.info(f"Voiceprint removed: {voiceprint.name} ({voiceprint_id})")
        return voiceprint

    def export(self, device_id: str | None = None) -> ExportPayload:
        """Export one device's voiceprints, or all of them."""
        logger.info(f"Exporting voiceprints, device: {device_id}")
        return self._aggregator.export(device_id)

    def statistics(self) -> Statistics:
        """Summarize voiceprint counts per device."""
        return self._aggregator.statistics()
