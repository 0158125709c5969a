"""Local file system store for voice sample files."""

import logging
from pathlib import Path

from voicestore.domain.exceptions import (
    FileAlreadyExistsError,
    InvalidDeviceIdError,
    StorageError,
)

logger = logging.getLogger(__name__)


class LocalFileStore:
    """Stores voice samples under one directory per device.

    Implements FileStoreProtocol from voicestore.domain.protocols.storage.
    """

    def __init__(self, base_path: str | Path) -> None:
        """Initialize store.

        Args:
            base_path: Root directory; created lazily on first write.
        """
        self.base_path = Path(base_path)

    def device_dir(self, device_id: str) -> Path:
        """Get the directory of a device.

        Raises:
            InvalidDeviceIdError: If the id is blank or not a plain name.
        """
        if (
            not device_id.strip()
            or device_id in (".", "..")
            or "/" in device_id
            or "\\" in device_id
            or "\x00" in device_id
        ):
            raise InvalidDeviceIdError(device_id)
        return self.base_path / device_id

    def path_for(self, device_id: str, file_name: str) -> Path:
        """Get the storage path of a device's file."""
        return self.device_dir(device_id) / file_name

    def ensure_directory(self, device_id: str) -> Path:
        """Create the device directory if it does not exist.

        Safe to call concurrently for the same device.

        Raises:
            StorageError: If the directory cannot be created.
        """
        path = self.device_dir(device_id)
        if path.is_dir():
            return path
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to create directory {path}: {e}")
            raise StorageError(f"Failed to create directory {path}: {e}") from e
        logger.info(f"Created directory: {path}")
        return path

    def write(self, path: Path, data: bytes) -> int:
        """Write bytes to a new file.

        The file is opened in exclusive mode, so an existing file is never
        overwritten. A partially written file is removed before the error
        propagates.

        Args:
            path: Destination file path
            data: File contents

        Returns:
            Number of bytes written

        Raises:
            FileAlreadyExistsError: If ``path`` already exists
            StorageError: If writing fails
        """
        try:
            f = open(path, "xb")
        except FileExistsError as e:
            raise FileAlreadyExistsError(f"File already exists: {path}") from e
        except OSError as e:
            logger.error(f"Failed to create file {path}: {e}")
            raise StorageError(f"Failed to create file {path}: {e}") from e

        try:
            with f:
                f.write(data)
        except OSError as e:
            logger.error(f"Failed to write file {path}: {e}")
            self._discard(path)
            raise StorageError(f"Failed to write file {path}: {e}") from e
        except BaseException:
            self._discard(path)
            raise

        logger.info(f"Saved file: {path} ({len(data)} bytes)")
        return len(data)

    def delete(self, path: str | Path) -> bool:
        """Delete a file.

        Failures are logged and never raised.

        Returns:
            True if a file was removed
        """
        file_path = Path(path)
        try:
            file_path.unlink()
        except FileNotFoundError:
            logger.warning(f"File to delete does not exist: {file_path}")
            return False
        except OSError as e:
            logger.error(f"Failed to delete file {file_path}: {e}")
            return False
        logger.info(f"Deleted file: {file_path}")
        return True

    def _discard(self, path: Path) -> None:
        """Remove a partially written file."""
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Failed to remove partial file {path}: {e}")
