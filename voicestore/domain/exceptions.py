"""Domain exceptions."""

from enum import Enum


class VoiceStoreError(Exception):
    """Base exception for the voiceprint store."""

    pass


class ValidationFailure(Enum):
    """Reason an upload was rejected."""

    EMPTY_FILE = "empty_file"
    TOO_LARGE = "too_large"
    UNSUPPORTED_TYPE = "unsupported_type"
    INVALID_DEVICE_ID = "invalid_device_id"


class ValidationError(VoiceStoreError):
    """Raised when an upload is rejected before any mutation."""

    reason: ValidationFailure

    def __init__(self, reason: ValidationFailure, message: str) -> None:
        self.reason = reason
        super().__init__(message)


class EmptyFileError(ValidationError):
    """Uploaded file has no content."""

    def __init__(self) -> None:
        super().__init__(ValidationFailure.EMPTY_FILE, "File must not be empty")


class FileTooLargeError(ValidationError):
    """Uploaded file exceeds the size limit."""

    def __init__(self, size: int, max_size: int) -> None:
        self.size = size
        self.max_size = max_size
        super().__init__(
            ValidationFailure.TOO_LARGE,
            f"File size {size} bytes exceeds the limit of {max_size} bytes",
        )


class UnsupportedContentTypeError(ValidationError):
    """Declared content type is not an allowed audio type."""

    def __init__(self, content_type: str | None) -> None:
        self.content_type = content_type
        super().__init__(
            ValidationFailure.UNSUPPORTED_TYPE,
            f"Unsupported file type: {content_type}",
        )


class InvalidDeviceIdError(ValidationError):
    """Device id cannot be used as a storage directory name."""

    def __init__(self, device_id: str) -> None:
        self.device_id = device_id
        super().__init__(
            ValidationFailure.INVALID_DEVICE_ID, f"Invalid device id: {device_id!r}"
        )


class VoiceprintNotFoundError(VoiceStoreError):
    """Raised when a voiceprint is not found."""

    def __init__(self, device_id: str, voiceprint_id: str) -> None:
        self.device_id = device_id
        self.voiceprint_id = voiceprint_id
        super().__init__(
            f"Voiceprint '{voiceprint_id}' not found for device '{device_id}'"
        )


class StorageError(VoiceStoreError):
    """Raised when a file system operation fails."""

    pass


class FileAlreadyExistsError(StorageError):
    """Raised when a write would overwrite an existing file."""

    pass


class FileNameCollisionError(StorageError):
    """Raised when no unused file name could be generated."""

    pass
