"""Upload validation.

Rejects uploads that are empty, too large or not an allowed audio type. The
checks run in that order and stop at the first violation.
"""

from collections.abc import Iterable

from voicestore.domain.exceptions import (
    EmptyFileError,
    FileTooLargeError,
    UnsupportedContentTypeError,
)

MAX_FILE_SIZE = 10 * 1024 * 1024

ALLOWED_AUDIO_TYPES = frozenset(
    {
        "audio/wav",
        "audio/mp3",
        "audio/mpeg",
        "audio/ogg",
        "audio/flac",
        "audio/aac",
        "audio/m4a",
    }
)


def normalize_content_type(content_type: str | None) -> str | None:
    """Lowercase a content type and drop any parameters.

    Example:
        >>> normalize_content_type(" Audio/WAV; codecs=1 ")
        'audio/wav'
    """
    if content_type is None:
        return None
    return content_type.split(";", 1)[0].strip().lower() or None


class ValidationGate:
    """Validates upload metadata before anything is written."""

    def __init__(
        self,
        max_file_size: int = MAX_FILE_SIZE,
        allowed_content_types: Iterable[str] = ALLOWED_AUDIO_TYPES,
    ) -> None:
        """Initialize gate.

        Args:
            max_file_size: Largest accepted upload in bytes.
            allowed_content_types: Accepted MIME types (case-insensitive).
        """
        self.max_file_size = max_file_size
        self.allowed_content_types = frozenset(
            t.lower() for t in allowed_content_types
        )

    def validate(
        self,
        size: int,
        content_type: str | None,
        file_name: str | None = None,
    ) -> None:
        """Validate an upload.

        Args:
            size: Upload length in bytes.
            content_type: Declared MIME type.
            file_name: Declared file name (not checked, used by callers for
                the extension).

        Raises:
            EmptyFileError: If the upload is empty.
            FileTooLargeError: If the upload exceeds the size limit.
            UnsupportedContentTypeError: If the MIME type is not allowed.
        """
        if size <= 0:
            raise EmptyFileError()
        if size > self.max_file_size:
            raise FileTooLargeError(size, self.max_file_size)
        if normalize_content_type(content_type) not in self.allowed_content_types:
            raise UnsupportedContentTypeError(content_type)
