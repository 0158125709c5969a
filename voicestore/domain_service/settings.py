"""Domain service settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from voicestore.domain.filename_generator import DEFAULT_EXTENSION
from voicestore.domain.validation import ALLOWED_AUDIO_TYPES, MAX_FILE_SIZE


class UploadSettings(BaseSettings):
    """Upload handling configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="VOICESTORE_UPLOAD_",
        env_file=".env",
        extra="ignore",
    )

    max_file_size: int = MAX_FILE_SIZE  # bytes
    allowed_content_types: frozenset[str] = ALLOWED_AUDIO_TYPES
    default_extension: str = DEFAULT_EXTENSION

    # Attempts at finding an unused file name before giving up
    filename_max_attempts: int = 5


settings = UploadSettings()
