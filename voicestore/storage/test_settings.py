"""Tests for storage and upload settings."""

from pathlib import Path

from voicestore.domain.validation import ALLOWED_AUDIO_TYPES, MAX_FILE_SIZE
from voicestore.domain_service.settings import UploadSettings
from voicestore.storage.settings import StorageSettings


class TestStorageSettings:
    """Tests for StorageSettings class."""

    def test_default_root(self) -> None:
        """Test default storage root."""
        settings = StorageSettings()
        assert settings.root_dir == Path("./data/voiceprints")

    def test_custom_root(self) -> None:
        """Test root passed explicitly."""
        settings = StorageSettings(root_dir="/srv/voiceprints")
        assert settings.root_dir == Path("/srv/voiceprints")

    def test_root_from_environment(self, monkeypatch) -> None:
        """Test root read from the environment."""
        monkeypatch.setenv("VOICESTORE_STORAGE_ROOT_DIR", "/var/lib/voiceprints")
        assert StorageSettings().root_dir == Path("/var/lib/voiceprints")


class TestUploadSettings:
    """Tests for UploadSettings class."""

    def test_defaults(self) -> None:
        """Test default upload limits."""
        settings = UploadSettings()
        assert settings.max_file_size == MAX_FILE_SIZE == 10 * 1024 * 1024
        assert settings.allowed_content_types == ALLOWED_AUDIO_TYPES
        assert settings.default_extension == ".wav"
        assert settings.filename_max_attempts == 5

    def test_values_from_environment(self, monkeypatch) -> None:
        """Test limits read from the environment."""
        monkeypatch.setenv("VOICESTORE_UPLOAD_MAX_FILE_SIZE", "1024")
        monkeypatch.setenv(
            "VOICESTORE_UPLOAD_ALLOWED_CONTENT_TYPES", '["audio/wav", "audio/ogg"]'
        )
        settings = UploadSettings()
        assert settings.max_file_size == 1024
        assert settings.allowed_content_types == frozenset({"audio/wav", "audio/ogg"})
