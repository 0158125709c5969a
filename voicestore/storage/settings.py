"""Storage settings."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """File storage configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="VOICESTORE_STORAGE_",
        env_file=".env",
        extra="ignore",
    )

    # Voice sample files live at <root_dir>/<device_id>/<file_name>
    root_dir: Path = Path("./data/voiceprints")


settings = StorageSettings()
