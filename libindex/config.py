"""Configuration management using pydantic-settings."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library indexer settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LIBINDEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Holds library_index.json and the staging folder
    preferences_path: Path

    # The user's writable libraries folder
    sketchbook_libraries_path: Path | None = None

    # Other library roots, stored as a comma-separated string in .env
    libraries_paths: str = ""

    log_level: str = "INFO"

    @property
    def libraries_folders(self) -> list[Path]:
        """Folders to scan, in order; the sketchbook folder is scanned last."""
        folders = [Path(p.strip()) for p in self.libraries_paths.split(",") if p.strip()]
        if self.sketchbook_libraries_path and self.sketchbook_libraries_path not in folders:
            folders.append(self.sketchbook_libraries_path)
        return folders

    @field_validator("preferences_path")
    @classmethod
    def validate_preferences_path(cls, v: Path) -> Path:
        """The preferences folder must exist; library_index.json is read from it."""
        if not v.exists():
            raise ValueError(f"Preferences folder for library_index.json does not exist: {v}")
        if not v.is_dir():
            raise ValueError(f"Preferences folder for library_index.json is not a directory: {v}")
        return v.resolve()


def get_settings() -> Settings:
    """Load settings from environment."""
    return Settings()
