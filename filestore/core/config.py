"""Application configuration via Pydantic Settings."""
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Storage settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_json: bool = False

    # Storage
    storage_backend: Literal["local", "s3"] = "local"
    storage_path: Path = Field(default=Path("./data"))

    # S3 / S3-compatible object store
    s3_bucket: str = ""
    s3_endpoint_url: str | None = None
    s3_region: str | None = None
    s3_access_key_id: str | None = None
    s3_secret_access_key: str | None = None

    @field_validator("storage_path", mode="before")
    @classmethod
    def ensure_path(cls, v: str | Path) -> Path:
        """Convert string to Path."""
        return Path(v)

    @field_validator("s3_endpoint_url", "s3_region", mode="before")
    @classmethod
    def empty_as_none(cls, v: str | None) -> str | None:
        """Treat blank env values as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def uses_object_store(self) -> bool:
        """Check if the object store backend is selected."""
        return self.storage_backend == "s3"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
