# config.py
"""Settings loaded from the environment (and a local .env file)."""

from functools import lru_cache
from typing import Annotated, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: Optional[str] = Field(default=None)
    database_sslmode: str = Field(default="require")

    # API
    expose_error_details: bool = Field(default=True)
    cors_origins: Annotated[List[str], NoDecode] = Field(default_factory=list)
    log_level: str = Field(default="INFO")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v):
        """CORS_ORIGINS is a comma-separated list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.strip().upper()


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, read once per cold start."""
    return Settings()
