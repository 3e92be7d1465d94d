"""Settings - Pydantic-based configuration management.

Values come from environment variables (or a ``.env`` file in the working
directory).  Only the composition root and the CLI read settings; the
domain and application layers receive plain values.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Storage ---
    data_dir: Path = Field(default=Path("./data"), alias="POS_DATA_DIR")

    # --- Sales ---
    default_currency: str = Field(default="MXN", alias="POS_DEFAULT_CURRENCY")
    tax_rate: Decimal = Field(default=Decimal("0.16"), alias="POS_TAX_RATE", ge=0, le=1)

    # --- Cloudinary ---
    cloudinary_cloud_name: str = Field(default="", alias="CLOUDINARY_CLOUD_NAME")
    cloudinary_upload_preset: str = Field(default="", alias="CLOUDINARY_UPLOAD_PRESET")
    cloudinary_api_key: str = Field(default="", alias="CLOUDINARY_API_KEY")
    cloudinary_api_secret: str = Field(default="", alias="CLOUDINARY_API_SECRET")

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Logging ---
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_console: bool = Field(default=True, alias="LOG_CONSOLE")

    @property
    def cloudinary_enabled(self) -> bool:
        return bool(self.cloudinary_cloud_name and self.cloudinary_upload_preset)

    @field_validator("default_currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("POS_DEFAULT_CURRENCY must not be blank")
        return v.strip().upper()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
