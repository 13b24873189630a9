from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from unitcmd.units.models import Category


class AppSettings(BaseSettings):
    """Application-wide settings populated from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="UNITCMD_",
        extra="ignore",
    )

    default_category: Category = Category.LENGTH
    output_format: str | None = None
    max_fraction_digits: int = Field(default=10, ge=0, le=15)
