"""Configuration for the roof estimate service."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Service settings.

    Can be configured via ``ROOF_``-prefixed environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="ROOF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    price_per_square: float = Field(default=350.0, ge=0, description="Default price per 100 sq ft")

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    reload: bool = Field(default=False)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")


settings = Settings()
