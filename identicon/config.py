"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    identicon_env: str = "development"
    identicon_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["*"]

    # Server
    port: int = 8080

    # Rendering
    image_size: int = Field(default=1024, gt=0)
    two_color: bool = True
    alpha: int = Field(default=255, ge=0, le=255)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
