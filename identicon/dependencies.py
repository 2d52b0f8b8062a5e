"""FastAPI dependency injection."""

from __future__ import annotations

from identicon.config import Settings, settings


def get_settings() -> Settings:
    return settings
