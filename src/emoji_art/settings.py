"""Application settings loaded from the environment / .env via Pydantic."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class EditorSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="EMOJI_ART_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_emoji_font_size: int = Field(default=40, gt=0)
    long_press_ms: int = Field(default=500, gt=0)
    wheel_zoom_step: float = Field(default=1.15, gt=1.0)
    min_emoji_size: int = Field(default=1, ge=1)
    palette_file: Optional[Path] = None

    @field_validator("palette_file", mode="before")
    @classmethod
    def _expand_palette_file(cls, value):
        if value in (None, ""):
            return None
        return Path(value).expanduser().resolve()

    @field_validator("palette_file")
    @classmethod
    def _validate_palette_file(cls, value: Optional[Path]) -> Optional[Path]:
        if value is not None and not value.exists():
            raise ValueError(f"Palette file does not exist: {value}")
        return value


_settings: Optional[EditorSettings] = None


def get_settings() -> EditorSettings:
    global _settings
    if _settings is None:
        _settings = EditorSettings()
        logger.debug("Loaded settings: %s", _settings)
    return _settings


def reset_settings_cache() -> None:
    global _settings
    _settings = None
