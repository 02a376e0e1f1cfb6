"""Tests for environment-driven settings."""
import pytest
from pydantic import ValidationError

from emoji_art.settings import EditorSettings, get_settings, reset_settings_cache


def test_defaults():
    settings = get_settings()
    assert settings.default_emoji_font_size == 40
    assert settings.long_press_ms == 500
    assert settings.wheel_zoom_step == pytest.approx(1.15)
    assert settings.palette_file is None


def test_settings_are_cached():
    assert get_settings() is get_settings()


def test_environment_overrides(monkeypatch, palette_file):
    monkeypatch.setenv("EMOJI_ART_DEFAULT_EMOJI_FONT_SIZE", "64")
    monkeypatch.setenv("EMOJI_ART_PALETTE_FILE", str(palette_file))
    reset_settings_cache()
    settings = get_settings()
    assert settings.default_emoji_font_size == 64
    assert settings.palette_file == palette_file.resolve()


def test_dotenv_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("EMOJI_ART_LONG_PRESS_MS=750\n", encoding="utf-8")
    assert EditorSettings().long_press_ms == 750


def test_missing_palette_file_is_rejected(monkeypatch, tmp_path):
    monkeypatch.setenv("EMOJI_ART_PALETTE_FILE", str(tmp_path / "missing.yaml"))
    with pytest.raises(ValidationError):
        EditorSettings()


def test_wheel_step_must_grow(monkeypatch):
    monkeypatch.setenv("EMOJI_ART_WHEEL_ZOOM_STEP", "0.9")
    with pytest.raises(ValidationError):
        EditorSettings()
