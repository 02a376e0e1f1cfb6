"""
Shared fixtures for the emoji art tests.

Qt runs on the offscreen platform so the suite works without a display.
"""
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from emoji_art.settings import reset_settings_cache


SAMPLE_PALETTES_YAML = """\
palettes:
  - name: Faces
    emojis: "😀😃😄"
  - name: Animals
    emojis: ["🐶", "🐱", "🐭"]
"""


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    """Keep settings independent of the developer's environment and .env."""
    for name in list(os.environ):
        if name.startswith("EMOJI_ART_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def palette_file(tmp_path):
    path = tmp_path / "palettes.yaml"
    path.write_text(SAMPLE_PALETTES_YAML, encoding="utf-8")
    return path


@pytest.fixture
def document(qapp):
    from emoji_art.gui.models import EmojiArtDocument

    return EmojiArtDocument()


@pytest.fixture
def controller(document):
    from emoji_art.gui.controllers import CanvasController

    return CanvasController(document, default_emoji_font_size=40)


@pytest.fixture
def canvas(qtbot, controller):
    from emoji_art.gui.canvas import EmojiCanvasView

    view = EmojiCanvasView(controller, long_press_ms=200)
    view.resize(400, 300)
    qtbot.addWidget(view)
    view.show()
    qtbot.waitExposed(view)
    return view
