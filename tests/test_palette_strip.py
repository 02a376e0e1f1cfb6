"""Tests for the palette strip widget."""
from emoji_art.config import PaletteConfig
from emoji_art.gui.widgets import PaletteStrip


def _palettes():
    return [
        PaletteConfig(name="Faces", emojis="😀😃"),
        PaletteConfig(name="Animals", emojis="🐶🐱🐭"),
    ]


def test_shows_first_palette(qtbot):
    strip = PaletteStrip(_palettes())
    qtbot.addWidget(strip)
    assert strip.current_palette().name == "Faces"
    assert strip.emojis() == ["😀", "😃"]
    assert strip.palette_combo.count() == 2


def test_switching_palette_replaces_emojis(qtbot):
    strip = PaletteStrip(_palettes())
    qtbot.addWidget(strip)
    with qtbot.waitSignal(strip.palette_changed) as blocker:
        strip.palette_combo.setCurrentIndex(1)
    assert blocker.args == ["Animals"]
    assert strip.emojis() == ["🐶", "🐱", "🐭"]


def test_drag_payload_is_plain_text(qtbot):
    strip = PaletteStrip(_palettes())
    qtbot.addWidget(strip)
    item = strip.emoji_list.item(1)
    mime = strip.emoji_list.mimeData([item])
    assert mime.hasText()
    assert mime.text() == "😃"
    assert not mime.hasUrls()


def test_defaults_to_builtin_palette(qtbot):
    strip = PaletteStrip()
    qtbot.addWidget(strip)
    assert strip.current_palette().name == "Faces"
    assert "😀" in strip.emojis()
