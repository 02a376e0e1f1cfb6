"""Tests for the in-memory emoji document."""
from PySide6.QtCore import QUrl

from emoji_art.gui.models import EmojiArtDocument, Position


def test_add_emoji_assigns_stable_increasing_ids(document):
    first = document.add_emoji("😀", at=Position(1, 2), size=40)
    second = document.add_emoji("🐶", at=Position(-5, 0), size=20)
    assert (first.id, second.id) == (0, 1)
    assert [emoji.string for emoji in document.emojis] == ["😀", "🐶"]
    assert document.emoji(second.id).position == Position(-5, 0)


def test_move_flips_screen_y(document):
    emoji = document.add_emoji("😀", at=Position(10, 10), size=40)
    document.move(emoji, by=(5, 3))
    assert document.emoji(emoji.id).position == Position(15, 7)


def test_move_truncates_translation(document):
    emoji = document.add_emoji("😀", at=Position(0, 0), size=40)
    document.move(emoji, by=(2.9, -1.7))
    assert document.emoji(emoji.id).position == Position(2, 1)


def test_resize_scales_size(document):
    emoji = document.add_emoji("😀", at=Position(0, 0), size=40)
    document.resize(emoji, by=1.5)
    assert document.emoji(emoji.id).size == 60
    document.resize(document.emoji(emoji.id), by=0.5)
    assert document.emoji(emoji.id).size == 30


def test_resize_never_drops_below_minimum(qapp):
    document = EmojiArtDocument(min_emoji_size=4)
    emoji = document.add_emoji("😀", at=Position(0, 0), size=10)
    document.resize(emoji, by=0.01)
    assert document.emoji(emoji.id).size == 4


def test_remove_emoji(document):
    keep = document.add_emoji("😀", at=Position(0, 0), size=40)
    gone = document.add_emoji("🐶", at=Position(0, 0), size=40)
    document.remove_emoji(gone)
    assert [emoji.id for emoji in document.emojis] == [keep.id]
    assert document.emoji(gone.id) is None


def test_mutations_of_removed_emoji_are_ignored(document):
    emoji = document.add_emoji("😀", at=Position(0, 0), size=40)
    document.remove_emoji(emoji)
    document.move(emoji, by=(5, 5))
    document.resize(emoji, by=2.0)
    document.remove_emoji(emoji)
    assert document.emojis == ()


def test_set_background_emits_signals(qtbot, document):
    url = QUrl("https://example.com/beach.jpg")
    with qtbot.waitSignals([document.background_changed, document.changed]):
        document.set_background(url)
    assert document.background == url


def test_set_same_background_is_silent(qtbot, document):
    url = QUrl("https://example.com/beach.jpg")
    document.set_background(url)
    with qtbot.assertNotEmitted(document.changed):
        document.set_background(QUrl("https://example.com/beach.jpg"))


def test_changed_emitted_on_every_mutation(qtbot, document):
    with qtbot.waitSignal(document.changed):
        emoji = document.add_emoji("😀", at=Position(0, 0), size=40)
    with qtbot.waitSignal(document.changed):
        document.move(emoji, by=(1, 0))
    with qtbot.waitSignal(document.changed):
        document.resize(document.emoji(emoji.id), by=2.0)
    with qtbot.waitSignal(document.changed):
        document.remove_emoji(emoji)
