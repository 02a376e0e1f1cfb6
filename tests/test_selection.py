"""Tests for the emoji selection set."""
from emoji_art.gui.models import EmojiSelection


def test_toggle_adds_then_removes(qapp):
    selection = EmojiSelection()
    assert selection.toggle(3) is True
    assert 3 in selection
    assert selection.toggle(3) is False
    assert 3 not in selection


def test_double_toggle_restores_prior_state(qapp):
    selection = EmojiSelection()
    selection.toggle(1)
    selection.toggle(2)
    before = selection.selected
    selection.toggle(7)
    selection.toggle(7)
    selection.toggle(1)
    selection.toggle(1)
    assert selection.selected == before


def test_changed_signal_carries_snapshot(qtbot):
    selection = EmojiSelection()
    with qtbot.waitSignal(selection.changed) as blocker:
        selection.toggle(5)
    assert blocker.args == [frozenset({5})]
    assert len(selection) == 1


def test_selected_is_a_snapshot(qapp):
    selection = EmojiSelection()
    selection.toggle(1)
    snapshot = selection.selected
    selection.toggle(2)
    assert snapshot == frozenset({1})
    assert selection.contains(2)
