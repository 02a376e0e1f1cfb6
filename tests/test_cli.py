"""Tests for the command-line interface."""
import pytest

from emoji_art import cli
from emoji_art.config import DEFAULT_PALETTE_NAME


def test_parser_requires_a_command():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])


def test_gui_arguments(tmp_path):
    args = cli.build_parser().parse_args(
        ["--verbose", "gui", "--background", "beach.jpg", "--palettes", str(tmp_path / "p.yaml")]
    )
    assert args.verbose
    assert args.command == "gui"
    assert args.background == "beach.jpg"
    assert args.palettes == tmp_path / "p.yaml"


def test_palettes_command_lists_palettes(palette_file, capsys):
    assert cli.main(["palettes", str(palette_file)]) == 0
    out = capsys.readouterr().out
    assert "2 palette(s)" in out
    assert "Animals (3): 🐶🐱🐭" in out


def test_palettes_command_missing_file(tmp_path):
    assert cli.main(["palettes", str(tmp_path / "missing.yaml")]) == 2


def test_palettes_command_invalid_file(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("palettes: []\n", encoding="utf-8")
    assert cli.main(["palettes", str(path)]) == 1


def test_resolve_palettes_defaults_to_builtin():
    (palette,) = cli.resolve_palettes(None)
    assert palette.name == DEFAULT_PALETTE_NAME


def test_resolve_palettes_uses_configured_file(monkeypatch, palette_file):
    monkeypatch.setenv("EMOJI_ART_PALETTE_FILE", str(palette_file))
    names = [palette.name for palette in cli.resolve_palettes(None)]
    assert names == ["Faces", "Animals"]


def test_gui_with_invalid_palettes_fails_before_starting_qt(tmp_path, monkeypatch):
    path = tmp_path / "bad.yaml"
    path.write_text("palettes: []\n", encoding="utf-8")
    started = []
    monkeypatch.setattr("emoji_art.gui.run", lambda *args: started.append(args) or 0)
    assert cli.main(["gui", "--palettes", str(path)]) == 1
    assert started == []


def test_gui_passes_background_and_palettes(tmp_path, palette_file, monkeypatch):
    background = tmp_path / "beach.png"
    background.write_bytes(b"")
    calls = []
    monkeypatch.setattr("emoji_art.gui.run", lambda url, palettes: calls.append((url, palettes)) or 0)
    assert cli.main(["gui", "--background", str(background), "--palettes", str(palette_file)]) == 0
    ((url, palettes),) = calls
    assert url.isLocalFile()
    assert url.toLocalFile() == str(background)
    assert [palette.name for palette in palettes] == ["Faces", "Animals"]
