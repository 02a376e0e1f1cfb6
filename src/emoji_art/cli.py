"""
Command-line interface for the emoji art editor.

Usage:
    emoji-art gui [--background URL_OR_PATH] [--palettes palettes.yaml]
    emoji-art palettes path/to/palettes.yaml
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import ValidationError

from .config import PaletteConfig, PaletteFile, default_palettes, load_palette_config
from .settings import get_settings

Logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(message)s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="emoji-art",
        description="Drag-and-drop emoji collage editor.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # gui command
    gui_parser = subparsers.add_parser(
        "gui",
        help="Launch the editor window.",
    )
    gui_parser.add_argument(
        "--background",
        type=str,
        default=None,
        help="Background image to start with (local path or http(s) URL).",
    )
    gui_parser.add_argument(
        "--palettes",
        type=Path,
        default=None,
        help="YAML palette file (defaults to EMOJI_ART_PALETTE_FILE or the built-in palette).",
    )

    # palettes command
    palettes_parser = subparsers.add_parser(
        "palettes",
        help="Validate a palette file and list its palettes.",
    )
    palettes_parser.add_argument(
        "path",
        type=Path,
        help="Path to the YAML palette file.",
    )
    return parser


def summarize_palettes(palette_file: PaletteFile) -> str:
    lines = [f"{len(palette_file.palettes)} palette(s)"]
    for palette in palette_file.palettes:
        lines.append(f"  {palette.name} ({len(palette.emojis)}): {''.join(palette.emojis)}")
    return "\n".join(lines)


def palettes_command(args: argparse.Namespace) -> int:
    path: Path = args.path
    if not path.exists():
        Logger.error("Palette file not found: %s", path)
        return 2
    try:
        palette_file = load_palette_config(path)
    except (ValidationError, ValueError, OSError) as exc:
        Logger.error("Palette validation failed: %s", exc)
        if Logger.isEnabledFor(logging.DEBUG):
            Logger.exception("Stack trace")
        return 1
    print(summarize_palettes(palette_file))
    return 0


def resolve_palettes(path: Optional[Path]) -> List[PaletteConfig]:
    """Palettes from ``path``, the configured palette file, or the built-in default."""
    if path is None:
        path = get_settings().palette_file
    if path is None:
        return default_palettes()
    return list(load_palette_config(path).palettes)


def run_gui_with_args(args: argparse.Namespace) -> int:
    try:
        palettes = resolve_palettes(args.palettes)
    except (ValidationError, ValueError, OSError) as exc:
        Logger.error("Could not load palettes: %s", exc)
        return 1

    from PySide6.QtCore import QUrl  # Local import to avoid Qt initialization unless needed

    from .gui import run as run_gui

    background = None
    if args.background:
        background = QUrl.fromUserInput(args.background, str(Path.cwd()))
        if not background.isValid():
            Logger.error("Invalid background location: %s", args.background)
            return 2
    return run_gui(background, palettes)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.command == "gui":
            return run_gui_with_args(args)
        if args.command == "palettes":
            return palettes_command(args)
    except ValidationError as exc:
        Logger.error("Invalid settings: %s", exc)
        return 1

    parser.print_help()
    return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
