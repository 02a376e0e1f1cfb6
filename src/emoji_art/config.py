"""
Palette configuration models and loader.

Palettes are read-only lists of emoji glyphs offered below the canvas. They
are described in a YAML file of the form::

    palettes:
      - name: Faces
        emojis: "😀😃😄😁😆"
      - name: Animals
        emojis: ["🐶", "🐱", "🐭"]
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Union

import yaml
from pydantic import BaseModel, Field, field_validator


DEFAULT_PALETTE_NAME = "Faces"
DEFAULT_PALETTE_EMOJIS = "😀😃😄😁😆😅🤣😂🙂🙃😉😊😇🥰😍🤩😘😗☺️😚"


def split_glyphs(text: str) -> List[str]:
    """Split a string of emoji into displayable glyphs.

    Variation selectors, zero-width joiners and skin tone modifiers stay
    attached to the glyph they modify.
    """
    glyphs: List[str] = []
    join_next = False
    for char in text:
        code = ord(char)
        if char.isspace():
            join_next = False
            continue
        attaches = (
            0xFE00 <= code <= 0xFE0F
            or 0x1F3FB <= code <= 0x1F3FF
            or 0xE0020 <= code <= 0xE007F
            or code == 0x20E3
        )
        # Flags are pairs of regional indicator symbols.
        pairs_flag = (
            0x1F1E6 <= code <= 0x1F1FF
            and bool(glyphs)
            and len(glyphs[-1]) == 1
            and 0x1F1E6 <= ord(glyphs[-1]) <= 0x1F1FF
        )
        if glyphs and (attaches or join_next or pairs_flag):
            glyphs[-1] += char
            join_next = False
        elif code == 0x200D and glyphs:
            glyphs[-1] += char
            join_next = True
        else:
            glyphs.append(char)
            join_next = False
    return glyphs


class PaletteConfig(BaseModel):
    """A named, ordered set of emoji glyphs."""

    name: str = Field(..., min_length=1, description="Name shown in the palette chooser")
    emojis: List[str] = Field(..., description="Ordered glyphs offered for dragging")

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Palette name must not be blank")
        return value

    @field_validator("emojis", mode="before")
    @classmethod
    def _coerce_emojis(cls, value):
        if isinstance(value, str):
            return split_glyphs(value)
        return value

    @field_validator("emojis")
    @classmethod
    def _validate_emojis(cls, value: List[str]) -> List[str]:
        glyphs = [glyph.strip() for glyph in value if glyph and glyph.strip()]
        if not glyphs:
            raise ValueError("A palette must contain at least one emoji")
        return glyphs


class PaletteFile(BaseModel):
    """Top-level contents of a palette YAML file."""

    palettes: List[PaletteConfig]

    @field_validator("palettes")
    @classmethod
    def _validate_palettes(cls, value: Iterable[PaletteConfig]) -> List[PaletteConfig]:
        palettes = list(value)
        if not palettes:
            raise ValueError("At least one palette must be defined")
        seen = set()
        for palette in palettes:
            if palette.name in seen:
                raise ValueError(f"Duplicate palette name: {palette.name}")
            seen.add(palette.name)
        return palettes


def default_palettes() -> List[PaletteConfig]:
    return [PaletteConfig(name=DEFAULT_PALETTE_NAME, emojis=DEFAULT_PALETTE_EMOJIS)]


def load_palette_config(path: Union[str, Path]) -> PaletteFile:
    """
    Load and validate palettes from a YAML file.

    Parameters
    ----------
    path:
        Path to the YAML palette file.

    Returns
    -------
    PaletteFile
        Parsed and validated palettes.
    """

    config_path = Path(path).expanduser().resolve()
    if not config_path.exists():
        raise FileNotFoundError(f"Palette file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as handle:
        raw_data = yaml.safe_load(handle) or {}

    return PaletteFile.model_validate(raw_data)
