"""Drop payload items decoded from Qt drag-and-drop mime data."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Literal, Optional
from urllib.parse import unquote

from PySide6.QtCore import QMimeData, QUrl


logger = logging.getLogger(__name__)

DropKind = Literal["url", "string", "data"]

_URL_SCHEMES = ("http", "https", "file")
_PERCENT_ESCAPE = re.compile(r"%[0-9A-Fa-f]{2}")
_TEXT_FORMATS = {"text/plain", "text/uri-list"}


@dataclass(frozen=True)
class DropItem:
    """One element of a drop: a URL, a plain string or opaque data."""

    kind: DropKind
    url: Optional[QUrl] = None
    text: Optional[str] = None
    mime_type: Optional[str] = None

    @classmethod
    def from_url(cls, url: QUrl) -> "DropItem":
        return cls(kind="url", url=QUrl(url))

    @classmethod
    def from_string(cls, text: str) -> "DropItem":
        return cls(kind="string", text=text)

    @classmethod
    def from_data(cls, mime_type: str) -> "DropItem":
        return cls(kind="data", mime_type=mime_type)


def _url_from_text(text: str) -> Optional[QUrl]:
    url = QUrl(text, QUrl.ParsingMode.StrictMode)
    if not url.isValid() or url.isRelative():
        return None
    if url.scheme().lower() not in _URL_SCHEMES:
        return None
    if url.scheme().lower() != "file" and not url.host():
        return None
    return url


def item_from_text(text: str) -> Optional[DropItem]:
    """Decode dropped text into a URL item or a string item."""
    stripped = text.strip()
    if not stripped:
        return None
    url = _url_from_text(stripped)
    if url is not None:
        return DropItem.from_url(url)
    if _PERCENT_ESCAPE.search(stripped):
        stripped = unquote(stripped)
    return DropItem.from_string(stripped)


def items_from_mime(mime: QMimeData) -> List[DropItem]:
    """Decode mime data into ordered drop items: URLs, then text, then other data."""
    items: List[DropItem] = []
    if mime.hasUrls():
        items.extend(DropItem.from_url(url) for url in mime.urls() if url.isValid())
    has_plain_text = any(
        fmt == "text/plain" or fmt.startswith("text/plain;") for fmt in mime.formats()
    )
    if has_plain_text:
        text_item = item_from_text(mime.text())
        if text_item is not None:
            duplicate = (
                text_item.kind == "url"
                and any(item.url == text_item.url for item in items)
            )
            if not duplicate:
                items.append(text_item)
    for fmt in mime.formats():
        if fmt in _TEXT_FORMATS or fmt.startswith("text/plain;"):
            continue
        items.append(DropItem.from_data(fmt))
    logger.debug("Decoded drop items: %s", [item.kind for item in items])
    return items
