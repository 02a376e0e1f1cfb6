"""Asynchronous loading of background images from local files or the network."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, QTimer, QUrl, Signal
from PySide6.QtGui import QImage, QImageReader
from PySide6.QtNetwork import QNetworkAccessManager, QNetworkReply, QNetworkRequest


logger = logging.getLogger(__name__)


class BackgroundLoader(QObject):
    """Loads one background image at a time; newer requests supersede older ones.

    Results are delivered on the UI thread through ``loaded`` or ``failed``.
    Nothing is cached.
    """

    loaded = Signal(QUrl, QImage)
    failed = Signal(QUrl, str)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._network: Optional[QNetworkAccessManager] = None
        self._reply: Optional[QNetworkReply] = None
        self._current: Optional[QUrl] = None
        self._generation = 0

    @property
    def current_url(self) -> Optional[QUrl]:
        return self._current

    def load(self, url: Optional[QUrl]) -> None:
        """Start loading ``url``; ``None`` cancels any pending load."""
        self.cancel()
        if url is None or url.isEmpty():
            return
        self._current = QUrl(url)
        generation = self._generation
        if url.isLocalFile():
            path = url.toLocalFile()
            QTimer.singleShot(0, lambda: self._read_local(path, url, generation))
            return
        if url.scheme().lower() in ("http", "https"):
            self._fetch(url)
            return
        self._fail(url, f"Unsupported URL scheme: {url.scheme() or '(none)'}")

    def cancel(self) -> None:
        self._generation += 1
        self._current = None
        if self._reply is not None:
            reply = self._reply
            self._reply = None
            reply.finished.disconnect()
            reply.abort()
            reply.deleteLater()

    # ------------------------------------------------------------------
    def _read_local(self, path: str, url: QUrl, generation: int) -> None:
        if generation != self._generation:
            return
        reader = QImageReader(path)
        reader.setAutoTransform(True)
        image = reader.read()
        if image.isNull():
            self._fail(url, reader.errorString())
            return
        self._succeed(url, image)

    def _fetch(self, url: QUrl) -> None:
        if self._network is None:
            self._network = QNetworkAccessManager(self)
        request = QNetworkRequest(url)
        request.setAttribute(
            QNetworkRequest.Attribute.RedirectPolicyAttribute,
            QNetworkRequest.RedirectPolicy.NoLessSafeRedirectPolicy,
        )
        reply = self._network.get(request)
        self._reply = reply
        reply.finished.connect(lambda: self._on_reply_finished(reply, url))

    def _on_reply_finished(self, reply: QNetworkReply, url: QUrl) -> None:
        if reply is not self._reply:
            reply.deleteLater()
            return
        self._reply = None
        try:
            if reply.error() != QNetworkReply.NetworkError.NoError:
                self._fail(url, reply.errorString())
                return
            image = QImage()
            if not image.loadFromData(reply.readAll()):
                self._fail(url, "Downloaded data is not a supported image")
                return
            self._succeed(url, image)
        finally:
            reply.deleteLater()

    def _succeed(self, url: QUrl, image: QImage) -> None:
        logger.debug("Loaded background %s (%dx%d)", url.toString(), image.width(), image.height())
        self.loaded.emit(url, image)

    def _fail(self, url: QUrl, reason: str) -> None:
        logger.warning("Failed to load background %s: %s", url.toString(), reason)
        self.failed.emit(url, reason)
