"""Tests for the asynchronous background loader."""
from PySide6.QtCore import QUrl
from PySide6.QtGui import QColor, QImage

from emoji_art.gui.canvas import BackgroundLoader


def _write_image(path, width, height):
    image = QImage(width, height, QImage.Format.Format_RGB32)
    image.fill(QColor("blue"))
    assert image.save(str(path))
    return QUrl.fromLocalFile(str(path))


def test_loads_local_file_asynchronously(qtbot, tmp_path):
    loader = BackgroundLoader()
    url = _write_image(tmp_path / "a.png", 8, 4)
    with qtbot.waitSignal(loader.loaded, timeout=2000) as blocker:
        loader.load(url)
    loaded_url, image = blocker.args
    assert loaded_url == url
    assert (image.width(), image.height()) == (8, 4)


def test_newer_request_supersedes_older(qtbot, tmp_path):
    loader = BackgroundLoader()
    first = _write_image(tmp_path / "first.png", 8, 4)
    second = _write_image(tmp_path / "second.png", 3, 3)
    received = []
    loader.loaded.connect(lambda url, image: received.append(url))
    with qtbot.waitSignal(loader.loaded, timeout=2000):
        loader.load(first)
        loader.load(second)
    qtbot.wait(50)
    assert received == [second]
    assert loader.current_url == second


def test_cancel_drops_pending_result(qtbot, tmp_path):
    loader = BackgroundLoader()
    url = _write_image(tmp_path / "a.png", 8, 4)
    with qtbot.assertNotEmitted(loader.loaded, wait=100):
        loader.load(url)
        loader.cancel()


def test_unreadable_file_reports_failure(qtbot, tmp_path):
    loader = BackgroundLoader()
    path = tmp_path / "broken.png"
    path.write_bytes(b"not an image")
    with qtbot.waitSignal(loader.failed, timeout=2000) as blocker:
        loader.load(QUrl.fromLocalFile(str(path)))
    assert blocker.args[0] == QUrl.fromLocalFile(str(path))


def test_unsupported_scheme_fails(qtbot):
    loader = BackgroundLoader()
    with qtbot.waitSignal(loader.failed, timeout=1000) as blocker:
        loader.load(QUrl("ftp://example.com/a.png"))
    assert "ftp" in blocker.args[1]
