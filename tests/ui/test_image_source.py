"""Tests for asynchronous image loading."""

from PySide6.QtCore import QThreadPool, Qt
from PySide6.QtGui import QImage

import pytest

from canvas_image.errors import ImageLoadError
from canvas_image.gui.image_source import ImageSource
from canvas_image.utils.image_loader import load_qimage


@pytest.fixture
def png(tmp_path):
    path = tmp_path / "sample.png"
    image = QImage(64, 32, QImage.Format.Format_ARGB32)
    image.fill(Qt.GlobalColor.blue)
    assert image.save(str(path))
    return path


def _drain(qapp, pool):
    pool.waitForDone()
    qapp.processEvents()


def test_load_qimage_reads_dimensions(qapp, png):
    image = load_qimage(png)

    assert (image.width(), image.height()) == (64, 32)


def test_load_qimage_raises_for_garbage(qapp, tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"definitely not an image")

    with pytest.raises(ImageLoadError):
        load_qimage(path)


def test_request_image_emits_loaded(qapp, png):
    pool = QThreadPool()
    source = ImageSource(thread_pool=pool)
    loaded = []
    source.imageLoaded.connect(lambda key, image: loaded.append((key, image.size().toTuple())))

    source.request_image(png)
    _drain(qapp, pool)

    assert loaded == [(str(png), (64, 32))]
    assert source.pending is None


def test_request_image_emits_failure(qapp, tmp_path):
    pool = QThreadPool()
    source = ImageSource(thread_pool=pool)
    failures = []
    source.loadFailed.connect(lambda key, message: failures.append(key))
    missing = tmp_path / "missing.png"

    source.request_image(missing)
    _drain(qapp, pool)

    assert failures == [str(missing)]


def test_superseded_request_is_dropped(qapp, png, tmp_path):
    pool = QThreadPool()
    source = ImageSource(thread_pool=pool)
    loaded = []
    source.imageLoaded.connect(lambda key, image: loaded.append(key))

    source.request_image(png)
    source.clear()
    _drain(qapp, pool)

    assert loaded == []


def test_unexpected_decoder_error_emits_failure(qapp, png, monkeypatch):
    def _explode(path):
        raise ValueError("decoder blew up")

    monkeypatch.setattr("canvas_image.utils.image_loader.load_qimage", _explode)
    pool = QThreadPool()
    source = ImageSource(thread_pool=pool)
    failures = []
    source.loadFailed.connect(lambda key, message: failures.append((key, message)))

    source.request_image(png)
    _drain(qapp, pool)

    assert failures == [(str(png), "decoder blew up")]
    assert source.pending is None
