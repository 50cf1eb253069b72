import os

from imageupload.infrastructure.storage.local_storage import LocalStorageRepository


def test_save_creates_customer_directory(tmp_path):
    storage = LocalStorageRepository(str(tmp_path / "uploads"))
    path = storage.save_bytes("3", "abc.png", b"png")

    assert path == os.path.join(str(tmp_path / "uploads"), "3", "abc.png")
    assert storage.read_bytes(path) == b"png"


def test_read_missing_file_returns_none(tmp_path):
    storage = LocalStorageRepository(str(tmp_path))
    assert storage.read_bytes(str(tmp_path / "nope.jpg")) is None


def test_delete_is_idempotent(tmp_path):
    storage = LocalStorageRepository(str(tmp_path))
    path = storage.save_bytes("1", "a.jpg", b"x")

    assert storage.delete(path) is True
    assert not os.path.exists(path)
    assert storage.delete(path) is False
