# tests/services/test_file_store.py
"""Tests for the local filesystem file store."""

import io

import pytest
from fastapi import UploadFile

from snsserver.services.errors import FileStoreError
from snsserver.services.file_store import LocalFileStore, has_content


def test_upload_writes_under_category(tmp_path, upload_factory) -> None:
    store = LocalFileStore(tmp_path, max_bytes=1024)

    path = store.upload(upload_factory(b"hello", "Photo.PNG"), "post")

    assert path is not None
    assert path.startswith("post/")
    assert path.endswith(".png")
    assert (tmp_path / path).read_bytes() == b"hello"


def test_upload_without_content_returns_none(tmp_path, upload_factory) -> None:
    store = LocalFileStore(tmp_path)

    assert store.upload(None, "post") is None
    assert store.upload(upload_factory(b"", "empty.png"), "post") is None
    assert not any(tmp_path.iterdir())


def test_upload_rejects_oversized_file(tmp_path, upload_factory) -> None:
    store = LocalFileStore(tmp_path, max_bytes=4)

    with pytest.raises(FileStoreError):
        store.upload(upload_factory(b"too large", "big.png"), "post")


def test_delete_removes_file(tmp_path, upload_factory) -> None:
    store = LocalFileStore(tmp_path)
    path = store.upload(upload_factory(), "post")

    store.delete(path)

    assert not (tmp_path / path).exists()


def test_delete_ignores_missing_and_none(tmp_path) -> None:
    store = LocalFileStore(tmp_path)

    store.delete(None)
    store.delete("post/does-not-exist.png")


def test_delete_refuses_paths_outside_root(tmp_path) -> None:
    root = tmp_path / "uploads"
    root.mkdir()
    outside = tmp_path / "secret.txt"
    outside.write_text("keep")

    LocalFileStore(root).delete("../secret.txt")

    assert outside.exists()


def test_has_content(upload_factory) -> None:
    assert has_content(upload_factory(b"x"))
    assert not has_content(upload_factory(b""))
    assert not has_content(upload_factory(b"x", filename=""))
    assert not has_content(None)


def test_upload_with_unknown_size_peeks_stream(tmp_path) -> None:
    store = LocalFileStore(tmp_path)
    upload = UploadFile(file=io.BytesIO(b"data"), filename="notes.txt")

    assert has_content(upload)
    path = store.upload(upload, "post")

    assert path is not None
    assert (tmp_path / path).read_bytes() == b"data"
