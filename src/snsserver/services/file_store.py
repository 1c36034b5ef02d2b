"""File storage used for post attachments.

Files are written to a category bucket below the configured upload
directory. The references handed back are paths relative to that directory,
which is what gets stored on the post.

Uploads and deletes are not part of the database transaction: a file written
before a failed commit is left behind.
"""

from __future__ import annotations

import logging
import shutil
import uuid
from pathlib import Path
from typing import Protocol, TypeGuard

from fastapi import UploadFile

from snsserver.core.settings import settings
from snsserver.services.errors import FileStoreError

logger = logging.getLogger(__name__)


def has_content(file: UploadFile | None) -> TypeGuard[UploadFile]:
    """Return True when ``file`` is present and carries at least one byte."""
    if file is None or not file.filename:
        return False
    if file.size is not None:
        return file.size > 0
    # Size unknown: peek at the stream without consuming it.
    position = file.file.tell()
    chunk = file.file.read(1)
    file.file.seek(position)
    return bool(chunk)


class FileStore(Protocol):
    """Contract for the binary storage collaborator."""

    def upload(self, file: UploadFile | None, category: str) -> str | None:
        """Store ``file`` under ``category`` and return its reference, or None if empty."""
        ...

    def delete(self, file_path: str | None) -> None:
        """Remove a previously stored file. Unknown or None references are ignored."""
        ...


class LocalFileStore:
    """File store backed by the local filesystem."""

    def __init__(self, root: str | Path | None = None, max_bytes: int | None = None) -> None:
        self._root = Path(root if root is not None else settings.upload_dir)
        self._max_bytes = max_bytes if max_bytes is not None else settings.max_upload_bytes

    @property
    def root(self) -> Path:
        return self._root

    def upload(self, file: UploadFile | None, category: str) -> str | None:
        if not has_content(file):
            return None

        if file.size is not None and file.size > self._max_bytes:
            raise FileStoreError(
                f"File '{file.filename}' exceeds the {self._max_bytes} byte upload limit"
            )

        suffix = Path(file.filename or "").suffix.lower()
        relative = Path(category) / f"{uuid.uuid4().hex}{suffix}"
        target = self._root / relative
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with target.open("wb") as out:
                shutil.copyfileobj(file.file, out)
        except OSError as exc:
            raise FileStoreError(f"Could not store file '{file.filename}'") from exc

        if target.stat().st_size > self._max_bytes:
            target.unlink(missing_ok=True)
            raise FileStoreError(
                f"File '{file.filename}' exceeds the {self._max_bytes} byte upload limit"
            )

        logger.info("Stored %s as %s", file.filename, relative.as_posix())
        return relative.as_posix()

    def delete(self, file_path: str | None) -> None:
        if not file_path:
            return
        target = (self._root / file_path).resolve()
        if not target.is_relative_to(self._root.resolve()):
            logger.warning("Refusing to delete %s outside the upload directory", file_path)
            return
        try:
            target.unlink()
        except FileNotFoundError:
            logger.debug("File %s already absent", file_path)
            return
        except OSError as exc:
            raise FileStoreError(f"Could not delete file '{file_path}'") from exc
        logger.info("Deleted %s", file_path)


def get_file_store() -> FileStore:
    """Return the file store used by request handlers."""
    return LocalFileStore()
