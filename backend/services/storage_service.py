"""
Storage Service

Flat-file store for uploaded cover art and audio. Every file lives directly
under one root directory and is addressed by its stored name.
"""

import os
import posixpath
import shutil
import logging
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

from constants import StorageConfig
from exceptions import StorageError, StorageFileNotFoundError
from services.interfaces import IStorageService
from utils.logging_utils import log_operation
from utils.uuid_helper import unique_filename

logger = logging.getLogger(__name__)


def is_empty_upload(upload: Optional[UploadFile]) -> bool:
    """
    Check whether an optional upload is missing or has no content.

    The file position is restored afterwards.
    """
    if upload is None:
        return True
    stream = upload.file
    position = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(position)
    return size == 0


def clean_path(filename: str) -> str:
    """
    Normalize a client-supplied filename.

    Backslashes become forward slashes and ``.``/``..`` segments are collapsed
    where possible, so ``a/../b.mp3`` becomes ``b.mp3`` while ``../b.mp3``
    keeps its leading ``..``.
    """
    normalized = posixpath.normpath(filename.replace('\\', '/'))
    return '' if normalized == '.' else normalized


class FileSystemStorageService(IStorageService):
    """Stores uploads on the local filesystem under ``root``."""

    def __init__(self, root: Path | str):
        """
        Args:
            root: Directory holding every stored file
        """
        self.root = Path(root)

    def init(self) -> None:
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Could not initialize storage at {self.root}") from e
        logger.info(f"Storage initialized at: {self.root.resolve()}")

    @log_operation("store_file")
    def store(self, upload: UploadFile, filename: Optional[str] = None) -> str:
        if is_empty_upload(upload):
            raise StorageError("Failed to store empty file")

        if filename is None:
            original = clean_path(upload.filename or '') or StorageConfig.UNKNOWN_FILENAME
            cleaned = original
            target_name = unique_filename(posixpath.basename(original))
        else:
            cleaned = clean_path(filename)
            target_name = cleaned

        if not cleaned or '..' in cleaned.split('/') or cleaned.startswith('/'):
            raise StorageError(
                f"Cannot store file with relative path outside current directory {cleaned}",
                cleaned
            )

        target = self.root / target_name
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            upload.file.seek(0)
            with open(target, 'wb') as out:
                shutil.copyfileobj(upload.file, out)
        except OSError as e:
            raise StorageError(f"Failed to store file {cleaned}", cleaned) from e

        logger.info(f"Stored upload {upload.filename!r} as {target_name}")
        return target_name

    def _locate(self, filename: str) -> Optional[Path]:
        """Absolute path for ``filename``, or None if it is unusable or outside the root."""
        try:
            path = (self.root / filename).resolve()
        except (ValueError, OSError):
            return None
        return path if self.root.resolve() in path.parents else None

    def resolve(self, filename: str) -> Path:
        path = self._locate(filename)
        if path is None or not path.is_file():
            raise StorageFileNotFoundError(f"Could not read file: {filename}", filename)
        return path

    def load(self, filename: str) -> bytes:
        path = self.resolve(filename)
        try:
            return path.read_bytes()
        except OSError as e:
            raise StorageFileNotFoundError(f"Could not read file: {filename}", filename) from e

    @log_operation("delete_file")
    def delete(self, filename: str) -> None:
        path = self._locate(filename)
        if path is None:
            raise StorageError(f"Could not delete file: {filename}", filename)

        try:
            if path.is_dir():
                shutil.rmtree(path)
            elif path.exists():
                path.unlink()
            else:
                logger.debug(f"Nothing to delete for {filename}")
        except OSError as e:
            raise StorageError(f"Could not delete file: {filename}", filename) from e
