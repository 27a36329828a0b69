"""
Service Interfaces

Abstract base classes for service layer following Dependency Inversion Principle.
This allows for dependency injection and easier testing/mocking.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from fastapi import UploadFile


class IStorageService(ABC):
    """
    Interface for the uploaded-file store.

    Files are addressed by a flat name relative to the store root; the name
    returned by ``store`` is what gets saved on albums and songs.
    """

    @abstractmethod
    def init(self) -> None:
        """
        Prepare the store (create the root directory).

        Raises:
            StorageError: If the store cannot be initialized
        """
        pass

    @abstractmethod
    def store(self, upload: UploadFile, filename: Optional[str] = None) -> str:
        """
        Persist an uploaded file.

        Args:
            upload: Uploaded file
            filename: Exact name to store under; a UUID-prefixed name
                derived from the upload's original name is used when omitted

        Returns:
            Name the file was stored under

        Raises:
            StorageError: If the file is empty, the name escapes the root,
                or the write fails
        """
        pass

    @abstractmethod
    def load(self, filename: str) -> bytes:
        """
        Read a stored file whole.

        Raises:
            StorageFileNotFoundError: If the file does not exist
        """
        pass

    @abstractmethod
    def resolve(self, filename: str) -> Path:
        """
        Locate a stored file on disk for streaming.

        Raises:
            StorageFileNotFoundError: If the file does not exist or lies outside the root
        """
        pass

    @abstractmethod
    def delete(self, filename: str) -> None:
        """
        Delete a stored file or directory recursively. Missing files are ignored.

        Raises:
            StorageError: If deletion fails
        """
        pass
