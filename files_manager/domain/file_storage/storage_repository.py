"""
File Storage Repository Interface

Abstract interface for physical content storage. Content is addressed by
path: save() returns the concrete path it wrote, and that path is what the
catalog keeps as the entry's content reference.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO


class IFileStorageRepository(ABC):
    """
    Unified interface for durable blob storage.

    Contract Guarantees:
    - save() creates the containing directory if needed (idempotent)
    - delete() succeeds even if the file doesn't exist
    - exists() never raises for invalid paths
    """

    @abstractmethod
    def save(self, file_path: str, content: BinaryIO) -> str:
        """
        Write content at file_path, relative to the storage root.

        Args:
            file_path: Logical path of the blob
            content: Binary content as a file-like object

        Returns:
            Concrete path the content was written to

        Raises:
            ValueError: If file_path is empty
            IOError: If the write fails
        """
        pass

    @abstractmethod
    def delete(self, file_path: str) -> bool:
        """Remove the file at file_path; True if it is gone afterwards."""
        pass

    @abstractmethod
    def exists(self, file_path: str) -> bool:
        """Check whether a regular file exists at file_path."""
        pass
