"""
Catalog Repositories

Repository interface for entry metadata persistence.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .entities import FileEntry


class FileEntryRepository(ABC):
    """Abstract repository interface for catalog entries."""

    @abstractmethod
    def add(self, entry: FileEntry) -> bool:
        """
        Persist a new entry and index it under (owner, parent).

        Returns:
            True if successful, False otherwise
        """
        pass

    @abstractmethod
    def get(self, file_id: str) -> Optional[FileEntry]:
        """Retrieve an entry by id, None if absent."""
        pass

    @abstractmethod
    def list_children(
        self, owner_id: str, parent_id: str, offset: int, limit: int
    ) -> List[FileEntry]:
        """
        Entries of owner under parent, in insertion order.

        Args:
            owner_id: Owning user id
            parent_id: Parent entry id or ROOT_PARENT
            offset: Number of entries to skip
            limit: Maximum number of entries to return
        """
        pass

    @abstractmethod
    def set_public(self, file_id: str, is_public: bool) -> Optional[FileEntry]:
        """
        Atomically set visibility.

        Returns:
            The updated entry, None if the entry does not exist
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of catalog entries."""
        pass

    @abstractmethod
    def is_alive(self) -> bool:
        """Whether the backing connection is currently usable."""
        pass
