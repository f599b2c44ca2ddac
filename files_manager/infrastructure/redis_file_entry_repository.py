"""
Redis File Entry Repository Implementation

Concrete Redis-based implementation of FileEntryRepository.

Keys:
- file:<id>                       -> entry document (JSON)
- children:<owner_id>:<parent_id> -> list of entry ids in insertion order
- files                           -> set of all entry ids
"""

import logging
from typing import List, Optional

from ..domain.catalog import FileEntry, FileEntryRepository
from .redis_repository import RedisRepository

logger = logging.getLogger(__name__)


class RedisFileEntryRepository(FileEntryRepository):
    """Redis-based implementation of FileEntryRepository."""

    def __init__(self, redis_repository: RedisRepository):
        """
        Initialize with Redis repository.

        Args:
            redis_repository: RedisRepository bound to the catalog database
        """
        self.redis_repo = redis_repository
        self.entry_prefix = "file"
        self.children_prefix = "children"
        self.index_key = "files"

    def _entry_key(self, file_id: str) -> str:
        return f"{self.entry_prefix}:{file_id}"

    def _children_key(self, owner_id: str, parent_id: str) -> str:
        return f"{self.children_prefix}:{owner_id}:{parent_id}"

    def _deserialize(self, data: Optional[dict]) -> Optional[FileEntry]:
        if data is None:
            return None
        try:
            return FileEntry.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Error deserializing file entry: {e}")
            return None

    def add(self, entry: FileEntry) -> bool:
        """
        Save the entry document, then index it.

        An entry that cannot be indexed is removed again so it never
        exists without appearing in its parent's listing.
        """
        entry_key = self._entry_key(entry.file_id)
        if not self.redis_repo.set_json(entry_key, entry.to_dict()):
            return False

        children_key = self._children_key(entry.owner_id, entry.parent_id)
        if not self.redis_repo.append_to_list(children_key, entry.file_id):
            self.redis_repo.delete(entry_key)
            return False

        self.redis_repo.add_to_set(self.index_key, entry.file_id)
        return True

    def get(self, file_id: str) -> Optional[FileEntry]:
        return self._deserialize(self.redis_repo.get_json(self._entry_key(file_id)))

    def list_children(
        self, owner_id: str, parent_id: str, offset: int, limit: int
    ) -> List[FileEntry]:
        ids = self.redis_repo.get_list_range(
            self._children_key(owner_id, parent_id), offset, limit
        )
        documents = self.redis_repo.get_many_json([self._entry_key(i) for i in ids])

        entries = []
        for data in documents:
            entry = self._deserialize(data)
            if entry is not None:
                entries.append(entry)
        return entries

    def set_public(self, file_id: str, is_public: bool) -> Optional[FileEntry]:
        updated = self.redis_repo.update_json_field(
            self._entry_key(file_id), "is_public", bool(is_public)
        )
        return self._deserialize(updated)

    def count(self) -> int:
        return self.redis_repo.set_size(self.index_key)

    def is_alive(self) -> bool:
        return self.redis_repo.ping()
