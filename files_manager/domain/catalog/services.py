"""
Catalog Services

Domain service owning entry metadata, hierarchy validation, visibility,
pagination and permission checks.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from ..errors import BadRequestError, NotFoundError, StorageError, ValidationError
from ..file_storage import IFileStorageRepository, UploadPipeline
from ..users import User
from .entities import FileEntry
from .repositories import FileEntryRepository
from .value_objects import (
    PAGE_SIZE,
    ROOT_PARENT,
    FileKind,
    normalize_parent,
    parse_non_negative,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContentHandle:
    """Location of readable content for an entry."""
    path: str
    name: str


class FileCatalog:
    """
    Domain service for the file/folder catalog.

    Every operation takes an already-resolved caller. Lookups for entries
    the caller may not see raise NotFoundError, never a "forbidden" error.
    """

    def __init__(
        self,
        entry_repository: FileEntryRepository,
        upload_pipeline: UploadPipeline,
        storage_repository: IFileStorageRepository,
        page_size: int = PAGE_SIZE,
    ):
        """
        Initialize FileCatalog.

        Args:
            entry_repository: Entry metadata persistence
            upload_pipeline: Content placement and job hand-off
            storage_repository: Used to check that a requested variant exists
            page_size: Entries per listing page
        """
        self.entries = entry_repository
        self.uploads = upload_pipeline
        self.storage = storage_repository
        self.page_size = page_size

    def create(
        self,
        owner: User,
        name: Optional[str],
        kind: Any,
        is_public: Any = False,
        parent_id: Any = ROOT_PARENT,
        data: Optional[str] = None,
    ) -> FileEntry:
        """
        Create a folder, plain file or image.

        Args:
            owner: Caller, becomes the immutable owner
            name: Display name, must be non-empty
            kind: "folder", "file" or "image"
            is_public: Initial visibility, private when falsy
            parent_id: Parent folder id or a root alias
            data: Base64 content, required for file and image

        Returns:
            The persisted entry

        Raises:
            ValidationError: For a missing/invalid field or parent
            StorageError: If content or metadata could not be written
        """
        if not name or not isinstance(name, str):
            raise ValidationError("Missing name")

        file_kind = FileKind.parse(kind)
        if file_kind is None:
            raise ValidationError("Missing type")

        if file_kind.carries_content() and not data:
            raise ValidationError("Missing data")

        parent = normalize_parent(parent_id)
        if parent != ROOT_PARENT:
            # Any existing folder is a valid target, whoever owns it
            parent_entry = self.entries.get(parent)
            if parent_entry is None:
                raise ValidationError("Parent not found")
            if not parent_entry.is_folder:
                raise ValidationError("Parent is not a folder")

        local_path = self.uploads.place(data) if file_kind.carries_content() else None

        entry = FileEntry.create(
            owner_id=owner.user_id,
            name=name,
            kind=file_kind,
            is_public=bool(is_public),
            parent_id=parent,
            local_path=local_path,
        )

        if not self.entries.add(entry):
            if local_path:
                self.uploads.discard(local_path)
            raise StorageError("Could not save entry")

        logger.info(f"Created {file_kind.value} {entry.file_id} for user {owner.user_id}")

        if file_kind.carries_content():
            self.uploads.submit(owner.user_id, entry.file_id)

        return entry

    def get(self, owner: User, file_id: str) -> FileEntry:
        """
        Return an entry owned by the caller.

        Raises:
            NotFoundError: If absent or owned by someone else
        """
        entry = self.entries.get(file_id) if file_id else None
        if entry is None or entry.owner_id != owner.user_id:
            raise NotFoundError()
        return entry

    def list(self, owner: User, parent_id: Any = ROOT_PARENT, page: Any = 0) -> List[FileEntry]:
        """
        One page of the caller's entries directly under parent_id.

        Pages hold page_size entries in insertion order; an invalid or
        negative page is page 0.
        """
        page_number = parse_non_negative(page)
        return self.entries.list_children(
            owner.user_id,
            normalize_parent(parent_id),
            offset=page_number * self.page_size,
            limit=self.page_size,
        )

    def set_visibility(self, owner: User, file_id: str, make_public: bool) -> FileEntry:
        """
        Publish or unpublish an entry owned by the caller.

        Concurrent flips of the same entry resolve at the store, last write
        wins.

        Raises:
            NotFoundError: If absent or owned by someone else
        """
        self.get(owner, file_id)

        updated = self.entries.set_public(file_id, bool(make_public))
        if updated is None:
            # Entries are never deleted, so a vanished entry means the store failed
            raise StorageError("Could not update entry")
        return updated

    def read_content(
        self, file_id: str, requester: Optional[User] = None, size: Any = 0
    ) -> ContentHandle:
        """
        Locate readable content, governed by visibility.

        Public entries are readable by anyone. Private entries only by the
        owner; any other requester gets NotFoundError. A requested size
        variant that does not exist is NotFoundError even when the original
        exists.

        Raises:
            NotFoundError: If absent, not visible, or content missing
            BadRequestError: If the entry is a folder
        """
        entry = self.entries.get(file_id) if file_id else None
        if entry is None:
            raise NotFoundError()

        if not entry.is_public and (requester is None or requester.user_id != entry.owner_id):
            raise NotFoundError()

        if entry.is_folder:
            raise BadRequestError("A folder doesn't have content")

        path = entry.variant_path(parse_non_negative(size))
        if path is None or not self.storage.exists(path):
            raise NotFoundError()

        return ContentHandle(path=path, name=entry.name)
