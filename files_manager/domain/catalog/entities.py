"""
Catalog Entities

Domain entity for folders, plain files and images.
"""

import uuid
from dataclasses import dataclass, replace
from typing import Optional

from .value_objects import ROOT_PARENT, FileKind


@dataclass
class FileEntry:
    """
    Catalog record with ownership, visibility and a single parent.

    Ownership is fixed at creation; visibility is the only mutable field.
    """
    file_id: str
    owner_id: str
    name: str
    kind: FileKind
    is_public: bool = False
    parent_id: str = ROOT_PARENT
    local_path: Optional[str] = None

    @classmethod
    def create(
        cls,
        owner_id: str,
        name: str,
        kind: FileKind,
        is_public: bool = False,
        parent_id: str = ROOT_PARENT,
        local_path: Optional[str] = None,
    ) -> 'FileEntry':
        """Factory method assigning a fresh catalog id."""
        return cls(
            file_id=uuid.uuid4().hex,
            owner_id=owner_id,
            name=name,
            kind=kind,
            is_public=bool(is_public),
            parent_id=parent_id,
            local_path=local_path if kind.carries_content() else None,
        )

    @property
    def is_folder(self) -> bool:
        return self.kind is FileKind.FOLDER

    def with_visibility(self, is_public: bool) -> 'FileEntry':
        return replace(self, is_public=is_public)

    def variant_path(self, size: int = 0) -> Optional[str]:
        """
        Content path for a size variant; 0 means the original upload.

        Variants live next to the original as `<path>_<size>`.
        """
        if self.local_path is None:
            return None
        if size:
            return f"{self.local_path}_{size}"
        return self.local_path

    def public_dict(self) -> dict:
        """Client-facing representation; the root parent is rendered as 0."""
        return {
            "id": self.file_id,
            "userId": self.owner_id,
            "name": self.name,
            "type": self.kind.value,
            "isPublic": self.is_public,
            "parentId": 0 if self.parent_id == ROOT_PARENT else self.parent_id,
        }

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "file_id": self.file_id,
            "owner_id": self.owner_id,
            "name": self.name,
            "kind": self.kind.value,
            "is_public": self.is_public,
            "parent_id": self.parent_id,
            "local_path": self.local_path,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'FileEntry':
        """Create FileEntry from dictionary."""
        return cls(
            file_id=data["file_id"],
            owner_id=data["owner_id"],
            name=data["name"],
            kind=FileKind(data["kind"]),
            is_public=bool(data.get("is_public", False)),
            parent_id=data.get("parent_id", ROOT_PARENT),
            local_path=data.get("local_path"),
        )
