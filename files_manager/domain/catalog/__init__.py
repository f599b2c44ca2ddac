"""
Catalog Domain

File/folder metadata, hierarchy, visibility and pagination.
"""

from .entities import FileEntry
from .repositories import FileEntryRepository
from .services import ContentHandle, FileCatalog
from .value_objects import (
    PAGE_SIZE,
    ROOT_PARENT,
    FileKind,
    is_root,
    normalize_parent,
    parse_non_negative,
)

__all__ = [
    'FileEntry',
    'FileEntryRepository',
    'ContentHandle',
    'FileCatalog',
    'FileKind',
    'PAGE_SIZE',
    'ROOT_PARENT',
    'is_root',
    'normalize_parent',
    'parse_non_negative',
]
