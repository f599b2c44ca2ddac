"""
Catalog Value Objects

Entry kinds, the hierarchy root sentinel and paging rules.
"""

from enum import Enum
from typing import Any, Optional


# Generated entry ids are 32-char lowercase hex, so this can never collide
ROOT_PARENT = "root"

# Values accepted from clients as "no parent"
ROOT_ALIASES = (None, "", 0, "0", ROOT_PARENT)

PAGE_SIZE = 20


class FileKind(Enum):
    """Entry kind enumeration."""
    FOLDER = "folder"
    FILE = "file"
    IMAGE = "image"

    def carries_content(self) -> bool:
        """Only plain files and images have stored content."""
        return self in (FileKind.FILE, FileKind.IMAGE)

    @classmethod
    def parse(cls, value: Any) -> Optional['FileKind']:
        """Return the kind named by value, None if unrecognized."""
        try:
            return cls(value)
        except ValueError:
            return None


def is_root(parent_id: Any) -> bool:
    """Check whether a parent reference denotes the hierarchy root."""
    return parent_id in ROOT_ALIASES


def normalize_parent(parent_id: Any) -> str:
    """Map any root alias to ROOT_PARENT, otherwise keep the id as a string."""
    if is_root(parent_id):
        return ROOT_PARENT
    return str(parent_id)


def parse_non_negative(value: Any) -> int:
    """
    Parse a base-10 page number or variant size.

    Non-numeric and negative values become 0.
    """
    try:
        number = int(str(value).strip(), 10)
    except (TypeError, ValueError):
        return 0
    return number if number > 0 else 0
