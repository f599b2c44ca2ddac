"""
Local File Storage Repository Implementation

Concrete implementation of IFileStorageRepository for the local filesystem.
Paths handed in are resolved against base_path; the concrete paths returned
by save() are absolute and resolve to themselves.
"""

from pathlib import Path
from typing import BinaryIO

from ..domain.file_storage import IFileStorageRepository


class LocalFileStorageRepository(IFileStorageRepository):
    """
    Local filesystem implementation of IFileStorageRepository.

    Attributes:
        base_path: Base directory for stored content (FOLDER_PATH)
    """

    def __init__(self, base_path: str = "/tmp/files_manager"):
        """
        Initialize the local file storage repository.

        The base directory itself is created lazily on first save.

        Args:
            base_path: Base directory for file storage
        """
        self.base_path = Path(base_path)

    def _resolve(self, file_path: str) -> Path:
        return self.base_path / file_path

    def save(self, file_path: str, content: BinaryIO) -> str:
        """
        Save file content to storage.

        Args:
            file_path: Path relative to base_path
            content: Binary file content as a file-like object

        Returns:
            Absolute path of the written file

        Raises:
            ValueError: If file_path is empty
            IOError: If there are I/O errors during the operation
        """
        if not file_path or not file_path.strip():
            raise ValueError("file_path cannot be empty")

        full_path = self._resolve(file_path)

        try:
            full_path.parent.mkdir(parents=True, exist_ok=True)

            with open(full_path, "wb") as f:
                while True:
                    chunk = content.read(8192)  # 8KB chunks
                    if not chunk:
                        break
                    f.write(chunk)
        except (IOError, OSError) as e:
            raise IOError(f"Failed to save file: {e}") from e

        return str(full_path.absolute())

    def delete(self, file_path: str) -> bool:
        """
        Delete a file from storage. Deleting a missing file succeeds.

        Raises:
            IOError: If the file exists but cannot be removed
        """
        if not file_path or not file_path.strip():
            return True

        full_path = self._resolve(file_path)
        try:
            if full_path.is_file():
                full_path.unlink()
        except OSError as e:
            raise IOError(f"Failed to delete file: {e}") from e
        return True

    def exists(self, file_path: str) -> bool:
        """Check if a regular file exists. Never raises."""
        try:
            if not file_path or not file_path.strip():
                return False
            return self._resolve(file_path).is_file()
        except (OSError, ValueError):
            return False
