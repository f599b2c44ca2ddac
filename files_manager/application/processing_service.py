"""
Processing Application Service

Worker-side handling of processing and welcome jobs. Runs inside the
Celery worker; failures raise to the task and never reach a web request.
"""

import logging
from typing import List, Optional

from ..domain.catalog import FileEntryRepository, FileKind
from ..domain.errors import NotFoundError, ValidationError
from ..domain.processing import Thumbnailer
from ..domain.users import UserRepository

logger = logging.getLogger(__name__)


class ProcessingService:
    """Consumes the messages produced by the upload pipeline and registration."""

    def __init__(
        self,
        entry_repository: FileEntryRepository,
        user_repository: UserRepository,
        thumbnailer: Thumbnailer,
    ):
        self.entries = entry_repository
        self.user_repo = user_repository
        self.thumbnailer = thumbnailer

    def generate_thumbnails(self, owner_id: Optional[str], file_id: Optional[str]) -> List[str]:
        """
        Write size variants for an uploaded image.

        Returns:
            Paths written; empty for entries that are not images

        Raises:
            ValidationError: If either id is missing
            NotFoundError: If the entry does not exist for that owner
            OSError: If the image cannot be read or written
        """
        if not file_id:
            raise ValidationError("Missing fileId")
        if not owner_id:
            raise ValidationError("Missing userId")

        entry = self.entries.get(file_id)
        if entry is None or entry.owner_id != owner_id:
            raise NotFoundError("File not found")

        if entry.kind is not FileKind.IMAGE or entry.local_path is None:
            logger.info(f"Skipping thumbnails for {entry.kind.value} {file_id}")
            return []

        written = self.thumbnailer.generate(entry.local_path)
        logger.info(f"Generated {len(written)} thumbnails for file {file_id}")
        return written

    def send_welcome(self, user_id: Optional[str]) -> str:
        """
        Greet a newly registered user.

        Raises:
            ValidationError: If the id is missing
            NotFoundError: If the user does not exist
        """
        if not user_id:
            raise ValidationError("Missing userId")

        user = self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")

        message = f"Welcome {user.email}!"
        logger.info(message)
        return message
