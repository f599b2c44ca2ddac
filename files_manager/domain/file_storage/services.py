"""
File Storage Services

Upload pipeline: places uploaded content on durable storage and hands the
new entry to the processing queue.
"""

import base64
import binascii
import io
import logging
import uuid

from ..errors import StorageError, ValidationError
from ..processing import JobQueue, ProcessingJob
from .storage_repository import IFileStorageRepository

logger = logging.getLogger(__name__)


class UploadPipeline:
    """
    Domain service for content placement and job hand-off.

    Content and metadata count as durably stored once written; a failed
    enqueue is logged and never rolls anything back.
    """

    def __init__(self, storage_repository: IFileStorageRepository, job_queue: JobQueue):
        """
        Initialize UploadPipeline.

        Args:
            storage_repository: Durable blob store
            job_queue: Queue consumed by the processing worker
        """
        self.storage = storage_repository
        self.job_queue = job_queue

    def place(self, data: str) -> str:
        """
        Decode base64 content and write it under a fresh logical name.

        Args:
            data: Base64-encoded content as received from the client

        Returns:
            Concrete storage path, used as the entry's content reference

        Raises:
            ValidationError: If data is not valid base64
            StorageError: If the write fails
        """
        try:
            content = base64.b64decode(data)
        except (binascii.Error, TypeError, ValueError) as e:
            raise ValidationError("Invalid data", original_error=e)

        try:
            return self.storage.save(uuid.uuid4().hex, io.BytesIO(content))
        except (IOError, OSError, ValueError) as e:
            logger.error(f"Failed to write uploaded content: {e}")
            raise StorageError(original_error=e)

    def discard(self, path: str) -> None:
        """Best-effort removal of content whose entry was never recorded."""
        try:
            self.storage.delete(path)
        except (IOError, OSError) as e:
            logger.warning(f"Could not remove orphaned content {path}: {e}")

    def submit(self, owner_id: str, file_id: str) -> bool:
        """
        Enqueue exactly one processing job for a stored entry.

        Returns:
            True if the queue accepted the job, False otherwise
        """
        try:
            self.job_queue.enqueue_processing(ProcessingJob(owner_id, file_id))
            logger.info(f"Queued processing job for file {file_id}")
            return True
        except Exception as e:
            logger.error(f"Failed to enqueue processing job for file {file_id}: {e}")
            return False
