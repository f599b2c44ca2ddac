"""
Thumbnail Task

Celery task consuming processing jobs queued after uploads.
Thin wrapper that delegates to ProcessingService.
"""

import logging
from typing import List, Optional

from celery_app import celery_app

logger = logging.getLogger(__name__)


@celery_app.task(bind=True, name="files_manager.tasks.generate_thumbnails")
def generate_thumbnails(
    self, owner_id: Optional[str] = None, file_id: Optional[str] = None
) -> List[str]:
    """
    Build the 500/250/100 px variants of an uploaded image.

    Errors propagate so the worker records the failure; redelivery is the
    broker's business.

    Args:
        owner_id: Owner of the entry
        file_id: Entry to process

    Returns:
        list: Paths of the written variants
    """
    from celery_app import flask_app
    from files_manager.application.processing_service import ProcessingService

    logger.info(f"Thumbnail task started for file {file_id}")

    processing_service = flask_app.container.resolve(ProcessingService)
    return processing_service.generate_thumbnails(owner_id, file_id)
