"""
Welcome Task

Celery task consuming welcome jobs queued after registration.
"""

import logging
from typing import Optional

from celery_app import celery_app

logger = logging.getLogger(__name__)


@celery_app.task(bind=True, name="files_manager.tasks.send_welcome")
def send_welcome(self, user_id: Optional[str] = None) -> str:
    """Greet a newly registered user."""
    from celery_app import flask_app
    from files_manager.application.processing_service import ProcessingService

    processing_service = flask_app.container.resolve(ProcessingService)
    return processing_service.send_welcome(user_id)
