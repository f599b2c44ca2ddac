"""
Celery Job Queue

Publishes processing messages by task name, so the web process never
imports worker code and never waits on a result.
"""

import logging

from celery import Celery

from ..domain.processing import JobQueue, ProcessingJob, WelcomeJob

logger = logging.getLogger(__name__)

THUMBNAIL_TASK = "files_manager.tasks.generate_thumbnails"
WELCOME_TASK = "files_manager.tasks.send_welcome"


class CeleryJobQueue(JobQueue):
    """JobQueue backed by a Celery broker."""

    def __init__(self, celery: Celery):
        self.celery = celery

    def enqueue_processing(self, job: ProcessingJob) -> None:
        self.celery.send_task(THUMBNAIL_TASK, kwargs=job.to_dict(), ignore_result=True)
        logger.debug(f"Sent {THUMBNAIL_TASK} for file {job.file_id}")

    def enqueue_welcome(self, job: WelcomeJob) -> None:
        self.celery.send_task(WELCOME_TASK, kwargs=job.to_dict(), ignore_result=True)
        logger.debug(f"Sent {WELCOME_TASK} for user {job.user_id}")
